from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from beavertask.domain.dates import parse_date_key
from beavertask.domain.entities import TaskEntity
from beavertask.domain.enums import TaskGroupKey

GROUP_TITLES = {
    TaskGroupKey.OVERDUE: "Overdue",
    TaskGroupKey.UPCOMING: "Upcoming",
    TaskGroupKey.NO_DUE_DATE: "No Due Date",
    TaskGroupKey.COMPLETED: "Completed",
}

EMPTY_LIST_TEXT = "No tasks yet. Add your first task!"
NO_DUE_DATE_TEXT = "No due date"
DELETE_CONFIRM_TEXT = "Delete this task?"

SHORT_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


@dataclass(frozen=True)
class ListRow:
    task_id: str
    title: str
    meta: str
    completed: bool


@dataclass(frozen=True)
class TaskGroup:
    key: TaskGroupKey
    tasks: tuple[TaskEntity, ...]

    @property
    def title(self) -> str:
        return f"{GROUP_TITLES[self.key]} ({len(self.tasks)})"

    @property
    def rows(self) -> list[ListRow]:
        return [build_list_row(task) for task in self.tasks]


def format_due_date(task: TaskEntity) -> str:
    if not task.due_date:
        return NO_DUE_DATE_TEXT
    due = parse_date_key(task.due_date)
    return f"{SHORT_MONTHS[due.month - 1]} {due.day}, {due.year}"


def build_list_row(task: TaskEntity) -> ListRow:
    meta = format_due_date(task)
    if task.tag:
        meta = f"{meta} • {task.tag}"
    return ListRow(task_id=task.id, title=task.title, meta=meta, completed=task.completed)


def group_tasks(tasks: Iterable[TaskEntity], today: date) -> list[TaskGroup]:
    """Split tasks into overdue, upcoming, undated and completed groups.

    Due dates compare as calendar days, so a task due ``today`` is upcoming
    and ``2024-3-5`` orders the same as ``2024-03-05``.
    Empty groups are dropped.
    """
    tasks = list(tasks)
    incomplete = [task for task in tasks if not task.completed]
    completed = [task for task in tasks if task.completed]

    dated = sorted(
        (task for task in incomplete if task.due_date),
        key=lambda task: parse_date_key(task.due_date),
    )
    overdue = [task for task in dated if parse_date_key(task.due_date) < today]
    upcoming = [task for task in dated if parse_date_key(task.due_date) >= today]
    no_due_date = [task for task in incomplete if not task.due_date]

    groups = [
        TaskGroup(TaskGroupKey.OVERDUE, tuple(overdue)),
        TaskGroup(TaskGroupKey.UPCOMING, tuple(upcoming)),
        TaskGroup(TaskGroupKey.NO_DUE_DATE, tuple(no_due_date)),
        TaskGroup(TaskGroupKey.COMPLETED, tuple(completed)),
    ]
    return [group for group in groups if group.tasks]
