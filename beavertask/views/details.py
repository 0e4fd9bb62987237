from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from beavertask.domain.dates import MONTH_NAMES, date_key
from beavertask.domain.entities import TaskEntity

ALL_DAY_LABEL = "Toute la journée"
META_SEPARATOR = " • "
EMPTY_DAY_TEXT = (
    "Aucun événement pour cette journée. Cliquez sur le bouton + pour en ajouter un."
)
DELETE_CONFIRM_TEXT = "Supprimer cette tâche ?"


@dataclass(frozen=True)
class DetailRow:
    task_id: str
    title: str
    meta: str
    color: str
    completed: bool


@dataclass(frozen=True)
class DayDetails:
    header: str
    rows: tuple[DetailRow, ...]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def empty_text(self) -> str:
        return EMPTY_DAY_TEXT


def format_reminder(minutes: int) -> str:
    if minutes >= 1440:
        return f"{minutes // 1440} jour(s) avant"
    if minutes >= 60:
        return f"{minutes // 60} heure(s) avant"
    return f"{minutes} min avant"


def format_meta(task: TaskEntity) -> str:
    parts = []
    if task.all_day:
        parts.append(ALL_DAY_LABEL)
    elif task.start_time:
        time_range = f"{task.start_time} - {task.end_time}" if task.end_time else task.start_time
        parts.append(f"🕐 {time_range}")

    if task.location:
        parts.append(f"📍 {task.location}")

    if task.reminder_minutes > 0:
        parts.append(f"🔔 {format_reminder(task.reminder_minutes)}")

    if task.tag:
        parts.append(task.tag)
    if task.description:
        parts.append(task.description)

    return META_SEPARATOR.join(parts)


def format_day_header(value: date) -> str:
    return f"{value.day} {MONTH_NAMES[value.month - 1][:3]}."


def build_day_details(tasks: Iterable[TaskEntity], selected_date: date) -> DayDetails:
    key = date_key(selected_date)
    rows = tuple(
        DetailRow(
            task_id=task.id,
            title=task.title,
            meta=format_meta(task),
            color=task.color,
            completed=task.completed,
        )
        for task in tasks
        if task.due_date == key
    )
    return DayDetails(header=format_day_header(selected_date), rows=rows)
