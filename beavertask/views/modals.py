from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from beavertask.domain.dates import MONTH_NAMES, date_key, parse_date_key
from beavertask.domain.enums import COLOR_SWATCHES, ModalState


@dataclass
class TaskForm:
    title: str = ""
    description: str = ""
    tag: str = ""
    all_day: bool = False
    start_time: str = ""
    end_time: str = ""
    location: str = ""
    reminder: str = "0"
    color: str | None = None


def _parse_reminder(value: Any) -> int:
    try:
        return max(int(str(value).strip() or 0), 0)
    except ValueError:
        return 0


@dataclass
class AddTaskModal:
    state: ModalState = ModalState.CLOSED
    description: str = ""
    time_fields_visible: bool = True
    focus_title: bool = False
    form: TaskForm = field(default_factory=TaskForm)

    @property
    def is_open(self) -> bool:
        return self.state == ModalState.OPEN

    def open(self, selected_date: date) -> None:
        month = MONTH_NAMES[selected_date.month - 1]
        self.description = (
            f"Ajouter un événement pour le {selected_date.day} {month} {selected_date.year}."
        )
        self.form = TaskForm(color=COLOR_SWATCHES[0])
        self.time_fields_visible = True
        self.focus_title = True
        self.state = ModalState.OPEN

    def close(self) -> None:
        self.state = ModalState.CLOSED
        self.form = TaskForm()
        self.focus_title = False

    def set_all_day(self, checked: bool) -> None:
        self.form.all_day = checked
        self.time_fields_visible = not checked

    def submit(self, form: TaskForm, selected_date: date) -> Optional[dict[str, Any]]:
        """Build the create payload, or ``None`` when the title is blank.

        A rejected submit asks for focus on the title field; nothing is sent.
        """
        self.form = form
        title = form.title.strip()
        if not title:
            self.focus_title = True
            return None

        self.focus_title = False
        return {
            "title": title,
            "dueDate": date_key(selected_date),
            "description": form.description.strip(),
            "tag": form.tag.strip(),
            "startTime": "" if form.all_day else form.start_time,
            "endTime": "" if form.all_day else form.end_time,
            "allDay": form.all_day,
            "location": form.location.strip(),
            "reminderMinutes": _parse_reminder(form.reminder),
            "color": form.color or COLOR_SWATCHES[0],
            "completed": False,
        }


@dataclass
class DateJumpModal:
    state: ModalState = ModalState.CLOSED
    value: str = ""

    @property
    def is_open(self) -> bool:
        return self.state == ModalState.OPEN

    def open(self, selected_date: date) -> None:
        self.value = date_key(selected_date)
        self.state = ModalState.OPEN

    def close(self) -> None:
        self.state = ModalState.CLOSED
        self.value = ""

    def submit(self, value: str) -> Optional[date]:
        self.value = value
        if not value:
            return None
        return parse_date_key(value)


@dataclass
class ModalCoordinator:
    add_task: AddTaskModal = field(default_factory=AddTaskModal)
    date_jump: DateJumpModal = field(default_factory=DateJumpModal)

    def escape(self) -> Optional[str]:
        if self.add_task.is_open:
            self.add_task.close()
            return "add_task"
        if self.date_jump.is_open:
            self.date_jump.close()
            return "date_jump"
        return None
