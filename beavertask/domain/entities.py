from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import DEFAULT_COLOR

WIRE_FIELDS = {
    "title": "title",
    "description": "description",
    "tag": "tag",
    "due_date": "dueDate",
    "start_time": "startTime",
    "end_time": "endTime",
    "all_day": "allDay",
    "location": "location",
    "reminder_minutes": "reminderMinutes",
    "color": "color",
    "completed": "completed",
}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _minutes(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class TaskEntity:
    id: str
    title: str
    due_date: str = ""
    description: str = ""
    tag: str = ""
    location: str = ""
    all_day: bool = False
    start_time: str = ""
    end_time: str = ""
    reminder_minutes: int = 0
    color: str = DEFAULT_COLOR
    completed: bool = False
    payload: dict[str, Any] = field(default_factory=dict, compare=False, repr=False, hash=False)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TaskEntity":
        return cls(
            id=_text(payload.get("id")),
            title=_text(payload.get("title")),
            due_date=_text(payload.get("dueDate")),
            description=_text(payload.get("description")),
            tag=_text(payload.get("tag")),
            location=_text(payload.get("location")),
            all_day=bool(payload.get("allDay", False)),
            start_time=_text(payload.get("startTime")),
            end_time=_text(payload.get("endTime")),
            reminder_minutes=_minutes(payload.get("reminderMinutes")),
            color=_text(payload.get("color")) or DEFAULT_COLOR,
            completed=bool(payload.get("completed", False)),
            payload=dict(payload),
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"id": self.id}
        for attr, wire_name in WIRE_FIELDS.items():
            payload[wire_name] = getattr(self, attr)
        return payload


def find_task(tasks, task_id: str) -> Optional[TaskEntity]:
    return next((task for task in tasks if task.id == task_id), None)
