from __future__ import annotations

import re
from datetime import date
from typing import Any

from beavertask.domain.entities import WIRE_FIELDS, TaskEntity
from beavertask.domain.enums import DEFAULT_COLOR
from beavertask.infra.repository import TaskRepository

TEXT_FIELDS = {"title", "description", "tag", "due_date", "start_time", "end_time", "location", "color"}
TIME_FIELDS = {"start_time", "end_time"}
BOOL_FIELDS = {"all_day", "completed"}

DATE_KEY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
TIME_PATTERN = re.compile(r"([01]\d|2[0-3]):[0-5]\d")

COLUMN_NAMES = {wire_name: attr for attr, wire_name in WIRE_FIELDS.items()}

CREATE_DEFAULTS = {
    "description": "",
    "tag": "",
    "due_date": "",
    "start_time": "",
    "end_time": "",
    "all_day": False,
    "location": "",
    "reminder_minutes": 0,
    "color": DEFAULT_COLOR,
    "completed": False,
}


class InvalidTaskPayload(ValueError):
    """Raised when a request body cannot be turned into task fields."""


class TaskService:
    """Server-side task operations over the repository."""

    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo

    def list_tasks(self) -> list[TaskEntity]:
        return self._repo.list_tasks()

    def create_task(self, body: Any) -> TaskEntity:
        data = self._normalize_data(body)
        if "title" not in data:
            raise InvalidTaskPayload("title is required")
        merged = {**CREATE_DEFAULTS, **data}
        if merged["all_day"]:
            merged["start_time"] = ""
            merged["end_time"] = ""
        return self._repo.create_task(merged)

    def update_task(self, task_id: str, body: Any) -> TaskEntity | None:
        return self._repo.update_task(task_id, self._normalize_data(body))

    def delete_task(self, task_id: str) -> bool:
        return self._repo.delete_task(task_id)

    def _normalize_data(self, body: Any) -> dict[str, Any]:
        if not isinstance(body, dict):
            raise InvalidTaskPayload("request body must be a JSON object")

        normalized: dict[str, Any] = {}
        for wire_name, value in body.items():
            column = COLUMN_NAMES.get(wire_name)
            if column is None:
                continue
            normalized[column] = _coerce(column, value)

        if "title" in normalized and not normalized["title"].strip():
            raise InvalidTaskPayload("title must not be empty")
        return normalized


def _coerce(column: str, value: Any) -> Any:
    if column in TEXT_FIELDS:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise InvalidTaskPayload(f"{WIRE_FIELDS[column]} must be a string")
        if column == "due_date":
            _check_date_key(value)
        elif column in TIME_FIELDS and value and not TIME_PATTERN.fullmatch(value):
            raise InvalidTaskPayload(f"{WIRE_FIELDS[column]} must be HH:MM")
        return value
    if column in BOOL_FIELDS:
        if not isinstance(value, bool):
            raise InvalidTaskPayload(f"{WIRE_FIELDS[column]} must be a boolean")
        return value
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidTaskPayload(f"{WIRE_FIELDS[column]} must be a non-negative integer")
    return value


def _check_date_key(value: str) -> None:
    if not value:
        return
    if not DATE_KEY_PATTERN.fullmatch(value):
        raise InvalidTaskPayload("dueDate must be YYYY-MM-DD")
    year, month, day = (int(part) for part in value.split("-"))
    try:
        date(year, month, day)
    except ValueError as exc:
        raise InvalidTaskPayload(f"dueDate is not a calendar day: {value}") from exc
