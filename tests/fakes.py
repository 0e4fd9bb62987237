from __future__ import annotations

from typing import Any

from beavertask.infra.api_client import RequestFailed


class FakeTaskApi:
    """In-memory task collection that records every call it receives."""

    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []
        self.calls: list[tuple] = []
        self.fail_on: set[str] = set()
        self._id = 1

    def list(self) -> Any:
        self.calls.append(("list",))
        if "list" in self.fail_on:
            raise RequestFailed("HTTP error! status: 500", status_code=500)
        return [dict(record) for record in self.records]

    def create(self, fields: dict[str, Any]) -> Any:
        self.calls.append(("create", dict(fields)))
        if "create" in self.fail_on:
            raise RequestFailed("HTTP error! status: 400", status_code=400)
        record = {"id": f"task_{self._id}", **fields}
        self._id += 1
        self.records.append(record)
        return dict(record)

    def update(self, task_id: str, fields: dict[str, Any]) -> Any:
        self.calls.append(("update", task_id, dict(fields)))
        if "update" in self.fail_on:
            raise RequestFailed("HTTP error! status: 500", status_code=500)
        for record in self.records:
            if record["id"] == task_id:
                record.update(fields)
                return dict(record)
        raise RequestFailed("HTTP error! status: 404", status_code=404)

    def delete(self, task_id: str) -> Any:
        self.calls.append(("delete", task_id))
        if "delete" in self.fail_on:
            raise RequestFailed("DELETE failed: connection refused")
        before = len(self.records)
        self.records = [record for record in self.records if record["id"] != task_id]
        if len(self.records) == before:
            raise RequestFailed("HTTP error! status: 404", status_code=404)
        return None

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


def task_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "title": "Task",
        "dueDate": "",
        "description": "",
        "tag": "",
        "startTime": "",
        "endTime": "",
        "allDay": False,
        "location": "",
        "reminderMinutes": 0,
        "color": "#f89422",
        "completed": False,
    }
    payload.update(overrides)
    return payload
