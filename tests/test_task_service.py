from __future__ import annotations

from dataclasses import replace

import pytest

from beavertask.domain.entities import TaskEntity
from beavertask.services.task_service import InvalidTaskPayload, TaskService


class FakeRepo:
    def __init__(self) -> None:
        self.tasks: list[TaskEntity] = []
        self._id = 1

    def list_tasks(self) -> list[TaskEntity]:
        return self.tasks

    def get_task(self, task_id: str) -> TaskEntity | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def create_task(self, data: dict) -> TaskEntity:
        task = TaskEntity(id=f"t{self._id}", **data)
        self.tasks.append(task)
        self._id += 1
        return task

    def update_task(self, task_id: str, data: dict) -> TaskEntity | None:
        task = self.get_task(task_id)
        if not task:
            return None
        updated = replace(task, **data)
        self.tasks = [updated if t.id == task_id else t for t in self.tasks]
        return updated

    def delete_task(self, task_id: str) -> bool:
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if t.id != task_id]
        return len(self.tasks) != before


def test_create_fills_defaults_and_clears_all_day_times() -> None:
    repo = FakeRepo()
    service = TaskService(repo)

    task = service.create_task({
        "title": "Conference",
        "dueDate": "2024-03-15",
        "allDay": True,
        "startTime": "09:00",
        "endTime": "17:00",
        "unknownField": "ignored",
    })

    assert task.id == "t1"
    assert task.due_date == "2024-03-15"
    assert task.start_time == ""
    assert task.end_time == ""
    assert task.color == "#f89422"
    assert task.completed is False
    assert repo.tasks == [task]


@pytest.mark.parametrize(
    "body",
    [
        None,
        [],
        {},
        {"title": "   "},
        {"title": 5},
        {"title": "ok", "allDay": "yes"},
        {"title": "ok", "reminderMinutes": -5},
        {"title": "ok", "reminderMinutes": True},
        {"title": "ok", "dueDate": "2024-3-5"},
        {"title": "ok", "dueDate": "2024-02-30"},
        {"title": "ok", "dueDate": "2024-03-15\n"},
        {"title": "ok", "startTime": "9:00"},
        {"title": "ok", "endTime": "24:00"},
    ],
)
def test_create_rejects_invalid_bodies(body) -> None:
    service = TaskService(FakeRepo())

    with pytest.raises(InvalidTaskPayload):
        service.create_task(body)


def test_update_is_partial() -> None:
    repo = FakeRepo()
    service = TaskService(repo)
    task = service.create_task({"title": "Read", "tag": "books"})

    updated = service.update_task(task.id, {"completed": True})

    assert updated.completed is True
    assert updated.title == "Read"
    assert updated.tag == "books"


def test_update_and_delete_unknown_task() -> None:
    service = TaskService(FakeRepo())

    assert service.update_task("missing", {"completed": True}) is None
    assert service.delete_task("missing") is False


def test_empty_due_date_and_times_are_accepted() -> None:
    service = TaskService(FakeRepo())

    task = service.create_task({"title": "Someday", "dueDate": "", "startTime": "", "endTime": "23:59"})

    assert task.due_date == ""
    assert task.end_time == "23:59"


def test_update_rejects_malformed_due_date() -> None:
    service = TaskService(FakeRepo())
    task = service.create_task({"title": "Read", "dueDate": "2024-03-05"})

    with pytest.raises(InvalidTaskPayload):
        service.update_task(task.id, {"dueDate": "2024-3-5"})
