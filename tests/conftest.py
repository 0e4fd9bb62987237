from __future__ import annotations

from typing import Any

import pytest

from beavertask.domain.entities import TaskEntity
from beavertask.services.task_store import TaskStore

from fakes import FakeTaskApi, task_payload


@pytest.fixture()
def fake_api() -> FakeTaskApi:
    return FakeTaskApi()


@pytest.fixture()
def store(fake_api: FakeTaskApi) -> TaskStore:
    return TaskStore(fake_api)


@pytest.fixture()
def make_task():
    counter = iter(range(1, 10_000))

    def _make(**overrides: Any) -> TaskEntity:
        payload = task_payload(**overrides)
        payload.setdefault("id", f"task_{next(counter)}")
        return TaskEntity.from_payload(payload)

    return _make
