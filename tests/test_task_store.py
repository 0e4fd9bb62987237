from __future__ import annotations

from datetime import date

from beavertask.services.task_store import TaskStore
from beavertask.views.calendar_grid import build_month_grid
from beavertask.views.details import build_day_details
from beavertask.views.task_list import group_tasks

from fakes import FakeTaskApi, task_payload


def test_refresh_mirrors_collection(store: TaskStore, fake_api: FakeTaskApi) -> None:
    fake_api.records.append({"id": "a", **task_payload(title="Alpha", extra="kept")})

    assert store.refresh() is True

    assert [task.id for task in store.tasks] == ["a"]
    assert store.tasks[0].payload == fake_api.records[0]


def test_create_all_day_task_then_refetch(store: TaskStore, fake_api: FakeTaskApi) -> None:
    ok = store.create(task_payload(title="Conference", dueDate="2024-03-15", allDay=True))

    assert ok is True
    assert fake_api.call_names() == ["create", "list"]

    grid = build_month_grid(2024, 3, store.tasks, date(2024, 3, 1), date(2024, 1, 1))
    cell = next(cell for cell in grid.cells if cell.key == "2024-03-15")
    assert cell.has_events is True

    details = build_day_details(store.tasks, date(2024, 3, 15))
    assert len(details.rows) == 1
    assert details.rows[0].meta == "Toute la journée"
    assert "🕐" not in details.rows[0].meta


def test_toggle_completed_updates_then_refetches(store: TaskStore, fake_api: FakeTaskApi) -> None:
    fake_api.records.append({"id": "t1", **task_payload(title="Report", dueDate="2024-03-20")})
    store.refresh()
    fake_api.calls.clear()

    assert store.toggle_completed("t1") is True

    assert fake_api.calls == [("update", "t1", {"completed": True}), ("list",)]
    groups = group_tasks(store.tasks, date(2024, 3, 10))
    assert [group.title for group in groups] == ["Completed (1)"]


def test_toggle_unknown_task_sends_nothing(store: TaskStore, fake_api: FakeTaskApi) -> None:
    assert store.toggle_completed("missing") is False
    assert fake_api.calls == []


def test_failed_mutation_leaves_store_untouched(store: TaskStore, fake_api: FakeTaskApi) -> None:
    fake_api.records.append({"id": "t1", **task_payload(title="Keep me")})
    store.refresh()
    before = store.tasks
    fake_api.fail_on.add("update")
    fake_api.calls.clear()

    assert store.update("t1", {"title": "Changed"}) is False

    assert store.tasks is before
    assert fake_api.call_names() == ["update"]


def test_failed_refetch_after_mutation_keeps_previous_snapshot(
    store: TaskStore, fake_api: FakeTaskApi
) -> None:
    fake_api.records.append({"id": "t1", **task_payload(title="Old")})
    store.refresh()
    before = store.tasks
    fake_api.fail_on.add("list")

    assert store.delete("t1") is True
    assert store.tasks is before
    assert fake_api.records == []


def test_create_reports_success_when_only_refetch_fails(
    store: TaskStore, fake_api: FakeTaskApi
) -> None:
    fake_api.records.append({"id": "seed", **task_payload(title="Seed")})
    store.refresh()
    fake_api.fail_on.add("list")

    assert store.create(task_payload(title="A")) is True

    assert [task.id for task in store.tasks] == ["seed"]
    assert [record["title"] for record in fake_api.records] == ["Seed", "A"]


def test_rejected_create_reports_failure(store: TaskStore, fake_api: FakeTaskApi) -> None:
    fake_api.fail_on.add("create")

    result = store.run_create(task_payload(title="A"))

    assert result.written is False
    assert result.snapshot is None
    assert fake_api.call_names() == ["create"]


def test_delete_transport_failure_is_reported(store: TaskStore, fake_api: FakeTaskApi) -> None:
    fake_api.records.append({"id": "t1", **task_payload()})
    store.refresh()
    fake_api.fail_on.add("delete")

    assert store.delete("t1") is False
    assert [task.id for task in store.tasks] == ["t1"]


def test_last_applied_snapshot_wins(store: TaskStore, fake_api: FakeTaskApi) -> None:
    fake_api.records.append({"id": "t1", **task_payload(title="First")})
    early = store.run_refresh()
    fake_api.records.append({"id": "t2", **task_payload(title="Second")})
    late = store.run_refresh()

    store.apply(late)
    store.apply(early)

    assert [task.id for task in store.tasks] == ["t1"]


def test_run_methods_do_not_touch_cache(store: TaskStore, fake_api: FakeTaskApi) -> None:
    result = store.run_create(task_payload(title="Background"))

    assert store.tasks == ()
    assert result.written is True
    assert result.snapshot is not None
    assert store.apply_mutation(result) is True
    assert store.tasks[0].title == "Background"
