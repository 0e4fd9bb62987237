from __future__ import annotations

from datetime import date

from beavertask.domain.enums import ActiveView
from beavertask.services.session import CalendarSession
from beavertask.services.task_store import TaskStore
from beavertask.views.calendar_grid import build_month_grid

from fakes import FakeTaskApi, task_payload

TODAY = date(2024, 3, 15)


def _session(store: TaskStore) -> CalendarSession:
    return CalendarSession(store, today=lambda: TODAY)


def test_initialize_loads_tasks_and_selects_today(store: TaskStore, fake_api: FakeTaskApi) -> None:
    fake_api.records.append({"id": "t1", **task_payload()})
    session = _session(store)
    session.selected_date = date(2020, 1, 1)

    assert session.initialize() is True
    assert session.selected_date == TODAY
    assert (session.current_year, session.current_month) == (2024, 3)
    assert len(store.tasks) == 1
    assert session.today_badge == "15"


def test_initialize_failure_leaves_empty_store(store: TaskStore, fake_api: FakeTaskApi) -> None:
    fake_api.fail_on.add("list")
    session = _session(store)

    assert session.initialize() is False
    assert store.tasks == ()


def test_selecting_adjacent_month_cell_keeps_visible_month(store: TaskStore) -> None:
    session = _session(store)
    grid = build_month_grid(2024, 3, [], session.selected_date, session.today)
    leading = grid.cells[0]

    session.select_date(leading.date)

    assert session.selected_date == date(2024, 2, 25)
    assert (session.current_year, session.current_month) == (2024, 3)


def test_change_month_wraps(store: TaskStore) -> None:
    session = CalendarSession(store, today=lambda: date(2024, 1, 10))

    session.change_month(-1)
    assert (session.current_year, session.current_month) == (2023, 12)
    session.change_month(2)
    assert (session.current_year, session.current_month) == (2024, 2)
    assert session.selected_date == date(2024, 1, 10)


def test_jump_to_relocates_selection_and_month(store: TaskStore) -> None:
    session = _session(store)

    session.jump_to(date(2026, 10, 19))

    assert session.selected_date == date(2026, 10, 19)
    assert (session.current_year, session.current_month) == (2026, 10)


def test_view_switching(store: TaskStore) -> None:
    session = _session(store)

    session.show_task_list()
    assert session.active_view == ActiveView.TASK_LIST
    session.show_calendar()
    assert session.active_view == ActiveView.CALENDAR
