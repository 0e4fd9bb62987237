from __future__ import annotations

from datetime import date

from beavertask.domain.enums import COLOR_SWATCHES
from beavertask.services.task_store import TaskStore
from beavertask.views.modals import AddTaskModal, DateJumpModal, ModalCoordinator, TaskForm

from fakes import FakeTaskApi

SELECTED = date(2024, 3, 15)


def test_open_add_task_resets_form() -> None:
    modal = AddTaskModal()
    modal.open(SELECTED)

    assert modal.is_open
    assert modal.description == "Ajouter un événement pour le 15 March 2024."
    assert modal.form.color == COLOR_SWATCHES[0]
    assert modal.form.all_day is False
    assert modal.time_fields_visible
    assert modal.focus_title


def test_blank_title_is_rejected_without_request(store: TaskStore, fake_api: FakeTaskApi) -> None:
    modal = AddTaskModal()
    modal.open(SELECTED)
    modal.focus_title = False

    payload = modal.submit(TaskForm(title="   "), SELECTED)
    if payload is not None:
        store.create(payload)

    assert payload is None
    assert modal.focus_title is True
    assert modal.is_open
    assert fake_api.calls == []


def test_submit_builds_full_payload() -> None:
    modal = AddTaskModal()
    modal.open(SELECTED)

    payload = modal.submit(
        TaskForm(
            title="  Dentist ",
            description=" checkup ",
            tag=" health ",
            start_time="09:00",
            end_time="10:00",
            location=" Clinic ",
            reminder="30",
        ),
        SELECTED,
    )

    assert payload == {
        "title": "Dentist",
        "dueDate": "2024-03-15",
        "description": "checkup",
        "tag": "health",
        "startTime": "09:00",
        "endTime": "10:00",
        "allDay": False,
        "location": "Clinic",
        "reminderMinutes": 30,
        "color": COLOR_SWATCHES[0],
        "completed": False,
    }


def test_all_day_clears_times() -> None:
    modal = AddTaskModal()
    modal.open(SELECTED)
    modal.set_all_day(True)

    assert modal.time_fields_visible is False
    payload = modal.submit(
        TaskForm(title="Holiday", all_day=True, start_time="09:00", end_time="17:00", reminder="x"),
        SELECTED,
    )
    assert payload["startTime"] == ""
    assert payload["endTime"] == ""
    assert payload["reminderMinutes"] == 0


def test_date_jump_prefills_and_parses() -> None:
    modal = DateJumpModal()
    modal.open(SELECTED)

    assert modal.value == "2024-03-15"
    assert modal.submit("2025-07-04") == date(2025, 7, 4)
    assert modal.submit("") is None


def test_escape_prefers_add_task() -> None:
    modals = ModalCoordinator()
    modals.add_task.open(SELECTED)
    modals.date_jump.open(SELECTED)

    assert modals.escape() == "add_task"
    assert not modals.add_task.is_open
    assert modals.date_jump.is_open
    assert modals.escape() == "date_jump"
    assert modals.escape() is None
