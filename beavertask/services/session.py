from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from beavertask.domain.dates import shift_month
from beavertask.domain.enums import ActiveView

from .task_store import Snapshot, TaskStore


class CalendarSession:
    """Page-lifetime state: the selected day, the month in view and the store."""

    def __init__(self, store: TaskStore, today: Callable[[], date] = date.today) -> None:
        self.store = store
        self._today = today
        current = today()
        self.selected_date: date = current
        self.current_year = current.year
        self.current_month = current.month
        self.active_view = ActiveView.CALENDAR

    @property
    def today(self) -> date:
        return self._today()

    @property
    def today_badge(self) -> str:
        return str(self.today.day)

    def initialize(self) -> bool:
        return self.complete_initialize(self.store.run_refresh())

    def complete_initialize(self, snapshot: Optional[Snapshot]) -> bool:
        loaded = self.store.apply(snapshot)
        self.selected_date = self.today
        return loaded

    def select_date(self, value: date) -> None:
        # Selecting a leading/trailing cell keeps the visible month as is.
        self.selected_date = value

    def change_month(self, offset: int) -> None:
        self.current_year, self.current_month = shift_month(
            self.current_year, self.current_month, offset
        )

    def jump_to(self, value: date) -> None:
        self.current_year = value.year
        self.current_month = value.month
        self.selected_date = value

    def show_calendar(self) -> None:
        self.active_view = ActiveView.CALENDAR

    def show_task_list(self) -> None:
        self.active_view = ActiveView.TASK_LIST
