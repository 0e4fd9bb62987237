from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from beavertask.domain.dates import MONTH_LABELS, date_key, days_in_month, sunday_weekday
from beavertask.domain.entities import TaskEntity

WEEKDAY_HEADERS = ["S", "M", "T", "W", "T", "F", "S"]


@dataclass(frozen=True)
class CalendarCell:
    date: date
    key: str
    inactive: bool
    today: bool
    selected: bool
    has_events: bool

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def classes(self) -> list[str]:
        names = ["calendar-cell"]
        if self.inactive:
            names.append("inactive")
        if self.today:
            names.append("today")
        if self.selected:
            names.append("selected")
        if self.has_events:
            names.append("has-events")
        return names


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    cells: tuple[CalendarCell, ...]

    @property
    def label(self) -> str:
        return MONTH_LABELS[self.month - 1]

    @property
    def rows(self) -> list[tuple[CalendarCell, ...]]:
        return [self.cells[index:index + 7] for index in range(0, len(self.cells), 7)]


def build_month_grid(
    year: int,
    month: int,
    tasks: Iterable[TaskEntity],
    selected_date: date,
    today: date,
) -> MonthGrid:
    first = date(year, month, 1)
    first_day = sunday_weekday(first)
    total_days = days_in_month(year, month)

    event_keys = {task.due_date for task in tasks if task.due_date}
    today_key = date_key(today)
    selected_key = date_key(selected_date)

    def make_cell(value: date, inactive: bool) -> CalendarCell:
        key = date_key(value)
        return CalendarCell(
            date=value,
            key=key,
            inactive=inactive,
            today=key == today_key,
            selected=key == selected_key,
            has_events=key in event_keys,
        )

    # Day 0 of the visible month is the last day of the previous one.
    day_zero = first - timedelta(days=1)
    cells = [
        make_cell(day_zero - timedelta(days=first_day - 1 - offset), True)
        for offset in range(first_day)
    ]
    cells.extend(make_cell(date(year, month, day), False) for day in range(1, total_days + 1))

    last = date(year, month, total_days)
    remaining = -len(cells) % 7
    cells.extend(make_cell(last + timedelta(days=offset), True) for offset in range(1, remaining + 1))

    return MonthGrid(year=year, month=month, cells=tuple(cells))
