from __future__ import annotations

from datetime import date, timedelta

MONTH_LABELS = [
    "JAN.", "FEB.", "MAR.", "APR.", "MAY", "JUN.",
    "JUL.", "AUG.", "SEP.", "OCT.", "NOV.", "DEC.",
]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def date_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(value: object) -> date:
    """Parse a ``YYYY-MM-DD`` key, falling back to today on malformed input."""
    if not value or not isinstance(value, str):
        return date.today()

    parts = value.split("-")
    if len(parts) != 3:
        return date.today()
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        return date.today()
    if not year or not month or not day:
        return date.today()

    try:
        return date(year, month, day)
    except ValueError:
        return date.today()


def days_in_month(year: int, month: int) -> int:
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    return (next_month - timedelta(days=1)).day


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def sunday_weekday(value: date) -> int:
    # 0 = Sunday ... 6 = Saturday
    return (value.weekday() + 1) % 7
