from __future__ import annotations

from datetime import date

import pytest

from beavertask.domain.dates import date_key, days_in_month, parse_date_key, shift_month, sunday_weekday


@pytest.mark.parametrize("key", ["2024-03-15", "1999-12-31", "2024-02-29", "0987-01-01"])
def test_parse_then_format_is_identity(key: str) -> None:
    assert date_key(parse_date_key(key)) == key


def test_date_key_pads_fields() -> None:
    assert date_key(date(2024, 1, 5)) == "2024-01-05"


@pytest.mark.parametrize("value", ["", None, "2024-00-10", "2024-03", "abc", "0-1-1", "2024-02-30", 20240315])
def test_malformed_keys_fall_back_to_today(value) -> None:
    assert parse_date_key(value) == date.today()


def test_days_in_month_handles_leap_years() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2024, 12) == 31


def test_shift_month_wraps_year() -> None:
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 12, 1) == (2025, 1)
    assert shift_month(2024, 6, 0) == (2024, 6)


def test_sunday_weekday() -> None:
    assert sunday_weekday(date(2024, 3, 3)) == 0
    assert sunday_weekday(date(2024, 3, 9)) == 6
