"""Tests for calendar month arithmetic."""

from datetime import datetime, timedelta, timezone

import pytest

from monthbound.errors import MonthOutOfRangeError
from monthbound.time.calendar_math import add_months, add_ticks, shift_month, truncate_to_month


def test_shift_month_rolls_years_both_ways() -> None:
    """Month shifting carries into the year in both directions."""
    assert shift_month(2023, 12, 1) == (2024, 1)
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 3, -14) == (2023, 1)
    assert shift_month(2024, 6, 0) == (2024, 6)


def test_shift_month_rejects_invalid_month() -> None:
    """Months outside 1..12 are rejected."""
    with pytest.raises(ValueError, match="month must be in 1..12"):
        shift_month(2024, 13, 1)


def test_add_months_clamps_day_to_target_month() -> None:
    """Days past the end of the target month clamp to its last day."""
    assert add_months(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)
    assert add_months(datetime(2023, 1, 31), 1) == datetime(2023, 2, 28)
    assert add_months(datetime(2024, 3, 31), -1) == datetime(2024, 2, 29)
    assert add_months(datetime(2024, 5, 31), 1) == datetime(2024, 6, 30)


def test_add_months_preserves_time_and_offset() -> None:
    """Time of day and tzinfo survive a month add."""
    tz = timezone(timedelta(hours=-7))
    dt = datetime(2024, 8, 15, 13, 45, 10, 500, tzinfo=tz)
    out = add_months(dt, 5)
    assert out == datetime(2025, 1, 15, 13, 45, 10, 500, tzinfo=tz)
    assert out.utcoffset() == timedelta(hours=-7)


def test_add_months_out_of_range_raises() -> None:
    """Leaving the representable year range is a named failure."""
    with pytest.raises(MonthOutOfRangeError):
        add_months(datetime(9999, 12, 1), 1)
    with pytest.raises(MonthOutOfRangeError):
        add_months(datetime(1, 1, 1), -1)


def test_add_ticks_moves_by_microseconds() -> None:
    """One tick is one microsecond."""
    assert add_ticks(datetime(2024, 3, 1), -1) == datetime(2024, 2, 29, 23, 59, 59, 999999)
    with pytest.raises(MonthOutOfRangeError):
        add_ticks(datetime(1, 1, 1), -1)


def test_truncate_to_month() -> None:
    """Truncation zeroes everything below the month."""
    dt = datetime(2024, 7, 19, 23, 1, 2, 3)
    assert truncate_to_month(dt) == datetime(2024, 7, 1)
