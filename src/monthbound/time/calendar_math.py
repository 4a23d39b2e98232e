"""Calendar month arithmetic on datetimes.

Everything here is wall-clock arithmetic: the tzinfo of the input is carried
through untouched. Callers that need a stable offset pin it first.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import datetime

from monthbound.contracts import TICK
from monthbound.errors import MonthOutOfRangeError


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Return (year, month) moved by ``months`` calendar months."""
    if not 1 <= month <= 12:
        raise ValueError("month must be in 1..12")
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def add_months(dt: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the target month's length."""
    year, month = shift_month(dt.year, dt.month, months)
    try:
        last_day = monthrange(year, month)[1]
        return dt.replace(year=year, month=month, day=min(dt.day, last_day))
    except (ValueError, OverflowError) as exc:
        raise MonthOutOfRangeError(
            f"adding {months} month(s) to {dt.isoformat()} leaves the datetime range"
        ) from exc


def add_ticks(dt: datetime, ticks: int) -> datetime:
    """Add ``ticks`` microseconds (negative values subtract)."""
    try:
        return dt + ticks * TICK
    except OverflowError as exc:
        raise MonthOutOfRangeError(
            f"adding {ticks} tick(s) to {dt.isoformat()} leaves the datetime range"
        ) from exc


def truncate_to_month(dt: datetime) -> datetime:
    """Return midnight on day 1 of ``dt``'s month."""
    return dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0, fold=0)
