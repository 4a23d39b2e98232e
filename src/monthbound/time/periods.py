"""Deterministic month period selection helpers."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from monthbound.contracts import MonthWindow
from monthbound.time.calendar_math import add_months
from monthbound.time.months import end_of_month, start_of_month, start_of_next_month
from monthbound.time.normalize import to_utc
from monthbound.time.zones import (
    ZoneLike,
    end_of_tz_month,
    resolve_zone,
    start_of_tz_month,
    tz_month_start,
)


def period_month(dt: datetime) -> tuple[datetime, datetime]:
    """Return month period bounds as [start, end) in the input's own offset."""
    return start_of_month(dt), start_of_next_month(dt)


def period_tz_month(dt: datetime, zone: ZoneLike) -> tuple[datetime, datetime]:
    """Return UTC bounds [start, end) of the local month in ``zone`` containing ``dt``."""
    rules = resolve_zone(zone)
    return tz_month_start(dt, rules), tz_month_start(dt, rules, 1)


def month_window(dt: datetime) -> MonthWindow:
    """Return the month containing ``dt`` as a window in its own offset."""
    return MonthWindow(
        start=start_of_month(dt),
        end=end_of_month(dt),
        next_start=start_of_next_month(dt),
    )


def tz_month_window(dt: datetime, zone: ZoneLike) -> MonthWindow:
    """Return the local month in ``zone`` containing ``dt`` as a UTC window."""
    rules = resolve_zone(zone)
    return MonthWindow(
        start=start_of_tz_month(dt, rules),
        end=end_of_tz_month(dt, rules),
        next_start=tz_month_start(dt, rules, 1),
    )


def iter_month_starts(start: datetime, end: datetime) -> Iterator[datetime]:
    """Yield month starts from the month of ``start`` while they are before ``end``.

    Starts are expressed in ``start``'s offset.
    """
    first = start_of_month(start)
    step = 0
    current = first
    while current < end:
        yield current
        step += 1
        current = add_months(first, step)


def iter_tz_month_starts(start: datetime, end: datetime, zone: ZoneLike) -> Iterator[datetime]:
    """Yield UTC starts of ``zone``'s local months from the month of ``start`` until ``end``."""
    rules = resolve_zone(zone)
    stop = to_utc(end)
    step = 0
    current = tz_month_start(start, rules)
    while current < stop:
        yield current
        step += 1
        current = tz_month_start(start, rules, step)
