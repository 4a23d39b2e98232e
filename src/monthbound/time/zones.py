"""Month boundaries on a named time zone's local calendar.

Every boundary is built the same way: take the local wall-clock date of the
instant, step whole months on that local calendar, build local midnight on
day 1 and map it back to UTC through the zone rules. Results are always
UTC-aware.

Local midnight that falls in a DST gap or fold is resolved with ``fold=0``:
a gap is read with the pre-transition offset, which lands on the first valid
instant after the gap, and a fold picks the earlier occurrence.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

from monthbound.contracts import LocalTimeKind
from monthbound.errors import MonthOutOfRangeError
from monthbound.time.calendar_math import add_ticks, shift_month
from monthbound.time.normalize import to_utc

logger = logging.getLogger(__name__)

ZoneLike = str | tzinfo


def resolve_zone(zone: ZoneLike) -> tzinfo:
    """Return tzinfo rules for an IANA key, or the tzinfo itself.

    Unknown keys raise ``zoneinfo.ZoneInfoNotFoundError`` unchanged.
    """
    if isinstance(zone, tzinfo):
        return zone
    key = zone.strip()
    if not key:
        raise ValueError("zone key must be a non-empty string")
    return ZoneInfo(key)


def to_local_wall(instant: datetime, zone: ZoneLike) -> datetime:
    """Return the naive wall-clock value of ``instant`` in ``zone``."""
    rules = resolve_zone(zone)
    try:
        local = to_utc(instant).astimezone(rules)
    except OverflowError as exc:
        raise MonthOutOfRangeError(
            f"{instant.isoformat()} has no local time in {rules} within the datetime range"
        ) from exc
    return local.replace(tzinfo=None, fold=0)


def local_to_utc(local: datetime, zone: ZoneLike) -> datetime:
    """Map a naive wall-clock value in ``zone`` to a UTC instant (``fold=0``)."""
    rules = resolve_zone(zone)
    try:
        return local.replace(tzinfo=rules, fold=0).astimezone(UTC)
    except OverflowError as exc:
        raise MonthOutOfRangeError(
            f"local time {local.isoformat()} in {rules} maps outside the datetime range"
        ) from exc


def classify_local_time(local: datetime, zone: ZoneLike) -> LocalTimeKind:
    """Tell whether a wall-clock value is unique, skipped (gap) or repeated (fold)."""
    rules = resolve_zone(zone)
    naive = local.replace(tzinfo=None, fold=0)
    early = naive.replace(tzinfo=rules, fold=0)
    late = naive.replace(tzinfo=rules, fold=1)
    if early.utcoffset() == late.utcoffset():
        return LocalTimeKind.UNIQUE
    round_trip = early.astimezone(UTC).astimezone(rules).replace(tzinfo=None, fold=0)
    if round_trip == naive:
        return LocalTimeKind.FOLD
    return LocalTimeKind.GAP


def tz_month_start(instant: datetime, zone: ZoneLike, months: int = 0) -> datetime:
    """Return the UTC instant of local midnight on day 1, ``months`` local months away."""
    rules = resolve_zone(zone)
    local = to_local_wall(instant, rules)
    year, month = shift_month(local.year, local.month, months)
    try:
        local_start = datetime(year, month, 1)
    except ValueError as exc:
        raise MonthOutOfRangeError(
            f"month {year:04d}-{month:02d} is outside the datetime range"
        ) from exc

    start = local_to_utc(local_start, rules)
    kind = classify_local_time(local_start, rules)
    if kind is not LocalTimeKind.UNIQUE:
        logger.debug(
            "Local midnight %s in %s is a %s; resolved to %s",
            local_start.isoformat(),
            rules,
            kind,
            start.isoformat(),
        )
    return start


def start_of_tz_month(instant: datetime, zone: ZoneLike) -> datetime:
    """Return the start of the local month in ``zone`` containing ``instant``, in UTC."""
    return tz_month_start(instant, zone)


def end_of_tz_month(instant: datetime, zone: ZoneLike) -> datetime:
    """Return the last tick of the local month in ``zone`` containing ``instant``, in UTC."""
    return add_ticks(tz_month_start(instant, zone, 1), -1)


def start_of_previous_tz_month(instant: datetime, zone: ZoneLike) -> datetime:
    """Return the start of the preceding local month in ``zone``, in UTC."""
    return tz_month_start(instant, zone, -1)


def end_of_previous_tz_month(instant: datetime, zone: ZoneLike) -> datetime:
    """Return the last tick of the preceding local month in ``zone``, in UTC."""
    return add_ticks(tz_month_start(instant, zone), -1)


def start_of_next_tz_month(instant: datetime, zone: ZoneLike) -> datetime:
    """Return the start of the following local month in ``zone``, in UTC."""
    return tz_month_start(instant, zone, 1)


def end_of_next_tz_month(instant: datetime, zone: ZoneLike) -> datetime:
    """Return the last tick of the following local month in ``zone``, in UTC."""
    return add_ticks(tz_month_start(instant, zone, 2), -1)
