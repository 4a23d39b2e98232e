"""Instant normalization helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timezone


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to timezone-aware UTC, assuming UTC for naive values."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def pin_offset(dt: datetime) -> datetime:
    """Replace a zone-backed tzinfo with the fixed offset currently in effect.

    Wall-clock arithmetic on a ``ZoneInfo`` datetime re-evaluates the offset
    at the new wall time; pinning keeps the offset the caller recorded.
    Naive values and fixed-offset values are returned unchanged.
    """
    if dt.tzinfo is None or isinstance(dt.tzinfo, timezone):
        return dt
    offset = dt.utcoffset()
    if offset is None:
        return dt.replace(tzinfo=None)
    return dt.replace(tzinfo=timezone(offset), fold=0)
