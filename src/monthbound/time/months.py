"""Month boundaries in an instant's own UTC offset.

None of these helpers converts between zones. An aware input keeps its
numeric offset in every result; a naive input yields naive results.
"""

from __future__ import annotations

from datetime import datetime

from monthbound.time.calendar_math import add_months, add_ticks, truncate_to_month
from monthbound.time.normalize import pin_offset


def start_of_month(instant: datetime) -> datetime:
    """Return the first moment of the month containing ``instant``."""
    return truncate_to_month(pin_offset(instant))


def end_of_month(instant: datetime) -> datetime:
    """Return the last tick of the month containing ``instant``."""
    return add_ticks(add_months(start_of_month(instant), 1), -1)


def start_of_next_month(instant: datetime) -> datetime:
    """Return the first moment of the following month."""
    return add_months(start_of_month(instant), 1)


def start_of_previous_month(instant: datetime) -> datetime:
    """Return the first moment of the preceding month."""
    return add_months(start_of_month(instant), -1)


def end_of_previous_month(instant: datetime) -> datetime:
    """Return the last tick of the preceding month.

    Always one tick before the current month's start, never ``end_of_month``
    shifted back a month.
    """
    return add_ticks(start_of_month(instant), -1)


def end_of_next_month(instant: datetime) -> datetime:
    """Return the last tick of the following month."""
    return add_ticks(add_months(start_of_month(instant), 2), -1)
