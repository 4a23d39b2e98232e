"""Value types shared by the month boundary helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum
from typing import Any

TICK = timedelta(microseconds=1)
"""Smallest increment a ``datetime`` can represent."""


class LocalTimeKind(StrEnum):
    """How a naive wall-clock value maps onto a zone's timeline."""

    UNIQUE = "unique"
    GAP = "gap"
    FOLD = "fold"


@dataclass(frozen=True, slots=True)
class MonthWindow:
    """One calendar month as an inclusive [start, end] range plus its exclusive bound."""

    start: datetime
    end: datetime
    next_start: datetime

    def __post_init__(self) -> None:
        """Validate window ordering."""
        if not self.start <= self.end < self.next_start:
            raise ValueError("MonthWindow requires start <= end < next_start.")
        if self.next_start - self.end != TICK:
            raise ValueError("MonthWindow end must be one tick before next_start.")

    def contains(self, instant: datetime) -> bool:
        """Return True when ``instant`` lies inside the window."""
        return self.start <= instant < self.next_start

    def to_dict(self) -> dict[str, Any]:
        """Serialize the window to a JSON-compatible dictionary."""
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "next_start": self.next_start.isoformat(),
        }
