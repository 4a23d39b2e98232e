"""Exceptions raised by month boundary arithmetic."""

from __future__ import annotations


class MonthOutOfRangeError(OverflowError):
    """A boundary falls outside the range ``datetime`` can represent."""
