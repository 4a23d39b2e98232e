"""Zone-bound facade over the local-calendar month helpers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, tzinfo

from monthbound.config.settings import MonthboundConfig
from monthbound.contracts import MonthWindow
from monthbound.time import periods, zones


@dataclass(frozen=True, slots=True)
class MonthCalendar:
    """Month boundaries of one time zone's local calendar, returned in UTC."""

    zone: tzinfo

    @classmethod
    def for_zone(cls, zone: zones.ZoneLike) -> MonthCalendar:
        """Build a calendar from an IANA key or tzinfo."""
        return cls(zone=zones.resolve_zone(zone))

    @classmethod
    def from_config(cls, cfg: MonthboundConfig) -> MonthCalendar:
        """Build a calendar for the configured default zone."""
        return cls.for_zone(cfg.default_zone)

    def local_wall(self, instant: datetime) -> datetime:
        return zones.to_local_wall(instant, self.zone)

    def start_of_month(self, instant: datetime) -> datetime:
        return zones.start_of_tz_month(instant, self.zone)

    def end_of_month(self, instant: datetime) -> datetime:
        return zones.end_of_tz_month(instant, self.zone)

    def start_of_previous_month(self, instant: datetime) -> datetime:
        return zones.start_of_previous_tz_month(instant, self.zone)

    def end_of_previous_month(self, instant: datetime) -> datetime:
        return zones.end_of_previous_tz_month(instant, self.zone)

    def start_of_next_month(self, instant: datetime) -> datetime:
        return zones.start_of_next_tz_month(instant, self.zone)

    def end_of_next_month(self, instant: datetime) -> datetime:
        return zones.end_of_next_tz_month(instant, self.zone)

    def window(self, instant: datetime) -> MonthWindow:
        """Return the local month containing ``instant`` as a UTC window."""
        return periods.tz_month_window(instant, self.zone)

    def months_between(self, start: datetime, end: datetime) -> Iterator[datetime]:
        """Yield UTC starts of local months from the month of ``start`` until ``end``."""
        return periods.iter_tz_month_starts(start, end, self.zone)
