from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from .clock import as_utc


@dataclass(frozen=True)
class CivilCalendar:
    """Wall-clock view of UTC instants for one company.

    A fixed UTC offset never observes daylight saving; an IANA zone name does.
    """

    tz: tzinfo

    @classmethod
    def fixed_offset(cls, minutes: int) -> "CivilCalendar":
        return cls(timezone(timedelta(minutes=int(minutes))))

    @classmethod
    def for_company(cls, company, *, default_offset_minutes: int) -> "CivilCalendar":
        if company is None:
            return cls.fixed_offset(default_offset_minutes)
        if company.timezone_name:
            return cls(ZoneInfo(company.timezone_name))
        offset = company.utc_offset_minutes
        return cls.fixed_offset(default_offset_minutes if offset is None else offset)

    def local(self, instant: datetime) -> datetime:
        return as_utc(instant).astimezone(self.tz)

    def civil_day(self, instant: datetime) -> date:
        return self.local(instant).date()

    def minute_of_day(self, instant: datetime) -> int:
        local = self.local(instant)
        return local.hour * 60 + local.minute

    def start_of_day(self, day: date) -> datetime:
        return datetime.combine(day, time.min, tzinfo=self.tz).astimezone(timezone.utc)

    def day_bounds(self, day: date) -> tuple[datetime, datetime]:
        """UTC instants of civil midnight and the last microsecond of ``day``."""
        start = self.start_of_day(day)
        end = self.start_of_day(day + timedelta(days=1)) - timedelta(microseconds=1)
        return start, end
