from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, tzinfo
from typing import Optional

from monthgrid.utils.dates import TzLike, millis_to_datetime, now_millis, resolve_tz


@dataclass(frozen=True)
class CalendarDay:
    """
    A specific day, independent of the time of day.

    month is 0-based (0..11), day is 1-based. Equality and hash cover
    (year, month, day) only: the same label in two zones compares equal.
    """

    year: int
    month: int
    day: int
    timezone: Optional[tzinfo] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_epoch_millis(cls, ms: int, tz: TzLike) -> CalendarDay:
        local = millis_to_datetime(ms, tz)
        return cls(local.year, local.month - 1, local.day, local.tzinfo)

    @classmethod
    def today(cls, tz: TzLike) -> CalendarDay:
        return cls.from_epoch_millis(now_millis(), tz)

    @classmethod
    def from_datetime(cls, value: date, tz: TzLike = None) -> CalendarDay:
        # reads the fields as they are, no conversion into tz
        zone = resolve_tz(tz) if tz is not None else getattr(value, "tzinfo", None)
        return cls(value.year, value.month - 1, value.day, zone)

    @classmethod
    def from_fields(cls, year: int, month: int, day: int, tz: TzLike = None) -> CalendarDay:
        # no range validation: (2021, 13, 32) is stored verbatim
        return cls(year, month, day, resolve_tz(tz) if tz is not None else None)

    def with_day(self, year: int, month: int, day: int) -> CalendarDay:
        return dataclasses.replace(self, year=year, month=month, day=day)

    def with_same_day(self, other: CalendarDay) -> CalendarDay:
        return self.with_day(other.year, other.month, other.day)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"


def days_from_dates(values, tz: TzLike = None) -> set[CalendarDay]:
    return {CalendarDay.from_datetime(v, tz) for v in values}
