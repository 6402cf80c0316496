from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timezone, tzinfo
from typing import List, Optional

import pytest

from monthgrid.core.calendar_day import CalendarDay


@dataclass
class FakeController:
    start: date = date(2020, 3, 1)
    end: date = date(2020, 5, 31)
    min_year: Optional[int] = None
    multiple: bool = False
    first_day_of_week: int = 0
    tz: tzinfo = timezone.utc
    initial: set = field(default_factory=set)
    calls: List[tuple] = field(default_factory=list)

    def get_selected_days(self):
        return set(self.initial)

    def allow_multiple_selection(self):
        return self.multiple

    def get_time_zone(self):
        return self.tz

    def get_start_date(self):
        return self.start

    def get_end_date(self):
        return self.end

    def get_min_year(self):
        return self.start.year if self.min_year is None else self.min_year

    def get_first_day_of_week(self):
        return self.first_day_of_week

    def try_vibrate(self):
        self.calls.append(("vibrate",))

    def on_day_of_month_selected(self, day):
        self.calls.append(("selected", day))


class RecordingView:
    def __init__(self):
        self.rendered = []
        self.listener = None

    def render(self, params):
        self.rendered.append(params)

    def set_on_day_tap(self, listener):
        self.listener = listener

    def tap(self, day):
        self.listener(self, day)


@pytest.fixture
def controller():
    return FakeController()


@pytest.fixture
def day():
    def make(y, m, d, tz=None):
        return CalendarDay.from_fields(y, m, d, tz)

    return make
