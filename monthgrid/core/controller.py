from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import TYPE_CHECKING, Callable, Optional, Protocol

from monthgrid.core.calendar_day import CalendarDay, days_from_dates

if TYPE_CHECKING:
    from monthgrid.config import PickerSettings
    from monthgrid.core.binder import MonthParams

log = logging.getLogger(__name__)

DayTapListener = Callable[["MonthView", Optional[CalendarDay]], None]


class DatePickerController(Protocol):
    def get_selected_days(self) -> set[CalendarDay]: ...

    def allow_multiple_selection(self) -> bool: ...

    def get_time_zone(self) -> tzinfo: ...

    def get_start_date(self) -> date: ...

    def get_end_date(self) -> date: ...

    def get_min_year(self) -> int: ...

    def get_first_day_of_week(self) -> int: ...

    def try_vibrate(self) -> None: ...

    def on_day_of_month_selected(self, day: CalendarDay) -> None: ...


class MonthView(Protocol):
    """Renders one month and reports taps on its days."""

    def render(self, params: MonthParams) -> None: ...

    def set_on_day_tap(self, listener: DayTapListener) -> None: ...


class SettingsController:
    """
    Controller backed by PickerSettings.

    Every getter reads the settings object on each call, so changing a
    field (allow_multiple_selection included) applies to the next tap.
    """

    def __init__(self, settings: PickerSettings, haptics: Optional[Callable[[], None]] = None):
        self.settings = settings
        self.haptics = haptics
        self.last_selected: Optional[CalendarDay] = None

    def get_selected_days(self) -> set[CalendarDay]:
        return days_from_dates(self.settings.initial_selection, self.get_time_zone())

    def allow_multiple_selection(self) -> bool:
        return self.settings.allow_multiple_selection

    def get_time_zone(self) -> tzinfo:
        return self.settings.tzinfo

    def get_start_date(self) -> date:
        return self.settings.start_date

    def get_end_date(self) -> date:
        return self.settings.end_date

    def get_min_year(self) -> int:
        return self.settings.start_date.year

    def get_first_day_of_week(self) -> int:
        return self.settings.first_day_of_week

    def try_vibrate(self) -> None:
        if self.haptics is not None:
            self.haptics()

    def on_day_of_month_selected(self, day: CalendarDay) -> None:
        log.info("day selected: %s", day)
        self.last_selected = day
