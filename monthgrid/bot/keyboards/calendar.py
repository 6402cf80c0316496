from __future__ import annotations

import calendar
from typing import Optional

from aiogram.filters.callback_data import CallbackData
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from monthgrid.core.binder import MonthParams
from monthgrid.core.calendar_day import CalendarDay
from monthgrid.core.controller import DayTapListener
from monthgrid.utils.dates import TzLike

_WEEKDAYS = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


class DayPickCb(CallbackData, prefix="calpick"):
    year: int
    month: int  # 0-based, as CalendarDay
    day: int

    @classmethod
    def for_day(cls, day: CalendarDay) -> DayPickCb:
        return cls(year=day.year, month=day.month, day=day.day)

    def to_day(self, tz: TzLike = None) -> CalendarDay:
        return CalendarDay.from_fields(self.year, self.month, self.day, tz)


class MonthNavCb(CallbackData, prefix="calnav"):
    year: int
    month: int
    direction: str  # "prev" | "next"


class NoopCb(CallbackData, prefix="noop"):
    why: str


def _noop(text: str, why: str) -> InlineKeyboardButton:
    return InlineKeyboardButton(text=text, callback_data=NoopCb(why=why).pack())


def day_button(day: CalendarDay, text: Optional[str] = None) -> InlineKeyboardButton:
    """
    Button for one day cell; the callback brings the day back to the day-pick handler.
    """
    return InlineKeyboardButton(text=text or str(day.day), callback_data=DayPickCb.for_day(day).pack())


def build_month_keyboard(params: MonthParams) -> InlineKeyboardMarkup:
    """
    Header (prev / title / next), weekday names starting at
    params.first_day_of_week, then one row per week. Selected days get a ✅.
    """
    first = CalendarDay.from_fields(params.year, params.month, 1)
    fdw = params.first_day_of_week

    b = InlineKeyboardBuilder()
    b.row(
        InlineKeyboardButton(
            text="◀️",
            callback_data=MonthNavCb(year=params.year, month=params.month, direction="prev").pack(),
        ),
        _noop(first.to_date().strftime("%B %Y"), "header"),
        InlineKeyboardButton(
            text="▶️",
            callback_data=MonthNavCb(year=params.year, month=params.month, direction="next").pack(),
        ),
    )
    b.row(*[_noop(wd, "wd") for wd in _WEEKDAYS[fdw:] + _WEEKDAYS[:fdw]])

    cal = calendar.Calendar(firstweekday=fdw)
    for week in cal.monthdayscalendar(params.year, params.month + 1):
        row = []
        for d in week:
            if d == 0:
                row.append(_noop(" ", "empty"))
                continue
            label = f"{d}✅" if d in params.selected_day_numbers else str(d)
            row.append(day_button(first.with_day(params.year, params.month, d), label))
        b.row(*row)

    return b.as_markup()


class KeyboardMonthView:
    """
    MonthView drawn as an inline keyboard. Taps come back as DayPickCb
    callbacks; the handler hands them to tap(), which calls the listener.
    """

    def __init__(self) -> None:
        self.params: Optional[MonthParams] = None
        self.markup: Optional[InlineKeyboardMarkup] = None
        self._listener: Optional[DayTapListener] = None

    def render(self, params: MonthParams) -> None:
        self.params = params
        self.markup = build_month_keyboard(params)

    def set_on_day_tap(self, listener: DayTapListener) -> None:
        self._listener = listener

    def tap(self, day: Optional[CalendarDay]) -> None:
        if self._listener is not None:
            self._listener(self, day)
