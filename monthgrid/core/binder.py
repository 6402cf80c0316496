from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from monthgrid.core.calendar_day import CalendarDay
from monthgrid.core.controller import DatePickerController
from monthgrid.core.month_index import month_at


@dataclass(frozen=True)
class MonthParams:
    """Everything a month view needs; it never looks at the selection store."""

    year: int
    month: int
    first_day_of_week: int
    selected_day_numbers: frozenset[int]


def selected_day_numbers_in(selection: Iterable[CalendarDay], year: int, month: int) -> frozenset[int]:
    return frozenset(d.day for d in selection if d.year == year and d.month == month)


def bind_month_params(
    position: int,
    controller: DatePickerController,
    selection: Iterable[CalendarDay],
) -> MonthParams:
    year, month = month_at(position, controller.get_start_date(), controller.get_min_year())
    return MonthParams(
        year=year,
        month=month,
        first_day_of_week=controller.get_first_day_of_week(),
        selected_day_numbers=selected_day_numbers_in(selection, year, month),
    )
