from monthgrid.core.adapter import MonthAdapter
from monthgrid.core.binder import MonthParams, bind_month_params, selected_day_numbers_in
from monthgrid.core.calendar_day import CalendarDay
from monthgrid.core.controller import DatePickerController, MonthView, SettingsController
from monthgrid.core.month_index import MONTHS_IN_YEAR, month_at, month_count, position_of
from monthgrid.core.selection import SelectionStore

__all__ = [
    "CalendarDay",
    "DatePickerController",
    "MONTHS_IN_YEAR",
    "MonthAdapter",
    "MonthParams",
    "MonthView",
    "SelectionStore",
    "SettingsController",
    "bind_month_params",
    "month_at",
    "month_count",
    "position_of",
    "selected_day_numbers_in",
]
