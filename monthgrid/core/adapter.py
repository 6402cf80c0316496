from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from monthgrid.core.binder import MonthParams, bind_month_params
from monthgrid.core.calendar_day import CalendarDay
from monthgrid.core.controller import DatePickerController, MonthView
from monthgrid.core.month_index import month_count
from monthgrid.core.selection import SelectionStore

log = logging.getLogger(__name__)


class MonthAdapter:
    """
    Feeds a scrolling list of month views.

    Owns the selection store. Position i of the list is the i-th month after
    the controller's start month; the item id of a position is the position.
    """

    def __init__(self, controller: DatePickerController, view_factory: Callable[[], MonthView]):
        self.controller = controller
        self._view_factory = view_factory
        self._store = SelectionStore(controller.allow_multiple_selection)
        self._store.initialize(controller.get_time_zone())
        self._store.add_selected_days(controller.get_selected_days())

    def register_observer(self, on_dataset_changed: Callable[[], None]) -> Callable[[], None]:
        return self._store.subscribe(on_dataset_changed)

    @property
    def selected_days(self) -> frozenset[CalendarDay]:
        return self._store.selected_days

    def add_selected_days(self, days: Iterable[CalendarDay]) -> None:
        self._store.add_selected_days(days)

    def toggle_selected_day(self, day: CalendarDay) -> None:
        self._store.toggle_selected_day(day)

    @property
    def item_count(self) -> int:
        return month_count(self.controller.get_start_date(), self.controller.get_end_date())

    def item_id(self, position: int) -> int:
        return position

    def create_view(self) -> MonthView:
        view = self._view_factory()
        view.set_on_day_tap(self.on_day_click)
        return view

    def bind_params(self, position: int) -> MonthParams:
        return bind_month_params(position, self.controller, self._store.selected_days)

    def bind_view(self, view: MonthView, position: int) -> None:
        view.render(self.bind_params(position))

    def on_day_click(self, view: MonthView, day: Optional[CalendarDay]) -> None:
        if day is not None:
            self.on_day_tapped(day)

    def on_day_tapped(self, day: CalendarDay) -> None:
        # the controller sees the selection as it was before this tap
        log.debug("day tapped: %s", day)
        self.controller.try_vibrate()
        self.controller.on_day_of_month_selected(day)
        self.toggle_selected_day(day)
