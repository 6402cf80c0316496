from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional

from monthgrid.core.calendar_day import CalendarDay
from monthgrid.utils.dates import TzLike, now_millis

log = logging.getLogger(__name__)

Observer = Callable[[], None]


class SelectionStore:
    """
    Set of selected days.

    allow_multiple is asked at every toggle, so a policy change on the
    controller side applies to the next tap. Observers are called
    synchronously after every mutation, whether membership changed or not.
    """

    def __init__(self, allow_multiple: Callable[[], bool]):
        self._allow_multiple = allow_multiple
        self._days: set[CalendarDay] = set()
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer()

    def initialize(self, tz: TzLike, now_ms: Optional[int] = None) -> None:
        today = CalendarDay.from_epoch_millis(now_millis() if now_ms is None else now_ms, tz)
        self._days = {today}
        log.debug("selection initialized with today=%s", today)
        self._notify()

    def add_selected_days(self, days: Iterable[CalendarDay]) -> None:
        self._days.update(days)
        self._notify()

    def toggle_selected_day(self, day: CalendarDay) -> None:
        if self._allow_multiple():
            if day in self._days:
                self._days.remove(day)
            else:
                self._days.add(day)
        else:
            self._days.clear()
            self._days.add(day)
        log.debug("toggled %s, %d selected", day, len(self._days))
        self._notify()

    @property
    def selected_days(self) -> frozenset[CalendarDay]:
        return frozenset(self._days)

    def __contains__(self, day: object) -> bool:
        return day in self._days

    def __len__(self) -> int:
        return len(self._days)

    def __iter__(self) -> Iterator[CalendarDay]:
        return iter(self._days)
