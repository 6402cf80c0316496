from datetime import date

import pytest

from monthgrid.core.adapter import MonthAdapter
from monthgrid.core.calendar_day import CalendarDay

from .conftest import RecordingView


@pytest.fixture
def adapter(controller):
    return MonthAdapter(controller, RecordingView)


def test_seeded_with_today_and_controller_selection(controller, day):
    controller.initial = {day(2020, 3, 5), day(2020, 4, 1)}
    adapter = MonthAdapter(controller, RecordingView)

    today = CalendarDay.today(controller.tz)
    assert adapter.selected_days == {today, day(2020, 3, 5), day(2020, 4, 1)}


def test_item_count_and_ids(adapter, controller):
    assert adapter.item_count == 3
    assert [adapter.item_id(p) for p in range(adapter.item_count)] == [0, 1, 2]

    controller.end = date(2020, 1, 1)
    assert adapter.item_count <= 0


def test_create_and_bind_view(adapter, day):
    adapter.toggle_selected_day(day(2020, 3, 5))
    view = adapter.create_view()
    assert view.listener == adapter.on_day_click

    adapter.bind_view(view, 1)
    params = view.rendered[-1]
    assert (params.year, params.month) == (2020, 3)
    assert params.selected_day_numbers == {5}
    assert params.first_day_of_week == 0


def test_tap_order_and_single_select(adapter, controller, day):
    events = controller.calls
    seen_by_controller = []

    def selected(d):
        events.append(("selected", d))
        seen_by_controller.append(adapter.selected_days)

    controller.on_day_of_month_selected = selected
    adapter.register_observer(lambda: events.append(("changed",)))

    before = adapter.selected_days
    view = adapter.create_view()
    view.tap(day(2020, 3, 5))

    assert [e[0] for e in events] == ["vibrate", "selected", "changed"]
    assert events[1] == ("selected", day(2020, 3, 5))
    assert seen_by_controller == [before]
    assert adapter.selected_days == {day(2020, 3, 5)}


def test_tap_without_day_is_ignored(adapter, controller):
    before = adapter.selected_days
    adapter.create_view().tap(None)
    assert controller.calls == []
    assert adapter.selected_days == before


def test_multi_select_taps(adapter, controller, day):
    controller.multiple = True
    today = CalendarDay.today(controller.tz)
    view = adapter.create_view()

    view.tap(day(2020, 3, 5))
    view.tap(day(2020, 3, 6))
    view.tap(day(2020, 3, 5))

    assert adapter.selected_days == {today, day(2020, 3, 6)}
    assert [c[1] for c in controller.calls if c[0] == "selected"] == [
        day(2020, 3, 5),
        day(2020, 3, 6),
        day(2020, 3, 5),
    ]


def test_dataset_changed_after_every_mutation(adapter, day):
    signals = []
    adapter.register_observer(lambda: signals.append("changed"))

    adapter.on_day_tapped(day(2020, 3, 5))
    adapter.on_day_tapped(day(2020, 3, 5))
    adapter.add_selected_days({day(2020, 4, 1)})

    assert signals == ["changed"] * 3


def test_bind_reflects_new_selection(adapter, day):
    view = adapter.create_view()
    adapter.bind_view(view, 2)
    adapter.on_day_tapped(day(2020, 4, 30))
    adapter.bind_view(view, 2)

    assert view.rendered[-1].selected_day_numbers == {30}
    assert adapter.bind_params(2) == view.rendered[-1]
