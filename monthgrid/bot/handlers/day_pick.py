from __future__ import annotations

import logging

from aiogram import Router
from aiogram.types import CallbackQuery

from monthgrid.bot.keyboards.calendar import DayPickCb, KeyboardMonthView, MonthNavCb, NoopCb
from monthgrid.bot.utils.panel import edit_panel_from_callback
from monthgrid.core.adapter import MonthAdapter
from monthgrid.core.month_index import position_of

log = logging.getLogger(__name__)

router = Router()

PICK_TEXT = "Pick a day:"


def render_month(adapter: MonthAdapter, position: int) -> KeyboardMonthView:
    view = adapter.create_view()
    adapter.bind_view(view, position)
    return view


def _position(adapter: MonthAdapter, year: int, month: int) -> int:
    return position_of(year, month, adapter.controller.get_start_date())


@router.callback_query(DayPickCb.filter())
async def pick_day(cq: CallbackQuery, callback_data: DayPickCb, month_adapter: MonthAdapter):
    day = callback_data.to_day(month_adapter.controller.get_time_zone())

    view = month_adapter.create_view()
    view.tap(day)
    # redraw the month the tap came from with the new selection
    month_adapter.bind_view(view, _position(month_adapter, day.year, day.month))
    await edit_panel_from_callback(cq, PICK_TEXT, view.markup)


@router.callback_query(MonthNavCb.filter())
async def nav_month(cq: CallbackQuery, callback_data: MonthNavCb, month_adapter: MonthAdapter):
    delta = -1 if callback_data.direction == "prev" else 1
    position = _position(month_adapter, callback_data.year, callback_data.month) + delta
    if not 0 <= position < month_adapter.item_count:
        log.debug("nav past range end: %s", callback_data.pack())
        await cq.answer()
        return

    await edit_panel_from_callback(cq, PICK_TEXT, render_month(month_adapter, position).markup)


@router.callback_query(NoopCb.filter())
async def noop(cq: CallbackQuery):
    await cq.answer()
