from __future__ import annotations

from aiogram import Router
from aiogram.filters import CommandStart
from aiogram.types import Message

from monthgrid.bot.handlers.day_pick import PICK_TEXT, render_month
from monthgrid.core.adapter import MonthAdapter
from monthgrid.core.calendar_day import CalendarDay
from monthgrid.core.month_index import position_of

router = Router()


@router.message(CommandStart())
async def cmd_start(message: Message, month_adapter: MonthAdapter):
    count = month_adapter.item_count
    if count <= 0:
        await message.answer("No months to show.")
        return

    controller = month_adapter.controller
    today = CalendarDay.today(controller.get_time_zone())
    # open on today's month, clamped to the configured range
    position = position_of(today.year, today.month, controller.get_start_date())
    position = max(0, min(count - 1, position))

    await message.answer(PICK_TEXT, reply_markup=render_month(month_adapter, position).markup)
