from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage

from monthgrid.bot.handlers import build_router
from monthgrid.bot.keyboards.calendar import KeyboardMonthView
from monthgrid.config import PickerSettings, configure_logging
from monthgrid.core.adapter import MonthAdapter
from monthgrid.core.controller import MonthView, SettingsController

log = logging.getLogger(__name__)


def build_adapter(
    view_factory: Callable[[], MonthView],
    settings: Optional[PickerSettings] = None,
    haptics: Optional[Callable[[], None]] = None,
) -> MonthAdapter:
    settings = settings or PickerSettings()
    configure_logging(settings.log_level)

    controller = SettingsController(settings, haptics=haptics)
    adapter = MonthAdapter(controller, view_factory)
    count = adapter.item_count
    if count <= 0:
        log.warning("end date %s precedes start date %s, nothing to show", settings.end_date, settings.start_date)
    log.info(
        "month adapter ready: %s..%s, %d months, tz=%s",
        settings.start_date,
        settings.end_date,
        count,
        settings.timezone,
    )
    return adapter


def build_dispatcher(adapter: MonthAdapter) -> Dispatcher:
    """Dispatcher whose handlers receive the adapter as `month_adapter`."""
    dp = Dispatcher(storage=MemoryStorage(), month_adapter=adapter)
    dp.include_router(build_router())
    return dp


async def main() -> None:
    settings = PickerSettings()
    if not settings.bot_token:
        raise RuntimeError("PICKER_BOT_TOKEN is not set")

    adapter = build_adapter(KeyboardMonthView, settings)
    bot = Bot(token=settings.bot_token)
    dp = build_dispatcher(adapter)

    await dp.start_polling(bot)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
