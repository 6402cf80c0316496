from __future__ import annotations

from typing import Optional

from aiogram.exceptions import TelegramBadRequest
from aiogram.types import CallbackQuery, InlineKeyboardMarkup


def _is_not_modified(err: Exception) -> bool:
    return isinstance(err, TelegramBadRequest) and "message is not modified" in str(err).lower()


async def edit_panel_from_callback(
    cq: CallbackQuery,
    text: str,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> None:
    try:
        await cq.message.edit_text(text=text, reply_markup=reply_markup)
    except TelegramBadRequest as e:
        if not _is_not_modified(e):
            raise
    finally:
        await cq.answer()
