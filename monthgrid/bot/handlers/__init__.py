from aiogram import Router

from .start import router as start_router
from .day_pick import router as day_pick_router


def build_router() -> Router:
    r = Router()
    r.include_router(start_router)
    r.include_router(day_pick_router)
    return r
