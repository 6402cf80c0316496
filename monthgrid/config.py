from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from monthgrid.utils.dates import resolve_tz


class PickerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PICKER_", env_file=".env", env_file_encoding="utf-8")

    timezone: str = "UTC"
    start_date: date = date(1900, 1, 1)
    end_date: date = date(2100, 12, 31)

    # 0 = Monday, as calendar.Calendar(firstweekday=...)
    first_day_of_week: int = Field(default=0, ge=0, le=6)
    allow_multiple_selection: bool = False

    # example: PICKER_INITIAL_SELECTION='["2021-05-10","2021-05-20"]'
    initial_selection: List[date] = Field(default_factory=list)

    bot_token: str = ""
    log_level: str = "INFO"

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, v: str) -> str:
        resolve_tz(v)
        return v

    @property
    def tzinfo(self) -> tzinfo:
        return resolve_tz(self.timezone)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper())
