from __future__ import annotations

import re
import time
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

TzLike = Union[str, tzinfo, None]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def resolve_tz(tz: TzLike) -> tzinfo:
    """
    "UTC" / None -> utc, "+02:00" -> fixed offset, everything else goes to ZoneInfo.
    Raises ValueError for an unknown identifier.
    """
    if tz is None:
        return timezone.utc
    if isinstance(tz, tzinfo):
        return tz

    name = tz.strip()
    if name.upper() in {"UTC", "Z", "GMT"}:
        return timezone.utc

    m = _OFFSET_RE.match(name)
    if m:
        sign, hh, mm = m.group(1), int(m.group(2)), int(m.group(3))
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {name!r}")
        minutes = hh * 60 + mm
        return timezone(timedelta(minutes=-minutes if sign == "-" else minutes))

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as ex:
        raise ValueError(f"Invalid timezone identifier: {name!r}") from ex


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def millis_to_datetime(ms: int, tz: TzLike) -> datetime:
    # timedelta keeps negative and sub-second instants exact
    return (EPOCH + timedelta(milliseconds=ms)).astimezone(resolve_tz(tz))


def month_ordinal(d: date) -> int:
    """Months since year 0 with a 0-based month: 2020-03 -> 2020 * 12 + 2."""
    return d.year * 12 + (d.month - 1)
