from __future__ import annotations

import logging
from datetime import date

from monthgrid.utils.dates import month_ordinal

log = logging.getLogger(__name__)

MONTHS_IN_YEAR = 12


def month_count(start: date, end: date) -> int:
    """
    Number of months shown for [start; end], both ends inclusive.
    An inverted range gives 0 or less; the container renders no items then.
    """
    count = month_ordinal(end) - month_ordinal(start) + 1
    if count <= 0:
        log.debug("end date %s precedes start date %s", end, start)
    return count


def month_at(position: int, start: date, min_year: int) -> tuple[int, int]:
    """
    (year, 0-based month) shown at a zero-based position.

    min_year must be the start date's year, otherwise every year is off.
    """
    if min_year != start.year:
        raise ValueError(f"min_year {min_year} does not match start date year {start.year}")
    offset = position + start.month - 1
    return offset // MONTHS_IN_YEAR + min_year, offset % MONTHS_IN_YEAR


def position_of(year: int, month: int, start: date) -> int:
    # inverse of month_at; may fall outside [0; month_count), callers clamp
    return year * MONTHS_IN_YEAR + month - month_ordinal(start)
