"""Target instant resolution: the next local midnight of a fixed month/day."""
from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from tick_countdown.types import TargetDateError

logger = logging.getLogger(__name__)

# Feb 29 recurs at most 8 years apart (e.g. 2096 -> 2104).
_MAX_YEAR_SEARCH = 9


def local_midnight(year: int, month: int, day: int, tz: tzinfo | None = None) -> datetime:
    """Midnight of the given date as an aware datetime.

    With ``tz=None`` the system local zone is used, and the UTC offset is the
    one in force on that date, not today's.
    """
    if tz is None:
        return datetime(year, month, day).astimezone()
    return datetime(year, month, day, tzinfo=tz)


def _first_occurrence(year: int, month: int, day: int, tz: tzinfo | None) -> datetime:
    for candidate_year in range(year, year + _MAX_YEAR_SEARCH):
        try:
            return local_midnight(candidate_year, month, day, tz)
        except ValueError:
            continue
    raise TargetDateError(f"{month:02d}-{day:02d} is not a valid calendar date")


def resolve_target(
    now: datetime,
    month: int = 4,
    day: int = 11,
    tz: tzinfo | None = None,
) -> datetime:
    """Return midnight of month/day this year, or next year if already past."""
    if not 1 <= month <= 12:
        raise TargetDateError(f"month must be 1-12, got {month}")
    # 2000 is a leap year, so this only rejects dates that never occur.
    try:
        datetime(2000, month, day)
    except ValueError:
        raise TargetDateError(f"{month:02d}-{day:02d} is not a valid calendar date") from None

    local_now = now.astimezone(tz) if tz is not None else now.astimezone()
    target = _first_occurrence(local_now.year, month, day, tz)
    if target < local_now:
        target = _first_occurrence(local_now.year + 1, month, day, tz)
    logger.info("countdown target resolved to %s", target.isoformat())
    return target
