"""
Timezone and daylight saving detection from the host's local time.

This is a heuristic, not a timezone database: the standard offset is
taken as the smaller of the offsets on January 1 and July 1, and a date
is in DST when its offset differs from that. It only knows the zone the
process runs in; pass timezone and dst explicitly for anywhere else.
"""

import logging
from datetime import datetime

log = logging.getLogger(__name__)

AUTO = "auto"


def gmt_offset(year: int, month: int, day: int) -> float:
    """Local UTC offset in hours at local noon of the date."""
    local = datetime(year, month, day, 12).astimezone()
    return local.utcoffset().total_seconds() / 3600.0


def auto_timezone(year: int) -> float:
    return min(gmt_offset(year, 1, 1), gmt_offset(year, 7, 1))


def auto_dst(year: int, month: int, day: int) -> int:
    return int(gmt_offset(year, month, day) != auto_timezone(year))


def resolve_timezone(
    year: int,
    month: int,
    day: int,
    timezone: float | str | None = AUTO,
    dst: int | bool | str | None = AUTO,
) -> float:
    """Total offset from UTC in hours, DST included."""
    if timezone is None or timezone == AUTO:
        timezone = auto_timezone(year)
        log.debug("auto timezone for %d: %s", year, timezone)
    if dst is None or dst == AUTO:
        dst = auto_dst(year, month, day)
    return float(timezone) + (1 if float(dst) else 0)
