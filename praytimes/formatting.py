"""Conversion of decimal hours to the output formats."""

import math
from enum import Enum

from praytimes.dmath import fix_hour

INVALID_TIME = "-----"
TIME_SUFFIXES = ("am", "pm")


class TimeFormat(str, Enum):
    H24 = "24h"
    H12 = "12h"
    H12_NS = "12hNS"  # 12-hour, no suffix
    FLOAT = "Float"
    TIMESTAMP = "Timestamp"


def format_time(
    time: float,
    fmt: TimeFormat | str = TimeFormat.H24,
    *,
    timestamp: int = 0,
    timezone: float = 0.0,
    suffixes: tuple[str, str] = TIME_SUFFIXES,
    invalid_time: str = INVALID_TIME,
) -> str | float | int:
    """
    Format decimal hours.

    timestamp: Unix millis of UTC midnight of the date, used by the
        Timestamp format together with timezone (hours, DST included).
    Returns invalid_time for NaN.
    """
    fmt = TimeFormat(fmt)
    if math.isnan(time):
        return invalid_time
    if fmt is TimeFormat.FLOAT:
        return time
    if fmt is TimeFormat.TIMESTAMP:
        return timestamp + math.floor((time - timezone) * 60 * 60 * 1000)

    time = fix_hour(time + 0.5 / 60)  # round to the nearest minute
    hours = math.floor(time)
    minutes = math.floor((time - hours) * 60)
    if fmt is TimeFormat.H24:
        return f"{hours:02d}:{minutes:02d}"
    text = f"{(hours + 12 - 1) % 12 + 1}:{minutes:02d}"
    if fmt is TimeFormat.H12:
        text += " " + suffixes[0 if hours < 12 else 1]
    return text
