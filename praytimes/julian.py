"""Gregorian calendar dates to Julian days (Meeus, Astronomical Algorithms)."""

import math

# Julian day of 1970-01-01T00:00Z
UNIX_EPOCH_JD = 2440587.5

_MS_PER_DAY = 86400000


def julian_day(year: int, month: int, day: int) -> float:
    """Julian day at 0h UTC of the given date."""
    if month <= 2:
        year -= 1
        month += 12
    A = math.floor(year / 100)
    B = 2 - A + math.floor(A / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + B - 1524.5


def epoch_millis(year: int, month: int, day: int) -> int:
    """Unix time in milliseconds of UTC midnight on the given date."""
    return round((julian_day(year, month, day) - UNIX_EPOCH_JD) * _MS_PER_DAY)
