"""Islamic prayer times from the sun's position (PrayTimes algorithm)."""

from praytimes.calculator import PrayTimes, create
from praytimes.engine import GeoCoordinate, PrayerTimesResult, compute_times
from praytimes.formatting import TimeFormat, format_time
from praytimes.methods import METHODS, MethodPreset
from praytimes.settings import (
    TIME_NAMES,
    AngleDegrees,
    CalculationSettings,
    HighLatMethod,
    MidnightMethod,
    MinutesOffset,
    NamedMethod,
    TimeOffsets,
    TimeRule,
)

__all__ = [
    "METHODS",
    "TIME_NAMES",
    "AngleDegrees",
    "CalculationSettings",
    "GeoCoordinate",
    "HighLatMethod",
    "MethodPreset",
    "MidnightMethod",
    "MinutesOffset",
    "NamedMethod",
    "PrayTimes",
    "PrayerTimesResult",
    "TimeFormat",
    "TimeOffsets",
    "TimeRule",
    "compute_times",
    "create",
    "format_time",
]
