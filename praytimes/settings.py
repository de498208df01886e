"""
Calculation settings.

Raw setting values arrive the way users write them ("18", 18.5,
"90 min", "Hanafi") and are turned into typed rules once, when they are
ingested. Numeric text is read permissively: the leading run of
``[0-9.+-]`` characters is the number, an empty run is 0 and an
unreadable one is NaN.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum

TIME_NAMES: dict[str, str] = {
    "imsak": "Imsak",
    "fajr": "Fajr",
    "sunrise": "Sunrise",
    "dhuhr": "Dhuhr",
    "asr": "Asr",
    "sunset": "Sunset",
    "maghrib": "Maghrib",
    "isha": "Isha",
    "midnight": "Midnight",
}

ASR_FACTORS = {"Standard": 1.0, "Hanafi": 2.0}

_NUMBER_PREFIX = re.compile(r"[^0-9.+-]")


def parse_value(raw: object) -> float:
    """Leading number of a setting value, 0 if there is none, NaN if it is malformed."""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    head = _NUMBER_PREFIX.split(str(raw), maxsplit=1)[0]
    if not head:
        return 0.0
    try:
        return float(head)
    except ValueError:
        return math.nan


def is_minutes(raw: object) -> bool:
    return "min" in str(raw)


@dataclass(frozen=True)
class AngleDegrees:
    value: float

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class MinutesOffset:
    value: float

    def __str__(self) -> str:
        return f"{self.value:g} min"


@dataclass(frozen=True)
class NamedMethod:
    name: str
    value: float

    def __str__(self) -> str:
        return self.name


TimeRule = AngleDegrees | MinutesOffset | NamedMethod


class MidnightMethod(str, Enum):
    STANDARD = "Standard"  # mid sunset to sunrise
    JAFARI = "Jafari"  # mid sunset to fajr


class HighLatMethod(str, Enum):
    NONE = "None"
    NIGHT_MIDDLE = "NightMiddle"
    ONE_SEVENTH = "OneSeventh"
    ANGLE_BASED = "AngleBased"


def parse_rule(raw: object) -> AngleDegrees | MinutesOffset:
    """Angle unless the value is written in minutes."""
    if isinstance(raw, (AngleDegrees, MinutesOffset)):
        return raw
    if is_minutes(raw):
        return MinutesOffset(parse_value(raw))
    return AngleDegrees(parse_value(raw))


def parse_minutes(raw: object) -> MinutesOffset:
    if isinstance(raw, MinutesOffset):
        return raw
    return MinutesOffset(parse_value(raw))


def parse_asr(raw: object) -> NamedMethod:
    """Asr juristic method name, or an explicit shadow factor."""
    if isinstance(raw, NamedMethod):
        return raw
    name = str(raw)
    return NamedMethod(name, ASR_FACTORS.get(name) or parse_value(name))


_PARSERS = {
    "imsak": parse_rule,
    "fajr": parse_rule,
    "dhuhr": parse_minutes,
    "asr": parse_asr,
    "maghrib": parse_rule,
    "isha": parse_rule,
    "midnight": MidnightMethod,
    "high_lats": HighLatMethod,
}

_ALIASES = {"highLats": "high_lats"}


@dataclass(frozen=True)
class CalculationSettings:
    imsak: AngleDegrees | MinutesOffset = MinutesOffset(10.0)
    fajr: AngleDegrees | MinutesOffset = AngleDegrees(18.0)
    dhuhr: MinutesOffset = MinutesOffset(0.0)
    asr: NamedMethod = NamedMethod("Standard", 1.0)
    maghrib: AngleDegrees | MinutesOffset = MinutesOffset(0.0)
    isha: AngleDegrees | MinutesOffset = AngleDegrees(17.0)
    midnight: MidnightMethod = MidnightMethod.STANDARD
    high_lats: HighLatMethod = HighLatMethod.NIGHT_MIDDLE

    def merge(self, partial: Mapping[str, object]) -> "CalculationSettings":
        """
        New settings with the given fields replaced.

        Raises ValueError for an unknown field name or an unknown
        midnight / high latitude method.
        """
        changes = {}
        for key, raw in partial.items():
            name = _ALIASES.get(key, key)
            if name not in _PARSERS:
                raise ValueError(f"unknown setting: {key!r}")
            changes[name] = _PARSERS[name](raw)
        return replace(self, **changes)

    def as_dict(self) -> dict[str, object]:
        """Settings written the way they are accepted by ``merge``."""
        out: dict[str, object] = {}
        for f in fields(self):
            rule = getattr(self, f.name)
            if isinstance(rule, Enum):
                out[f.name] = rule.value
            elif isinstance(rule, AngleDegrees):
                out[f.name] = rule.value
            else:
                out[f.name] = str(rule)
        return out


@dataclass(frozen=True)
class TimeOffsets:
    """Per-time tuning in minutes, applied after everything else."""

    imsak: float = 0.0
    fajr: float = 0.0
    sunrise: float = 0.0
    dhuhr: float = 0.0
    asr: float = 0.0
    sunset: float = 0.0
    maghrib: float = 0.0
    isha: float = 0.0
    midnight: float = 0.0

    def merge(self, partial: Mapping[str, float]) -> "TimeOffsets":
        unknown = set(partial) - set(TIME_NAMES)
        if unknown:
            raise ValueError(f"unknown time names: {sorted(unknown)}")
        return replace(self, **{k: parse_value(v) for k, v in partial.items()})

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in TIME_NAMES}
