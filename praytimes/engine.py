"""
Prayer times for one day.

``compute_times`` is a pure function of its arguments: everything that
is specific to one calculation (location, working Julian date, timezone)
lives in a ``_Day`` built for that call, so it is safe to call from
several threads at once.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date as date_type
from typing import TypedDict

from praytimes.dmath import fix_hour
from praytimes.formatting import INVALID_TIME, TIME_SUFFIXES, TimeFormat, format_time
from praytimes.julian import epoch_millis, julian_day
from praytimes.settings import (
    CalculationSettings,
    HighLatMethod,
    MidnightMethod,
    MinutesOffset,
    TimeOffsets,
)
from praytimes.solver import Direction, asr_time, mid_day, rise_set_angle, sun_angle_time

log = logging.getLogger(__name__)

# Initial guesses, hours of local solar time
DEFAULT_TIMES: dict[str, float] = {
    "imsak": 5,
    "fajr": 5,
    "sunrise": 6,
    "dhuhr": 12,
    "asr": 13,
    "sunset": 18,
    "maghrib": 18,
    "isha": 18,
}


class PrayerTimesResult(TypedDict):
    imsak: str | float | int
    fajr: str | float | int
    sunrise: str | float | int
    dhuhr: str | float | int
    asr: str | float | int
    sunset: str | float | int
    maghrib: str | float | int
    isha: str | float | int
    midnight: str | float | int


@dataclass(frozen=True)
class GeoCoordinate:
    latitude: float
    longitude: float
    elevation: float = 0.0  # meters

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"longitude out of range: {self.longitude}")
        if not self.elevation >= 0:
            raise ValueError(f"elevation must be >= 0: {self.elevation}")

    @classmethod
    def of(cls, coords: "GeoCoordinate | Sequence[float]") -> "GeoCoordinate":
        """Accept a GeoCoordinate or a (latitude, longitude[, elevation]) sequence."""
        if isinstance(coords, cls):
            return coords
        if not 2 <= len(coords) <= 3:
            raise ValueError("coords must be (latitude, longitude[, elevation])")
        elevation = coords[2] if len(coords) == 3 and coords[2] else 0.0
        return cls(float(coords[0]), float(coords[1]), float(elevation))


def date_parts(day: date_type | Sequence[int]) -> tuple[int, int, int]:
    """(year, month, day) of a date, datetime or (year, month, day) sequence."""
    if isinstance(day, date_type):
        return day.year, day.month, day.day
    if len(day) != 3:
        raise ValueError("date must be (year, month, day)")
    year, month, dom = (int(part) for part in day)
    return year, month, dom


def time_diff(time1: float, time2: float) -> float:
    """Forward difference from time1 to time2, in [0, 24)."""
    return fix_hour(time2 - time1)


@dataclass(frozen=True)
class _Day:
    settings: CalculationSettings
    coords: GeoCoordinate
    jdate: float  # Julian date corrected for longitude

    def compute_prayer_times(self, hours: dict[str, float]) -> dict[str, float]:
        t = {name: h / 24 for name, h in hours.items()}
        s = self.settings
        lat = self.coords.latitude
        rise_set = rise_set_angle(self.coords.elevation)
        return {
            "imsak": sun_angle_time(self.jdate, lat, s.imsak.value, t["imsak"], Direction.CCW),
            "fajr": sun_angle_time(self.jdate, lat, s.fajr.value, t["fajr"], Direction.CCW),
            "sunrise": sun_angle_time(self.jdate, lat, rise_set, t["sunrise"], Direction.CCW),
            "dhuhr": mid_day(self.jdate, t["dhuhr"]),
            "asr": asr_time(self.jdate, lat, s.asr.value, t["asr"]),
            "sunset": sun_angle_time(self.jdate, lat, rise_set, t["sunset"]),
            "maghrib": sun_angle_time(self.jdate, lat, s.maghrib.value, t["maghrib"]),
            "isha": sun_angle_time(self.jdate, lat, s.isha.value, t["isha"]),
        }

    def adjust_times(self, times: dict[str, float], timezone: float) -> dict[str, float]:
        s = self.settings
        shift = timezone - self.coords.longitude / 15
        times = {name: t + shift for name, t in times.items()}

        if s.high_lats is not HighLatMethod.NONE:
            times = self.adjust_high_lats(times)

        if isinstance(s.imsak, MinutesOffset):
            times["imsak"] = times["fajr"] - s.imsak.value / 60
        if isinstance(s.maghrib, MinutesOffset):
            times["maghrib"] = times["sunset"] + s.maghrib.value / 60
        if isinstance(s.isha, MinutesOffset):
            times["isha"] = times["maghrib"] + s.isha.value / 60
        times["dhuhr"] += s.dhuhr.value / 60
        return times

    def adjust_high_lats(self, times: dict[str, float]) -> dict[str, float]:
        s = self.settings
        night = time_diff(times["sunset"], times["sunrise"])
        for name, base, direction in (
            ("imsak", "sunrise", Direction.CCW),
            ("fajr", "sunrise", Direction.CCW),
            ("isha", "sunset", Direction.CW),
            ("maghrib", "sunset", Direction.CW),
        ):
            angle = getattr(s, name).value
            adjusted = self.adjust_hl_time(times[name], times[base], angle, night, direction)
            if adjusted != times[name]:
                log.debug("high latitude adjustment (%s): %s %s -> %s", s.high_lats.value, name, times[name], adjusted)
            times[name] = adjusted
        return times

    def adjust_hl_time(self, time: float, base: float, angle: float, night: float, direction: Direction) -> float:
        portion = self.night_portion(angle, night)
        if direction is Direction.CCW:
            diff = time_diff(time, base)
        else:
            diff = time_diff(base, time)
        if math.isnan(time) or diff > portion:
            time = base + (-portion if direction is Direction.CCW else portion)
        return time

    def night_portion(self, angle: float, night: float) -> float:
        method = self.settings.high_lats
        portion = 1 / 2  # NightMiddle
        if method is HighLatMethod.ANGLE_BASED:
            portion = 1 / 60 * angle
        if method is HighLatMethod.ONE_SEVENTH:
            portion = 1 / 7
        return portion * night


def compute_times(
    settings: CalculationSettings,
    offsets: TimeOffsets,
    day: date_type | Sequence[int],
    coords: GeoCoordinate | Sequence[float],
    timezone: float,
    *,
    time_format: TimeFormat | str = TimeFormat.H24,
    iterations: int = 1,
    suffixes: tuple[str, str] = TIME_SUFFIXES,
    invalid_time: str = INVALID_TIME,
) -> PrayerTimesResult:
    """
    Prayer times for one day at one place.

    timezone: offset from UTC in hours with any DST already added.
    iterations: number of refinement passes; each pass re-evaluates the
        sun at the times found by the previous one.
    """
    year, month, dom = date_parts(day)
    coords = GeoCoordinate.of(coords)
    time_format = TimeFormat(time_format)
    ctx = _Day(settings, coords, julian_day(year, month, dom) - coords.longitude / 360)

    times = dict(DEFAULT_TIMES)
    for _ in range(iterations):
        times = ctx.compute_prayer_times(times)

    times = ctx.adjust_times(times, timezone)

    if settings.midnight is MidnightMethod.JAFARI:
        times["midnight"] = times["sunset"] + time_diff(times["sunset"], times["fajr"] + 24) / 2
    else:
        times["midnight"] = times["sunset"] + time_diff(times["sunset"], times["sunrise"] + 24) / 2

    # tuning goes last so it never moves a time derived from another
    for name in times:
        times[name] += getattr(offsets, name) / 60

    invalid = [name for name, t in times.items() if math.isnan(t)]
    if invalid:
        log.debug("no valid time for %s at %s on %04d-%02d-%02d", invalid, coords, year, month, dom)

    timestamp = epoch_millis(year, month, dom)
    return PrayerTimesResult(
        **{
            name: format_time(
                t,
                time_format,
                timestamp=timestamp,
                timezone=timezone,
                suffixes=suffixes,
                invalid_time=invalid_time,
            )
            for name, t in times.items()
        }
    )
