"""
Object interface to the prayer time engine.

A ``PrayTimes`` holds a calculation method, settings and tuning offsets.
Settings and offsets are immutable and replaced whole by ``adjust``,
``tune`` and ``set_method``, so every ``get_times`` call works on one
consistent snapshot. The instance itself is not locked: callers that
adjust one calculator from several threads must synchronise, or use one
calculator per thread, or call ``engine.compute_times`` directly.
"""

import logging
from collections.abc import Mapping, Sequence
from datetime import date as date_type
from types import MappingProxyType

from praytimes.engine import GeoCoordinate, PrayerTimesResult, compute_times, date_parts
from praytimes.formatting import INVALID_TIME, TIME_SUFFIXES, TimeFormat
from praytimes.methods import DEFAULT_METHOD, METHODS
from praytimes.settings import CalculationSettings, TimeOffsets
from praytimes.timezone import AUTO, resolve_timezone

log = logging.getLogger(__name__)


class PrayTimes:
    def __init__(
        self,
        method: str | None = None,
        *,
        time_format: TimeFormat | str = TimeFormat.H24,
        num_iterations: int = 1,
        time_suffixes: tuple[str, str] = TIME_SUFFIXES,
        invalid_time: str = INVALID_TIME,
    ):
        self._method = DEFAULT_METHOD
        self._settings = CalculationSettings()
        self._offsets = TimeOffsets()
        self.time_format = TimeFormat(time_format)
        self.num_iterations = num_iterations
        self.time_suffixes = time_suffixes
        self.invalid_time = invalid_time
        self.set_method(method or DEFAULT_METHOD)

    def __repr__(self) -> str:
        return f"PrayTimes(method={self._method!r})"

    @property
    def method(self) -> str:
        return self._method

    @property
    def settings(self) -> CalculationSettings:
        return self._settings

    @property
    def offsets(self) -> TimeOffsets:
        return self._offsets

    def set_method(self, method: str) -> None:
        """Apply a preset's parameters. Unknown names are ignored."""
        preset = METHODS.get(method)
        if preset is None:
            log.debug("unknown calculation method %r, keeping %s", method, self._method)
            return
        self._settings = self._settings.merge(preset.params)
        self._method = method

    def adjust(self, params: Mapping[str, object] | None = None, **kwargs: object) -> None:
        """
        Change calculation settings.

        Accepts imsak, fajr, maghrib, isha (angle in degrees, or "N min"),
        dhuhr (minutes), asr ("Standard", "Hanafi" or a shadow factor),
        midnight ("Standard", "Jafari") and high_lats / highLats ("None",
        "NightMiddle", "OneSeventh", "AngleBased").
        """
        self._settings = self._settings.merge({**(params or {}), **kwargs})

    def tune(self, offsets: Mapping[str, float] | None = None, **kwargs: float) -> None:
        """Set minute offsets added to the final times."""
        self._offsets = self._offsets.merge({**(offsets or {}), **kwargs})

    def get_method(self) -> str:
        return self._method

    def get_setting(self) -> dict[str, object]:
        return self._settings.as_dict()

    def get_offsets(self) -> dict[str, float]:
        return self._offsets.as_dict()

    def get_defaults(self) -> MappingProxyType:
        return METHODS

    def get_times(
        self,
        date: date_type | Sequence[int],
        coords: GeoCoordinate | Sequence[float],
        timezone: float | str | None = AUTO,
        dst: int | bool | str | None = AUTO,
        fmt: TimeFormat | str | None = None,
    ) -> PrayerTimesResult:
        """
        Prayer times for a date at a location.

        date: datetime.date / datetime, or (year, month, day).
        coords: GeoCoordinate or (latitude, longitude[, elevation]).
        timezone: hours east of UTC, or "auto" for the host's zone.
        dst: 0/1, or "auto" to detect from the host's zone.
        fmt: output format for this call, defaults to ``time_format``.
        """
        year, month, day = date_parts(date)
        zone = resolve_timezone(year, month, day, timezone, dst)
        return compute_times(
            self._settings,
            self._offsets,
            (year, month, day),
            coords,
            zone,
            time_format=fmt or self.time_format,
            iterations=self.num_iterations,
            suffixes=self.time_suffixes,
            invalid_time=self.invalid_time,
        )


def create(method: str | None = None, **kwargs) -> PrayTimes:
    return PrayTimes(method, **kwargs)
