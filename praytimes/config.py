"""
Configuration for calculators built by the service.

Values come from an optional YAML file, named by the ``path`` argument
or the PRAYTIMES_CONFIG environment variable:

    method: ISNA
    format: 12h
    iterations: 1
    adjust:
      asr: Hanafi
      highLats: AngleBased
    tune:
      dhuhr: 2

PRAYTIMES_METHOD and PRAYTIMES_FORMAT override the file.
"""

import os
from dataclasses import dataclass, field

import yaml

from praytimes.calculator import PrayTimes
from praytimes.formatting import TimeFormat
from praytimes.methods import DEFAULT_METHOD


@dataclass(frozen=True)
class AppConfig:
    method: str = DEFAULT_METHOD
    time_format: TimeFormat = TimeFormat.H24
    iterations: int = 1
    adjust: dict = field(default_factory=dict)
    tune: dict = field(default_factory=dict)

    def build_calculator(self, method: str | None = None) -> PrayTimes:
        calc = PrayTimes(self.method, time_format=self.time_format, num_iterations=self.iterations)
        if method:
            calc.set_method(method)
        if self.adjust:
            calc.adjust(self.adjust)
        if self.tune:
            calc.tune(self.tune)
        return calc


def load_config(path: str | None = None) -> AppConfig:
    """
    Read the YAML file (if any), then apply environment overrides.

    Raises ValueError for an unknown format or non-mapping sections.
    """
    path = path or os.getenv("PRAYTIMES_CONFIG")
    data: dict = {}
    if path:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    method = os.getenv("PRAYTIMES_METHOD") or data.get("method") or DEFAULT_METHOD
    fmt = os.getenv("PRAYTIMES_FORMAT") or data.get("format") or TimeFormat.H24.value

    adjust = data.get("adjust") or {}
    tune = data.get("tune") or {}
    if not isinstance(adjust, dict) or not isinstance(tune, dict):
        raise ValueError("'adjust' and 'tune' must be mappings")

    return AppConfig(
        method=str(method),
        time_format=TimeFormat(fmt),
        iterations=int(data.get("iterations", 1)),
        adjust=adjust,
        tune=tune,
    )
