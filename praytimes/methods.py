"""
Calculation method presets.

Fajr/isha angles and maghrib/midnight rules of the conventions in common
use. Settings not listed by a preset (imsak, dhuhr, asr, high latitude
method) keep whatever the calculator already has.
"""

from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_METHOD = "MWL"


@dataclass(frozen=True)
class MethodPreset:
    key: str
    name: str
    params: MappingProxyType

    def as_dict(self) -> dict:
        return {"name": self.name, "params": dict(self.params)}


def _preset(key: str, name: str, **params) -> tuple[str, MethodPreset]:
    return key, MethodPreset(key, name, MappingProxyType(params))


METHODS: MappingProxyType = MappingProxyType(
    dict(
        [
            _preset("MWL", "Muslim World League", fajr=18, isha=17, maghrib="0 min", midnight="Standard"),
            _preset(
                "ISNA",
                "Islamic Society of North America (ISNA)",
                fajr=15,
                isha=15,
                maghrib="0 min",
                midnight="Standard",
            ),
            _preset(
                "Egypt",
                "Egyptian General Authority of Survey",
                fajr=19.5,
                isha=17.5,
                maghrib="0 min",
                midnight="Standard",
            ),
            # fajr was 19 degrees before 1430 hijri
            _preset(
                "Makkah",
                "Umm Al-Qura University, Makkah",
                fajr=18.5,
                isha="90 min",
                maghrib="0 min",
                midnight="Standard",
            ),
            _preset(
                "Karachi",
                "University of Islamic Sciences, Karachi",
                fajr=18,
                isha=18,
                maghrib="0 min",
                midnight="Standard",
            ),
            # isha is not explicitly specified in this method
            _preset(
                "Tehran",
                "Institute of Geophysics, University of Tehran",
                fajr=17.7,
                isha=14,
                maghrib=4.5,
                midnight="Jafari",
            ),
            _preset(
                "Jafari",
                "Shia Ithna-Ashari, Leva Institute, Qum",
                fajr=16,
                isha=14,
                maghrib=4,
                midnight="Jafari",
            ),
        ]
    )
)
