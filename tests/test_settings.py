import dataclasses
import math

import pytest

from praytimes.methods import METHODS
from praytimes.settings import (
    AngleDegrees,
    CalculationSettings,
    HighLatMethod,
    MidnightMethod,
    MinutesOffset,
    NamedMethod,
    TimeOffsets,
    parse_asr,
    parse_rule,
    parse_value,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (18, 18.0),
        (17.5, 17.5),
        ("18", 18.0),
        ("90 min", 90.0),
        ("5deg", 5.0),
        ("+5", 5.0),
        ("", 0.0),
        ("Standard", 0.0),
    ],
)
def test_parse_value(raw, expected):
    assert parse_value(raw) == expected


@pytest.mark.parametrize("raw", ["1.2.3", "-", "5+"])
def test_parse_value_malformed_is_nan(raw):
    assert math.isnan(parse_value(raw))


def test_parse_rule():
    assert parse_rule(18) == AngleDegrees(18.0)
    assert parse_rule("19.5") == AngleDegrees(19.5)
    assert parse_rule("90 min") == MinutesOffset(90.0)
    assert parse_rule(MinutesOffset(5.0)) == MinutesOffset(5.0)


def test_parse_asr():
    assert parse_asr("Standard") == NamedMethod("Standard", 1.0)
    assert parse_asr("Hanafi").value == 2.0
    assert parse_asr("1.5").value == 1.5


def test_default_settings():
    s = CalculationSettings()
    assert s.imsak == MinutesOffset(10.0)
    assert s.asr.value == 1.0
    assert s.high_lats is HighLatMethod.NIGHT_MIDDLE
    assert s.midnight is MidnightMethod.STANDARD


def test_merge_returns_new_settings():
    s = CalculationSettings()
    merged = s.merge({"isha": "90 min", "highLats": "AngleBased", "dhuhr": 2})
    assert merged.isha == MinutesOffset(90.0)
    assert merged.high_lats is HighLatMethod.ANGLE_BASED
    assert merged.dhuhr == MinutesOffset(2.0)
    assert s.isha == AngleDegrees(17.0)


def test_merge_rejects_unknown_names():
    with pytest.raises(ValueError):
        CalculationSettings().merge({"sunrise": 1})
    with pytest.raises(ValueError):
        CalculationSettings().merge({"high_lats": "Sometimes"})
    with pytest.raises(ValueError):
        CalculationSettings().merge({"midnight": "Late"})


def test_settings_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CalculationSettings().fajr = AngleDegrees(15.0)


def test_as_dict_round_trips():
    s = CalculationSettings().merge({"asr": "Hanafi", "isha": "90 min"})
    assert s.as_dict() == {
        "imsak": "10 min",
        "fajr": 18.0,
        "dhuhr": "0 min",
        "asr": "Hanafi",
        "maghrib": "0 min",
        "isha": "90 min",
        "midnight": "Standard",
        "high_lats": "NightMiddle",
    }
    assert CalculationSettings().merge(s.as_dict()) == s


def test_time_offsets():
    offsets = TimeOffsets().merge({"sunset": 10, "isha": "-3"})
    assert offsets.sunset == 10.0
    assert offsets.isha == -3.0
    assert offsets.fajr == 0.0
    with pytest.raises(ValueError):
        TimeOffsets().merge({"tahajjud": 5})


def test_presets_are_read_only():
    assert set(METHODS) == {"MWL", "ISNA", "Egypt", "Makkah", "Karachi", "Tehran", "Jafari"}
    with pytest.raises(TypeError):
        METHODS["Custom"] = None
    with pytest.raises(TypeError):
        METHODS["MWL"].params["fajr"] = 20


@pytest.mark.parametrize("key", sorted(METHODS))
def test_every_preset_applies(key):
    s = CalculationSettings().merge(METHODS[key].params)
    assert isinstance(s.fajr, AngleDegrees)
    assert s.fajr.value == METHODS[key].params["fajr"]
