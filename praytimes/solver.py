"""
Times at which the sun reaches a given angle.

All times are in hours of local solar time; ``t`` is the approximate
time of the event as a fraction of the day, used to evaluate the sun's
position near the event rather than at midnight.
"""

import math
from enum import Enum

from praytimes import dmath
from praytimes.solar import sun_position

# Standard refraction plus the sun's semi-diameter
HORIZON_ANGLE = 0.833


class Direction(str, Enum):
    CCW = "ccw"  # before solar noon
    CW = "cw"  # after solar noon


def mid_day(jdate: float, t: float) -> float:
    """Solar noon in hours."""
    return dmath.fix_hour(12 - sun_position(jdate + t).equation)


def sun_angle_time(
    jdate: float,
    latitude: float,
    angle: float,
    t: float,
    direction: Direction = Direction.CW,
) -> float:
    """
    Time at which the sun is ``angle`` degrees below the horizon.

    NaN when the sun never reaches that angle on this day.
    """
    decl = sun_position(jdate + t).declination
    noon = mid_day(jdate, t)
    cos_h = (-dmath.sin(angle) - dmath.sin(decl) * dmath.sin(latitude)) / (
        dmath.cos(decl) * dmath.cos(latitude)
    )
    h = dmath.arccos(cos_h) / 15.0
    return noon - h if direction == Direction.CCW else noon + h


def asr_time(jdate: float, latitude: float, factor: float, t: float) -> float:
    """Time at which an object's shadow is ``factor`` times its length plus the noon shadow."""
    decl = sun_position(jdate + t).declination
    angle = -dmath.arccot(factor + dmath.tan(abs(latitude - decl)))
    return sun_angle_time(jdate, latitude, angle, t, Direction.CW)


def rise_set_angle(elevation: float) -> float:
    """Depression of the sun at sunrise/sunset, with dip of the horizon for elevation in meters."""
    return HORIZON_ANGLE + 0.0347 * math.sqrt(elevation)
