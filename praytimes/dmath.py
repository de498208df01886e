"""
Degree-based trigonometry and range normalisation.

Every angle in and out of this module is in degrees. Inverse functions
return NaN outside their domain instead of raising, so an impossible
sun angle travels through the pipeline as NaN.
"""

import math


def dtr(d: float) -> float:
    return d * math.pi / 180.0


def rtd(r: float) -> float:
    return r * 180.0 / math.pi


def sin(d: float) -> float:
    return math.sin(dtr(d))


def cos(d: float) -> float:
    return math.cos(dtr(d))


def tan(d: float) -> float:
    return math.tan(dtr(d))


def arcsin(x: float) -> float:
    if abs(x) > 1:
        return math.nan
    return rtd(math.asin(x))


def arccos(x: float) -> float:
    if abs(x) > 1:
        return math.nan
    return rtd(math.acos(x))


def arctan(x: float) -> float:
    return rtd(math.atan(x))


def arccot(x: float) -> float:
    if x == 0:
        return math.copysign(90.0, x)
    return rtd(math.atan(1.0 / x))


def arctan2(y: float, x: float) -> float:
    return rtd(math.atan2(y, x))


def fix(a: float, b: float) -> float:
    """Reduce a into [0, b) as a - b*floor(a/b)."""
    if not math.isfinite(a):
        return math.nan
    a = a - b * math.floor(a / b)
    return a + b if a < 0 else a


def fix_angle(a: float) -> float:
    """Normalize angle to [0, 360)."""
    return fix(a, 360.0)


def fix_hour(a: float) -> float:
    """Normalize hour to [0, 24)."""
    return fix(a, 24.0)
