"""
USNO approximate solar coordinates.

Accurate to about 1 arcminute within two centuries of 2000, which is far
below what a prayer time rounded to the minute needs.
https://aa.usno.navy.mil/faq/sun_approx
"""

from typing import NamedTuple

from praytimes import dmath

J2000 = 2451545.0


class SunPosition(NamedTuple):
    declination: float  # degrees
    equation: float  # equation of time, hours


def sun_position(jd: float) -> SunPosition:
    """Declination and equation of time for a Julian day."""
    D = jd - J2000
    g = dmath.fix_angle(357.529 + 0.98560028 * D)
    q = dmath.fix_angle(280.459 + 0.98564736 * D)
    L = dmath.fix_angle(q + 1.915 * dmath.sin(g) + 0.020 * dmath.sin(2 * g))
    e = 23.439 - 0.00000036 * D

    # Right ascension in hours, same quadrant as L
    RA = dmath.arctan2(dmath.cos(e) * dmath.sin(L), dmath.cos(L)) / 15.0

    return SunPosition(
        declination=dmath.arcsin(dmath.sin(e) * dmath.sin(L)),
        equation=q / 15.0 - dmath.fix_hour(RA),
    )
