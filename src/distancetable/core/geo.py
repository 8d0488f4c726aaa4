"""
Distance formulas.

Two approximations of the distance between points given in decimal degrees:
- `planar_distance_miles`: flat-earth projection, longitude scaled by cos(mean latitude)
- `spherical_distance_miles`: great-circle distance via the spherical law of cosines

Both work on a sphere of fixed radius (miles) and take plain floats so callers
can feed grid values without wrapping them first.
"""

from __future__ import annotations

from math import acos, cos, radians, sin, sqrt

EARTH_RADIUS_MILES = 3959.0


def planar_distance_miles(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius: float = EARTH_RADIUS_MILES,
) -> float:
    """Compute the flat-earth approximation distance in miles between two points."""
    lat1_r = radians(lat1)
    lon1_r = radians(lon1)
    lat2_r = radians(lat2)
    lon2_r = radians(lon2)

    dlat = lat1_r - lat2_r
    dlon = lon1_r - lon2_r
    lat_avg = (lat1_r + lat2_r) / 2

    return radius * sqrt(dlat**2 + (cos(lat_avg) * dlon) ** 2)


def spherical_distance_miles(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius: float = EARTH_RADIUS_MILES,
) -> float:
    """Compute the great-circle distance in miles between two points.

    The cosine of the central angle is clamped into [-1, 1]: for identical or
    near-identical points rounding can push it just past 1.0, where `acos` would fail.
    """
    lat1_r = radians(lat1)
    lat2_r = radians(lat2)
    dlon = radians(lon1) - radians(lon2)

    c = sin(lat1_r) * sin(lat2_r) + cos(lat1_r) * cos(lat2_r) * cos(dlon)
    return radius * acos(max(-1.0, min(1.0, c)))
