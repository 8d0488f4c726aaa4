"""
Grid iteration.

Walks the configured longitude range (rows) and latitude range (columns) and
computes both distance metrics from the origin for every grid point.
"""

from __future__ import annotations

import logging

from distancetable.config.settings import AxisSettings, Settings
from distancetable.core.geo import planar_distance_miles, spherical_distance_miles
from distancetable.domain.models import DistanceCell, DistanceRow, DistanceTable, GeoPoint

logger = logging.getLogger(__name__)


def axis_values(minimum: int, maximum: int, increment: int) -> list[int]:
    """Return the inclusive ascending sequence minimum, minimum+increment, ... <= maximum."""
    if increment <= 0:
        raise ValueError(f"increment must be positive, got {increment}")
    return list(range(minimum, maximum + 1, increment))


def _axis(axis: AxisSettings) -> list[int]:
    return axis_values(axis.minimum, axis.maximum, axis.increment)


def build_distance_table(settings: Settings) -> DistanceTable:
    """Compute planar and spherical distances from the origin to each grid point."""
    origin = GeoPoint(lat=settings.origin.lat, lon=settings.origin.lon)
    radius = settings.geo.earth_radius_miles
    latitudes = _axis(settings.grid.latitude)
    longitudes = _axis(settings.grid.longitude)

    logger.debug(
        "Building distance table from %s: %d longitudes x %d latitudes (R=%s mi)",
        settings.origin.name,
        len(longitudes),
        len(latitudes),
        radius,
    )

    rows: list[DistanceRow] = []
    for longitude in longitudes:
        cells = [
            DistanceCell(
                latitude=latitude,
                longitude=longitude,
                planar_miles=planar_distance_miles(origin.lat, origin.lon, latitude, longitude, radius),
                spherical_miles=spherical_distance_miles(origin.lat, origin.lon, latitude, longitude, radius),
            )
            for latitude in latitudes
        ]
        rows.append(DistanceRow(longitude=longitude, cells=cells))

    return DistanceTable(
        origin_name=settings.origin.name,
        origin=origin,
        latitudes=latitudes,
        longitudes=longitudes,
        rows=rows,
    )
