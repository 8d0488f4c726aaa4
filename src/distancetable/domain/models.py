"""
Domain models (Pydantic).

These types are the contract between the table builder and its outputs:
- the origin point (`GeoPoint`)
- one computed grid cell (`DistanceCell`)
- the whole report (`DistanceTable`), rendered as text or dumped as JSON
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class GeoPoint(BaseModel):
    """A geographic point in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class DistanceCell(BaseModel):
    """Planar and spherical distance from the origin to one grid point."""

    latitude: int
    longitude: int
    planar_miles: float = Field(..., ge=0)
    spherical_miles: float = Field(..., ge=0)


class DistanceRow(BaseModel):
    """All cells sharing a longitude, ordered by ascending latitude."""

    longitude: int
    cells: list[DistanceCell]


class DistanceTable(BaseModel):
    """Distances from a named origin to every point of a latitude/longitude grid."""

    origin_name: str
    origin: GeoPoint
    latitudes: list[int]
    longitudes: list[int]
    rows: list[DistanceRow]

    @model_validator(mode="after")
    def _validate_shape(self) -> "DistanceTable":
        if len(self.rows) != len(self.longitudes):
            raise ValueError("table must have exactly one row per longitude")
        for row in self.rows:
            if [c.latitude for c in row.cells] != self.latitudes:
                raise ValueError(f"row {row.longitude} does not cover every latitude column")
        return self
