"""Point - The fundamental geometry atom for OrbitArea editing.

A Point is a single geographic coordinate on the spherical Earth model.
It is created from user input (click/hover) or computed by GeoCalculator.

Used by:
- OrbitArea (axis endpoints)
- EditorState (placed points and cursor position)
- RacetrackPolygonGenerator (polygon rings)
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """A geographic point in decimal degrees.

    Attributes:
        latitude: Latitude in decimal degrees, expected in [-90, 90]
        longitude: Longitude in decimal degrees, expected in [-180, 180]

    Range is the producer's responsibility; only NaN is rejected.

    Example:
        point = Point(latitude=45.38, longitude=31.50)
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if np.isnan(self.latitude) or np.isnan(self.longitude):
            raise ValueError(f"Point cannot have NaN coordinates ({self.latitude}, {self.longitude})")

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.latitude, self.longitude)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.longitude, self.latitude)

    @classmethod
    def from_lon_lat(cls, coordinate: "list[float] | tuple[float, float]") -> "Point":
        """Create a Point from a deck.gl [lon, lat] coordinate."""
        return cls(latitude=float(coordinate[1]), longitude=float(coordinate[0]))

    def distance_to(self, other: "Point") -> float:
        """Great-circle distance to another point in meters."""
        from orbitarea_editor.core.geo_calculator import GeoCalculator

        return GeoCalculator.distance(self, other)

    def bearing_to(self, other: "Point") -> float:
        """Initial bearing towards another point in degrees (0-360)."""
        from orbitarea_editor.core.geo_calculator import GeoCalculator

        return GeoCalculator.bearing(self, other)

    def __repr__(self) -> str:
        return f"Point(lat={self.latitude:.6f}, lon={self.longitude:.6f})"
