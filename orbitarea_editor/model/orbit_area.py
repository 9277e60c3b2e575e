"""OrbitArea - A racetrack-shaped geographic surface.

An OrbitArea is fully determined by its axis (first and second point),
its width and its alignment. The polygon is derived on demand and never
stored alongside the area.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orbitarea_editor.model.alignment import Alignment
from orbitarea_editor.model.point import Point

if TYPE_CHECKING:
    from shapely.geometry import Polygon


@dataclass(frozen=True)
class OrbitArea:
    """A completed racetrack surface.

    Attributes:
        first_point: The initial Point of the axis
        second_point: The final Point of the axis
        width: Side-to-side width in meters (must be > 0)
        alignment: Offset side of the racetrack body relative to the axis
        id: Optional identifier assigned by whoever stores the area
    """

    first_point: Point
    second_point: Point
    width: float
    alignment: Alignment = Alignment.CENTRE
    id: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants - fail immediately on invalid width."""
        if not self.width > 0:
            raise ValueError(f"OrbitArea width must be > 0, got {self.width}")

    @property
    def radius_m(self) -> float:
        """Cap radius in meters (half the width)."""
        return self.width / 2

    @property
    def axis_length_m(self) -> float:
        """Great-circle length of the axis in meters."""
        return self.first_point.distance_to(self.second_point)

    @property
    def axis_bearing_deg(self) -> float:
        """Initial bearing from first to second point in degrees."""
        return self.first_point.bearing_to(self.second_point)

    def polygon(self) -> list[Point]:
        """Closed racetrack ring for this area."""
        from orbitarea_editor.core.racetrack_generator import RacetrackPolygonGenerator

        return RacetrackPolygonGenerator.generate_for(self)

    def to_shapely(self) -> "Polygon":
        """Racetrack polygon as a shapely Polygon in (lon, lat) order."""
        from orbitarea_editor.core.racetrack_generator import RacetrackPolygonGenerator

        return RacetrackPolygonGenerator.to_shapely(self.polygon())

    def __repr__(self) -> str:
        return (
            f"OrbitArea({self.first_point!r} -> {self.second_point!r}, "
            f"width={self.width:.1f}m, {self.alignment.display_name})"
        )
