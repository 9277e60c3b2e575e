"""Racetrack polygon generation for OrbitAreas.

A racetrack is a rectangle along the (possibly offset) centerline with a
semicircular cap at each end. Cap points are projected geodesically with
GeoCalculator.destination, so the outline stays correct at any latitude.

Ring layout (bearing = first -> second, all sweeps clockwise):
    1. Cap at centerline start: bearing+90 -> bearing+180 -> bearing-90
    2. Cap at centerline end:   bearing-90 -> bearing      -> bearing+90
    3. Closing copy of the first point

Each cap uses a fixed number of segments (RacetrackConfig.CAP_SEGMENTS)
regardless of radius, so the cost per polygon is constant.
"""

from typing import TYPE_CHECKING

import numpy as np
from shapely.geometry import Polygon

from orbitarea_editor.constants import RacetrackConfig
from orbitarea_editor.core.geo_calculator import GeoCalculator
from orbitarea_editor.model.alignment import Alignment
from orbitarea_editor.model.point import Point

if TYPE_CHECKING:
    from orbitarea_editor.core.alignment_classifier import AngularQuadrant
    from orbitarea_editor.model.orbit_area import OrbitArea


class RacetrackPolygonGenerator:
    """Static methods producing closed racetrack rings and helper outlines."""

    CAP_SEGMENTS = RacetrackConfig.CAP_SEGMENTS

    @staticmethod
    def sweep_bearings(start_bearing: float, end_bearing: float, segments: int) -> list[float]:
        """Bearings from start to end (inclusive) in equal clockwise steps.

        When the normalized start is greater than the normalized end, the end
        is moved up by 360 so the sweep always increases.

        Returns:
            segments + 1 normalized bearings in degrees.
        """
        start = GeoCalculator.normalize_angle(start_bearing)
        end = GeoCalculator.normalize_angle(end_bearing)
        if start > end:
            end += 360
        return [GeoCalculator.normalize_angle(float(b)) for b in np.linspace(start, end, segments + 1)]

    @staticmethod
    def generate_semicircle(
        center: Point,
        radius_m: float,
        start_bearing: float,
        end_bearing: float,
        segments: int = RacetrackConfig.CAP_SEGMENTS,
    ) -> list[Point]:
        """Points of an arc around center from start_bearing to end_bearing.

        Args:
            center: Arc center
            radius_m: Arc radius in meters
            start_bearing: First bearing in degrees
            end_bearing: Last bearing in degrees (swept clockwise from start)
            segments: Number of segments (segments + 1 points returned)
        """
        return [
            GeoCalculator.destination(center, bearing, radius_m)
            for bearing in RacetrackPolygonGenerator.sweep_bearings(start_bearing, end_bearing, segments)
        ]

    @staticmethod
    def centerline(
        first_point: Point,
        second_point: Point,
        width: float,
        alignment: Alignment,
    ) -> tuple[Point, Point]:
        """Centerline endpoints after applying the alignment offset.

        CENTRE keeps the axis. LEFT/RIGHT shift both endpoints by half the width
        perpendicular to the axis, so the racetrack edge (not its center) lies
        on the clicked axis.
        """
        offset = alignment.offset_bearing_deg
        if offset is None:
            return first_point, second_point

        bearing = GeoCalculator.bearing(first_point, second_point)
        offset_bearing = GeoCalculator.normalize_angle(bearing + offset)
        radius = width / 2
        return (
            GeoCalculator.destination(first_point, offset_bearing, radius),
            GeoCalculator.destination(second_point, offset_bearing, radius),
        )

    @staticmethod
    def generate(
        first_point: Point,
        second_point: Point,
        width: float,
        alignment: Alignment,
    ) -> list[Point]:
        """Closed racetrack ring for an axis, width and alignment.

        Args:
            first_point: First axis point
            second_point: Second axis point
            width: Racetrack width in meters (cap radius = width / 2)
            alignment: Offset side of the body relative to the axis

        Returns:
            List of 2 * (CAP_SEGMENTS + 1) + 1 points; first and last are equal.
            Coincident axis points give a full circle around the single point.
        """
        bearing = GeoCalculator.bearing(first_point, second_point)
        radius = width / 2
        start_center, end_center = RacetrackPolygonGenerator.centerline(first_point, second_point, width, alignment)

        ring = RacetrackPolygonGenerator.generate_semicircle(
            center=start_center,
            radius_m=radius,
            start_bearing=bearing + 90,
            end_bearing=bearing - 90,
        )
        ring += RacetrackPolygonGenerator.generate_semicircle(
            center=end_center,
            radius_m=radius,
            start_bearing=bearing - 90,
            end_bearing=bearing + 90,
        )
        ring.append(Point(latitude=ring[0].latitude, longitude=ring[0].longitude))
        return ring

    @staticmethod
    def generate_for(orbit_area: "OrbitArea") -> list[Point]:
        """Closed racetrack ring for a completed OrbitArea."""
        return RacetrackPolygonGenerator.generate(
            first_point=orbit_area.first_point,
            second_point=orbit_area.second_point,
            width=orbit_area.width,
            alignment=orbit_area.alignment,
        )

    @staticmethod
    def quadrant_sector(
        center: Point,
        main_bearing: float,
        quadrant: "AngularQuadrant",
        radius_m: float,
        step_deg: float = RacetrackConfig.QUADRANT_SECTOR_STEP_DEG,
    ) -> list[Point]:
        """Fan-shaped outline of an alignment quadrant around the pivot point.

        The ring starts and ends at center and sweeps the quadrant's relative
        range rotated by main_bearing. Used for debug overlays.
        """
        segments = max(1, int(round(quadrant.span_deg / step_deg)))
        arc = RacetrackPolygonGenerator.generate_semicircle(
            center=center,
            radius_m=radius_m,
            start_bearing=main_bearing + quadrant.min_angle,
            end_bearing=main_bearing + quadrant.min_angle + quadrant.span_deg,
            segments=segments,
        )
        return [center, *arc, center]

    @staticmethod
    def to_shapely(ring: list[Point]) -> Polygon:
        """Shapely Polygon in (lon, lat) order for containment and validity checks.

        Longitudes are unwrapped relative to ring[0], so a ring crossing the
        antimeridian stays compact (some x values fall outside [-180, 180]).
        """
        if not ring:
            return Polygon()
        ref_lon = ring[0].longitude
        coords = []
        for p in ring:
            delta = (p.longitude - ref_lon + 180.0) % 360.0 - 180.0
            coords.append((ref_lon + delta, p.latitude))
        return Polygon(coords)
