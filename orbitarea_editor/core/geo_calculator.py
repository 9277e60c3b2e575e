"""Geodesic calculations on Earth's surface.

Provides geographic helper functions for OrbitArea editing:
- Distance calculation (Haversine formula)
- Bearing calculation (initial heading between points)
- Destination calculation (endpoint from start, bearing, distance)
- Angle normalization and distance unit conversion

All calculations use a spherical Earth approximation (R = 6,371 km).
"""

from math import asin, atan2, cos, degrees, radians, sin, sqrt

from orbitarea_editor.constants import GeoConfig, LabelConfig
from orbitarea_editor.model.distance_unit import DistanceUnit
from orbitarea_editor.model.point import Point

# Earth's radius in meters (WGS84 spherical approximation)
EARTH_RADIUS_M = GeoConfig.EARTH_RADIUS_M


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    All methods use a spherical Earth model (R = 6,371 km).
    Coordinates are in decimal degrees (WGS84).
    Bearings are in degrees clockwise from North (0-360).
    Distances are in meters.

    The float-based methods (haversine_distance_m, initial_bearing_deg,
    destination_lon_lat) are the primitives; distance, bearing and destination
    wrap them for Point values.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        # Rounding can push a marginally outside [0, 1] for antipodal points
        a = min(1.0, max(0.0, a))
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def initial_bearing_deg(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
        """Calculate initial bearing from point 1 to point 2.

        The bearing is the compass direction to travel from start to end,
        measured clockwise from true North. Coincident points have no
        direction; GeoConfig.DEGENERATE_BEARING_DEG is returned for them.

        Args:
            lon1: Longitude of start point (decimal degrees)
            lat1: Latitude of start point (decimal degrees)
            lon2: Longitude of end point (decimal degrees)
            lat2: Latitude of end point (decimal degrees)

        Returns:
            Bearing in degrees (0-360, clockwise from North).
        """
        if lon1 == lon2 and lat1 == lat2:
            return GeoConfig.DEGENERATE_BEARING_DEG
        lon1_rad, lat1_rad = radians(lon1), radians(lat1)
        lon2_rad, lat2_rad = radians(lon2), radians(lat2)
        dlon = lon2_rad - lon1_rad
        y = sin(dlon) * cos(lat2_rad)
        x = cos(lat1_rad) * sin(lat2_rad) - sin(lat1_rad) * cos(lat2_rad) * cos(dlon)
        return GeoCalculator.normalize_angle(degrees(atan2(y, x)))

    @staticmethod
    def destination_lon_lat(
        lon: float,
        lat: float,
        bearing_deg: float,
        distance_m: float,
    ) -> tuple[float, float]:
        """Calculate destination point given start, bearing, and distance.

        Uses the formula for finding a point at given distance and bearing
        from a starting point on a sphere.

        Args:
            lon: Longitude of start point (decimal degrees)
            lat: Latitude of start point (decimal degrees)
            bearing_deg: Bearing in degrees (clockwise from North)
            distance_m: Distance to travel in meters

        Returns:
            Tuple (lon, lat) of destination point in decimal degrees,
            longitude normalized to [-180, 180).
        """
        brng = radians(bearing_deg)
        lat1 = radians(lat)
        lon1 = radians(lon)
        d_R = distance_m / EARTH_RADIUS_M

        lat2 = asin(sin(lat1) * cos(d_R) + cos(lat1) * sin(d_R) * cos(brng))
        lon2 = lon1 + atan2(
            sin(brng) * sin(d_R) * cos(lat1),
            cos(d_R) - sin(lat1) * sin(lat2),
        )
        return (degrees(lon2) + 540) % 360 - 180, degrees(lat2)

    # =========================================================================
    # POINT API
    # =========================================================================

    @staticmethod
    def distance(a: Point, b: Point) -> float:
        """Great-circle distance between two points in meters (symmetric, >= 0)."""
        return GeoCalculator.haversine_distance_m(
            lat1=a.latitude,
            lon1=a.longitude,
            lat2=b.latitude,
            lon2=b.longitude,
        )

    @staticmethod
    def bearing(a: Point, b: Point) -> float:
        """Initial great-circle bearing from a to b in degrees [0, 360).

        Returns 0.0 when a and b coincide.
        """
        return GeoCalculator.initial_bearing_deg(
            lon1=a.longitude,
            lat1=a.latitude,
            lon2=b.longitude,
            lat2=b.latitude,
        )

    @staticmethod
    def destination(origin: Point, bearing_deg: float, distance_m: float) -> Point:
        """Project a point along a great-circle bearing.

        Inverse of bearing + distance up to normalization:
        bearing(origin, destination(origin, b, d)) ~ b and
        distance(origin, destination(origin, b, d)) ~ d for d > 0.
        """
        lon, lat = GeoCalculator.destination_lon_lat(
            lon=origin.longitude,
            lat=origin.latitude,
            bearing_deg=bearing_deg,
            distance_m=distance_m,
        )
        return Point(latitude=lat, longitude=lon)

    @staticmethod
    def perpendicular_point(start: Point, bearing_deg: float, distance_m: float, is_right: bool) -> Point:
        """Point at distance_m perpendicular to a line with the given bearing.

        Args:
            start: Point on the line
            bearing_deg: Bearing of the line
            distance_m: Perpendicular distance in meters
            is_right: True for the right-hand side (bearing + 90), False for left (bearing - 90)
        """
        offset = 90 if is_right else -90
        return GeoCalculator.destination(start, GeoCalculator.normalize_angle(bearing_deg + offset), distance_m)

    # =========================================================================
    # ANGLES AND UNITS
    # =========================================================================

    @staticmethod
    def normalize_angle(angle_deg: float) -> float:
        """Normalize an angle to [0, 360) degrees, negative input included."""
        normalized = ((angle_deg % 360) + 360) % 360
        # Float rounding can land exactly on 360.0
        return 0.0 if normalized >= 360 else normalized

    @staticmethod
    def convert_distance(meters: float, unit: DistanceUnit) -> float:
        """Convert meters to the given display unit (linear scaling)."""
        return meters * unit.factor

    @staticmethod
    def unit_label(unit: DistanceUnit) -> str:
        """Short display label for a unit ("m", "km", "nm", "ft")."""
        return unit.label

    @staticmethod
    def format_distance(
        meters: float,
        unit: DistanceUnit,
        decimals: int = LabelConfig.DISTANCE_DECIMALS,
    ) -> str:
        """Format a distance for display, e.g. "1.50 km"."""
        converted = GeoCalculator.convert_distance(meters, unit)
        return f"{converted:.{decimals}f} {unit.label}"
