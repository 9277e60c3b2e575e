"""Configuration constants for the OrbitArea editor.

All configurable parameters are centralized here for easy tuning.

Classes:
    GeoConfig: Spherical Earth model parameters
    RacetrackConfig: Racetrack polygon tessellation
    AlignmentConfig: Angular quadrant boundaries for alignment detection
    UnitConfig: Distance unit conversion factors and labels
    LabelConfig: Live feedback label formatting
    MapConfig: Default map view parameters
    StyleConfig: RGBA colors for preview and completed areas
    LayerConfig: deck.gl layer ids and marker sizes
"""


class GeoConfig:
    """Spherical Earth model (great-circle approximation)."""

    # Mean Earth radius in meters (WGS84 spherical approximation)
    EARTH_RADIUS_M = 6_371_000

    # Bearing returned for coincident points (direction is undefined there)
    DEGENERATE_BEARING_DEG = 0.0


class RacetrackConfig:
    """Racetrack polygon tessellation parameters."""

    # Fixed number of segments per semicircular cap, independent of radius
    CAP_SEGMENTS = 20

    # Points per closed ring: two caps of (segments + 1) points plus the closing point
    RING_POINTS = 2 * (CAP_SEGMENTS + 1) + 1

    # Angular step for debug quadrant sectors (degrees)
    QUADRANT_SECTOR_STEP_DEG = 5

    # Debug quadrant sectors are drawn slightly larger than the racetrack radius
    QUADRANT_SECTOR_RADIUS_FACTOR = 1.5

    # Quadrant labels sit at this fraction of the sector radius
    QUADRANT_LABEL_RADIUS_FACTOR = 0.75


class AlignmentConfig:
    """Quadrant boundaries relative to the main axis bearing (degrees).

    0 = straight ahead along the axis, 90 = right, 180 = behind, 270 = left.
    Boundaries are inclusive on both ends; the first quadrant in scan order wins.
    """

    FORWARD = (315.0, 45.0)  # wraps through 0
    RIGHT = (45.0, 135.0)
    BACKWARD = (135.0, 225.0)
    LEFT = (225.0, 315.0)

    # Quadrant name reported when nothing matches (unreachable with full coverage)
    DEFAULT_QUADRANT_NAME = "DEFAULT"


class UnitConfig:
    """Distance unit conversion factors (from meters) and display labels."""

    CONVERSIONS = {
        "METERS": 1.0,
        "KILOMETERS": 0.001,
        "NAUTICAL_MILES": 0.000539957,
        "FEET": 3.28084,
    }

    LABELS = {
        "METERS": "m",
        "KILOMETERS": "km",
        "NAUTICAL_MILES": "nm",
        "FEET": "ft",
    }
    assert set(LABELS.keys()) == set(CONVERSIONS.keys())


class LabelConfig:
    """Live feedback label formatting."""

    DISTANCE_DECIMALS = 2
    BEARING_DECIMALS = 1


class MapConfig:
    """Default map view parameters."""

    # Initial center: north-western Black Sea
    START_CENTER_LAT = 45.3845874136542
    START_CENTER_LON = 31.504455891715537
    DEFAULT_ZOOM = 7
    DEFAULT_PITCH = 0
    DEFAULT_BEARING = 0


class StyleConfig:
    """RGBA colors, each component in 0-255."""

    POINT_COLOR = [0, 0, 255, 255]
    LINE_COLOR = [20, 20, 255, 255]
    AXIS_LINE_COLOR = [20, 20, 255, 100]
    ALIGNMENT_INDICATOR_COLOR = [255, 0, 255, 255]

    ORBIT_AREA_FILL = [0, 255, 0, 10]
    ORBIT_AREA_OUTLINE = [255, 0, 0, 200]

    LABEL_TEXT_COLOR = [255, 255, 255, 255]
    LABEL_BACKGROUND = [0, 0, 0, 180]

    ACTIVE_QUADRANT_LINE = [0, 255, 0, 200]
    INACTIVE_QUADRANT_LINE = [128, 128, 128, 100]
    ACTIVE_QUADRANT_ALPHA = 200
    INACTIVE_QUADRANT_ALPHA = 80

    # Quadrant fill colors keyed by alignment display name
    ALIGNMENT_COLORS = {
        "LEFT": [255, 100, 100, 200],
        "RIGHT": [100, 100, 255, 200],
        "CENTRE": [100, 255, 100, 200],
    }


class LayerConfig:
    """deck.gl layer ids and marker sizes."""

    ORBIT_AREA_LAYER_ID = "orbit-areas"
    ORBIT_AREA_POINTS_LAYER_ID = "orbit-areas-points"
    EDITOR_LAYER_ID = "orbit-area-editor"

    POINT_RADIUS_PX = 3
    LINE_WIDTH_PX = 2
    LABEL_SIZE = 10
    QUADRANT_LABEL_SIZE = 9
