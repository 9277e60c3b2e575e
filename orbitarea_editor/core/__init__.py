"""Core foundation classes for OrbitArea geometry.

- GeoCalculator: Geodesic calculations (distances, bearings, destinations, units)
- AlignmentClassifier: Cursor direction to CENTRE / LEFT / RIGHT
- RacetrackPolygonGenerator: Closed racetrack rings and quadrant fans
"""

from orbitarea_editor.core.alignment_classifier import (
    ALIGNMENT_QUADRANTS,
    AlignmentClassifier,
    AlignmentResult,
    AngularQuadrant,
)
from orbitarea_editor.core.geo_calculator import GeoCalculator
from orbitarea_editor.core.racetrack_generator import RacetrackPolygonGenerator

__all__ = [
    # Geo calculator
    "GeoCalculator",
    # Alignment
    "AlignmentClassifier",
    "AlignmentResult",
    "AngularQuadrant",
    "ALIGNMENT_QUADRANTS",
    # Racetrack
    "RacetrackPolygonGenerator",
]
