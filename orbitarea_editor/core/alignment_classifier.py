"""Alignment detection from the cursor position during width selection.

The full circle around the second axis point is split into four angular
quadrants measured relative to the main axis bearing:

    0 degrees:   straight ahead (continuing along first -> second)
    90 degrees:  right of the axis
    180 degrees: behind (back towards the first point)
    270 degrees: left of the axis

Forward and backward quadrants both mean CENTRE, so the four quadrants
collapse to three alignment values.

The probe bearing is measured FROM THE SECOND AXIS POINT (the pivot the user
is dragging the width from), while the reference bearing is first -> second.
"""

import logging
from dataclasses import dataclass

from orbitarea_editor.constants import AlignmentConfig
from orbitarea_editor.core.geo_calculator import GeoCalculator
from orbitarea_editor.model.alignment import Alignment
from orbitarea_editor.model.point import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AngularQuadrant:
    """A named angular range relative to the main bearing.

    Attributes:
        name: Quadrant identifier for labels and logging
        min_angle: Start of range in degrees [0, 360), inclusive
        max_angle: End of range in degrees [0, 360), inclusive
        alignment: Alignment reported when a probe falls inside
    """

    name: str
    min_angle: float
    max_angle: float
    alignment: Alignment

    @property
    def wraps(self) -> bool:
        """True if the range crosses 0 degrees (min_angle > max_angle)."""
        return self.min_angle > self.max_angle

    @property
    def mid_angle(self) -> float:
        """Angle halfway through the range, wraparound aware."""
        if self.wraps:
            return ((self.min_angle + self.max_angle + 360) / 2) % 360
        return (self.min_angle + self.max_angle) / 2

    @property
    def span_deg(self) -> float:
        """Angular width of the range in degrees."""
        if self.wraps:
            return self.max_angle + 360 - self.min_angle
        return self.max_angle - self.min_angle

    def contains(self, relative_angle: float) -> bool:
        """Check if a relative angle in [0, 360) falls in this quadrant (inclusive bounds)."""
        if self.wraps:
            return relative_angle >= self.min_angle or relative_angle <= self.max_angle
        return self.min_angle <= relative_angle <= self.max_angle


# Scan order matters: on a shared boundary the first quadrant listed wins.
ALIGNMENT_QUADRANTS: tuple[AngularQuadrant, ...] = (
    AngularQuadrant("CENTER_FORWARD", *AlignmentConfig.FORWARD, Alignment.CENTRE),
    AngularQuadrant("RIGHT", *AlignmentConfig.RIGHT, Alignment.RIGHT),
    AngularQuadrant("CENTER_BACKWARD", *AlignmentConfig.BACKWARD, Alignment.CENTRE),
    AngularQuadrant("LEFT", *AlignmentConfig.LEFT, Alignment.LEFT),
)

# The quadrant table must cover the whole circle, otherwise the CENTRE fallback becomes reachable
assert sum(q.span_deg for q in ALIGNMENT_QUADRANTS) == 360, "Quadrants must cover 360 degrees"
assert all(0 <= q.min_angle < 360 and 0 <= q.max_angle < 360 for q in ALIGNMENT_QUADRANTS)


@dataclass(frozen=True)
class AlignmentResult:
    """Outcome of a classification.

    Attributes:
        alignment: Detected alignment
        quadrant_name: Name of the matched quadrant ("DEFAULT" if none matched)
        relative_bearing: Probe angle relative to the main bearing, in [0, 360)
    """

    alignment: Alignment
    quadrant_name: str
    relative_bearing: float


class AlignmentClassifier:
    """Static methods mapping probe directions to alignments."""

    QUADRANTS = ALIGNMENT_QUADRANTS

    @staticmethod
    def classify_relative_angle(relative_angle: float) -> AlignmentResult:
        """Classify an angle already expressed relative to the main bearing.

        Args:
            relative_angle: Angle in degrees (normalized to [0, 360) internally)

        Returns:
            AlignmentResult of the first quadrant in scan order that contains the angle.
        """
        relative = GeoCalculator.normalize_angle(relative_angle)
        for quadrant in ALIGNMENT_QUADRANTS:
            if quadrant.contains(relative):
                return AlignmentResult(
                    alignment=quadrant.alignment,
                    quadrant_name=quadrant.name,
                    relative_bearing=relative,
                )

        logger.debug(f"No quadrant matched {relative:.2f} deg, defaulting to CENTRE")
        return AlignmentResult(
            alignment=Alignment.CENTRE,
            quadrant_name=AlignmentConfig.DEFAULT_QUADRANT_NAME,
            relative_bearing=relative,
        )

    @staticmethod
    def classify_detailed(main_axis_start: Point, main_axis_end: Point, probe: Point) -> AlignmentResult:
        """Classify a probe point against the axis, returning quadrant details.

        Args:
            main_axis_start: First axis point
            main_axis_end: Second axis point (pivot the probe bearing is measured from)
            probe: Cursor position

        Returns:
            AlignmentResult with alignment, quadrant name and relative bearing.
        """
        main_bearing = GeoCalculator.bearing(main_axis_start, main_axis_end)
        probe_bearing = GeoCalculator.bearing(main_axis_end, probe)
        result = AlignmentClassifier.classify_relative_angle(probe_bearing - main_bearing)
        logger.debug(
            f"Alignment: main={main_bearing:.2f} deg, probe={probe_bearing:.2f} deg, "
            f"relative={result.relative_bearing:.2f} deg -> {result.quadrant_name}"
        )
        return result

    @staticmethod
    def classify(main_axis_start: Point, main_axis_end: Point, probe: Point) -> Alignment:
        """Alignment of a probe point relative to the axis start -> end."""
        return AlignmentClassifier.classify_detailed(main_axis_start, main_axis_end, probe).alignment

    @staticmethod
    def classify_bearing(first_point: Point, second_point: Point) -> AlignmentResult:
        """Classify the absolute axis bearing (first -> second) against the quadrant table.

        The bearing is measured from North rather than from a reference axis,
        so an axis heading east reports RIGHT and one heading west reports LEFT.
        """
        bearing = GeoCalculator.bearing(first_point, second_point)
        return AlignmentClassifier.classify_relative_angle(bearing)

    @staticmethod
    def quadrant_for_alignment(alignment: Alignment) -> AngularQuadrant:
        """First quadrant in scan order reporting the given alignment."""
        for quadrant in ALIGNMENT_QUADRANTS:
            if quadrant.alignment == alignment:
                return quadrant
        raise RuntimeError(f"Unknown alignment: {alignment}")
