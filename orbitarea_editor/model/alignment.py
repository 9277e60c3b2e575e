"""Alignment - Which side of the axis the racetrack body extends toward.

Seen facing from the first axis point to the second:
- CENTRE: body symmetric around the axis
- LEFT: body offset to the left, the axis lies on its right edge
- RIGHT: body offset to the right, the axis lies on its left edge
"""

from enum import Enum


class Alignment(Enum):
    """Available alignment options for an OrbitArea.

    Values keep the enum wire strings used by OrbitArea consumers.
    """

    CENTRE = "OrbitAreaAlignmentEnum_CENTRE"
    LEFT = "OrbitAreaAlignmentEnum_LEFT"
    RIGHT = "OrbitAreaAlignmentEnum_RIGHT"

    @property
    def display_name(self) -> str:
        """Short upper-case name for labels ("CENTRE", "LEFT", "RIGHT")."""
        return self.name

    @property
    def offset_bearing_deg(self) -> float | None:
        """Bearing offset (relative to the axis) of the centerline shift, None for CENTRE."""
        if self is Alignment.LEFT:
            return -90.0
        if self is Alignment.RIGHT:
            return 90.0
        return None
