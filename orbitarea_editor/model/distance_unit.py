"""DistanceUnit - Display units for live distance and width feedback."""

from enum import Enum

from orbitarea_editor.constants import UnitConfig


class DistanceUnit(Enum):
    """Distance units supported by the editor."""

    METERS = "METERS"
    KILOMETERS = "KILOMETERS"
    NAUTICAL_MILES = "NAUTICAL_MILES"
    FEET = "FEET"

    @property
    def factor(self) -> float:
        """Multiplier converting meters into this unit."""
        return UnitConfig.CONVERSIONS[self.value]

    @property
    def label(self) -> str:
        """Short display label ("m", "km", "nm", "ft")."""
        return UnitConfig.LABELS[self.value]


assert {unit.value for unit in DistanceUnit} == set(UnitConfig.CONVERSIONS.keys())
