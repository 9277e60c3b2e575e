"""Data model classes for OrbitArea editing.

- Point: Geometry atom (latitude, longitude)
- Alignment: Offset side of the racetrack body
- DistanceUnit: Display units for live feedback
- OrbitArea: Completed racetrack surface (axis, width, alignment)
- EditorMode / EditorState: Immutable workflow snapshot
- EventKind / EditorEvent: Input from the map-interaction collaborator
"""

from orbitarea_editor.model.alignment import Alignment
from orbitarea_editor.model.distance_unit import DistanceUnit
from orbitarea_editor.model.editor_state import (
    EditorEvent,
    EditorMode,
    EditorState,
    EventKind,
)
from orbitarea_editor.model.orbit_area import OrbitArea
from orbitarea_editor.model.point import Point

__all__ = [
    "Point",
    "Alignment",
    "DistanceUnit",
    "OrbitArea",
    "EditorMode",
    "EditorState",
    "EventKind",
    "EditorEvent",
]
