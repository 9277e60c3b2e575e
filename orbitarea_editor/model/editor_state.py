"""Editor state and input events for the three-click OrbitArea workflow.

This module defines the immutable values exchanged with the editing state machine:
- EditorMode: Which step of the workflow is active
- EditorState: Snapshot of the workflow (mode, placed points, cursor, alignment)
- EventKind / EditorEvent: Discrete input from the map-interaction collaborator

Snapshots are replaced, never mutated. Readers (renderers, label overlays)
can hold on to a snapshot without it changing underneath them.
"""

from dataclasses import dataclass
from enum import Enum

from orbitarea_editor.model.alignment import Alignment
from orbitarea_editor.model.point import Point


class EditorMode(Enum):
    """Editor modes for the OrbitArea creation workflow."""

    INACTIVE = "INACTIVE"
    FIRST_POINT = "FIRST_POINT"
    SECOND_POINT = "SECOND_POINT"
    WIDTH_SELECTION = "WIDTH_SELECTION"


@dataclass(frozen=True)
class EditorState:
    """Snapshot of the editing workflow.

    Attributes:
        mode: Current workflow step
        first_point: First axis point (set from SECOND_POINT onward)
        second_point: Second axis point (set in WIDTH_SELECTION)
        cursor_position: Last hovered map coordinate
        current_alignment: Alignment detected by the last hover in WIDTH_SELECTION
    """

    mode: EditorMode = EditorMode.INACTIVE
    first_point: Point | None = None
    second_point: Point | None = None
    cursor_position: Point | None = None
    current_alignment: Alignment = Alignment.CENTRE

    @property
    def is_editing(self) -> bool:
        """True while a workflow is in progress."""
        return self.mode != EditorMode.INACTIVE

    @property
    def preview_width_m(self) -> float | None:
        """Width implied by the cursor during WIDTH_SELECTION, None otherwise."""
        if self.mode != EditorMode.WIDTH_SELECTION:
            return None
        if self.second_point is None or self.cursor_position is None:
            return None
        return 2 * self.second_point.distance_to(self.cursor_position)


class EventKind(Enum):
    """Kinds of input accepted by the editor."""

    START = "start"
    CLICK = "click"
    HOVER = "hover"
    CANCEL = "cancel"
    SET_ALIGNMENT = "set_alignment"


@dataclass(frozen=True)
class EditorEvent:
    """A single input event.

    STRICT CONTRACT:
    - CLICK/HOVER carry an optional coordinate (None = nothing under the cursor)
    - SET_ALIGNMENT carries an alignment and no coordinate
    - START/CANCEL carry nothing
    """

    kind: EventKind
    coordinate: Point | None = None
    alignment: Alignment | None = None

    def __post_init__(self) -> None:
        """Validate payload combination for the event kind."""
        if self.kind == EventKind.SET_ALIGNMENT:
            if self.alignment is None:
                raise ValueError("SET_ALIGNMENT event must have alignment set")
            if self.coordinate is not None:
                raise ValueError("SET_ALIGNMENT event must NOT have coordinate set")
        elif self.kind in (EventKind.CLICK, EventKind.HOVER):
            if self.alignment is not None:
                raise ValueError(f"{self.kind.name} event must NOT have alignment set")
        elif self.kind in (EventKind.START, EventKind.CANCEL):
            if self.coordinate is not None or self.alignment is not None:
                raise ValueError(f"{self.kind.name} event carries no payload")
        else:
            raise RuntimeError(f"Unknown event kind: {self.kind}")

    @property
    def has_coordinate(self) -> bool:
        return self.coordinate is not None

    @staticmethod
    def start() -> "EditorEvent":
        return EditorEvent(kind=EventKind.START)

    @staticmethod
    def cancel() -> "EditorEvent":
        return EditorEvent(kind=EventKind.CANCEL)

    @staticmethod
    def click(coordinate: Point | None) -> "EditorEvent":
        return EditorEvent(kind=EventKind.CLICK, coordinate=coordinate)

    @staticmethod
    def hover(coordinate: Point | None) -> "EditorEvent":
        return EditorEvent(kind=EventKind.HOVER, coordinate=coordinate)

    @staticmethod
    def set_alignment(alignment: Alignment) -> "EditorEvent":
        return EditorEvent(kind=EventKind.SET_ALIGNMENT, alignment=alignment)
