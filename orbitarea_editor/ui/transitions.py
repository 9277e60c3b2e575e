"""Pure transition function for the three-click OrbitArea workflow.

transition(state, event) never mutates its input and never raises for
out-of-sequence input: anything the table below does not name returns the
same state unchanged.

    INACTIVE        --start-->           FIRST_POINT
    FIRST_POINT     --click(p)-->        SECOND_POINT     first_point = p
    FIRST_POINT     --hover(p)-->        FIRST_POINT      cursor = p
    SECOND_POINT    --click(p)-->        WIDTH_SELECTION  second_point = p
    SECOND_POINT    --hover(p)-->        SECOND_POINT     cursor = p
    WIDTH_SELECTION --hover(p)-->        WIDTH_SELECTION  cursor = p, alignment = classify(...)
    WIDTH_SELECTION --set_alignment(a)-> WIDTH_SELECTION  alignment = a
    WIDTH_SELECTION --click(p)-->        INACTIVE         emits OrbitArea (width > 0 only)
    any             --cancel-->          INACTIVE

OrbitAreaStateMachine (state_machine.py) hosts this function behind
python-statemachine events.
"""

import logging
from dataclasses import dataclass, replace

from orbitarea_editor.core.alignment_classifier import AlignmentClassifier
from orbitarea_editor.core.geo_calculator import GeoCalculator
from orbitarea_editor.model.editor_state import EditorEvent, EditorMode, EditorState, EventKind
from orbitarea_editor.model.orbit_area import OrbitArea
from orbitarea_editor.model.point import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionResult:
    """New snapshot plus the OrbitArea completed by this event (if any)."""

    state: EditorState
    completed: OrbitArea | None = None

    @property
    def is_completion(self) -> bool:
        return self.completed is not None


def commit_width(second_point: Point, cursor: Point) -> float:
    """Width implied by a cursor: twice the distance from the second axis point."""
    return 2 * GeoCalculator.distance(second_point, cursor)


def transition(state: EditorState, event: EditorEvent) -> TransitionResult:
    """Apply one event to a snapshot.

    Args:
        state: Current snapshot
        event: Input event

    Returns:
        TransitionResult with the next snapshot. completed is set only for the
        click that finishes WIDTH_SELECTION.
    """
    if event.kind == EventKind.CANCEL:
        return TransitionResult(state=EditorState())

    if event.kind == EventKind.START:
        if state.mode == EditorMode.INACTIVE:
            return TransitionResult(state=EditorState(mode=EditorMode.FIRST_POINT))
        return TransitionResult(state=state)

    if event.kind == EventKind.SET_ALIGNMENT:
        if state.mode == EditorMode.WIDTH_SELECTION:
            return TransitionResult(state=replace(state, current_alignment=event.alignment))
        return TransitionResult(state=state)

    coordinate = event.coordinate
    if coordinate is None:
        return TransitionResult(state=state)

    if event.kind == EventKind.HOVER:
        return TransitionResult(state=_hover(state, coordinate))
    if event.kind == EventKind.CLICK:
        return _click(state, coordinate)

    raise RuntimeError(f"Unknown event kind: {event.kind}")


def _hover(state: EditorState, coordinate: Point) -> EditorState:
    if state.mode in (EditorMode.FIRST_POINT, EditorMode.SECOND_POINT):
        return replace(state, cursor_position=coordinate)

    if state.mode == EditorMode.WIDTH_SELECTION:
        assert state.first_point is not None and state.second_point is not None
        alignment = AlignmentClassifier.classify(state.first_point, state.second_point, coordinate)
        return replace(state, cursor_position=coordinate, current_alignment=alignment)

    return state


def _click(state: EditorState, coordinate: Point) -> TransitionResult:
    if state.mode == EditorMode.FIRST_POINT:
        return TransitionResult(state=replace(state, mode=EditorMode.SECOND_POINT, first_point=coordinate))

    if state.mode == EditorMode.SECOND_POINT:
        return TransitionResult(state=replace(state, mode=EditorMode.WIDTH_SELECTION, second_point=coordinate))

    if state.mode == EditorMode.WIDTH_SELECTION:
        assert state.first_point is not None and state.second_point is not None
        width = commit_width(state.second_point, coordinate)
        if width <= 0:
            logger.debug("Ignoring finalising click on the second point (zero width)")
            return TransitionResult(state=state)

        # Alignment comes from the last hover, never from the click position
        orbit_area = OrbitArea(
            first_point=state.first_point,
            second_point=state.second_point,
            width=width,
            alignment=state.current_alignment,
        )
        logger.info(f"Completed {orbit_area}")
        return TransitionResult(state=EditorState(), completed=orbit_area)

    return TransitionResult(state=state)
