"""Shared pytest fixtures for orbitarea_editor tests.

COORDINATE SYSTEM:
    Most fixtures sit on the equator (lat=0) where one degree of latitude and
    one degree of longitude are both ~111,195 m on the R = 6,371 km sphere and
    bearings along the equator are exact (90 deg east, 270 deg west).

    The reference axis runs due east from (0, 0) to (0, 0.1), so relative to
    the axis "right" is south and "left" is north.
"""

import pytest

from orbitarea_editor.model.alignment import Alignment
from orbitarea_editor.model.editor_state import EditorMode, EditorState
from orbitarea_editor.model.point import Point
from orbitarea_editor.ui.state_machine import EditorContext, OrbitAreaStateMachine

# Meters per degree on the R = 6,371 km sphere
METERS_PER_DEGREE = 111_194.93


# =============================================================================
# POINT FIXTURES
# =============================================================================


@pytest.fixture
def axis_start() -> Point:
    """First axis point at the equator / prime meridian intersection."""
    return Point(latitude=0.0, longitude=0.0)


@pytest.fixture
def axis_end() -> Point:
    """Second axis point 0.1 deg (~11.1 km) due east of axis_start."""
    return Point(latitude=0.0, longitude=0.1)


@pytest.fixture
def probe_right(axis_end: Point) -> Point:
    """Cursor ~1 km south of axis_end (right of an eastbound axis)."""
    return Point(latitude=-1000 / METERS_PER_DEGREE, longitude=axis_end.longitude)


@pytest.fixture
def probe_left(axis_end: Point) -> Point:
    """Cursor ~1 km north of axis_end (left of an eastbound axis)."""
    return Point(latitude=1000 / METERS_PER_DEGREE, longitude=axis_end.longitude)


@pytest.fixture
def probe_ahead(axis_end: Point) -> Point:
    """Cursor ~1 km further east along the axis."""
    return Point(latitude=0.0, longitude=axis_end.longitude + 1000 / METERS_PER_DEGREE)


# =============================================================================
# EDITOR STATE FIXTURES
# =============================================================================


@pytest.fixture
def states_by_mode(axis_start: Point, axis_end: Point, probe_right: Point) -> dict[EditorMode, EditorState]:
    """One representative snapshot per mode, as produced by the workflow."""
    return {
        EditorMode.INACTIVE: EditorState(),
        EditorMode.FIRST_POINT: EditorState(mode=EditorMode.FIRST_POINT),
        EditorMode.SECOND_POINT: EditorState(mode=EditorMode.SECOND_POINT, first_point=axis_start),
        EditorMode.WIDTH_SELECTION: EditorState(
            mode=EditorMode.WIDTH_SELECTION,
            first_point=axis_start,
            second_point=axis_end,
            cursor_position=probe_right,
            current_alignment=Alignment.RIGHT,
        ),
    }


# =============================================================================
# STATE MACHINE FIXTURES
# =============================================================================


@pytest.fixture
def state_machine_and_context() -> tuple[OrbitAreaStateMachine, EditorContext]:
    """Fresh state machine and context pair, starting in INACTIVE state."""
    return OrbitAreaStateMachine.create()
