"""Tests for orbitarea_editor data model.

Tests: Point, Alignment, DistanceUnit, OrbitArea, EditorState, EditorEvent
"""

import math

import pytest

from orbitarea_editor.model import (
    Alignment,
    DistanceUnit,
    EditorEvent,
    EditorMode,
    EditorState,
    EventKind,
    OrbitArea,
    Point,
)

from conftest import METERS_PER_DEGREE


class TestPoint:
    """Point - geometry atom."""

    def test_nan_coordinates_rejected(self) -> None:
        with pytest.raises(ValueError):
            Point(latitude=math.nan, longitude=10.0)
        with pytest.raises(ValueError):
            Point(latitude=10.0, longitude=math.nan)

    def test_coordinate_order_properties(self) -> None:
        point = Point(latitude=45.0, longitude=31.0)
        assert point.lat_lon == (45.0, 31.0)
        assert point.lon_lat == (31.0, 45.0)

    def test_from_lon_lat_uses_deckgl_order(self) -> None:
        assert Point.from_lon_lat([31.5, 45.25]) == Point(latitude=45.25, longitude=31.5)

    def test_is_hashable_value(self) -> None:
        assert len({Point(latitude=1.0, longitude=2.0), Point(latitude=1.0, longitude=2.0)}) == 1

    def test_distance_and_bearing_helpers(self, axis_start: Point, axis_end: Point) -> None:
        assert axis_start.distance_to(axis_end) == pytest.approx(0.1 * METERS_PER_DEGREE, rel=1e-6)
        assert axis_start.bearing_to(axis_end) == pytest.approx(90.0)


class TestAlignment:
    """Alignment - enum values and offsets."""

    def test_wire_values(self) -> None:
        assert Alignment.CENTRE.value == "OrbitAreaAlignmentEnum_CENTRE"
        assert Alignment("OrbitAreaAlignmentEnum_LEFT") is Alignment.LEFT

    def test_display_names(self) -> None:
        assert [a.display_name for a in Alignment] == ["CENTRE", "LEFT", "RIGHT"]

    def test_offset_bearings(self) -> None:
        assert Alignment.CENTRE.offset_bearing_deg is None
        assert Alignment.LEFT.offset_bearing_deg == -90.0
        assert Alignment.RIGHT.offset_bearing_deg == 90.0


class TestDistanceUnit:
    """DistanceUnit - factors and labels."""

    @pytest.mark.parametrize(
        "unit,factor,label",
        [
            (DistanceUnit.METERS, 1.0, "m"),
            (DistanceUnit.KILOMETERS, 0.001, "km"),
            (DistanceUnit.NAUTICAL_MILES, 0.000539957, "nm"),
            (DistanceUnit.FEET, 3.28084, "ft"),
        ],
    )
    def test_factor_and_label(self, unit: DistanceUnit, factor: float, label: str) -> None:
        assert unit.factor == factor
        assert unit.label == label


class TestOrbitArea:
    """OrbitArea - completed racetrack surface."""

    @pytest.mark.parametrize("width", [0.0, -5.0, math.nan])
    def test_non_positive_width_rejected(self, axis_start: Point, axis_end: Point, width: float) -> None:
        with pytest.raises(ValueError):
            OrbitArea(first_point=axis_start, second_point=axis_end, width=width)

    def test_defaults_and_derived_values(self, axis_start: Point, axis_end: Point) -> None:
        area = OrbitArea(first_point=axis_start, second_point=axis_end, width=3000)
        assert area.alignment == Alignment.CENTRE
        assert area.id is None
        assert area.radius_m == 1500
        assert area.axis_bearing_deg == pytest.approx(90.0)
        assert area.axis_length_m == pytest.approx(0.1 * METERS_PER_DEGREE, rel=1e-6)

    def test_polygon_is_closed(self, axis_start: Point, axis_end: Point) -> None:
        ring = OrbitArea(first_point=axis_start, second_point=axis_end, width=3000, id="OA_1").polygon()
        assert len(ring) == 43
        assert ring[0] == ring[-1]

    def test_repr_mentions_alignment(self, axis_start: Point, axis_end: Point) -> None:
        area = OrbitArea(first_point=axis_start, second_point=axis_end, width=3000, alignment=Alignment.RIGHT)
        assert "RIGHT" in repr(area)
        assert "3000.0m" in repr(area)


class TestEditorState:
    """EditorState - immutable workflow snapshot."""

    def test_defaults(self) -> None:
        state = EditorState()
        assert state.mode == EditorMode.INACTIVE
        assert state.first_point is None
        assert state.second_point is None
        assert state.cursor_position is None
        assert state.current_alignment == Alignment.CENTRE
        assert state.is_editing is False

    def test_is_frozen(self) -> None:
        state = EditorState()
        with pytest.raises(AttributeError):
            state.mode = EditorMode.FIRST_POINT  # type: ignore[misc]

    def test_preview_width_only_in_width_selection(
        self, states_by_mode: dict[EditorMode, EditorState], axis_end: Point, probe_right: Point
    ) -> None:
        width_state = states_by_mode[EditorMode.WIDTH_SELECTION]
        assert width_state.preview_width_m == pytest.approx(2 * axis_end.distance_to(probe_right))
        assert states_by_mode[EditorMode.SECOND_POINT].preview_width_m is None


class TestEditorEvent:
    """EditorEvent - payload contract."""

    def test_factories(self, axis_start: Point) -> None:
        assert EditorEvent.start().kind == EventKind.START
        assert EditorEvent.cancel().kind == EventKind.CANCEL
        assert EditorEvent.click(axis_start).coordinate == axis_start
        assert EditorEvent.hover(None).has_coordinate is False
        assert EditorEvent.set_alignment(Alignment.LEFT).alignment == Alignment.LEFT

    def test_set_alignment_requires_alignment(self) -> None:
        with pytest.raises(ValueError):
            EditorEvent(kind=EventKind.SET_ALIGNMENT)

    def test_set_alignment_rejects_coordinate(self, axis_start: Point) -> None:
        with pytest.raises(ValueError):
            EditorEvent(kind=EventKind.SET_ALIGNMENT, coordinate=axis_start, alignment=Alignment.LEFT)

    def test_click_rejects_alignment(self, axis_start: Point) -> None:
        with pytest.raises(ValueError):
            EditorEvent(kind=EventKind.CLICK, coordinate=axis_start, alignment=Alignment.LEFT)

    @pytest.mark.parametrize("kind", [EventKind.START, EventKind.CANCEL])
    def test_start_and_cancel_carry_no_payload(self, kind: EventKind, axis_start: Point) -> None:
        with pytest.raises(ValueError):
            EditorEvent(kind=kind, coordinate=axis_start)
