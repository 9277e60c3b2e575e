"""Live preview of the editing workflow.

build_preview turns an EditorState snapshot into plain geometry and text
that a renderer can draw without knowing the workflow rules:

- FIRST_POINT: nothing placed yet (cursor only)
- SECOND_POINT: first marker, rubber band to the cursor, "distance / bearing" label
- WIDTH_SELECTION: both markers, axis line, width line to the cursor,
  "Width | Alignment" label, racetrack polygon and optional quadrant sectors

The preview is derived data; it never feeds back into the state machine.
"""

from dataclasses import dataclass, field

from orbitarea_editor.constants import LabelConfig, RacetrackConfig
from orbitarea_editor.core.alignment_classifier import ALIGNMENT_QUADRANTS, AngularQuadrant
from orbitarea_editor.core.geo_calculator import GeoCalculator
from orbitarea_editor.core.racetrack_generator import RacetrackPolygonGenerator
from orbitarea_editor.model.alignment import Alignment
from orbitarea_editor.model.distance_unit import DistanceUnit
from orbitarea_editor.model.editor_state import EditorMode, EditorState
from orbitarea_editor.model.point import Point


@dataclass(frozen=True)
class PreviewLabel:
    """Text anchored at a map position."""

    position: Point
    text: str


@dataclass(frozen=True)
class ToolInfoRow:
    """Single key/value row of the tool info panel."""

    key: str
    value: str
    icon: str | None = None


@dataclass(frozen=True)
class QuadrantSector:
    """Debug fan showing one alignment quadrant around the second point.

    Attributes:
        quadrant: Quadrant the fan represents
        polygon: Closed outline starting and ending at the pivot
        label_position: Where to draw the quadrant name
        is_active: True if the quadrant reports the current alignment
    """

    quadrant: AngularQuadrant
    polygon: list[Point]
    label_position: Point
    is_active: bool

    @property
    def name(self) -> str:
        return self.quadrant.name

    @property
    def alignment(self) -> Alignment:
        return self.quadrant.alignment


@dataclass(frozen=True)
class EditorPreview:
    """Everything a renderer needs for one frame of the editor."""

    mode: EditorMode
    alignment: Alignment = Alignment.CENTRE
    placed_points: list[Point] = field(default_factory=list)
    rubber_band: tuple[Point, Point] | None = None
    axis_line: tuple[Point, Point] | None = None
    width_line: tuple[Point, Point] | None = None
    polygon: list[Point] | None = None
    width_m: float | None = None
    labels: list[PreviewLabel] = field(default_factory=list)
    tool_info: list[ToolInfoRow] = field(default_factory=list)
    quadrants: list[QuadrantSector] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True if there is nothing to draw on the map."""
        return not (self.placed_points or self.labels or self.polygon or self.quadrants)


def midpoint(a: Point, b: Point) -> Point:
    """Label anchor halfway between two points (planar average in degrees)."""
    return Point(latitude=(a.latitude + b.latitude) / 2, longitude=(a.longitude + b.longitude) / 2)


def distance_bearing_text(start: Point, end: Point, unit: DistanceUnit) -> str:
    """Rubber band label, e.g. "12.34 km / 87.5deg"."""
    distance = GeoCalculator.format_distance(GeoCalculator.distance(start, end), unit)
    bearing = GeoCalculator.bearing(start, end)
    return f"{distance} / {bearing:.{LabelConfig.BEARING_DECIMALS}f}deg"


def width_alignment_text(width_m: float, alignment: Alignment, unit: DistanceUnit) -> str:
    """Width selection label, e.g. "Width: 2.00 km | Alignment: LEFT"."""
    return f"Width: {GeoCalculator.format_distance(width_m, unit)} | Alignment: {alignment.display_name}"


def build_quadrant_sectors(
    first_point: Point,
    second_point: Point,
    radius_m: float,
    current_alignment: Alignment,
) -> list[QuadrantSector]:
    """Quadrant fans around the second point, rotated by the axis bearing.

    Args:
        first_point: First axis point
        second_point: Pivot of the fans
        radius_m: Racetrack radius; fans are drawn QUADRANT_SECTOR_RADIUS_FACTOR times larger
        current_alignment: Alignment whose quadrants are highlighted
    """
    main_bearing = GeoCalculator.bearing(first_point, second_point)
    sector_radius = radius_m * RacetrackConfig.QUADRANT_SECTOR_RADIUS_FACTOR
    label_radius = sector_radius * RacetrackConfig.QUADRANT_LABEL_RADIUS_FACTOR

    sectors = []
    for quadrant in ALIGNMENT_QUADRANTS:
        polygon = RacetrackPolygonGenerator.quadrant_sector(
            center=second_point,
            main_bearing=main_bearing,
            quadrant=quadrant,
            radius_m=sector_radius,
        )
        label_position = GeoCalculator.destination(
            second_point,
            GeoCalculator.normalize_angle(main_bearing + quadrant.mid_angle),
            label_radius,
        )
        sectors.append(
            QuadrantSector(
                quadrant=quadrant,
                polygon=polygon,
                label_position=label_position,
                is_active=quadrant.alignment == current_alignment,
            )
        )
    return sectors


def build_preview(
    state: EditorState,
    unit: DistanceUnit = DistanceUnit.METERS,
    show_quadrants: bool = False,
) -> EditorPreview:
    """Derive the preview for a snapshot.

    Args:
        state: Current editor snapshot
        unit: Display unit for labels
        show_quadrants: Include the alignment quadrant debug fans (WIDTH_SELECTION only)

    Returns:
        EditorPreview; empty for INACTIVE and for FIRST_POINT.
    """
    mode = state.mode
    cursor = state.cursor_position
    mode_row = ToolInfoRow(key="Mode", value=mode.name)

    if mode == EditorMode.SECOND_POINT and state.first_point is not None:
        first = state.first_point
        if cursor is None:
            return EditorPreview(mode=mode, placed_points=[first], tool_info=[mode_row])
        distance_m = GeoCalculator.distance(first, cursor)
        bearing = GeoCalculator.bearing(first, cursor)
        return EditorPreview(
            mode=mode,
            placed_points=[first],
            rubber_band=(first, cursor),
            labels=[PreviewLabel(position=midpoint(first, cursor), text=distance_bearing_text(first, cursor, unit))],
            tool_info=[
                mode_row,
                ToolInfoRow(key="Distance", value=GeoCalculator.format_distance(distance_m, unit)),
                ToolInfoRow(key="Bearing", value=f"{bearing:.{LabelConfig.BEARING_DECIMALS}f}deg"),
            ],
        )

    if mode == EditorMode.WIDTH_SELECTION and state.first_point is not None and state.second_point is not None:
        first, second = state.first_point, state.second_point
        alignment = state.current_alignment
        axis_rows = [
            mode_row,
            ToolInfoRow(key="Length", value=GeoCalculator.format_distance(GeoCalculator.distance(first, second), unit)),
            ToolInfoRow(key="Alignment", value=alignment.display_name),
        ]
        if cursor is None:
            return EditorPreview(
                mode=mode,
                alignment=alignment,
                placed_points=[first, second],
                axis_line=(first, second),
                tool_info=axis_rows,
            )

        width_m = 2 * GeoCalculator.distance(second, cursor)
        polygon = None
        quadrants: list[QuadrantSector] = []
        if width_m > 0:
            polygon = RacetrackPolygonGenerator.generate(first, second, width_m, alignment)
            if show_quadrants:
                quadrants = build_quadrant_sectors(first, second, width_m / 2, alignment)

        return EditorPreview(
            mode=mode,
            alignment=alignment,
            placed_points=[first, second],
            axis_line=(first, second),
            width_line=(second, cursor),
            polygon=polygon,
            width_m=width_m,
            labels=[
                PreviewLabel(
                    position=midpoint(second, cursor),
                    text=width_alignment_text(width_m, alignment, unit),
                )
            ],
            tool_info=[*axis_rows, ToolInfoRow(key="Width", value=GeoCalculator.format_distance(width_m, unit))],
            quadrants=quadrants,
        )

    if mode == EditorMode.INACTIVE:
        return EditorPreview(mode=mode)
    return EditorPreview(mode=mode, tool_info=[mode_row])
