"""Pydeck layer factories for completed OrbitAreas and the live editor preview.

Key conventions (deck.gl):
- Uses [lon, lat] coordinate order (GeoJSON standard)
- Colors as RGBA lists [R, G, B, A] (0-255)
- Data prepared as list[dict] for GPU streaming

Z-order of the editor layers (back to front):
polygons -> lines -> points -> labels -> quadrant debug fans
"""

import logging
from dataclasses import dataclass, field

import pydeck as pdk

from orbitarea_editor.constants import LayerConfig, MapConfig, StyleConfig
from orbitarea_editor.model.orbit_area import OrbitArea
from orbitarea_editor.model.point import Point
from orbitarea_editor.ui.preview import EditorPreview, QuadrantSector

logger = logging.getLogger(__name__)


def layer_id(*parts: str, base: str = LayerConfig.EDITOR_LAYER_ID) -> str:
    """Namespaced layer id, e.g. "orbit-area-editor-preview-polygon"."""
    return "-".join([base, *parts])


def to_lon_lat_list(points: list[Point]) -> list[list[float]]:
    return [[p.longitude, p.latitude] for p in points]


@dataclass
class EditorLayerCollection:
    """Editor layers grouped by z-order."""

    polygons: list[pdk.Layer] = field(default_factory=list)
    lines: list[pdk.Layer] = field(default_factory=list)
    points: list[pdk.Layer] = field(default_factory=list)
    labels: list[pdk.Layer] = field(default_factory=list)
    debug: list[pdk.Layer] = field(default_factory=list)

    def get_ordered_layers(self) -> list[pdk.Layer]:
        """Return all layers in correct z-order (back to front)."""
        return self.polygons + self.lines + self.points + self.labels + self.debug


def create_orbit_area_layers(areas: list[OrbitArea]) -> list[pdk.Layer]:
    """PolygonLayer with one racetrack per completed OrbitArea, plus a
    ScatterplotLayer marking each area's two axis points.

    Returns an empty list when there is nothing to draw.
    """
    if not areas:
        return []

    area_data = [
        {
            "id": area.id,
            "polygon": to_lon_lat_list(area.polygon()),
            "alignment": area.alignment.display_name,
            "width_m": area.width,
        }
        for area in areas
    ]
    point_data = [
        {"id": area.id, "position": list(p.lon_lat)} for area in areas for p in (area.first_point, area.second_point)
    ]
    logger.debug(f"Rendering {len(area_data)} OrbitArea polygon(s)")
    return [
        pdk.Layer(
            "PolygonLayer",
            area_data,
            get_polygon="polygon",
            get_fill_color=StyleConfig.ORBIT_AREA_FILL,
            get_line_color=StyleConfig.ORBIT_AREA_OUTLINE,
            line_width_min_pixels=LayerConfig.LINE_WIDTH_PX,
            filled=True,
            stroked=True,
            pickable=True,
            id=LayerConfig.ORBIT_AREA_LAYER_ID,
        ),
        pdk.Layer(
            "ScatterplotLayer",
            point_data,
            get_position="position",
            get_fill_color=StyleConfig.POINT_COLOR,
            get_radius=LayerConfig.POINT_RADIUS_PX,
            radius_units="pixels",
            pickable=False,
            id=LayerConfig.ORBIT_AREA_POINTS_LAYER_ID,
        ),
    ]


def _line_layer(suffix: str, start: Point, end: Point, color: list[int]) -> pdk.Layer:
    return pdk.Layer(
        "LineLayer",
        [{"source": [start.longitude, start.latitude], "target": [end.longitude, end.latitude]}],
        get_source_position="source",
        get_target_position="target",
        get_color=color,
        get_width=LayerConfig.LINE_WIDTH_PX,
        pickable=False,
        id=layer_id(suffix),
    )


def _quadrant_layers(sectors: list[QuadrantSector]) -> list[pdk.Layer]:
    sector_data = []
    label_data = []
    for sector in sectors:
        base_color = StyleConfig.ALIGNMENT_COLORS[sector.alignment.display_name]
        alpha = StyleConfig.ACTIVE_QUADRANT_ALPHA if sector.is_active else StyleConfig.INACTIVE_QUADRANT_ALPHA
        sector_data.append(
            {
                "name": sector.name,
                "polygon": to_lon_lat_list(sector.polygon),
                "fill_color": [*base_color[:3], alpha],
                "line_color": (
                    StyleConfig.ACTIVE_QUADRANT_LINE if sector.is_active else StyleConfig.INACTIVE_QUADRANT_LINE
                ),
            }
        )
        label_data.append({"position": list(sector.label_position.lon_lat), "text": sector.name})

    return [
        pdk.Layer(
            "PolygonLayer",
            sector_data,
            get_polygon="polygon",
            get_fill_color="fill_color",
            get_line_color="line_color",
            line_width_min_pixels=1,
            filled=True,
            stroked=True,
            pickable=False,
            id=layer_id("debug", "quadrants"),
        ),
        pdk.Layer(
            "TextLayer",
            label_data,
            get_position="position",
            get_text="text",
            get_color=StyleConfig.LABEL_TEXT_COLOR,
            get_size=LayerConfig.QUADRANT_LABEL_SIZE,
            background=True,
            get_background_color=StyleConfig.LABEL_BACKGROUND,
            pickable=False,
            id=layer_id("debug", "labels"),
        ),
    ]


def create_preview_layers(preview: EditorPreview) -> list[pdk.Layer]:
    """Layers for one frame of the editor, ordered back to front."""
    collection = EditorLayerCollection()

    if preview.polygon:
        collection.polygons.append(
            pdk.Layer(
                "PolygonLayer",
                [{"polygon": to_lon_lat_list(preview.polygon)}],
                get_polygon="polygon",
                get_fill_color=StyleConfig.ORBIT_AREA_FILL,
                get_line_color=StyleConfig.ORBIT_AREA_OUTLINE,
                line_width_min_pixels=LayerConfig.LINE_WIDTH_PX,
                filled=True,
                stroked=True,
                pickable=False,
                id=layer_id("preview", "polygon"),
            )
        )

    if preview.rubber_band:
        collection.lines.append(_line_layer("axis-line", *preview.rubber_band, StyleConfig.LINE_COLOR))
    if preview.axis_line:
        collection.lines.append(_line_layer("axis-line", *preview.axis_line, StyleConfig.AXIS_LINE_COLOR))
    if preview.width_line:
        collection.lines.append(_line_layer("width-line", *preview.width_line, StyleConfig.ALIGNMENT_INDICATOR_COLOR))

    if preview.placed_points:
        collection.points.append(
            pdk.Layer(
                "ScatterplotLayer",
                [{"position": list(p.lon_lat)} for p in preview.placed_points],
                get_position="position",
                get_fill_color=StyleConfig.POINT_COLOR,
                get_radius=LayerConfig.POINT_RADIUS_PX,
                radius_units="pixels",
                pickable=False,
                id=layer_id("points"),
            )
        )

    if preview.labels:
        collection.labels.append(
            pdk.Layer(
                "TextLayer",
                [{"position": list(label.position.lon_lat), "text": label.text} for label in preview.labels],
                get_position="position",
                get_text="text",
                get_color=StyleConfig.LABEL_TEXT_COLOR,
                get_size=LayerConfig.LABEL_SIZE,
                background=True,
                get_background_color=StyleConfig.LABEL_BACKGROUND,
                pickable=False,
                id=layer_id("labels"),
            )
        )

    if preview.quadrants:
        collection.debug.extend(_quadrant_layers(preview.quadrants))

    return collection.get_ordered_layers()


def create_deck(
    layers: list[pdk.Layer],
    center: Point | None = None,
    zoom: int = MapConfig.DEFAULT_ZOOM,
) -> pdk.Deck:
    """Deck with the default view state centered on center (or the configured start)."""
    view_state = pdk.ViewState(
        latitude=center.latitude if center else MapConfig.START_CENTER_LAT,
        longitude=center.longitude if center else MapConfig.START_CENTER_LON,
        zoom=zoom,
        pitch=MapConfig.DEFAULT_PITCH,
        bearing=MapConfig.DEFAULT_BEARING,
    )
    return pdk.Deck(layers=layers, initial_view_state=view_state)
