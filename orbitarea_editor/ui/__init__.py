"""Editing workflow and rendering helpers for the OrbitArea editor.

Core Components:
- transitions.py: Pure transition(state, event) function
- state_machine.py: OrbitAreaStateMachine (4 states) + EditorContext
- preview.py: Live preview geometry and labels from a snapshot
- map_layers.py: Pydeck layers for completed areas and the preview
"""

from orbitarea_editor.ui.map_layers import (
    create_deck,
    create_orbit_area_layers,
    create_preview_layers,
)
from orbitarea_editor.ui.preview import (
    EditorPreview,
    PreviewLabel,
    QuadrantSector,
    ToolInfoRow,
    build_preview,
)
from orbitarea_editor.ui.state_machine import (
    EditorContext,
    OrbitAreaStateMachine,
    TransitionLogListener,
)
from orbitarea_editor.ui.transitions import TransitionResult, transition

__all__ = [
    "OrbitAreaStateMachine",
    "EditorContext",
    "TransitionLogListener",
    "TransitionResult",
    "transition",
    "EditorPreview",
    "PreviewLabel",
    "QuadrantSector",
    "ToolInfoRow",
    "build_preview",
    "create_deck",
    "create_orbit_area_layers",
    "create_preview_layers",
]
