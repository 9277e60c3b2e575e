"""OrbitArea Editor - Draw racetrack-shaped orbit areas on a map.

A three-click editing workflow featuring:
- Geodesic helpers on a spherical Earth (distance, bearing, destination)
- Alignment detection from the cursor direction (CENTRE / LEFT / RIGHT)
- Racetrack polygon generation with semicircular caps
- State machine-based editing for robust user interactions

Modules:
    core: Foundation classes (geo calculations, alignment, racetrack polygons)
    model: Data structures (Point, OrbitArea, EditorState, EditorEvent)
    ui: Editing state machine, live preview and pydeck layers

Example:
    from orbitarea_editor.model import EditorEvent, Point
    from orbitarea_editor.ui import OrbitAreaStateMachine

    sm, ctx = OrbitAreaStateMachine.create()
    sm.on_complete(print)
    sm.handle(EditorEvent.start())
"""
