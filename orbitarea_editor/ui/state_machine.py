"""State machine for the OrbitArea editor.

Uses python-statemachine to host the pure transition function
(transitions.transition) behind named events:

- Clear state definitions mirroring EditorMode
- Guarded transitions (the finalising click needs a non-zero width)
- before_* hooks that delegate to the pure transition function
- Listeners for side effects (logging, completion notification)

States (4 states):
    INACTIVE: Not editing; waiting for start
    FIRST_POINT: Waiting for the first axis point
    SECOND_POINT: First point placed, rubber band follows the cursor
    WIDTH_SELECTION: Axis placed, cursor drags width and alignment

Transitions:
    INACTIVE -> FIRST_POINT: start
    FIRST_POINT -> SECOND_POINT: click
    SECOND_POINT -> WIDTH_SELECTION: click
    WIDTH_SELECTION -> INACTIVE: click (emits OrbitArea to on_complete callbacks)
    FIRST_POINT/SECOND_POINT/WIDTH_SELECTION -> itself: hover
    WIDTH_SELECTION -> itself: set_alignment, click on the second point (zero width)
    any -> INACTIVE: cancel

Input collaborators should call handle(EditorEvent): it drops events without
a coordinate and turns out-of-sequence events into logged no-ops.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from orbitarea_editor.model.alignment import Alignment
from orbitarea_editor.model.distance_unit import DistanceUnit
from orbitarea_editor.model.editor_state import EditorEvent, EditorMode, EditorState, EventKind
from orbitarea_editor.model.orbit_area import OrbitArea
from orbitarea_editor.model.point import Point
from orbitarea_editor.ui.transitions import commit_width, transition

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[OrbitArea], None]

# State ids of OrbitAreaStateMachine keyed by snapshot mode
STATE_ID_FOR_MODE: dict[EditorMode, str] = {
    EditorMode.INACTIVE: "inactive",
    EditorMode.FIRST_POINT: "first_point",
    EditorMode.SECOND_POINT: "second_point",
    EditorMode.WIDTH_SELECTION: "width_selection",
}

assert set(STATE_ID_FOR_MODE) == set(EditorMode), "Every EditorMode needs a state id"


@dataclass
class EditorContext:
    """Shared context/model for the state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state id.

    Attributes:
        snapshot: Current immutable workflow snapshot
        distance_unit: Display unit for live labels
        last_completed: OrbitArea emitted by the most recent click (None otherwise)
        completed: Every OrbitArea finished through this context, oldest first
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    snapshot: EditorState = field(default_factory=EditorState)
    distance_unit: DistanceUnit = DistanceUnit.METERS
    last_completed: OrbitArea | None = None
    completed: list[OrbitArea] = field(default_factory=list)

    def apply(self, event: EditorEvent) -> None:
        """Run the pure transition and store the new snapshot."""
        result = transition(self.snapshot, event)
        self.snapshot = result.state
        self.last_completed = result.completed
        if result.completed is not None:
            self.completed.append(result.completed)

    def __repr__(self) -> str:
        return (
            f"EditorContext(state={self.state}, mode={self.snapshot.mode.name}, "
            f"alignment={self.snapshot.current_alignment.display_name}, "
            f"unit={self.distance_unit.name}, completed={len(self.completed)})"
        )


class TransitionLogListener:
    """Listener that logs every transition at DEBUG.

    Usage:
        sm = OrbitAreaStateMachine()
        sm.add_listener(TransitionLogListener())
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def after_transition(self, event: str, source: State, target: State) -> None:
        self.log.debug(f"[STATE] {source.name} --({event})--> {target.name}")


class OrbitAreaStateMachine(StateMachine):
    """State machine for the three-click OrbitArea workflow.

    See module docstring for the complete transition table. The snapshot in
    the model is always consistent with the active state:
    STATE_ID_FOR_MODE[snapshot.mode] == current_state.id.
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    inactive = State("Inactive", initial=True)
    first_point = State("FirstPoint")
    second_point = State("SecondPoint")
    width_selection = State("WidthSelection")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    start = inactive.to(first_point)

    click = (
        first_point.to(second_point)
        | second_point.to(width_selection)
        | width_selection.to(inactive, cond="has_width")
        | width_selection.to.itself(unless="has_width")
    )

    hover = first_point.to.itself() | second_point.to.itself() | width_selection.to.itself()

    set_alignment = width_selection.to.itself()

    cancel = (
        inactive.to.itself()
        | first_point.to(inactive)
        | second_point.to(inactive)
        | width_selection.to(inactive)
    )

    # ==========================================================================
    # Guards (Conditions)
    # ==========================================================================

    def has_width(self, coordinate: Point) -> bool:
        """Guard: The finalising click is away from the second point."""
        second = self.context.snapshot.second_point
        return second is not None and commit_width(second, coordinate) > 0

    # ==========================================================================
    # Transition Actions (before_* hooks)
    # ==========================================================================

    def before_start(self) -> None:
        self.context.apply(EditorEvent.start())

    def before_click(self, coordinate: Point) -> None:
        self.context.apply(EditorEvent.click(coordinate))

    def before_hover(self, coordinate: Point) -> None:
        self.context.apply(EditorEvent.hover(coordinate))

    def before_set_alignment(self, alignment: Alignment) -> None:
        self.context.apply(EditorEvent.set_alignment(alignment))

    def before_cancel(self) -> None:
        self.context.apply(EditorEvent.cancel())

    def after_click(self) -> None:
        """Notify completion callbacks once the OrbitArea is committed."""
        orbit_area = self.context.last_completed
        if orbit_area is None:
            return
        for callback in self._completion_callbacks:
            callback(orbit_area)

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(self, context: EditorContext | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None). The active
                state is restored from context.snapshot.mode.
        """
        self._completion_callbacks: list[CompletionCallback] = []
        model = context or EditorContext()
        super().__init__(model=model, start_value=STATE_ID_FOR_MODE[model.snapshot.mode])

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> EditorContext:
        """Alias for model."""
        return self.model

    @property
    def snapshot(self) -> EditorState:
        """Current immutable workflow snapshot for renderers."""
        return self.context.snapshot

    @property
    def distance_unit(self) -> DistanceUnit:
        return self.context.distance_unit

    def set_distance_unit(self, unit: DistanceUnit) -> None:
        """Change the display unit (no state change)."""
        self.context.distance_unit = unit
        logger.info(f"Distance unit: {unit.name}")

    def on_complete(self, callback: CompletionCallback) -> CompletionCallback:
        """Register a callback receiving every completed OrbitArea.

        Returns the callback so this can be used as a decorator.
        """
        self._completion_callbacks.append(callback)
        return callback

    def get_state_name(self) -> str:
        """Get current state name for display."""
        # current_state is deprecated in favour of configuration after the 2.x line (pinned <3.0)
        return self.current_state.name

    def __repr__(self) -> str:
        return f"OrbitAreaStateMachine(state={self.get_state_name()}, model={self.context!r})"

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition

        Returns:
            True if transition succeeded, False otherwise.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.debug(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    def handle(self, event: EditorEvent) -> bool:
        """Single entry point for the map-interaction collaborator.

        Returns:
            True if the event was accepted by the current state.
        """
        if event.kind in (EventKind.CLICK, EventKind.HOVER):
            if event.coordinate is None:
                return False
            return self.try_transition(event.kind.value, coordinate=event.coordinate)
        if event.kind == EventKind.SET_ALIGNMENT:
            return self.try_transition(event.kind.value, alignment=event.alignment)
        return self.try_transition(event.kind.value)

    @staticmethod
    def create(
        distance_unit: DistanceUnit = DistanceUnit.METERS,
        log_transitions: bool = True,
    ) -> tuple["OrbitAreaStateMachine", EditorContext]:
        """Factory method to create state machine with context and optional log listener.

        Args:
            distance_unit: Initial display unit
            log_transitions: If True, adds TransitionLogListener.

        Returns:
            Tuple of (OrbitAreaStateMachine, EditorContext)
        """
        context = EditorContext(distance_unit=distance_unit)
        sm = OrbitAreaStateMachine(context=context)
        if log_transitions:
            sm.add_listener(TransitionLogListener())
            logger.info("Created OrbitAreaStateMachine with TransitionLogListener")
        else:
            logger.info("Created OrbitAreaStateMachine without listener")
        return sm, context
