# -*- coding: utf-8 -*-
"""
src/dragstyle/core/gesture.py

Gesture controllers that turn pointer press/move/release sequences into
discrete style values.

Each style axis gets its own `AxisGestureController`, a small state machine:

    IDLE --press--> PRESSED --move beyond threshold--> DRAGGING
      ^                |                                   |
      +---release------+ (tap: toggle preset)              |
      +---release------------------------------------------+ (drag: keep live value)

While dragging, the horizontal displacement is mapped linearly onto the axis
and every resulting value is pushed to the document straight away, so the
document itself is the live preview. A release after a drag therefore has
nothing left to commit.

`FloatingStyleController` groups the per-axis controllers behind the
floating style controls: it routes window-wide pointer events to whichever
axis owns the pointer, and decides which axis's step picker is expanded.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from .applicator import StyleApplicator
from .axis import SIZE_AXIS, WEIGHT_AXIS, DiscreteStyleAxis

logger = logging.getLogger(__name__)

# Deadband, in scaled pointer units, separating a tap from a drag.
DRAG_THRESHOLD = 5


class GestureState(Enum):
    IDLE = "idle"
    PRESSED = "pressed"
    DRAGGING = "dragging"


class GestureOutcome(Enum):
    NONE = "none"
    TAP = "tap"
    DRAG = "drag"


@dataclass
class GestureSession:
    """Ephemeral state of one press-to-release sequence on one axis."""
    pressed: bool
    dragging: bool
    start_x: float
    start_value: int
    current_value: int
    last_announced_value: Optional[int]


class AxisGestureController:
    """
    Converts pointer events on one axis into tap toggles or continuous drags.

    Attributes:
        axis (DiscreteStyleAxis): The axis being controlled.
        applicator (StyleApplicator): Where values are applied and announced.
        drag_threshold (float): Deadband in scaled units.
        sensitivity (float): Multiplier for pointer X coordinates.
        animate (bool): Whether the last value change should be animated.
            True after a tap commit ("bounce"), False during and after drags.
    """

    def __init__(self, axis: DiscreteStyleAxis, applicator: StyleApplicator,
                 drag_threshold: float = DRAG_THRESHOLD, sensitivity: Optional[float] = None):
        self.axis = axis
        self.applicator = applicator
        self.drag_threshold = drag_threshold
        self.sensitivity = axis.sensitivity if sensitivity is None else sensitivity
        self.animate = False
        self._value = axis.default
        self._session: Optional[GestureSession] = None

    @property
    def value(self) -> int:
        return self._value

    @property
    def session(self) -> Optional[GestureSession]:
        return self._session

    @property
    def state(self) -> GestureState:
        if self._session is None:
            return GestureState.IDLE
        return GestureState.DRAGGING if self._session.dragging else GestureState.PRESSED

    def press(self, x: float) -> bool:
        """
        Starts a gesture at pointer position `x`.

        A press while another session is active replaces that session.

        Returns:
            bool: False if there is no tracked selection to style.
        """
        if self.applicator.tracked_selection is None:
            logger.debug(f"[{self.axis.name}] Press ignored: no selection.")
            return False
        if self._session is not None:
            logger.debug(f"[{self.axis.name}] Press replaces an active session.")

        self._session = GestureSession(
            pressed=True,
            dragging=False,
            start_x=x * self.sensitivity,
            start_value=self._value,
            current_value=self._value,
            last_announced_value=self.applicator.last_announced(self.axis),
        )
        logger.debug(f"[{self.axis.name}] Pressed at x={x} with value {self._value}.")
        return True

    def move(self, x: float) -> Optional[int]:
        """
        Handles a pointer move to `x`.

        Returns:
            The live value if this move updated it, otherwise None (no
            session, or still within the deadband).
        """
        session = self._session
        if session is None:
            return None

        delta = x * self.sensitivity - session.start_x
        if not session.dragging:
            if abs(delta) <= self.drag_threshold:
                return None
            session.dragging = True
            logger.debug(f"[{self.axis.name}] Drag started (delta={delta}).")

        self.animate = False
        candidate = self.axis.candidate(session.start_value, delta)
        session.current_value = candidate
        self._value = candidate
        self.applicator.apply(self.axis, candidate)
        session.last_announced_value = self.applicator.last_announced(self.axis)
        return candidate

    def release(self) -> GestureOutcome:
        """
        Ends the gesture. A gesture that never crossed the drag threshold is
        a tap and toggles the axis between its presets.
        """
        session = self._session
        if session is None:
            return GestureOutcome.NONE

        dragged = session.dragging
        session.pressed = False
        session.dragging = False
        self._session = None

        if dragged:
            logger.debug(f"[{self.axis.name}] Drag committed at {self._value}.")
            return GestureOutcome.DRAG

        self._value = self.axis.toggle(self._value)
        self.animate = True
        self.applicator.apply(self.axis, self._value)
        logger.debug(f"[{self.axis.name}] Tap toggled to {self._value}.")
        return GestureOutcome.TAP

    def select(self, value: int) -> int:
        """Commits a value picked directly from the step picker, without bounce."""
        self._value = self.axis.clamp(value)
        self.animate = False
        if self._session is not None:
            self._session.current_value = self._value
        self.applicator.apply(self.axis, self._value)
        return self._value

    def sync(self, value: Optional[int]) -> int:
        """
        Adopts a value reported by the document without applying or
        announcing it. Missing values fall back to the axis default.
        """
        self._value = self.axis.clamp(self.axis.default if value is None else value)
        self.applicator.reset_announced(self.axis, self._value)
        return self._value


class FloatingStyleController:
    """
    The state behind the floating style controls.

    Holds one `AxisGestureController` per axis. At most one axis owns the
    pointer at a time, and at most one axis has its step picker expanded.
    The picker opens when an axis starts dragging and stays open after the
    drag is released, so a follow-up click can pick a step directly. The
    next press, a picked step or a new selection closes it.
    """

    def __init__(self, applicator: StyleApplicator,
                 axes: Iterable[DiscreteStyleAxis] = (WEIGHT_AXIS, SIZE_AXIS),
                 drag_threshold: float = DRAG_THRESHOLD):
        self.applicator = applicator
        self.controllers: Dict[str, AxisGestureController] = {
            axis.name: AxisGestureController(axis, applicator, drag_threshold) for axis in axes
        }
        self.visible = False
        self._owner: Optional[str] = None
        self._expanded: Optional[str] = None
        self._listeners: List[Callable[[], None]] = []

    def add_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def _notify(self):
        for callback in self._listeners:
            callback()

    def controller(self, axis_name: str) -> AxisGestureController:
        return self.controllers[axis_name]

    @property
    def owner(self) -> Optional[str]:
        """Name of the axis currently owning the pointer, if any."""
        return self._owner

    @property
    def expanded_axis(self) -> Optional[DiscreteStyleAxis]:
        if self._expanded is None:
            return None
        return self.controllers[self._expanded].axis

    def refresh(self) -> bool:
        """
        Re-reads the selection and its style from the document.

        Ignored while a gesture is in progress: the selection captured at
        press time stays in use until release.

        Returns:
            bool: Whether the controls should be visible.
        """
        if self._owner is not None:
            return self.visible

        document = self.applicator.document
        selection = document.get_selection()
        if selection != self.applicator.tracked_selection:
            self._expanded = None
        self.applicator.track(selection)
        self.visible = selection is not None
        if selection is not None:
            attributes = document.get_style_attributes(selection)
            for controller in self.controllers.values():
                controller.sync(attributes.get(controller.axis.attribute))
        self._notify()
        return self.visible

    def press(self, axis_name: str, x: float) -> bool:
        """
        Starts a gesture on `axis_name`. A press on another axis first
        releases the current owner; a press on the owning axis only
        replaces its session, committing nothing.
        """
        if not self.visible:
            return False
        if self._owner is not None and self._owner != axis_name:
            self.release()
        self._expanded = None

        if not self.controllers[axis_name].press(x):
            return False
        self._owner = axis_name
        self._notify()
        return True

    def move(self, x: float) -> Optional[int]:
        if self._owner is None:
            return None
        controller = self.controllers[self._owner]
        value = controller.move(x)
        if controller.state is GestureState.DRAGGING and self._expanded != self._owner:
            self._expanded = self._owner
            logger.debug(f"Step picker expanded for '{self._owner}'.")
        if value is not None:
            self._notify()
        return value

    def release(self) -> GestureOutcome:
        if self._owner is None:
            return GestureOutcome.NONE
        outcome = self.controllers[self._owner].release()
        self._owner = None
        if outcome is not GestureOutcome.DRAG:
            self._expanded = None
        self._notify()
        return outcome

    def select(self, axis_name: str, value: int) -> int:
        result = self.controllers[axis_name].select(value)
        self._expanded = None
        self._notify()
        return result

    def collapse(self) -> None:
        """Closes the step picker without changing any value."""
        if self._expanded is not None:
            self._expanded = None
            self._notify()

    def toggle_flag(self, name: str) -> bool:
        toggled = self.applicator.toggle_flag(name)
        if toggled:
            self._notify()
        return toggled

    def is_flag_active(self, name: str) -> bool:
        selection = self.applicator.tracked_selection
        if selection is None:
            return False
        return self.applicator.document.is_flag_active(name, selection)

    def value(self, axis_name: str) -> int:
        return self.controllers[axis_name].value
