"""Boundary between the AR engine's callbacks and the transform tracker.

The engine reports gesture phases and tracking status as raw integer codes.
They are translated into enums here, before anything else sees them.
"""

import enum
from typing import Any, Optional, Sequence

from arpreview.ar.transform import TransformTracker
from arpreview.utils import get_logger

logger = get_logger("ar.gestures")


class GestureState(str, enum.Enum):
    """Phase of a continuous gesture."""
    BEGAN = "began"
    CHANGED = "changed"
    ENDED = "ended"
    CANCELLED = "cancelled"

    @classmethod
    def from_code(cls, code: Any) -> "GestureState":
        """Translate an engine gesture code.

        Codes the engine is not documented to send are treated as a
        cancelled gesture so they can never be applied.
        """
        state = _GESTURE_CODES.get(code)
        if state is None:
            logger.warning(f"Unknown gesture state code: {code!r}")
            return cls.CANCELLED
        return state


_GESTURE_CODES = {
    1: GestureState.BEGAN,
    2: GestureState.CHANGED,
    3: GestureState.ENDED,
}


class TrackingState(enum.IntEnum):
    """Camera tracking quality reported by the engine."""
    UNAVAILABLE = 1
    LIMITED = 2
    NORMAL = 3

    @classmethod
    def from_code(cls, code: Any) -> "TrackingState":
        try:
            return cls(code)
        except ValueError:
            logger.warning(f"Unknown tracking state code: {code!r}")
            return cls.UNAVAILABLE


class TrackingReason(enum.IntEnum):
    """Why tracking is limited."""
    NONE = 1
    EXCESSIVE_MOTION = 2
    INSUFFICIENT_FEATURES = 3

    @classmethod
    def from_code(cls, code: Any) -> "TrackingReason":
        try:
            return cls(code)
        except ValueError:
            return cls.NONE


class GestureAdapter:
    """
    Engine-facing callback surface.

    Events are forwarded in the order the engine emits them. Rotate and
    pinch are applied only when their gesture has ended; in-progress
    frames are dropped so a single gesture is applied exactly once.
    """

    def __init__(self, tracker: TransformTracker):
        self.tracker = tracker
        self.tracking_state = TrackingState.UNAVAILABLE
        self.tracking_reason = TrackingReason.NONE

    def on_drag(self, position: Sequence[float], source: Optional[Any] = None) -> None:
        self.tracker.on_drag(position)

    def on_rotate(self, raw_state: Any, angle_delta: float, source: Optional[Any] = None) -> bool:
        """Handle a rotate callback.

        Returns:
            True if the rotation was applied
        """
        if GestureState.from_code(raw_state) is not GestureState.ENDED:
            return False
        self.tracker.on_rotate_end(angle_delta)
        return True

    def on_pinch(self, raw_state: Any, scale_delta: float, source: Optional[Any] = None) -> bool:
        """Handle a pinch callback.

        Returns:
            True if the scale change was applied
        """
        if GestureState.from_code(raw_state) is not GestureState.ENDED:
            return False
        self.tracker.on_pinch_end(scale_delta)
        return True

    def on_tap(self, *args: Any) -> None:
        self.tracker.on_tap()

    def on_anchor_found(self, *args: Any) -> None:
        self.tracker.on_anchor_found()

    def on_tracking_state_changed(self, state: Any, reason: Any = None) -> TrackingState:
        """Record the engine's tracking status."""
        new_state = TrackingState.from_code(state)
        self.tracking_reason = TrackingReason.from_code(reason)

        if new_state is TrackingState.NORMAL and self.tracking_state is not TrackingState.NORMAL:
            logger.info("AR tracking initialized")
        elif new_state is TrackingState.LIMITED:
            logger.debug(f"AR tracking limited: {self.tracking_reason.name.lower()}")

        self.tracking_state = new_state
        return new_state
