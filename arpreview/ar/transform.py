"""Transform state tracking for a placed AR object.

Keeps the pose (position, rotation, scale) of the single object shown in
an AR view, together with whether it has been placed yet. The tracker is
purely reactive: the gesture adapter calls it once per completed gesture
and it pushes the resulting node transform to a renderer callback.
"""

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from arpreview.utils import get_logger, vec3

logger = get_logger("ar.transform")

MIN_SCALE = 0.5
MAX_SCALE = 3.0

# Degrees of yaw per unit of rotation factor reported by the engine
ROTATION_DEGREES_PER_FACTOR = 180.0

DEFAULT_POSITION = (0.0, 0.0, -1.0)
DEFAULT_ROTATION = (0.0, 0.0, 0.0)
DEFAULT_SCALE = (1.0, 1.0, 1.0)


class PlacementState(str, enum.Enum):
    """Whether the object has been put into the scene."""
    UNPLACED = "unplaced"
    PLACED = "placed"


def clamp_scale(value: float) -> float:
    """Clamp a single scale component to the allowed range."""
    return max(MIN_SCALE, min(MAX_SCALE, value))


@dataclass
class Transform:
    """Pose of the manipulable object."""
    position: list[float] = field(default_factory=lambda: list(DEFAULT_POSITION))
    rotation: list[float] = field(default_factory=lambda: list(DEFAULT_ROTATION))
    scale: list[float] = field(default_factory=lambda: list(DEFAULT_SCALE))
    placed: bool = False

    @property
    def yaw(self) -> float:
        return self.rotation[1]

    def to_dict(self) -> dict:
        """Convert to the node transform handed to the AR engine."""
        return {
            "position": list(self.position),
            "rotation": list(self.rotation),
            "scale": list(self.scale),
        }


Renderer = Callable[[dict], None]


class TransformTracker:
    """
    Single source of truth for a placed object's pose.

    Starts UNPLACED. A tap or a found anchor moves it to PLACED, which is
    terminal for the session. Drag, rotate and pinch are accepted in either
    state; they change the pose but never place the object.
    """

    def __init__(self, renderer: Optional[Renderer] = None, transform: Optional[Transform] = None):
        """
        Initialize the tracker.

        Args:
            renderer: Called with the node transform after every change
            transform: Starting pose (defaults to one unit in front of the viewer)
        """
        self.transform = transform or Transform()
        self._renderer = renderer

    @property
    def state(self) -> PlacementState:
        return PlacementState.PLACED if self.transform.placed else PlacementState.UNPLACED

    @property
    def is_placed(self) -> bool:
        return self.transform.placed

    def render(self) -> dict:
        """Return the node transform the engine should display."""
        return self.transform.to_dict()

    def _push(self) -> None:
        if self._renderer is not None:
            self._renderer(self.render())

    def on_drag(self, new_position: Sequence[float]) -> None:
        """Move the object to the reported position, unclamped."""
        self.transform.position = vec3(new_position, "position")
        self._push()

    def on_rotate_end(self, delta_factor: float) -> None:
        """Apply a finished rotation gesture to the yaw axis.

        Yaw is not wrapped into [0, 360); repeated rotation accumulates.
        """
        pitch, yaw, roll = self.transform.rotation
        self.transform.rotation = [pitch, yaw + delta_factor * ROTATION_DEGREES_PER_FACTOR, roll]
        self._push()

    def on_pinch_end(self, scale_factor: float) -> None:
        """Apply a finished pinch gesture, clamping every component."""
        self.transform.scale = [clamp_scale(s * scale_factor) for s in self.transform.scale]
        self._push()

    def on_tap(self) -> bool:
        """Place the object if it is not placed yet.

        Returns:
            True if this call performed the placement
        """
        return self._place("tap")

    def on_anchor_found(self) -> bool:
        """Place the object once the engine locks onto a surface.

        Returns:
            True if this call performed the placement
        """
        return self._place("anchor")

    def _place(self, trigger: str) -> bool:
        if self.transform.placed:
            return False
        self.transform.placed = True
        logger.info(f"Object placed ({trigger}) at {self.transform.position}")
        self._push()
        return True
