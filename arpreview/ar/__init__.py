"""AR placement and manipulation for AR Product Preview.

Tracks the pose of the previewed product in response to the AR engine's
gesture callbacks. Rendering, tracking and asset loading stay inside the
engine; this package only owns the state.
"""

from arpreview.ar.transform import (
    Transform,
    TransformTracker,
    PlacementState,
    clamp_scale,
    MIN_SCALE,
    MAX_SCALE,
)
from arpreview.ar.gestures import (
    GestureAdapter,
    GestureState,
    TrackingState,
    TrackingReason,
)
from arpreview.ar.view import ARViewController

__all__ = [
    "Transform",
    "TransformTracker",
    "PlacementState",
    "clamp_scale",
    "MIN_SCALE",
    "MAX_SCALE",
    "GestureAdapter",
    "GestureState",
    "TrackingState",
    "TrackingReason",
    "ARViewController",
]
