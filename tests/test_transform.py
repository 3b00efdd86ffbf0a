"""Tests for AR transform tracking and gesture translation."""

import pytest
import random
from unittest.mock import Mock

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

ENGINE_BEGAN = 1
ENGINE_CHANGED = 2
ENGINE_ENDED = 3


class TestTransform:
    """Tests for the Transform dataclass."""

    def test_defaults(self):
        """Test the object starts one unit in front of the viewer."""
        t = Transform()

        assert t.position == [0.0, 0.0, -1.0]
        assert t.rotation == [0.0, 0.0, 0.0]
        assert t.scale == [1.0, 1.0, 1.0]
        assert t.placed is False

    def test_instances_do_not_share_lists(self):
        a = Transform()
        b = Transform()
        a.position[0] = 5.0
        assert b.position[0] == 0.0

    def test_to_dict(self):
        t = Transform(position=[1.0, 2.0, 3.0])
        d = t.to_dict()

        assert d == {
            "position": [1.0, 2.0, 3.0],
            "rotation": [0.0, 0.0, 0.0],
            "scale": [1.0, 1.0, 1.0],
        }


class TestPlacement:
    """Tests for the unplaced/placed state machine."""

    def test_starts_unplaced(self):
        tracker = TransformTracker()
        assert tracker.state == PlacementState.UNPLACED
        assert not tracker.is_placed

    def test_tap_places(self):
        tracker = TransformTracker()
        assert tracker.on_tap() is True
        assert tracker.state == PlacementState.PLACED

    def test_second_tap_is_noop(self):
        """Test tapping twice leaves the object placed."""
        tracker = TransformTracker()
        tracker.on_tap()

        assert tracker.on_tap() is False
        assert tracker.state == PlacementState.PLACED

    def test_anchor_found_places(self):
        tracker = TransformTracker()
        assert tracker.on_anchor_found() is True
        assert tracker.is_placed

    def test_first_of_tap_and_anchor_wins(self):
        tracker = TransformTracker()
        assert tracker.on_anchor_found() is True
        assert tracker.on_tap() is False
        assert tracker.on_anchor_found() is False
        assert tracker.is_placed

    def test_manipulation_before_placement_does_not_place(self):
        """Test gestures before placement move the node but keep it unplaced."""
        tracker = TransformTracker()

        tracker.on_drag([0.2, 0.0, -1.5])
        tracker.on_rotate_end(0.5)
        tracker.on_pinch_end(2.0)

        assert tracker.state == PlacementState.UNPLACED
        assert tracker.transform.position == [0.2, 0.0, -1.5]
        assert tracker.transform.rotation[1] == 90.0
        assert tracker.transform.scale == [2.0, 2.0, 2.0]

    def test_placement_keeps_pose(self):
        tracker = TransformTracker()
        tracker.on_drag([1.0, 0.0, -2.0])
        tracker.on_tap()

        assert tracker.transform.position == [1.0, 0.0, -2.0]


class TestDrag:
    """Tests for drag handling."""

    def test_drag_replaces_position(self):
        tracker = TransformTracker()
        tracker.on_drag([3.0, -4.0, 5.0])
        assert tracker.transform.position == [3.0, -4.0, 5.0]

    def test_drag_is_not_clamped(self):
        tracker = TransformTracker()
        tracker.on_drag([1e6, -1e6, 0.0])
        assert tracker.transform.position == [1e6, -1e6, 0.0]

    def test_drag_accepts_tuples(self):
        tracker = TransformTracker()
        tracker.on_drag((1, 2, 3))
        assert tracker.transform.position == [1.0, 2.0, 3.0]

    def test_drag_rejects_wrong_length(self):
        tracker = TransformTracker()
        with pytest.raises(ValueError):
            tracker.on_drag([1.0, 2.0])
        assert tracker.transform.position == [0.0, 0.0, -1.0]


class TestRotation:
    """Tests for yaw rotation."""

    def test_rotation_from_ten_degrees(self):
        """Test 10 + 0.5 * 180 = 100, then 190 with no wraparound."""
        tracker = TransformTracker(transform=Transform(rotation=[0.0, 10.0, 0.0]))

        tracker.on_rotate_end(0.5)
        assert tracker.transform.rotation[1] == 100.0

        tracker.on_rotate_end(0.5)
        assert tracker.transform.rotation[1] == 190.0

    def test_rotation_is_not_wrapped(self):
        tracker = TransformTracker()
        for _ in range(5):
            tracker.on_rotate_end(1.0)
        assert tracker.transform.yaw == 900.0

    def test_negative_rotation(self):
        tracker = TransformTracker()
        tracker.on_rotate_end(-0.25)
        assert tracker.transform.yaw == -45.0

    def test_only_yaw_changes(self):
        tracker = TransformTracker(transform=Transform(rotation=[15.0, 0.0, -5.0]))
        tracker.on_rotate_end(0.1)

        assert tracker.transform.rotation[0] == 15.0
        assert tracker.transform.rotation[2] == -5.0


class TestPinch:
    """Tests for pinch scaling and clamping."""

    def test_identity_factor(self):
        tracker = TransformTracker(transform=Transform(scale=[1.7, 1.7, 1.7]))
        tracker.on_pinch_end(1.0)
        assert tracker.transform.scale == [1.7, 1.7, 1.7]

    def test_scale_up(self):
        tracker = TransformTracker()
        tracker.on_pinch_end(1.5)
        assert tracker.transform.scale == [1.5, 1.5, 1.5]

    def test_clamped_to_max(self):
        tracker = TransformTracker()
        tracker.on_pinch_end(100.0)
        assert tracker.transform.scale == [MAX_SCALE] * 3

    def test_clamped_to_min(self):
        tracker = TransformTracker()
        tracker.on_pinch_end(0.001)
        assert tracker.transform.scale == [MIN_SCALE] * 3

    def test_zero_and_negative_factors_clamp_to_min(self):
        tracker = TransformTracker()
        tracker.on_pinch_end(0.0)
        assert tracker.transform.scale == [MIN_SCALE] * 3

        tracker.on_pinch_end(-2.0)
        assert tracker.transform.scale == [MIN_SCALE] * 3

    def test_repeated_pinch_at_bound_is_idempotent(self):
        tracker = TransformTracker()
        tracker.on_pinch_end(10.0)
        tracker.on_pinch_end(10.0)
        tracker.on_pinch_end(10.0)
        assert tracker.transform.scale == [MAX_SCALE] * 3

    def test_random_sequences_stay_in_bounds(self):
        """Test any sequence of factors keeps every component in range."""
        rng = random.Random(1234)
        tracker = TransformTracker()

        for _ in range(500):
            tracker.on_pinch_end(rng.uniform(0.0, 5.0) if rng.random() < 0.8 else rng.uniform(-10, 1000))
            assert all(MIN_SCALE <= s <= MAX_SCALE for s in tracker.transform.scale)

    def test_clamp_scale(self):
        assert clamp_scale(0.1) == 0.5
        assert clamp_scale(2.0) == 2.0
        assert clamp_scale(9.0) == 3.0


class TestRendering:
    """Tests for pushing transforms to the engine node."""

    def test_renderer_called_on_each_change(self):
        renderer = Mock()
        tracker = TransformTracker(renderer=renderer)

        tracker.on_drag([0.0, 0.0, -2.0])
        tracker.on_rotate_end(0.5)
        tracker.on_pinch_end(2.0)

        assert renderer.call_count == 3
        last = renderer.call_args[0][0]
        assert last == {
            "position": [0.0, 0.0, -2.0],
            "rotation": [0.0, 90.0, 0.0],
            "scale": [2.0, 2.0, 2.0],
        }

    def test_renderer_called_once_on_placement(self):
        renderer = Mock()
        tracker = TransformTracker(renderer=renderer)

        tracker.on_tap()
        tracker.on_tap()

        assert renderer.call_count == 1

    def test_render_returns_copy(self):
        tracker = TransformTracker()
        rendered = tracker.render()
        rendered["position"][0] = 42.0
        assert tracker.transform.position[0] == 0.0


class TestGestureState:
    """Tests for translating engine gesture codes."""

    def test_known_codes(self):
        assert GestureState.from_code(1) == GestureState.BEGAN
        assert GestureState.from_code(2) == GestureState.CHANGED
        assert GestureState.from_code(3) == GestureState.ENDED

    def test_unknown_code_is_cancelled(self):
        assert GestureState.from_code(0) == GestureState.CANCELLED
        assert GestureState.from_code(99) == GestureState.CANCELLED
        assert GestureState.from_code(None) == GestureState.CANCELLED

    def test_tracking_codes(self):
        assert TrackingState.from_code(3) == TrackingState.NORMAL
        assert TrackingState.from_code(2) == TrackingState.LIMITED
        assert TrackingState.from_code(7) == TrackingState.UNAVAILABLE
        assert TrackingReason.from_code(2) == TrackingReason.EXCESSIVE_MOTION
        assert TrackingReason.from_code(None) == TrackingReason.NONE


class TestGestureAdapter:
    """Tests for the engine callback surface."""

    @pytest.fixture
    def tracker(self):
        return TransformTracker()

    @pytest.fixture
    def adapter(self, tracker):
        return GestureAdapter(tracker)

    def test_rotate_applied_only_when_ended(self, adapter, tracker):
        """Test in-progress rotate frames never accumulate."""
        assert adapter.on_rotate(ENGINE_BEGAN, 0.5, None) is False
        for _ in range(30):
            assert adapter.on_rotate(ENGINE_CHANGED, 0.5, None) is False
        assert tracker.transform.yaw == 0.0

        assert adapter.on_rotate(ENGINE_ENDED, 0.5, None) is True
        assert tracker.transform.yaw == 90.0

    def test_pinch_applied_only_when_ended(self, adapter, tracker):
        adapter.on_pinch(ENGINE_BEGAN, 2.0, None)
        adapter.on_pinch(ENGINE_CHANGED, 2.0, None)
        assert tracker.transform.scale == [1.0, 1.0, 1.0]

        adapter.on_pinch(ENGINE_ENDED, 2.0, None)
        assert tracker.transform.scale == [2.0, 2.0, 2.0]

    def test_unknown_code_ignored(self, adapter, tracker):
        assert adapter.on_pinch(42, 2.0, None) is False
        assert tracker.transform.scale == [1.0, 1.0, 1.0]

    def test_events_applied_in_order(self, adapter, tracker):
        adapter.on_drag([1.0, 0.0, -1.0])
        adapter.on_drag([2.0, 0.0, -1.0])
        adapter.on_pinch(ENGINE_ENDED, 4.0, None)
        adapter.on_pinch(ENGINE_ENDED, 0.5, None)

        assert tracker.transform.position == [2.0, 0.0, -1.0]
        # 1.0 * 4.0 clamps to 3.0 first, then halves
        assert tracker.transform.scale == [1.5, 1.5, 1.5]

    def test_tap_and_anchor(self, adapter, tracker):
        adapter.on_anchor_found()
        adapter.on_tap()
        assert tracker.is_placed

    def test_tracking_state(self, adapter):
        assert adapter.tracking_state == TrackingState.UNAVAILABLE

        assert adapter.on_tracking_state_changed(2, 3) == TrackingState.LIMITED
        assert adapter.tracking_reason == TrackingReason.INSUFFICIENT_FEATURES

        assert adapter.on_tracking_state_changed(3, 1) == TrackingState.NORMAL
        assert adapter.tracking_state == TrackingState.NORMAL
