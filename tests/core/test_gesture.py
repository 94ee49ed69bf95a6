import pytest

from dragstyle.core.applicator import StyleApplicator
from dragstyle.core.axis import SIZE_AXIS, WEIGHT_AXIS
from dragstyle.core.document import EditorSelection, InMemoryDocument
from dragstyle.core.gesture import (
    DRAG_THRESHOLD,
    AxisGestureController,
    FloatingStyleController,
    GestureOutcome,
    GestureState,
)


@pytest.fixture
def weight(applicator):
    controller = AxisGestureController(WEIGHT_AXIS, applicator)
    controller.sync(400)
    return controller


@pytest.fixture
def size(applicator):
    controller = AxisGestureController(SIZE_AXIS, applicator)
    controller.sync(16)
    return controller


class TestAxisGestureController:
    def test_starts_idle_with_default(self, applicator):
        controller = AxisGestureController(WEIGHT_AXIS, applicator)
        assert controller.state is GestureState.IDLE
        assert controller.value == 400

    def test_press_scales_pointer_position(self, weight):
        assert weight.press(100)
        assert weight.state is GestureState.PRESSED
        assert weight.session.start_x == 500
        assert weight.session.start_value == 400

    def test_press_without_selection_is_refused(self, document, tones):
        controller = AxisGestureController(WEIGHT_AXIS, StyleApplicator(document, tones))
        assert controller.press(10) is False
        assert controller.state is GestureState.IDLE

    def test_moves_inside_deadband_change_nothing(self, weight, document):
        weight.press(100)
        # 1 px of pointer travel is 5 scaled units on the weight axis: still a tap
        assert weight.move(101) is None
        assert weight.move(99) is None
        assert weight.state is GestureState.PRESSED
        assert document.attributes_at(6) == {}

    @pytest.mark.parametrize("wiggle", [[], [100], [101, 99, 101], [101]])
    def test_release_without_drag_is_a_tap(self, weight, wiggle):
        weight.press(100)
        for x in wiggle:
            weight.move(x)
        assert weight.release() is GestureOutcome.TAP
        assert weight.value == 700
        assert weight.animate is True
        assert weight.state is GestureState.IDLE

    @pytest.mark.parametrize("path", [[102], [101, 130], [100, 60, 100]])
    def test_release_after_threshold_is_a_drag(self, weight, path):
        weight.press(100)
        for x in path:
            weight.move(x)
        value = weight.value
        assert weight.release() is GestureOutcome.DRAG
        assert weight.value == value
        assert weight.animate is False

    def test_drag_maps_delta_onto_weight(self, weight, document):
        weight.press(100)
        # 30 px * 5 = 150 scaled units; (400 + 150) / 100 = 5.5 -> 600
        assert weight.move(130) == 600
        assert weight.state is GestureState.DRAGGING
        assert document.attributes_at(6)["weight"] == 600
        assert document.attributes_at(5) == {}

    def test_drag_clamps_to_axis(self, weight):
        weight.press(100)
        assert weight.move(10_000) == 900
        assert weight.move(-10_000) == 100

    def test_drag_stays_dragging_when_returning_to_start(self, weight):
        weight.press(100)
        weight.move(200)
        assert weight.move(100) == 400
        assert weight.state is GestureState.DRAGGING
        assert weight.release() is GestureOutcome.DRAG
        assert weight.value == 400

    def test_every_drag_move_is_applied(self, weight, document, monkeypatch):
        calls = []
        original = document.set_style_attribute
        monkeypatch.setattr(document, "set_style_attribute",
                            lambda name, value, sel: (calls.append(value), original(name, value, sel)))
        weight.press(100)
        # scaled deltas 10, 15, 55, 200
        for x in (102, 103, 111, 140):
            weight.move(x)
        assert calls == [400, 400, 500, 600]

    def test_drag_keeps_selection_on_document(self, weight, document):
        weight.press(100)
        weight.move(150)
        assert document.get_selection() == EditorSelection(6, 12)

    def test_release_without_press_is_noop(self, weight, tones):
        assert weight.release() is GestureOutcome.NONE
        assert weight.value == 400
        assert tones.played == []

    def test_move_without_press_is_noop(self, weight):
        assert weight.move(500) is None
        assert weight.state is GestureState.IDLE

    def test_second_press_replaces_session(self, weight):
        weight.press(100)
        weight.move(200)
        weight.press(50)
        assert weight.state is GestureState.PRESSED
        assert weight.session.start_x == 250
        assert weight.session.start_value == weight.value

    def test_tone_fires_once_for_constant_quantized_value(self, weight, tones):
        weight.press(100)
        # Each move is 2 px (10 scaled units) past the last; all resolve to 500.
        for x in range(111, 131, 2):
            weight.move(x)
        assert weight.value == 500
        assert tones.played == [600]

    def test_tone_per_step_change(self, weight, tones):
        weight.press(100)
        for x in (120, 140, 160, 140):
            weight.move(x)
        # 500, 600, 700, 600
        assert tones.played == [600, 700, 800, 700]

    def test_tap_plays_tone_of_new_value(self, weight, tones):
        weight.press(0)
        weight.release()
        assert tones.played == [800]

    def test_size_tap_from_body_goes_to_subheading(self, size):
        size.press(0)
        assert size.release() is GestureOutcome.TAP
        assert size.value == 20

    def test_size_tap_from_heading_wraps_to_body(self, size):
        size.sync(24)
        size.press(0)
        size.release()
        assert size.value == 16

    def test_size_drag_is_finer(self, size):
        size.press(100)
        # 30 px * 2 = 60 scaled units; 16 + 60 / 20 = 19
        assert size.move(130) == 19

    def test_size_deadband_uses_size_sensitivity(self, size):
        size.press(100)
        # 2 px * 2 = 4 scaled units, inside the deadband
        assert size.move(102) is None
        # 3 px * 2 = 6 scaled units, beyond it
        assert size.move(103) == 16
        assert size.state is GestureState.DRAGGING

    def test_select_commits_without_bounce(self, weight, document):
        weight.animate = True
        assert weight.select(850) == 800
        assert weight.animate is False
        assert document.attributes_at(6)["weight"] == 800

    def test_sync_is_silent(self, weight, tones, document):
        weight.sync(300)
        assert weight.value == 300
        assert tones.played == []
        assert document.attributes_at(6) == {}

    def test_sync_missing_value_uses_default(self, size):
        size.sync(None)
        assert size.value == 16

    def test_custom_threshold(self, applicator):
        controller = AxisGestureController(WEIGHT_AXIS, applicator, drag_threshold=50)
        controller.press(100)
        assert controller.move(110) is None
        assert controller.move(111) is not None

    def test_default_threshold(self):
        assert DRAG_THRESHOLD == 5


class TestFloatingStyleController:
    @pytest.fixture
    def controls(self, document, tones):
        controls = FloatingStyleController(StyleApplicator(document, tones))
        controls.refresh()
        return controls

    def test_hidden_without_selection(self, tones):
        doc = InMemoryDocument("nothing selected")
        controls = FloatingStyleController(StyleApplicator(doc, tones))
        assert controls.refresh() is False
        assert controls.press("weight", 10) is False
        assert controls.owner is None

    def test_refresh_reads_document_style(self, document, tones):
        document.set_style_attribute("weight", 700, EditorSelection(6, 12))
        document.set_style_attribute("size", 20, EditorSelection(6, 12))
        controls = FloatingStyleController(StyleApplicator(document, tones))
        assert controls.refresh() is True
        assert controls.value("weight") == 700
        assert controls.value("size") == 20
        assert tones.played == []

    def test_expanded_axis_follows_dragging_axis(self, controls):
        assert controls.expanded_axis is None

        controls.press("size", 100)
        controls.move(101)
        assert controls.expanded_axis is None

        controls.move(120)
        assert controls.expanded_axis is SIZE_AXIS

        # The picker outlives the drag so a follow-up click can pick a step.
        assert controls.release() is GestureOutcome.DRAG
        assert controls.expanded_axis is SIZE_AXIS

        controls.select("size", 22)
        assert controls.expanded_axis is None

    def test_only_one_axis_expanded(self, controls):
        controls.press("size", 100)
        controls.move(150)
        controls.press("weight", 100)
        assert controls.owner == "weight"
        assert controls.controller("size").state is GestureState.IDLE
        assert controls.expanded_axis is None

        controls.move(150)
        assert controls.expanded_axis is WEIGHT_AXIS

    def test_tap_routes_to_owner(self, controls):
        controls.press("weight", 10)
        assert controls.release() is GestureOutcome.TAP
        assert controls.value("weight") == 700
        assert controls.value("size") == 16

    def test_release_without_owner(self, controls):
        assert controls.release() is GestureOutcome.NONE

    def test_refresh_ignored_during_gesture(self, controls, document):
        controls.press("weight", 100)
        document.set_selection(None)
        assert controls.refresh() is True
        controls.move(200)
        assert controls.value("weight") == 900

    def test_listeners_notified(self, controls):
        events = []
        controls.add_listener(lambda: events.append(controls.owner))
        controls.press("weight", 100)
        controls.move(101)
        controls.move(150)
        controls.release()
        assert events == ["weight", "weight", None]

    def test_toggle_flag(self, controls, document):
        assert controls.toggle_flag("italic")
        assert controls.is_flag_active("italic")
        assert document.attributes_at(6)["italic"] is True

    def test_select_from_step_picker(self, controls, tones):
        assert controls.select("size", 22) == 22
        assert tones.played == [800]

    def test_repress_on_same_axis_replaces_session_without_commit(self, controls, document, tones):
        controls.press("weight", 100)
        assert controls.press("weight", 100)

        assert controls.owner == "weight"
        assert controls.value("weight") == 400
        assert controls.controller("weight").state is GestureState.PRESSED
        assert document.attributes_at(6) == {}
        assert tones.played == []

    def test_repress_on_same_axis_keeps_dragged_value_as_start(self, controls, tones):
        controls.press("weight", 100)
        controls.move(140)
        controls.press("weight", 50)

        session = controls.controller("weight").session
        assert session.start_value == 600
        assert session.start_x == 250
        assert tones.played == [700]

    def test_tap_closes_picker(self, controls):
        controls.press("size", 100)
        controls.move(150)
        controls.release()
        controls.press("size", 0)
        assert controls.expanded_axis is None
        assert controls.release() is GestureOutcome.TAP
        assert controls.expanded_axis is None

    def test_collapse_keeps_value(self, controls):
        controls.press("weight", 100)
        controls.move(150)
        controls.release()
        value = controls.value("weight")

        controls.collapse()
        assert controls.expanded_axis is None
        assert controls.value("weight") == value

    def test_new_selection_closes_picker(self, controls, document):
        controls.press("weight", 100)
        controls.move(150)
        controls.release()

        document.set_selection(EditorSelection(0, 5))
        controls.refresh()
        assert controls.expanded_axis is None

    def test_same_selection_refresh_keeps_picker(self, controls):
        controls.press("weight", 100)
        controls.move(150)
        controls.release()

        controls.refresh()
        assert controls.expanded_axis is WEIGHT_AXIS
