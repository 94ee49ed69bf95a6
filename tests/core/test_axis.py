import runpy
from dataclasses import replace

import pytest

from dragstyle.core.axis import AXES, SIZE_AXIS, WEIGHT_AXIS, DiscreteStyleAxis, get_axis, js_round


@pytest.mark.parametrize("x, expected", [(5.5, 6), (5.49, 5), (-0.5, 0), (-1.5, -1), (2.0, 2), (4.5, 5)])
def test_js_round_rounds_half_up(x, expected):
    assert js_round(x) == expected


class TestWeightAxis:
    def test_values_and_presets(self):
        assert WEIGHT_AXIS.values == (100, 200, 300, 400, 500, 600, 700, 800, 900)
        assert WEIGHT_AXIS.presets == (400, 700)
        assert WEIGHT_AXIS.sensitivity == 5

    def test_candidate_always_legal(self):
        for start in WEIGHT_AXIS.values:
            for delta in range(-1200, 1201, 7):
                candidate = WEIGHT_AXIS.candidate(start, delta)
                assert 100 <= candidate <= 900
                assert candidate % 100 == 0

    def test_half_step_rounds_up(self):
        # (400 + 150) / 100 = 5.5 -> 6
        assert WEIGHT_AXIS.candidate(400, 150) == 600

    def test_negative_half_step_rounds_up(self):
        # (400 - 150) / 100 = 2.5 -> 3
        assert WEIGHT_AXIS.candidate(400, -150) == 300

    def test_clamps_at_bounds(self):
        assert WEIGHT_AXIS.candidate(900, 5000) == 900
        assert WEIGHT_AXIS.candidate(100, -5000) == 100

    @pytest.mark.parametrize("current, expected", [(100, 700), (400, 700), (600, 700), (700, 400), (900, 400)])
    def test_tap_toggles_between_presets(self, current, expected):
        assert WEIGHT_AXIS.toggle(current) == expected

    def test_every_value_has_a_tone(self):
        assert [WEIGHT_AXIS.tone_for(v) for v in WEIGHT_AXIS.values] == [200, 300, 400, 500, 600, 700, 800, 900, 900]


class TestSizeAxis:
    def test_values_and_presets(self):
        assert SIZE_AXIS.values == tuple(range(16, 25))
        assert SIZE_AXIS.presets == (16, 20, 24)
        assert SIZE_AXIS.sensitivity == 2

    def test_candidate_is_finer_grained(self):
        assert SIZE_AXIS.candidate(16, 20) == 17
        assert SIZE_AXIS.candidate(16, 30) == 18  # 17.5 rounds up
        assert SIZE_AXIS.candidate(20, -40) == 18

    def test_candidate_clamps(self):
        assert SIZE_AXIS.candidate(24, 1000) == 24
        assert SIZE_AXIS.candidate(16, -1000) == 16

    @pytest.mark.parametrize("current, expected", [(16, 20), (18, 20), (20, 24), (24, 16), (22, 20)])
    def test_tap_cycles_presets(self, current, expected):
        assert SIZE_AXIS.toggle(current) == expected

    def test_tones(self):
        assert SIZE_AXIS.tone_for(16) == 200
        assert SIZE_AXIS.tone_for(23) == 800
        assert SIZE_AXIS.tone_for(24) == 900
        assert SIZE_AXIS.tone_for(25) is None


class TestAxisDefinition:
    def test_clamp_snaps_to_nearest_legal_value(self):
        assert WEIGHT_AXIS.clamp(449) == 400
        assert WEIGHT_AXIS.clamp(451) == 500
        assert WEIGHT_AXIS.clamp(50) == 100
        assert SIZE_AXIS.clamp(30) == 24

    def test_membership_and_presets(self):
        assert 500 in WEIGHT_AXIS
        assert 550 not in WEIGHT_AXIS
        assert SIZE_AXIS.is_preset(20)
        assert not SIZE_AXIS.is_preset(21)

    def test_rejects_unordered_values(self):
        with pytest.raises(ValueError):
            replace(SIZE_AXIS, values=(16, 18, 17))

    def test_rejects_stray_preset(self):
        with pytest.raises(ValueError):
            replace(SIZE_AXIS, presets=(16, 30))

    def test_rejects_illegal_default(self):
        with pytest.raises(ValueError):
            replace(WEIGHT_AXIS, default=450)

    def test_replace_keeps_behaviour(self):
        tuned = replace(WEIGHT_AXIS, sensitivity=3)
        assert isinstance(tuned, DiscreteStyleAxis)
        assert tuned.candidate(400, 150) == 600

    def test_registry(self):
        assert set(AXES) == {"weight", "size"}
        assert get_axis("size") is SIZE_AXIS
        with pytest.raises(KeyError):
            get_axis("tracking")


def test_module_walkthrough_prints_every_axis(capsys):
    runpy.run_module("dragstyle.core.axis", run_name="__main__")
    out = capsys.readouterr().out
    assert "--- weight (default 400, presets (400, 700)) ---" in out
    assert "taps: 400 -> 700 -> 400" in out
    assert "taps: 16 -> 20 -> 24 -> 16" in out
