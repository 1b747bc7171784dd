import math
import random

import pytest

from paintcore.brush_core import BrushCore
from paintcore.settings import BrushInput, BrushSetting, BrushState


def test_new_core_has_zero_states_and_pending_reset():
    core = BrushCore()
    assert all(core.get_state(s) == 0.0 for s in BrushState)
    assert core.reset_requested is True
    assert core.stroke_total_painting_time == 0.0


def test_base_value_round_trip():
    core = BrushCore(random.Random(1))
    core.set_base_value(BrushSetting.HARDNESS, 0.75)
    assert core.get_base_value(BrushSetting.HARDNESS) == 0.75


def test_state_round_trip():
    core = BrushCore()
    core.set_state(BrushState.ACTUAL_X, 12.5)
    assert core.get_state(BrushState.ACTUAL_X) == 12.5


def test_invalid_state_rejected():
    with pytest.raises(ValueError):
        BrushCore().get_state(len(BrushState))


def test_invalid_setting_rejected():
    with pytest.raises(ValueError):
        BrushCore().set_base_value(-1, 1.0)


def test_mapping_points_and_constancy():
    core = BrushCore()
    s, i = BrushSetting.OPAQUE_MULTIPLY, BrushInput.PRESSURE
    assert core.is_constant(s)
    core.set_mapping_n(s, i, 2)
    core.set_mapping_point(s, i, 0, 0.0, 0.0)
    core.set_mapping_point(s, i, 1, 1.0, 1.0)
    assert core.get_mapping_n(s, i) == 2
    assert core.get_mapping_point(s, i, 1) == (1.0, 1.0)
    assert not core.is_constant(s)
    assert core.get_inputs_used_n(s) == 1


@pytest.mark.parametrize("gamma_log", [0.0, 2.0, -1.5])
def test_speed_curve_meets_constraints(gamma_log):
    core = BrushCore()
    core.set_base_value(BrushSetting.SPEED1_GAMMA, gamma_log)
    core.set_base_value(BrushSetting.SPEED2_GAMMA, gamma_log)
    for k in range(2):
        gamma = core.speed_mapping_gamma[k]
        m = core.speed_mapping_m[k]
        q = core.speed_mapping_q[k]
        assert gamma == pytest.approx(math.exp(gamma_log))
        assert math.log(45.0 + gamma) * m + q == pytest.approx(0.5)
        assert m / (45.0 + gamma) == pytest.approx(0.015)


def test_reset_and_new_stroke():
    core = BrushCore()
    core.reset_requested = False
    core.stroke_total_painting_time = 3.0
    core.stroke_current_idling_time = 1.0
    core.reset()
    core.new_stroke()
    assert core.reset_requested is True
    assert core.stroke_total_painting_time == 0.0
    assert core.stroke_current_idling_time == 0.0


def test_given_rng_is_used():
    rng = random.Random(5)
    core = BrushCore(rng)
    assert core.rng is rng