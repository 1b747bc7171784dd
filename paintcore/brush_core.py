"""Brush engine settings and state storage."""

from __future__ import annotations

import math
import random
from typing import List, Optional, Tuple

from paintcore.helpers import RandomSource
from paintcore.mapping import Mapping
from paintcore.settings import BrushInput, BrushSetting, BrushState

_RNG_SEED = 1000

# Two constraints that fix how physical speed maps to the speed inputs:
# the curve passes through (FIX1_X, FIX1_Y) and has slope FIX2_DY at FIX2_X.
_FIX1_X = 45.0
_FIX1_Y = 0.5
_FIX2_X = 45.0
_FIX2_DY = 0.015


class BrushCore:
    """Holds a brush's setting mappings, current setting values and states.

    Settings stay constant during a stroke; states change as the stroke
    progresses.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random(_RNG_SEED)
        self.print_inputs = False
        self.settings: List[Mapping] = [Mapping(len(BrushInput)) for _ in BrushSetting]
        self.settings_value: List[float] = [0.0] * len(BrushSetting)
        self.states: List[float] = [0.0] * len(BrushState)
        self.speed_mapping_gamma: List[float] = [0.0, 0.0]
        self.speed_mapping_m: List[float] = [0.0, 0.0]
        self.speed_mapping_q: List[float] = [0.0, 0.0]
        self.stroke_total_painting_time = 0.0
        self.stroke_current_idling_time = 0.0
        self.new_stroke()
        self.settings_base_values_have_changed()
        self.reset_requested = True

    def _mapping(self, setting: int) -> Mapping:
        return self.settings[BrushSetting(setting)]

    def set_base_value(self, setting: int, value: float) -> None:
        """Set the base value of a setting and refresh derived values."""
        self._mapping(setting).base_value = value
        self.settings_base_values_have_changed()

    def get_base_value(self, setting: int) -> float:
        """Return the base value of a setting."""
        return self._mapping(setting).base_value

    def set_mapping_n(self, setting: int, input: int, n: int) -> None:
        """Set the number of points in the curve from ``input`` to ``setting``."""
        self._mapping(setting).set_n(BrushInput(input), n)

    def get_mapping_n(self, setting: int, input: int) -> int:
        """Return the number of points in the curve from ``input`` to ``setting``."""
        return self._mapping(setting).get_n(BrushInput(input))

    def set_mapping_point(self, setting: int, input: int, index: int, x: float, y: float) -> None:
        """Set one control point of a dynamics curve."""
        self._mapping(setting).set_point(BrushInput(input), index, x, y)

    def get_mapping_point(self, setting: int, input: int, index: int) -> Tuple[float, float]:
        """Return one (x, y) control point of a dynamics curve."""
        return self._mapping(setting).get_point(BrushInput(input), index)

    def is_constant(self, setting: int) -> bool:
        """True when the setting has no dynamics."""
        return self._mapping(setting).is_constant()

    def get_inputs_used_n(self, setting: int) -> int:
        """Return how many inputs drive the setting's dynamics."""
        return self._mapping(setting).inputs_used

    def get_state(self, state: int) -> float:
        """Return an internal engine state."""
        return self.states[BrushState(state)]

    def set_state(self, state: int, value: float) -> None:
        """Set an internal engine state."""
        self.states[BrushState(state)] = value

    def reset(self) -> None:
        """Request a state reset at the start of the next stroke step."""
        self.reset_requested = True

    def new_stroke(self) -> None:
        """Start a new stroke for undo/redo stroke splitting."""
        self.stroke_current_idling_time = 0.0
        self.stroke_total_painting_time = 0.0

    def settings_base_values_have_changed(self) -> None:
        """Recompute the speed-input curves y = log(gamma + x) * m + q."""
        gamma_settings = (BrushSetting.SPEED1_GAMMA, BrushSetting.SPEED2_GAMMA)
        for i, setting in enumerate(gamma_settings):
            gamma = math.exp(self.settings[setting].base_value)
            c1 = math.log(_FIX1_X + gamma)
            m = _FIX2_DY * (_FIX2_X + gamma)
            q = _FIX1_Y - m * c1
            self.speed_mapping_gamma[i] = gamma
            self.speed_mapping_m[i] = m
            self.speed_mapping_q[i] = q