"""Per-step simulation of the brush engine: state updates and dab counting."""

from __future__ import annotations

import logging
import math
from typing import List

from paintcore.brush_core import BrushCore
from paintcore.settings import BrushInput, BrushSetting, BrushState

logger = logging.getLogger(__name__)

ACTUAL_RADIUS_MIN = 0.2
# Guards against radii like 1e20 and rendering overload from odd dynamics.
ACTUAL_RADIUS_MAX = 1000.0


def _exp(value: float) -> float:
    """Exponential that saturates to infinity instead of raising."""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _clamp_radius(radius: float) -> float:
    if radius < ACTUAL_RADIUS_MIN:
        return ACTUAL_RADIUS_MIN
    if radius > ACTUAL_RADIUS_MAX:
        return ACTUAL_RADIUS_MAX
    return radius


def exp_decay(t_const: float, t: float) -> float:
    """Return the fraction still left after ``t`` with time constant ``t_const``."""
    if t_const <= 0.001:
        return 0.0
    return _exp(-t / t_const)


def smallest_angular_difference(a: float, b: float) -> float:
    """Smallest signed angle in degrees from ``a`` to ``b``; clockwise is negative."""
    a = math.fmod(a, 360.0)
    b = math.fmod(b, 360.0)
    if a > b:
        d_cw = a - b
        d_ccw = b + 360.0 - a
    else:
        d_cw = a + 360.0 - b
        d_ccw = b - a
    return -d_cw if d_cw < d_ccw else d_ccw


class BrushDynamics(BrushCore):
    """Brush core that advances its states through simulation steps."""

    def _base(self, setting: BrushSetting) -> float:
        return self.settings[setting].base_value

    def update_states_and_setting_values(
        self,
        step_ddab: float,
        step_dx: float,
        step_dy: float,
        step_dpressure: float,
        step_declination: float,
        step_ascension: float,
        step_dtime: float,
    ) -> None:
        """Run one simulation step; steps are given per dab moved."""
        s = self.states
        S = BrushState
        V = BrushSetting

        if step_dtime < 0.0:
            logger.warning("Time is running backwards!")
            step_dtime = 0.001
        elif step_dtime == 0.0:
            step_dtime = 0.001

        s[S.X] += step_dx
        s[S.Y] += step_dy
        s[S.PRESSURE] += step_dpressure
        s[S.DECLINATION] += step_declination
        s[S.ASCENSION] += step_ascension

        base_radius = _exp(self._base(V.RADIUS_LOGARITHMIC))

        if s[S.PRESSURE] <= 0.0:
            s[S.PRESSURE] = 0.0
        pressure = s[S.PRESSURE]

        threshold = self._base(V.STROKE_THRESHOLD)
        if not s[S.STROKE_STARTED]:
            if pressure > threshold + 0.0001:
                s[S.STROKE_STARTED] = 1.0
                s[S.STROKE] = 0.0
        elif pressure <= threshold * 0.9 + 0.0001:
            s[S.STROKE_STARTED] = 0.0

        norm_dx = step_dx / step_dtime / base_radius
        norm_dy = step_dy / step_dtime / base_radius
        norm_speed = math.hypot(norm_dx, norm_dy)
        norm_dist = norm_speed * step_dtime

        inputs: List[float] = [0.0] * len(BrushInput)
        inputs[BrushInput.PRESSURE] = pressure * _exp(self._base(V.PRESSURE_GAIN_LOG))
        inputs[BrushInput.SPEED1] = (
            math.log(self.speed_mapping_gamma[0] + s[S.NORM_SPEED1_SLOW]) * self.speed_mapping_m[0]
            + self.speed_mapping_q[0]
        )
        inputs[BrushInput.SPEED2] = (
            math.log(self.speed_mapping_gamma[1] + s[S.NORM_SPEED2_SLOW]) * self.speed_mapping_m[1]
            + self.speed_mapping_q[1]
        )
        inputs[BrushInput.RANDOM] = self.rng.random()
        inputs[BrushInput.STROKE] = min(s[S.STROKE], 1.0)
        inputs[BrushInput.DIRECTION] = math.fmod(
            math.atan2(s[S.DIRECTION_DY], s[S.DIRECTION_DX]) / (2 * math.pi) * 360 + 180.0, 180.0
        )
        inputs[BrushInput.TILT_DECLINATION] = s[S.DECLINATION]
        inputs[BrushInput.TILT_ASCENSION] = math.fmod(s[S.ASCENSION] + 180.0, 360.0) - 180.0
        inputs[BrushInput.CUSTOM] = s[S.CUSTOM_INPUT]

        if self.print_inputs:
            print(
                "press=% 4.3f, speed1=% 4.4f\tspeed2=% 4.4f\tstroke=% 4.3f\tcustom=% 4.3f"
                % (
                    inputs[BrushInput.PRESSURE],
                    inputs[BrushInput.SPEED1],
                    inputs[BrushInput.SPEED2],
                    inputs[BrushInput.STROKE],
                    inputs[BrushInput.CUSTOM],
                )
            )

        self.settings_value = [mapping.calculate(inputs) for mapping in self.settings]
        value = self.settings_value

        fac = 1.0 - exp_decay(value[V.SLOW_TRACKING_PER_DAB], step_ddab)
        s[S.ACTUAL_X] += (s[S.X] - s[S.ACTUAL_X]) * fac
        s[S.ACTUAL_Y] += (s[S.Y] - s[S.ACTUAL_Y]) * fac

        fac = 1.0 - exp_decay(value[V.SPEED1_SLOWNESS], step_dtime)
        s[S.NORM_SPEED1_SLOW] += (norm_speed - s[S.NORM_SPEED1_SLOW]) * fac
        fac = 1.0 - exp_decay(value[V.SPEED2_SLOWNESS], step_dtime)
        s[S.NORM_SPEED2_SLOW] += (norm_speed - s[S.NORM_SPEED2_SLOW]) * fac

        time_constant = _exp(value[V.OFFSET_BY_SPEED_SLOWNESS] * 0.01) - 1.0
        if time_constant < 0.002:
            time_constant = 0.002
        fac = 1.0 - exp_decay(time_constant, step_dtime)
        s[S.NORM_DX_SLOW] += (norm_dx - s[S.NORM_DX_SLOW]) * fac
        s[S.NORM_DY_SLOW] += (norm_dy - s[S.NORM_DY_SLOW]) * fac

        # Orientation: low-pass filter over dab time rather than wall-clock time.
        dx = step_dx / base_radius
        dy = step_dy / base_radius
        step_in_dabtime = math.hypot(dx, dy)
        fac = 1.0 - exp_decay(_exp(value[V.DIRECTION_FILTER] * 0.5) - 1.0, step_in_dabtime)
        dx_old = s[S.DIRECTION_DX]
        dy_old = s[S.DIRECTION_DY]
        # 180 degree turns do not matter: use the opposite vector if closer.
        if (dx_old - dx) ** 2 + (dy_old - dy) ** 2 > (dx_old + dx) ** 2 + (dy_old + dy) ** 2:
            dx = -dx
            dy = -dy
        s[S.DIRECTION_DX] += (dx - s[S.DIRECTION_DX]) * fac
        s[S.DIRECTION_DY] += (dy - s[S.DIRECTION_DY]) * fac

        fac = 1.0 - exp_decay(value[V.CUSTOM_INPUT_SLOWNESS], 0.1)
        s[S.CUSTOM_INPUT] += (value[V.CUSTOM_INPUT] - s[S.CUSTOM_INPUT]) * fac

        frequency = _exp(-value[V.STROKE_DURATION_LOGARITHMIC])
        s[S.STROKE] += norm_dist * frequency
        if s[S.STROKE] < 0:
            s[S.STROKE] = 0.0
        wrap = 1.0 + value[V.STROKE_HOLDTIME]
        if s[S.STROKE] > wrap:
            if wrap > 9.9 + 1.0:
                # "Infinite" hold time: keep the stroke at its end.
                s[S.STROKE] = 1.0
            else:
                s[S.STROKE] = math.fmod(s[S.STROKE], wrap)
                if s[S.STROKE] < 0:
                    s[S.STROKE] = 0.0

        s[S.ACTUAL_RADIUS] = _clamp_radius(_exp(value[V.RADIUS_LOGARITHMIC]))
        s[S.ACTUAL_ELLIPTICAL_DAB_RATIO] = value[V.ELLIPTICAL_DAB_RATIO]
        s[S.ACTUAL_ELLIPTICAL_DAB_ANGLE] = value[V.ELLIPTICAL_DAB_ANGLE]

    def count_dabs_to(self, x: float, y: float, pressure: float, dt: float) -> float:
        """Return how many dabs fall between the current state and (x, y) after ``dt``."""
        s = self.states
        S = BrushState
        V = BrushSetting

        if s[S.ACTUAL_RADIUS] == 0.0:
            s[S.ACTUAL_RADIUS] = _exp(self._base(V.RADIUS_LOGARITHMIC))
        s[S.ACTUAL_RADIUS] = _clamp_radius(s[S.ACTUAL_RADIUS])

        base_radius = _clamp_radius(_exp(self._base(V.RADIUS_LOGARITHMIC)))

        xx = x - s[S.X]
        yy = y - s[S.Y]

        ratio = s[S.ACTUAL_ELLIPTICAL_DAB_RATIO]
        if ratio > 1.0:
            angle_rad = s[S.ACTUAL_ELLIPTICAL_DAB_ANGLE] / 360 * 2 * math.pi
            cs = math.cos(angle_rad)
            sn = math.sin(angle_rad)
            yyr = (yy * cs - xx * sn) * ratio
            xxr = yy * sn + xx * cs
            dist = math.sqrt(yyr * yyr + xxr * xxr)
        else:
            dist = math.hypot(xx, yy)

        res1 = dist / s[S.ACTUAL_RADIUS] * self._base(V.DABS_PER_ACTUAL_RADIUS)
        res2 = dist / base_radius * self._base(V.DABS_PER_BASIC_RADIUS)
        res3 = dt * self._base(V.DABS_PER_SECOND)
        return res1 + res2 + res3