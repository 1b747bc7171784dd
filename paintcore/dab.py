"""Turning the brush's current settings and states into a single dab."""

from __future__ import annotations

import math
from typing import Protocol, Tuple

from paintcore.dynamics import ACTUAL_RADIUS_MAX, ACTUAL_RADIUS_MIN, BrushDynamics
from paintcore.helpers import (
    clamp,
    hsl_to_rgb,
    hsv_to_rgb,
    rand_gauss,
    rgb_to_hsl,
    rgb_to_hsv,
)
from paintcore.settings import BrushSetting, BrushState


class Surface(Protocol):
    """A paintable surface that the brush draws dabs onto."""

    def draw_dab(
        self,
        x: float,
        y: float,
        radius: float,
        color_r: float,
        color_g: float,
        color_b: float,
        opaque: float,
        hardness: float,
        alpha_eraser: float,
        aspect_ratio: float,
        angle: float,
        lock_alpha: float,
        colorize: float,
    ) -> bool:
        """Draw one dab; return True if the surface was modified."""

    def get_color(self, x: float, y: float, radius: float) -> Tuple[float, float, float, float]:
        """Return the average (r, g, b, a) under a round area, colour not premultiplied."""


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _pow(base: float, exponent: float) -> float:
    try:
        return base**exponent
    except ZeroDivisionError:
        return math.inf
    except OverflowError:
        return math.inf


def _round_half_away(value: float) -> float:
    if value >= 0.0:
        return float(math.floor(value + 0.5))
    return float(math.ceil(value - 0.5))


class DabBrush(BrushDynamics):
    """Brush that can compute and draw a dab from its current state."""

    def prepare_and_draw_dab(self, surface: Surface) -> bool:
        """Compute everything needed for one dab and let the surface draw it.

        Meant to be called right after a simulation step. Returns True if
        the surface was modified.
        """
        s = self.states
        S = BrushState
        V = BrushSetting
        value = self.settings_value

        # Two negative opaque values must not give a positive product.
        if value[V.OPAQUE] < 0:
            value[V.OPAQUE] = 0.0
        opaque = clamp(value[V.OPAQUE] * value[V.OPAQUE_MULTIPLY], 0.0, 1.0)

        if value[V.OPAQUE_LINEARIZE]:
            dabs_per_pixel = (
                self._base(V.DABS_PER_ACTUAL_RADIUS) + self._base(V.DABS_PER_BASIC_RADIUS)
            ) * 2.0
            if dabs_per_pixel < 1.0:
                dabs_per_pixel = 1.0
            dabs_per_pixel = 1.0 + self._base(V.OPAQUE_LINEARIZE) * (dabs_per_pixel - 1.0)
            # beta = beta_dab ** dabs_per_pixel
            beta = 1.0 - opaque
            if dabs_per_pixel == 0.0:
                exponent = math.inf
            else:
                exponent = 1.0 / dabs_per_pixel
            beta_dab = _pow(beta, exponent)
            opaque = 1.0 - beta_dab

        x = s[S.ACTUAL_X]
        y = s[S.ACTUAL_Y]

        base_radius = _exp(self._base(V.RADIUS_LOGARITHMIC))

        offset_by_speed = value[V.OFFSET_BY_SPEED]
        if offset_by_speed:
            x += s[S.NORM_DX_SLOW] * offset_by_speed * 0.1 * base_radius
            y += s[S.NORM_DY_SLOW] * offset_by_speed * 0.1 * base_radius

        if value[V.OFFSET_BY_RANDOM]:
            amp = max(value[V.OFFSET_BY_RANDOM], 0.0)
            x += rand_gauss(self.rng) * amp * base_radius
            y += rand_gauss(self.rng) * amp * base_radius

        radius = s[S.ACTUAL_RADIUS]
        if value[V.RADIUS_BY_RANDOM]:
            # Add the noise to the logarithmic radius.
            radius_log = value[V.RADIUS_LOGARITHMIC]
            radius_log += rand_gauss(self.rng) * value[V.RADIUS_BY_RANDOM]
            radius = clamp(_exp(radius_log), ACTUAL_RADIUS_MIN, ACTUAL_RADIUS_MAX)
            alpha_correction = (s[S.ACTUAL_RADIUS] / radius) ** 2
            if alpha_correction <= 1.0:
                opaque *= alpha_correction

        if value[V.SMUDGE_LENGTH] < 1.0 and (
            value[V.SMUDGE] != 0.0 or not self.settings[V.SMUDGE].is_constant()
        ):
            self._update_smudge_color(surface, x, y, radius)

        color_h = self._base(V.COLOR_H)
        color_s = self._base(V.COLOR_S)
        color_v = self._base(V.COLOR_V)
        eraser_target_alpha = 1.0
        if value[V.SMUDGE] > 0.0:
            # Mix the smudge colour with the brush colour in RGB.
            r, g, b = hsv_to_rgb(color_h, color_s, color_v)
            fac = min(value[V.SMUDGE], 1.0)
            # A partly transparent smudge colour erases toward its alpha.
            eraser_target_alpha = clamp((1 - fac) * 1.0 + fac * s[S.SMUDGE_A], 0.0, 1.0)
            if eraser_target_alpha > 0:
                r = (fac * s[S.SMUDGE_RA] + (1 - fac) * r) / eraser_target_alpha
                g = (fac * s[S.SMUDGE_GA] + (1 - fac) * g) / eraser_target_alpha
                b = (fac * s[S.SMUDGE_BA] + (1 - fac) * b) / eraser_target_alpha
            else:
                # Only erasing; the colour does not matter.
                r, g, b = 1.0, 0.0, 0.0
            color_h, color_s, color_v = rgb_to_hsv(r, g, b)

        if value[V.ERASER]:
            eraser_target_alpha *= 1.0 - value[V.ERASER]

        color_h += value[V.CHANGE_COLOR_H]
        color_s += value[V.CHANGE_COLOR_HSV_S]
        color_v += value[V.CHANGE_COLOR_V]

        if value[V.CHANGE_COLOR_L] or value[V.CHANGE_COLOR_HSL_S]:
            h, sat, light = rgb_to_hsl(*hsv_to_rgb(color_h, color_s, color_v))
            light += value[V.CHANGE_COLOR_L]
            sat += value[V.CHANGE_COLOR_HSL_S]
            color_h, color_s, color_v = rgb_to_hsv(*hsl_to_rgb(h, sat, light))

        hardness = clamp(value[V.HARDNESS], 0.0, 1.0)

        # Anti-aliasing: soften the dab while keeping its optical radius.
        current_fadeout_in_pixels = radius * (1.0 - hardness)
        min_fadeout_in_pixels = value[V.ANTI_ALIASING]
        if current_fadeout_in_pixels < min_fadeout_in_pixels:
            current_optical_radius = radius - (1.0 - hardness) * radius / 2.0
            hardness_new = (current_optical_radius - min_fadeout_in_pixels / 2.0) / (
                current_optical_radius + min_fadeout_in_pixels / 2.0
            )
            radius = min_fadeout_in_pixels / (1.0 - hardness_new)
            hardness = hardness_new

        snap_to_pixel = value[V.SNAP_TO_PIXEL]
        if snap_to_pixel > 0.0:
            snapped_x = math.floor(x) + 0.5
            snapped_y = math.floor(y) + 0.5
            x = x + (snapped_x - x) * snap_to_pixel
            y = y + (snapped_y - y) * snap_to_pixel

            snapped_radius = _round_half_away(radius * 2.0) / 2.0
            if snapped_radius < 0.5:
                snapped_radius = 0.5
            if snap_to_pixel > 0.9999:
                # Keep neighbouring pixels from being painted by rounding.
                snapped_radius -= 0.0001
            radius = radius + (snapped_radius - radius) * snap_to_pixel

        color_r, color_g, color_b = hsv_to_rgb(color_h, color_s, color_v)
        return bool(
            surface.draw_dab(
                x,
                y,
                radius,
                color_r,
                color_g,
                color_b,
                opaque,
                hardness,
                eraser_target_alpha,
                s[S.ACTUAL_ELLIPTICAL_DAB_RATIO],
                s[S.ACTUAL_ELLIPTICAL_DAB_ANGLE],
                value[V.LOCK_ALPHA],
                value[V.COLORIZE],
            )
        )

    def _update_smudge_color(self, surface: Surface, x: float, y: float, radius: float) -> None:
        s = self.states
        S = BrushState
        V = BrushSetting
        value = self.settings_value

        fac = max(value[V.SMUDGE_LENGTH], 0.01)
        px = int(x + 0.5)
        py = int(y + 0.5)

        # Sampling the surface is costly, so reuse the last sample when it
        # is recent enough; sample at most every second dab.
        s[S.LAST_GETCOLOR_RECENTNESS] *= fac
        if s[S.LAST_GETCOLOR_RECENTNESS] < 0.5 * fac:
            if s[S.LAST_GETCOLOR_RECENTNESS] == 0.0:
                # First initialisation of the smudge colour.
                fac = 0.0
            s[S.LAST_GETCOLOR_RECENTNESS] = 1.0

            smudge_radius = radius * _exp(value[V.SMUDGE_RADIUS_LOG])
            smudge_radius = clamp(smudge_radius, ACTUAL_RADIUS_MIN, ACTUAL_RADIUS_MAX)
            r, g, b, a = surface.get_color(px, py, smudge_radius)
            s[S.LAST_GETCOLOR_R] = r
            s[S.LAST_GETCOLOR_G] = g
            s[S.LAST_GETCOLOR_B] = b
            s[S.LAST_GETCOLOR_A] = a
        else:
            r = s[S.LAST_GETCOLOR_R]
            g = s[S.LAST_GETCOLOR_G]
            b = s[S.LAST_GETCOLOR_B]
            a = s[S.LAST_GETCOLOR_A]

        # The smudge colour is stored with premultiplied alpha.
        s[S.SMUDGE_A] = clamp(fac * s[S.SMUDGE_A] + (1 - fac) * a, 0.0, 1.0)
        s[S.SMUDGE_RA] = fac * s[S.SMUDGE_RA] + (1 - fac) * r * a
        s[S.SMUDGE_GA] = fac * s[S.SMUDGE_GA] + (1 - fac) * g * a
        s[S.SMUDGE_BA] = fac * s[S.SMUDGE_BA] + (1 - fac) * b * a