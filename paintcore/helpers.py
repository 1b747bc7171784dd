"""Colour-space conversions and small numeric helpers for the brush engine."""

from __future__ import annotations

import math
from typing import Protocol, Tuple, TypeVar

T = TypeVar("T", int, float)

Color = Tuple[float, float, float]

_SQRT3 = 1.73205080757
_TWO_SQRT3 = 3.46410161514


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1), such as ``random.Random``."""

    def random(self) -> float: ...


def clamp(x: T, low: T, high: T) -> T:
    """Limit ``x`` to the closed range [low, high]."""
    if x > high:
        return high
    if x < low:
        return low
    return x


def rand_gauss(rng: RandomSource) -> float:
    """Approximate a unit-variance, zero-mean normal sample from four uniforms."""
    total = sum(rng.random() for _ in range(4))
    return total * _SQRT3 - _TWO_SQRT3


def rgb_to_hsv(r: float, g: float, b: float) -> Color:
    """Convert RGB in [0, 1] to (hue, saturation, value), all in [0, 1]."""
    r = clamp(r, 0.0, 1.0)
    g = clamp(g, 0.0, 1.0)
    b = clamp(b, 0.0, 1.0)

    top = max(r, g, b)
    bottom = min(r, g, b)
    v = top
    delta = top - bottom

    if delta <= 0.0001:
        return 0.0, 0.0, v

    s = delta / top
    if r == top:
        h = (g - b) / delta
        if h < 0.0:
            h += 6.0
    elif g == top:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta
    return h / 6.0, s, v


def hsv_to_rgb(h: float, s: float, v: float) -> Color:
    """Convert (hue, saturation, value) to RGB; hue wraps, s and v are clamped."""
    h = h - math.floor(h)
    s = clamp(s, 0.0, 1.0)
    v = clamp(v, 0.0, 1.0)

    if s == 0.0:
        return v, v, v

    hue = 0.0 if h == 1.0 else h
    hue *= 6.0
    sector = int(hue)
    f = hue - sector
    w = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    sectors = {
        0: (v, t, w),
        1: (q, v, w),
        2: (w, v, t),
        3: (w, q, v),
        4: (t, w, v),
        5: (v, w, q),
    }
    return sectors.get(sector, (0.0, 0.0, 0.0))


def rgb_to_hsl(r: float, g: float, b: float) -> Color:
    """Convert RGB in [0, 1] to (hue, saturation, lightness), all in [0, 1]."""
    r = clamp(r, 0.0, 1.0)
    g = clamp(g, 0.0, 1.0)
    b = clamp(b, 0.0, 1.0)

    top = max(r, g, b)
    bottom = min(r, g, b)
    lightness = (top + bottom) / 2.0

    if top == bottom:
        return 0.0, 0.0, lightness

    if lightness <= 0.5:
        s = (top - bottom) / (top + bottom)
    else:
        s = (top - bottom) / (2.0 - top - bottom)

    delta = top - bottom
    if delta == 0.0:
        delta = 1.0

    if r == top:
        h = (g - b) / delta
    elif g == top:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta

    h /= 6.0
    if h < 0.0:
        h += 1.0
    return h, s, lightness


def _hsl_value(n1: float, n2: float, hue: float) -> float:
    if hue > 6.0:
        hue -= 6.0
    elif hue < 0.0:
        hue += 6.0

    if hue < 1.0:
        return n1 + (n2 - n1) * hue
    if hue < 3.0:
        return n2
    if hue < 4.0:
        return n1 + (n2 - n1) * (4.0 - hue)
    return n1


def hsl_to_rgb(h: float, s: float, l: float) -> Color:  # noqa: E741
    """Convert (hue, saturation, lightness) to RGB; hue wraps, s and l are clamped."""
    h = h - math.floor(h)
    s = clamp(s, 0.0, 1.0)
    l = clamp(l, 0.0, 1.0)  # noqa: E741

    if s == 0:
        return l, l, l

    m2 = l * (1.0 + s) if l <= 0.5 else l + s - l * s
    m1 = 2.0 * l - m2
    return (
        _hsl_value(m1, m2, h * 6.0 + 2.0),
        _hsl_value(m1, m2, h * 6.0),
        _hsl_value(m1, m2, h * 6.0 - 2.0),
    )