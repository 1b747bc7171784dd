"""Blend modes that composite a dab mask onto 15-bit premultiplied RGBA pixels.

Pixel data is a flat mutable sequence of integers, four per pixel (R, G, B, A)
with premultiplied alpha and 1.0 represented as ``1 << 15``.

The mask is run-length encoded: a run of non-zero dab intensities, one per
pixel, is ended by a zero followed by the number of pixel components to skip.
A skip of zero ends the mask.
"""

from __future__ import annotations

import struct
from typing import Iterable, Iterator, MutableSequence, Tuple

ONE = 1 << 15

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_LUMA_RED = _f32(0.3 * ONE)
_LUMA_GREEN = _f32(0.59 * ONE)
_LUMA_BLUE = _f32(0.11 * ONE)


def _luma(r: float, g: float, b: float) -> float:
    return r * _LUMA_RED + g * _LUMA_GREEN + b * _LUMA_BLUE


def _tdiv(num: int, den: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(num) // abs(den)
    return quotient if (num >= 0) == (den >= 0) else -quotient


def _to_int16(value: int) -> int:
    value &= _U16
    return value - 0x10000 if value & 0x8000 else value


def _masked_pixels(mask: Iterable[int]) -> Iterator[Tuple[int, int]]:
    """Yield (intensity, component offset) for each pixel the mask covers."""
    values = iter(mask)
    pos = 0
    for value in values:
        if value:
            yield value, pos
            pos += 4
        else:
            skip = next(values, 0)
            if not skip:
                return
            pos += skip


def draw_dab_pixels_normal(
    mask: Iterable[int],
    rgba: MutableSequence[int],
    color_r: int,
    color_g: int,
    color_b: int,
    opacity: int,
) -> None:
    """Composite the colour "over" the pixels."""
    for m, i in _masked_pixels(mask):
        opa_a = m * opacity // ONE
        opa_b = (ONE - opa_a) & _U32
        rgba[i + 3] = (opa_a + opa_b * rgba[i + 3] // ONE) & _U16
        rgba[i] = ((opa_a * color_r + opa_b * rgba[i]) // ONE) & _U16
        rgba[i + 1] = ((opa_a * color_g + opa_b * rgba[i + 1]) // ONE) & _U16
        rgba[i + 2] = ((opa_a * color_b + opa_b * rgba[i + 2]) // ONE) & _U16


def _set_lum(top: Tuple[int, int, int], bottom: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Give the top colour the luminance of the bottom colour, clipped to range."""
    topr, topg, topb = top
    botlum = int(_luma(*bottom) / ONE) & _U16
    toplum = int(_luma(topr, topg, topb) / ONE) & _U16
    diff = _to_int16(botlum - toplum)
    r, g, b = topr + diff, topg + diff, topb + diff

    lum = int(_luma(r, g, b) / ONE)
    cmin = min(r, g, b)
    cmax = max(r, g, b)
    if cmin < 0:
        r, g, b = (lum + _tdiv((c - lum) * lum, lum - cmin) for c in (r, g, b))
    if cmax > ONE:
        r, g, b = (lum + _tdiv((c - lum) * (ONE - lum), cmax - lum) for c in (r, g, b))
    return r & _U16, g & _U16, b & _U16


def draw_dab_pixels_color(
    mask: Iterable[int],
    rgba: MutableSequence[int],
    color_r: int,
    color_g: int,
    color_b: int,
    opacity: int,
) -> None:
    """Apply the colour's hue and saturation while keeping the pixels' luminance.

    The pixels' alpha is left unchanged.
    """
    for m, i in _masked_pixels(mask):
        a = rgba[i + 3]
        if a:
            unpremult = tuple((ONE * rgba[i + k] // a) & _U16 for k in range(3))
        else:
            unpremult = (0, 0, 0)

        r, g, b = _set_lum((color_r, color_g, color_b), unpremult)
        r, g, b = ((c * a // ONE) & _U16 for c in (r, g, b))

        opa_a = m * opacity // ONE
        opa_b = (ONE - opa_a) & _U32
        rgba[i] = ((opa_a * r + opa_b * rgba[i]) // ONE) & _U16
        rgba[i + 1] = ((opa_a * g + opa_b * rgba[i + 1]) // ONE) & _U16
        rgba[i + 2] = ((opa_a * b + opa_b * rgba[i + 2]) // ONE) & _U16


def draw_dab_pixels_normal_and_eraser(
    mask: Iterable[int],
    rgba: MutableSequence[int],
    color_r: int,
    color_g: int,
    color_b: int,
    color_a: int,
    opacity: int,
) -> None:
    """Blend toward a colour with its own alpha; used for smudging and erasing."""
    for m, i in _masked_pixels(mask):
        opa_a = m * opacity // ONE
        opa_b = (ONE - opa_a) & _U32
        opa_a = opa_a * color_a // ONE
        rgba[i + 3] = (opa_a + opa_b * rgba[i + 3] // ONE) & _U16
        rgba[i] = ((opa_a * color_r + opa_b * rgba[i]) // ONE) & _U16
        rgba[i + 1] = ((opa_a * color_g + opa_b * rgba[i + 1]) // ONE) & _U16
        rgba[i + 2] = ((opa_a * color_b + opa_b * rgba[i + 2]) // ONE) & _U16


def draw_dab_pixels_lock_alpha(
    mask: Iterable[int],
    rgba: MutableSequence[int],
    color_r: int,
    color_g: int,
    color_b: int,
    opacity: int,
) -> None:
    """Normal blending that leaves the pixels' alpha channel untouched."""
    for m, i in _masked_pixels(mask):
        opa_a = m * opacity // ONE
        opa_b = (ONE - opa_a) & _U32
        opa_a = opa_a * rgba[i + 3] // ONE
        rgba[i] = ((opa_a * color_r + opa_b * rgba[i]) // ONE) & _U16
        rgba[i + 1] = ((opa_a * color_g + opa_b * rgba[i + 1]) // ONE) & _U16
        rgba[i + 2] = ((opa_a * color_b + opa_b * rgba[i + 2]) // ONE) & _U16


def get_color_pixels_accumulate(
    mask: Iterable[int], rgba: MutableSequence[int]
) -> Tuple[float, float, float, float, float]:
    """Sum mask-weighted components under the mask.

    Returns (weight, r, g, b, a) as floats, to be added to running totals.
    """
    weight = r = g = b = a = 0
    for m, i in _masked_pixels(mask):
        weight = (weight + m) & _U32
        r = (r + m * rgba[i] // ONE) & _U32
        g = (g + m * rgba[i + 1] // ONE) & _U32
        b = (b + m * rgba[i + 2] // ONE) & _U32
        a = (a + m * rgba[i + 3] // ONE) & _U32
    return float(weight), float(r), float(g), float(b), float(a)