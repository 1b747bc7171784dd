from array import array

from paintcore.brushmodes import (
    ONE,
    draw_dab_pixels_color,
    draw_dab_pixels_lock_alpha,
    draw_dab_pixels_normal,
    draw_dab_pixels_normal_and_eraser,
    get_color_pixels_accumulate,
)

FULL = 1 << 15


def test_normal_full_opacity_replaces_pixel():
    rgba = [100, 200, 300, 1000]
    draw_dab_pixels_normal([FULL, 0, 0], rgba, 1000, 2000, 3000, FULL)
    assert rgba == [1000, 2000, 3000, FULL]


def test_normal_zero_opacity_leaves_pixel():
    rgba = [100, 200, 300, 1000]
    draw_dab_pixels_normal([FULL, 0, 0], rgba, 1000, 2000, 3000, 0)
    assert rgba == [100, 200, 300, 1000]


def test_mask_skip_leaves_skipped_pixel():
    rgba = array("H", [0] * 12)
    draw_dab_pixels_normal([FULL, 0, 4, FULL, 0, 0], rgba, 10, 20, 30, FULL)
    assert list(rgba) == [10, 20, 30, FULL, 0, 0, 0, 0, 10, 20, 30, FULL]


def test_empty_mask_changes_nothing():
    rgba = [1, 2, 3, 4]
    draw_dab_pixels_normal([0, 0], rgba, 10, 20, 30, FULL)
    assert rgba == [1, 2, 3, 4]


def test_eraser_with_zero_alpha_clears():
    rgba = [5000, 6000, 7000, FULL]
    draw_dab_pixels_normal_and_eraser([FULL, 0, 0], rgba, 1, 2, 3, 0, FULL)
    assert rgba == [0, 0, 0, 0]


def test_eraser_with_full_alpha_equals_normal():
    mask = [FULL // 2, FULL // 3, 0, 0]
    a = [100, 200, 300, 4000, 500, 600, 700, 8000]
    b = list(a)
    draw_dab_pixels_normal(mask, a, 9000, 8000, 7000, FULL // 2)
    draw_dab_pixels_normal_and_eraser(mask, b, 9000, 8000, 7000, FULL, FULL // 2)
    assert a == b


def test_lock_alpha_keeps_alpha():
    rgba = [0, 0, 0, 0, 100, 200, 300, FULL]
    draw_dab_pixels_lock_alpha([FULL, FULL, 0, 0], rgba, 1000, 2000, 3000, FULL)
    assert rgba == [0, 0, 0, 0, 1000, 2000, 3000, FULL]


def test_color_keeps_alpha_and_transparent_pixels():
    rgba = [0, 0, 0, 0, 4000, 8000, 12000, 16000]
    draw_dab_pixels_color([FULL, FULL, 0, 0], rgba, 30000, 1000, 5000, FULL)
    assert rgba[:4] == [0, 0, 0, 0]
    assert rgba[7] == 16000
    assert all(0 <= c <= 16000 for c in rgba[4:7])


def test_color_gray_on_gray_keeps_luminance():
    rgba = [12000, 12000, 12000, FULL]
    draw_dab_pixels_color([FULL, 0, 0], rgba, 20000, 20000, 20000, FULL)
    assert all(abs(c - 12000) <= 2 for c in rgba[:3])
    assert rgba[3] == FULL


def test_accumulate_full_mask_sums_components():
    rgba = [10, 20, 30, 40, 1, 2, 3, 4, 100, 200, 300, 400]
    result = get_color_pixels_accumulate([ONE, 0, 4, ONE, 0, 0], rgba)
    assert result == (2.0 * ONE, 110.0, 220.0, 330.0, 440.0)


def test_accumulate_empty_mask():
    assert get_color_pixels_accumulate([0, 0], [1, 2, 3, 4]) == (0.0, 0.0, 0.0, 0.0, 0.0)