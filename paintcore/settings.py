"""Identifiers for brush settings, brush inputs and brush engine states."""

from __future__ import annotations

from enum import IntEnum


class _Named(IntEnum):
    @property
    def cname(self) -> str:
        """The lower-case name used in brush files."""
        return self.name.lower()


class BrushSetting(_Named):
    """A configurable brush setting, driven by a mapping."""

    OPAQUE = 0
    OPAQUE_MULTIPLY = 1
    OPAQUE_LINEARIZE = 2
    RADIUS_LOGARITHMIC = 3
    HARDNESS = 4
    ANTI_ALIASING = 5
    DABS_PER_BASIC_RADIUS = 6
    DABS_PER_ACTUAL_RADIUS = 7
    DABS_PER_SECOND = 8
    RADIUS_BY_RANDOM = 9
    SPEED1_SLOWNESS = 10
    SPEED2_SLOWNESS = 11
    SPEED1_GAMMA = 12
    SPEED2_GAMMA = 13
    OFFSET_BY_RANDOM = 14
    OFFSET_BY_SPEED = 15
    OFFSET_BY_SPEED_SLOWNESS = 16
    SLOW_TRACKING = 17
    SLOW_TRACKING_PER_DAB = 18
    TRACKING_NOISE = 19
    COLOR_H = 20
    COLOR_S = 21
    COLOR_V = 22
    CHANGE_COLOR_H = 23
    CHANGE_COLOR_L = 24
    CHANGE_COLOR_HSL_S = 25
    CHANGE_COLOR_V = 26
    CHANGE_COLOR_HSV_S = 27
    SMUDGE = 28
    SMUDGE_LENGTH = 29
    SMUDGE_RADIUS_LOG = 30
    ERASER = 31
    STROKE_THRESHOLD = 32
    STROKE_DURATION_LOGARITHMIC = 33
    STROKE_HOLDTIME = 34
    CUSTOM_INPUT = 35
    CUSTOM_INPUT_SLOWNESS = 36
    ELLIPTICAL_DAB_RATIO = 37
    ELLIPTICAL_DAB_ANGLE = 38
    DIRECTION_FILTER = 39
    LOCK_ALPHA = 40
    COLORIZE = 41
    SNAP_TO_PIXEL = 42
    PRESSURE_GAIN_LOG = 43


class BrushInput(_Named):
    """A dynamic input that mappings can respond to."""

    PRESSURE = 0
    SPEED1 = 1
    SPEED2 = 2
    RANDOM = 3
    STROKE = 4
    DIRECTION = 5
    TILT_DECLINATION = 6
    TILT_ASCENSION = 7
    CUSTOM = 8


class BrushState(_Named):
    """An internal brush engine state that changes during a stroke."""

    X = 0
    Y = 1
    PRESSURE = 2
    PARTIAL_DABS = 3
    ACTUAL_RADIUS = 4
    SMUDGE_RA = 5
    SMUDGE_GA = 6
    SMUDGE_BA = 7
    SMUDGE_A = 8
    LAST_GETCOLOR_R = 9
    LAST_GETCOLOR_G = 10
    LAST_GETCOLOR_B = 11
    LAST_GETCOLOR_A = 12
    LAST_GETCOLOR_RECENTNESS = 13
    ACTUAL_X = 14
    ACTUAL_Y = 15
    NORM_DX_SLOW = 16
    NORM_DY_SLOW = 17
    NORM_SPEED1_SLOW = 18
    NORM_SPEED2_SLOW = 19
    STROKE = 20
    STROKE_STARTED = 21
    CUSTOM_INPUT = 22
    ACTUAL_ELLIPTICAL_DAB_RATIO = 23
    ACTUAL_ELLIPTICAL_DAB_ANGLE = 24
    DIRECTION_DX = 25
    DIRECTION_DY = 26
    DECLINATION = 27
    ASCENSION = 28


_SETTINGS_BY_NAME = {member.cname: member for member in BrushSetting}
_INPUTS_BY_NAME = {member.cname: member for member in BrushInput}


def setting_from_name(name: str) -> BrushSetting:
    """Look up a setting by its brush-file name; raise ValueError if unknown."""
    try:
        return _SETTINGS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"unknown brush setting: {name!r}") from None


def input_from_name(name: str) -> BrushInput:
    """Look up an input by its brush-file name; raise ValueError if unknown."""
    try:
        return _INPUTS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"unknown brush input: {name!r}") from None