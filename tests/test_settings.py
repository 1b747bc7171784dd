import pytest

from paintcore.settings import (
    BrushInput,
    BrushSetting,
    BrushState,
    input_from_name,
    setting_from_name,
)


@pytest.mark.parametrize("setting", list(BrushSetting))
def test_setting_name_round_trip(setting):
    assert setting_from_name(setting.cname) is setting


@pytest.mark.parametrize("brush_input", list(BrushInput))
def test_input_name_round_trip(brush_input):
    assert input_from_name(brush_input.cname) is brush_input


def test_known_names():
    assert setting_from_name("radius_logarithmic") is BrushSetting.RADIUS_LOGARITHMIC
    assert input_from_name("pressure") is BrushInput.PRESSURE


def test_unknown_setting_name():
    with pytest.raises(ValueError):
        setting_from_name("no_such_setting")


def test_unknown_input_name():
    with pytest.raises(ValueError):
        input_from_name("RADIUS_LOGARITHMIC")


@pytest.mark.parametrize("enum", [BrushSetting, BrushInput, BrushState])
def test_values_are_dense_from_zero(enum):
    assert sorted(int(m) for m in enum) == list(range(len(enum)))