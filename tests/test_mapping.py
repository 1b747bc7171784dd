import pytest

from paintcore.mapping import Mapping


def identity_mapping():
    m = Mapping(1)
    m.set_n(0, 2)
    m.set_point(0, 0, 0.0, 0.0)
    m.set_point(0, 1, 1.0, 1.0)
    return m


def test_constant_mapping_returns_base_value():
    m = Mapping(3)
    m.base_value = 2.5
    assert m.is_constant()
    assert m.calculate([10.0, -4.0, 7.0]) == 2.5


def test_identity_interpolates_and_extrapolates():
    m = identity_mapping()
    assert m.calculate_single_input(0.5) == pytest.approx(0.5)
    assert m.calculate_single_input(2.0) == pytest.approx(2.0)
    assert m.calculate_single_input(-1.0) == pytest.approx(-1.0)


def test_base_value_is_added():
    m = identity_mapping()
    m.base_value = 3.0
    assert m.calculate_single_input(0.25) == pytest.approx(3.25)


def test_multi_segment_curve_picks_right_segment():
    m = Mapping(1)
    m.set_n(0, 3)
    m.set_point(0, 0, 0.0, 0.0)
    m.set_point(0, 1, 1.0, 1.0)
    m.set_point(0, 2, 2.0, 0.0)
    assert m.calculate_single_input(1.5) == pytest.approx(0.5)
    assert m.calculate_single_input(1.0) == pytest.approx(1.0)


def test_vertical_segment_uses_first_y():
    m = Mapping(1)
    m.set_n(0, 2)
    m.set_point(0, 0, 1.0, 4.0)
    m.set_point(0, 1, 1.0, 9.0)
    assert m.calculate_single_input(1.0) == 4.0


def test_inputs_used_tracks_curves():
    m = Mapping(2)
    m.set_n(0, 2)
    m.set_n(1, 3)
    assert m.inputs_used == 2
    assert not m.is_constant()
    m.set_n(0, 0)
    assert m.inputs_used == 1
    m.set_n(1, 0)
    assert m.is_constant()


def test_unused_inputs_are_ignored():
    m = Mapping(2)
    m.set_n(1, 2)
    m.set_point(1, 0, 0.0, 0.0)
    m.set_point(1, 1, 1.0, 2.0)
    assert m.calculate([100.0, 0.5]) == pytest.approx(1.0)


def test_point_round_trip():
    m = identity_mapping()
    assert m.get_point(0, 1) == (1.0, 1.0)
    assert m.get_n(0) == 2


@pytest.mark.parametrize("n", [1, -1, 9])
def test_invalid_point_count(n):
    with pytest.raises(ValueError):
        Mapping(1).set_n(0, n)


def test_input_out_of_range():
    with pytest.raises(IndexError):
        Mapping(1).set_n(1, 2)


def test_point_index_beyond_n():
    m = identity_mapping()
    with pytest.raises(IndexError):
        m.set_point(0, 2, 3.0, 3.0)
    with pytest.raises(IndexError):
        m.get_point(0, 2)


def test_decreasing_x_rejected():
    m = Mapping(1)
    m.set_n(0, 2)
    m.set_point(0, 0, 1.0, 0.0)
    with pytest.raises(ValueError):
        m.set_point(0, 1, 0.5, 1.0)


def test_single_input_requires_one_input():
    with pytest.raises(ValueError):
        Mapping(2).calculate_single_input(0.0)