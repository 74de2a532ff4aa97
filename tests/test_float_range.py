"""Tests for FloatRange."""

import pytest

from steprange import BoundType, FloatRange, float_range

CLOSED = BoundType.CLOSED
OPEN = BoundType.OPEN


def test_to_string():
    range_ = float_range(-2, 2, 1, left_bound=OPEN, right_bound=CLOSED)
    assert str(range_) == "FloatRange<(-2.0, 2.0], 1.0>"


def test_forward_and_reverse():
    assert list(float_range(0, 5)) == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert list(float_range(5, 0)) == [5.0, 4.0, 3.0, 2.0, 1.0]


def test_bound_combinations():
    assert list(float_range(-5, 5, 3, left_bound=CLOSED, right_bound=CLOSED)) == [
        -5.0,
        -2.0,
        1.0,
        4.0,
    ]
    assert list(float_range(2, -2, -1, left_bound=CLOSED, right_bound=OPEN)) == [
        2.0,
        1.0,
        0.0,
        -1.0,
    ]


def test_values_are_single_precision():
    range_ = float_range(0, 1, 0.1)
    assert range_.step != 0.1
    assert range_.step == pytest.approx(0.1)


def test_contains_compares_exactly_against_walked_values():
    range_ = float_range(0, 1, 0.5, right_bound=CLOSED)
    assert range_.contains(0.5)
    assert range_.contains(1)
    assert not range_.contains(0.25)


def test_contains_every_accumulated_value():
    """Values built up by repeated single-precision additions are all members."""
    range_ = float_range(0, 1, 0.1, right_bound=CLOSED)
    produced = list(range_)
    assert 0.5 in produced
    assert all(range_.contains(v) for v in produced)
    assert range_.contains(range_.step)
    assert not range_.contains(0.1)


def test_contains_value_too_large_for_a_float():
    assert not float_range(0, 10).contains(10**400)


def test_rejects_values_beyond_single_precision():
    with pytest.raises(ValueError, match="single precision"):
        float_range(0, 1e39)
    with pytest.raises(ValueError, match="too large"):
        float_range(0, 10**400)


def test_to_string_uses_shortest_single_precision_form():
    assert str(float_range(0.1, 1)) == "FloatRange<[0.1, 1.0), 1.0>"
    assert str(float_range(0, 1, 0.1)) == "FloatRange<[0.0, 1.0), 0.1>"
    assert str(float_range(-2.5, 2.5, 0.25)) == "FloatRange<[-2.5, 2.5), 0.25>"


def test_step_checking():
    float_range(2, 2, 0)
    with pytest.raises(ValueError):
        float_range(0, 1, 0)
    with pytest.raises(ValueError):
        float_range(0, 1, -1)


def test_empty_ranges():
    assert float_range(-3, -3, 1, left_bound=OPEN, right_bound=OPEN).is_empty()
    assert float_range(0, 1, 2, left_bound=OPEN, right_bound=CLOSED).is_empty()
    assert not float_range(-3, -2, 1, left_bound=OPEN, right_bound=CLOSED).is_empty()


def test_not_equal_to_double_range_with_same_values():
    from steprange import double_range

    assert float_range(0, 2) != double_range(0, 2)


def test_default_step():
    assert FloatRange.default_step(10.0, 1.0) == -1.0
    assert FloatRange.default_step(1.0, 10.0) == 1.0
