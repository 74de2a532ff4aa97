"""Tests for LongRange."""

import pytest

from steprange import BoundType, Endpoint, LongRange, long_range
from steprange.util import LONG_MAX, LONG_MIN

CLOSED = BoundType.CLOSED
OPEN = BoundType.OPEN


def test_forward_and_reverse():
    assert list(long_range(0, 5)) == [0, 1, 2, 3, 4]
    assert list(long_range(5, 0)) == [5, 4, 3, 2, 1]


def test_edge_of_64_bits():
    """The default open right bound stops one short of the maximum."""
    range_ = long_range(LONG_MAX - 3, LONG_MAX)
    assert list(range_) == [LONG_MAX - 3, LONG_MAX - 2, LONG_MAX - 1]


def test_closed_right_at_maximum_terminates():
    range_ = long_range(LONG_MAX - 1, LONG_MAX, right_bound=CLOSED)
    assert list(range_) == [LONG_MAX - 1, LONG_MAX]


def test_descending_to_minimum():
    range_ = long_range(LONG_MIN + 2, LONG_MIN, right_bound=CLOSED)
    assert list(range_) == [LONG_MIN + 2, LONG_MIN + 1, LONG_MIN]


def test_values_must_fit_64_bits():
    with pytest.raises(ValueError, match="outside"):
        long_range(0, LONG_MAX + 1)


def test_values_wider_than_32_bits():
    start = 2**40
    assert list(long_range(start, start + 3)) == [start, start + 1, start + 2]


def test_step_checking():
    long_range(2, 2, 0)
    long_range(1, 0, -10)
    with pytest.raises(ValueError):
        long_range(0, 1, 0)
    with pytest.raises(ValueError):
        long_range(0, -1, 1)


def test_closed_closed_descending():
    range_ = long_range(5, -5, -3, left_bound=CLOSED, right_bound=CLOSED)
    assert list(range_) == [5, 2, -1, -4]
    assert range_.contains(-4)
    assert not range_.contains(-5)


def test_contains_far_from_origin():
    range_ = long_range(LONG_MAX - 9, LONG_MAX, 3, right_bound=CLOSED)
    assert range_.contains(LONG_MAX)
    assert not range_.contains(LONG_MAX - 1)


def test_equality_and_string():
    range_ = long_range(-2, 2, 1, left_bound=OPEN, right_bound=CLOSED)
    assert range_ == LongRange(Endpoint(-2, OPEN), Endpoint(2, CLOSED), 1)
    assert str(range_) == "LongRange<(-2, 2], 1>"


def test_default_step():
    assert LongRange.default_step(10, 1) == -1
    assert LongRange.default_step(1, 10) == 1
