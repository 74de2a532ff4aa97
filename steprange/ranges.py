"""Factory functions for building ranges.

Each function accepts either raw values or `Endpoint` objects for both ends.
Raw values take the module defaults for their bound types (closed left, open
right; character ranges are closed at both ends) unless `left_bound` or
`right_bound` is given. When `step` is omitted it defaults to +1 or -1,
whichever walks from left to right.

Example:
    >>> from steprange import BoundType, integer_range
    >>> list(integer_range(0, 5))
    [0, 1, 2, 3, 4]
    >>> list(integer_range(-5, 5, 3, right_bound=BoundType.CLOSED))
    [-5, -2, 1, 4]
"""

import logging
from typing import Any, TypeVar

from steprange.bound import BoundType, Endpoint
from steprange.core import (
    CharacterRange,
    DoubleRange,
    FloatRange,
    IntegerRange,
    LongRange,
    Range,
)
from steprange.util import DEFAULT_LEFT_BOUND_TYPE, DEFAULT_RIGHT_BOUND_TYPE

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Range[Any, Any])


def _endpoint(
    range_class: type[Range[Any, Any]],
    value: Any,
    bound: BoundType | None,
    default: BoundType,
    edge: str,
) -> Endpoint[Any]:
    if isinstance(value, Endpoint):
        if bound is not None:
            raise TypeError(
                f"Cannot combine an Endpoint with {edge}_bound.\n"
                f"Got: {value} and {edge}_bound={bound!r}\n"
                f"Hint: pass a raw value with {edge}_bound, or an Endpoint alone"
            )
        return Endpoint(range_class.policy.coerce(value.value), value.bound_type)  # type: ignore[attr-defined]
    if value is None:
        raise ValueError(f"{edge.capitalize()} value must not be None")
    return Endpoint(range_class.policy.coerce(value), default if bound is None else bound)  # type: ignore[attr-defined]


def _build(
    range_class: type[R],
    left: Any,
    right: Any,
    step: Any,
    left_bound: BoundType | None,
    right_bound: BoundType | None,
    default_right: BoundType = DEFAULT_RIGHT_BOUND_TYPE,
) -> R:
    left_endpoint = _endpoint(
        range_class, left, left_bound, DEFAULT_LEFT_BOUND_TYPE, "left"
    )
    right_endpoint = _endpoint(range_class, right, right_bound, default_right, "right")
    if step is None:
        step = range_class.default_step(left_endpoint.value, right_endpoint.value)
    built = range_class(left_endpoint, right_endpoint, step)
    logger.debug("Built %s", built)
    return built


def integer_range(
    left: int | Endpoint[int],
    right: int | Endpoint[int],
    step: int | None = None,
    *,
    left_bound: BoundType | None = None,
    right_bound: BoundType | None = None,
) -> IntegerRange:
    """Build a range of 32-bit integers."""
    return _build(IntegerRange, left, right, step, left_bound, right_bound)


def long_range(
    left: int | Endpoint[int],
    right: int | Endpoint[int],
    step: int | None = None,
    *,
    left_bound: BoundType | None = None,
    right_bound: BoundType | None = None,
) -> LongRange:
    """Build a range of 64-bit integers."""
    return _build(LongRange, left, right, step, left_bound, right_bound)


def float_range(
    left: float | Endpoint[float],
    right: float | Endpoint[float],
    step: float | None = None,
    *,
    left_bound: BoundType | None = None,
    right_bound: BoundType | None = None,
) -> FloatRange:
    """Build a range of single-precision floats.

    Values and every accumulated step are rounded to 32 bits; no correction
    is made for rounding drift over long walks.
    """
    return _build(FloatRange, left, right, step, left_bound, right_bound)


def double_range(
    left: float | Endpoint[float],
    right: float | Endpoint[float],
    step: float | None = None,
    *,
    left_bound: BoundType | None = None,
    right_bound: BoundType | None = None,
) -> DoubleRange:
    """Build a range of double-precision floats."""
    return _build(DoubleRange, left, right, step, left_bound, right_bound)


def character_range(
    left: str | Endpoint[str],
    right: str | Endpoint[str],
    step: int | None = None,
    *,
    left_bound: BoundType | None = None,
    right_bound: BoundType | None = None,
) -> CharacterRange:
    """Build a range of characters, closed at both ends by default.

    Example:
        >>> "".join(character_range("a", "e"))
        'abcde'
    """
    return _build(
        CharacterRange,
        left,
        right,
        step,
        left_bound,
        right_bound,
        default_right=BoundType.CLOSED,
    )
