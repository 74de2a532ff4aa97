"""Numeric policies: the only place where range element kinds differ.

A policy maps elements to arithmetic positions and back, steps a position
forward, and validates raw values. The range engine in `steprange.core`
works purely on positions, so characters walk their code points and
single-precision floats are rounded after every addition.
"""

import math
import numbers
import struct
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from typing_extensions import override

from steprange.util import INTEGER_MAX, INTEGER_MIN, LONG_MAX, LONG_MIN

T = TypeVar("T")
S = TypeVar("S")

Position = int | float

# Significant digits that always round-trip a single-precision value
_SINGLE_DIGITS = 9


def compare(left: Position, right: Position) -> int:
    """Three-way comparison returning -1, 0 or +1."""
    return (left > right) - (left < right)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _single(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class NumericPolicy(ABC, Generic[T, S]):
    """Arithmetic and validation rules for one kind of range element."""

    name: str

    @abstractmethod
    def coerce(self, value: Any) -> T:
        """Normalise a raw value into this kind, or raise."""
        pass

    @abstractmethod
    def coerce_step(self, step: Any) -> S:
        pass

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """True if a query value can be compared against this kind."""
        pass

    @abstractmethod
    def default_step(self, left: T, right: T) -> S:
        pass

    def offset(self, value: Any) -> Position:
        return value

    def element(self, position: Position) -> T:
        return position  # type: ignore[return-value]

    def add(self, position: Position, step: S) -> Position:
        return position + step  # type: ignore[operator]

    def is_reachable(self, start: Position, position: Position, step: S) -> bool:
        """True if walking from `start` by `step` lands exactly on `position`."""
        if step == 0:
            return position == start
        return (position - start) % step == 0  # type: ignore[operator]

    def format(self, value: T) -> str:
        return str(value)

    def _require(self, value: Any, what: str) -> None:
        if value is None:
            raise ValueError(f"{self.name} range {what} must not be None")

    def _number(self, value: Any, what: str) -> None:
        self._require(value, what)
        if not _is_real(value):
            raise TypeError(
                f"{self.name} range {what} must be a number.\n"
                f"Got {type(value).__name__!r}: {value!r}"
            )

    def _whole(self, value: Any, what: str) -> int:
        self._number(value, what)
        try:
            return int(value)
        except (OverflowError, ValueError) as exc:
            raise ValueError(
                f"{self.name} range {what} must be finite, got {value!r}"
            ) from exc


class IntegralPolicy(NumericPolicy[int, int]):
    """Whole-number elements bounded to a signed width."""

    def __init__(self, name: str, minimum: int, maximum: int):
        self.name: str = name
        self.minimum: int = minimum
        self.maximum: int = maximum

    def _integral(self, value: Any, what: str) -> int:
        number = self._whole(value, what)
        if not self.minimum <= number <= self.maximum:
            raise ValueError(
                f"{self.name} range {what} {number} is outside "
                f"[{self.minimum}, {self.maximum}]"
            )
        return number

    @override
    def coerce(self, value: Any) -> int:
        return self._integral(value, "value")

    @override
    def coerce_step(self, step: Any) -> int:
        return self._integral(step, "step")

    @override
    def accepts(self, value: Any) -> bool:
        return _is_real(value)

    @override
    def default_step(self, left: int, right: int) -> int:
        return -1 if left > right else 1


class FloatingPolicy(NumericPolicy[float, float]):
    """Floating elements; `single` rounds every value to 32 bits."""

    def __init__(self, name: str, single: bool = False):
        self.name: str = name
        self.single: bool = single

    def _floating(self, value: Any, what: str) -> float:
        self._number(value, what)
        try:
            number = float(value)
        except OverflowError as exc:
            raise ValueError(
                f"{self.name} range {what} {value!r} is too large"
            ) from exc
        if math.isnan(number):
            raise ValueError(f"{self.name} range {what} must not be NaN")
        if not self.single:
            return number
        rounded = _single(number)
        if math.isinf(rounded) and not math.isinf(number):
            raise ValueError(
                f"{self.name} range {what} {value!r} is too large "
                f"for single precision"
            )
        return rounded

    @override
    def coerce(self, value: Any) -> float:
        return self._floating(value, "value")

    @override
    def coerce_step(self, step: Any) -> float:
        return self._floating(step, "step")

    @override
    def accepts(self, value: Any) -> bool:
        if not _is_real(value):
            return False
        try:
            float(value)
        except OverflowError:
            return False
        return True

    @override
    def default_step(self, left: float, right: float) -> float:
        return -1.0 if left > right else 1.0

    @override
    def offset(self, value: Any) -> float:
        return float(value)

    @override
    def add(self, position: Position, step: float) -> float:
        total = position + step
        return _single(total) if self.single else total

    @override
    def is_reachable(self, start: Position, position: Position, step: float) -> bool:
        """Replay the walk from `start` until it reaches or passes `position`.

        Accumulated rounding makes the n-th element differ from
        `start + n * step`, so only the same additions iteration performs
        give an exact answer.
        """
        if step == 0:
            return position == start
        direction = compare(step, 0)
        current = start
        while direction * compare(position, current) > 0:
            following = self.add(current, step)
            if following == current:
                return False
            current = following
        return current == position

    @override
    def format(self, value: float) -> str:
        if self.single and math.isfinite(value):
            for digits in range(1, _SINGLE_DIGITS + 1):
                shortest = float(f"{value:.{digits}g}")
                if _single(shortest) == value:
                    return repr(shortest)
        return str(value)


class CharacterPolicy(NumericPolicy[str, int]):
    """Single characters stepped by code point."""

    name: str = "Character"

    @override
    def coerce(self, value: Any) -> str:
        self._require(value, "value")
        if not isinstance(value, str) or len(value) != 1:
            raise TypeError(
                f"Character range value must be a single character.\n"
                f"Got {type(value).__name__!r}: {value!r}\n"
                f"Hint: character_range('a', 'z')"
            )
        return value

    @override
    def coerce_step(self, step: Any) -> int:
        return self._whole(step, "step")

    @override
    def accepts(self, value: Any) -> bool:
        return isinstance(value, str) and len(value) == 1

    @override
    def default_step(self, left: str, right: str) -> int:
        return -1 if left > right else 1

    @override
    def offset(self, value: Any) -> int:
        return ord(value)

    @override
    def element(self, position: Position) -> str:
        return chr(int(position))


INTEGER = IntegralPolicy("Integer", INTEGER_MIN, INTEGER_MAX)
LONG = IntegralPolicy("Long", LONG_MIN, LONG_MAX)
FLOAT = FloatingPolicy("Float", single=True)
DOUBLE = FloatingPolicy("Double")
CHARACTER = CharacterPolicy()
