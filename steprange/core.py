from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from steprange.bound import Endpoint
from steprange.numeric import (
    CHARACTER,
    DOUBLE,
    FLOAT,
    INTEGER,
    LONG,
    NumericPolicy,
    Position,
    compare,
)

T = TypeVar("T")
S = TypeVar("S")


@dataclass(frozen=True)
class Range(ABC, Generic[T, S]):
    """An arithmetic progression between two endpoints.

    Subclasses bind a `NumericPolicy`; everything else lives here. Ranges are
    immutable and every call to `iter()` starts a fresh walk from the left
    endpoint, so one range can be traversed any number of times.
    """

    left: Endpoint[T]
    right: Endpoint[T]
    step: S

    @property
    @abstractmethod
    def policy(self) -> NumericPolicy[T, S]:
        pass

    def __post_init__(self) -> None:
        for edge, endpoint in (("left", self.left), ("right", self.right)):
            if not isinstance(endpoint, Endpoint):
                raise TypeError(
                    f"{type(self).__name__} {edge} endpoint must be an Endpoint.\n"
                    f"Got {type(endpoint).__name__!r}: {endpoint!r}\n"
                    f"Hint: use the factory functions for raw values:\n"
                    f"  integer_range(0, 10)"
                )
            coerced = self.policy.coerce(endpoint.value)
            if coerced != endpoint.value or type(coerced) is not type(endpoint.value):
                object.__setattr__(
                    self, edge, Endpoint(coerced, endpoint.bound_type)
                )
        object.__setattr__(self, "step", self.policy.coerce_step(self.step))

        direction = compare(self._right_position, self._left_position)
        if direction != 0 and compare(self.step, 0) != direction:  # type: ignore[arg-type]
            raise ValueError(
                f"Will never reach {self.right.value!r} from {self.left.value!r} "
                f"using step {self.step!r}.\n"
                f"The step must be non-zero and point from left to right.\n"
                f"Hint: omit the step to use the default "
                f"({self.default_step(self.left.value, self.right.value)!r})"
            )

    @classmethod
    def default_step(cls, left: T, right: T) -> S:
        """Return +1 when walking up from `left` to `right`, -1 otherwise."""
        policy = cls.policy
        if not isinstance(policy, NumericPolicy):
            raise TypeError(
                f"{cls.__name__} has no element kind.\n"
                f"Hint: call default_step on a concrete range, "
                f"e.g. IntegerRange.default_step(1, 10)"
            )
        return policy.default_step(left, right)

    @property
    def left_endpoint(self) -> Endpoint[T]:
        return self.left

    @property
    def right_endpoint(self) -> Endpoint[T]:
        return self.right

    @property
    def _left_position(self) -> Position:
        return self.policy.offset(self.left.value)

    @property
    def _right_position(self) -> Position:
        return self.policy.offset(self.right.value)

    @property
    def _direction(self) -> int:
        return compare(self.step, 0)  # type: ignore[arg-type]

    def _accepts(self, position: Position) -> tuple[bool, bool]:
        """Test a position against (left, right) endpoints.

        Comparisons are oriented by the step direction so that descending
        ranges reuse the ascending boundary rules.
        """
        direction = self._direction
        left_sign = direction * compare(position, self._left_position)
        right_sign = direction * compare(position, self._right_position)
        return (
            self.left.bound_type.accepts_left(left_sign),
            self.right.bound_type.accepts_right(right_sign),
        )

    def __iter__(self) -> Iterator[T]:
        policy = self.policy
        current = self._left_position
        while True:
            inside_left, inside_right = self._accepts(current)
            if not inside_right:
                return
            if inside_left:
                yield policy.element(current)
            if self._direction == 0:
                # Degenerate range: left == right, nothing to walk
                return
            current = policy.add(current, self.step)

    def contains(self, value: Any) -> bool:
        """True if `value` is produced by iterating this range.

        Membership needs more than lying between the endpoints: the value
        must be a whole number of steps away from the left value.
        """
        if value is None or not self.policy.accepts(value):
            return False
        position = self.policy.offset(value)
        inside_left, inside_right = self._accepts(position)
        if not (inside_left and inside_right):
            return False
        return self.policy.is_reachable(self._left_position, position, self.step)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def contains_all(self, values: Iterable[Any] | None) -> bool:
        """True if every value is contained.

        An empty (or None) collection yields False rather than vacuous truth.
        """
        if values is None:
            return False
        seen = False
        for value in values:
            if not self.contains(value):
                return False
            seen = True
        return seen

    def is_empty(self) -> bool:
        for _ in self:
            return False
        return True

    def __str__(self) -> str:
        policy = self.policy
        return (
            f"{type(self).__name__}<"
            f"{self.left.bound_type.left_delimiter}{policy.format(self.left.value)}, "
            f"{policy.format(self.right.value)}{self.right.bound_type.right_delimiter}, "
            f"{policy.format(self.step)}>"
        )


class IntegerRange(Range[int, int]):
    policy = INTEGER


class LongRange(Range[int, int]):
    policy = LONG


class FloatRange(Range[float, float]):
    policy = FLOAT


class DoubleRange(Range[float, float]):
    policy = DOUBLE


class CharacterRange(Range[str, int]):
    """Range over single characters; the step counts code points."""

    policy = CHARACTER
