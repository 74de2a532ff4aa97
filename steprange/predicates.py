from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class IsWithinRange(Generic[T]):
    """Predicate holding for values between `minimum` and `maximum` inclusive.

    Unlike a stepped `Range`, this is a plain comparison test and works for
    any mutually comparable values (numbers, strings, dates, ...).
    """

    minimum: T
    maximum: T

    def __post_init__(self) -> None:
        if self.minimum is None or self.maximum is None:
            raise ValueError(
                f"IsWithinRange bounds must not be None.\n"
                f"Got minimum={self.minimum!r}, maximum={self.maximum!r}"
            )
        if self.minimum > self.maximum:  # type: ignore[operator]
            raise ValueError(
                f"IsWithinRange minimum ({self.minimum!r}) must be <= "
                f"maximum ({self.maximum!r})"
            )

    def test(self, value: Any) -> bool:
        return self.minimum <= value <= self.maximum  # type: ignore[operator]

    def __call__(self, value: Any) -> bool:
        return self.test(value)

    def __str__(self) -> str:
        return f"IsWithinRange({self.minimum}, {self.maximum})"


def is_within_range(minimum: T, maximum: T) -> IsWithinRange[T]:
    """Compose a closed-interval membership test (equivalent to `min <= x <= max`)."""
    return IsWithinRange(minimum, maximum)
