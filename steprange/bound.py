from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar


class BoundType(Enum):
    CLOSED = "closed"
    OPEN = "open"

    def accepts_left(self, sign: int) -> bool:
        """Test a candidate against a left bound.

        `sign` is the candidate's comparison with the bound, oriented in the
        stepping direction: +1 means the candidate lies past the bound.
        """
        if sign == 0:
            return self is BoundType.CLOSED
        return sign > 0

    def accepts_right(self, sign: int) -> bool:
        """Test a candidate against a right bound (-1 means not yet reached)."""
        if sign == 0:
            return self is BoundType.CLOSED
        return sign < 0

    @property
    def left_delimiter(self) -> str:
        return "(" if self is BoundType.OPEN else "["

    @property
    def right_delimiter(self) -> str:
        return ")" if self is BoundType.OPEN else "]"


T = TypeVar("T")


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    value: T
    bound_type: BoundType

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Endpoint value must not be None")
        if not isinstance(self.bound_type, BoundType):
            raise TypeError(
                f"Endpoint bound_type must be a BoundType.\n"
                f"Got {type(self.bound_type).__name__!r}: {self.bound_type!r}\n"
                f"Hint: Endpoint(3, BoundType.CLOSED)"
            )

    def __str__(self) -> str:
        return f"Endpoint<{self.value}, {self.bound_type.name}>"

    def to_left_string(self) -> str:
        return f"{self.bound_type.left_delimiter}{self.value}"

    def to_right_string(self) -> str:
        return f"{self.value}{self.bound_type.right_delimiter}"
