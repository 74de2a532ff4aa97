from .bound import BoundType, Endpoint
from .core import CharacterRange, DoubleRange, FloatRange, IntegerRange, LongRange, Range
from .predicates import IsWithinRange, is_within_range
from .ranges import character_range, double_range, float_range, integer_range, long_range
from .util import DEFAULT_LEFT_BOUND_TYPE, DEFAULT_RIGHT_BOUND_TYPE

__all__ = [
    "BoundType",
    "Endpoint",
    "Range",
    "IntegerRange",
    "LongRange",
    "FloatRange",
    "DoubleRange",
    "CharacterRange",
    "integer_range",
    "long_range",
    "float_range",
    "double_range",
    "character_range",
    "IsWithinRange",
    "is_within_range",
    "DEFAULT_LEFT_BOUND_TYPE",
    "DEFAULT_RIGHT_BOUND_TYPE",
]
