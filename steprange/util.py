"""Configuration constants for steprange.

Default bound types are applied by the factory functions when a caller
passes raw values instead of endpoints. Integral widths mirror the 32-bit
and 64-bit signed integers the integer and long ranges model.
"""

from steprange.bound import BoundType

# Bound types used when only raw values are given
DEFAULT_LEFT_BOUND_TYPE = BoundType.CLOSED
DEFAULT_RIGHT_BOUND_TYPE = BoundType.OPEN

# Integral widths (inclusive)
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
