"""整数・duration の丸めユーティリティ。"""

from .arrays import round_to_significant_digits_array, round_to_step_array
from .digits import MAX_EXPONENT, POW10, digit_count, scale_pow10
from .duration import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    ns_to_timedelta,
    round_duration,
    round_duration_to_significant_digits,
    timedelta_to_ns,
)
from .errors import (
    ExponentRangeError,
    RoundingError,
    RoundingOverflowError,
    RoundingRangeError,
)
from .integer import (
    INT64,
    UINT64,
    IntRepr,
    round_to_significant_digits,
    round_to_significant_digits_as,
    round_to_significant_digits_unsigned,
    round_to_step,
    round_to_step_as,
    round_to_step_unsigned,
)

__all__ = [
    "POW10",
    "MAX_EXPONENT",
    "digit_count",
    "scale_pow10",
    "IntRepr",
    "INT64",
    "UINT64",
    "round_to_step",
    "round_to_step_unsigned",
    "round_to_step_as",
    "round_to_significant_digits",
    "round_to_significant_digits_unsigned",
    "round_to_significant_digits_as",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "round_duration",
    "round_duration_to_significant_digits",
    "timedelta_to_ns",
    "ns_to_timedelta",
    "round_to_step_array",
    "round_to_significant_digits_array",
    "RoundingError",
    "RoundingRangeError",
    "RoundingOverflowError",
    "ExponentRangeError",
]
