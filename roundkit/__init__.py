"""roundkit: 整数と duration の half-up 丸め。"""

from roundkit.core import (
    RoundingError,
    RoundingOverflowError,
    RoundingRangeError,
    digit_count,
    round_duration,
    round_duration_to_significant_digits,
    round_to_significant_digits,
    round_to_significant_digits_unsigned,
    round_to_step,
    round_to_step_unsigned,
    scale_pow10,
)

__all__ = [
    "RoundingError",
    "RoundingOverflowError",
    "RoundingRangeError",
    "digit_count",
    "round_duration",
    "round_duration_to_significant_digits",
    "round_to_significant_digits",
    "round_to_significant_digits_unsigned",
    "round_to_step",
    "round_to_step_unsigned",
    "scale_pow10",
]
