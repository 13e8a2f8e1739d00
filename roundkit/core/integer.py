from __future__ import annotations

from dataclasses import dataclass

from roundkit.core.digits import digit_count, scale_pow10
from roundkit.core.errors import RoundingOverflowError, RoundingRangeError


@dataclass(frozen=True)
class IntRepr:
    """固定幅整数の表現（範囲と符号の有無）。"""

    name: str
    min_value: int
    max_value: int
    signed: bool

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


INT64 = IntRepr(name="int64", min_value=-(2**63), max_value=2**63 - 1, signed=True)
UINT64 = IntRepr(name="uint64", min_value=0, max_value=2**64 - 1, signed=False)


def _ensure_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} は int である必要があります: {value!r}")
    return value


def _ensure_in_range(value: object, name: str, rep: IntRepr) -> int:
    value = _ensure_int(value, name)
    if not rep.contains(value):
        raise RoundingRangeError(f"{name} は {rep.name} の範囲外です: {value}")
    return value


def _round_magnitude(v: int, step: int) -> int:
    # 2r >= step なら切り上げ（half up）
    r = v % step
    if r < step - r:
        return v - r
    return v + step - r


def round_to_step_as(value: int, step: int, rep: IntRepr) -> int:
    """value を step の倍数のうち最も近いものへ丸める。step <= 1 なら value をそのまま返す。"""
    value = _ensure_in_range(value, "value", rep)
    step = _ensure_in_range(step, "step", rep)
    if step <= 1:
        return value
    if value < 0:
        result = -_round_magnitude(-value, step)
    else:
        result = _round_magnitude(value, step)
    if not rep.contains(result):
        raise RoundingOverflowError(
            f"{value} を {step} 単位に丸めた結果 {result} が {rep.name} の範囲を超えます"
        )
    return result


def round_to_significant_digits_as(value: int, n: int, rep: IntRepr) -> int:
    """value を有効数字 n 桁へ丸める。n <= 0 なら value をそのまま返す。"""
    value = _ensure_in_range(value, "value", rep)
    n = _ensure_int(n, "n")
    if n <= 0:
        return value
    e = digit_count(value) - n
    if e > 0:
        return round_to_step_as(value, scale_pow10(1, e), rep)
    return value


def round_to_step(value: int, step: int) -> int:
    """int64 の値を step の倍数へ丸める。

    例::

        round_to_step(7, 2)      # 8
        round_to_step(123, 10)   # 120
        round_to_step(-420, 25)  # -425
    """
    return round_to_step_as(value, step, INT64)


def round_to_step_unsigned(value: int, step: int) -> int:
    """uint64 の値を step の倍数へ丸める。"""
    return round_to_step_as(value, step, UINT64)


def round_to_significant_digits(value: int, n: int) -> int:
    """int64 の値を有効数字 n 桁へ丸める。

    例::

        round_to_significant_digits(12895, 2)  # 13000
        round_to_significant_digits(4213, 1)   # 4000
        round_to_significant_digits(-567, 2)   # -570
    """
    return round_to_significant_digits_as(value, n, INT64)


def round_to_significant_digits_unsigned(value: int, n: int) -> int:
    return round_to_significant_digits_as(value, n, UINT64)
