from __future__ import annotations

from typing import Tuple

from roundkit.core.errors import ExponentRangeError


def _build_pow10_table(size: int) -> Tuple[int, ...]:
    table = [1]
    for _ in range(1, size):
        table.append(10 * table[-1])
    return tuple(table)


# 10**0 .. 10**19（uint64 に収まる最大のべき）
POW10: Tuple[int, ...] = _build_pow10_table(20)
MAX_EXPONENT = len(POW10) - 1


def digit_count(v: int) -> int:
    """|v| の10進桁数を返す（0 は 1 桁）。"""
    if v < 0:
        v = -v
    d = 1
    while v > 9:
        v //= 10
        d += 1
    return d


def scale_pow10(base: int, exponent: int) -> int:
    """base * 10**exponent を返す。負の指数は 0 方向へ切り捨てる除算。"""
    if exponent < -MAX_EXPONENT or exponent > MAX_EXPONENT:
        raise ExponentRangeError(
            f"exponent は [-{MAX_EXPONENT}, {MAX_EXPONENT}] の範囲である必要があります: {exponent}"
        )
    if exponent >= 0:
        return base * POW10[exponent]
    q = abs(base) // POW10[-exponent]
    return -q if base < 0 else q
