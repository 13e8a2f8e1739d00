"""ナノ秒単位の時間間隔（duration）の丸め。"""

from __future__ import annotations

from datetime import timedelta

from roundkit.core.digits import MAX_EXPONENT, digit_count, scale_pow10
from roundkit.core.errors import RoundingOverflowError
from roundkit.core.integer import (
    INT64,
    UINT64,
    _ensure_in_range,
    _ensure_int,
    round_to_significant_digits_as,
    round_to_step_as,
)

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# 秒以下の桁は「SS.fff」として分の下2桁に続く
_CENTI_MINUTE = 100 * SECOND


def round_duration(d: int, step: int) -> int:
    """d を step（ナノ秒）の倍数へ丸める。step <= 1 なら d をそのまま返す。

    例（文字列は説明用）::

        round_duration(3h25m45.6s, 0.5s)  # 3h25m45.5s
        round_duration(34.56s, 10s)       # 30s
        round_duration(-1m30s, 1m)        # -2m0s
    """
    return round_to_step_as(d, step, INT64)


def _unit_step(base: int, exponent: int) -> int:
    # 指数がテーブル下限を下回る場合はステップ 0（丸めなし）と同じ
    return scale_pow10(base, max(exponent, -MAX_EXPONENT))


def _round_magnitude_sig(v: int, n: int) -> int:
    if v >= HOUR:
        k = digit_count(v // HOUR)
        if k >= n:
            return round_to_step_as(v, _unit_step(HOUR, k - n), UINT64)
        n -= k
        k = digit_count(v % HOUR // MINUTE)
        if k >= n:
            return round_to_step_as(v, _unit_step(MINUTE, k - n), UINT64)
        return round_to_step_as(v, _unit_step(_CENTI_MINUTE, k - n), UINT64)
    if v >= MINUTE:
        k = digit_count(v // MINUTE)
        if k >= n:
            return round_to_step_as(v, _unit_step(MINUTE, k - n), UINT64)
        return round_to_step_as(v, _unit_step(_CENTI_MINUTE, k - n), UINT64)
    return round_to_significant_digits_as(v, n, UINT64)


def round_duration_to_significant_digits(d: int, n: int) -> int:
    """d を標準的な「1h2m3.456s」表記での有効数字 n 桁へ丸める。n <= 0 なら d をそのまま返す。

    時間・分の桁を上位桁として数えるため、生のナノ秒値の有効数字とは異なる。

    例（文字列は説明用）::

        round_duration_to_significant_digits(1h35m42.567s, 1)  # 2h0m0s
        round_duration_to_significant_digits(1h35m42.567s, 2)  # 1h40m0s
        round_duration_to_significant_digits(1h35m42.567s, 3)  # 1h36m0s
        round_duration_to_significant_digits(1h35m42.567s, 4)  # 1h35m40s
        round_duration_to_significant_digits(3.789s, 1)        # 4s
        round_duration_to_significant_digits(1.567ms, 3)       # 1.57ms
        round_duration_to_significant_digits(-41.5ms, 2)       # -42ms
    """
    d = _ensure_in_range(d, "d", INT64)
    n = _ensure_int(n, "n")
    if n <= 0:
        return d
    if d < 0:
        result = -_round_magnitude_sig(-d, n)
    else:
        result = _round_magnitude_sig(d, n)
    if not INT64.contains(result):
        raise RoundingOverflowError(
            f"{d}ns を有効数字 {n} 桁に丸めた結果 {result} が {INT64.name} の範囲を超えます"
        )
    return result


def timedelta_to_ns(td: timedelta) -> int:
    if not isinstance(td, timedelta):
        raise TypeError(f"td は timedelta である必要があります: {td!r}")
    us = (td.days * 86400 + td.seconds) * 1_000_000 + td.microseconds
    return _ensure_in_range(us * MICROSECOND, "td", INT64)


def ns_to_timedelta(ns: int) -> timedelta:
    """ナノ秒を timedelta に変換する（マイクロ秒未満は 0 方向へ切り捨て）。"""
    ns = _ensure_int(ns, "ns")
    us = abs(ns) // MICROSECOND
    return timedelta(microseconds=-us if ns < 0 else us)
