"""numpy 配列向けのベクトル化丸め（スカラー版と同じ規則）。"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from roundkit.core.digits import POW10
from roundkit.core.errors import RoundingOverflowError
from roundkit.core.integer import INT64, UINT64, IntRepr, _ensure_in_range, _ensure_int

_POW10_U64 = np.array(POW10, dtype=np.uint64)
_INT64_POS_LIMIT = np.uint64(INT64.max_value)
_INT64_NEG_LIMIT = np.uint64(-INT64.min_value)
_UINT64_LIMIT = np.uint64(UINT64.max_value)


def _as_int_array(values: object) -> Tuple[np.ndarray, IntRepr]:
    arr = np.asarray(values)
    if arr.size == 0 and arr.dtype.kind == "f":
        arr = arr.astype(np.int64)
    if arr.dtype == np.uint64:
        return arr, UINT64
    if arr.dtype.kind not in "iu":
        raise TypeError(f"values は整数配列である必要があります: dtype={arr.dtype}")
    return arr.astype(np.int64), INT64


def _split_sign(arr: np.ndarray, rep: IntRepr) -> Tuple[np.ndarray, np.ndarray]:
    if not rep.signed:
        return arr, np.zeros(arr.shape, dtype=bool)
    neg = arr < 0
    u = arr.astype(np.uint64)
    # 負値は 2**64 を法として反転すると絶対値になる（int64 最小値も含む）
    return np.where(neg, -u, u), neg


def _round_magnitudes(
    mag: np.ndarray, steps: np.ndarray, neg: np.ndarray, rep: IntRepr
) -> np.ndarray:
    r = mag % steps
    add = steps - r
    up = r >= add
    if rep.signed:
        limit = np.where(neg, _INT64_NEG_LIMIT, _INT64_POS_LIMIT)
    else:
        limit = np.full(mag.shape, _UINT64_LIMIT, dtype=np.uint64)
    overflow = up & (mag > limit - add)
    if np.any(overflow):
        idx = tuple(int(i) for i in np.argwhere(overflow)[0])
        raise RoundingOverflowError(f"index {idx} の丸め結果が {rep.name} の範囲を超えます")
    rounded = np.where(up, mag + add, mag - r)
    if rep.signed:
        return np.where(neg, -rounded, rounded).astype(np.int64)
    return rounded


def round_to_step_array(values: object, step: int) -> np.ndarray:
    """配列の各要素を step の倍数へ丸める。step <= 1 なら入力のコピーを返す。"""
    arr, rep = _as_int_array(values)
    step = _ensure_in_range(step, "step", rep)
    if step <= 1:
        return arr.copy()
    mag, neg = _split_sign(arr, rep)
    return _round_magnitudes(mag, np.uint64(step), neg, rep)


def round_to_significant_digits_array(values: object, n: int) -> np.ndarray:
    """配列の各要素を有効数字 n 桁へ丸める。n <= 0 なら入力のコピーを返す。"""
    arr, rep = _as_int_array(values)
    n = _ensure_int(n, "n")
    if n <= 0:
        return arr.copy()
    mag, neg = _split_sign(arr, rep)
    digits = np.ones(mag.shape, dtype=np.int64)
    for p in _POW10_U64[1:]:
        digits += mag >= p
    e = digits - n
    steps = np.where(e > 0, _POW10_U64[np.clip(e, 0, len(POW10) - 1)], np.uint64(1))
    return _round_magnitudes(mag, steps.astype(np.uint64), neg, rep)
