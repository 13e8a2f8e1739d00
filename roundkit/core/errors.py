from __future__ import annotations


class RoundingError(ValueError):
    """丸め処理の契約違反を表す基底例外。"""


class RoundingRangeError(RoundingError):
    """値やステップが整数表現の範囲外。"""


class RoundingOverflowError(RoundingError, OverflowError):
    """丸め結果が整数表現の範囲を超えた。"""


class ExponentRangeError(RoundingError):
    """10のべき乗テーブルの範囲外の指数が要求された。"""
