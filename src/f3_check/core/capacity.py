"""容量字串解析與比例計算。"""

from __future__ import annotations

import math
import re

from ..models import Capacity

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_GRADE_SUFFIXES = (
    (1, ("KB", "KIB")),
    (2, ("MB", "MIB")),
    (3, ("GB", "GIB")),
    (4, ("TB", "TIB")),
    (5, ("PB", "PIB")),
)


def grade_of(capacity: str) -> int:
    unit = capacity.strip().upper()
    for grade, suffixes in _GRADE_SUFFIXES:
        if unit.endswith(suffixes):
            return grade
    return 0


def parse_number(capacity: str) -> float:
    """取第一個空白前的數字；非純十進位數字或溢位時回傳 0。"""
    token = capacity.split(" ", 1)[0]
    if not _NUMBER.fullmatch(token):
        return 0.0
    number = float(token)
    return number if math.isfinite(number) else 0.0


def ratio(numerator: str, denominator: str) -> float:
    """計算 numerator / denominator，先換算到同一單位級距。

    分母數值為 0 時回傳 0；結果不做上限截斷。
    """
    number1 = parse_number(numerator)
    number2 = parse_number(denominator)
    if number2 == 0:
        return 0.0
    return number1 / number2 / 1024 ** (grade_of(denominator) - grade_of(numerator))


def parse_capacity(raw: str) -> Capacity:
    return Capacity(raw=raw, value=parse_number(raw), grade=grade_of(raw))
