"""
Shared domain: percentage arithmetic

All percentages in the system are integers rounded half-up
(66.67 -> 67, 12.5 -> 13). Python's round() is banker's rounding,
so everything goes through Decimal here.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percent(part: int, whole: int) -> int:
    """round(100 * part / whole); 0 when whole is 0."""
    if not whole:
        return 0
    return round_half_up(Decimal(int(part)) * 100 / Decimal(int(whole)))


def average(values: Iterable[Number]) -> int:
    items = [Decimal(str(v)) for v in values]
    if not items:
        return 0
    return round_half_up(sum(items) / len(items))
