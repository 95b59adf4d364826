"""
Length units and meter conversion.

`UNITS` maps a unit symbol to the number of meters in one unit. It is built once
at import time and exposed read-only; the declaration order (m, km, ft, yd, mi, nm)
is the canonical order used by `to_all`.

Rounding follows the two "half" modes callers expect from a distance display:
- `round_up=True`: ties round away from zero (1.255 -> 1.26),
- `round_up=False`: ties round toward zero (1.255 -> 1.25).
Non-tie values round to the nearest digit in both modes.
"""

from __future__ import annotations

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Any, Mapping

from geobee.core.errors import InvalidUnit

UNITS: Mapping[str, float] = MappingProxyType(
    {
        "m": 1.0,
        "km": 1000.0,
        "ft": 0.3048,
        "yd": 0.9144,
        "mi": 1609.344,
        "nm": 1852.0,
    }
)

MIN_DECIMALS = 1
MAX_DECIMALS = 9


def normalize_unit(unit: str) -> str:
    return str(unit).lower()


def get_conversion(unit: str) -> float:
    """Return meters-per-unit for a (case-insensitive) unit symbol."""
    key = normalize_unit(unit)
    try:
        return UNITS[key]
    except KeyError:
        raise InvalidUnit(key, UNITS.keys()) from None


def is_precision_valid(decimals: Any) -> bool:
    """Rounding applies only for an integer number of decimals in [1, 9]."""
    if decimals is None or isinstance(decimals, bool) or not isinstance(decimals, int):
        return False
    return MIN_DECIMALS <= decimals <= MAX_DECIMALS


def round_half(value: float, decimals: int, round_up: bool = True) -> float:
    """Round `value` to `decimals` digits, resolving ties away from (or toward) zero."""
    mode = ROUND_HALF_UP if round_up else ROUND_HALF_DOWN
    # repr() gives the shortest text that round-trips, so 1.255 ties as written.
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=mode))


def convert(
    distance_m: float,
    unit: str,
    decimals: int | None = None,
    round_up: bool = True,
) -> float:
    """Convert a distance in meters into `unit`.

    A zero distance short-circuits to 0 before the unit is looked up, so an
    unknown unit is only reported for a non-zero distance.
    """
    if distance_m == 0:
        return 0.0

    result = float(distance_m) / get_conversion(unit)
    if is_precision_valid(decimals):
        result = round_half(result, decimals, round_up)  # type: ignore[arg-type]
    return result
