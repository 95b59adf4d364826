"""
Geospatial helpers: coordinate validation and great-circle distance.

Validation works on the decimal text of a value rather than on a parsed float,
so the "at most 6 fractional digits" rule is exact:
- `"45.500000"` is a valid latitude, `"45.5000001"` is not (7 digits),
- `90` / `"90.000"` are valid, `90.000001` is not,
- lists, dicts, `None` and booleans are never coordinates.

The distance formula is the atan2 form of the great-circle central angle, which
stays numerically stable for both tiny and antipodal separations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

LATITUDE_BOUND = 90
LONGITUDE_BOUND = 180
MAX_FRACTION_DIGITS = 6

# WGS-84 equatorial radius.
EARTH_RADIUS_M = 6_378_137


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


def _decimal_text(value: Any) -> str | None:
    """Return the plain decimal text of a scalar value (None for non-scalars)."""
    # bool is an int subclass; `True` is not a coordinate.
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        # Shortest repr first, then fixed-point so 1e-05 reads "0.00001".
        value = Decimal(repr(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        return format(value, "f")
    return None


def _is_digits(text: str) -> bool:
    return bool(text) and text.isascii() and text.isdigit()


def _is_bounded_decimal(text: str, bound: int) -> bool:
    """Check `[+-]INT[.FRAC]` with |value| <= bound and len(FRAC) <= 6."""
    if text[:1] in ("+", "-"):
        text = text[1:]
    integer, dot, fraction = text.partition(".")

    if not _is_digits(integer):
        return False
    if len(integer) > 1 and integer.startswith("0"):
        return False
    if dot and not (_is_digits(fraction) and len(fraction) <= MAX_FRACTION_DIGITS):
        return False

    whole = int(integer)
    if whole > bound:
        return False
    # At the bound itself only zero fractions are allowed (90.0 yes, 90.5 no).
    return whole < bound or not fraction.strip("0")


def _parse_bounded(value: Any, bound: int) -> float | None:
    text = _decimal_text(value)
    if text is None or not _is_bounded_decimal(text, bound):
        return None
    return float(text)


def parse_latitude(value: Any) -> float | None:
    """Parse a latitude in [-90, 90]; returns None when the value is not valid."""
    return _parse_bounded(value, LATITUDE_BOUND)


def parse_longitude(value: Any) -> float | None:
    """Parse a longitude in [-180, 180]; returns None when the value is not valid."""
    return _parse_bounded(value, LONGITUDE_BOUND)


def parse_coordinate(lat: Any, lon: Any) -> GeoPoint | None:
    """Parse a latitude/longitude pair into a `GeoPoint` (None if either part is invalid)."""
    lat_f = parse_latitude(lat)
    lon_f = parse_longitude(lon)
    if lat_f is None or lon_f is None:
        return None
    return GeoPoint(lat=lat_f, lon=lon_f)


def is_valid_latitude(value: Any) -> bool:
    return parse_latitude(value) is not None


def is_valid_longitude(value: Any) -> bool:
    return parse_longitude(value) is not None


def is_valid_coordinate(lat: Any, lon: Any) -> bool:
    """Return True when both values are valid; never raises."""
    return is_valid_latitude(lat) and is_valid_longitude(lon)


def compute_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Compute great-circle distance in meters between two points."""
    if a == b:
        return 0.0

    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)
    dlon = lon2 - lon1

    alpha = (math.cos(lat2) * math.sin(dlon)) ** 2 + (
        math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    ) ** 2
    beta = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(dlon)

    angle = math.atan2(math.sqrt(alpha), beta)
    return angle * EARTH_RADIUS_M
