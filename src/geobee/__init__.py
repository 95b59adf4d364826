"""geobee: great-circle distance between coordinates, converted into length units."""

from geobee.calculator import Calculator, Measurement
from geobee.core.errors import GeobeeError, InvalidCoordinateFormat, InvalidUnit
from geobee.core.geo import (
    EARTH_RADIUS_M,
    GeoPoint,
    compute_distance_m,
    is_valid_coordinate,
    is_valid_latitude,
    is_valid_longitude,
    parse_coordinate,
)
from geobee.core.units import UNITS, convert

__all__ = [
    "Calculator",
    "EARTH_RADIUS_M",
    "GeoPoint",
    "GeobeeError",
    "InvalidCoordinateFormat",
    "InvalidUnit",
    "Measurement",
    "UNITS",
    "compute_distance_m",
    "convert",
    "is_valid_coordinate",
    "is_valid_latitude",
    "is_valid_longitude",
    "parse_coordinate",
]
