"""
Distance calculator.

Two ways to use it:

- `Measurement.between(...)` returns an immutable value holding the distance in
  meters; conversions are methods on that value.
- `Calculator` keeps the last computed distance and supports chaining:
  `Calculator().calculate(45.4987, -73.5703, 45.5569, -73.7480).to("km", 2)`.

Zero-distance conventions (shared by both):
- `to()` returns 0 without validating the unit,
- `to_many()` / `to_all()` return an empty dict, not a dict of zeros.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from geobee.config.settings import Settings, get_settings
from geobee.core.errors import InvalidCoordinateFormat
from geobee.core.geo import GeoPoint, compute_distance_m, is_valid_coordinate, parse_coordinate
from geobee.core.units import UNITS, convert

logger = logging.getLogger(__name__)

INVALID_COORDINATES_MESSAGE = "The format of the provided coordinates is not valid."


def _require_point(lat: Any, lon: Any) -> GeoPoint:
    point = parse_coordinate(lat, lon)
    if point is None:
        logger.debug("Rejected coordinate lat=%r lon=%r", lat, lon)
        raise InvalidCoordinateFormat(INVALID_COORDINATES_MESSAGE)
    return point


@dataclass(frozen=True)
class Measurement:
    """A computed great-circle distance, in meters."""

    meters: float = 0.0

    @classmethod
    def between(cls, from_lat: Any, from_lon: Any, to_lat: Any, to_lon: Any) -> "Measurement":
        """Validate both endpoints and measure the distance between them."""
        origin = _require_point(from_lat, from_lon)
        destination = _require_point(to_lat, to_lon)
        meters = compute_distance_m(origin, destination)
        logger.debug("Distance %s -> %s: %.3f m", origin, destination, meters)
        return cls(meters=meters)

    def to(self, unit: str, decimals: int | None = None, round_up: bool = True) -> float:
        return convert(self.meters, unit, decimals, round_up)

    def to_many(
        self, units: Iterable[str], decimals: int | None = None, round_up: bool = True
    ) -> dict[str, float]:
        """Convert into each unit, keyed by the symbols as given (input order kept)."""
        if self.meters == 0:
            return {}
        return {unit: self.to(unit, decimals, round_up) for unit in units}

    def to_all(self, decimals: int | None = None, round_up: bool = True) -> dict[str, float]:
        return self.to_many(UNITS.keys(), decimals, round_up)


class Calculator:
    """Stateful facade: `calculate()` stores a distance, `to*()` read it.

    Instances are not locked; share one across threads only behind a lock that
    covers the whole calculate-then-convert sequence.

    `decimals` / `round_up` are instance defaults used when a conversion call
    leaves them as None.
    """

    def __init__(self, *, decimals: int | None = None, round_up: bool = True):
        self._measurement = Measurement()
        self.decimals = decimals
        self.round_up = round_up

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Calculator":
        settings = settings or get_settings()
        return cls(decimals=settings.conversion.decimals, round_up=settings.conversion.round_up)

    def calculate(self, from_lat: Any, from_lon: Any, to_lat: Any, to_lon: Any) -> "Calculator":
        """Compute and store the distance between two points; returns `self` for chaining."""
        self._measurement = Measurement.between(from_lat, from_lon, to_lat, to_lon)
        return self

    @property
    def measurement(self) -> Measurement:
        return self._measurement

    @property
    def distance(self) -> float:
        return self._measurement.meters

    def get_distance(self) -> float:
        """Return the last computed distance in meters (0 before any calculation)."""
        return self._measurement.meters

    def _resolve(self, decimals: int | None, round_up: bool | None) -> tuple[int | None, bool]:
        return (
            self.decimals if decimals is None else decimals,
            self.round_up if round_up is None else round_up,
        )

    def to(self, unit: str, decimals: int | None = None, round_up: bool | None = None) -> float:
        """Convert the stored distance into `unit` (m, km, ft, yd, mi, nm; any case)."""
        return self._measurement.to(unit, *self._resolve(decimals, round_up))

    def to_many(
        self, units: Iterable[str], decimals: int | None = None, round_up: bool | None = None
    ) -> dict[str, float]:
        return self._measurement.to_many(units, *self._resolve(decimals, round_up))

    def to_all(self, decimals: int | None = None, round_up: bool | None = None) -> dict[str, float]:
        return self._measurement.to_all(*self._resolve(decimals, round_up))

    def is_coordinate(self, lat: Any, lon: Any) -> bool:
        return is_valid_coordinate(lat, lon)
