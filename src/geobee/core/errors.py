"""
Library exceptions.

Both errors subclass `ValueError`: they are raised for bad caller input only
(nothing here is transient, so there is nothing to retry).
"""

from __future__ import annotations

from collections.abc import Iterable


class GeobeeError(ValueError):
    """Base class for all geobee errors."""


class InvalidCoordinateFormat(GeobeeError):
    """Raised when a latitude/longitude pair fails validation."""


class InvalidUnit(GeobeeError):
    """Raised when a length unit symbol is not in the supported set."""

    def __init__(self, unit: str, supported: Iterable[str]):
        self.unit = unit
        self.supported = tuple(supported)
        super().__init__(f"Unsupported unit '{unit}'. Supported units: {', '.join(self.supported)}")
