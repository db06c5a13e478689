"""Error kinds surfaced by the workout controller."""

from __future__ import annotations


class MaptyError(Exception):
    """Base class for application errors."""


class LocationUnavailable(MaptyError, RuntimeError):
    """Raised when the current position cannot be obtained."""


class InvalidInput(MaptyError, ValueError):
    """Raised when form values fail validation."""


class UnresolvedIdentity(MaptyError, LookupError):
    """Raised when a workout id is not present in the collection."""
