"""Position sources used to center the map at startup."""

from __future__ import annotations

import math
from typing import Protocol

from mapty.core.errors import LocationUnavailable
from mapty.workout.model import Coords


class Geolocator(Protocol):
    async def current_position(self) -> Coords: ...


class FixedGeolocator:
    """Reports a preconfigured position (or a failure when none is set)."""

    def __init__(self, coords: Coords | None) -> None:
        self._coords = coords

    async def current_position(self) -> Coords:
        if self._coords is None:
            raise LocationUnavailable("No simulated location configured")
        return self._coords


def parse_location(raw: str) -> Coords:
    """Parse ``"LAT,LNG"`` into a coordinate pair."""
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Invalid location '{raw}'. Use LAT,LNG")
    try:
        lat = float(parts[0])
        lng = float(parts[1])
    except ValueError as exc:
        raise ValueError(f"Invalid location '{raw}'. Use LAT,LNG") from exc
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValueError(f"Invalid location '{raw}': coordinates must be finite")
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Invalid latitude {lat}: must be within [-90, 90]")
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"Invalid longitude {lng}: must be within [-180, 180]")
    return (lat, lng)
