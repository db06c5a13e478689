"""Geolocation through the connected browser."""

from __future__ import annotations

from typing import Any

from nicegui import ui

from mapty.core.errors import LocationUnavailable
from mapty.workout.model import Coords


# Resolves with either {latitude, longitude} or {error}; never rejects.
_GEOLOCATION_JS = """
new Promise((resolve) => {
  if (!navigator.geolocation) {
    resolve({error: 'Geolocation is not supported.'});
    return;
  }
  navigator.geolocation.getCurrentPosition(
    (position) => resolve({
      latitude: position.coords.latitude,
      longitude: position.coords.longitude,
    }),
    (err) => resolve({error: (err && err.message) || 'Permission denied'}),
  );
})
"""

DEFAULT_BROWSER_TIMEOUT_SEC = 600.0


class BrowserGeolocator:
    def __init__(self, timeout_sec: float = DEFAULT_BROWSER_TIMEOUT_SEC) -> None:
        self._timeout_sec = timeout_sec

    async def current_position(self) -> Coords:
        result = await ui.run_javascript(_GEOLOCATION_JS, timeout=self._timeout_sec)
        return parse_position(result)


def parse_position(result: Any) -> Coords:
    if not isinstance(result, dict):
        raise LocationUnavailable(f"Unexpected geolocation result: {result!r}")
    if result.get("error"):
        raise LocationUnavailable(str(result["error"]))
    try:
        return (float(result["latitude"]), float(result["longitude"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise LocationUnavailable(f"Malformed geolocation result: {result!r}") from exc
