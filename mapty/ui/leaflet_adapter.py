"""NiceGUI Leaflet implementation of the map adapter."""

from __future__ import annotations

from typing import Any

from nicegui import events, ui

from mapty.map.adapter import ClickHandler, PopupOptions, ViewOptions
from mapty.map.constants import TILE_ATTRIBUTION, TILE_URL_TEMPLATE
from mapty.workout.model import Coords


def click_coords(args: Any) -> Coords | None:
    """Extract (lat, lng) from a Leaflet ``map-click`` event payload."""
    if not isinstance(args, dict):
        return None
    latlng = args.get("latlng")
    if not isinstance(latlng, dict):
        return None
    try:
        return (float(latlng["lat"]), float(latlng["lng"]))
    except (KeyError, TypeError, ValueError):
        return None


class LeafletMapAdapter:
    def __init__(
        self,
        container: ui.element,
        tile_url: str = TILE_URL_TEMPLATE,
        attribution: str = TILE_ATTRIBUTION,
    ) -> None:
        self._container = container
        self._tile_url = tile_url
        self._attribution = attribution

    def create_map(self, center: Coords, zoom: int) -> ui.leaflet:
        with self._container:
            leaflet = ui.leaflet(center=center, zoom=zoom).classes("w-full h-full")
        # Swap the built-in OSM layer for the configured tiles.
        leaflet.clear_layers()
        leaflet.tile_layer(
            url_template=self._tile_url,
            options={"attribution": self._attribution},
        )
        return leaflet

    def set_view(
        self,
        map_handle: ui.leaflet,
        coords: Coords,
        zoom: int,
        options: ViewOptions | None = None,
    ) -> None:
        view = options or ViewOptions()
        map_handle.run_map_method("setView", [coords[0], coords[1]], zoom, view.to_leaflet())

    def on_click(self, map_handle: ui.leaflet, handler: ClickHandler) -> None:
        def _on_map_click(e: events.GenericEventArguments) -> None:
            coords = click_coords(e.args)
            if coords is None:
                print(f"[MAP] click without coordinates: {e.args!r}")
                return
            handler(coords)

        map_handle.on("map-click", _on_map_click)

    def add_marker(self, map_handle: ui.leaflet, coords: Coords):
        return map_handle.marker(latlng=coords)

    def bind_popup(self, marker, content: str, options: PopupOptions) -> None:
        marker.run_method("bindPopup", content, options.to_leaflet())

    def open_popup(self, marker) -> None:
        marker.run_method("openPopup")
