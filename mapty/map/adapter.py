"""Contract the controller needs from the mapping library."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from mapty.map.constants import PAN_DURATION_SEC, POPUP_MAX_WIDTH, POPUP_MIN_WIDTH
from mapty.workout.model import Coords, WorkoutType


MapHandle = Any
MarkerHandle = Any
ClickHandler = Callable[[Coords], None]


@dataclass(frozen=True)
class PopupOptions:
    max_width: int = POPUP_MAX_WIDTH
    min_width: int = POPUP_MIN_WIDTH
    auto_close: bool = False
    close_on_click: bool = False
    class_name: str | None = None

    @classmethod
    def for_type(cls, workout_type: WorkoutType) -> PopupOptions:
        return cls(class_name=f"{workout_type}-popup")

    def to_leaflet(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            "maxWidth": self.max_width,
            "minWidth": self.min_width,
            "autoClose": self.auto_close,
            "closeOnClick": self.close_on_click,
        }
        if self.class_name:
            options["className"] = self.class_name
        return options


@dataclass(frozen=True)
class ViewOptions:
    animate: bool = True
    pan_duration_sec: float = PAN_DURATION_SEC

    def to_leaflet(self) -> dict[str, Any]:
        return {"animate": self.animate, "pan": {"duration": self.pan_duration_sec}}


class MapAdapter(Protocol):
    def create_map(self, center: Coords, zoom: int) -> MapHandle: ...

    def set_view(
        self,
        map_handle: MapHandle,
        coords: Coords,
        zoom: int,
        options: ViewOptions | None = None,
    ) -> None: ...

    def on_click(self, map_handle: MapHandle, handler: ClickHandler) -> None: ...

    def add_marker(self, map_handle: MapHandle, coords: Coords) -> MarkerHandle: ...

    def bind_popup(
        self, marker: MarkerHandle, content: str, options: PopupOptions
    ) -> None: ...

    def open_popup(self, marker: MarkerHandle) -> None: ...
