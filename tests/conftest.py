from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from mapty.core.geolocation import FixedGeolocator, Geolocator
from mapty.map.adapter import ClickHandler, PopupOptions, ViewOptions
from mapty.ui.controller import WorkoutController
from mapty.ui.renderer import WorkoutEntry
from mapty.workout.model import Coords, WorkoutType


@dataclass
class FakeMarker:
    coords: Coords
    popup: str | None = None
    popup_options: PopupOptions | None = None
    opened: bool = False


@dataclass
class FakeMap:
    center: Coords
    zoom: int
    click_handlers: list[ClickHandler] = field(default_factory=list)
    markers: list[FakeMarker] = field(default_factory=list)


class FakeMapAdapter:
    def __init__(self) -> None:
        self.maps: list[FakeMap] = []
        self.views: list[tuple[Coords, int, ViewOptions | None]] = []
        self.fail_markers = False
        self.fail_create = False

    def create_map(self, center: Coords, zoom: int) -> FakeMap:
        if self.fail_create:
            raise RuntimeError("tile layer unavailable")
        handle = FakeMap(center=center, zoom=zoom)
        self.maps.append(handle)
        return handle

    def set_view(
        self,
        map_handle: FakeMap,
        coords: Coords,
        zoom: int,
        options: ViewOptions | None = None,
    ) -> None:
        self.views.append((coords, zoom, options))

    def on_click(self, map_handle: FakeMap, handler: ClickHandler) -> None:
        map_handle.click_handlers.append(handler)

    def add_marker(self, map_handle: FakeMap, coords: Coords) -> FakeMarker:
        if self.fail_markers:
            raise RuntimeError("marker layer unavailable")
        marker = FakeMarker(coords=coords)
        map_handle.markers.append(marker)
        return marker

    def bind_popup(self, marker: FakeMarker, content: str, options: PopupOptions) -> None:
        marker.popup = content
        marker.popup_options = options

    def open_popup(self, marker: FakeMarker) -> None:
        marker.opened = True

    def click(self, coords: Coords) -> None:
        for handler in self.maps[-1].click_handlers:
            handler(coords)


class FakeForm:
    def __init__(self) -> None:
        self.fields: dict[str, str] = {}
        self.visible = False
        self.metric_field: WorkoutType = "running"

    def values(self) -> dict[str, str]:
        return dict(self.fields)

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.fields = {key: "" for key in self.fields}
        self.visible = False

    def show_metric_field(self, workout_type: WorkoutType) -> None:
        self.metric_field = workout_type


class FakeWorkoutList:
    def __init__(self) -> None:
        self.entries: list[WorkoutEntry] = []

    def append(self, entry: WorkoutEntry) -> None:
        self.entries.append(entry)


@dataclass
class Harness:
    controller: WorkoutController
    map_adapter: FakeMapAdapter
    form: FakeForm
    workout_list: FakeWorkoutList
    notifications: list[str]


def make_harness(
    location: Coords | None = (48.8566, 2.3522),
    geolocator: Geolocator | None = None,
    **kwargs: Any,
) -> Harness:
    map_adapter = FakeMapAdapter()
    form = FakeForm()
    workout_list = FakeWorkoutList()
    notifications: list[str] = []
    controller = WorkoutController(
        map_adapter,
        geolocator or FixedGeolocator(location),
        form,
        workout_list,
        notifications.append,
        **kwargs,
    )
    return Harness(controller, map_adapter, form, workout_list, notifications)


@pytest.fixture
def harness() -> Harness:
    return make_harness()


@pytest.fixture
def harness_factory():
    return make_harness


@pytest.fixture
def map_adapter() -> FakeMapAdapter:
    return FakeMapAdapter()


@pytest.fixture
def workout_list() -> FakeWorkoutList:
    return FakeWorkoutList()


class UnansweredGeolocator:
    """Position request that never gets an answer from the browser."""

    def __init__(self) -> None:
        self.calls = 0

    async def current_position(self) -> Coords:
        self.calls += 1
        raise TimeoutError("no answer from navigator.geolocation")


@pytest.fixture
def unanswered_geolocator() -> UnansweredGeolocator:
    return UnansweredGeolocator()
