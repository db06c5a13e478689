"""Controller sequencing geolocation, map clicks, form submits and rendering."""

from __future__ import annotations

from typing import Callable, Mapping, Protocol

from mapty.core.errors import InvalidInput, LocationUnavailable, UnresolvedIdentity
from mapty.core.geolocation import Geolocator
from mapty.core.state import AppState, Phase
from mapty.map.adapter import MapAdapter, ViewOptions
from mapty.map.constants import DEFAULT_ZOOM
from mapty.ui.renderer import WorkoutListView, WorkoutRenderer
from mapty.workout.model import (
    WORKOUT_TYPES,
    Coords,
    Workout,
    WorkoutType,
    new_cycling,
    new_running,
)
from mapty.workout.validation import parse_number, validate_cycling, validate_running


FIELD_TYPE = "type"
FIELD_DISTANCE = "distance"
FIELD_DURATION = "duration"
FIELD_CADENCE = "cadence"
FIELD_ELEVATION = "elevation"

LOCATION_UNAVAILABLE_MESSAGE = "We can't get your location 😩"
MAP_UNAVAILABLE_MESSAGE = "The map could not be loaded"

Notifier = Callable[[str], None]


class WorkoutForm(Protocol):
    def values(self) -> Mapping[str, str]: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def show_metric_field(self, workout_type: WorkoutType) -> None: ...


class WorkoutController:
    def __init__(
        self,
        map_adapter: MapAdapter,
        geolocator: Geolocator,
        form: WorkoutForm,
        workout_list: WorkoutListView,
        notifier: Notifier,
        *,
        zoom: int = DEFAULT_ZOOM,
        debug: bool = False,
    ) -> None:
        self._map = map_adapter
        self._geolocator = geolocator
        self._form = form
        self._renderer = WorkoutRenderer(map_adapter, workout_list)
        self._notify = notifier
        self._zoom = zoom
        self._debug = debug
        self.state = AppState()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def workouts(self) -> tuple[Workout, ...]:
        return tuple(self.state.workouts)

    async def start(self) -> None:
        if self.state.phase != "awaiting_location" or self.state.map is not None:
            raise RuntimeError("Controller already started")

        try:
            coords = await self._geolocator.current_position()
        except LocationUnavailable as exc:
            self.state.phase = "location_unavailable"
            print(f"[GEO] location unavailable: {exc}")
            self._notify(LOCATION_UNAVAILABLE_MESSAGE)
            return
        except TimeoutError:
            # No answer yet; stay without a map rather than retrying.
            print("[GEO] no position received, map stays hidden")
            return

        self._load_map(coords)

    def _load_map(self, coords: Coords) -> None:
        try:
            handle = self._map.create_map(coords, self._zoom)
            self._map.on_click(handle, self.on_map_click)
        except Exception as exc:
            self.state.phase = "map_unavailable"
            print(f"[MAP] map setup failed: {exc}")
            self._notify(MAP_UNAVAILABLE_MESSAGE)
            return
        self.state.map = handle
        self.state.phase = "map_ready"
        self._log(f"[MAP] centered on {coords[0]:.5f},{coords[1]:.5f} zoom={self._zoom}")

    def on_map_click(self, coords: Coords) -> None:
        if self.state.phase not in ("map_ready", "form_open"):
            self._log(f"[APP] map click ignored in phase {self.state.phase}")
            return
        self.state.pending_coords = (float(coords[0]), float(coords[1]))
        self.state.phase = "form_open"
        self._form.show()

    def select_type(self, workout_type: WorkoutType) -> None:
        if workout_type not in WORKOUT_TYPES:
            raise ValueError(f"Unknown workout type '{workout_type}'")
        if workout_type == self.state.active_type:
            return
        self.state.active_type = workout_type
        self._form.show_metric_field(workout_type)

    def submit(self) -> Workout | None:
        coords = self.state.pending_coords
        if self.state.phase != "form_open" or coords is None:
            self._log(f"[APP] submit ignored in phase {self.state.phase}")
            return None

        try:
            workout = self._build_workout(coords, self._form.values())
        except InvalidInput as exc:
            self._log(f"[APP] rejected input: {exc}")
            self._notify(str(exc))
            return None

        self.state.workouts.append(workout)
        self._renderer.render(self.state.map, workout)
        self._form.hide()
        self.state.pending_coords = None
        self.state.phase = "map_ready"
        self._log(f"[APP] added {workout.type} workout {workout.id}")
        return workout

    def _build_workout(self, coords: Coords, values: Mapping[str, str]) -> Workout:
        workout_type = str(values.get(FIELD_TYPE) or self.state.active_type)
        distance = parse_number(values.get(FIELD_DISTANCE))
        duration = parse_number(values.get(FIELD_DURATION))

        if workout_type == "running":
            cadence = parse_number(values.get(FIELD_CADENCE))
            validate_running(distance, duration, cadence)
            return new_running(coords, distance, duration, cadence)
        if workout_type == "cycling":
            elevation_gain = parse_number(values.get(FIELD_ELEVATION))
            validate_cycling(distance, duration, elevation_gain)
            return new_cycling(coords, distance, duration, elevation_gain)
        raise InvalidInput(f"Unknown workout type '{workout_type}'")

    def find_workout(self, workout_id: str) -> Workout:
        for workout in self.state.workouts:
            if workout.id == workout_id:
                return workout
        raise UnresolvedIdentity(f"No workout with id '{workout_id}'")

    def on_list_click(self, workout_id: str | None) -> bool:
        """Pan to the clicked workout; returns False when nothing was done."""
        if not workout_id:
            return False
        try:
            workout = self.find_workout(workout_id)
        except UnresolvedIdentity as exc:
            print(f"[APP] list click ignored: {exc}")
            return False
        if self.state.map is None:
            return False

        self._map.set_view(self.state.map, workout.coords, self._zoom, ViewOptions())
        return True

    def _log(self, message: str) -> None:
        if self._debug:
            print(message)
