"""NiceGUI web UI for Mapty."""

from __future__ import annotations

from functools import partial
from typing import Callable

from nicegui import ui

from mapty.core.geolocation import FixedGeolocator, Geolocator
from mapty.map.constants import DEFAULT_ZOOM
from mapty.ui.browser import BrowserGeolocator
from mapty.ui.controller import (
    FIELD_CADENCE,
    FIELD_DISTANCE,
    FIELD_DURATION,
    FIELD_ELEVATION,
    FIELD_TYPE,
    WorkoutController,
)
from mapty.ui.leaflet_adapter import LeafletMapAdapter
from mapty.ui.renderer import WorkoutEntry
from mapty.workout.model import Coords, WorkoutType, workout_label


_STYLE = """
<style>
  :root {
    --mp-dark-1: #2d3439;
    --mp-dark-2: #42484d;
    --mp-light-1: #aaaaaa;
    --mp-light-2: #ececec;
    --mp-running: #00c46a;
    --mp-cycling: #ffb545;
  }
  body {
    background: var(--mp-light-2);
    color: var(--mp-light-2);
    font-family: "Manrope", Arial, sans-serif;
  }
  .mp-sidebar {
    background: var(--mp-dark-1);
    width: 30rem;
    min-width: 22rem;
    height: 100vh;
    overflow-y: auto;
    padding: 2rem 2.5rem;
  }
  .mp-map { flex: 1; height: 100vh; background: var(--mp-light-1); }
  .mp-card { background: var(--mp-dark-2); color: var(--mp-light-2); border-radius: 6px; }
  .mp-workout--running { border-left: 5px solid var(--mp-running); }
  .mp-workout--cycling { border-left: 5px solid var(--mp-cycling); }
  .mp-muted { color: var(--mp-light-1); }
  .running-popup .leaflet-popup-content-wrapper { border-left: 5px solid var(--mp-running); }
  .cycling-popup .leaflet-popup-content-wrapper { border-left: 5px solid var(--mp-cycling); }
</style>
"""


class WorkoutFormPanel:
    """Input form shown after a map click."""

    def __init__(self) -> None:
        with ui.card().classes("w-full mp-card") as self._card:
            with ui.grid(columns=2).classes("w-full gap-2"):
                self._type = ui.select(
                    {"running": workout_label("running"), "cycling": workout_label("cycling")},
                    value="running",
                    label="Type",
                )
                self._distance = ui.input("Distance", placeholder="km")
                self._duration = ui.input("Duration", placeholder="min")
                self._cadence = ui.input("Cadence", placeholder="step/min")
                self._elevation = ui.input("Elev Gain", placeholder="meters")
            with ui.row().classes("w-full justify-end"):
                self._submit_btn = ui.button("OK").props("color=positive")
        self._elevation.set_visibility(False)
        self._card.set_visibility(False)

    @property
    def _inputs(self) -> tuple[ui.input, ...]:
        return (self._distance, self._duration, self._cadence, self._elevation)

    def bind(
        self,
        on_submit: Callable[[], object],
        on_type_change: Callable[[WorkoutType], None],
    ) -> None:
        self._type.on_value_change(lambda e: on_type_change(e.value))
        for field in self._inputs:
            field.on("keydown.enter", lambda: on_submit())
        self._submit_btn.on_click(lambda: on_submit())

    def values(self) -> dict[str, str]:
        return {
            FIELD_TYPE: str(self._type.value or ""),
            FIELD_DISTANCE: str(self._distance.value or ""),
            FIELD_DURATION: str(self._duration.value or ""),
            FIELD_CADENCE: str(self._cadence.value or ""),
            FIELD_ELEVATION: str(self._elevation.value or ""),
        }

    def show(self) -> None:
        self._card.set_visibility(True)
        self._distance.run_method("focus")

    def hide(self) -> None:
        for field in self._inputs:
            field.value = ""
        self._card.set_visibility(False)

    def show_metric_field(self, workout_type: WorkoutType) -> None:
        self._cadence.set_visibility(workout_type == "running")
        self._elevation.set_visibility(workout_type == "cycling")


class WorkoutListPanel:
    """Sidebar list of logged workouts, oldest first."""

    def __init__(self) -> None:
        self._column = ui.column().classes("w-full gap-2")
        self._on_select: Callable[[str], object] | None = None

    def bind(self, on_select: Callable[[str], object]) -> None:
        self._on_select = on_select

    def append(self, entry: WorkoutEntry) -> None:
        with self._column:
            with ui.card().classes(
                f"w-full cursor-pointer mp-card mp-workout--{entry.type}"
            ).props(f"data-id={entry.workout_id}") as card:
                ui.label(entry.title).classes("text-base font-semibold")
                with ui.row().classes("w-full gap-4"):
                    for row in entry.details:
                        with ui.row().classes("items-baseline gap-1"):
                            ui.label(row.icon)
                            ui.label(row.value).classes("text-lg")
                            ui.label(row.unit).classes("text-xs mp-muted uppercase")
        card.on("click", partial(self._select, entry.workout_id))

    def _select(self, workout_id: str) -> None:
        if self._on_select is not None:
            self._on_select(workout_id)


def _notify_error(message: str) -> None:
    ui.notify(message, color="negative")


async def _session_page(*, zoom: int, location: Coords | None, debug: bool) -> None:
    ui.add_head_html(_STYLE)
    with ui.row().classes("w-full no-wrap gap-0"):
        with ui.column().classes("mp-sidebar gap-4"):
            ui.label("mapty").classes("text-2xl font-semibold tracking-wide")
            form = WorkoutFormPanel()
            workout_list = WorkoutListPanel()
            ui.label("Click on the map to log a workout").classes("text-xs mp-muted")
        map_container = ui.element("div").classes("mp-map")

    geolocator: Geolocator
    if location is not None:
        geolocator = FixedGeolocator(location)
    else:
        geolocator = BrowserGeolocator()

    controller = WorkoutController(
        LeafletMapAdapter(map_container),
        geolocator,
        form,
        workout_list,
        _notify_error,
        zoom=zoom,
        debug=debug,
    )
    form.bind(on_submit=controller.submit, on_type_change=controller.select_type)
    workout_list.bind(controller.on_list_click)

    await ui.context.client.connected()
    await controller.start()


def run_web_ui(
    *,
    host: str = "127.0.0.1",
    port: int = 8088,
    zoom: int = DEFAULT_ZOOM,
    location: Coords | None = None,
    debug: bool = False,
) -> int:
    @ui.page("/")
    async def index() -> None:
        await _session_page(zoom=zoom, location=location, debug=debug)

    ui.run(host=host, port=port, reload=False, title="Mapty")
    return 0
