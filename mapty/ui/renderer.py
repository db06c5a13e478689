"""Projects a workout onto the map (marker + popup) and the sidebar list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from mapty.map.adapter import MapAdapter, MapHandle, PopupOptions
from mapty.workout.model import Workout, derived_metric, workout_icon


@dataclass(frozen=True)
class DetailRow:
    icon: str
    value: str
    unit: str


@dataclass(frozen=True)
class WorkoutEntry:
    workout_id: str
    type: str
    title: str
    details: tuple[DetailRow, ...]


class WorkoutListView(Protocol):
    def append(self, entry: WorkoutEntry) -> None: ...


def _fmt_number(value: float, digits: int = 1) -> str:
    return f"{value:.{digits}f}"


def _fmt_value(value: float) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def popup_content(workout: Workout) -> str:
    return f"{workout_icon(workout)} {workout.description}"


def build_entry(workout: Workout) -> WorkoutEntry:
    details = [
        DetailRow(workout_icon(workout), _fmt_value(workout.distance), "km"),
        DetailRow("⏱", _fmt_value(workout.duration), "min"),
    ]
    metric = _fmt_number(derived_metric(workout), 1)
    if workout.type == "running":
        details.append(DetailRow("⚡️", metric, "min/km"))
        details.append(DetailRow("🦶🏼", _fmt_value(workout.cadence), "spm"))
    else:
        details.append(DetailRow("⚡️", metric, "km/h"))
        details.append(DetailRow("🗻", _fmt_value(workout.elevation_gain), "m"))
    return WorkoutEntry(
        workout_id=workout.id,
        type=workout.type,
        title=workout.description,
        details=tuple(details),
    )


class WorkoutRenderer:
    def __init__(self, map_adapter: MapAdapter, workout_list: WorkoutListView) -> None:
        self._map = map_adapter
        self._list = workout_list

    def render(self, map_handle: MapHandle, workout: Workout) -> None:
        """Draw marker and list entry; each side effect is attempted on its own."""
        try:
            self.render_marker(map_handle, workout)
        except Exception as exc:
            print(f"[RENDER] marker for workout {workout.id} failed: {exc}")
        try:
            self.render_entry(workout)
        except Exception as exc:
            print(f"[RENDER] list entry for workout {workout.id} failed: {exc}")

    def render_marker(self, map_handle: MapHandle, workout: Workout) -> None:
        marker = self._map.add_marker(map_handle, workout.coords)
        self._map.bind_popup(marker, popup_content(workout), PopupOptions.for_type(workout.type))
        self._map.open_popup(marker)

    def render_entry(self, workout: Workout) -> None:
        self._list.append(build_entry(workout))
