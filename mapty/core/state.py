"""Per-session runtime state owned by the workout controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from mapty.map.adapter import MapHandle
from mapty.workout.model import Coords, Workout, WorkoutType


Phase = Literal[
    "awaiting_location",
    "location_unavailable",
    "map_unavailable",
    "map_ready",
    "form_open",
]


@dataclass
class AppState:
    phase: Phase = "awaiting_location"
    map: MapHandle | None = None
    pending_coords: Coords | None = None
    active_type: WorkoutType = "running"
    workouts: list[Workout] = field(default_factory=list)
