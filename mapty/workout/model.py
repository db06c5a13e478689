"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Union
from uuid import uuid4


WorkoutType = Literal["running", "cycling"]
Coords = tuple[float, float]

WORKOUT_TYPES: tuple[WorkoutType, ...] = ("running", "cycling")

_MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_ICONS: dict[str, str] = {
    "running": "🏃‍♂️",
    "cycling": "🚴‍♀️",
}


@dataclass(frozen=True)
class Running:
    id: str
    coords: Coords
    distance: float
    duration: float
    date: datetime
    description: str
    cadence: float
    pace: float
    type: Literal["running"] = "running"


@dataclass(frozen=True)
class Cycling:
    id: str
    coords: Coords
    distance: float
    duration: float
    date: datetime
    description: str
    elevation_gain: float
    speed: float
    type: Literal["cycling"] = "cycling"


Workout = Union[Running, Cycling]


def workout_label(workout_type: WorkoutType) -> str:
    return workout_type[:1].upper() + workout_type[1:]


def workout_icon(workout: Workout) -> str:
    return _ICONS[workout.type]


def describe(workout_type: WorkoutType, date: datetime) -> str:
    """Display title such as ``Running on April 14``."""
    return f"{workout_label(workout_type)} on {_MONTHS[date.month - 1]} {date.day}"


def new_workout_id() -> str:
    return uuid4().hex


def new_running(
    coords: Coords,
    distance: float,
    duration: float,
    cadence: float,
    *,
    date: datetime | None = None,
    workout_id: str | None = None,
) -> Running:
    # Callers validate first; distance must already be non-zero here.
    created = date or datetime.now()
    return Running(
        id=workout_id or new_workout_id(),
        coords=(float(coords[0]), float(coords[1])),
        distance=distance,
        duration=duration,
        date=created,
        description=describe("running", created),
        cadence=cadence,
        pace=duration / distance,
    )


def new_cycling(
    coords: Coords,
    distance: float,
    duration: float,
    elevation_gain: float,
    *,
    date: datetime | None = None,
    workout_id: str | None = None,
) -> Cycling:
    created = date or datetime.now()
    return Cycling(
        id=workout_id or new_workout_id(),
        coords=(float(coords[0]), float(coords[1])),
        distance=distance,
        duration=duration,
        date=created,
        description=describe("cycling", created),
        elevation_gain=elevation_gain,
        speed=distance / (duration / 60),
    )


def derived_metric(workout: Workout) -> float:
    """Pace (min/km) for runs, speed (km/h) for rides."""
    if workout.type == "running":
        return workout.pace
    return workout.speed
