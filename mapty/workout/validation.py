"""Numeric checks for workout form input."""

from __future__ import annotations

import math
import re
from typing import Iterable

from mapty.core.errors import InvalidInput


INVALID_INPUT_MESSAGE = "The value must be a positive number!"

# Plain ASCII decimal notation, as accepted by a browser number field.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _is_finite(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def all_finite(values: Iterable[float]) -> bool:
    return all(_is_finite(value) for value in values)


def all_positive(values: Iterable[float]) -> bool:
    return all(value > 0 for value in values)


def parse_number(raw: object) -> float:
    """Convert a form value to a float.

    Blank input reads as ``0.0`` and anything unparseable as NaN, so bad
    values fail the predicates instead of raising here.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        try:
            return float(raw)
        except OverflowError:
            return math.inf if raw > 0 else -math.inf
    text = str(raw).strip()
    if text == "":
        return 0.0
    if not _NUMBER_RE.fullmatch(text):
        return math.nan
    return float(text)


def validate_running(distance: float, duration: float, cadence: float) -> None:
    values = [distance, duration, cadence]
    if not all_finite(values) or not all_positive(values):
        raise InvalidInput(INVALID_INPUT_MESSAGE)


def validate_cycling(distance: float, duration: float, elevation_gain: float) -> None:
    # Elevation gain is only required to be finite; net downhill rides are valid.
    if not all_finite([distance, duration, elevation_gain]) or not all_positive(
        [distance, duration]
    ):
        raise InvalidInput(INVALID_INPUT_MESSAGE)
