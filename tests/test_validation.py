from __future__ import annotations

import math

import pytest

from mapty.core.errors import InvalidInput
from mapty.workout.validation import (
    all_finite,
    all_positive,
    parse_number,
    validate_cycling,
    validate_running,
)


def test_all_positive() -> None:
    assert all_positive([5, 0, 3]) is False
    assert all_positive([5, 1, 3]) is True
    assert all_positive([5, -1]) is False


def test_all_finite() -> None:
    assert all_finite([5, math.inf]) is False
    assert all_finite([5, -math.inf]) is False
    assert all_finite([math.nan]) is False
    assert all_finite([5, 0, -3.5]) is True


def test_parse_number() -> None:
    assert parse_number("5") == 5.0
    assert parse_number(" 2.5 ") == 2.5
    assert parse_number("") == 0.0
    assert parse_number(None) == 0.0
    assert math.isnan(parse_number("abc"))


def test_validate_running_requires_all_positive() -> None:
    validate_running(5, 30, 150)

    with pytest.raises(InvalidInput):
        validate_running(5, 30, 0)
    with pytest.raises(InvalidInput):
        validate_running(parse_number("abc"), 30, 150)
    with pytest.raises(InvalidInput):
        validate_running(5, math.inf, 150)


def test_validate_cycling_allows_negative_elevation() -> None:
    validate_cycling(10, 30, -20)
    validate_cycling(10, 30, 0)

    with pytest.raises(InvalidInput):
        validate_cycling(-10, 30, -20)
    with pytest.raises(InvalidInput):
        validate_cycling(10, 0, 100)
    with pytest.raises(InvalidInput):
        validate_cycling(10, 30, parse_number("steep"))


def test_invalid_input_is_value_error() -> None:
    with pytest.raises(ValueError, match="positive number"):
        validate_running(-1, 30, 150)


def test_all_finite_handles_huge_ints() -> None:
    assert all_finite([10**400]) is True
    assert all_finite([True]) is False
    assert all_finite(["5"]) is False  # type: ignore[list-item]


@pytest.mark.parametrize("raw", ["1_000", "٥", "0x10", "Infinity", "nan", "5 km", "1,5"])
def test_parse_number_rejects_non_browser_syntax(raw: str) -> None:
    assert math.isnan(parse_number(raw))


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("+4", 4.0), ("-20", -20.0), (".5", 0.5), ("3.", 3.0), ("1e3", 1000.0)],
)
def test_parse_number_accepts_decimal_notation(raw: str, expected: float) -> None:
    assert parse_number(raw) == expected


def test_parse_number_huge_int_is_infinite() -> None:
    assert parse_number(10**400) == math.inf
    assert not all_finite([parse_number(10**400)])
