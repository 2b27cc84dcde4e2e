"""Tests for quantity parsing and formatting."""

import math

import pytest

from pe_calculator.services.quantities import (
    NO_RATIO,
    format_input_value,
    format_number,
    format_ratio,
    parse_quantity,
    sanitize,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("20", 20.0),
        (" 2.5 ", 2.5),
        ("1.", 1.0),
        (".5", 0.5),
        ("1e2", 100.0),
        ("", 0.0),
        ("   ", 0.0),
        ("abc", 0.0),
        ("-5", 0.0),
        ("inf", 0.0),
        ("-inf", 0.0),
        ("nan", 0.0),
        ("1e400", 0.0),
        ("1_000", 0.0),
        ("1,5", 0.0),
        ("５", 0.0),
        ("١٢", 0.0),
    ],
)
def test_parse_quantity(raw: str, expected: float) -> None:
    value = parse_quantity(raw)

    assert value == expected
    assert value >= 0
    assert math.isfinite(value)


@pytest.mark.parametrize(
    "value", [-1.0, -0.0, 0.0, 3.5, math.inf, -math.inf, math.nan, 1e308]
)
def test_sanitize_is_idempotent_and_non_negative(value: float) -> None:
    once = sanitize(value)

    assert sanitize(once) == once
    assert once >= 0
    assert math.isfinite(once)


def test_sanitize_normalizes_negative_zero() -> None:
    assert math.copysign(1.0, sanitize(-0.0)) == 1.0


def test_format_number_snaps_small_values() -> None:
    assert format_number(0.004) == "0.00"
    assert format_number(-0.0) == "0.00"
    assert format_number(-0.001) == "0.00"
    assert format_number(2.5) == "2.50"
    assert format_number(20) == "20.00"


def test_format_input_value_blanks_small_values() -> None:
    assert format_input_value(0.0) == ""
    assert format_input_value(0.001) == ""
    assert format_input_value(1.0) == "1.00"


def test_format_ratio() -> None:
    assert format_ratio((20.0, 5.0, 2.0)) == "2.86"
    assert format_ratio((20.0, 0.0, 0.0)) == NO_RATIO
    assert format_ratio((0.0, 0.0, 0.0)) == NO_RATIO
    assert format_ratio((1.0, 5e-324, 0.0)) == NO_RATIO
    assert format_ratio((0.0, 1.0, 1.0)) == "0.00"
