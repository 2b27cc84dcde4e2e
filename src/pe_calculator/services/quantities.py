"""Parsing, sanitizing and formatting of macro quantities.

Every function here is total: malformed input degrades to zero instead of
raising, so a half-typed value never blocks the calculator.
"""

import math
import sys

NO_RATIO = "—"
_SNAP_THRESHOLD = 0.005


def sanitize(value: float) -> float:
    """Clamp a quantity to the non-negative finite range."""
    if not math.isfinite(value):
        return 0.0
    return value if value > 0 else 0.0


def parse_quantity(raw: str) -> float:
    """Parse user-entered text as a sanitized decimal number."""
    text = raw.strip()
    # float() accepts digit separators and non-ASCII digits, decimal input
    # fields do not.
    if not text or not text.isascii() or "_" in text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    return sanitize(value)


def format_number(value: float) -> str:
    """Format grams to two decimals, snapping sub-cent noise to zero."""
    if abs(value) < _SNAP_THRESHOLD:
        return "0.00"
    return f"{value:.2f}"


def format_input_value(value: float) -> str:
    """Format a decoded quantity for an editable field; zero-like is blank."""
    if abs(value) < _SNAP_THRESHOLD:
        return ""
    return f"{value:.2f}"


def format_ratio(totals: tuple[float, float, float]) -> str:
    """Return protein / (fat + net carbs) at two decimals, or a dash."""
    protein, fat, net_carbs = totals
    energy = fat + net_carbs
    if energy <= sys.float_info.min:
        return NO_RATIO
    return f"{protein / energy:.2f}"
