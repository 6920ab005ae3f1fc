"""Parsing and formatting of inch dimensions.

Woodworkers enter dimensions as fractions ("3/4", "1-1/2") as often as
decimals. These helpers convert between that notation and floats.
"""

from __future__ import annotations

import math
import re

_MIXED_RE = re.compile(r"^(\d+)[-\s]+(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

# Common eighths used in lumber measurements
COMMON_FRACTIONS: dict[float, str] = {
    0.125: "1/8",
    0.25: "1/4",
    0.375: "3/8",
    0.5: "1/2",
    0.625: "5/8",
    0.75: "3/4",
    0.875: "7/8",
}


def parse_fractional_inches(text: str) -> float | None:
    """Parse user input that may contain fractions into a float.

    Supports:
    - Integers: "12" -> 12.0
    - Decimals: "6.5" -> 6.5
    - Fractions: "3/4" -> 0.75
    - Mixed numbers: "1-1/2" or "1 1/2" -> 1.5

    A leading number followed by other text parses the leading number
    ("96in" -> 96.0).

    Args:
        text: Raw user input.

    Returns:
        Parsed value, or None if the input is empty, malformed, not finite,
        or has a zero denominator.
    """
    trimmed = text.strip()
    if not trimmed:
        return None

    mixed = _MIXED_RE.match(trimmed)
    if mixed:
        whole, numerator, denominator = (int(g) for g in mixed.groups())
        if denominator == 0:
            return None
        return whole + numerator / denominator

    fraction = _FRACTION_RE.match(trimmed)
    if fraction:
        numerator, denominator = (int(g) for g in fraction.groups())
        if denominator == 0:
            return None
        return numerator / denominator

    decimal = _DECIMAL_RE.match(trimmed)
    if decimal is None:
        return None
    value = float(decimal.group(0))
    # Exponents like "1e400" overflow to inf
    if not math.isfinite(value):
        return None
    return value


def format_dimension(value: float | None) -> str:
    """Format a dimension for display, using fractions for common eighths.

    Examples:
        >>> format_dimension(12)
        '12'
        >>> format_dimension(0.75)
        '3/4'
        >>> format_dimension(1.5)
        '1-1/2'
        >>> format_dimension(2.3)
        '2.3'
    """
    if value is None or not math.isfinite(value):
        return ""

    if float(value).is_integer():
        return str(int(value))

    whole = math.floor(value)
    fractional = round(value - whole, 3)
    fraction = COMMON_FRACTIONS.get(fractional)
    if fraction:
        if whole == 0:
            return fraction
        return f"{whole}-{fraction}"

    return format_number(round(value, 3))


def format_number(value: float) -> str:
    """Format a number without a trailing ".0" on whole values.

    Examples:
        >>> format_number(96.0)
        '96'
        >>> format_number(0.125)
        '0.125'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
