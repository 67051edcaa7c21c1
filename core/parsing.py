"""Parsing of raw form values and rounding of reported capacities."""

import math


def parse_number(value) -> float | None:
    """Convert a raw form value to float.

    Accepts numbers and strings; a comma is taken as the decimal separator.
    Blank, unparseable and non-finite values give None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        cleaned = value.strip().replace(",", ".")
        if not cleaned:
            return None
        try:
            result = float(cleaned)
        except ValueError:
            return None
    else:
        return None

    return result if math.isfinite(result) else None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
