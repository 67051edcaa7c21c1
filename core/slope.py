"""Slope conversions: angle <-> 1V:xH ratio, and a right-triangle solver."""

import math
import re
from typing import Literal

from pydantic import BaseModel, Field, computed_field

from core.parsing import parse_number


RATIO_PATTERN = re.compile(r"^(\d+\.?\d*)\s*[Vv]\s*:\s*(\d+\.?\d*)\s*[Hh]$")

MSG_ANGLE_RANGE = "Angle must be a number between 0 and 90 degrees."


class SlopeInputError(ValueError):
    """Input the slope tools cannot work with; the message is user-facing."""


class SlopeRatio(BaseModel):
    """Slope as an angle and as horizontal run per unit rise."""

    angle: float = Field(description="Angle from horizontal, °")
    horizontal: float = Field(gt=0, description="H for 1V")

    @computed_field
    @property
    def label(self) -> str:
        return f"1V:{self.horizontal:.1f}H"

    @computed_field
    @property
    def angle_label(self) -> str:
        return f"{self.angle:.1f}°"


class TriangleSolution(BaseModel):
    """Right triangle with one side or the angle solved from the other two."""

    vertical: float
    horizontal: float
    angle: float = Field(description="°")
    solved: Literal["vertical", "horizontal", "angle"]

    @computed_field
    @property
    def label(self) -> str:
        if self.solved == "angle":
            return f"Angle: {self.angle:.1f}°"
        value = self.vertical if self.solved == "vertical" else self.horizontal
        return f"{self.solved.capitalize()}: {value:.1f}"


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def angle_to_ratio(angle) -> SlopeRatio:
    """1V:xH for an angle in degrees (0 < angle < 90)."""
    value = parse_number(angle)
    if value is None or value <= 0 or value >= 90:
        raise SlopeInputError(MSG_ANGLE_RANGE)
    return SlopeRatio(angle=value, horizontal=1.0 / math.tan(math.radians(value)))


def parse_ratio(text: str) -> tuple[float, float]:
    """(V, H) from text such as ``2V:3H``."""
    match = RATIO_PATTERN.match(text.strip())
    if not match:
        raise SlopeInputError("Invalid ratio format. Please use format like 1V:1H or 2V:3H")

    vertical, horizontal = float(match.group(1)), float(match.group(2))
    if vertical <= 0 or horizontal <= 0:
        raise SlopeInputError("Both vertical and horizontal values must be positive numbers.")
    return vertical, horizontal


def ratio_to_angle(text: str) -> SlopeRatio:
    """Angle for a V:H ratio, with the ratio normalised to 1V."""
    vertical, horizontal = parse_ratio(text)
    normalized = horizontal / vertical
    return SlopeRatio(angle=math.degrees(math.atan(1.0 / normalized)), horizontal=normalized)


def convert(angle_text: str | None, ratio_text: str | None) -> SlopeRatio:
    """Convert whichever of the two fields is filled in."""
    if _is_blank(angle_text) and _is_blank(ratio_text):
        raise SlopeInputError("Please enter either an angle or a ratio.")
    if not _is_blank(angle_text) and not _is_blank(ratio_text):
        raise SlopeInputError("Please enter only one value (either angle or ratio).")

    if not _is_blank(angle_text):
        return angle_to_ratio(angle_text)
    return ratio_to_angle(ratio_text)


def _optional(value, message: str, upper: float | None = None) -> float | None:
    """None for a blank field, otherwise a non-negative number below ``upper``."""
    if _is_blank(value):
        return None
    number = parse_number(value)
    if number is None or number < 0 or (upper is not None and number >= upper):
        raise SlopeInputError(message)
    return number


def solve_triangle(vertical=None, horizontal=None, angle=None) -> TriangleSolution:
    """Solve the missing one of vertical, horizontal and angle.

    Args:
        vertical: Rise (any length unit), blank if unknown.
        horizontal: Run (same unit), blank if unknown.
        angle: Angle from horizontal, °, blank if unknown.

    Raises:
        SlopeInputError: not exactly two values given, or a value out of range.
    """
    provided = sum(not _is_blank(v) for v in (vertical, horizontal, angle))
    if provided == 0:
        raise SlopeInputError("Please enter at least two values.")
    if provided == 1:
        raise SlopeInputError("Please enter two values to calculate the third.")
    if provided == 3:
        raise SlopeInputError("Please leave one field empty to calculate it.")

    v = _optional(vertical, "Vertical must be a positive number.")
    h = _optional(horizontal, "Horizontal must be a positive number.")
    a = _optional(angle, MSG_ANGLE_RANGE, upper=90.0)

    if v is None:
        v = h * math.tan(math.radians(a))
        return TriangleSolution(vertical=v, horizontal=h, angle=a, solved="vertical")

    if h is None:
        if a == 0:
            raise SlopeInputError("Angle must be greater than 0 to calculate horizontal.")
        h = v / math.tan(math.radians(a))
        return TriangleSolution(vertical=v, horizontal=h, angle=a, solved="horizontal")

    if h == 0:
        raise SlopeInputError("Horizontal must be greater than 0 to calculate angle.")
    a = math.degrees(math.atan(v / h))
    return TriangleSolution(vertical=v, horizontal=h, angle=a, solved="angle")
