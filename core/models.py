"""Data models for the pile capacity calculation."""

import math
from enum import Enum

from pydantic import BaseModel, Field, computed_field, field_validator

from core.parsing import parse_number


DEFAULT_ZONE_MULTIPLIER = 1.0


class DepthConvention(str, Enum):
    """How layer tops are measured."""

    BGL = "mbgl"  # metres below ground level, larger = deeper
    RL = "mrl"    # reduced level (elevation), larger = shallower

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        return None


# --- Soil ---


class SoilLayer(BaseModel):
    """Soil layer as entered on the form.

    Only the top is required for the layer to take part in the calculation;
    a missing stress value removes the layer from that calculation alone.
    """

    name: str = ""
    top: float | None = Field(default=None, description="Layer top, m (mbgl or mRL)")
    skin_friction: float | None = Field(default=None, description="Allowable skin friction, kPa")
    end_bearing: float | None = Field(default=None, description="Allowable end bearing, kPa")

    @field_validator("name", mode="before")
    @classmethod
    def _clean_name(cls, value):
        return "" if value is None else str(value).strip()

    @field_validator("top", "skin_friction", "end_bearing", mode="before")
    @classmethod
    def _parse_value(cls, value):
        return parse_number(value)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return self.top is not None

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        return f"Layer @ {self.top:g}" if self.top is not None else "Layer"


# --- Pile ---


class Pile(BaseModel):
    """Bored pile geometry and design factors."""

    diameter: float | None = Field(default=None, description="Pile diameter, m")
    depth: float | None = Field(default=None, description="Embedded length below ground, m")
    strength_reduction_factor: float | None = Field(
        default=None, description="Factor applied to both capacities (range not enforced)"
    )
    zone_multiplier: float = Field(
        default=DEFAULT_ZONE_MULTIPLIER,
        description="End-bearing zone above the tip, in pile diameters",
    )

    @field_validator("diameter", "depth", "strength_reduction_factor", mode="before")
    @classmethod
    def _parse_value(cls, value):
        return parse_number(value)

    @field_validator("zone_multiplier", mode="before")
    @classmethod
    def _parse_multiplier(cls, value):
        parsed = parse_number(value)
        return DEFAULT_ZONE_MULTIPLIER if parsed is None else parsed

    @computed_field
    @property
    def has_geometry(self) -> bool:
        """Diameter, depth and reduction factor are all present."""
        return None not in (self.diameter, self.depth, self.strength_reduction_factor)

    @computed_field
    @property
    def perimeter(self) -> float | None:
        """Shaft perimeter πD, m."""
        return math.pi * self.diameter if self.diameter is not None else None

    @computed_field
    @property
    def base_area(self) -> float | None:
        """Base area π(D/2)², m²."""
        return math.pi * (self.diameter / 2) ** 2 if self.diameter is not None else None


class CapacityInput(BaseModel):
    """Everything the capacity engine reads, as one value."""

    pile: Pile = Field(default_factory=Pile)
    convention: DepthConvention = DepthConvention.BGL
    layers: list[SoilLayer] = Field(default_factory=list)

    @field_validator("convention", mode="before")
    @classmethod
    def _parse_convention(cls, value):
        if value is None or value == "":
            return DepthConvention.BGL
        return DepthConvention(value)


# --- Results ---


class PileExtents(BaseModel):
    """Ground level and pile ends on the active depth axis."""

    ground_level: float
    pile_top: float
    pile_base: float


class EndBearingZone(BaseModel):
    """Window around the pile tip in which end bearing values are read."""

    top: float = Field(description="Shallow limit, m")
    bottom: float = Field(description="Deep limit, m")


class LayerContribution(BaseModel):
    """Skin friction taken by one layer."""

    name: str
    top: float
    bottom: float
    skin_friction: float = Field(description="kPa")
    overlap: float = Field(ge=0, description="Pile length inside the layer, m")
    overlap_top: float | None = None
    overlap_bottom: float | None = None
    capacity: float = Field(description="Unrounded contribution, kN")


class CapacityResult(BaseModel):
    """Output of one calculation.

    Either ``errors`` is non-empty or both capacities are set.
    """

    skin_friction: int | None = Field(default=None, description="Allowable skin friction, kN")
    end_bearing: int | None = Field(default=None, description="Allowable end bearing, kN")
    errors: list[str] = Field(default_factory=list)
    extents: PileExtents | None = None
    zone: EndBearingZone | None = None
    governing_end_bearing: float | None = Field(default=None, description="Lowest qb in the zone, kPa")
    contributions: list[LayerContribution] = Field(default_factory=list)

    @computed_field
    @property
    def total(self) -> int | None:
        """Total allowable capacity, kN."""
        if self.skin_friction is None or self.end_bearing is None:
            return None
        return self.skin_friction + self.end_bearing

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.errors and self.total is not None
