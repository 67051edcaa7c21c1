"""Calculation core for the pile capacity and slope tools.

Modules:
- models: Data types (SoilLayer, Pile, CapacityInput, CapacityResult, ...)
- calculator: Validation and the capacity pipeline
- capacity: Skin friction and end bearing
- helpers: Depth-axis geometry shared by both capacities
- slope: Angle / ratio conversion and triangle solver

Usage:
    from core import capacity, slope
    from core.models import SoilLayer, Pile, CapacityInput
    from core.calculator import calculate
"""

from . import capacity, helpers, slope
from .models import CapacityInput, CapacityResult, DepthConvention, Pile, SoilLayer

__all__ = [
    "capacity",
    "helpers",
    "slope",
    "CapacityInput",
    "CapacityResult",
    "DepthConvention",
    "Pile",
    "SoilLayer",
]
