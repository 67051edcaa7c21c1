"""Allowable pile capacity from layer stresses.

Two independent contributions:
- skin friction along the shaft, integrated over layer overlaps
- end bearing at the tip, governed by the weakest layer near the tip

Usage:
    from core.capacity import (
        skin_friction_capacity,
        end_bearing_capacity,
    )
"""

from .end_bearing import (
    allowable_end_bearing,
    end_bearing_capacity,
    end_bearing_zone,
    governing_end_bearing,
)
from .skin_friction import allowable_skin_friction, layer_contributions, skin_friction_capacity

__all__ = [
    # Skin friction
    "layer_contributions",
    "allowable_skin_friction",
    "skin_friction_capacity",
    # End bearing
    "end_bearing_zone",
    "governing_end_bearing",
    "allowable_end_bearing",
    "end_bearing_capacity",
]
