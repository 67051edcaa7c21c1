"""Pile capacity calculator."""

import logging

from core.capacity import (
    allowable_end_bearing,
    allowable_skin_friction,
    governing_end_bearing,
    layer_contributions,
)
from core.helpers import DepthAxis, compute_extents, normalize_layers
from core.models import CapacityInput, CapacityResult, Pile, SoilLayer

logger = logging.getLogger(__name__)


MSG_NO_DIAMETER = "Please enter pile diameter to get capacity"
MSG_NO_DEPTH = "Please enter pile depth to get capacity"
MSG_NO_REDUCTION_FACTOR = "Please enter strength reduction factor to get capacity"
MSG_NO_LAYERS = "Please enter at least one soil layer to get capacity"
MSG_UNABLE = "Unable to calculate capacity. Please check your inputs."


def _missing_inputs(pile: Pile, ordered: list[SoilLayer]) -> list[str]:
    errors = []
    if pile.diameter is None:
        errors.append(MSG_NO_DIAMETER)
    if pile.depth is None:
        errors.append(MSG_NO_DEPTH)
    if pile.strength_reduction_factor is None:
        errors.append(MSG_NO_REDUCTION_FACTOR)
    if not ordered:
        errors.append(MSG_NO_LAYERS)
    return errors


def validate_inputs(inputs: CapacityInput) -> list[str]:
    """Messages for every missing input, empty if the calculation can run."""
    return _missing_inputs(inputs.pile, normalize_layers(inputs.layers, inputs.convention))


def calculate(inputs: CapacityInput) -> CapacityResult:
    """Main calculation pipeline.

    Never raises for inputs it cannot use: missing fields come back as
    ``errors``, and a capacity that cannot be formed (no layer in range has
    the needed value) gives the single generic message.

    The layers are ordered and the pile extents found once; both capacities
    are built from that one profile.

    Args:
        inputs: Pile, depth convention and layers.

    Returns:
        CapacityResult with both capacities and the total, or errors.
    """
    pile, convention = inputs.pile, inputs.convention
    ordered = normalize_layers(inputs.layers, convention)

    errors = _missing_inputs(pile, ordered)
    if errors:
        logger.debug("Input incomplete: %s", "; ".join(errors))
        return CapacityResult(errors=errors)

    axis = DepthAxis.for_convention(convention)
    extents = compute_extents(ordered, pile, convention)

    contributions = layer_contributions(pile, ordered, axis, extents)
    q_b, zone = governing_end_bearing(pile, ordered, axis, extents)
    skin = allowable_skin_friction(contributions)
    base = allowable_end_bearing(pile, q_b)

    if base is None:
        logger.info("Capacity not available (skin=%s, base=%s)", skin, base)
        errors = [MSG_UNABLE]

    result = CapacityResult(
        skin_friction=skin,
        end_bearing=base,
        errors=errors,
        extents=extents,
        zone=zone,
        governing_end_bearing=q_b,
        contributions=contributions,
    )

    if result.is_valid:
        logger.info("Capacity: Qs=%d kN, Qb=%d kN, Q=%d kN", skin, base, result.total)
    return result
