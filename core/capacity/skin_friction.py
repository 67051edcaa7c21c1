"""Shaft (skin friction) capacity."""

import logging

from core.helpers import DepthAxis, compute_extents, iter_layer_spans, normalize_layers
from core.models import DepthConvention, LayerContribution, Pile, PileExtents, SoilLayer
from core.parsing import round_half_up

logger = logging.getLogger(__name__)


def layer_contributions(
    pile: Pile,
    ordered: list[SoilLayer],
    axis: DepthAxis,
    extents: PileExtents,
) -> list[LayerContribution]:
    """Per-layer skin friction.

    Q_i = f_s,i · πD · L_i · φ, where L_i is the length of pile inside the
    layer. Layers without a skin friction value are left out; layers the pile
    does not reach are kept with L_i = 0.

    Args:
        pile: Pile geometry; diameter, depth and reduction factor must be set.
        ordered: Layers from ``normalize_layers``.
        axis: Depth axis of the layer tops.
        extents: Pile top and base on the same axis.

    Returns:
        Contributions ordered from the ground downwards.
    """
    contributions = []
    for layer, top, bottom in iter_layer_spans(ordered, axis):
        if layer.skin_friction is None:
            continue

        common = axis.overlap(extents.pile_top, extents.pile_base, top, bottom)
        length = abs(common[1] - common[0]) if common else 0.0
        capacity = layer.skin_friction * pile.perimeter * length * pile.strength_reduction_factor

        logger.debug(
            "%s: %.3f..%.3f, L=%.3f m, fs=%.1f kPa -> %.2f kN",
            layer.label, top, bottom, length, layer.skin_friction, capacity,
        )
        contributions.append(LayerContribution(
            name=layer.label,
            top=top,
            bottom=bottom,
            skin_friction=layer.skin_friction,
            overlap=length,
            overlap_top=common[0] if common else None,
            overlap_bottom=common[1] if common else None,
            capacity=capacity,
        ))

    return contributions


def allowable_skin_friction(contributions: list[LayerContribution]) -> int:
    """Sum of the layer contributions, kN, rounded to a whole number."""
    return round_half_up(sum(c.capacity for c in contributions))


def skin_friction_capacity(
    pile: Pile,
    layers: list[SoilLayer],
    convention: DepthConvention = DepthConvention.BGL,
) -> int | None:
    """Allowable skin friction, kN, rounded to a whole number.

    None when the pile geometry is incomplete or no layer has a top.
    """
    ordered = normalize_layers(layers, convention)
    if not ordered or not pile.has_geometry:
        return None

    axis = DepthAxis.for_convention(convention)
    extents = compute_extents(ordered, pile, convention)
    return allowable_skin_friction(layer_contributions(pile, ordered, axis, extents))
