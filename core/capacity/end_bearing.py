"""Base (end bearing) capacity."""

import logging

from core.helpers import DepthAxis, compute_extents, iter_layer_spans, normalize_layers
from core.models import DepthConvention, EndBearingZone, Pile, PileExtents, SoilLayer
from core.parsing import round_half_up

logger = logging.getLogger(__name__)


# Depth of the zone below the tip, in pile diameters.
ZONE_BELOW_TIP = 1.0


def end_bearing_zone(pile: Pile, pile_base: float, axis: DepthAxis) -> EndBearingZone:
    """Zone from m·D above the tip to 1·D below it."""
    return EndBearingZone(
        top=axis.step_up(pile_base, pile.zone_multiplier * pile.diameter),
        bottom=axis.step_down(pile_base, ZONE_BELOW_TIP * pile.diameter),
    )


def governing_end_bearing(
    pile: Pile,
    ordered: list[SoilLayer],
    axis: DepthAxis,
    extents: PileExtents,
) -> tuple[float | None, EndBearingZone]:
    """Lowest end bearing value among the layers touching the tip zone.

    Args:
        pile: Pile geometry; diameter, depth and reduction factor must be set.
        ordered: Layers from ``normalize_layers``.
        axis: Depth axis of the layer tops.
        extents: Pile top and base on the same axis.

    Returns:
        (q_b in kPa, zone). q_b is None when no layer in the zone carries a
        value.
    """
    zone = end_bearing_zone(pile, extents.pile_base, axis)

    values = [
        layer.end_bearing
        for layer, top, bottom in iter_layer_spans(ordered, axis)
        if layer.end_bearing is not None and axis.intersects(top, bottom, zone.top, zone.bottom)
    ]
    if not values:
        logger.debug("No end bearing value within %.3f..%.3f", zone.top, zone.bottom)
        return None, zone

    return min(values), zone


def allowable_end_bearing(pile: Pile, q_b: float | None) -> int | None:
    """q_b · π(D/2)² · φ, kN, rounded; None without a governing q_b."""
    if q_b is None:
        return None
    return round_half_up(q_b * pile.base_area * pile.strength_reduction_factor)


def end_bearing_capacity(
    pile: Pile,
    layers: list[SoilLayer],
    convention: DepthConvention = DepthConvention.BGL,
) -> int | None:
    """Allowable end bearing, kN: q_b,min · π(D/2)² · φ, rounded.

    None when the geometry is incomplete, no layer has a top, or no layer in
    the tip zone has an end bearing value.
    """
    ordered = normalize_layers(layers, convention)
    if not ordered or not pile.has_geometry:
        return None

    axis = DepthAxis.for_convention(convention)
    extents = compute_extents(ordered, pile, convention)
    q_b, _ = governing_end_bearing(pile, ordered, axis, extents)
    return allowable_end_bearing(pile, q_b)
