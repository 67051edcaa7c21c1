"""Depth-axis geometry shared by the skin friction and end bearing calculations.

Layer tops are raw numbers on one of two axes. Under mbgl a larger value is
deeper, under mRL a smaller value is deeper. All comparisons go through
``DepthAxis`` so the calculations themselves are written once.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from core.models import DepthConvention, Pile, PileExtents, SoilLayer

logger = logging.getLogger(__name__)


# The deepest layer has no bottom; it is extended this far below its top.
LAST_LAYER_EXTENSION = 1000.0


@dataclass(frozen=True)
class DepthAxis:
    """Comparison strategy for one depth convention.

    ``sign`` is +1 when larger numbers are deeper (mbgl), -1 otherwise (mRL).
    """

    sign: float

    @classmethod
    def for_convention(cls, convention: DepthConvention) -> "DepthAxis":
        return _AXES[DepthConvention(convention)]

    def depth_of(self, level: float) -> float:
        """Value that grows with physical depth."""
        return self.sign * level

    def is_shallower(self, a: float, b: float) -> bool:
        return self.depth_of(a) < self.depth_of(b)

    def deeper(self, a: float, b: float) -> float:
        return b if self.is_shallower(a, b) else a

    def shallower(self, a: float, b: float) -> float:
        return a if self.is_shallower(a, b) else b

    def step_down(self, level: float, distance: float) -> float:
        """Move ``distance`` away from the ground."""
        return level + self.sign * distance

    def step_up(self, level: float, distance: float) -> float:
        """Move ``distance`` towards the ground."""
        return level - self.sign * distance

    def sort_key(self, layer: SoilLayer) -> float:
        return self.depth_of(layer.top)

    def bottom_of(self, layer: SoilLayer, next_layer: SoilLayer | None) -> float:
        """Top of the next deeper layer, or LAST_LAYER_EXTENSION below the top."""
        if next_layer is not None:
            return next_layer.top
        return self.step_down(layer.top, LAST_LAYER_EXTENSION)

    def overlap(self, top_a: float, bottom_a: float, top_b: float, bottom_b: float) -> tuple[float, float] | None:
        """Common interval of two spans, or None if they do not overlap.

        Spans touching at a single level do not overlap.
        """
        upper = self.deeper(top_a, top_b)
        lower = self.shallower(bottom_a, bottom_b)
        if self.is_shallower(upper, lower):
            return upper, lower
        return None

    def overlap_length(self, top_a: float, bottom_a: float, top_b: float, bottom_b: float) -> float:
        common = self.overlap(top_a, bottom_a, top_b, bottom_b)
        if common is None:
            return 0.0
        return abs(common[1] - common[0])

    def intersects(self, top_a: float, bottom_a: float, top_b: float, bottom_b: float) -> bool:
        """Closed-interval test: spans touching at one level intersect."""
        return not (self.is_shallower(bottom_a, top_b) or self.is_shallower(bottom_b, top_a))


_AXES = {
    DepthConvention.BGL: DepthAxis(sign=1.0),
    DepthConvention.RL: DepthAxis(sign=-1.0),
}


def normalize_layers(layers: list[SoilLayer], convention: DepthConvention) -> list[SoilLayer]:
    """Layers with a usable top, ordered from the ground downwards.

    An empty list means there is nothing to calculate with.
    """
    axis = DepthAxis.for_convention(convention)
    valid = [layer for layer in layers if layer.is_valid]
    if len(valid) < len(layers):
        logger.debug("Ignoring %d layer(s) without a top level", len(layers) - len(valid))
    return sorted(valid, key=axis.sort_key)


def compute_extents(layers: list[SoilLayer], pile: Pile, convention: DepthConvention) -> PileExtents:
    """Ground level, pile top and pile base.

    mbgl: ground is 0. mRL: ground is the highest layer top.
    The pile base is always the physically deepest point of the pile.
    """
    convention = DepthConvention(convention)
    if convention is DepthConvention.RL:
        if not layers:
            raise ValueError("Ground level in mRL needs at least one layer")
        ground_level = max(layer.top for layer in layers)
    else:
        ground_level = 0.0

    axis = DepthAxis.for_convention(convention)
    return PileExtents(
        ground_level=ground_level,
        pile_top=ground_level,
        pile_base=axis.step_down(ground_level, pile.depth),
    )


def layer_bottom(layer: SoilLayer, next_layer: SoilLayer | None, convention: DepthConvention) -> float:
    """Bottom of ``layer``: the top of the next deeper layer, or far below."""
    return DepthAxis.for_convention(convention).bottom_of(layer, next_layer)


def iter_layer_spans(layers: list[SoilLayer], axis: DepthAxis) -> Iterator[tuple[SoilLayer, float, float]]:
    """(layer, top, bottom) for layers already ordered by ``normalize_layers``."""
    for i, layer in enumerate(layers):
        next_layer = layers[i + 1] if i + 1 < len(layers) else None
        yield layer, layer.top, axis.bottom_of(layer, next_layer)
