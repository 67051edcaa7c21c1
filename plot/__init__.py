"""Profile figure for the pile capacity calculation."""

from core.helpers import normalize_layers
from core.models import CapacityResult, EndBearingZone, LayerContribution, PileExtents, SoilLayer

from .base import BasePlotter
from .curves import add_pile, plot_cumulative_skin_friction
from .annotations import add_capacity_summary, add_ground_line, add_layers
from .zones import add_end_bearing_zone


class ProfilePlotter(BasePlotter):
    """Soil column with the pile on the left, cumulative Q_s on the right."""

    def add_layers(self, layers: list[SoilLayer]):
        add_layers(self, layers)

    def add_ground_line(self, ground_level: float):
        add_ground_line(self, ground_level)

    def add_pile(self, extents: PileExtents, diameter: float):
        add_pile(self, extents, diameter)

    def add_end_bearing_zone(self, zone: EndBearingZone, governing: float | None):
        add_end_bearing_zone(self, zone, governing)

    def plot_cumulative_skin_friction(self, extents: PileExtents, contributions: list[LayerContribution]):
        plot_cumulative_skin_friction(self, extents, contributions)

    def add_capacity_summary(self, result: CapacityResult):
        add_capacity_summary(self, result)


def build_profile_figure(
    result: CapacityResult,
    layers: list[SoilLayer],
    diameter: float,
    convention,
    theme: str = "dark",
):
    """Full figure for a finished calculation, or None if there is nothing to draw."""
    if result.extents is None:
        return None

    plotter = ProfilePlotter(convention=convention, theme=theme)
    ordered = normalize_layers(layers, plotter.convention)
    extents = result.extents

    shallowest, deepest = extents.ground_level, extents.pile_base
    if result.zone is not None:
        deepest = plotter.axis.deeper(deepest, result.zone.bottom)
    if ordered:
        shallowest = plotter.axis.shallower(shallowest, ordered[0].top)
        deepest = plotter.axis.deeper(deepest, ordered[-1].top)
    plotter.set_view(shallowest, deepest)

    plotter.add_layers(ordered)
    plotter.add_ground_line(extents.ground_level)
    plotter.add_pile(extents, diameter)
    if result.zone is not None:
        plotter.add_end_bearing_zone(result.zone, result.governing_end_bearing)
    plotter.plot_cumulative_skin_friction(extents, result.contributions)
    plotter.add_capacity_summary(result)

    return plotter.get_figure()


__all__ = ["ProfilePlotter", "build_profile_figure"]
