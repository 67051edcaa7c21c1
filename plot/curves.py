"""Pile shaft and cumulative skin friction curve."""

import plotly.graph_objects as go

from core.models import LayerContribution, PileExtents
from .styles import FONT_SIZE, LINE_WIDTH_BOLD

PILE_HALF_WIDTH = 0.06  # in left-panel x units


def add_pile(plotter, extents: PileExtents, diameter: float):
    """Pile drawn as a filled rectangle from head to tip."""
    x0, x1 = 0.5 - PILE_HALF_WIDTH, 0.5 + PILE_HALF_WIDTH
    plotter.fig.add_trace(go.Scatter(
        x=[x0, x1, x1, x0, x0],
        y=[extents.pile_top, extents.pile_top, extents.pile_base, extents.pile_base, extents.pile_top],
        mode="lines", fill="toself", name=f"Pile Ø{diameter:g} m",
        fillcolor=plotter.colors["pile"], line=dict(color=plotter.colors["pile"], width=1),
        hovertemplate=f"Pile tip: {extents.pile_base:.2f} {plotter.labels['unit']}<extra></extra>",
    ), row=1, col=1)


def cumulative_skin_friction(extents: PileExtents, contributions: list[LayerContribution]) -> tuple[list, list]:
    """(levels, Q_s) pairs down the shaft.

    Stretches of pile in layers without a skin friction value stay flat.
    """
    levels = [extents.pile_top]
    forces = [0.0]
    running = 0.0

    for c in contributions:
        if c.overlap_top is None:
            continue
        levels.append(c.overlap_top)
        forces.append(running)
        running += c.capacity
        levels.append(c.overlap_bottom)
        forces.append(running)

    if levels[-1] != extents.pile_base:
        levels.append(extents.pile_base)
        forces.append(running)

    return levels, forces


def plot_cumulative_skin_friction(plotter, extents: PileExtents, contributions: list[LayerContribution]):
    """Q_s(level) on the right panel."""
    levels, forces = cumulative_skin_friction(extents, contributions)
    plotter.max_force = max(plotter.max_force, max(forces))
    unit = plotter.labels["unit"]

    plotter.fig.add_trace(go.Scatter(
        x=forces, y=levels, mode="lines", name="<i>Q<sub>s</sub></i>",
        line=dict(color=plotter.colors["skin_friction"], width=LINE_WIDTH_BOLD),
        hovertemplate=f"%{{y:.2f}} {unit}<br>Q<sub>s</sub> = %{{x:.0f}} kN<extra></extra>",
    ), row=1, col=2)

    plotter.fig.add_annotation(
        x=forces[-1], y=levels[-1], xref="x2", yref="y2",
        text=f"<b>{forces[-1]:.0f}</b>", showarrow=False, yshift=-12,
        font=dict(color=plotter.colors["skin_friction"], size=FONT_SIZE - 3),
        bgcolor=plotter.colors["annotation_bg"], xanchor="center",
    )
