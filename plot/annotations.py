"""Annotations: soil layers, ground line, capacity summary."""

from core.helpers import iter_layer_spans
from core.models import CapacityResult, SoilLayer
from .styles import FONT_FAMILY, FONT_SIZE


def add_layers(plotter, layers: list[SoilLayer]):
    """Layer bands with boundaries and labels.

    ``layers`` must already be ordered from the ground down.
    """
    unit = plotter.labels["unit"]

    for idx, (layer, top, bottom) in enumerate(iter_layer_spans(layers, plotter.axis)):
        if not plotter.axis.is_shallower(top, plotter.view_bottom):
            break

        # The deepest layer is drawn only to the edge of the view.
        shown_bottom = plotter.axis.shallower(bottom, plotter.view_bottom)
        fill_color = plotter.colors["layer_fill_a"] if idx % 2 == 0 else plotter.colors["layer_fill_b"]
        for col in [1, 2]:
            plotter.fig.add_hrect(
                y0=top, y1=shown_bottom,
                fillcolor=fill_color, opacity=1.0, line_width=0, layer="below",
                row=1, col=col,
            )
            plotter.fig.add_hline(
                y=top, line_width=1, line_dash="solid",
                line_color=plotter.colors["layer_line"], opacity=0.5, row=1, col=col,
            )

        q_s = f"{layer.skin_friction:g}" if layer.skin_friction is not None else "–"
        q_b = f"{layer.end_bearing:g}" if layer.end_bearing is not None else "–"
        plotter.fig.add_annotation(
            x=1.01, y=(top + shown_bottom) / 2, xref="paper", yref="y2",
            text=f"<b>{layer.label}</b><br>top {top:g} {unit}<br>f<sub>s</sub> {q_s} · q<sub>b</sub> {q_b} kPa",
            showarrow=False, xanchor="left", yanchor="middle",
            font=dict(size=int(FONT_SIZE * 0.8), color=plotter.colors["text"], family=FONT_FAMILY),
            bgcolor=plotter.colors["annotation_bg"],
        )


def add_ground_line(plotter, ground_level: float):
    """Thick line at ground level on both panels."""
    for col in [1, 2]:
        plotter.fig.add_hline(
            y=ground_level, line_width=3, line_color=plotter.colors["ground"], row=1, col=col,
        )
    plotter.fig.add_annotation(
        x=0.02, y=ground_level, xref="x domain", yref="y",
        text="<b>Ground</b>", showarrow=False, yshift=12, xanchor="left",
        font=dict(color=plotter.colors["ground"], size=FONT_SIZE - 3),
    )


def add_capacity_summary(plotter, result: CapacityResult):
    """Boxed Qs / Qb / Q summary in the top right corner."""
    if not result.is_valid:
        return

    text = (
        f"Q<sub>s</sub> = {result.skin_friction} kN<br>"
        f"Q<sub>b</sub> = {result.end_bearing} kN<br>"
        f"<b>Q = {result.total} kN</b>"
    )
    plotter.fig.add_annotation(
        x=0.98, y=0.02, xref="x2 domain", yref="y2 domain",
        text=text, showarrow=False, align="right", xanchor="right", yanchor="bottom",
        bgcolor=plotter.colors["annotation_bg"], bordercolor=plotter.colors["legend_border"], borderwidth=1,
        font=dict(color=plotter.colors["text"], size=FONT_SIZE - 1),
    )
