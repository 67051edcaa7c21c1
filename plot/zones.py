"""End bearing zone around the pile tip."""

from core.models import EndBearingZone
from .styles import FONT_SIZE


def add_end_bearing_zone(plotter, zone: EndBearingZone, governing: float | None):
    """Shades the zone on the profile panel and labels the governing q_b."""
    plotter.fig.add_hrect(
        y0=zone.top, y1=zone.bottom,
        fillcolor=plotter.colors["end_bearing_zone"],
        line=dict(color=plotter.colors["end_bearing_edge"], width=1, dash="dot"),
        row=1, col=1,
    )

    text = f"q<sub>b</sub> = {governing:g} kPa" if governing is not None else "no q<sub>b</sub> in zone"
    plotter.fig.add_annotation(
        x=0.98, y=zone.bottom, xref="x domain", yref="y",
        text=f"<b>{text}</b>", showarrow=False, yshift=-12, xanchor="right",
        bgcolor=plotter.colors["annotation_bg"],
        font=dict(color=plotter.colors["end_bearing_edge"], size=FONT_SIZE - 3),
    )
