"""Base class for the profile figure."""

from plotly.subplots import make_subplots

from core.helpers import DepthAxis
from core.models import DepthConvention
from .styles import COLORS_LIGHT, COLORS_DARK, FONT_FAMILY, FONT_SIZE, LABELS


def _auto_dtick(span: float, thresholds: list[tuple[float, float]]) -> float:
    """Pick an axis tick step for the given span."""
    for threshold, dtick in thresholds:
        if span < threshold:
            return dtick
    return thresholds[-1][1]


_LEVEL_THRESHOLDS = [(5, 0.5), (15, 1.0), (40, 2.0), (100, 5.0), (float("inf"), 10.0)]
_FORCE_THRESHOLDS = [(50, 10), (200, 25), (500, 50), (1000, 100), (2500, 250), (5000, 500), (float("inf"), 1000)]


class BasePlotter:
    """Layout and axes shared by all figure builders."""

    def __init__(self, convention: DepthConvention = DepthConvention.BGL, theme: str = "dark"):
        self.convention = DepthConvention(convention)
        self.axis = DepthAxis.for_convention(self.convention)
        self.theme = theme
        self.colors = COLORS_DARK if theme == "dark" else COLORS_LIGHT
        self.labels = LABELS[self.convention.value]
        self.fig = make_subplots(rows=1, cols=2, horizontal_spacing=0.12, shared_yaxes=True,
                                 column_widths=[0.45, 0.55])
        self._setup_layout()
        self.view_top = 0.0
        self.view_bottom = self.axis.step_down(0.0, 10.0)
        self.max_force = 0.0

    def _setup_layout(self):
        """Base layout settings."""
        self.fig.update_layout(
            font=dict(family=FONT_FAMILY, size=FONT_SIZE, color=self.colors["text"]),
            template=self.colors["template"],
            height=750,
            width=1200,
            margin=dict(l=80, r=160, t=120, b=120),
            showlegend=True,
            legend=dict(
                orientation="h",
                yanchor="top", y=-0.08,
                xanchor="center", x=0.5,
                bgcolor=self.colors["legend_bg"],
                bordercolor=self.colors["legend_border"],
                borderwidth=1,
                font=dict(size=13, color=self.colors["text"]),
            ),
            plot_bgcolor=self.colors["plot_bg"],
            paper_bgcolor=self.colors["paper_bg"],
        )

        for text, x in [(self.labels["title_left"], 0.2), (self.labels["title_right"], 0.75)]:
            self.fig.add_annotation(
                text=text, x=x, y=1.10, xref="paper", yref="paper",
                showarrow=False, font=dict(size=18, color=self.colors["text"]),
                xanchor="center", yanchor="bottom",
            )

    def set_view(self, shallowest: float, deepest: float):
        """Vertical window of the figure, with a margin on both ends."""
        span = abs(deepest - shallowest)
        margin = max(1.0, 0.1 * span)
        self.view_top = self.axis.step_up(shallowest, margin * 0.5)
        self.view_bottom = self.axis.step_down(deepest, margin)

    def _update_axes(self):
        """Apply the view window and force range to the axes."""
        span = abs(self.view_bottom - self.view_top)
        y_axis_config = dict(
            # Deep end first: depth reads downwards for mbgl and mRL alike.
            range=[self.view_bottom, self.view_top],
            showgrid=True, gridwidth=0.75, gridcolor=self.colors["grid"],
            dtick=_auto_dtick(span, _LEVEL_THRESHOLDS),
            linecolor=self.colors["axis_line"], linewidth=2,
            ticks="outside", tickwidth=2, tickcolor=self.colors["axis_tick"],
            tickfont=dict(family=FONT_FAMILY, size=FONT_SIZE, color=self.colors["text"]),
            mirror=True, showticklabels=True,
        )
        self.fig.update_yaxes(title=dict(text=self.labels["y_axis"], standoff=15), **y_axis_config, row=1, col=1)
        self.fig.update_yaxes(**y_axis_config, row=1, col=2)

        self.fig.update_xaxes(
            range=[0, 1], showticklabels=False, showgrid=False,
            linecolor=self.colors["axis_line"], linewidth=2, mirror=True,
            row=1, col=1,
        )

        max_x = self.max_force * 1.1 if self.max_force > 0 else 100
        self.fig.update_xaxes(
            title=dict(text="<b>Q<sub>s</sub>, kN</b>", standoff=2,
                       font=dict(family=FONT_FAMILY, size=FONT_SIZE, color=self.colors["text"])),
            side="top",
            range=[0, max_x],
            dtick=_auto_dtick(max_x, _FORCE_THRESHOLDS),
            showgrid=True, gridwidth=0.75, gridcolor=self.colors["grid"],
            linecolor=self.colors["axis_line"], linewidth=2,
            ticks="outside", tickwidth=2, tickcolor=self.colors["axis_tick"],
            tickfont=dict(family=FONT_FAMILY, size=FONT_SIZE - 2, color=self.colors["text"]),
            mirror=True,
            row=1, col=2,
        )

    def get_figure(self):
        """Figure with the axes brought up to date."""
        self._update_axes()
        return self.fig
