"""Styles and constants for the profile figure."""

# Fonts
FONT_FAMILY = "Inter, -apple-system, system-ui, Arial, sans-serif"
FONT_SIZE = 15

# Data colours (same for both themes)
COLORS_DATA = {
    "pile": "#7f7f7f",
    "skin_friction": "#2ca02c",
    "end_bearing_zone": "rgba(214, 39, 40, 0.20)",
    "end_bearing_edge": "#d62728",
    "ground": "#8c564b",
}

# Light theme
COLORS_LIGHT = {
    **COLORS_DATA,
    "template": "plotly_white",
    "plot_bg": "white",
    "paper_bg": "white",
    "text": "black",
    "grid": "rgba(0,0,0,0.1)",
    "axis_line": "black",
    "axis_tick": "black",
    "legend_bg": "rgba(255,255,255,0.9)",
    "legend_border": "black",
    "annotation_bg": "rgba(255,255,255,0.8)",
    "layer_line": "black",
    "layer_fill_a": "rgba(140, 86, 75, 0.08)",
    "layer_fill_b": "rgba(140, 86, 75, 0.18)",
}

# Dark theme (Streamlit dark mode)
COLORS_DARK = {
    **COLORS_DATA,
    "template": "plotly_dark",
    "plot_bg": "rgba(14, 17, 23, 0)",
    "paper_bg": "rgba(14, 17, 23, 0)",
    "text": "#fafafa",
    "grid": "rgba(255,255,255,0.1)",
    "axis_line": "#fafafa",
    "axis_tick": "#fafafa",
    "legend_bg": "rgba(38, 39, 48, 0.9)",
    "legend_border": "#fafafa",
    "annotation_bg": "rgba(38, 39, 48, 0.8)",
    "layer_line": "#aaa",
    "layer_fill_a": "rgba(255,255,255,0.04)",
    "layer_fill_b": "rgba(255,255,255,0.10)",
}

# Line widths
LINE_WIDTH_BOLD = 3
LINE_WIDTH_THIN = 2

# Labels per depth convention
LABELS = {
    "mbgl": {
        "title_left": "<b>Soil profile</b>",
        "title_right": "<b>Cumulative skin friction</b>",
        "y_axis": "<b>Depth, mbgl</b>",
        "unit": "mbgl",
    },
    "mrl": {
        "title_left": "<b>Soil profile</b>",
        "title_right": "<b>Cumulative skin friction</b>",
        "y_axis": "<b>Level, mRL</b>",
        "unit": "mRL",
    },
}
