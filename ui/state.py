"""Streamlit session state management."""

import streamlit as st

from ui.utils import MAX_LAYERS, blank_layer


def init_state():
    """Fill session_state with defaults."""

    defaults = {
        # Depth convention: "mbgl" | "mrl"
        "convention": "mbgl",

        # Plot theme
        "plot_theme": "dark",

        # Pile (raw text, parsed by the models)
        "pile": {
            "diameter": "",
            "depth": "",
            "strength_reduction_factor": "0.5",
            "zone_multiplier": "1",
        },

        # Soil layers (fixed number of rows)
        "layers": [blank_layer() for _ in range(MAX_LAYERS)],

        # Project name, carried through TOML import/export
        "project_name": "",
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
