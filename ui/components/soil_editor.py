"""Soil layer editor: a fixed number of rows of text fields."""

import streamlit as st

from core.parsing import parse_number
from ui.utils import MAX_LAYERS, blank_layer
from .fields import text_field


def _render_layer(layer: dict, idx: int, top_unit: str) -> dict:
    """One layer row. Returns the updated row."""
    c1, c2, c3, c4 = st.columns([2, 1, 1, 1])

    with c1:
        name = text_field(
            f"Layer {idx + 1}", f"layer_name_{idx}", layer.get("name"), placeholder="Name (optional)",
        )
    with c2:
        top = text_field(f"Top, {top_unit}", f"layer_top_{idx}", layer.get("top"))
    with c3:
        skin_friction = text_field(
            "f_s, kPa", f"layer_skin_friction_{idx}", layer.get("skin_friction"),
            help="Allowable skin friction (blank = none)",
        )
    with c4:
        end_bearing = text_field(
            "q_b, kPa", f"layer_end_bearing_{idx}", layer.get("end_bearing"),
            help="Allowable end bearing (blank = none)",
        )

    return {"name": name, "top": top, "skin_friction": skin_friction, "end_bearing": end_bearing}


def render_soil_editor():
    """Soil layer editor."""
    st.subheader("Soil layers")

    layers = list(st.session_state.layers)
    while len(layers) < MAX_LAYERS:
        layers.append(blank_layer())

    top_unit = st.session_state.convention
    new_layers = [_render_layer(layer, idx, top_unit) for idx, layer in enumerate(layers[:MAX_LAYERS])]
    st.session_state.layers = new_layers

    used = sum(parse_number(layer["top"]) is not None for layer in new_layers)
    st.caption(f"Layers with a top level: {used} of {MAX_LAYERS}. Each layer runs down to the next one.")
