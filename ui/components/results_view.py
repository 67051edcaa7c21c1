"""Capacity results display."""

import pandas as pd
import streamlit as st

from core.models import CapacityInput, CapacityResult
from plot import build_profile_figure


def render_results(result: CapacityResult, inputs: CapacityInput):
    """Messages, or capacities with breakdown and profile figure."""

    st.divider()
    st.subheader("Capacity")

    if result.errors:
        st.error("  \n".join(result.errors))
        if result.extents is None:
            return
    else:
        col1, col2, col3 = st.columns(3)
        col1.metric("Allowable skin friction", f"{result.skin_friction} kN")
        col2.metric("Allowable end bearing", f"{result.end_bearing} kN")
        col3.metric("Total capacity", f"{result.total} kN")

    unit = inputs.convention.value
    if result.zone is not None:
        governing = (
            f"governing q_b = {result.governing_end_bearing:g} kPa"
            if result.governing_end_bearing is not None
            else "no end bearing value in the zone"
        )
        st.caption(
            f"Pile {result.extents.pile_top:g} → {result.extents.pile_base:g} {unit}; "
            f"end bearing zone {result.zone.top:g} → {result.zone.bottom:g} {unit}, {governing}"
        )

    with st.expander("Skin friction by layer"):
        if result.contributions:
            df = pd.DataFrame([
                {
                    "Layer": c.name,
                    f"Top, {unit}": c.top,
                    f"Bottom, {unit}": c.bottom,
                    "f_s, kPa": c.skin_friction,
                    "Length in layer, m": round(c.overlap, 3),
                    "Q_s, kN": round(c.capacity, 1),
                }
                for c in result.contributions
            ])
            st.dataframe(df, width="stretch", hide_index=True)
        else:
            st.caption("No layer has a skin friction value.")

    fig = build_profile_figure(
        result,
        inputs.layers,
        diameter=inputs.pile.diameter,
        convention=inputs.convention,
        theme=st.session_state.get("plot_theme", "dark"),
    )
    if fig is not None:
        st.plotly_chart(
            fig,
            width="stretch",
            config={
                "displaylogo": False,
                "toImageButtonOptions": {"format": "png", "scale": 2, "filename": "pile_profile"},
            },
        )
