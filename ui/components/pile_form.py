"""Pile parameters form."""

import streamlit as st

from core.models import DepthConvention
from .fields import text_field

_CONVENTION_LABELS = {
    DepthConvention.BGL.value: "m below ground level (mbgl)",
    DepthConvention.RL.value: "Reduced level (mRL)",
}


def render_pile_form():
    """Pile geometry, factors and depth convention."""

    st.subheader("Pile")

    pile = st.session_state.pile

    st.session_state.convention = st.selectbox(
        "Layer levels given in",
        options=list(_CONVENTION_LABELS),
        format_func=lambda x: _CONVENTION_LABELS[x],
        index=0 if st.session_state.convention == DepthConvention.BGL.value else 1,
        help="mbgl: 0 is ground, larger is deeper. mRL: ground is the highest layer top.",
    )

    col1, col2 = st.columns(2)
    with col1:
        pile["diameter"] = text_field("Diameter, m", "pile_diameter", pile.get("diameter"))
        pile["strength_reduction_factor"] = text_field(
            "Strength reduction factor φ",
            "pile_strength_reduction_factor",
            pile.get("strength_reduction_factor"),
            help="Applied to skin friction and end bearing alike",
        )
    with col2:
        pile["depth"] = text_field("Depth, m", "pile_depth", pile.get("depth"), help="Embedded length below ground")
        pile["zone_multiplier"] = text_field(
            "End bearing zone above tip, ×D",
            "pile_zone_multiplier",
            pile.get("zone_multiplier"),
            help="The zone also reaches 1×D below the tip. Blank = 1",
        )

    st.session_state.pile = pile
