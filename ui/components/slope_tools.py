"""Slope tools: angle/ratio converter and triangle solver."""

import streamlit as st

from core.slope import SlopeInputError, convert, solve_triangle


def _render_converter():
    st.markdown("**Angle ↔ ratio**")

    col1, col2 = st.columns(2)
    with col1:
        angle = st.text_input("Angle, °", key="slope_angle", placeholder="e.g. 26.6")
    with col2:
        ratio = st.text_input("Ratio", key="slope_ratio", placeholder="e.g. 1V:2H")

    if st.button("Convert", key="slope_convert"):
        try:
            slope = convert(angle, ratio)
        except SlopeInputError as e:
            st.error(f"Error: {e}")
            return

        if angle.strip():
            st.success(f"Ratio: {slope.label}")
        else:
            st.success(f"Angle: {slope.angle_label}  \nNormalized Ratio: {slope.label}")


def _render_triangle():
    st.markdown("**Triangle** (leave one field empty)")

    col1, col2, col3 = st.columns(3)
    with col1:
        vertical = st.text_input("Vertical", key="triangle_vertical")
    with col2:
        horizontal = st.text_input("Horizontal", key="triangle_horizontal")
    with col3:
        angle = st.text_input("Angle, °", key="triangle_angle")

    if st.button("Calculate", key="triangle_calculate"):
        try:
            solution = solve_triangle(vertical, horizontal, angle)
        except SlopeInputError as e:
            st.error(f"Error: {e}")
            return
        st.success(solution.label)


def render_slope_tools():
    """Both slope calculators."""
    st.subheader("Slope tools")
    _render_converter()
    st.divider()
    _render_triangle()
