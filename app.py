"""Streamlit app: pile capacity and slope tools."""

import streamlit as st
from ui.state import init_state
from ui.components.fields import clear_form_keys
from ui.components.pile_form import render_pile_form
from ui.components.soil_editor import render_soil_editor
from ui.components.results_view import render_results
from ui.components.slope_tools import render_slope_tools
from ui.utils import build_input, export_toml, import_toml
from core.calculator import calculate


def render_sidebar():
    """Sidebar with settings and TOML import/export."""

    st.header("Settings")

    plot_theme = st.radio(
        "Plot theme",
        options=["dark", "light"],
        format_func=lambda x: "🌙 Dark" if x == "dark" else "☀️ Light",
        index=0 if st.session_state.get("plot_theme", "dark") == "dark" else 1,
        help="Dark suits the screen, light suits printing",
    )
    st.session_state.plot_theme = plot_theme

    st.divider()

    st.subheader("Import / Export")

    uploaded_file = st.file_uploader(
        "Import TOML",
        type=["toml"],
        help="Load pile and layers from a file",
    )

    if uploaded_file is not None:
        # Import each upload once
        file_id = uploaded_file.file_id
        if st.session_state.get("last_uploaded_file_id") != file_id:
            try:
                new_state = import_toml(uploaded_file.read())
            except Exception as e:
                st.error(f"❌ TOML import failed: {e}")
            else:
                for key, value in new_state.items():
                    st.session_state[key] = value
                # Widgets reseed from the imported values on the next run
                clear_form_keys()
                st.session_state.last_uploaded_file_id = file_id
                st.rerun()

    toml_content = export_toml({
        "project_name": st.session_state.project_name,
        "convention": st.session_state.convention,
        "pile": st.session_state.pile,
        "layers": st.session_state.layers,
    })

    st.download_button(
        "📥 Export TOML",
        data=toml_content,
        file_name="pile_capacity.toml",
        mime="text/plain",
    )


def render_capacity():
    """Pile capacity, recalculated on every input change."""

    col1, col2 = st.columns([2, 3])
    with col1:
        render_pile_form()
    with col2:
        render_soil_editor()

    inputs = build_input({
        "convention": st.session_state.convention,
        "pile": st.session_state.pile,
        "layers": st.session_state.layers,
    })
    render_results(calculate(inputs), inputs)


def main():
    st.set_page_config(
        page_title="Pile capacity",
        page_icon="🏗️",
        layout="wide"
    )

    init_state()

    with st.sidebar:
        render_sidebar()

    st.title("Pile capacity")

    tab_capacity, tab_slope = st.tabs(["Pile capacity", "Slope tools"])
    with tab_capacity:
        render_capacity()
    with tab_slope:
        render_slope_tools()


if __name__ == "__main__":
    main()
