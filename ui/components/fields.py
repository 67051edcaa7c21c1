"""Text fields bound to session_state, shared by the forms."""

import streamlit as st

from core.parsing import parse_number

# Prefixes of widget keys owned by the forms; cleared on TOML import.
FORM_KEY_PREFIXES = ("pile_", "layer_")


def text_field(label: str, key: str, value: str, help: str = None, placeholder: str = None) -> str:
    """Text input that keeps its own key in session_state.

    The stored form value seeds the widget only the first time it is drawn.
    A non-empty value that is not a number gets a warning caption.
    """
    if key not in st.session_state:
        st.session_state[key] = value or ""

    text = st.text_input(label, key=key, help=help, placeholder=placeholder)

    if text.strip() and parse_number(text) is None:
        st.caption("⚠️ not a number")

    return text


def clear_form_keys():
    """Drop all form widget keys so the next run reseeds them from state."""
    keys_to_delete = [
        key for key in st.session_state.keys()
        if any(key.startswith(prefix) for prefix in FORM_KEY_PREFIXES)
    ]
    for key in keys_to_delete:
        del st.session_state[key]
