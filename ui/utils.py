"""Helpers between the Streamlit state, the models and TOML files."""

import io
import logging
import tomllib

import tomli_w

from core.models import CapacityInput, DepthConvention, Pile, SoilLayer
from core.parsing import parse_number

logger = logging.getLogger(__name__)

# Number of layer rows on the form.
MAX_LAYERS = 4

_PILE_KEYS = ("diameter", "depth", "strength_reduction_factor", "zone_multiplier")
_LAYER_KEYS = ("name", "top", "skin_friction", "end_bearing")


def blank_layer() -> dict:
    """Empty layer row; every field holds the raw form text."""
    return {key: "" for key in _LAYER_KEYS}


def build_input(state) -> CapacityInput:
    """Convert the form state into a CapacityInput."""
    return CapacityInput(
        pile=Pile(**state["pile"]),
        convention=state["convention"],
        layers=[SoilLayer(**layer) for layer in state["layers"]],
    )


def _as_text(value) -> str:
    """Form text for a number read from TOML."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:.10g}"
    return str(value)


def _numbers_only(values: dict, keys) -> dict:
    """Parsed numbers for ``keys``; blanks are left out (TOML has no null)."""
    result = {}
    for key in keys:
        number = parse_number(values.get(key))
        if number is not None:
            result[key] = number
    return result


def export_toml(state) -> str:
    """Export the form state as a TOML string."""
    layers = []
    for layer in state["layers"]:
        row = _numbers_only(layer, ("top", "skin_friction", "end_bearing"))
        name = (layer.get("name") or "").strip()
        if name:
            row = {"name": name, **row}
        if row:
            layers.append(row)

    pile = _numbers_only(state["pile"], _PILE_KEYS)
    pile["convention"] = state["convention"]

    doc = {
        "project": {"name": state.get("project_name") or "Pile capacity"},
        "pile": pile,
        "layers": layers,
    }
    return tomli_w.dumps(doc)


def import_toml(content: bytes) -> dict:
    """Import TOML into the form state layout."""
    data = tomllib.load(io.BytesIO(content))

    pile_data = data.get("pile", {})
    pile = {key: _as_text(pile_data.get(key)) for key in _PILE_KEYS}

    rows = data.get("layers", [])
    if len(rows) > MAX_LAYERS:
        logger.warning("TOML has %d layers, only the first %d are used", len(rows), MAX_LAYERS)
        rows = rows[:MAX_LAYERS]

    layers = [{key: _as_text(row.get(key)) for key in _LAYER_KEYS} for row in rows]
    while len(layers) < MAX_LAYERS:
        layers.append(blank_layer())

    return {
        "project_name": data.get("project", {}).get("name", ""),
        "convention": DepthConvention(pile_data.get("convention", "mbgl")).value,
        "pile": pile,
        "layers": layers,
    }
