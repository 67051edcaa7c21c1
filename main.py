import logging
import sys
import tomllib
from pathlib import Path

from core.calculator import calculate
from core.models import CapacityInput, Pile, SoilLayer
from plot import build_profile_figure

logger = logging.getLogger(__name__)


def load_input(path: str) -> tuple[CapacityInput, dict]:
    """Read pile, convention and layers from TOML."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    pile_data = data["pile"]
    pile = Pile(
        diameter=pile_data.get("diameter"),
        depth=pile_data.get("depth"),
        strength_reduction_factor=pile_data.get("strength_reduction_factor"),
        zone_multiplier=pile_data.get("zone_multiplier"),
    )

    layers = [
        SoilLayer(
            name=L.get("name", ""),
            top=L.get("top"),
            skin_friction=L.get("skin_friction"),
            end_bearing=L.get("end_bearing"),
        )
        for L in data.get("layers", [])
    ]

    inputs = CapacityInput(
        pile=pile,
        convention=pile_data.get("convention", "mbgl"),
        layers=layers,
    )
    params = {
        "name": data.get("project", {}).get("name", ""),
        "theme": data.get("output", {}).get("theme", "light"),
    }
    return inputs, params


def main(input_file: str = "input.toml"):
    """Load → calculate → print → figure."""
    inputs, params = load_input(input_file)
    logger.debug("Loaded %d layer(s) from %s", len(inputs.layers), input_file)

    result = calculate(inputs)

    print(f"Project: {params['name']}")
    print(f"Levels: {inputs.convention.value}")

    if result.errors:
        for message in result.errors:
            print(message)
        return result

    print(f"Allowable skin friction: {result.skin_friction} kN")
    print(f"Allowable end bearing:   {result.end_bearing} kN")
    print(f"Total capacity:          {result.total} kN")

    fig = build_profile_figure(
        result, inputs.layers, diameter=inputs.pile.diameter, convention=inputs.convention, theme=params["theme"],
    )
    output_name = Path(input_file).with_suffix(".html")
    if output_name == Path(input_file):
        output_name = output_name.with_name(f"{output_name.stem}.profile.html")
    fig.write_html(output_name)
    print(f"Figure: {output_name}")

    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    input_file = sys.argv[1] if len(sys.argv) > 1 else "input.toml"
    main(input_file)
