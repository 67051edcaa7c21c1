import pytest

import main

INPUT = """
[project]
name = "Test pile"

[pile]
convention = "mbgl"
diameter = 0.6
depth = 15.0
strength_reduction_factor = 0.5

[[layers]]
name = "clay"
top = 0.0
skin_friction = 50.0
end_bearing = 2000.0
"""


@pytest.mark.parametrize(
    ("filename", "figure"),
    [
        ("pile.toml", "pile.html"),
        ("pile.cfg", "pile.html"),
        ("pile", "pile.html"),
        ("pile.html", "pile.profile.html"),
    ],
)
def test_figure_never_overwrites_input(tmp_path, filename, figure):
    src = tmp_path / filename
    src.write_text(INPUT)

    result = main.main(str(src))

    assert result.total == 990
    assert src.read_text() == INPUT
    assert "<html" in (tmp_path / figure).read_text().lower()


def test_load_input_reads_output_section(tmp_path):
    src = tmp_path / "pile.toml"
    src.write_text(INPUT + '\n[output]\ntheme = "dark"\n')

    inputs, params = main.load_input(str(src))

    assert inputs.convention.value == "mbgl"
    assert [layer.name for layer in inputs.layers] == ["clay"]
    assert params == {"name": "Test pile", "theme": "dark"}
