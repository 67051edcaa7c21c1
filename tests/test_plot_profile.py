import pytest

from core.calculator import calculate
from core.models import CapacityInput, DepthConvention, Pile, SoilLayer
from plot import build_profile_figure
from plot.curves import cumulative_skin_friction


def _inputs(convention=DepthConvention.BGL):
    tops = [0.0, 3.0, 10.0] if convention is DepthConvention.BGL else [100.0, 97.0, 90.0]
    return CapacityInput(
        pile=Pile(diameter=0.6, depth=15.0, strength_reduction_factor=0.5),
        convention=convention,
        layers=[
            SoilLayer(name="fill", top=tops[0], skin_friction=20.0),
            SoilLayer(name="gap", top=tops[1]),
            SoilLayer(name="rock", top=tops[2], skin_friction=100.0, end_bearing=2500.0),
        ],
    )


def test_cumulative_curve_is_flat_through_layer_without_value():
    result = calculate(_inputs())
    levels, forces = cumulative_skin_friction(result.extents, result.contributions)

    assert levels == [0.0, 0.0, 3.0, 10.0, 15.0]
    assert forces[1] == forces[0] == 0.0
    assert forces[3] == forces[2]
    assert forces[-1] == pytest.approx(sum(c.capacity for c in result.contributions))


@pytest.mark.parametrize("convention", [DepthConvention.BGL, DepthConvention.RL])
def test_profile_figure_builds_for_both_conventions(convention):
    inputs = _inputs(convention)
    result = calculate(inputs)
    fig = build_profile_figure(result, inputs.layers, diameter=0.6, convention=convention, theme="light")

    names = [trace.name for trace in fig.data]
    assert "Pile Ø0.6 m" in names
    assert "<i>Q<sub>s</sub></i>" in names

    y_range = fig.layout.yaxis.range
    extents = result.extents
    # Deep end of the view comes first, beyond the pile tip
    assert abs(y_range[0] - extents.ground_level) > abs(extents.pile_base - extents.ground_level)


def test_no_figure_without_extents():
    result = calculate(CapacityInput())
    assert build_profile_figure(result, [], diameter=None, convention="mbgl") is None
