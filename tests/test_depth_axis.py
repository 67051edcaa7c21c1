import pytest

from core.helpers import (
    LAST_LAYER_EXTENSION,
    DepthAxis,
    compute_extents,
    layer_bottom,
    normalize_layers,
)
from core.models import DepthConvention, Pile, SoilLayer
from core.parsing import parse_number, round_half_up


def _layers():
    return [
        SoilLayer(name="b", top=85.0),
        SoilLayer(name="none", top=None),
        SoilLayer(name="a", top=100.0),
        SoilLayer(name="c", top=70.0),
    ]


def test_normalize_orders_from_ground_down():
    assert [l.name for l in normalize_layers(_layers(), DepthConvention.RL)] == ["a", "b", "c"]
    assert [l.name for l in normalize_layers(_layers(), DepthConvention.BGL)] == ["c", "b", "a"]


def test_normalize_empty_when_no_top():
    assert normalize_layers([SoilLayer(name="x", skin_friction=10.0)], DepthConvention.BGL) == []


def test_extents_bgl_and_rl():
    pile = Pile(diameter=0.6, depth=15.0, strength_reduction_factor=0.5)
    rl_layers = normalize_layers(_layers(), DepthConvention.RL)

    bgl = compute_extents([SoilLayer(top=3.0)], pile, DepthConvention.BGL)
    rl = compute_extents(rl_layers, pile, DepthConvention.RL)

    assert (bgl.ground_level, bgl.pile_top, bgl.pile_base) == (0.0, 0.0, 15.0)
    assert (rl.ground_level, rl.pile_top, rl.pile_base) == (100.0, 100.0, 85.0)


def test_layer_bottom_uses_next_top_or_extension():
    upper, lower = SoilLayer(top=2.0), SoilLayer(top=6.0)
    assert layer_bottom(upper, lower, DepthConvention.BGL) == 6.0
    assert layer_bottom(lower, None, DepthConvention.BGL) == 6.0 + LAST_LAYER_EXTENSION
    assert layer_bottom(SoilLayer(top=85.0), None, DepthConvention.RL) == 85.0 - LAST_LAYER_EXTENSION


@pytest.mark.parametrize(
    ("convention", "pile", "layer", "expected"),
    [
        (DepthConvention.BGL, (0.0, 15.0), (10.0, 20.0), 5.0),
        (DepthConvention.BGL, (0.0, 15.0), (15.0, 20.0), 0.0),
        (DepthConvention.BGL, (0.0, 15.0), (20.0, 30.0), 0.0),
        (DepthConvention.RL, (100.0, 85.0), (90.0, 80.0), 5.0),
        (DepthConvention.RL, (100.0, 85.0), (85.0, -915.0), 0.0),
        (DepthConvention.RL, (100.0, 85.0), (120.0, 95.0), 5.0),
    ],
)
def test_overlap_length(convention, pile, layer, expected):
    axis = DepthAxis.for_convention(convention)
    assert axis.overlap_length(*pile, *layer) == pytest.approx(expected)


def test_intersects_includes_touching_spans():
    bgl = DepthAxis.for_convention(DepthConvention.BGL)
    assert bgl.intersects(0.0, 14.5, 14.5, 15.5)
    assert not bgl.intersects(0.0, 14.4, 14.5, 15.5)

    rl = DepthAxis.for_convention(DepthConvention.RL)
    assert rl.intersects(100.0, 85.5, 85.5, 84.5)
    assert not rl.intersects(100.0, 86.0, 85.5, 84.5)


def test_steps_follow_physical_direction():
    bgl = DepthAxis.for_convention(DepthConvention.BGL)
    rl = DepthAxis.for_convention(DepthConvention.RL)
    assert bgl.step_down(15.0, 1.0) == 16.0
    assert rl.step_down(85.0, 1.0) == 84.0
    assert rl.step_up(85.0, 1.0) == 86.0
    assert rl.deeper(85.0, 90.0) == 85.0
    assert bgl.deeper(85.0, 90.0) == 90.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("12.5", 12.5), ("12,5", 12.5), (" 3 ", 3.0), (7, 7.0), ("", None), ("abc", None),
     (None, None), ("inf", None), (float("nan"), None)],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize(("value", "expected"), [(2.5, 3), (0.5, 1), (1.4999, 1), (706.858, 707), (0.0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
