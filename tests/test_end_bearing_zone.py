import pytest

from core.capacity import end_bearing_capacity, end_bearing_zone, governing_end_bearing
from core.helpers import DepthAxis, compute_extents, normalize_layers
from core.models import DepthConvention, Pile, SoilLayer


def _pile(multiplier=1.0, diameter=0.5):
    return Pile(diameter=diameter, depth=15.0, strength_reduction_factor=0.5, zone_multiplier=multiplier)


def _layers(boundary=14.8):
    return [
        SoilLayer(name="soft", top=0.0, end_bearing=500.0),
        SoilLayer(name="rock", top=boundary, end_bearing=3000.0),
    ]


def _governing(pile, layers, convention=DepthConvention.BGL):
    ordered = normalize_layers(layers, convention)
    axis = DepthAxis.for_convention(convention)
    return governing_end_bearing(pile, ordered, axis, compute_extents(ordered, pile, convention))


def test_zone_limits_in_both_conventions():
    pile = _pile(multiplier=3.0)
    bgl = end_bearing_zone(pile, 15.0, DepthAxis.for_convention(DepthConvention.BGL))
    rl = end_bearing_zone(pile, 85.0, DepthAxis.for_convention(DepthConvention.RL))
    assert (bgl.top, bgl.bottom) == pytest.approx((13.5, 15.5))
    assert (rl.top, rl.bottom) == pytest.approx((86.5, 84.5))


def test_weakest_layer_in_zone_governs():
    q_b, _ = _governing(_pile(), _layers())
    assert q_b == 500.0
    # 500 · π·0.0625 · 0.5 = 49.09
    assert end_bearing_capacity(_pile(), _layers()) == 49


def test_smaller_zone_excludes_upper_layer():
    q_b, zone = _governing(_pile(multiplier=0.0), _layers())
    assert zone.top == 15.0
    assert q_b == 3000.0
    assert end_bearing_capacity(_pile(multiplier=0.0), _layers()) == 295


def test_layer_touching_zone_edge_counts():
    # Zone top is 15 - 0.5 = 14.5, exactly the bottom of the soft layer
    q_b, _ = _governing(_pile(), _layers(boundary=14.5))
    assert q_b == 500.0

    q_b, _ = _governing(_pile(), _layers(boundary=14.0))
    assert q_b == 3000.0


def test_layers_without_value_do_not_qualify():
    layers = [SoilLayer(top=0.0, skin_friction=50.0), SoilLayer(top=14.8, skin_friction=80.0)]
    q_b, zone = _governing(_pile(), layers)
    assert q_b is None
    assert zone is not None
    assert end_bearing_capacity(_pile(), layers) is None


def test_incomplete_pile_gives_no_result():
    pile = Pile(diameter=0.5, depth=15.0)
    assert end_bearing_capacity(pile, _layers()) is None
    assert end_bearing_capacity(_pile(), []) is None


def test_rl_zone_selection_matches_bgl():
    rl_layers = [
        SoilLayer(name="soft", top=100.0, end_bearing=500.0),
        SoilLayer(name="rock", top=100.0 - 14.8, end_bearing=3000.0),
    ]
    for multiplier in (0.0, 1.0):
        assert end_bearing_capacity(_pile(multiplier), rl_layers, DepthConvention.RL) == end_bearing_capacity(
            _pile(multiplier), _layers(), DepthConvention.BGL
        )
