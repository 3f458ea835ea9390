from __future__ import annotations

from brick_chunks.colliders import COLLIDERS_BY_SHAPE, DEFAULT_COLLIDERS, Shape, collider_count, is_known_asset

from conftest import make_brick


def test_every_shape_has_a_collider_weight():
    assert set(COLLIDERS_BY_SHAPE) == set(Shape)
    assert all(weight >= 1 for weight in COLLIDERS_BY_SHAPE.values())


def test_plain_cuboids_contribute_one_collider():
    for asset in ("PB_DefaultBrick", "PB_DefaultMicroBrick", "PB_DefaultTile"):
        assert collider_count(make_brick(asset=asset)) == 1


def test_wedge_contributes_two_colliders():
    assert collider_count(make_brick(asset="PB_DefaultWedge")) == 2


def test_decomposed_shapes_use_table_value():
    brick = make_brick(asset=Shape.RAMP_INNER_CORNER.value)
    assert collider_count(brick) == COLLIDERS_BY_SHAPE[Shape.RAMP_INNER_CORNER]


def test_unknown_asset_falls_back_to_default():
    assert not is_known_asset("PB_SomethingNew")
    assert collider_count(make_brick(asset="PB_SomethingNew")) == DEFAULT_COLLIDERS == 1


def test_non_colliding_brick_contributes_nothing():
    assert collider_count(make_brick(asset="PB_DefaultRamp", collision=False)) == 0


def test_shape_from_asset_round_trips_names():
    assert Shape.from_asset("PB_DefaultWedge") is Shape.WEDGE
    assert Shape.from_asset("nope") is None
