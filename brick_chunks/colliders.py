"""Collider weights per brick shape.

The physics engine builds one box collider for cuboid bricks and a
convex decomposition for everything else. COLLIDERS_BY_SHAPE is the
single source of truth for that arithmetic and has to follow the
decomposition the game actually performs; there is no runtime inference.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from .bricks import Brick

DEFAULT_COLLIDERS = 1


class Shape(Enum):
    # Cuboids
    BRICK = "PB_DefaultBrick"
    MICRO_BRICK = "PB_DefaultMicroBrick"
    TILE = "PB_DefaultTile"
    SMOOTH_TILE = "PB_DefaultSmoothTile"
    STUDDED = "PB_DefaultStudded"
    POLE = "PB_DefaultPole"

    # Wedges and ramps
    WEDGE = "PB_DefaultWedge"
    SIDE_WEDGE = "PB_DefaultSideWedge"
    SIDE_WEDGE_TILE = "PB_DefaultSideWedgeTile"
    MICRO_WEDGE = "PB_DefaultMicroWedge"
    MICRO_WEDGE_CORNER = "PB_DefaultMicroWedgeCorner"
    MICRO_WEDGE_INNER_CORNER = "PB_DefaultMicroWedgeInnerCorner"
    MICRO_WEDGE_OUTER_CORNER = "PB_DefaultMicroWedgeOuterCorner"
    MICRO_WEDGE_TRIANGLE_CORNER = "PB_DefaultMicroWedgeTriangleCorner"
    MICRO_WEDGE_HALF_INNER_CORNER = "PB_DefaultMicroWedgeHalfInnerCorner"
    MICRO_WEDGE_HALF_OUTER_CORNER = "PB_DefaultMicroWedgeHalfOuterCorner"
    RAMP = "PB_DefaultRamp"
    RAMP_CORNER = "PB_DefaultRampCorner"
    RAMP_INNER_CORNER = "PB_DefaultRampInnerCorner"
    RAMP_CREST = "PB_DefaultRampCrest"
    RAMP_CREST_CORNER = "PB_DefaultRampCrestCorner"
    RAMP_CREST_END = "PB_DefaultRampCrestEnd"
    RAMP_INVERTED = "PB_DefaultRampInverted"
    RAMP_CORNER_INVERTED = "PB_DefaultRampCornerInverted"
    RAMP_INNER_CORNER_INVERTED = "PB_DefaultRampInnerCornerInverted"

    # Rounded and conical
    ROUND_1X1 = "B_1x1_Round"
    ROUND_1X1_PLATE = "B_1x1F_Round"
    ROUND_2X2 = "B_2x2_Round"
    ROUND_2X2_PLATE = "B_2x2F_Round"
    ROUND_4X4 = "B_4x4_Round"
    CONE_1X1 = "B_1x1_Cone"
    CONE_2X2 = "B_2x2_Cone"
    HEMISPHERE_1X1 = "B_1x1_Hemisphere"
    CORNER_ROUND_2X2 = "B_2x2_Corner"
    OCTO_2X2 = "B_2x2_Octo"
    OCTO_CONVERTER_2X2 = "B_2x2_Octo_Converter"
    LATTICE_8X8_PLATE = "B_8x8_Lattice_Plate"

    @classmethod
    def from_asset(cls, asset: str) -> Optional["Shape"]:
        return _SHAPES_BY_ASSET.get(asset)


COLLIDERS_BY_SHAPE: Dict[Shape, int] = {
    Shape.BRICK: 1,
    Shape.MICRO_BRICK: 1,
    Shape.TILE: 1,
    Shape.SMOOTH_TILE: 1,
    Shape.STUDDED: 1,
    Shape.POLE: 1,
    Shape.WEDGE: 2,
    Shape.SIDE_WEDGE: 2,
    Shape.SIDE_WEDGE_TILE: 2,
    Shape.MICRO_WEDGE: 2,
    Shape.MICRO_WEDGE_CORNER: 3,
    Shape.MICRO_WEDGE_INNER_CORNER: 3,
    Shape.MICRO_WEDGE_OUTER_CORNER: 3,
    Shape.MICRO_WEDGE_TRIANGLE_CORNER: 3,
    Shape.MICRO_WEDGE_HALF_INNER_CORNER: 3,
    Shape.MICRO_WEDGE_HALF_OUTER_CORNER: 3,
    Shape.RAMP: 3,
    Shape.RAMP_CORNER: 4,
    Shape.RAMP_INNER_CORNER: 5,
    Shape.RAMP_CREST: 4,
    Shape.RAMP_CREST_CORNER: 5,
    Shape.RAMP_CREST_END: 4,
    Shape.RAMP_INVERTED: 3,
    Shape.RAMP_CORNER_INVERTED: 4,
    Shape.RAMP_INNER_CORNER_INVERTED: 5,
    Shape.ROUND_1X1: 2,
    Shape.ROUND_1X1_PLATE: 2,
    Shape.ROUND_2X2: 3,
    Shape.ROUND_2X2_PLATE: 3,
    Shape.ROUND_4X4: 5,
    Shape.CONE_1X1: 2,
    Shape.CONE_2X2: 3,
    Shape.HEMISPHERE_1X1: 4,
    Shape.CORNER_ROUND_2X2: 3,
    Shape.OCTO_2X2: 2,
    Shape.OCTO_CONVERTER_2X2: 3,
    Shape.LATTICE_8X8_PLATE: 16,
}

_SHAPES_BY_ASSET: Dict[str, Shape] = {shape.value: shape for shape in Shape}

_missing = [shape.name for shape in Shape if shape not in COLLIDERS_BY_SHAPE]
if _missing:
    raise RuntimeError(f"collider table is missing shapes: {', '.join(_missing)}")
del _missing


def is_known_asset(asset: str) -> bool:
    return asset in _SHAPES_BY_ASSET


def collider_count(brick: Brick) -> int:
    if not brick.collision:
        return 0
    shape = Shape.from_asset(brick.asset)
    if shape is None:
        return DEFAULT_COLLIDERS
    return COLLIDERS_BY_SHAPE[shape]
