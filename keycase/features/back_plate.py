"""Back plate — a mounting plate for a beam or rod joining the two halves."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from keycase.config.options import Options
from keycase.csg import (
    Node, Transform, bottom_hull, bounding_box, cube, cylinder, hull,
    intersection, iso_hex_nut_model, translate, union,
)
from keycase.matrix.compass import Direction
from keycase.matrix.engine import CoordinateEngine

log = logging.getLogger(__name__)

PLATE_DEPTH = 3.0
INTERIOR_PROTRUSION = 8.0
EXTERIOR_BEVEL = 1.0
FASTENER_LENGTH = 25.0
BOSS_INSET = 10.0
BOSS_HEIGHT = 10.0
# Edge of the half-space box that keeps the block above the floor.
FLOOR_CLIP = 1000.0


@dataclass(frozen=True)
class BackPlateParams:
    key_alias: str
    offset: tuple[float, float, float]
    beam_height: float
    fastener_diameter: float
    fastener_distance: float
    bosses: bool
    interior_bevel: float = 1.0

    @classmethod
    def from_options(cls, options: Options) -> BackPlateParams:
        base = ("case", "back-plate")
        return cls(
            key_alias=options.get(*base, "position", "key-alias"),
            offset=options.vector(*base, "position", "offset"),
            beam_height=float(options.get(*base, "beam-height")),
            fastener_diameter=float(options.get(*base, "fasteners", "diameter")),
            fastener_distance=float(options.get(*base, "fasteners", "distance")),
            bosses=bool(options.get(*base, "fasteners", "bosses")),
            interior_bevel=float(options.get(*base, "interior-bevel", default=1.0)),
        )


def backplate_transform(options: Options, engine: CoordinateEngine) -> Transform:
    params = BackPlateParams.from_options(options)
    key = options.alias(params.key_alias)
    anchor = engine.cluster_position(
        key.cluster, key.coordinates,
        engine.wall_slab_center_offset(key.cluster, key.coordinates, Direction.N),
    )
    return (
        Transform()
        .translate(anchor)
        .translate((0, 0, -params.beam_height / 2))
        .translate(params.offset)
    )


def backplate_place(options: Options, engine: CoordinateEngine, shape: Node) -> Node:
    return backplate_transform(options, engine).apply(shape)


def backplate_shape(options: Options) -> Node:
    """A plate tapering towards the interior (-y) and bevelled outside."""
    params = BackPlateParams.from_options(options)
    height = params.beam_height
    width = params.fastener_distance + height
    bevel = params.interior_bevel
    return hull(
        translate((0, -INTERIOR_PROTRUSION, 0),
                  cube(width - bevel, PLATE_DEPTH, height - bevel)),
        cube(width, PLATE_DEPTH, height),
        translate((0, EXTERIOR_BEVEL, 0),
                  cube(width - EXTERIOR_BEVEL, PLATE_DEPTH, height - EXTERIOR_BEVEL)),
    )


def backplate_fastener_holes(options: Options, engine: CoordinateEngine) -> Node:
    """Two holes for screws through the plate, with optional nut recesses."""
    params = BackPlateParams.from_options(options)
    d = params.fastener_diameter

    def hole(x_offset: float) -> Node:
        parts = [cylinder(d / 2, FASTENER_LENGTH)]
        if params.bosses:
            parts.append(translate((0, 0, BOSS_INSET), iso_hex_nut_model(d, BOSS_HEIGHT)))
        shape = (
            Transform()
            .rotate((math.pi / 2, 0, 0))
            .translate((x_offset, 0, 0))
            .apply(union(*parts))
        )
        return backplate_place(options, engine, shape)

    half = params.fastener_distance / 2
    return union(hole(half), hole(-half))


def backplate_block(options: Options, engine: CoordinateEngine) -> Node:
    """The placed plate, extended down to the floor and cut off at it."""
    plate = backplate_place(options, engine, backplate_shape(options))
    box = bounding_box(plate)
    if box is not None and box.minimum[2] < 0:
        log.warning("Back plate reaches %.2f mm below the floor; clipping at z = 0",
                    -box.minimum[2])
    floor = translate((0, 0, FLOOR_CLIP / 2), cube(FLOOR_CLIP, FLOOR_CLIP, FLOOR_CLIP))
    return intersection(bottom_hull(plate), floor)
