"""LED strip — a row of diode housings and emitter holes in the west wall.

The housings are clipped to a channel that follows the outside of the
west wall of the first finger column, so they never cut into the key
mounts; the emitter holes are left unclipped to bore clean through.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from keycase.config.options import Options
from keycase.csg import (
    Node, cube, cylinder, intersection, linear_extrude, polygon, rotate,
    translate, union,
)
from keycase.matrix.compass import Direction
from keycase.matrix.engine import CoordinateEngine

log = logging.getLogger(__name__)

CLUSTER = "finger"
COLUMN = 0
CHANNEL_WIDTH = 10.0
CHANNEL_HEIGHT = 50.0
HOLE_LENGTH = 50.0
HOUSING_ELEVATION = 5.0


@dataclass(frozen=True)
class LedParams:
    amount: int
    interval: float
    emitter_diameter: float
    housing_size: float

    @classmethod
    def from_options(cls, options: Options) -> LedParams:
        base = ("case", "leds")
        return cls(
            amount=int(options.get(*base, "amount")),
            interval=float(options.get(*base, "interval")),
            emitter_diameter=float(options.get(*base, "emitter-diameter")),
            housing_size=float(options.get(*base, "housing-size")),
        )


# ── wall channel ───────────────────────────────────────────────────


def west_wall_west_points(options: Options, engine: CoordinateEngine) -> list[tuple[float, float]]:
    """Inner boundary of the channel: each west corner, one wall thickness in."""
    thickness = float(options.get("by-key", "parameters", "wall", "thickness"))
    points = []
    for coordinates in options.column_coordinates(CLUSTER, COLUMN):
        for corner in (Direction.WSW, Direction.WNW):
            x, y, _ = engine.wall_corner_position(CLUSTER, coordinates, corner)
            points.append((x + thickness, y))
    return points


def west_wall_east_points(options: Options, engine: CoordinateEngine) -> list[tuple[float, float]]:
    return [(x + CHANNEL_WIDTH, y) for x, y in west_wall_west_points(options, engine)]


def west_wall_channel_outline(options: Options, engine: CoordinateEngine) -> list[tuple[float, float]]:
    west = west_wall_west_points(options, engine)
    east = west_wall_east_points(options, engine)
    return west + east[::-1]


def west_wall_led_channel(options: Options, engine: CoordinateEngine) -> Node:
    return linear_extrude(CHANNEL_HEIGHT, polygon(west_wall_channel_outline(options, engine)))


# ── holes ──────────────────────────────────────────────────────────


def led_hole_position(
    options: Options, engine: CoordinateEngine, ordinal: int,
) -> tuple[float, float, float]:
    """Centre of the LED numbered *ordinal*, counting north from the first row."""
    params = LedParams.from_options(options)
    first = options.column_coordinates(CLUSTER, COLUMN)[0]
    x0, y0, _ = engine.wall_corner_position(CLUSTER, first, Direction.WNW)
    return (
        x0,
        y0 + params.interval * ordinal,
        HOUSING_ELEVATION + params.housing_size / 2,
    )


def led_emitter_channel(options: Options, engine: CoordinateEngine, ordinal: int) -> Node:
    params = LedParams.from_options(options)
    bore = rotate(math.pi / 2, cylinder(params.emitter_diameter / 2, HOLE_LENGTH), axis=(0, 1, 0))
    return translate(led_hole_position(options, engine, ordinal), bore)


def led_housing_channel(options: Options, engine: CoordinateEngine, ordinal: int) -> Node:
    h = LedParams.from_options(options).housing_size
    return translate(led_hole_position(options, engine, ordinal), cube(HOLE_LENGTH, h, h))


def led_holes(options: Options, engine: CoordinateEngine) -> Node:
    """All housings, clipped to the wall channel, plus all emitter holes."""
    params = LedParams.from_options(options)
    if params.amount <= 0:
        log.warning("LED strip included with amount %d; no holes made", params.amount)
        return union()
    ordinals = range(params.amount)
    housings = union(*(led_housing_channel(options, engine, i) for i in ordinals))
    emitters = union(*(led_emitter_channel(options, engine, i) for i in ordinals))
    return union(
        intersection(west_wall_led_channel(options, engine), housings),
        emitters,
    )
