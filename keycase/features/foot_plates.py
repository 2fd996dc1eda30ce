"""Foot plates — flat pads under the case, outlined by key corners.

Each polygon point names a key by alias and a corner of that key's wall
by compass direction, optionally followed by a 2-D offset for tweaking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from keycase.config.options import ConfigReferenceError, Options
from keycase.csg import Node, linear_extrude, polygon, union
from keycase.matrix.compass import Direction
from keycase.matrix.engine import CoordinateEngine

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FootPoint:
    key_alias: str
    key_corner: Direction
    offset: tuple[float, float] = (0.0, 0.0)


def parse_foot_point(data: Mapping, path: tuple) -> FootPoint:
    try:
        alias = data["key-alias"]
        corner = Direction.parse(data["key-corner"])
    except KeyError as e:
        raise ConfigReferenceError(path + (e.args[0],)) from None
    except ValueError as e:
        raise ConfigReferenceError(path + ("key-corner",), str(e)) from None
    offset = tuple(float(v) for v in data.get("offset", (0.0, 0.0)))
    if len(offset) != 2:
        raise ConfigReferenceError(path + ("offset",), f"expected 2 numbers, got {offset!r}")
    return FootPoint(key_alias=alias, key_corner=corner, offset=offset)


def foot_polygons(options: Options) -> list[list[FootPoint]]:
    base = ("case", "foot-plates", "polygons")
    return [
        [parse_foot_point(point, base + (i, "points", j))
         for j, point in enumerate(options.get(*base, i, "points"))]
        for i in range(len(options.get(*base)))
    ]


def foot_point_position(
    options: Options, engine: CoordinateEngine, point: FootPoint,
) -> tuple[float, float]:
    key = options.alias(point.key_alias)
    x, y, _ = engine.wall_corner_position(key.cluster, key.coordinates, point.key_corner)
    return (x + point.offset[0], y + point.offset[1])


def foot_plate(options: Options, engine: CoordinateEngine, points: list[FootPoint]) -> Node:
    height = float(options.get("case", "foot-plates", "height"))
    outline = [foot_point_position(options, engine, p) for p in points]
    return linear_extrude(height, polygon(outline), center=False)


def foot_plates(options: Options, engine: CoordinateEngine) -> Node:
    plates = [foot_plate(options, engine, points) for points in foot_polygons(options)]
    log.debug("Built %d foot plate(s)", len(plates))
    return union(*plates)
