"""Signal connector — a socket for the cable between the two halves.

The socket sits in a corner, either of the rear housing or of a named
key's wall.  Shapes are modelled facing north with the outside of the
wall along the x axis and ground level at z = 0, then turned to face the
corner's primary direction and moved into the corner's nook.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from keycase.config.options import ConfigReferenceError, Options
from keycase.csg import Node, Transform, cube, translate, union
from keycase.matrix.compass import Direction
from keycase.matrix.engine import CoordinateEngine

log = logging.getLogger(__name__)

# Depth of the rear-housing anchor inside its corner, in corner units.
HOUSING_CORNER_DEPTH = 3


@dataclass(frozen=True)
class ConnectionParams:
    socket_size: tuple[float, float, float]
    thickness: float
    corner: Direction
    key_alias: str
    use_housing: bool
    rotation: tuple[float, float, float]
    offset: tuple[float, float, float]

    @classmethod
    def from_options(cls, options: Options) -> ConnectionParams:
        position = ("connection", "position")
        use_housing = (
            bool(options.get("case", "rear-housing", "include"))
            and bool(options.get(*position, "prefer-rear-housing"))
        )
        corner = options.direction(*position, "corner")
        if corner.is_cardinal:
            raise ConfigReferenceError(
                position + ("corner",), f"{corner.name} is a wall, not a corner",
            )
        return cls(
            socket_size=options.vector("connection", "socket-size"),
            thickness=float(options.get("case", "web-thickness")),
            corner=corner,
            key_alias=options.get(*position, "key-alias"),
            use_housing=use_housing,
            rotation=options.vector(*position, "rotation"),
            offset=options.vector(*position, "offset"),
        )


def connection_inset(options: Options) -> tuple[float, float, float]:
    """Lateral step from the corner into the nook; zero unless on the rear housing."""
    params = ConnectionParams.from_options(options)
    if not params.use_housing:
        return (0.0, 0.0, 0.0)
    dx, dy = params.corner.secondary_grid
    distance = 0.5 * (params.thickness + params.socket_size[0])
    return (-dx * distance, -dy * distance, 0.0)


def connection_nook(options: Options, engine: CoordinateEngine) -> tuple[float, float, float]:
    """Ground-level position of the socket's nook."""
    params = ConnectionParams.from_options(options)
    if params.use_housing:
        general = engine.housing_position(params.corner, HOUSING_CORNER_DEPTH, (0, 0, 0))
    else:
        key = options.alias(params.key_alias)
        general = engine.wall_corner_position(key.cluster, key.coordinates, params.corner)
    ix, iy, iz = connection_inset(options)
    nook = (general[0] + ix, general[1] + iy, iz)
    log.debug("Connection nook at corner %s: %s", params.corner.name, nook)
    return nook


def connection_transform(options: Options, engine: CoordinateEngine) -> Transform:
    params = ConnectionParams.from_options(options)
    t = params.thickness
    sx, sy, sz = params.socket_size
    return (
        Transform()
        .rotate(params.rotation)
        # Line up with the wall and a metasocket base plate.
        .translate((0, t / 2, t))
        .translate((0, -0.5 * sy, 0.5 * sz))
        .rotate((0, 0, -params.corner.primary.radians))
        .translate(connection_nook(options, engine))
        .translate(params.offset)
    )


def connection_position(options: Options, engine: CoordinateEngine, shape: Node) -> Node:
    return connection_transform(options, engine).apply(shape)


def connection_metasocket(options: Options) -> Node:
    """The block of case material that receives the socket, facing north."""
    params = ConnectionParams.from_options(options)
    t = params.thickness
    sx, sy, sz = params.socket_size
    return translate((0, -t / 2, 0), cube(sx + 2 * t, sy + t, sz + 2 * t))


def connection_socket(options: Options) -> Node:
    """Negative space for the port, plus a hole for wires into the case."""
    params = ConnectionParams.from_options(options)
    t = params.thickness
    sx, sy, sz = params.socket_size
    return union(
        cube(sx, sy, sz),
        translate((0, -2 * t, 0), cube(sx - 1, sy - 1, sz - 1)),
    )


def connection_positive(options: Options, engine: CoordinateEngine) -> Node:
    return connection_position(options, engine, connection_metasocket(options))


def connection_negative(options: Options, engine: CoordinateEngine) -> Node:
    return connection_position(options, engine, connection_socket(options))
