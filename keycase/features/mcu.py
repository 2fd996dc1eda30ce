"""Microcontroller bay — a cavity and holder for a Pro Micro on a case wall.

The board stands on its long edge against the inside of the wall at the
last row of a chosen finger column, with its micro-USB receptacle poking
through the wall in the configured connector direction.

Every shape here is modelled with the board lying flat, centred on the
origin, USB edge towards +y, and then moved by ``mcu_transform``.  The
order of that chain matters: rotating before recentring, or translating
to the wall before turning towards the connector direction, puts the
board somewhere else entirely.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from keycase.config.hardware import MICRO_USB, PRO_MICRO
from keycase.config.options import ConfigReferenceError, Options
from keycase.csg import (
    Node, Transform, color, cube, cylinder, hull, rotate, translate, union,
)
from keycase.matrix.compass import Direction, walk_matrix
from keycase.matrix.engine import CoordinateEngine

log = logging.getLogger(__name__)

CLUSTER = "finger"

RECEPTACLE_GREY = (0.5, 0.5, 0.5, 1.0)
PCB_BLUE = (26 / 255, 90 / 255, 160 / 255, 1.0)

# Centre of the USB receptacle relative to the centre of the board.
MICROUSB_OFFSET = (
    0.0,
    PRO_MICRO.length / 2 + PRO_MICRO.usb_overhang - MICRO_USB.length / 2,
    PRO_MICRO.thickness / 2 + MICRO_USB.height / 2,
)

GRIP_DEPTH = 0.6
GRIP_TO_BASE = 5.0
PLINTH_CLEARANCE = 1.2


@dataclass(frozen=True)
class McuParams:
    offset: tuple[float, float, float]
    connector_direction: Direction
    finger_column: int
    male_usb_clearance: bool = False

    @classmethod
    def from_options(cls, options: Options) -> McuParams:
        direction = options.direction("mcu", "connector-direction")
        if not direction.is_cardinal:
            raise ConfigReferenceError(
                ("mcu", "connector-direction"),
                f"{direction.name} is not a cardinal direction",
            )
        return cls(
            offset=options.vector("mcu", "offset"),
            connector_direction=direction,
            finger_column=finger_column(options),
            male_usb_clearance=bool(options.get("mcu", "male-usb-clearance", default=False)),
        )


# ── models in the board's own frame ────────────────────────────────


def mcu_model() -> Node:
    """The board and its receptacle, for previews only."""
    return union(
        translate(MICROUSB_OFFSET, color(RECEPTACLE_GREY, cube(*MICRO_USB.size))),
        color(PCB_BLUE, cube(PRO_MICRO.width, PRO_MICRO.length, PRO_MICRO.thickness)),
    )


def mcu_space_requirements(male_usb_clearance: bool = False) -> Node:
    """Negative space for the board in use, including its USB connectors."""
    w, length, t = PRO_MICRO.width, PRO_MICRO.length, PRO_MICRO.thickness
    tolerance = PRO_MICRO.thickness_tolerance
    alcove_width = MICRO_USB.height + t + tolerance + 2
    alcove_height = w + 1

    connector = [cube(*MICRO_USB.channel_size)]
    if male_usb_clearance:
        connector.append(hull(
            translate((0, 4, 0), cube(15, 1, 10)),
            translate((0, 9, 0), cube(17, 1, 12)),
        ))

    return union(
        translate(MICROUSB_OFFSET, union(*connector)),
        # Alcove in the inner wall, open towards the interior.
        translate(
            (0, (length - alcove_height) / 2, alcove_width / 2 - t),
            cube(w + 5, alcove_height, alcove_width),
        ),
        # Notch in the spine for the board itself.
        cube(w, length, t + tolerance),
        # Wiring running close to the board.
        translate(
            (-w / 2, 0, 0),
            rotate((math.pi / 2 + math.pi / 14, 0, -math.pi / 18),
                   cylinder(4, length - 10)),
        ),
    )


# ── placement ──────────────────────────────────────────────────────


def finger_column(options: Options) -> int:
    value = options.get("mcu", "finger-column")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigReferenceError(
            ("mcu", "finger-column"), f"expected a column index, got {value!r}",
        )
    return value


def mcu_finger_coordinates(options: Options) -> tuple[int, int]:
    """The last key of the configured finger column."""
    return options.column_coordinates(CLUSTER, finger_column(options))[-1]


def mcu_transform(options: Options, engine: CoordinateEngine) -> Transform:
    """The chain from the board's frame to its place on the case wall."""
    params = McuParams.from_options(options)
    direction = params.connector_direction
    coordinates = mcu_finger_coordinates(options)
    x, y, _ = engine.cluster_position(
        CLUSTER, coordinates,
        engine.wall_slab_center_offset(CLUSTER, coordinates, direction),
    )
    log.debug("MCU at key %s, wall %s, anchor (%.2f, %.2f)",
              coordinates, direction.name, x, y)
    return (
        Transform()
        # USB end of the board at the origin.
        .translate((0, -PRO_MICRO.length / 2, 0))
        # Stand on the long edge, components facing the interior.
        .rotate_about(math.pi / 2, (0, 1, 0))
        .translate((0, 0, PRO_MICRO.width / 2))
        # Point the USB end in the ordered direction.
        .rotate((0, 0, -direction.radians))
        .translate((x, y, 0))
        .translate(params.offset)
    )


def mcu_position(options: Options, engine: CoordinateEngine, shape: Node) -> Node:
    return mcu_transform(options, engine).apply(shape)


def mcu_visualization(options: Options, engine: CoordinateEngine) -> Node:
    return mcu_position(options, engine, mcu_model())


def mcu_negative(options: Options, engine: CoordinateEngine) -> Node:
    male = McuParams.from_options(options).male_usb_clearance
    return mcu_position(options, engine, mcu_space_requirements(male))


def mcu_support(options: Options, engine: CoordinateEngine) -> Node:
    """A plinth that grips the board and ties it to the finger web.

    The spine is a hull from a block at floor level under the board to
    two corner posts of the key two steps back from the board's key, so
    the holder also braces the wall it stands against.
    """
    params = McuParams.from_options(options)
    direction = params.connector_direction
    transform = mcu_transform(options, engine)
    half_width = PRO_MICRO.width / 2
    back = -PRO_MICRO.length / 2
    plinth_width = PRO_MICRO.thickness + PRO_MICRO.thickness_tolerance + PLINTH_CLEARANCE

    reverse = direction.turning_left().turning_left()
    cervix = walk_matrix(mcu_finger_coordinates(options), reverse, reverse)
    posts = [
        engine.mount_corner_post(CLUSTER, cervix, Direction.corner(direction, side))
        for side in (reverse.turning_left(), reverse.turning_right())
    ]

    # The gripper must stay clear of the board's through-holes.
    gripper = translate((0, back + GRIP_DEPTH / 2, 0),
                        cube(half_width, GRIP_DEPTH, plinth_width))
    base = translate((0, back - GRIP_TO_BASE / 2, 0),
                     cube(half_width, GRIP_TO_BASE, plinth_width))
    sacrum = translate((0, back - GRIP_TO_BASE, 0),
                       cube(half_width, GRIP_TO_BASE, plinth_width))

    return union(
        transform.apply(union(gripper, base)),
        hull(transform.apply(sacrum), *posts),
    )
