"""USB holder — a block and cavity for a standalone USB female connector.

Only needed when the microcontroller's own connector is not robust enough
to be exposed directly through the case.
"""

from __future__ import annotations

from keycase.config.hardware import USB_HOLDER
from keycase.csg import Node, cube, translate
from keycase.matrix.engine import CoordinateEngine

CLUSTER = "finger"
COORDINATES = (0, 0)


def usb_holder_anchor(engine: CoordinateEngine) -> tuple[float, float, float]:
    ox, oy, _ = engine.cluster_position(
        CLUSTER, COORDINATES, (0, engine.mount_depth / 2, 0),
    )
    return (ox, oy, (USB_HOLDER.height + USB_HOLDER.wall_thickness) / 2)


def usb_holder_placement(engine: CoordinateEngine, shape: Node) -> Node:
    return translate(usb_holder_anchor(engine), shape)


def usb_holder_positive(engine: CoordinateEngine) -> Node:
    t = USB_HOLDER.wall_thickness
    return usb_holder_placement(
        engine,
        cube(USB_HOLDER.width + t, USB_HOLDER.length, USB_HOLDER.height + t),
    )


def usb_holder_negative(engine: CoordinateEngine) -> Node:
    return usb_holder_placement(engine, cube(*USB_HOLDER.size))
