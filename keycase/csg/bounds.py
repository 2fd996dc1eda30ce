"""Bounding-box evaluation of CSG trees without a geometry kernel.

Each primitive contributes a cloud of characteristic vertices (box
corners, a polygonal ring per cylinder end, extruded outline points).
Affine nodes move the cloud exactly, so a box computed after a transform
and its inverse matches the untransformed box to rounding error.

Booleans are approximated: a difference keeps the bounds of its base,
an intersection clips the boxes of its operands.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .nodes import (
    Color, Cube, Cylinder, Difference, Hull, Intersection, LinearExtrude,
    Node, Polygon, Projection, Rotate, Translate, Union, Vec3,
)
from .transform import add, rotate_point

DEFAULT_SEGMENTS = 32


@dataclass(frozen=True)
class BoundingBox:
    minimum: Vec3
    maximum: Vec3

    @property
    def size(self) -> Vec3:
        return tuple(hi - lo for lo, hi in zip(self.minimum, self.maximum))

    @property
    def center(self) -> Vec3:
        return tuple((lo + hi) / 2 for lo, hi in zip(self.minimum, self.maximum))

    def contains(self, other: BoundingBox, tol: float = 1e-9) -> bool:
        return all(
            a - tol <= b and d <= c + tol
            for a, b, c, d in zip(self.minimum, other.minimum, self.maximum, other.maximum)
        )

    def intersect(self, other: BoundingBox) -> BoundingBox | None:
        lo = tuple(max(a, b) for a, b in zip(self.minimum, other.minimum))
        hi = tuple(min(a, b) for a, b in zip(self.maximum, other.maximum))
        if any(l > h for l, h in zip(lo, hi)):
            return None
        return BoundingBox(lo, hi)

    def corners(self) -> list[Vec3]:
        (x0, y0, z0), (x1, y1, z1) = self.minimum, self.maximum
        return [(x, y, z) for x in (x0, x1) for y in (y0, y1) for z in (z0, z1)]


def bounding_box(node: Node) -> BoundingBox | None:
    """Axis-aligned bounds of *node*, or ``None`` for an empty tree."""
    return _box_of(vertices(node))


def vertices(node: Node) -> list[Vec3]:
    """Characteristic points of *node* in its own coordinate frame."""
    if isinstance(node, Cube):
        lo = tuple(-s / 2 if node.center else 0.0 for s in node.size)
        hi = tuple(l + s for l, s in zip(lo, node.size))
        return BoundingBox(lo, hi).corners()

    if isinstance(node, Cylinder):
        n = node.segments or DEFAULT_SEGMENTS
        z0 = -node.height / 2 if node.center else 0.0
        ring = [
            (node.radius * math.cos(2 * math.pi * i / n),
             node.radius * math.sin(2 * math.pi * i / n))
            for i in range(n)
        ]
        return [(x, y, z) for z in (z0, z0 + node.height) for x, y in ring]

    if isinstance(node, Polygon):
        return [(x, y, 0.0) for x, y in node.points]

    if isinstance(node, LinearExtrude):
        z0 = -node.height / 2 if node.center else 0.0
        flat = vertices(node.child)
        return [(x, y, z) for z in (z0, z0 + node.height) for x, y, _ in flat]

    if isinstance(node, Projection):
        return [(x, y, 0.0) for x, y, _ in vertices(node.child)]

    if isinstance(node, Translate):
        return [add(p, node.offset) for p in vertices(node.child)]

    if isinstance(node, Rotate):
        return [rotate_point(p, node.angles) for p in vertices(node.child)]

    if isinstance(node, Color):
        return vertices(node.child)

    if isinstance(node, (Union, Hull)):
        return [p for item in node.items for p in vertices(item)]

    if isinstance(node, Difference):
        return vertices(node.items[0]) if node.items else []

    if isinstance(node, Intersection):
        box: BoundingBox | None = None
        for i, item in enumerate(node.items):
            item_box = _box_of(vertices(item))
            if item_box is None:
                return []
            box = item_box if i == 0 else box.intersect(item_box)
            if box is None:
                return []
        return box.corners() if box else []

    raise TypeError(f"Unknown CSG node {type(node).__name__}")


def _box_of(points: list[Vec3]) -> BoundingBox | None:
    if not points:
        return None
    xs, ys, zs = zip(*points)
    return BoundingBox((min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs)))
