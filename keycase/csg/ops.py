"""Builder functions for CSG trees.

These mirror the OpenSCAD vocabulary.  Primitives are centred on the
origin unless ``center=False`` is passed.  Every function returns a new
node; nothing is modified in place.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from shapely.geometry import Polygon as ShapelyPolygon

from .nodes import (
    Color, Cube, Cylinder, DegenerateGeometryError, Difference, Hull,
    Intersection, LinearExtrude, Node, Polygon, Projection, Rotate,
    Translate, Union, Vec2, Vec3,
)


# Thickness of the ground-plane shadow used by ``bottom_hull``.
BOTTOM_HULL_THICKNESS = 0.001

# ISO metric hex nut widths across flats, keyed by nominal diameter (mm).
_ISO_NUT_FLATS = {
    2: 4.0, 2.5: 5.0, 3: 5.5, 4: 7.0, 5: 8.0, 6: 10.0, 8: 13.0, 10: 16.0,
}


def vec3(values: Sequence[float]) -> Vec3:
    if len(values) != 3:
        raise ValueError(f"Expected 3 components, got {len(values)}: {values!r}")
    return (float(values[0]), float(values[1]), float(values[2]))


def vec2(values: Sequence[float]) -> Vec2:
    if len(values) != 2:
        raise ValueError(f"Expected 2 components, got {len(values)}: {values!r}")
    return (float(values[0]), float(values[1]))


# ── primitives ─────────────────────────────────────────────────────


def cube(x: float, y: float, z: float, *, center: bool = True) -> Cube:
    return Cube(size=vec3((x, y, z)), center=center)


def cylinder(
    radius: float, height: float, *,
    center: bool = True, segments: int | None = None,
) -> Cylinder:
    return Cylinder(radius=float(radius), height=float(height),
                    center=center, segments=segments)


def polygon(points: Iterable[Sequence[float]]) -> Polygon:
    """A 2-D outline.  At least three non-collinear points are required."""
    pts = tuple(vec2(p) for p in points)
    if len(pts) < 3:
        raise DegenerateGeometryError("polygon", len(pts), "need at least 3 points")
    if ShapelyPolygon(pts).area <= 0.0:
        raise DegenerateGeometryError("polygon", len(pts), "points enclose no area")
    return Polygon(points=pts)


def iso_hex_nut_model(diameter: float, height: float) -> Cylinder:
    """A hexagonal prism the size of an ISO nut for the given bolt."""
    flats = _ISO_NUT_FLATS.get(diameter, 1.8 * diameter)
    return cylinder(flats / math.sqrt(3), height, segments=6)


# ── booleans ───────────────────────────────────────────────────────


def union(*shapes: Node) -> Union:
    return Union(items=tuple(shapes))


def difference(base: Node, *cuts: Node) -> Difference:
    return Difference(items=(base, *cuts))


def intersection(*shapes: Node) -> Intersection:
    return Intersection(items=tuple(shapes))


def hull(*shapes: Node) -> Hull:
    if len(shapes) < 2:
        raise DegenerateGeometryError("hull", len(shapes), "need at least 2 shapes")
    return Hull(items=tuple(shapes))


def bottom_hull(*shapes: Node) -> Hull:
    """Hull of *shapes* and their shadow on the ground plane.

    The result always reaches z = 0, so whatever it encloses is joined
    to the floor of the case.
    """
    body = shapes[0] if len(shapes) == 1 else union(*shapes)
    shadow = LinearExtrude(
        child=Projection(child=body),
        height=BOTTOM_HULL_THICKNESS,
        center=False,
    )
    return hull(body, shadow)


# ── affine and cosmetic ────────────────────────────────────────────


def translate(offset: Sequence[float], shape: Node) -> Translate:
    return Translate(child=shape, offset=vec3(offset))


def rotate(angles: Sequence[float] | float, shape: Node,
           axis: Sequence[float] | None = None) -> Rotate:
    """Rotate by Euler angles ``[x, y, z]`` or by one angle about a principal axis."""
    if axis is None:
        return Rotate(child=shape, angles=vec3(angles))
    return Rotate(child=shape, angles=axis_angles(float(angles), axis))


def axis_angles(angle: float, axis: Sequence[float]) -> Vec3:
    """Euler angles equivalent to *angle* about a principal unit axis."""
    ax = vec3(axis)
    if sorted(abs(c) for c in ax) != [0.0, 0.0, 1.0]:
        raise ValueError(f"Rotation axis must be a principal unit axis, got {axis!r}")
    return vec3([angle * c for c in ax])


def linear_extrude(height: float, shape: Node, *, center: bool = True) -> LinearExtrude:
    if height <= 0:
        raise DegenerateGeometryError("linear_extrude", 1, f"height {height} is not positive")
    return LinearExtrude(child=shape, height=float(height), center=center)


def color(rgba: Sequence[float], shape: Node) -> Color:
    r, g, b, *rest = (float(c) for c in rgba)
    return Color(child=shape, rgba=(r, g, b, rest[0] if rest else 1.0))
