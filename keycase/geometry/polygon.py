"""
Outline checks for extruded 2-D shapes, on top of shapely.

All coordinates in mm, in the XY plane of the case (x east, y north).
"""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import Polygon as ShapelyPolygon, box

Vertex = Sequence[float]  # (x, y)
Outline = Sequence[Vertex]


def validate_outline(outline: Outline, label: str, min_area: float = 1.0) -> list[str]:
    """
    Check that *outline* can be extruded into a solid.

    Returns a list of error strings (empty = valid).
    """
    if len(outline) < 3:
        return [f"{label}: has only {len(outline)} point(s), need at least 3."]

    errors: list[str] = []
    poly = ShapelyPolygon(outline)
    if not poly.exterior.is_simple:
        errors.append(f"{label}: has self-intersecting edges.")
    elif poly.area < min_area:
        errors.append(f"{label}: area is {poly.area:.2f}mm², need at least {min_area:.0f}mm².")
    return errors


def rect_inside_polygon(
    outline: Outline, cx: float, cy: float, width: float, height: float,
    tol: float = 1e-6,
) -> bool:
    """Whether the axis-aligned rectangle centred on (cx, cy) lies inside *outline*."""
    poly = ShapelyPolygon(outline)
    if not poly.is_valid:
        poly = poly.buffer(0)
    rect = box(cx - width / 2, cy - height / 2, cx + width / 2, cy + height / 2)
    return poly.buffer(tol).contains(rect)
