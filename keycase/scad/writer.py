"""
SCAD writer — serialise a CSG tree to OpenSCAD source.

Output is built line by line, one statement per node, with children
indented inside braces.  Angles are converted from radians to degrees
here and nowhere else.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from keycase.csg.nodes import (
    Color, Cube, Cylinder, Difference, Hull, Intersection, LinearExtrude,
    Node, Polygon, Projection, Rotate, Translate, Union,
)

log = logging.getLogger(__name__)

INDENT = "    "


# ── helpers ─────────────────────────────────────────────────────────


def _fmt(value: float) -> str:
    """Format a number with up to four decimals and no trailing zeros."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _fmt_vec(values) -> str:
    return "[" + ", ".join(_fmt(v) for v in values) + "]"


def _fmt_bool(flag: bool) -> str:
    return "true" if flag else "false"


def _fmt_poly(pts) -> str:
    """Format polygon vertices for an OpenSCAD ``polygon()`` call."""
    return ", ".join(f"[{_fmt(x)}, {_fmt(y)}]" for x, y in pts)


def _head(node: Node) -> str:
    """The statement for *node* without its children."""
    if isinstance(node, Cube):
        return f"cube({_fmt_vec(node.size)}, center = {_fmt_bool(node.center)})"
    if isinstance(node, Cylinder):
        parts = [f"r = {_fmt(node.radius)}", f"h = {_fmt(node.height)}",
                 f"center = {_fmt_bool(node.center)}"]
        if node.segments is not None:
            parts.append(f"$fn = {node.segments}")
        return f"cylinder({', '.join(parts)})"
    if isinstance(node, Polygon):
        return f"polygon(points = [{_fmt_poly(node.points)}])"
    if isinstance(node, Translate):
        return f"translate({_fmt_vec(node.offset)})"
    if isinstance(node, Rotate):
        return f"rotate({_fmt_vec(math.degrees(a) for a in node.angles)})"
    if isinstance(node, LinearExtrude):
        return (f"linear_extrude(height = {_fmt(node.height)}, "
                f"center = {_fmt_bool(node.center)})")
    if isinstance(node, Projection):
        return "projection()"
    if isinstance(node, Color):
        return f"color({_fmt_vec(node.rgba)})"
    if isinstance(node, (Union, Difference, Intersection, Hull)):
        return f"{node.kind}()"
    raise TypeError(f"Cannot render node of type {type(node).__name__}")


def _node_lines(node: Node, depth: int, lines: list[str]) -> None:
    indent = INDENT * depth
    head = _head(node)
    children = node.children
    if isinstance(node, (Cube, Cylinder, Polygon)):
        lines.append(f"{indent}{head};")
    elif not children:
        lines.append(f"{indent}{head} {{}}")
    else:
        lines.append(f"{indent}{head} {{")
        for child in children:
            _node_lines(child, depth + 1, lines)
        lines.append(f"{indent}}}")


# ── public API ─────────────────────────────────────────────────────


def render_scad(node: Node, header: str | None = None) -> str:
    """Return OpenSCAD source for *node*, optionally after a comment header."""
    lines: list[str] = []
    if header:
        lines.extend(f"// {line}" for line in header.splitlines())
        lines.append("")
    _node_lines(node, 0, lines)
    lines.append("")
    return "\n".join(lines)


def write_scad(node: Node, path: Path, header: str | None = None) -> Path:
    """Write *node* to *path* as OpenSCAD source and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_scad(node, header), encoding="utf-8")
    log.info("Wrote %s", path)
    return path
