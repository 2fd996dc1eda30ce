"""Immutable CSG node kinds.

A shape is a tree of frozen dataclasses.  Leaves are primitive solids
(``Cube``, ``Cylinder``) or 2-D outlines (``Polygon``); inner nodes are
boolean operators, affine operators, extrusions and colour tags.  Trees
are built bottom-up by the helpers in ``keycase.csg.ops`` and never
mutated afterwards, so two trees built from the same configuration
compare equal with ``==``.

Angles are stored in radians.  Conversion to degrees happens only when
the tree is written out as OpenSCAD source.
"""

from __future__ import annotations

from dataclasses import dataclass


Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class DegenerateGeometryError(Exception):
    """Raised when an operator receives too few inputs to make a solid."""

    def __init__(self, operator: str, count: int, reason: str) -> None:
        self.operator = operator
        self.count = count
        self.reason = reason
        super().__init__(f"Degenerate {operator}() with {count} input(s): {reason}")


class Node:
    """Common base of every node kind."""

    kind: str = "node"

    @property
    def children(self) -> tuple[Node, ...]:
        return ()


# ── primitives ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Cube(Node):
    size: Vec3
    center: bool = True
    kind = "cube"


@dataclass(frozen=True)
class Cylinder(Node):
    radius: float
    height: float
    center: bool = True
    segments: int | None = None     # None = renderer default ($fn)
    kind = "cylinder"


@dataclass(frozen=True)
class Polygon(Node):
    """A 2-D outline in the XY plane."""
    points: tuple[Vec2, ...]
    kind = "polygon"


# ── operators ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class _Group(Node):
    items: tuple[Node, ...]

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items


@dataclass(frozen=True)
class Union(_Group):
    kind = "union"


@dataclass(frozen=True)
class Difference(_Group):
    """First item minus all following items."""
    kind = "difference"


@dataclass(frozen=True)
class Intersection(_Group):
    kind = "intersection"


@dataclass(frozen=True)
class Hull(_Group):
    kind = "hull"


@dataclass(frozen=True)
class _Wrap(Node):
    child: Node

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.child,)


@dataclass(frozen=True)
class Translate(_Wrap):
    offset: Vec3 = (0.0, 0.0, 0.0)
    kind = "translate"


@dataclass(frozen=True)
class Rotate(_Wrap):
    """Rotate about X, then Y, then Z (OpenSCAD ``rotate([x, y, z])``)."""
    angles: Vec3 = (0.0, 0.0, 0.0)
    kind = "rotate"


@dataclass(frozen=True)
class LinearExtrude(_Wrap):
    height: float = 1.0
    center: bool = True
    kind = "linear_extrude"


@dataclass(frozen=True)
class Projection(_Wrap):
    """Shadow of a solid on the XY plane (a 2-D result)."""
    kind = "projection"


@dataclass(frozen=True)
class Color(_Wrap):
    rgba: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    kind = "color"
