"""Compass directions on the key matrix.

Sixteen points, clockwise from north.  Grid vectors use +x for east and
+y for north; angles are radians clockwise from north, so rotating a
north-facing shape by ``-direction.radians`` about Z makes it face
*direction*.

The 22.5° intermediates (NNE, ENE, ...) name corners of a key mount as
seen from one of its walls: WNW is the north-west corner on the west
wall.  Their grid vector is therefore that of the neighbouring ordinal.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence


Grid = tuple[int, int]


class Direction(Enum):
    N = 0
    NNE = 1
    NE = 2
    ENE = 3
    E = 4
    ESE = 5
    SE = 6
    SSE = 7
    S = 8
    SSW = 9
    SW = 10
    WSW = 11
    W = 12
    WNW = 13
    NW = 14
    NNW = 15

    @classmethod
    def parse(cls, token: str | Direction) -> Direction:
        if isinstance(token, Direction):
            return token
        try:
            return cls[str(token).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown compass direction {token!r}") from None

    # ── conversions ───────────────────────────────────────────────

    @property
    def radians(self) -> float:
        return self.value * math.pi / 8

    @property
    def to_grid(self) -> Grid:
        dx = math.sin(self.radians)
        dy = math.cos(self.radians)
        return (_sign(dx), _sign(dy))

    @property
    def is_cardinal(self) -> bool:
        return self.value % 4 == 0

    @property
    def is_intermediate(self) -> bool:
        return self.value % 2 == 1

    @property
    def primary(self) -> Direction:
        """The cardinal wall this direction belongs to.

        Intermediates resolve to their nearest cardinal; ordinals, which
        sit equally between two walls, resolve to north or south.
        """
        if self.is_cardinal:
            return self
        if self.is_intermediate:
            return Direction((round(self.value / 4) * 4) % 16)
        return Direction.N if self in (Direction.NE, Direction.NW) else Direction.S

    @property
    def secondary_grid(self) -> Grid:
        """Grid vector from the primary wall towards this corner; zero for cardinals."""
        gx, gy = self.to_grid
        px, py = self.primary.to_grid
        return (gx - px, gy - py)

    # ── turns ─────────────────────────────────────────────────────

    def _turned(self, steps: int) -> Direction:
        return Direction((self.value + steps) % 16)

    def turning_left(self) -> Direction:
        """Quarter turn anticlockwise."""
        return self._turned(-4)

    def turning_right(self) -> Direction:
        """Quarter turn clockwise."""
        return self._turned(4)

    def veering_left(self) -> Direction:
        """45° anticlockwise."""
        return self._turned(-2)

    def veering_right(self) -> Direction:
        """45° clockwise."""
        return self._turned(2)

    def reverse(self) -> Direction:
        return self._turned(8)

    @staticmethod
    def corner(primary: Direction, secondary: Direction) -> Direction:
        """The intermediate on *primary*'s wall, towards *secondary*.

        ``corner(E, S)`` is ESE.  Both arguments must be cardinals at
        right angles to each other.
        """
        if not (primary.is_cardinal and secondary.is_cardinal):
            raise ValueError(f"Corner needs two cardinals, got {primary.name}, {secondary.name}")
        diff = (secondary.value - primary.value) % 16
        if diff == 4:
            return primary._turned(1)
        if diff == 12:
            return primary._turned(-1)
        raise ValueError(f"{primary.name} and {secondary.name} are not perpendicular")


def walk_matrix(coordinates: Sequence[int], *directions: Direction) -> tuple[int, int]:
    """Step from a (column, row) coordinate one grid unit per direction."""
    col, row = coordinates
    for d in directions:
        dx, dy = d.to_grid
        col, row = col + dx, row + dy
    return (col, row)


def _sign(value: float) -> int:
    if abs(value) < 1e-9:
        return 0
    return 1 if value > 0 else -1
