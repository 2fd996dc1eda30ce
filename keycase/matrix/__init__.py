"""Key matrix — compass arithmetic and the coordinate engine interface.

Submodules:
  compass  Direction enum, grid vectors, angles, turns, matrix walks.
  engine   CoordinateEngine protocol and the FlatMatrix reference engine.
"""

from .compass import Direction, walk_matrix
from .engine import CoordinateEngine, FlatMatrix

__all__ = ["Direction", "walk_matrix", "CoordinateEngine", "FlatMatrix"]
