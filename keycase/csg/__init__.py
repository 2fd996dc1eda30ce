"""CSG — immutable shape trees, transform chains and bounds.

Submodules:
  nodes          Node kinds (primitives, booleans, affine, extrusion, colour).
  ops            Builder functions in the OpenSCAD vocabulary.
  transform      Ordered translate/rotate chains with exact inverses.
  bounds         Vertex clouds and bounding boxes, no kernel needed.
  serialization  JSON-safe dicts of a tree.
"""

from .nodes import (
    Node, Cube, Cylinder, Polygon, Union, Difference, Intersection, Hull,
    Translate, Rotate, LinearExtrude, Projection, Color,
    DegenerateGeometryError,
)
from .ops import (
    cube, cylinder, polygon, iso_hex_nut_model,
    union, difference, intersection, hull, bottom_hull,
    translate, rotate, linear_extrude, color,
)
from .transform import Transform
from .bounds import BoundingBox, bounding_box
from .serialization import node_to_dict, count_nodes

__all__ = [
    # Nodes
    "Node", "Cube", "Cylinder", "Polygon", "Union", "Difference",
    "Intersection", "Hull", "Translate", "Rotate", "LinearExtrude",
    "Projection", "Color", "DegenerateGeometryError",
    # Builders
    "cube", "cylinder", "polygon", "iso_hex_nut_model",
    "union", "difference", "intersection", "hull", "bottom_hull",
    "translate", "rotate", "linear_extrude", "color",
    # Transforms and bounds
    "Transform", "BoundingBox", "bounding_box",
    # Serialization
    "node_to_dict", "count_nodes",
]
