"""
keycase — auxiliary features for a parametric keyboard case.

Stages:
  1. config     Load the JSON parameter tree into an immutable Options.
  2. matrix     Resolve keys, walls and corners through a CoordinateEngine.
  3. features   Place the MCU bay, back plate, LEDs, connector, feet, USB holder.
  4. compose    Union positives, union negatives, subtract.
  5. scad       Write OpenSCAD source; optionally render STL with openscad.
"""

__version__ = "0.1.0"
