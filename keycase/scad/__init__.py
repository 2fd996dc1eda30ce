from .writer import render_scad, write_scad
from .compiler import compile_scad, check_scad
