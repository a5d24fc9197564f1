"""
py_lakegen - procedural lake maps.

Generates a terrain grid with irregular lakes whose depth falls off from
the deepest point toward the shoreline.
"""

from .core import Grid, Lake, LakeOptions, MapCompositor, MapParameters, Point, generate

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "Lake",
    "LakeOptions",
    "MapCompositor",
    "MapParameters",
    "Point",
    "generate",
]
