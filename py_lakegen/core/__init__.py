"""
Core lake generation functionality.
"""

from .alea_prng import AleaPRNG
from .grid import BoundingBox, Grid, Point
from .rasterizer import rasterize_polygon, rasterize_to_mask
from .shore_distance import compute_shore_distance, find_shore_cells
from .depth_profile import DepthProfile, choose_steepness
from .lakes import Lake, LakeOptions, synthesize_lake
from .map_compositor import MapCompositor, MapParameters, MapResult, generate

__all__ = ['AleaPRNG', 'BoundingBox', 'Grid', 'Point',
           'rasterize_polygon', 'rasterize_to_mask',
           'compute_shore_distance', 'find_shore_cells',
           'DepthProfile', 'choose_steepness',
           'Lake', 'LakeOptions', 'synthesize_lake',
           'MapCompositor', 'MapParameters', 'MapResult', 'generate']
