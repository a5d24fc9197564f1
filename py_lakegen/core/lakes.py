"""
Lake synthesis.

A lake starts as a noisy, roughly elliptical contour around its center.
The contour is rasterized into a local mask sized to its bounding box,
the shore distance of every cell is computed, and a single per-lake
steepness turns distances into banded depths.
"""

import math
from dataclasses import dataclass, field
from typing import Tuple

import structlog

from .alea_prng import AleaPRNG
from .depth_profile import DEFAULT_STEEPNESS_RANGE, DepthProfile, choose_steepness
from .grid import BoundingBox, Grid, Point
from .rasterizer import rasterize_to_mask
from .shore_distance import compute_shore_distance

logger = structlog.get_logger()


@dataclass
class LakeOptions:
    """Shape and depth parameters for lake synthesis."""

    max_depth: int = 40
    vertex_range: Tuple[int, int] = (8, 12)  # inclusive
    radius_range: Tuple[float, float] = (8.0, 15.0)  # base radius per axis
    radius_jitter: float = 0.2  # +/- fraction applied per vertex
    steepness_range: Tuple[float, float] = DEFAULT_STEEPNESS_RANGE

    def __post_init__(self):
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        low, high = self.vertex_range
        if low < 3 or high < low:
            raise ValueError(f"Invalid vertex_range {self.vertex_range}")
        low, high = self.radius_range
        if low <= 0 or high < low:
            raise ValueError(f"Invalid radius_range {self.radius_range}")
        if not 0 <= self.radius_jitter < 1:
            raise ValueError(f"radius_jitter must be in [0, 1), got {self.radius_jitter}")
        low, high = self.steepness_range
        if low <= 0 or high < low:
            raise ValueError(f"Invalid steepness_range {self.steepness_range}")


@dataclass(frozen=True)
class Lake:
    """A synthesized lake; never modified after creation."""

    center: Point
    contour: Tuple[Point, ...]
    bounds: BoundingBox
    depth_map: Grid = field(compare=False)  # local, origin at bounds.min
    distance_map: Grid = field(compare=False)
    steepness: float = 0.0

    def local_depth(self, x: int, y: int) -> int:
        """Depth at global ``(x, y)``; 0 outside the lake's box."""
        if not self.bounds.contains(x, y):
            return 0
        return self.depth_map.get(x - self.bounds.min_x, y - self.bounds.min_y)

    @property
    def cell_count(self) -> int:
        return int((self.depth_map.values > 0).sum())

    @property
    def deepest(self) -> int:
        return int(self.depth_map.values.max()) if self.depth_map.values.size else 0


def generate_contour(
    center: Point, options: LakeOptions, prng: AleaPRNG
) -> Tuple[Point, ...]:
    """
    Noisy elliptical outline around ``center``.

    Two base radii, one per axis, are drawn once for the lake. Each vertex
    at angle ``2*pi*i/n`` jitters both radii independently, which is what
    keeps the outline from being a clean ellipse.
    """
    n = prng.randint(*options.vertex_range)
    base_rx = prng.uniform(*options.radius_range)
    base_ry = prng.uniform(*options.radius_range)
    jitter = options.radius_jitter

    contour = []
    for i in range(n):
        angle = 2 * math.pi * i / n
        rx = base_rx * prng.uniform(1 - jitter, 1 + jitter)
        ry = base_ry * prng.uniform(1 - jitter, 1 + jitter)
        contour.append(
            Point(
                int(round(center.x + math.cos(angle) * rx)),
                int(round(center.y + math.sin(angle) * ry)),
            )
        )
    return tuple(contour)


def contour_bounds(contour) -> BoundingBox:
    return BoundingBox.from_points(contour)


def synthesize_lake(center: Point, options: LakeOptions, prng: AleaPRNG) -> Lake:
    """
    Build a complete lake around ``center``.

    Args:
        center: Lake center in global coordinates
        options: Shape and depth parameters
        prng: Random source, advanced by the contour and steepness draws

    Returns:
        Lake with read-only local depth and distance maps
    """
    contour = generate_contour(center, options, prng)
    bounds = contour_bounds(contour)

    mask = rasterize_to_mask(contour, bounds)
    distance_map = compute_shore_distance(mask)

    steepness = choose_steepness(prng, options.steepness_range)
    profile = DepthProfile(max_depth=options.max_depth, steepness=steepness)
    depth_map = profile.apply(distance_map, mask)

    lake = Lake(
        center=center,
        contour=contour,
        bounds=bounds,
        depth_map=depth_map.freeze(),
        distance_map=distance_map.freeze(),
        steepness=steepness,
    )
    logger.debug(
        "Lake synthesized",
        center=tuple(center),
        vertices=len(contour),
        filled_cells=int(mask.sum()),
        water_cells=lake.cell_count,
        steepness=round(steepness, 3),
    )
    return lake
