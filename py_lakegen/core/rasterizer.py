"""
Scanline polygon fill.

Turns a closed contour into the integer cells it encloses. For each row
``y`` the x positions where polygon edges cross the row are collected,
sorted and filled pairwise.
"""

import math
from typing import List, Sequence, Set

import numpy as np

from .grid import BoundingBox, Point


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scanline_intersections(contour: Sequence[Point], y: int) -> List[int]:
    """
    X coordinates where the contour's edges cross row ``y``, sorted.

    An edge crosses the row when exactly one of its endpoints has
    ``Y <= y``. The last vertex connects back to the first.
    """
    crossings = []
    n = len(contour)
    for i in range(n):
        p1 = contour[i]
        p2 = contour[(i + 1) % n]
        if (p1.y <= y) == (p2.y <= y):
            continue
        # p1.y != p2.y here, the crossing test excludes horizontal edges
        t = (y - p1.y) / (p2.y - p1.y)
        crossings.append(_round_half_up(p1.x + t * (p2.x - p1.x)))
    crossings.sort()
    return crossings


def fill_spans(intersections: Sequence[int], min_x: int, max_x: int) -> List[int]:
    """
    Expand sorted intersections into the filled x positions of one row.

    Intersections are paired ``(0, 1), (2, 3), ...`` and each pair fills an
    inclusive span clamped to ``[min_x, max_x]``. With an odd count the last
    intersection has no partner and is ignored.
    """
    xs = []
    for i in range(0, len(intersections) - 1, 2):
        start = max(intersections[i], min_x)
        end = min(intersections[i + 1], max_x)
        xs.extend(range(start, end + 1))
    return xs


def rasterize_polygon(contour: Sequence[Point], bounds: BoundingBox) -> Set[Point]:
    """
    Cells enclosed by ``contour`` within ``bounds``.

    Args:
        contour: Closed polygon vertices in edge order
        bounds: Rows and columns to consider (normally the contour's own box)

    Returns:
        Set of filled grid cells
    """
    cells = set()
    if len(contour) < 3:
        return cells
    for y in range(bounds.min_y, bounds.max_y + 1):
        row = scanline_intersections(contour, y)
        for x in fill_spans(row, bounds.min_x, bounds.max_x):
            cells.add(Point(x, y))
    return cells


def rasterize_to_mask(contour: Sequence[Point], bounds: BoundingBox) -> np.ndarray:
    """
    Same cells as ``rasterize_polygon`` as a local boolean mask.

    The mask has shape ``(bounds.height, bounds.width)`` and its origin is
    ``(bounds.min_x, bounds.min_y)``.
    """
    mask = np.zeros((bounds.height, bounds.width), dtype=bool)
    for cell in rasterize_polygon(contour, bounds):
        mask[cell.y - bounds.min_y, cell.x - bounds.min_x] = True
    return mask
