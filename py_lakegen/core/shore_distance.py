"""
Shore distance transform.

Every filled cell of a lake mask gets its 4-connected step distance to the
nearest shore cell, computed with a multi-source breadth-first search.
"""

from collections import deque
from typing import List, Tuple

import numpy as np

from .grid import Grid

UNVISITED = -1
SHORE = 0

NEIGHBOR_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def find_shore_cells(mask: np.ndarray) -> List[Tuple[int, int]]:
    """
    Filled cells touching land or the mask edge.

    Args:
        mask: Boolean array of shape (height, width), True inside the lake

    Returns:
        List of (x, y) shore cells in row order
    """
    height, width = mask.shape
    shore = []
    for y in range(height):
        for x in range(width):
            if not mask[y, x]:
                continue
            for dx, dy in NEIGHBOR_OFFSETS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < width and 0 <= ny < height) or not mask[ny, nx]:
                    shore.append((x, y))
                    break
    return shore


def compute_shore_distance(mask: np.ndarray) -> Grid:
    """
    Distance from each filled cell to the shore.

    Cells outside the lake stay at -1. A filled cell the flood never
    reaches also stays at -1; callers treat it as maximally deep.
    """
    height, width = mask.shape
    distances = Grid(width, height, fill=UNVISITED)
    values = distances.values

    queue = deque()
    for x, y in find_shore_cells(mask):
        values[y, x] = SHORE
        queue.append((x, y))

    while queue:
        x, y = queue.popleft()
        next_distance = values[y, x] + 1
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if mask[ny, nx] and values[ny, nx] == UNVISITED:
                values[ny, nx] = next_distance
                queue.append((nx, ny))

    return distances
