"""
Post-generation analysis of a lake map.

This module handles:
- Labelling 4-connected water regions
- Summary statistics (coverage, region count, depth histogram)
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np
from scipy import ndimage

from .grid import Grid

# 4-connectivity, matching the shore distance transform
FOUR_CONNECTED = np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=bool)


@dataclass
class MapStatistics:
    """Aggregate figures for a generated map."""

    width: int
    height: int
    water_cells: int
    water_percent: float
    region_count: int
    max_depth: int
    depth_histogram: Dict[int, int] = field(default_factory=dict)  # positive depths only


def label_water_regions(global_map: Grid) -> Tuple[np.ndarray, int]:
    """
    Label connected water regions.

    Returns:
        (labels, count) where labels has the map's (height, width) shape,
        0 for land and 1..count for each region
    """
    labels, count = ndimage.label(global_map.values > 0, structure=FOUR_CONNECTED)
    return labels, int(count)


def summarize_map(global_map: Grid) -> MapStatistics:
    values = global_map.values
    water = values > 0
    water_cells = int(water.sum())
    total = values.size

    _, region_count = label_water_regions(global_map)
    depths, counts = np.unique(values[water], return_counts=True)

    return MapStatistics(
        width=global_map.width,
        height=global_map.height,
        water_cells=water_cells,
        water_percent=(water_cells / total * 100) if total else 0.0,
        region_count=region_count,
        max_depth=int(values.max()) if total else 0,
        depth_histogram={int(d): int(c) for d, c in zip(depths, counts)},
    )
