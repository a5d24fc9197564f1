"""
Depth profile: shore distance to banded water depth.

Depth follows ``max_depth * (distance / max_distance) ** steepness`` and is
floored to a multiple of ``band`` so that a lake renders as distinct
contour bands rather than a smooth gradient. A larger steepness keeps the
deep water concentrated near the centre.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .alea_prng import AleaPRNG
from .grid import Grid

DEFAULT_STEEPNESS_RANGE = (1.8, 2.5)
DEPTH_BAND = 10


def choose_steepness(
    prng: AleaPRNG, steepness_range: Tuple[float, float] = DEFAULT_STEEPNESS_RANGE
) -> float:
    """Draw a lake's steepness exponent uniformly from the range."""
    low, high = steepness_range
    return prng.uniform(low, high)


@dataclass(frozen=True)
class DepthProfile:
    """Power-law depth curve for one lake."""

    max_depth: int
    steepness: float
    band: int = DEPTH_BAND

    def __post_init__(self):
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.band <= 0:
            raise ValueError(f"band must be positive, got {self.band}")

    def depth_for(self, distance: int, max_distance: int) -> int:
        """
        Quantized depth of a cell.

        Args:
            distance: Cell's shore distance; -1 marks a cell the flood missed
            max_distance: Largest shore distance found in the lake

        Returns:
            Depth in [0, max_depth]
        """
        if distance < 0:
            return self.max_depth
        if max_distance <= 0:
            ratio = 0.0
        else:
            ratio = min(distance / max_distance, 1.0)
        raw = self.max_depth * ratio ** self.steepness
        banded = int(raw // self.band) * self.band
        return max(0, min(banded, self.max_depth))

    def apply(self, distance_map: Grid, mask: np.ndarray) -> Grid:
        """Depth for every filled cell of ``mask``; 0 elsewhere."""
        distances = distance_map.values
        max_distance = int(distances.max()) if distances.size else 0
        depths = Grid(distance_map.width, distance_map.height)
        for y, x in zip(*np.nonzero(mask)):
            depths.values[y, x] = self.depth_for(int(distances[y, x]), max_distance)
        return depths
