"""
Grid primitives shared by every stage of lake generation.

All grids are addressed as ``(x, y)``. The backing numpy array is stored
row-major with shape ``(height, width)``, so ``values[y, x]`` is the cell
at ``(x, y)``. Going through ``get``/``set`` keeps callers from mixing the
two conventions.
"""

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np


class Point(NamedTuple):
    """Integer grid coordinate."""

    x: int
    y: int


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive integer bounds of a region."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def intersect(self, other: "BoundingBox") -> Optional["BoundingBox"]:
        """Overlap of two boxes, or None when they are disjoint."""
        min_x = max(self.min_x, other.min_x)
        min_y = max(self.min_y, other.min_y)
        max_x = min(self.max_x, other.max_x)
        max_y = min(self.max_y, other.max_y)
        if min_x > max_x or min_y > max_y:
            return None
        return BoundingBox(min_x, min_y, max_x, max_y)

    @classmethod
    def from_points(cls, points) -> "BoundingBox":
        points = list(points)
        if not points:
            raise ValueError("Cannot bound an empty point set")
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


class Grid:
    """
    Bounds-checked 2-D integer grid.

    Used for the global map, for each lake's local depth map and for the
    shore distance map.
    """

    def __init__(self, width: int, height: int, fill: int = 0, dtype=np.int32):
        if width < 0 or height < 0:
            raise ValueError(f"Grid size must be non-negative, got {width}x{height}")
        self._values = np.full((height, width), fill, dtype=dtype)

    @classmethod
    def from_array(cls, values: np.ndarray) -> "Grid":
        """Wrap a ``(height, width)`` array without copying it."""
        if values.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {values.shape}")
        grid = cls.__new__(cls)
        grid._values = values
        return grid

    @property
    def width(self) -> int:
        return self._values.shape[1]

    @property
    def height(self) -> int:
        return self._values.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._values.shape

    @property
    def values(self) -> np.ndarray:
        """Underlying ``(height, width)`` array."""
        return self._values

    @property
    def frozen(self) -> bool:
        return not self._values.flags.writeable

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"({x}, {y}) out of bounds for {self.width}x{self.height} grid"
            )

    def get(self, x: int, y: int) -> int:
        self._check_bounds(x, y)
        return int(self._values[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        self._check_bounds(x, y)
        self._values[y, x] = value

    def freeze(self) -> "Grid":
        """Make the grid read-only in place and return it."""
        self._values.flags.writeable = False
        return self

    def copy(self) -> "Grid":
        return Grid.from_array(self._values.copy())

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(x, y, value)`` for every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, int(self._values[y, x])

    def to_rows(self) -> List[List[int]]:
        return self._values.tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
