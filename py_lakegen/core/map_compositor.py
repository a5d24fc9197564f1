"""
Map composition: lake placement and merging.

Lakes are placed one at a time. Each gets up to ``MAX_PLACEMENT_ATTEMPTS``
random centers; the first center far enough from every accepted lake wins,
and a lake that never finds one is skipped. Accepted lakes are merged into
the global map in placement order, and a cell claimed by an earlier lake
keeps its depth.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import structlog
from pydantic import BaseModel, Field

from .alea_prng import AleaPRNG
from .grid import BoundingBox, Grid, Point
from .lakes import Lake, LakeOptions, synthesize_lake
from ..utils.random import resolve_prng

logger = structlog.get_logger()

MAX_PLACEMENT_ATTEMPTS = 100


class MapParameters(BaseModel):
    """Caller-supplied generation parameters, validated up front."""

    width: int = Field(..., ge=1, description="Map width in cells")
    height: int = Field(..., ge=1, description="Map height in cells")
    lake_count: int = Field(..., ge=0, description="Number of lakes to attempt")
    min_lake_distance: float = Field(
        ..., ge=0, description="Minimum Euclidean distance between lake centers"
    )
    max_depth: int = Field(..., ge=1, description="Deepest allowed water depth")


@dataclass
class MapResult:
    """Outcome of one composition run."""

    global_map: Grid
    lakes: List[Lake] = field(default_factory=list)
    skipped: int = 0
    seed: Optional[str] = None


class MapCompositor:
    """Places lakes on a map and merges their depth maps."""

    def __init__(
        self,
        params: MapParameters,
        lake_options: Optional[LakeOptions] = None,
        prng: Optional[AleaPRNG] = None,
        seed: Optional[str] = None,
    ):
        """
        Initialize the compositor.

        Args:
            params: Validated map parameters
            lake_options: Lake shape options; max_depth is taken from params
            prng: Explicit random source, takes precedence over seed
            seed: Seed string used when no prng is given
        """
        self.params = params
        if lake_options is None:
            lake_options = LakeOptions(max_depth=params.max_depth)
        elif lake_options.max_depth != params.max_depth:
            raise ValueError(
                f"lake_options.max_depth ({lake_options.max_depth}) does not match "
                f"params.max_depth ({params.max_depth})"
            )
        self.lake_options = lake_options
        self.prng = resolve_prng(prng, seed)
        self.bounds = BoundingBox(0, 0, params.width - 1, params.height - 1)

    def _far_enough(self, candidate: Point, accepted: Sequence[Lake]) -> bool:
        for lake in accepted:
            dx = candidate.x - lake.center.x
            dy = candidate.y - lake.center.y
            if math.hypot(dx, dy) < self.params.min_lake_distance:
                return False
        return True

    def pick_center(self, accepted: Sequence[Lake]) -> Optional[Point]:
        """Sample a lake center, or None after the attempt cap."""
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            candidate = Point(
                self.prng.randint(0, self.params.width - 1),
                self.prng.randint(0, self.params.height - 1),
            )
            if self._far_enough(candidate, accepted):
                return candidate
        return None

    def merge_lake(self, global_map: Grid, lake: Lake) -> int:
        """
        Copy a lake's depths into unclaimed cells of the global map.

        Returns:
            Number of cells written
        """
        overlap = lake.bounds.intersect(self.bounds)
        if overlap is None:
            return 0

        written = 0
        for y in range(overlap.min_y, overlap.max_y + 1):
            for x in range(overlap.min_x, overlap.max_x + 1):
                depth = lake.local_depth(x, y)
                if depth > 0 and global_map.get(x, y) == 0:
                    global_map.set(x, y, depth)
                    written += 1
        return written

    def compose(self) -> MapResult:
        """Place, synthesize and merge every requested lake."""
        params = self.params
        result = MapResult(
            global_map=Grid(params.width, params.height),
            seed=str(self.prng.seed),
        )

        for index in range(params.lake_count):
            center = self.pick_center(result.lakes)
            if center is None:
                result.skipped += 1
                logger.debug("Lake placement exhausted", lake_index=index)
                continue

            lake = synthesize_lake(center, self.lake_options, self.prng)
            written = self.merge_lake(result.global_map, lake)
            result.lakes.append(lake)
            logger.debug(
                "Lake placed",
                lake_index=index,
                center=tuple(center),
                cells_written=written,
            )

        logger.info(
            "Map generation completed",
            width=params.width,
            height=params.height,
            requested=params.lake_count,
            placed=len(result.lakes),
            skipped=result.skipped,
            seed=result.seed,
        )
        return result


def generate(
    width: int,
    height: int,
    lake_count: int,
    min_lake_distance: float,
    max_depth: int,
    seed: Optional[str] = None,
    prng: Optional[AleaPRNG] = None,
) -> Grid:
    """
    Generate a lake map.

    Args:
        width: Map width in cells
        height: Map height in cells
        lake_count: Number of lakes to attempt
        min_lake_distance: Minimum distance between lake centers
        max_depth: Deepest allowed depth
        seed: Optional seed string for reproducible output
        prng: Optional explicit random source

    Returns:
        Global map grid, 0 for land and positive depth for water

    Raises:
        pydantic.ValidationError: If any parameter is out of range
    """
    params = MapParameters(
        width=width,
        height=height,
        lake_count=lake_count,
        min_lake_distance=min_lake_distance,
        max_depth=max_depth,
    )
    return MapCompositor(params, prng=prng, seed=seed).compose().global_map
