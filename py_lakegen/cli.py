"""Command line entry point: generate a lake map and print it."""

import argparse
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .config import settings
from .core.lake_analysis import summarize_map
from .core.map_compositor import MapCompositor, MapParameters
from .logging_config import configure_logging
from .render.ascii_renderer import render_map

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a terrain map with lakes")
    parser.add_argument("--width", type=int, default=settings.default_map_width)
    parser.add_argument("--height", type=int, default=settings.default_map_height)
    parser.add_argument(
        "--lakes", type=int, default=settings.default_lake_count,
        help="Number of lakes to attempt",
    )
    parser.add_argument(
        "--min-distance", type=float, default=settings.default_min_lake_distance,
        help="Minimum distance between lake centers",
    )
    parser.add_argument("--max-depth", type=int, default=settings.default_max_depth)
    parser.add_argument(
        "--seed", default=settings.default_seed,
        help="Seed for reproducible maps (random when omitted)",
    )
    parser.add_argument(
        "--stats", action="store_true", help="Log summary statistics of the map"
    )
    parser.add_argument("--log-level", default=None, help="Override the log level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level)

    try:
        params = MapParameters(
            width=args.width,
            height=args.height,
            lake_count=args.lakes,
            min_lake_distance=args.min_distance,
            max_depth=args.max_depth,
        )
    except ValidationError as e:
        parser.error(f"invalid map parameters: {e}")

    result = MapCompositor(params, seed=args.seed).compose()
    print(render_map(result.global_map))

    if args.stats:
        stats = summarize_map(result.global_map)
        logger.info(
            "Map statistics",
            seed=result.seed,
            lakes_placed=len(result.lakes),
            lakes_skipped=result.skipped,
            water_cells=stats.water_cells,
            water_percent=round(stats.water_percent, 1),
            regions=stats.region_count,
            max_depth=stats.max_depth,
            depth_histogram=stats.depth_histogram,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
