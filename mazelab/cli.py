"""Command line front end: generate a maze, print it and report its metrics."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from .analyzer import MazeAnalyzer, MazeMetrics
from .errors import MazeError
from .generators import ALGORITHMS, get_generator
from .grid import Grid
from .render import DEFAULT_CELL_SIZE, render_ascii, save_image

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mazelab",
        description="Generate mazes using various algorithms and measure their quality",
    )
    parser.add_argument("-w", "--width", type=int, required=True, help="Width of the maze in cells")
    parser.add_argument("-g", "--height", type=int, required=True, help="Height of the maze in cells")
    parser.add_argument(
        "-a",
        "--algorithm",
        type=str,
        required=True,
        help=f"Generation algorithm ({', '.join(ALGORITHMS)})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible mazes")
    parser.add_argument("--image", type=Path, default=None, help="Also save a PNG rendering here")
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE, help="Pixel size of one block in the PNG")
    parser.add_argument(
        "--show-path",
        action="store_true",
        help="Trace the longest path on the PNG rendering",
    )
    parser.add_argument("--json", action="store_true", help="Print metrics as JSON instead of text")
    parser.add_argument("--no-render", action="store_true", help="Skip the ASCII drawing")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def format_report(metrics: MazeMetrics) -> str:
    return "\n".join(
        [
            "Maze Quality Metrics:",
            f"Dead ends: {metrics.dead_ends}",
            f"Longest path: {metrics.longest_path}",
            f"Average path length: {metrics.average_path_length:.2f}",
            f"Branching factor: {metrics.branching_factor:.2f}",
            f"Quality Index: {metrics.quality_index:.4f}",
        ]
    )


def run(args: argparse.Namespace) -> None:
    generator = get_generator(args.algorithm, seed=args.seed)
    grid = Grid(args.width, args.height)

    started = time.perf_counter()
    generator.generate(grid)
    elapsed = time.perf_counter() - started
    logger.info("Generated %dx%d maze with %s in %.6fs", grid.width, grid.height, generator.name, elapsed)

    metrics = MazeAnalyzer().analyze(grid)

    if args.image is not None:
        path = metrics.longest_path_cells if args.show_path else None
        target = save_image(grid, args.image, cell_size=args.cell_size, path=path)
        logger.info("Saved maze image to %s", target)

    if args.json:
        payload = metrics.to_dict()
        payload["algorithm"] = generator.name
        payload["elapsed_seconds"] = elapsed
        print(json.dumps(payload, indent=2))
        return

    print(f"Maze generated using {generator.name} algorithm:")
    if not args.no_render:
        print(render_ascii(grid))
    print(f"Time taken: {elapsed:.6f}s")
    print()
    print(format_report(metrics))


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    try:
        run(args)
    except MazeError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
