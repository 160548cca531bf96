"""Structural quality metrics for generated mazes."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .errors import InvalidMaze
from .grid import Coord, Grid

logger = logging.getLogger(__name__)

ORIGIN: Coord = (0, 0)

DEAD_END_WEIGHT = 0.25
LONGEST_PATH_WEIGHT = 0.30
AVERAGE_PATH_WEIGHT = 0.25
BRANCHING_WEIGHT = 0.20
MAX_DEGREE = 4


@dataclass(frozen=True)
class MazeMetrics:
    width: int
    height: int
    cell_count: int
    dead_ends: int
    longest_path: int
    longest_path_cells: Tuple[Coord, ...]
    average_path_length: float
    branching_factor: float
    quality_index: float

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "cell_count": self.cell_count,
            "dead_ends": self.dead_ends,
            "longest_path": self.longest_path,
            "longest_path_cells": [list(cell) for cell in self.longest_path_cells],
            "average_path_length": self.average_path_length,
            "branching_factor": self.branching_factor,
            "quality_index": self.quality_index,
        }


def quality_index(
    cell_count: int,
    dead_ends: int,
    longest_path: int,
    average_path_length: float,
    branching_factor: float,
) -> float:
    """Blend the metrics into one score in ``[0, 1]``.

    Fewer dead ends, longer paths and more branching all raise the score.
    A single cell has nothing to measure and scores 0.
    """

    if cell_count <= 1:
        return 0.0
    span = cell_count - 1
    return (
        DEAD_END_WEIGHT * (1.0 - dead_ends / cell_count)
        + LONGEST_PATH_WEIGHT * longest_path / span
        + AVERAGE_PATH_WEIGHT * average_path_length / span
        + BRANCHING_WEIGHT * branching_factor / MAX_DEGREE
    )


class MazeAnalyzer:
    """Compute dead ends, diameter, mean distance and branching of a maze.

    With ``validate`` on (the default) the grid is checked to be a spanning
    tree first and :class:`InvalidMaze` is raised otherwise. With it off the
    caller vouches for the invariant and a non-tree gives meaningless numbers.
    """

    def __init__(self, *, validate: bool = True) -> None:
        self.validate = validate

    def analyze(self, grid: Grid) -> MazeMetrics:
        if self.validate:
            self.check_spanning_tree(grid)

        degrees = grid.degree_map()
        dead_ends = int(np.count_nonzero(degrees == 1))
        branching = degrees[degrees >= 2]
        branching_factor = float(branching.mean()) if branching.size else 0.0

        path = self.longest_path(grid)
        longest = len(path) - 1
        average = self.average_path_length(grid)

        metrics = MazeMetrics(
            width=grid.width,
            height=grid.height,
            cell_count=grid.size,
            dead_ends=dead_ends,
            longest_path=longest,
            longest_path_cells=tuple(path),
            average_path_length=average,
            branching_factor=branching_factor,
            quality_index=quality_index(grid.size, dead_ends, longest, average, branching_factor),
        )
        logger.debug("Analyzed %dx%d maze: %s", grid.width, grid.height, metrics)
        return metrics

    # ------------------------------------------------------------------

    @staticmethod
    def check_spanning_tree(grid: Grid) -> None:
        expected = grid.size - 1
        opened = grid.open_wall_count()
        if opened != expected:
            raise InvalidMaze(
                f"Spanning tree over {grid.size} cells needs {expected} open walls, found {opened}"
            )
        if not grid.is_connected():
            raise InvalidMaze("Maze passages do not connect every cell")

    def longest_path(self, grid: Grid) -> List[Coord]:
        """Return the cells of one diameter path via two BFS sweeps."""

        first, _, _ = self._sweep(grid, ORIGIN)
        far_end, _, parents = self._sweep(grid, first)
        path = [far_end]
        node = far_end
        while parents[node] is not None:
            node = parents[node]
            path.append(node)
        path.reverse()
        return path

    def average_path_length(self, grid: Grid) -> float:
        """Exact mean distance over every unordered pair of distinct cells.

        In a tree each edge lies on the path of every pair it separates, so
        the distance sum is ``sum(size * (n - size))`` over subtree sizes.
        """

        n = grid.size
        if n < 2:
            return 0.0
        _, distances, parents = self._sweep(grid, ORIGIN)
        order = sorted(distances, key=distances.__getitem__, reverse=True)
        subtree: Dict[Coord, int] = {cell: 1 for cell in order}
        total = 0
        for cell in order:
            parent = parents[cell]
            if parent is None:
                continue
            size = subtree[cell]
            total += size * (n - size)
            subtree[parent] += size
        pairs = n * (n - 1) // 2
        return total / pairs

    @staticmethod
    def _sweep(
        grid: Grid, start: Coord
    ) -> Tuple[Coord, Dict[Coord, int], Dict[Coord, Optional[Coord]]]:
        distances: Dict[Coord, int] = {start: 0}
        parents: Dict[Coord, Optional[Coord]] = {start: None}
        farthest = start
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if distances[current] > distances[farthest]:
                farthest = current
            for neighbor in grid.passages(current):
                if neighbor not in distances:
                    distances[neighbor] = distances[current] + 1
                    parents[neighbor] = current
                    queue.append(neighbor)
        return farthest, distances, parents


__all__ = ["MazeAnalyzer", "MazeMetrics", "quality_index"]
