"""Randomized depth-first (recursive backtracker) maze generator."""

from __future__ import annotations

from typing import List

from ..base import AbstractMazeGenerator, WallRemoval
from ..grid import Coord, Grid

START: Coord = (0, 0)


class DepthFirstGenerator(AbstractMazeGenerator):
    """Carve long winding corridors by walking until stuck, then backtracking.

    The walk uses an explicit stack instead of recursion so large grids do not
    hit the interpreter's recursion limit.
    """

    name = "dfs"

    def _carve(self, grid: Grid) -> List[WallRemoval]:
        trace: List[WallRemoval] = []
        visited = {START}
        stack: List[Coord] = [START]

        while stack:
            current = stack[-1]
            options = [
                (direction, neighbor)
                for direction, neighbor in grid.adjacent(current)
                if neighbor not in visited
            ]
            if options:
                direction, neighbor = self._rng.choice(options)
                self._open(grid, current, direction, trace)
                visited.add(neighbor)
                stack.append(neighbor)
            else:
                stack.pop()

        return trace


__all__ = ["DepthFirstGenerator"]
