"""Randomized Prim maze generator."""

from __future__ import annotations

from typing import List, Set

from ..base import AbstractMazeGenerator, WallRemoval
from ..grid import Coord, Grid


class PrimGenerator(AbstractMazeGenerator):
    """Grow the maze outward from a random cell through a random frontier."""

    name = "prim"

    def _carve(self, grid: Grid) -> List[WallRemoval]:
        trace: List[WallRemoval] = []
        start = grid.coord_at(self._rng.randrange(grid.size))
        in_maze: Set[Coord] = {start}
        frontier: List[Coord] = []
        queued: Set[Coord] = set()
        self._extend_frontier(grid, start, in_maze, frontier, queued)

        while frontier:
            # swap-remove keeps each pick O(1)
            pick = self._rng.randrange(len(frontier))
            cell = frontier[pick]
            last = frontier.pop()
            if pick < len(frontier):
                frontier[pick] = last

            anchors = [
                (direction, neighbor)
                for direction, neighbor in grid.adjacent(cell)
                if neighbor in in_maze
            ]
            direction, _ = self._rng.choice(anchors)
            self._open(grid, cell, direction, trace)
            in_maze.add(cell)
            self._extend_frontier(grid, cell, in_maze, frontier, queued)

        return trace

    @staticmethod
    def _extend_frontier(
        grid: Grid,
        cell: Coord,
        in_maze: Set[Coord],
        frontier: List[Coord],
        queued: Set[Coord],
    ) -> None:
        for neighbor in grid.neighbors(cell):
            if neighbor not in in_maze and neighbor not in queued:
                queued.add(neighbor)
                frontier.append(neighbor)


__all__ = ["PrimGenerator"]
