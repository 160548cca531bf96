"""Randomized Kruskal maze generator and its disjoint-set forest."""

from __future__ import annotations

from typing import List

from ..base import AbstractMazeGenerator, WallRemoval
from ..grid import Direction, Grid


class DisjointSet:
    """Array-backed union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(size))
        self.rank = [0] * size
        self.components = size

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, item: int) -> int:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            parent = self.parent[item]
            self.parent[item] = root
            item = parent
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``; False if already merged."""

        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        self.components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)


def candidate_walls(grid: Grid) -> List[WallRemoval]:
    """Every internal wall once, row-major, east edge before south edge."""

    walls: List[WallRemoval] = []
    for row, col in grid.coordinates():
        if col < grid.width - 1:
            walls.append(WallRemoval((row, col), Direction.EAST))
        if row < grid.height - 1:
            walls.append(WallRemoval((row, col), Direction.SOUTH))
    return walls


class KruskalGenerator(AbstractMazeGenerator):
    """Open shuffled walls whenever they join two separate regions."""

    name = "kruskal"

    def _carve(self, grid: Grid) -> List[WallRemoval]:
        trace: List[WallRemoval] = []
        walls = candidate_walls(grid)
        self._rng.shuffle(walls)
        sets = DisjointSet(grid.size)

        for cell, direction in walls:
            neighbor = grid.step(cell, direction)
            if sets.union(grid.index(cell), grid.index(neighbor)):
                self._open(grid, cell, direction, trace)

        return trace


__all__ = ["DisjointSet", "KruskalGenerator", "candidate_walls"]
