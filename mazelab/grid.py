"""Cell and wall storage for rectangular mazes."""

from __future__ import annotations

import operator
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple

import numpy as np

from .errors import InvalidDimensions

Coord = Tuple[int, int]

WALL = 1
PATH = 0


class Direction(Enum):
    """Compass directions as (row, col) offsets, in wall-flag order."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def drow(self) -> int:
        return self.value[0]

    @property
    def dcol(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def slot(self) -> int:
        return _SLOTS[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}
_SLOTS = {direction: slot for slot, direction in enumerate(Direction)}


@dataclass
class Cell:
    row: int
    col: int
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def has_wall(self, direction: Direction) -> bool:
        return self.walls[direction.slot]

    def open_count(self) -> int:
        return sum(1 for wall in self.walls if not wall)


class Grid:
    """A fixed-size rectangular maze whose cells start fully walled.

    Cells are addressed by ``(row, col)``. Walls are stored on both sides of
    every shared edge and :meth:`remove_wall` always clears the pair, so the
    two views of a wall never disagree.
    """

    def __init__(self, width: int, height: int) -> None:
        if isinstance(width, bool) or isinstance(height, bool):
            raise InvalidDimensions(width, height)
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError as exc:
            raise InvalidDimensions(width, height) from exc
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        self._cells = [Cell(row, col) for row in range(height) for col in range(width)]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, open_walls={self.open_wall_count()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and all(a.walls == b.walls for a, b in zip(self._cells, other._cells))
        )

    @property
    def size(self) -> int:
        return self.width * self.height

    # ------------------------------------------------------------------

    def in_bounds(self, cell: Coord) -> bool:
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width

    def index(self, cell: Coord) -> int:
        self._check(cell)
        row, col = cell
        return row * self.width + col

    def coord_at(self, index: int) -> Coord:
        return divmod(index, self.width)

    def cell(self, cell: Coord) -> Cell:
        return self._cells[self.index(cell)]

    def coordinates(self) -> Iterator[Coord]:
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def step(self, cell: Coord, direction: Direction) -> Coord:
        row, col = cell
        return (row + direction.drow, col + direction.dcol)

    def adjacent(self, cell: Coord) -> List[Tuple[Direction, Coord]]:
        """Return ``(direction, neighbor)`` pairs for in-bounds neighbors."""

        self._check(cell)
        pairs: List[Tuple[Direction, Coord]] = []
        for direction in Direction:
            neighbor = self.step(cell, direction)
            if self.in_bounds(neighbor):
                pairs.append((direction, neighbor))
        return pairs

    def neighbors(self, cell: Coord) -> List[Coord]:
        return [neighbor for _, neighbor in self.adjacent(cell)]

    def direction_between(self, source: Coord, target: Coord) -> Direction:
        delta = (target[0] - source[0], target[1] - source[1])
        for direction in Direction:
            if direction.value == delta:
                return direction
        raise ValueError(f"Cells {source} and {target} are not adjacent")

    # ------------------------------------------------------------------

    def has_wall(self, cell: Coord, direction: Direction) -> bool:
        """Return whether ``cell`` is walled on ``direction``.

        The outer boundary always counts as a wall.
        """

        return self.cell(cell).has_wall(direction)

    def remove_wall(self, cell: Coord, direction: Direction) -> None:
        """Open the wall on ``cell``'s ``direction`` side and its mirror."""

        source = self.cell(cell)
        neighbor = self.step(cell, direction)
        if not self.in_bounds(neighbor):
            raise IndexError(f"Cannot remove boundary wall {direction.name} of cell {cell}")
        target = self.cell(neighbor)
        source.walls[direction.slot] = False
        target.walls[direction.opposite.slot] = False

    def passages(self, cell: Coord) -> List[Coord]:
        """Return the neighbors reachable from ``cell`` through an open wall."""

        current = self.cell(cell)
        return [
            neighbor
            for direction, neighbor in self.adjacent(cell)
            if not current.has_wall(direction)
        ]

    def degree(self, cell: Coord) -> int:
        return self.cell(cell).open_count()

    def degree_map(self) -> np.ndarray:
        degrees = np.fromiter(
            (cell.open_count() for cell in self._cells), dtype=np.int64, count=self.size
        )
        return degrees.reshape(self.height, self.width)

    def open_wall_count(self) -> int:
        """Count internal openings, each shared edge once."""

        east = Direction.EAST.slot
        south = Direction.SOUTH.slot
        return sum(
            (not cell.walls[east]) + (not cell.walls[south]) for cell in self._cells
        )

    def is_pristine(self) -> bool:
        return all(all(cell.walls) for cell in self._cells)

    def is_connected(self) -> bool:
        start = (0, 0)
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in self.passages(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return len(seen) == self.size

    def to_block_grid(self) -> np.ndarray:
        """Expand the maze into a ``(2H+1, 2W+1)`` array of WALL/PATH blocks."""

        blocks = np.full((2 * self.height + 1, 2 * self.width + 1), WALL, dtype=np.uint8)
        for cell in self._cells:
            r, c = 2 * cell.row + 1, 2 * cell.col + 1
            blocks[r, c] = PATH
            if not cell.has_wall(Direction.EAST):
                blocks[r, c + 1] = PATH
            if not cell.has_wall(Direction.SOUTH):
                blocks[r + 1, c] = PATH
        return blocks

    # ------------------------------------------------------------------

    def _check(self, cell: Coord) -> None:
        if not self.in_bounds(cell):
            raise IndexError(f"Cell {cell} is outside the {self.width}x{self.height} grid")


__all__ = ["Cell", "Coord", "Direction", "Grid", "PATH", "WALL"]
