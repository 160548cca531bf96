"""Abstract interface shared by the maze generation algorithms."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import ClassVar, List, NamedTuple, Optional, Tuple

from .errors import InvalidDimensions, MazeError
from .grid import Coord, Direction, Grid

logger = logging.getLogger(__name__)


class WallRemoval(NamedTuple):
    """One wall opened by a generator, seen from ``cell``."""

    cell: Coord
    direction: Direction


class AbstractMazeGenerator(ABC):
    """Base class for algorithms that carve a spanning tree into a grid.

    The random source is injected so runs are reproducible: pass a
    ``random.Random`` (or anything offering ``choice``, ``randrange`` and
    ``shuffle``), or a ``seed`` to build one.
    """

    name: ClassVar[str] = ""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def generate(self, grid: Grid) -> List[WallRemoval]:
        """Carve ``grid`` in place and return the walls removed, in order."""

        if grid.width <= 0 or grid.height <= 0:
            raise InvalidDimensions(grid.width, grid.height)
        if not grid.is_pristine():
            raise MazeError(f"{self.name} generator requires a freshly constructed grid")
        trace = self._carve(grid)
        logger.debug(
            "%s carved %dx%d grid with %d wall removals",
            self.name,
            grid.width,
            grid.height,
            len(trace),
        )
        return trace

    def create_maze(self, width: int, height: int) -> Tuple[Grid, List[WallRemoval]]:
        """Build a fresh grid and carve it."""

        grid = Grid(width, height)
        return grid, self.generate(grid)

    @abstractmethod
    def _carve(self, grid: Grid) -> List[WallRemoval]:
        """Remove walls until the passages form a spanning tree."""

    # ------------------------------------------------------------------

    @staticmethod
    def _open(grid: Grid, cell: Coord, direction: Direction, trace: List[WallRemoval]) -> None:
        grid.remove_wall(cell, direction)
        trace.append(WallRemoval(cell, direction))


__all__ = ["AbstractMazeGenerator", "WallRemoval"]
