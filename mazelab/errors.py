"""Exception types raised by maze generation and analysis."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every error surfaced by mazelab."""


class InvalidDimensions(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""

    def __init__(self, width: object, height: object) -> None:
        super().__init__(f"Maze dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class UnknownAlgorithm(MazeError, ValueError):
    """Raised when a generator name is not registered."""

    def __init__(self, name: str, available) -> None:
        choices = ", ".join(available)
        super().__init__(f"Unknown algorithm '{name}' (choose from: {choices})")
        self.name = name


class InvalidMaze(MazeError):
    """Raised when a grid's passages do not form a spanning tree."""


__all__ = ["MazeError", "InvalidDimensions", "UnknownAlgorithm", "InvalidMaze"]
