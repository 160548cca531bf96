"""Maze generation and structural analysis toolkit."""

__all__ = [
    "AbstractMazeGenerator",
    "WallRemoval",
    "Cell",
    "Coord",
    "Direction",
    "Grid",
    "DepthFirstGenerator",
    "PrimGenerator",
    "KruskalGenerator",
    "DisjointSet",
    "ALGORITHMS",
    "GENERATORS",
    "get_generator",
    "MazeAnalyzer",
    "MazeMetrics",
    "quality_index",
    "render_ascii",
    "render_image",
    "save_image",
    "MazeError",
    "InvalidDimensions",
    "UnknownAlgorithm",
    "InvalidMaze",
]

from .base import AbstractMazeGenerator, WallRemoval
from .grid import Cell, Coord, Direction, Grid
from .generators import (
    ALGORITHMS,
    GENERATORS,
    DepthFirstGenerator,
    DisjointSet,
    KruskalGenerator,
    PrimGenerator,
    get_generator,
)
from .analyzer import MazeAnalyzer, MazeMetrics, quality_index
from .render import render_ascii, render_image, save_image
from .errors import InvalidDimensions, InvalidMaze, MazeError, UnknownAlgorithm
