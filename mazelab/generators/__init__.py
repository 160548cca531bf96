"""Maze generation algorithms and the name registry used by the CLI."""

from __future__ import annotations

import random
from typing import Dict, Optional, Type

from ..base import AbstractMazeGenerator
from ..errors import UnknownAlgorithm
from .dfs import DepthFirstGenerator
from .kruskal import DisjointSet, KruskalGenerator
from .prim import PrimGenerator

GENERATORS: Dict[str, Type[AbstractMazeGenerator]] = {
    DepthFirstGenerator.name: DepthFirstGenerator,
    PrimGenerator.name: PrimGenerator,
    KruskalGenerator.name: KruskalGenerator,
}
ALGORITHMS = tuple(GENERATORS)


def get_generator(
    name: str,
    rng: Optional[random.Random] = None,
    *,
    seed: Optional[int] = None,
) -> AbstractMazeGenerator:
    """Instantiate the generator registered under ``name``."""

    key = name.strip().lower()
    try:
        generator_cls = GENERATORS[key]
    except KeyError as exc:
        raise UnknownAlgorithm(name, ALGORITHMS) from exc
    return generator_cls(rng, seed=seed)


__all__ = [
    "ALGORITHMS",
    "GENERATORS",
    "DepthFirstGenerator",
    "DisjointSet",
    "KruskalGenerator",
    "PrimGenerator",
    "get_generator",
]
