"""Text and raster renderings of a maze."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw

from .grid import PATH, Coord, Direction, Grid

PathLike = Union[str, Path]

DEFAULT_CELL_SIZE = 32

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
START_COLOR = (220, 30, 30)
GOAL_COLOR = (40, 180, 80)
LINE_COLOR = (220, 0, 0)


def render_ascii(grid: Grid) -> str:
    """Draw the maze with ``+---+`` corners and ``|`` side walls."""

    lines: List[str] = []
    for row in range(grid.height):
        top = ["+"]
        middle = []
        for col in range(grid.width):
            cell = grid.cell((row, col))
            top.append("---" if cell.has_wall(Direction.NORTH) else "   ")
            top.append("+")
            middle.append("|" if cell.has_wall(Direction.WEST) else " ")
            middle.append("   ")
        middle.append("|")
        lines.append("".join(top))
        lines.append("".join(middle))
    lines.append("+---" * grid.width + "+")
    return "\n".join(lines)


def render_image(
    grid: Grid,
    *,
    cell_size: int = DEFAULT_CELL_SIZE,
    path: Optional[Sequence[Coord]] = None,
) -> Image.Image:
    """Paint the block layout of ``grid``, optionally tracing ``path`` in red."""

    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    blocks = grid.to_block_grid()
    rows, cols = blocks.shape
    canvas = Image.new("RGB", (cols * cell_size, rows * cell_size), WALL_COLOR)
    draw = ImageDraw.Draw(canvas)

    for r in range(rows):
        for c in range(cols):
            if blocks[r, c] == PATH:
                _fill_block(draw, (r, c), cell_size, PATH_COLOR)

    if path:
        start = _block_of(path[0])
        goal = _block_of(path[-1])
        _fill_block(draw, start, cell_size, START_COLOR)
        _fill_block(draw, goal, cell_size, GOAL_COLOR)
        thickness = max(2, cell_size // 3)
        points = [_center(_block_of(cell), cell_size) for cell in path]
        if len(points) >= 2:
            draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
        else:
            x, y = points[0]
            half = thickness / 2
            draw.ellipse((x - half, y - half, x + half, y + half), fill=LINE_COLOR)
    return canvas


def save_image(grid: Grid, destination: PathLike, **kwargs) -> Path:
    """Render ``grid`` with :func:`render_image` and write it to disk."""

    target = Path(destination)
    target.parent.mkdir(parents=True, exist_ok=True)
    render_image(grid, **kwargs).save(target)
    return target


# ----------------------------------------------------------------------


def _block_of(cell: Coord) -> Tuple[int, int]:
    row, col = cell
    return 2 * row + 1, 2 * col + 1


def _center(block: Tuple[int, int], cell_size: int) -> Tuple[float, float]:
    r, c = block
    return c * cell_size + cell_size / 2, r * cell_size + cell_size / 2


def _fill_block(
    draw: ImageDraw.ImageDraw,
    block: Tuple[int, int],
    cell_size: int,
    color: Tuple[int, int, int],
) -> None:
    r, c = block
    left = c * cell_size
    top = r * cell_size
    draw.rectangle((left, top, left + cell_size - 1, top + cell_size - 1), fill=color)


__all__ = ["render_ascii", "render_image", "save_image", "DEFAULT_CELL_SIZE"]
