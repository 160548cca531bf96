import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from mazelab import Direction, Grid, render_ascii, render_image, save_image
from mazelab.cli import main
from mazelab.render import GOAL_COLOR, PATH_COLOR, START_COLOR, WALL_COLOR


class AsciiRenderTests(unittest.TestCase):
    def test_single_cell(self) -> None:
        self.assertEqual(render_ascii(Grid(1, 1)), "+---+\n|   |\n+---+")

    def test_open_walls_render_as_gaps(self) -> None:
        grid = Grid(2, 2)
        grid.remove_wall((0, 0), Direction.EAST)
        grid.remove_wall((0, 1), Direction.SOUTH)
        grid.remove_wall((1, 1), Direction.WEST)
        expected = "\n".join(
            [
                "+---+---+",
                "|       |",
                "+---+   +",
                "|       |",
                "+---+---+",
            ]
        )
        self.assertEqual(render_ascii(grid), expected)

    def test_line_count(self) -> None:
        lines = render_ascii(Grid(4, 3)).splitlines()
        self.assertEqual(len(lines), 2 * 3 + 1)
        self.assertTrue(all(len(line) == 4 * 4 + 1 for line in lines))


class ImageRenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid(2, 1)
        self.grid.remove_wall((0, 0), Direction.EAST)

    def test_blocks_are_painted(self) -> None:
        image = render_image(self.grid, cell_size=4)
        self.assertEqual(image.size, (20, 12))
        self.assertEqual(image.getpixel((1, 1)), WALL_COLOR)
        self.assertEqual(image.getpixel((6, 6)), PATH_COLOR)
        self.assertEqual(image.getpixel((10, 6)), PATH_COLOR)
        self.assertEqual(image.getpixel((14, 6)), PATH_COLOR)
        self.assertEqual(image.getpixel((18, 6)), WALL_COLOR)

    def test_path_marks_start_and_goal(self) -> None:
        image = render_image(self.grid, cell_size=4, path=[(0, 0), (0, 1)])
        self.assertEqual(image.getpixel((4, 4)), START_COLOR)
        self.assertEqual(image.getpixel((12, 4)), GOAL_COLOR)

    def test_cell_size_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            render_image(self.grid, cell_size=0)

    def test_save_image(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = save_image(self.grid, Path(tmp) / "nested" / "maze.png", cell_size=3)
            self.assertTrue(target.exists())
            with Image.open(target) as image:
                self.assertEqual(image.size, (15, 9))


class CliTests(unittest.TestCase):
    def _run(self, *argv: str):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_text_report(self) -> None:
        code, out, _ = self._run("-w", "4", "-g", "3", "-a", "dfs", "--seed", "1")
        self.assertEqual(code, 0)
        self.assertIn("Maze generated using dfs algorithm:", out)
        self.assertIn("+---+---+---+---+", out)
        self.assertIn("Time taken:", out)
        self.assertIn("Dead ends:", out)
        self.assertIn("Quality Index:", out)

    def test_json_report(self) -> None:
        code, out, _ = self._run("-w", "5", "-g", "5", "-a", "kruskal", "--seed", "3", "--json")
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertEqual(payload["algorithm"], "kruskal")
        self.assertEqual(payload["cell_count"], 25)
        self.assertIn("elapsed_seconds", payload)

    def test_no_render_skips_ascii_drawing(self) -> None:
        _, first, _ = self._run("-w", "6", "-g", "4", "-a", "prim", "--seed", "9", "--no-render")
        _, second, _ = self._run("-w", "6", "-g", "4", "-a", "prim", "--seed", "9")
        self.assertNotIn("+---", first)
        self.assertIn("+---", second)

    def test_unknown_algorithm_exits_non_zero(self) -> None:
        code, _, err = self._run("-w", "4", "-g", "4", "-a", "eller")
        self.assertEqual(code, 1)
        self.assertIn("eller", err)

    def test_non_positive_dimension_exits_non_zero(self) -> None:
        code, _, err = self._run("-w", "0", "-g", "4", "-a", "dfs")
        self.assertEqual(code, 1)
        self.assertIn("positive", err)

    def test_image_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "maze.png"
            code, _, _ = self._run(
                "-w", "3", "-g", "3", "-a", "dfs", "--seed", "2",
                "--image", str(target), "--cell-size", "5", "--show-path",
            )
            self.assertEqual(code, 0)
            with Image.open(target) as image:
                self.assertEqual(image.size, (35, 35))


if __name__ == "__main__":
    unittest.main()
