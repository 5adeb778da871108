import unittest

from crossfill.core.constants import Direction
from crossfill.core.exceptions import GridLoadError, PreconditionError
from crossfill.core.models import Point, Span
from crossfill.engine.grid import Grid


LAYOUT = ["..#", "...", "#.."]


def _spans(grid: Grid):
    return [(s.origin.row, s.origin.col, s.length, s.direction) for s in grid.spans]


class GridSpanTests(unittest.TestCase):
    def test_open_grid_spans_across_then_down(self) -> None:
        grid = Grid(["...", "...", "..."])
        grid.derive_spans()
        self.assertEqual(
            _spans(grid),
            [
                (0, 0, 3, Direction.ACROSS),
                (1, 0, 3, Direction.ACROSS),
                (2, 0, 3, Direction.ACROSS),
                (0, 0, 3, Direction.DOWN),
                (0, 1, 3, Direction.DOWN),
                (0, 2, 3, Direction.DOWN),
            ],
        )

    def test_blocks_split_runs(self) -> None:
        grid = Grid(LAYOUT)
        grid.derive_spans()
        self.assertEqual(
            _spans(grid),
            [
                (0, 0, 2, Direction.ACROSS),
                (1, 0, 3, Direction.ACROSS),
                (2, 1, 2, Direction.ACROSS),
                (0, 0, 2, Direction.DOWN),
                (0, 1, 3, Direction.DOWN),
                (1, 2, 2, Direction.DOWN),
            ],
        )

    def test_single_cell_runs_are_spans(self) -> None:
        grid = Grid(["#.#"])
        grid.derive_spans()
        self.assertEqual(
            _spans(grid),
            [(0, 1, 1, Direction.ACROSS), (0, 1, 1, Direction.DOWN)],
        )

    def test_derivation_is_deterministic(self) -> None:
        first = Grid(LAYOUT)
        second = Grid(list(LAYOUT))
        self.assertEqual(first.derive_spans(), second.derive_spans())

    def test_every_open_cell_in_one_span_per_direction(self) -> None:
        layout = ["...#....", ".#...#..", "....#...", "#......#"]
        grid = Grid(layout)
        grid.derive_spans()
        for row in range(grid.rows):
            for col in range(grid.cols):
                point = Point(row, col)
                for direction in Direction:
                    owners = [
                        span
                        for span in grid.spans
                        if span.direction == direction and point in span.cells
                    ]
                    expected = 0 if grid.is_block(point) else 1
                    self.assertEqual(len(owners), expected, (point, direction))
        self.assertTrue(all(span.length >= 1 for span in grid.spans))

    def test_deriving_twice_is_rejected(self) -> None:
        grid = Grid(LAYOUT)
        grid.derive_spans()
        with self.assertRaises(PreconditionError):
            grid.derive_spans()

    def test_step_reports_wrap(self) -> None:
        grid = Grid(["...", "..."])
        self.assertEqual(grid.step(Point(0, 1), Direction.ACROSS), (Point(0, 2), True))
        self.assertEqual(grid.step(Point(0, 2), Direction.ACROSS), (Point(1, 0), False))
        self.assertEqual(grid.step(Point(1, 2), Direction.DOWN), (Point(0, 3), False))
        self.assertEqual(grid.advance(Point(0, 0), Direction.DOWN), Point(1, 0))


class GridContentTests(unittest.TestCase):
    def test_write_then_read_round_trip(self) -> None:
        grid = Grid(LAYOUT)
        grid.derive_spans()
        span = grid.spans[1]
        grid.write_span(span, "ORE")
        text, attr = grid.read_span(span)
        self.assertEqual(text, "ORE")
        self.assertFalse(attr.has_blanks)
        self.assertTrue(attr.is_full)

    def test_read_classifies_content(self) -> None:
        grid = Grid(["C..", "...", "..."])
        grid.derive_spans()
        _, partial = grid.read_span(grid.spans[0])
        _, empty = grid.read_span(grid.spans[1])
        self.assertTrue(partial.is_partial)
        self.assertTrue(empty.is_empty)
        self.assertFalse(empty.is_full)

    def test_write_length_mismatch_is_fatal(self) -> None:
        grid = Grid(LAYOUT)
        grid.derive_spans()
        with self.assertRaises(PreconditionError):
            grid.write_span(grid.spans[0], "CAT")

    def test_out_of_bounds_access_is_fatal(self) -> None:
        grid = Grid(LAYOUT)
        with self.assertRaises(PreconditionError):
            grid.char_at(Point(3, 0))
        with self.assertRaises(PreconditionError):
            grid.set_char(Point(0, -1), "A")
        with self.assertRaises(PreconditionError):
            Span(Point(0, 0), 2, Direction.ACROSS).point(2)

    def test_cell_predicates(self) -> None:
        grid = Grid(["A.#"])
        self.assertTrue(grid.is_letter(Point(0, 0)))
        self.assertTrue(grid.is_blank(Point(0, 1)))
        self.assertTrue(grid.is_block(Point(0, 2)))
        self.assertEqual(grid.max_size, 3)

    def test_copy_is_independent(self) -> None:
        grid = Grid(LAYOUT)
        grid.derive_spans()
        clone = grid.copy()
        clone.write_span(clone.spans[1], "ORE")
        self.assertEqual(grid.snapshot(), tuple(LAYOUT))
        self.assertEqual(clone.snapshot()[1], "ORE")
        self.assertIs(clone.spans, grid.spans)


class GridLayoutValidationTests(unittest.TestCase):
    def test_ragged_rows_rejected(self) -> None:
        with self.assertRaises(GridLoadError):
            Grid(["...", ".."])

    def test_invalid_character_rejected(self) -> None:
        with self.assertRaises(GridLoadError):
            Grid(["..x"])

    def test_empty_layout_rejected(self) -> None:
        with self.assertRaises(GridLoadError):
            Grid([])

    def test_all_block_layout_rejected(self) -> None:
        with self.assertRaises(GridLoadError):
            Grid(["##", "##"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
