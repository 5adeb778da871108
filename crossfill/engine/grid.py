"""Grid representation and span helpers."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import BLANK, BLOCK, LETTERS, Direction
from ..core.exceptions import GridLoadError, PreconditionError
from ..core.models import Attribute, Point, Span
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

_VALID_CHARS = frozenset(LETTERS + BLANK + BLOCK)


class Grid:
    """A fixed-size crossword layout holding letters, blanks and blocks.

    Spans are derived once from the layout and shared by every copy of the
    grid; only the cell contents diverge between copies.
    """

    def __init__(self, lines: Sequence[str], name: str = "0") -> None:
        self.name = name
        self.cells: List[List[str]] = [list(line) for line in lines]
        self.spans: Tuple[Span, ...] = ()
        self._spans_derived = False
        self._check_layout()

    def _check_layout(self) -> None:
        if not self.cells or not self.cells[0]:
            raise GridLoadError(f"Grid {self.name!r} has no cells")
        width = len(self.cells[0])
        for index, row in enumerate(self.cells):
            if len(row) != width:
                raise GridLoadError(
                    f"Grid {self.name!r} row {index} has {len(row)} cells, expected {width}"
                )
            for char in row:
                if char not in _VALID_CHARS:
                    raise GridLoadError(
                        f"Grid {self.name!r} row {index} holds invalid character {char!r}"
                    )
        if all(char == BLOCK for row in self.cells for char in row):
            raise GridLoadError(f"Grid {self.name!r} has no open cells")

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def max_size(self) -> int:
        """Longest span the layout could ever contain."""
        return max(self.rows, self.cols)

    @property
    def spans_derived(self) -> bool:
        return self._spans_derived

    def derive_spans(self) -> Tuple[Span, ...]:
        """Walk the grid across then down, recording every run of open cells."""

        if self._spans_derived:
            raise PreconditionError(f"Spans already derived for grid {self.name!r}")
        spans = self._derive(Direction.ACROSS) + self._derive(Direction.DOWN)
        self.spans = tuple(spans)
        self._spans_derived = True
        LOGGER.debug("Grid %s: derived %d spans", self.name, len(self.spans))
        return self.spans

    def _derive(self, direction: Direction) -> List[Span]:
        spans: List[Span] = []
        point = Point(0, 0)
        while self.in_bounds(point):
            while self.in_bounds(point) and self.is_block(point):
                point = self.advance(point, direction)
            if not self.in_bounds(point):
                break

            origin = point
            length = 0
            same_line = True
            while same_line:
                point, same_line = self.step(point, direction)
                length += 1
                if same_line and self.is_block(point):
                    break
            spans.append(Span(origin, length, direction))
        return spans

    def advance(self, point: Point, direction: Direction) -> Point:
        """Move one cell forward, wrapping onto the next row or column."""
        return self.step(point, direction)[0]

    def step(self, point: Point, direction: Direction) -> Tuple[Point, bool]:
        """Like :meth:`advance`, also reporting whether the move stayed on the same line."""

        if direction == Direction.DOWN:
            if point.row + 1 >= self.rows:
                return Point(0, point.col + 1), False
            return Point(point.row + 1, point.col), True
        if point.col + 1 >= self.cols:
            return Point(point.row + 1, 0), False
        return Point(point.row, point.col + 1), True

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.row < self.rows and 0 <= point.col < self.cols

    def char_at(self, point: Point) -> str:
        if not self.in_bounds(point):
            raise PreconditionError(f"Point {point} outside {self.rows}x{self.cols} grid")
        return self.cells[point.row][point.col]

    def set_char(self, point: Point, char: str) -> None:
        if not self.in_bounds(point):
            raise PreconditionError(f"Point {point} outside {self.rows}x{self.cols} grid")
        self.cells[point.row][point.col] = char

    def is_block(self, point: Point) -> bool:
        return self.char_at(point) == BLOCK

    def is_blank(self, point: Point) -> bool:
        return self.char_at(point) == BLANK

    def is_letter(self, point: Point) -> bool:
        return self.char_at(point) in LETTERS

    # ------------------------------------------------------------------
    # Span access
    # ------------------------------------------------------------------
    def read_span(self, span: Span) -> Tuple[str, Attribute]:
        chars: List[str] = []
        has_letters = False
        has_blanks = False
        for index in range(span.length):
            char = self.char_at(span.point(index))
            if char == BLANK:
                has_blanks = True
            elif char in LETTERS:
                has_letters = True
            chars.append(char)
        return "".join(chars), Attribute(has_letters=has_letters, has_blanks=has_blanks)

    def write_span(self, span: Span, text: str) -> None:
        if len(text) != span.length:
            raise PreconditionError(
                f"Cannot write {text!r} ({len(text)} letters) into span {span}"
            )
        for index, char in enumerate(text):
            self.set_char(span.point(index), char)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def copy(self) -> "Grid":
        """Return a grid with independent cells sharing this grid's spans."""

        clone = Grid.__new__(Grid)
        clone.name = self.name
        clone.cells = [list(row) for row in self.cells]
        clone.spans = self.spans
        clone._spans_derived = self._spans_derived
        return clone

    def snapshot(self) -> Tuple[str, ...]:
        return tuple("".join(row) for row in self.cells)

    def count_cells(self, chars: Optional[Iterable[str]] = None) -> int:
        wanted = frozenset(chars) if chars is not None else frozenset(LETTERS)
        return sum(1 for row in self.cells for char in row if char in wanted)

    def __str__(self) -> str:
        return "\n".join(self.snapshot())
