"""Data models supporting the crossword filler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .constants import Direction
from .exceptions import PreconditionError


@dataclass(frozen=True)
class Word:
    """A dictionary entry. Instances are shared between index buckets."""

    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Point:
    row: int = 0
    col: int = 0

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Span:
    """A maximal run of non-blocked cells in one direction."""

    origin: Point
    length: int
    direction: Direction

    @property
    def is_vertical(self) -> bool:
        return self.direction == Direction.DOWN

    def point(self, index: int) -> Point:
        if not 0 <= index < self.length:
            raise PreconditionError(f"Index {index} outside span of length {self.length}")
        if self.is_vertical:
            return Point(self.origin.row + index, self.origin.col)
        return Point(self.origin.row, self.origin.col + index)

    @property
    def cells(self) -> List[Point]:
        return [self.point(i) for i in range(self.length)]

    def __str__(self) -> str:
        return f"[{self.origin} len={self.length} {self.direction.value}]"


@dataclass(frozen=True)
class Attribute:
    """Blank/letter makeup of a span's current content."""

    has_letters: bool = False
    has_blanks: bool = False

    @property
    def is_empty(self) -> bool:
        return self.has_blanks and not self.has_letters

    @property
    def is_partial(self) -> bool:
        return self.has_blanks and self.has_letters

    @property
    def is_full(self) -> bool:
        return self.has_letters and not self.has_blanks


@dataclass(frozen=True)
class Slot:
    """A span paired with the pattern currently occupying it."""

    span: Span
    pattern: str

    def __str__(self) -> str:
        return f"{self.span}'{self.pattern}'"


@dataclass(frozen=True)
class Solution:
    """Immutable snapshot of a completely filled grid."""

    rows: Tuple[str, ...]
    depth: int
    elapsed: float

    def to_jsonable(self) -> dict:
        return {"rows": list(self.rows), "depth": self.depth, "elapsed": self.elapsed}

    def __str__(self) -> str:
        return "\n".join(self.rows)
