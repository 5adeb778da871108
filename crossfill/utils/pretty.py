"""Pretty-print helpers for grids, spans and dictionary statistics."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..core.constants import BLANK, BLOCK

if TYPE_CHECKING:
    from ..core.models import Solution
    from ..data.library import Library
    from ..engine.grid import Grid


def format_grid(grid: Grid) -> str:
    header = (
        f"Grid ID: {grid.name} (rows={grid.rows}, cols={grid.cols}) max_size={grid.max_size}"
    )
    return "\n".join([header] + [f"  {row}" for row in grid.snapshot()])


def format_spans(grid: Grid) -> str:
    lines = ["Spans:"]
    for span in grid.spans:
        text, _ = grid.read_span(span)
        lines.append(f"  {span} {text}")
    return "\n".join(lines)


def format_solution(solution: Solution, index: int) -> str:
    lines = [f"Solution {index} (depth {solution.depth}, {solution.elapsed:.3f}s)"]
    lines.extend(f"  {row}" for row in solution.rows)
    return "\n".join(lines)


def format_length_stats(library: Library) -> str:
    histogram = library.length_histogram()
    lines = ["Word Frequency Distribution"]
    if histogram:
        for length in range(1, max(histogram) + 1):
            lines.append(f"[{length}] {histogram.get(length, 0)}")
    lines.append(f"Total: {len(library)} words, {library.pattern_count} patterns")
    return "\n".join(lines)


def pretty_print_grid(grid: Grid, *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)
    open_cells = grid.count_cells(BLANK) + grid.count_cells()
    blocks = grid.count_cells(BLOCK)
    print(f"  Filled: {grid.count_cells()}/{open_cells} open cells, {blocks} blocks", file=stream)


def print_spans(grid: Grid, *, stream=None) -> None:
    stream = stream or sys.stdout
    print(format_spans(grid), file=stream)


def print_library_stats(library: Library, *, stream=None) -> None:
    stream = stream or sys.stdout
    print(format_length_stats(library), file=stream)
