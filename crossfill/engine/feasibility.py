"""CP-SAT feasibility probe using OR-Tools.

Answers "can this grid be filled at all?" before the exhaustive backtracking
search starts. The probe never influences which fills the search reports.
"""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import Dict, List, Optional, Union

from ortools.sat.python import cp_model

from ..core.constants import LETTERS
from ..core.models import Point, Span
from ..data.library import Library
from ..utils.logger import get_logger
from .grid import Grid

LOGGER = get_logger(__name__)

CellValue = Union[cp_model.IntVar, int]


def check_feasible(grid: Grid, library: Library, timeout: float = 10.0) -> Optional[bool]:
    """Model the fill of ``grid`` as a constraint problem.

    Returns:
        True if a complete, duplicate-free fill exists, False if none can
        exist, None if the solver hit ``timeout`` without deciding.
    """
    if not grid.spans_derived:
        grid.derive_spans()

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Cell letter variables
    # ------------------------------------------------------------------
    cell_vars: Dict[Point, CellValue] = {}
    for span in grid.spans:
        for point in span.cells:
            if point in cell_vars:
                continue
            if grid.is_letter(point):
                cell_vars[point] = LETTERS.index(grid.char_at(point))
            else:
                cell_vars[point] = model.new_int_var(0, 25, f"L_{point.row}_{point.col}")

    # ------------------------------------------------------------------
    # Step 2: Per-span candidate tables
    # ------------------------------------------------------------------
    for span in grid.spans:
        pattern, _ = grid.read_span(span)
        words = library.candidates(pattern)
        if not words:
            LOGGER.debug("No candidates for span %s pattern %r", span, pattern)
            return False

        cell_list = [cell_vars[point] for point in span.cells]
        if any(isinstance(v, cp_model.IntVar) for v in cell_list):
            tuples = [[LETTERS.index(ch) for ch in word.text] for word in words]
            model.add_allowed_assignments(cell_list, tuples)

    # ------------------------------------------------------------------
    # Step 3: Uniqueness constraints
    # ------------------------------------------------------------------
    by_length: Dict[int, List[Span]] = defaultdict(list)
    for span in grid.spans:
        by_length[span.length].append(span)

    for group in by_length.values():
        for first, second in combinations(group, 2):
            if not _add_differ_constraint(model, cell_vars, first, second):
                LOGGER.debug("Spans %s and %s already hold the same word", first, second)
                return False

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 4

    LOGGER.info(
        "CP-SAT: %d spans, %d cell vars, solving (timeout=%0.1fs)...",
        len(grid.spans),
        sum(1 for v in cell_vars.values() if isinstance(v, cp_model.IntVar)),
        timeout,
    )
    status = solver.solve(model)

    if status in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.info("CP-SAT: fill exists (%.2fs)", solver.wall_time)
        return True
    if status == cp_model.INFEASIBLE:
        LOGGER.info("CP-SAT: grid cannot be filled (%.2fs)", solver.wall_time)
        return False
    LOGGER.warning("CP-SAT: undecided (status=%s)", solver.status_name(status))
    return None


def _add_differ_constraint(
    model: cp_model.CpModel,
    cell_vars: Dict[Point, CellValue],
    first: Span,
    second: Span,
) -> bool:
    """Ensure two same-length spans cannot hold identical words.

    Returns False when both spans are already fixed to the same word.
    """
    diffs = []
    for pos in range(first.length):
        v1 = cell_vars[first.point(pos)]
        v2 = cell_vars[second.point(pos)]
        if not isinstance(v1, cp_model.IntVar) and not isinstance(v2, cp_model.IntVar):
            if v1 != v2:
                return True
            continue
        b = model.new_bool_var(f"d_{first.origin}_{second.origin}_{first.direction.value}_{pos}")
        if isinstance(v1, cp_model.IntVar):
            model.add(v1 != v2).only_enforce_if(b)
            model.add(v1 == v2).only_enforce_if(~b)
        else:
            model.add(v2 != v1).only_enforce_if(b)
            model.add(v2 == v1).only_enforce_if(~b)
        diffs.append(b)
    if not diffs:
        return False
    model.add_bool_or(diffs)
    return True
