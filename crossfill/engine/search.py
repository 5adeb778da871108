"""Recursive backtracking search over grid copies."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from ..core.constants import SlotPolicy
from ..core.exceptions import DictionaryLoadError, PreconditionError
from ..core.models import Slot, Solution
from ..data.library import Library
from ..utils.logger import get_logger
from .feasibility import check_feasible
from .grid import Grid


LOGGER = get_logger(__name__)

SolutionSink = Callable[[Solution], None]


@dataclass
class SearchConfig:
    policy: SlotPolicy = SlotPolicy.FIRST_PARTIAL
    max_solutions: Optional[int] = None
    timeout_seconds: Optional[float] = None
    precheck: bool = False
    precheck_timeout_seconds: float = 10.0


@dataclass
class SearchResult:
    """Counters gathered over one :meth:`Engine.search` run.

    ``cancelled`` is set only when the solution limit or the deadline kept a
    branch from being explored.
    """

    solutions: List[Solution] = field(default_factory=list)
    solution_count: int = 0
    calls: int = 0
    invalid_word_prunes: int = 0
    duplicate_prunes: int = 0
    dead_ends: int = 0
    cancelled: bool = False
    feasible: Optional[bool] = None
    elapsed: float = 0.0

    def to_jsonable(self) -> dict:
        return {
            "solutions": [solution.to_jsonable() for solution in self.solutions],
            "solution_count": self.solution_count,
            "calls": self.calls,
            "invalid_word_prunes": self.invalid_word_prunes,
            "duplicate_prunes": self.duplicate_prunes,
            "dead_ends": self.dead_ends,
            "cancelled": self.cancelled,
            "feasible": self.feasible,
            "elapsed": self.elapsed,
        }


class Engine:
    """Fills a grid by depth-first search, reporting every valid fill.

    Each recursive call works on its own grid copy, so abandoning a branch
    needs no undo step and sibling candidates never observe each other's
    letters.
    """

    def __init__(self, library: Library, config: Optional[SearchConfig] = None) -> None:
        if not library:
            raise DictionaryLoadError("Cannot search with an empty library")
        self.library = library
        self.config = config or SearchConfig()
        self._result = SearchResult()
        self._sink: Optional[SolutionSink] = None
        self._started = 0.0
        self._deadline: Optional[float] = None

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def search(self, grid: Grid, sink: Optional[SolutionSink] = None) -> SearchResult:
        """Enumerate fills of ``grid``.

        Solutions are passed to ``sink`` when one is given, otherwise they are
        collected on the returned :class:`SearchResult`. ``grid`` itself is
        never modified apart from deriving its spans when that has not
        happened yet.
        """

        if not grid.spans_derived:
            grid.derive_spans()

        self._result = SearchResult()
        self._sink = sink
        self._started = time.monotonic()
        timeout = self.config.timeout_seconds
        self._deadline = self._started + timeout if timeout is not None else None

        LOGGER.info(
            "Searching grid %s (%dx%d, %d spans, policy=%s)",
            grid.name,
            grid.rows,
            grid.cols,
            len(grid.spans),
            self.config.policy.value,
        )

        if self.config.precheck:
            self._result.feasible = check_feasible(
                grid, self.library, timeout=self.config.precheck_timeout_seconds
            )
            if self._result.feasible is False:
                LOGGER.info("Pre-check proved grid %s unfillable; skipping search", grid.name)
                return self._finish()

        self._loop(grid.copy(), 0)
        return self._finish()

    def _finish(self) -> SearchResult:
        result = self._result
        result.elapsed = time.monotonic() - self._started
        if result.cancelled:
            LOGGER.warning(
                "Search cancelled after %d solutions and %d calls", result.solution_count, result.calls
            )
        LOGGER.info(
            "Search finished: %d solutions, %d calls in %.3fs",
            result.solution_count,
            result.calls,
            result.elapsed,
        )
        return result

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------
    def _should_stop(self) -> bool:
        if self._result.cancelled:
            return True
        limit = self.config.max_solutions
        if limit is not None and self._result.solution_count >= limit:
            self._result.cancelled = True
        elif self._deadline is not None and time.monotonic() >= self._deadline:
            self._result.cancelled = True
        return self._result.cancelled

    def _loop(self, grid: Grid, depth: int) -> None:
        if self._should_stop():
            return
        self._result.calls += 1
        depth += 1

        empty: List[Slot] = []
        partial: List[Slot] = []
        full: List[Slot] = []
        for span in grid.spans:
            pattern, attr = grid.read_span(span)
            if attr.is_empty:
                empty.append(Slot(span, pattern))
            elif attr.is_partial:
                partial.append(Slot(span, pattern))
            elif attr.is_full:
                full.append(Slot(span, pattern))

        for slot in full:
            if not self.library.exists(slot.pattern):
                self._result.invalid_word_prunes += 1
                return

        seen: Set[str] = set()
        for slot in full:
            if slot.pattern in seen:
                self._result.duplicate_prunes += 1
                return
            seen.add(slot.pattern)

        if not partial and not empty:
            self._report(grid, depth)
            return

        self._commit_slot(grid, self._select_slot(partial or empty), depth)

    def _select_slot(self, pool: List[Slot]) -> Slot:
        if self.config.policy == SlotPolicy.MOST_CONSTRAINED:
            return min(pool, key=lambda slot: self.library.count_candidates(slot.pattern))
        return pool[0]

    def _commit_slot(self, grid: Grid, slot: Slot, depth: int) -> None:
        _, attr = grid.read_span(slot.span)
        if not attr.has_blanks:
            raise PreconditionError(f"Selected slot {slot} has nothing left to fill")

        words = self.library.candidates(slot.pattern)
        if not words:
            self._result.dead_ends += 1
            return

        for word in words:
            if self._should_stop():
                return
            branch = grid.copy()
            branch.write_span(slot.span, word.text)
            self._loop(branch, depth)

    def _report(self, grid: Grid, depth: int) -> None:
        solution = Solution(
            rows=grid.snapshot(),
            depth=depth,
            elapsed=time.monotonic() - self._started,
        )
        self._result.solution_count += 1
        LOGGER.info(
            "Solution %d found at depth %d after %.3fs",
            self._result.solution_count,
            depth,
            solution.elapsed,
        )
        if self._sink is not None:
            self._sink(solution)
        else:
            self._result.solutions.append(solution)
