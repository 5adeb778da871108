"""CLI entrypoint for the crossword filler."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

from crossfill.core.constants import SlotPolicy
from crossfill.core.exceptions import InputError
from crossfill.core.models import Solution
from crossfill.engine.search import Engine, SearchConfig
from crossfill.io.loaders import load_grid, load_library
from crossfill.utils.logger import configure_logging, parse_level
from crossfill.utils.pretty import format_solution, pretty_print_grid, print_library_stats, print_spans


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fill a crossword grid with dictionary words by backtracking search",
    )
    parser.add_argument("--grid", type=Path, required=True, help="Grid layout file ('.' blank, '#' block)")
    parser.add_argument(
        "--dictionary",
        type=Path,
        required=True,
        help="Word list, one word per line",
    )
    parser.add_argument(
        "--max-solutions",
        type=int,
        default=None,
        help="Stop after this many solutions (default: enumerate all)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Stop searching after this many seconds",
    )
    parser.add_argument(
        "--policy",
        type=str,
        choices=[p.value for p in SlotPolicy],
        default=SlotPolicy.FIRST_PARTIAL.value,
        help="Slot selection policy",
    )
    parser.add_argument(
        "--precheck",
        action="store_true",
        help="Prove feasibility with CP-SAT before searching",
    )
    parser.add_argument(
        "--precheck-timeout",
        type=float,
        default=10.0,
        help="Time limit for the CP-SAT pre-check in seconds",
    )
    parser.add_argument("--show-spans", action="store_true", help="Print the derived spans")
    parser.add_argument("--stats", action="store_true", help="Print word length statistics")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(parse_level(args.log_level))

    if args.max_solutions is not None and args.max_solutions < 1:
        parser.error("--max-solutions must be at least 1")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    try:
        grid = load_grid(args.grid)
        library = load_library(args.dictionary, max_length=grid.max_size)
    except InputError as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")

    pretty_print_grid(grid, label="Searching grid")
    if args.show_spans:
        print_spans(grid)
    if args.stats:
        print_library_stats(library)

    config = SearchConfig(
        policy=SlotPolicy(args.policy),
        max_solutions=args.max_solutions,
        timeout_seconds=args.timeout,
        precheck=args.precheck,
        precheck_timeout_seconds=args.precheck_timeout,
    )
    found: List[Solution] = []

    def emit(solution: Solution) -> None:
        found.append(solution)
        print(format_solution(solution, len(found)), flush=True)

    result = Engine(library, config).search(grid, sink=emit)

    if args.output:
        payload: Dict[str, Any] = {
            "grid": grid.name,
            "solutions": [solution.to_jsonable() for solution in found],
            "search": {k: v for k, v in result.to_jsonable().items() if k != "solutions"},
        }
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


if __name__ == "__main__":  # pragma: no cover
    main()
