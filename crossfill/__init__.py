"""Crossword filler driven by backtracking over a wildcard pattern index.

This package exposes the public API surface via:

- ``crossfill.engine.grid.Grid``: layout, span derivation and span access.
- ``crossfill.data.library.Library``: word list with pattern-indexed lookup.
- ``crossfill.engine.search.Engine``: recursive search enumerating every fill.
"""

from .data.library import Library, LibraryConfig
from .engine.grid import Grid
from .engine.search import Engine, SearchConfig, SearchResult

__all__ = [
    "Engine",
    "Grid",
    "Library",
    "LibraryConfig",
    "SearchConfig",
    "SearchResult",
]

__version__ = "0.1.0"
