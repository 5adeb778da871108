"""Text-file adapters for grid layouts and word lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from ..core.constants import COMMENT_PREFIX
from ..core.exceptions import DictionaryLoadError, GridLoadError
from ..data.library import Library, LibraryConfig
from ..engine.grid import Grid
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def parse_grid_lines(lines: Iterable[str]) -> List[str]:
    """Drop trailing whitespace, blank lines and ``/`` comment lines."""
    rows: List[str] = []
    for line in lines:
        line = line.rstrip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        rows.append(line)
    return rows


def load_grid(path: Path | str, name: Optional[str] = None) -> Grid:
    """Read a grid layout and derive its spans."""

    source = Path(path)
    if not source.exists():
        raise GridLoadError(f"Missing grid file: {source}")
    try:
        text = source.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as exc:
        raise GridLoadError(f"Cannot read grid file {source}: {exc}") from exc
    rows = parse_grid_lines(text.splitlines())
    grid = Grid(rows, name=name or source.stem)
    grid.derive_spans()
    LOGGER.info(
        "Loaded grid %s from %s (%dx%d, %d spans)",
        grid.name,
        source,
        grid.rows,
        grid.cols,
        len(grid.spans),
    )
    return grid


def read_word_list(path: Path | str) -> List[str]:
    """Return the raw lines of a word list; normalization happens in the library."""

    source = Path(path)
    if not source.exists():
        raise DictionaryLoadError(f"Missing word list: {source}")
    try:
        return source.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        raise DictionaryLoadError(f"Cannot read word list {source}: {exc}") from exc


def load_library(path: Path | str, max_length: Optional[int] = None) -> Library:
    library = Library(LibraryConfig(max_length=max_length))
    library.load(read_word_list(path))
    if not library:
        raise DictionaryLoadError(f"No usable words in {path}")
    return library
