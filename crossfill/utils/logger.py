"""Logging setup for the filler and its command-line entry point."""

from __future__ import annotations

import logging
from typing import IO, Optional

ROOT_LOGGER = "crossfill"
LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Install a single stream handler on the root logger.

    Search progress is reported in fractions of a second, hence the
    millisecond timestamps. ``stream`` defaults to stderr so solutions
    printed on stdout stay machine-readable.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def parse_level(name: str, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""

    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``crossfill`` namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER)
