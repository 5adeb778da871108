"""Shared constants and enumerations for the crossword filler."""

from __future__ import annotations

from enum import Enum

BLANK = "."
BLOCK = "#"
# The blank marker doubles as the pattern wildcard, so a slot's content is
# directly usable as a lookup key.
WILDCARD = BLANK
COMMENT_PREFIX = "/"

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"


class SlotPolicy(str, Enum):
    """Strategies for choosing the next slot to branch on."""

    FIRST_PARTIAL = "first_partial"
    MOST_CONSTRAINED = "most_constrained"
