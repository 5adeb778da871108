"""Helpers for turning raw word-list lines into dictionary words."""

from __future__ import annotations

import re

NON_LETTER_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return ``text`` uppercased with surrounding whitespace and control characters removed."""

    if not text:
        return ""
    return text.strip().upper()


def is_placeable(word: str) -> bool:
    """True when every character of ``word`` can occupy a grid cell."""

    return bool(word) and NON_LETTER_RE.search(word) is None


__all__ = ["clean_word", "is_placeable"]
