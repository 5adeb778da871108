"""Master word list and wildcard pattern index."""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set

from ..core.constants import WILDCARD
from ..core.exceptions import PreconditionError
from ..core.models import Word
from ..utils.logger import get_logger
from .normalization import clean_word, is_placeable


LOGGER = get_logger(__name__)

_NO_WORDS: Sequence[Word] = ()


@dataclass
class LibraryConfig:
    """Configuration for dictionary loading and filtering."""

    max_length: Optional[int] = None


class Library:
    """Holds the dictionary and answers exact and pattern lookups.

    Every word of length ``L`` is registered under all ``2**L`` patterns
    obtained by replacing any subset of its letters with the wildcard. This
    makes candidate lookup a single dictionary access at the cost of
    exponential (in word length) index size, which is why words longer than
    the grid's largest span are dropped before indexing.
    """

    def __init__(self, config: Optional[LibraryConfig] = None) -> None:
        self.config = config or LibraryConfig()
        self._words: List[Word] = []
        self._known: Set[str] = set()
        self._patterns: Dict[str, List[Word]] = defaultdict(list)

    @classmethod
    def from_words(cls, words: Iterable[str], max_length: Optional[int] = None) -> "Library":
        library = cls(LibraryConfig(max_length=max_length))
        library.load(words)
        return library

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, words: Iterable[str]) -> int:
        """Normalize, filter and index ``words``. Returns how many were kept."""

        max_length = self.config.max_length
        accepted = 0
        too_long = 0
        rejected = 0
        for raw in words:
            text = clean_word(raw)
            if not text:
                continue
            if not is_placeable(text):
                LOGGER.debug("Skipping unplaceable entry %r", raw)
                rejected += 1
                continue
            if max_length is not None and len(text) > max_length:
                too_long += 1
                continue
            word = Word(text)
            self._words.append(word)
            self._known.add(text)
            self.index_patterns(word)
            accepted += 1

        LOGGER.info(
            "Loaded %d words (%d longer than %s, %d unplaceable); %d patterns indexed",
            accepted,
            too_long,
            max_length,
            rejected,
            len(self._patterns),
        )
        return accepted

    def index_patterns(self, word: Word) -> None:
        """Register ``word`` under every wildcard pattern derivable from it."""

        text = word.text
        for mask in range(1 << word.length):
            pattern = "".join(
                WILDCARD if (mask >> position) & 1 else char
                for position, char in enumerate(text)
            )
            self._patterns[pattern].append(word)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def exists(self, word: str) -> bool:
        return word in self._known

    def candidates(self, pattern: str) -> Sequence[Word]:
        """Words registered under ``pattern``; the bucket itself, not a copy."""
        return self._patterns.get(pattern, _NO_WORDS)

    def count_candidates(self, pattern: str) -> int:
        return len(self._patterns.get(pattern, _NO_WORDS))

    def word(self, index: int) -> str:
        if not 0 <= index < len(self._words):
            raise PreconditionError(f"Word index {index} outside library of {len(self._words)}")
        return self._words[index].text

    def length_histogram(self) -> Counter:
        """Number of words per length."""
        return Counter(word.length for word in self._words)

    @property
    def pattern_count(self) -> int:
        return len(self._patterns)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)
