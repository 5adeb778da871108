"""Custom exception hierarchy for crossword filling."""


class CrosswordError(Exception):
    """Base exception for filler failures."""


class InputError(CrosswordError):
    """Raised when user-supplied input is rejected before the search starts."""


class GridLoadError(InputError):
    """Raised when a grid layout is missing, empty, ragged or malformed."""


class DictionaryLoadError(InputError):
    """Raised when the word list cannot be read or yields no usable words."""


class PreconditionError(CrosswordError):
    """Raised on internal consistency violations.

    These indicate a programming defect (out-of-bounds access, a write whose
    length does not match its span, deriving spans twice) and must never be
    caught and skipped.
    """
