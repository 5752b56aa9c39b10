"""
Error taxonomy shared by the library and the command-line entry point.
"""

from typing import Optional


# ============================================================================
# EXIT CODES
# ============================================================================

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERNAL_ERROR = 3
EXIT_ABORTED = 4


class WordleError(Exception):
    """Base class for user-facing errors."""


class LoadError(WordleError):
    """A dictionary file could not be read or holds no usable words."""


class ParseError(LoadError):
    """A dictionary file violates the one-word-per-line format."""

    def __init__(self, source: str, line: int, message: str,
                 column: Optional[int] = None):
        self.source = source
        self.line = line
        self.column = column
        where = f"line {line}" if column is None else f"line {line} pos {column}"
        super().__init__(f"parse error {source}, {message} at {where}")


class ConfigError(WordleError):
    """The session was configured with values that cannot be played."""


class InternalInvariantViolation(RuntimeError):
    """
    Raised when the candidate set empties after filtering.

    The secret always satisfies its own feedback, so this can only mean the
    tracker disagrees with the referee.
    """
