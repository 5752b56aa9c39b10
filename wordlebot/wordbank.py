"""
Word Bank
=========

Immutable word lists for one process:

- answers: words that may be chosen as the secret (first dictionary file)
- candidates: every word that may be guessed (all files, answers first)

Answers are always a prefix of candidates, so an answer index is also a
candidate index.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from .errors import LoadError, ParseError

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5
RECORD_SIZE = WORD_LENGTH + 1  # word + '\n'


# ============================================================================
# PARSING
# ============================================================================

def parse_words(data: bytes, source: str) -> List[str]:
    """
    Parse a dictionary file body.

    Every line must be exactly WORD_LENGTH letters a-z followed by a single
    '\\n'. Line and column numbers in errors are 1-based.

    Args:
        data: raw file contents
        source: file name used in error messages

    Returns:
        The words in file order.
    """
    n_records, remainder = divmod(len(data), RECORD_SIZE)
    if remainder:
        raise ParseError(source, n_records + 1,
                         f"truncated record ({remainder} bytes)")

    words = []
    for line in range(n_records):
        record = data[line * RECORD_SIZE:(line + 1) * RECORD_SIZE]
        if record[WORD_LENGTH] != ord("\n"):
            raise ParseError(source, line + 1, "invalid delimiter")
        for pos in range(WORD_LENGTH):
            c = record[pos]
            if not ord("a") <= c <= ord("z"):
                raise ParseError(
                    source, line + 1,
                    "invalid char code '%s'"
                    % record[:WORD_LENGTH].decode("ascii", "replace"),
                    column=pos + 1)
        words.append(record[:WORD_LENGTH].decode("ascii"))
    return words


def _check_word(word: str, source: str, line: int) -> str:
    if len(word) != WORD_LENGTH:
        raise ParseError(source, line, f"word '{word}' is not {WORD_LENGTH} letters")
    for pos, c in enumerate(word):
        if not "a" <= c <= "z":
            raise ParseError(source, line, f"invalid char code '{word}'",
                             column=pos + 1)
    return word


def read_words(filepath: str) -> List[str]:
    """Read and parse one dictionary file."""
    try:
        with open(filepath, "rb") as f:
            data = f.read()
    except OSError as e:
        raise LoadError(f"Cannot open {filepath}: {e.strerror or e}") from e
    words = parse_words(data, filepath)
    log.info("%s : %d words", filepath, len(words))
    return words


# ============================================================================
# WORD BANK
# ============================================================================

class WordBank:
    """
    Answers and guessable candidates sharing one backing list.

    Args:
        answers: words eligible as the secret
        extra: additional guessable words appended after the answers
    """

    def __init__(self, answers: Sequence[str], extra: Iterable[str] = ()):
        words = [_check_word(w, "<answers>", i + 1) for i, w in enumerate(answers)]
        n_answers = len(words)
        words.extend(_check_word(w, "<extra>", i + 1) for i, w in enumerate(extra))
        if n_answers == 0:
            raise LoadError("Answer list is empty")

        self._words = tuple(words)
        self._n_answers = n_answers

        # First occurrence wins, like a front-to-back scan.
        self._answer_to_idx: Dict[str, int] = {}
        self._word_to_idx: Dict[str, int] = {}
        for i, w in enumerate(self._words):
            if i < n_answers:
                self._answer_to_idx.setdefault(w, i)
            self._word_to_idx.setdefault(w, i)

        self._chars = self._words_to_chars(self._words)
        self._chars.setflags(write=False)

    @classmethod
    def load(cls, answers_path: str, *extra_paths: str) -> "WordBank":
        """Load answers from the first file and extra guesses from the rest."""
        answers = read_words(answers_path)
        if not answers:
            raise LoadError(f"{answers_path} contains no words")
        extra: List[str] = []
        for path in extra_paths:
            extra.extend(read_words(path))
        return cls(answers, extra)

    @staticmethod
    def _words_to_chars(words: Sequence[str]) -> np.ndarray:
        """Convert words to char code array."""
        arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
        for i, w in enumerate(words):
            for j, c in enumerate(w):
                arr[i, j] = ord(c) - ord("a")
        return arr

    @property
    def n_answers(self) -> int:
        return self._n_answers

    @property
    def n_candidates(self) -> int:
        return len(self._words)

    @property
    def answers(self) -> Sequence[str]:
        return self._words[:self._n_answers]

    @property
    def candidates(self) -> Sequence[str]:
        return self._words

    @property
    def chars(self) -> np.ndarray:
        """(n_candidates, WORD_LENGTH) letter codes, a=0."""
        return self._chars

    @property
    def answer_chars(self) -> np.ndarray:
        return self._chars[:self._n_answers]

    def get(self, index: int) -> str:
        if not 0 <= index < len(self._words):
            raise IndexError(f"word index {index} out of range 0..{len(self._words) - 1}")
        return self._words[index]

    def contains(self, word: str) -> bool:
        """True if word may be the secret."""
        return word in self._answer_to_idx

    def find(self, word: str) -> Optional[int]:
        """Index of word among the candidates, or None."""
        return self._word_to_idx.get(word)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordBank(answers={self.n_answers}, candidates={self.n_candidates})"
