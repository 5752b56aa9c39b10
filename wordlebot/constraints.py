"""
Accumulates feedback across turns into a compact description of which words
are still possible.
"""

from typing import Iterable, Iterator, List, Optional, Sequence

from .referee import ABSENT, HIT
from .wordbank import WORD_LENGTH


def _bit(letter: str) -> int:
    return 1 << (ord(letter) - ord("a"))


class LetterSet:
    """Set of lowercase letters stored as a 26-bit mask (a -> bit 0)."""

    __slots__ = ("_mask",)

    def __init__(self, letters: Iterable[str] = ()):
        self._mask = 0
        for c in letters:
            self.add(c)

    def add(self, letter: str) -> None:
        self._mask |= _bit(letter)

    def __contains__(self, letter: str) -> bool:
        return bool(self._mask & _bit(letter))

    def __iter__(self) -> Iterator[str]:
        for i in range(26):
            if self._mask & (1 << i):
                yield chr(ord("a") + i)

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __eq__(self, other) -> bool:
        if not isinstance(other, LetterSet):
            return NotImplemented
        return self._mask == other._mask

    def missing_from(self, word: str) -> int:
        """Mask of the letters in this set that word does not use."""
        mask = self._mask
        for c in word:
            mask &= ~_bit(c)
        return mask

    def __repr__(self) -> str:
        return "LetterSet(%r)" % "".join(self)


class ConstraintTracker:
    """
    What the feedback so far says about the secret.

    - fixed: per position, the letter confirmed there (None if unknown)
    - must_contain: letters confirmed somewhere in the secret
    - forbidden: per position, letters confirmed not to be there

    A fixed letter is never changed once set and the letter sets only grow.
    """

    def __init__(self) -> None:
        self.fixed: List[Optional[str]] = [None] * WORD_LENGTH
        self.must_contain = LetterSet()
        self.forbidden: List[LetterSet] = [LetterSet() for _ in range(WORD_LENGTH)]

    def absorb(self, pattern: Sequence[int], guess: str) -> None:
        """Fold one turn's feedback into the tracker."""
        for i, c in enumerate(guess):
            if pattern[i] == HIT:
                if self.fixed[i] is None:
                    self.fixed[i] = c
            else:
                self.forbidden[i].add(c)

            if pattern[i] == ABSENT:
                for positions in self.forbidden:
                    positions.add(c)
            else:
                self.must_contain.add(c)

    def matches(self, word: str) -> bool:
        """True if word is consistent with everything absorbed so far."""
        for i, c in enumerate(word):
            if self.fixed[i] is not None and c != self.fixed[i]:
                return False
            if c in self.forbidden[i]:
                return False
        return self.must_contain.missing_from(word) == 0

    def __repr__(self) -> str:
        fixed = "".join(c or "_" for c in self.fixed)
        return f"ConstraintTracker(fixed={fixed!r}, must_contain={self.must_contain!r})"
