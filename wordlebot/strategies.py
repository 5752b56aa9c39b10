"""
Guess Selection
===============

Three strategies share one capability, ``select(candidates, bank) -> word``:

- random: a uniformly drawn remaining answer
- entropy: the guess whose feedback distribution over the remaining answers
  has the greatest Shannon entropy
- interactive: a word typed by a person, checked against the dictionary

The set is closed; build selectors through :func:`make_selector`.
"""

import enum
import logging
from typing import Callable, Optional, Union

import numpy as np

from .candidates import CandidateSet
from .referee import compute_entropies, compute_feedback_matrix
from .wordbank import WordBank

log = logging.getLogger(__name__)

HELP_COMMAND = "/help"
PROMPT = "INPUT: "


class Strategy(enum.Enum):
    RANDOM = "random"
    ENTROPY = "entropy"
    INTERACTIVE = "interactive"


class RandomSelector:
    """Draws one remaining answer uniformly with the session's generator."""

    strategy = Strategy.RANDOM

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def select(self, candidates: CandidateSet, bank: WordBank) -> str:
        if len(candidates) == 0:
            raise ValueError("Cannot select from an empty candidate set")
        i = int(self.rng.integers(len(candidates)))
        return bank.get(candidates.indices[i])


class MaxEntropySelector:
    """
    Picks the guess with maximum expected information.

    For every word in the full candidate list, the remaining answers are
    partitioned by the feedback they would produce; the guess with the
    strictly greatest entropy wins, earliest word first on ties.

    The (guess x answer) feedback matrix depends only on the word bank, so
    it is computed once and reused across turns and games.
    """

    strategy = Strategy.ENTROPY

    def __init__(self) -> None:
        self._bank: Optional[WordBank] = None
        self._feedback_matrix: Optional[np.ndarray] = None
        self.scans = 0
        self.last_entropy: Optional[float] = None

    def feedback_matrix(self, bank: WordBank) -> np.ndarray:
        if self._bank is not bank:
            log.info("Precomputing feedback matrix (%d guesses x %d answers)...",
                     bank.n_candidates, bank.n_answers)
            self._feedback_matrix = compute_feedback_matrix(bank.chars, bank.answer_chars)
            self._bank = bank
        return self._feedback_matrix

    def entropies(self, candidates: CandidateSet, bank: WordBank) -> np.ndarray:
        """Entropy in bits of every candidate word as the next guess."""
        return compute_entropies(self.feedback_matrix(bank), candidates.indices)

    def select(self, candidates: CandidateSet, bank: WordBank) -> str:
        if len(candidates) == 0:
            raise ValueError("Cannot select from an empty candidate set")
        if len(candidates) == 1:
            self.last_entropy = 0.0
            return bank.get(candidates.indices[0])

        entropies = self.entropies(candidates, bank)
        self.scans += 1
        # argmax returns the first maximum, matching a strict '>' scan
        best = int(np.argmax(entropies))
        self.last_entropy = float(entropies[best])
        log.debug("%s: %f [bits]", bank.get(best), self.last_entropy)
        return bank.get(best)


class InteractiveSelector:
    """
    Asks an outside actor for each guess.

    Args:
        read_line: returns the next input line (``input`` by default)
        write: receives text for the user (``print`` by default)
    """

    strategy = Strategy.INTERACTIVE

    def __init__(self, read_line: Callable[[str], str] = input,
                 write: Callable[[str], None] = print):
        self.read_line = read_line
        self.write = write

    def select(self, candidates: CandidateSet, bank: WordBank) -> str:
        while True:
            line = self.read_line(PROMPT).strip().lower()
            if line == HELP_COMMAND:
                self.write(" ".join(candidates.words(bank)))
                continue
            idx = bank.find(line)
            if idx is not None:
                return bank.get(idx)
            self.write(f"unknown word '{line}'")


GuessSelector = Union[RandomSelector, MaxEntropySelector, InteractiveSelector]


def make_selector(strategy: Strategy, rng: np.random.Generator,
                  read_line: Callable[[str], str] = input,
                  write: Callable[[str], None] = print) -> GuessSelector:
    if strategy is Strategy.RANDOM:
        return RandomSelector(rng)
    if strategy is Strategy.ENTROPY:
        return MaxEntropySelector()
    if strategy is Strategy.INTERACTIVE:
        return InteractiveSelector(read_line, write)
    raise ValueError(f"unknown strategy {strategy!r}")
