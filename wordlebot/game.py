"""
One game against a fixed secret.

States: AWAITING_GUESS -> AWAITING_FEEDBACK -> AWAITING_GUESS ... until the
guess is all HIT (WON) or the turn budget runs out (LOST).
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .candidates import CandidateSet
from .constraints import ConstraintTracker
from .referee import Pattern, is_win, pattern_to_string, score
from .strategies import GuessSelector
from .wordbank import WordBank

log = logging.getLogger(__name__)

MAX_TURNS = 16


class GameState(enum.Enum):
    AWAITING_GUESS = "awaiting_guess"
    AWAITING_FEEDBACK = "awaiting_feedback"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Turn:
    number: int
    guess: str
    pattern: Pattern
    remaining: int


@dataclass
class GameResult:
    secret: str
    state: GameState
    turns: List[Turn] = field(default_factory=list)

    @property
    def won(self) -> bool:
        return self.state is GameState.WON

    @property
    def guesses(self) -> List[str]:
        return [t.guess for t in self.turns]


def format_turn(turn: Turn) -> str:
    """Single output line for a turn: guess, symbols, remaining count."""
    return f"{turn.guess} [{pattern_to_string(turn.pattern)}] {turn.remaining:3d}"


class Game:
    """
    Plays the selector against a secret drawn from the bank's answers.

    Args:
        bank: word bank shared across games
        secret: the word to find; must be one of the answers
        selector: strategy providing each guess
        max_turns: guesses allowed before the game is lost
    """

    def __init__(self, bank: WordBank, secret: str, selector: GuessSelector,
                 max_turns: int = MAX_TURNS):
        if not bank.contains(secret):
            raise ValueError(f"Secret '{secret}' not in answer list")
        self.bank = bank
        self.secret = secret
        self.selector = selector
        self.max_turns = max_turns

        self.tracker = ConstraintTracker()
        self.candidates = CandidateSet(bank.n_answers)
        self.turns: List[Turn] = []
        self.state = GameState.AWAITING_GUESS

    @property
    def finished(self) -> bool:
        return self.state in (GameState.WON, GameState.LOST)

    def step(self) -> Turn:
        """Play one turn and return its record."""
        if self.finished:
            raise RuntimeError(f"Game already finished ({self.state.value})")

        guess = self.selector.select(self.candidates, self.bank)
        self.state = GameState.AWAITING_FEEDBACK

        pattern = score(self.secret, guess)
        self.tracker.absorb(pattern, guess)
        self.candidates.filter(self.tracker, self.bank)

        turn = Turn(len(self.turns) + 1, guess, pattern, len(self.candidates))
        self.turns.append(turn)
        log.debug("Turn %d: %s -> %s (%d candidates)", turn.number, guess,
                  pattern_to_string(pattern), turn.remaining)

        if is_win(pattern):
            self.state = GameState.WON
        elif len(self.turns) >= self.max_turns:
            self.state = GameState.LOST
        else:
            self.state = GameState.AWAITING_GUESS
        return turn

    def play(self, on_turn: Optional[Callable[[Turn], None]] = None) -> GameResult:
        """Run until the game is won or lost."""
        while not self.finished:
            turn = self.step()
            if on_turn is not None:
                on_turn(turn)
        log.info("%s '%s' in %d guesses", self.state.value, self.secret, len(self.turns))
        return GameResult(self.secret, self.state, list(self.turns))
