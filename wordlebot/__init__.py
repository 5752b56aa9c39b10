"""
wordlebot - Wordle Player
=========================

Plays Wordle against a hidden answer with a random, maximum-entropy or
interactive guess strategy.
"""

__version__ = "1.0.0"

from .errors import (ConfigError, InternalInvariantViolation, LoadError,
                     ParseError, WordleError)
from .wordbank import WORD_LENGTH, WordBank, parse_words
from .referee import (ABSENT, HIT, PRESENT, is_win, pattern_key,
                      pattern_to_string, score)
from .constraints import ConstraintTracker, LetterSet
from .candidates import CandidateSet
from .strategies import (InteractiveSelector, MaxEntropySelector,
                         RandomSelector, Strategy, make_selector)
from .game import MAX_TURNS, Game, GameResult, GameState, Turn, format_turn
from .benchmark import benchmark, print_results
