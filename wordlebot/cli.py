"""
Command-line entry point.

    wordlebot [--solver (random|entropy|interactive)]
              [--seed NUM]
              [--answer ANSWER]
              [--use-hard]
              [--log-level (0|1|2)]
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from .benchmark import benchmark, print_results, sample_secrets
from .errors import (EXIT_ABORTED, EXIT_CONFIG_ERROR, EXIT_INTERNAL_ERROR,
                     EXIT_LOAD_ERROR, EXIT_OK, ConfigError,
                     InternalInvariantViolation, LoadError)
from .game import Game, format_turn
from .strategies import Strategy, make_selector
from .wordbank import WORD_LENGTH, WordBank

log = logging.getLogger(__name__)

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}
DEFAULT_ANSWERS_FILE = "easy.txt"
DEFAULT_HARD_FILE = "hard.txt"


@dataclass(frozen=True)
class SessionConfig:
    strategy: Strategy = Strategy.RANDOM
    seed: Optional[int] = None
    answer: Optional[str] = None
    use_hard: bool = False
    log_level: int = 0
    answers_file: str = DEFAULT_ANSWERS_FILE
    hard_file: str = DEFAULT_HARD_FILE
    benchmark: Optional[int] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SessionConfig":
        try:
            strategy = Strategy(args.solver)
        except ValueError:
            raise ConfigError(f"unknown solver '{args.solver}'") from None
        if args.log_level not in LOG_LEVELS:
            raise ConfigError(f"log level must be one of {sorted(LOG_LEVELS)}")
        if args.seed is not None and args.seed < 0:
            raise ConfigError("seed must be non-negative")
        answer = args.answer.lower() if args.answer is not None else None
        if answer is not None and (len(answer) != WORD_LENGTH
                                   or not all("a" <= c <= "z" for c in answer)):
            raise ConfigError(f"wrong answer {args.answer}")
        if args.benchmark is not None:
            if args.benchmark < 0:
                raise ConfigError("benchmark count must be non-negative")
            if strategy is Strategy.INTERACTIVE:
                raise ConfigError("benchmark needs an automatic solver (random or entropy)")
            if answer is not None:
                raise ConfigError("--answer cannot be combined with --benchmark")
        return cls(strategy=strategy, seed=args.seed, answer=answer,
                   use_hard=args.use_hard, log_level=args.log_level,
                   answers_file=args.answers_file, hard_file=args.hard_file,
                   benchmark=args.benchmark)

    @property
    def dictionary_files(self) -> List[str]:
        files = [self.answers_file]
        if self.use_hard:
            files.append(self.hard_file)
        return files


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordlebot",
        description="Play Wordle against a hidden answer.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--solver", choices=[s.value for s in Strategy], default=Strategy.RANDOM.value,
        help="How guesses are chosen")
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed (unseeded if omitted)")
    parser.add_argument(
        "--answer", default=None,
        help="Force the secret word (must be in the answers file)")
    parser.add_argument(
        "--use-hard", action="store_true",
        help="Also accept guesses from the hard word list")
    parser.add_argument(
        "--log-level", type=int, choices=sorted(LOG_LEVELS), default=0,
        help="0: warnings, 1: info, 2: verbose")
    parser.add_argument(
        "--answers-file", default=DEFAULT_ANSWERS_FILE,
        help="Word list of possible answers")
    parser.add_argument(
        "--hard-file", default=DEFAULT_HARD_FILE,
        help="Extra guessable words used with --use-hard")
    parser.add_argument(
        "--benchmark", type=int, metavar="N", default=None,
        help="Play N random secrets (0 = every answer) and print statistics")
    return parser


def configure_logging(config: SessionConfig) -> None:
    logging.basicConfig(
        level=LOG_LEVELS[config.log_level],
        format="%(levelname)s %(name)s: %(message)s",
    )


def choose_secret(config: SessionConfig, bank: WordBank,
                  rng: np.random.Generator) -> str:
    if config.answer is None:
        answer = bank.get(int(rng.integers(bank.n_answers)))
        log.debug("answer:%s", answer)
        return answer
    if not bank.contains(config.answer):
        raise ConfigError(f"wrong answer {config.answer}")
    return config.answer


def run(config: SessionConfig, read_line: Callable[[str], str] = input) -> int:
    """Load the dictionary and play one game (or a benchmark)."""
    bank = WordBank.load(*config.dictionary_files)
    rng = np.random.default_rng(config.seed)

    if config.benchmark is not None:
        secrets = sample_secrets(bank, config.benchmark, rng)
        print_results(benchmark(bank, config.strategy, secrets, rng))
        return EXIT_OK

    secret = choose_secret(config, bank, rng)
    selector = make_selector(config.strategy, rng, read_line=read_line)
    Game(bank, secret, selector).play(on_turn=lambda turn: print(format_turn(turn)))
    print()
    return EXIT_OK


def main(argv: Optional[List[str]] = None,
         read_line: Callable[[str], str] = input) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SessionConfig.from_args(args)
    except ConfigError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(config)

    try:
        return run(config, read_line)
    except LoadError as e:
        print(e, file=sys.stderr)
        return EXIT_LOAD_ERROR
    except ConfigError as e:
        print(e, file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except InternalInvariantViolation:
        log.exception("Internal error")
        return EXIT_INTERNAL_ERROR
    except (EOFError, KeyboardInterrupt):
        log.error("Input closed, game aborted")
        return EXIT_ABORTED


if __name__ == "__main__":
    sys.exit(main())
