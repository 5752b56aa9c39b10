"""
Benchmark
=========

Plays many games with one automatic strategy and summarizes how many guesses
each game took.
"""

import logging
import time
from collections import Counter
from typing import Dict, Optional, Sequence, TextIO

import numpy as np

from .errors import ConfigError
from .game import MAX_TURNS, Game
from .strategies import Strategy, make_selector
from .wordbank import WordBank

log = logging.getLogger(__name__)

PROGRESS_EVERY = 500


def sample_secrets(bank: WordBank, n: int, rng: np.random.Generator) -> Sequence[str]:
    """n distinct answers drawn without replacement; all answers if n is 0."""
    if n <= 0 or n >= bank.n_answers:
        return list(bank.answers)
    picks = rng.choice(bank.n_answers, size=n, replace=False)
    return [bank.get(int(i)) for i in picks]


def benchmark(bank: WordBank, strategy: Strategy, secrets: Sequence[str],
              rng: np.random.Generator, max_turns: int = MAX_TURNS) -> Dict:
    """
    Play one game per secret.

    Args:
        bank: word bank
        strategy: random or entropy
        secrets: answers to play against
        rng: session generator, shared by all games
        max_turns: turn budget per game

    Returns:
        Dict with results
    """
    if strategy is Strategy.INTERACTIVE:
        raise ConfigError("benchmark needs an automatic solver (random or entropy)")

    selector = make_selector(strategy, rng)
    results = []
    dist: Counter = Counter()
    failures = []

    start = time.time()
    for i, secret in enumerate(secrets):
        if i % PROGRESS_EVERY == 0:
            elapsed = time.time() - start
            rate = (i + 1) / elapsed if elapsed > 0 else 0
            avg = sum(results) / len(results) if results else 0
            log.info("[%d/%d] %.1f w/s, avg=%.4f", i, len(secrets), rate, avg)

        result = Game(bank, secret, selector, max_turns).play()
        n = len(result.turns)
        if result.won:
            results.append(n)
            dist[n] += 1
        else:
            failures.append(secret)

    elapsed = time.time() - start

    return {
        'strategy': strategy.value,
        'total': len(secrets),
        'average': sum(results) / len(results) if results else float("inf"),
        'distribution': dict(sorted(dist.items())),
        'failures': len(failures),
        'failed_words': failures[:20],
        'time': elapsed,
        'rate': len(secrets) / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results: Dict, out: Optional[TextIO] = None):
    """Pretty print benchmark results."""
    def emit(line: str = "") -> None:
        print(line, file=out)

    emit("\n" + "=" * 50)
    emit(f"BENCHMARK RESULTS ({results['strategy']})")
    emit("=" * 50)
    emit(f"Words tested: {results['total']}")
    emit(f"Average guesses: {results['average']:.4f}")
    if results['total']:
        emit(f"Failures: {results['failures']} "
             f"({100 * results['failures'] / results['total']:.2f}%)")
    emit(f"Time: {results['time']:.1f}s ({results['rate']:.1f} words/sec)")
    emit("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / results['total']
        bar = "█" * int(pct / 2)
        emit(f"  {n:2d}: {count:5d} ({pct:5.2f}%) {bar}")
    if results['failed_words']:
        emit(f"\nFailed words: {results['failed_words']}")
    emit("=" * 50)
