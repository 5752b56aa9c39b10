import math
from collections import Counter

import numpy as np
import pytest

import wordlebot.strategies as strategies
from wordlebot.candidates import CandidateSet
from wordlebot.referee import N_PATTERNS, guess_entropy, pattern_key, score
from wordlebot.strategies import (HELP_COMMAND, InteractiveSelector,
                                  MaxEntropySelector, RandomSelector, Strategy,
                                  make_selector)
from wordlebot.wordbank import WordBank

from .conftest import ANSWERS


def test_random_is_reproducible(bank):
    candidates = CandidateSet(bank.n_answers)
    first = RandomSelector(np.random.default_rng(7))
    second = RandomSelector(np.random.default_rng(7))
    picks = [first.select(candidates, bank) for _ in range(10)]
    assert picks == [second.select(candidates, bank) for _ in range(10)]
    assert set(picks) <= set(ANSWERS)


def test_random_empty(bank):
    with pytest.raises(ValueError):
        RandomSelector(np.random.default_rng(0)).select(CandidateSet(0), bank)


def test_entropy_single_candidate_skips_scan(bank, monkeypatch):
    def fail(*args):
        raise AssertionError("entropy kernel should not run")

    monkeypatch.setattr(strategies, "compute_entropies", fail)
    candidates = CandidateSet(bank.n_answers)
    candidates.indices = np.array([3], dtype=np.int64)
    selector = MaxEntropySelector()
    assert selector.select(candidates, bank) == "melon"
    assert selector.scans == 0


def test_entropy_uses_full_guess_space():
    # answers only split 1/2 against each other; the extra word splits 1/1/1
    bank = WordBank(["aqqqq", "bqqqq", "cqqqq"], ["abzzz", "bazzz"])
    selector = MaxEntropySelector()
    guess = selector.select(CandidateSet(bank.n_answers), bank)
    # abzzz and bazzz tie, the earlier one wins
    assert guess == "abzzz"
    assert selector.last_entropy == pytest.approx(math.log2(3))
    assert selector.scans == 1


def test_entropy_is_deterministic(bank):
    candidates = CandidateSet(bank.n_answers)
    selector = MaxEntropySelector()
    assert selector.select(candidates, bank) == selector.select(candidates, bank)
    assert MaxEntropySelector().select(candidates, bank) == selector.select(candidates, bank)


def test_entropy_picks_maximum(bank):
    candidates = CandidateSet(bank.n_answers)
    selector = MaxEntropySelector()
    guess = selector.select(candidates, bank)
    secrets = candidates.words(bank)
    scores = [guess_entropy(g, secrets) for g in bank.candidates]
    assert guess_entropy(guess, secrets) == pytest.approx(max(scores))


def test_entropy_bounds(bank):
    candidates = CandidateSet(bank.n_answers)
    entropies = MaxEntropySelector().entropies(candidates, bank)
    assert len(entropies) == bank.n_candidates
    upper = math.log2(min(N_PATTERNS, len(candidates)))
    assert np.all(entropies >= 0.0)
    assert np.all(entropies <= upper + 1e-9)


def test_feedback_matrix_is_cached(bank):
    selector = MaxEntropySelector()
    assert selector.feedback_matrix(bank) is selector.feedback_matrix(bank)
    other = WordBank(ANSWERS)
    assert selector.feedback_matrix(other).shape == (other.n_candidates, other.n_answers)


def test_interactive_reprompts(bank):
    lines = iter([HELP_COMMAND, "zzzzz", " Crane "])
    written = []
    selector = InteractiveSelector(lambda prompt: next(lines), written.append)
    candidates = CandidateSet(bank.n_answers)
    assert selector.select(candidates, bank) == "crane"
    assert written[0] == " ".join(ANSWERS)
    assert written[1] == "unknown word 'zzzzz'"
    assert len(written) == 2


def test_interactive_eof_propagates(bank):
    def closed(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        InteractiveSelector(closed, print).select(CandidateSet(bank.n_answers), bank)


def test_make_selector():
    rng = np.random.default_rng(0)
    assert isinstance(make_selector(Strategy.RANDOM, rng), RandomSelector)
    assert isinstance(make_selector(Strategy.ENTROPY, rng), MaxEntropySelector)
    interactive = make_selector(Strategy.INTERACTIVE, rng)
    assert isinstance(interactive, InteractiveSelector)
    assert interactive.strategy is Strategy.INTERACTIVE


def _random_bank(seed):
    rng = np.random.default_rng(seed)
    words = set()
    while len(words) < 40:
        words.add("".join(rng.choice(list("abcdefgh"), size=5)))
    return WordBank(sorted(words))


def _group_sizes(guess, secrets):
    return sorted(Counter(pattern_key(score(s, guess)) for s in secrets).values())


@pytest.mark.parametrize("seed", range(30))
def test_entropy_ties_with_same_group_sizes_pick_earliest(seed):
    bank = _random_bank(seed)
    candidates = CandidateSet(bank.n_answers)
    secrets = candidates.words(bank)
    guess = MaxEntropySelector().select(candidates, bank)

    best = max(guess_entropy(g, secrets) for g in bank.candidates)
    assert guess_entropy(guess, secrets) == pytest.approx(best)
    sizes = _group_sizes(guess, secrets)
    first = next(g for g in bank.candidates if _group_sizes(g, secrets) == sizes)
    assert guess == first
