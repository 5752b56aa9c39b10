"""
Referee
=======

Scores a guess against the secret, one symbol per position:

- HIT: same letter at the same position
- PRESENT: the letter occurs somewhere else in the secret
- ABSENT: the letter does not occur in the secret

Repeated letters are not reconciled against the secret's letter counts: every
occurrence of a letter that is in the secret is PRESENT (or HIT). The
constraint tracker relies on exactly this rule.

Patterns are packed into base-3 keys with position 0 as the most significant
digit, giving 3^5 = 243 keys.
"""

import math
from collections import Counter
from typing import Iterable, Sequence, Tuple

import numpy as np
from numba import jit, prange

from .wordbank import WORD_LENGTH


# ============================================================================
# CONSTANTS
# ============================================================================

ABSENT = 0
PRESENT = 1
HIT = 2
N_PATTERNS = 3 ** WORD_LENGTH  # 243
WIN_KEY = N_PATTERNS - 1  # 22222 in base 3

SYMBOL_CHARS = ".?o"

Pattern = Tuple[int, ...]


# ============================================================================
# PURE PYTHON SCORING
# ============================================================================

def score(secret: str, guess: str) -> Pattern:
    """Feedback pattern of guess against secret."""
    pattern = []
    for i, c in enumerate(guess):
        if c == secret[i]:
            pattern.append(HIT)
        elif c in secret:
            pattern.append(PRESENT)
        else:
            pattern.append(ABSENT)
    return tuple(pattern)


def is_win(pattern: Sequence[int]) -> bool:
    return all(s == HIT for s in pattern)


def pattern_key(pattern: Sequence[int]) -> int:
    key = 0
    for s in pattern:
        key = key * 3 + s
    return key


def key_to_pattern(key: int) -> Pattern:
    if not 0 <= key < N_PATTERNS:
        raise ValueError(f"pattern key {key} out of range")
    digits = []
    for _ in range(WORD_LENGTH):
        key, d = divmod(key, 3)
        digits.append(d)
    return tuple(reversed(digits))


def pattern_to_string(pattern: Sequence[int]) -> str:
    """Render a pattern as '.', '?' and 'o' characters."""
    return "".join(SYMBOL_CHARS[s] for s in pattern)


def guess_entropy(guess: str, secrets: Iterable[str]) -> float:
    """
    Shannon entropy (bits) of the pattern distribution guess produces over
    the given possible secrets.
    """
    counts = sorted(Counter(pattern_key(score(s, guess)) for s in secrets).values())
    total = sum(counts)
    if total == 0:
        return 0.0
    acc = sum(c * math.log2(c) for c in counts if c > 1)
    return max(math.log2(total) - acc / total, 0.0)


# ============================================================================
# NUMBA-ACCELERATED KERNELS
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """
    Compute the pattern key of a guess against an answer.

    Args:
        guess: shape (5,) array of char codes (0-25 for a-z)
        answer: shape (5,) array of char codes

    Returns:
        Integer pattern key (0-242)
    """
    key = 0
    for i in range(guess.shape[0]):
        c = guess[i]
        d = ABSENT
        if c == answer[i]:
            d = HIT
        else:
            for j in range(answer.shape[0]):
                if c == answer[j]:
                    d = PRESENT
                    break
        key = key * 3 + d
    return key


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_matrix(guess_chars: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Compute feedback for all guess/answer pairs in parallel.

    Args:
        guess_chars: shape (n_guesses, 5) array of char codes
        answer_chars: shape (n_answers, 5) array of char codes

    Returns:
        shape (n_guesses, n_answers) matrix of pattern keys
    """
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    result = np.zeros((n_guesses, n_answers), dtype=np.uint8)

    for i in prange(n_guesses):
        for j in range(n_answers):
            result[i, j] = compute_feedback(guess_chars[i], answer_chars[j])

    return result


@jit(nopython=True, cache=True)
def compute_entropy(sizes: np.ndarray, total: int) -> float:
    """
    Compute Shannon entropy of partition distribution.

    Uses H = log2(N) - sum(s * log2(s)) / N over the sizes in sorted order,
    so equal multisets of sizes give bit-identical results wherever their
    patterns fall.
    """
    if total == 0:
        return 0.0

    acc = 0.0
    for s in np.sort(sizes):
        if s > 1:
            x = float(s)
            acc += x * np.log2(x)

    n = float(total)
    entropy = np.log2(n) - acc / n
    return entropy if entropy > 0.0 else 0.0


@jit(nopython=True, parallel=True, cache=True)
def compute_entropies(feedback_matrix: np.ndarray, candidates: np.ndarray) -> np.ndarray:
    """
    Entropy of every guess over the remaining answers.

    Each guess fills its own partition counts, so guesses run in parallel.

    Args:
        feedback_matrix: (n_guesses, n_answers) pattern keys
        candidates: indices of the remaining answers

    Returns:
        shape (n_guesses,) entropies in bits
    """
    n_guesses = feedback_matrix.shape[0]
    total = candidates.shape[0]
    result = np.zeros(n_guesses, dtype=np.float64)

    for g in prange(n_guesses):
        sizes = np.zeros(N_PATTERNS, dtype=np.int32)
        for k in range(total):
            sizes[feedback_matrix[g, candidates[k]]] += 1
        result[g] = compute_entropy(sizes, total)

    return result
