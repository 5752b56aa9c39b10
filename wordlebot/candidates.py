"""
The shrinking set of answer indices still consistent with the feedback.
"""

import logging
from typing import Iterator, List

import numpy as np

from .constraints import ConstraintTracker
from .errors import InternalInvariantViolation
from .wordbank import WordBank

log = logging.getLogger(__name__)


class CandidateSet:
    """
    Indices into the answer list, initially all of them.

    Owned by one game; filtering only ever removes indices.
    """

    def __init__(self, n_answers: int):
        self.indices = np.arange(n_answers, dtype=np.int64)

    def filter(self, tracker: ConstraintTracker, bank: WordBank) -> int:
        """
        Drop every index whose word no longer matches the tracker.

        Returns:
            Number of indices removed.
        """
        keep = np.fromiter(
            (tracker.matches(bank.get(i)) for i in self.indices),
            dtype=np.bool_, count=len(self.indices))
        survivors = self.indices[keep]
        if len(survivors) == 0:
            raise InternalInvariantViolation(
                f"No candidates remaining after filtering {len(self.indices)} "
                f"with {tracker!r} - bug in solver")
        removed = len(self.indices) - len(survivors)
        self.indices = survivors
        log.debug("filtered %d candidates, %d remain", removed, len(survivors))
        return removed

    def words(self, bank: WordBank) -> List[str]:
        return [bank.get(i) for i in self.indices]

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return (int(i) for i in self.indices)

    def __contains__(self, index: int) -> bool:
        return bool(np.any(self.indices == index))
