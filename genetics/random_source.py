"""
Injectable randomness for selection, crossover and mutation sampling.
"""

import random
from typing import Any, MutableSequence, Optional


class RandomSource:
    """
    Source of every random draw the engine makes.

    Pass a seed (or your own ``random.Random``) for reproducible runs.
    Without either, draws come from a freshly seeded generator.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    def randbelow(self, upper: int) -> int:
        """Uniform integer in ``[0, upper)``. ``upper`` must be positive."""
        if upper <= 0:
            raise ValueError(f"upper bound must be positive, got {upper}")
        return self._rng.randrange(upper)

    def uniform(self) -> float:
        """Uniform real in ``[0, 1)``."""
        return self._rng.random()

    def coin(self) -> bool:
        """Unbiased coin flip."""
        return self._rng.randrange(2) == 1

    def shuffle(self, items: MutableSequence[Any], count: Optional[int] = None) -> None:
        """
        Fisher-Yates shuffle in place.

        With ``count`` only the first ``count`` positions are drawn, which is
        enough to pick ``count`` distinct items uniformly from the front.
        """
        n = len(items)
        if n < 2:
            return
        steps = n - 1 if count is None else min(count, n - 1)
        for i in range(steps):
            j = self.randbelow(n - i) + i
            if i == j:
                continue
            items[i], items[j] = items[j], items[i]


_default_source = RandomSource()


def default_random_source() -> RandomSource:
    """Process-wide source used when an evolver is built without one."""
    return _default_source
