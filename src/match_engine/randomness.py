"""Injectable random source for play resolution.

Anything with a ``random()`` method returning floats in [0, 1) can stand
in for :class:`RandomSource`, which lets tests script the exact draws a
play consumes.
"""

import random
from typing import Optional


class RandomSource:
    """Seedable wrapper around :class:`random.Random`.

    One instance should be shared by everything resolving plays for the
    same match so draws happen in a single, reproducible order.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def reseed(self, seed: Optional[int]) -> None:
        self.seed = seed
        self._rng.seed(seed)
