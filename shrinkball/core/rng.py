from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1)."""

    def next(self) -> float:
        ...


class SeededRandom:
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()
