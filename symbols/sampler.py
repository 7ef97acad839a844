"""
symbols/sampler.py
Random parameter sampling

Without a reseed, every run starts from DEFAULT_SEED and produces the
same picture. A reseed from the wall clock gives a new picture per run.
"""

import time
from typing import Optional, Tuple

import numpy as np

from .config import CLOCK_SEED_MODULUS, DEFAULT_SEED


def clock_seed() -> int:
    """
    Seed derived from the sub-second part of the wall clock.

    Kept below 1e9 - 1 so it always fits a signed 32-bit integer.
    """
    nanos = time.time_ns() % 1_000_000_000
    return nanos % CLOCK_SEED_MODULUS


class RandomSampler:
    """
    Uniform sampling over numpy's default generator.

    Attributes:
        seed: Seed the current generator was created from
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reseed(self, seed: Optional[int] = None) -> int:
        """
        Restart the generator.

        Args:
            seed: Explicit seed; derived from the wall clock when omitted

        Returns:
            The seed actually used
        """
        if seed is None:
            seed = clock_seed()
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        return seed

    def uniform(self, low: float, high: float) -> float:
        """Value in [low, high). Callers guarantee low < high."""
        return float(low + self._rng.random() * (high - low))

    def point(self, margin: float, width: float, height: float) -> Tuple[float, float]:
        """Anchor point kept `margin` away from the top/left and 2*margin from the bottom/right."""
        x = self.uniform(margin, width - 2 * margin)
        y = self.uniform(margin, height - 2 * margin)
        return x, y
