"""Pytest configuration - shared fixtures for renderer tests."""
from __future__ import annotations

from itertools import cycle
from pathlib import Path
from typing import Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]


class FixedSampler:
    """
    Sampler stand-in that replays a fixed sequence of unit draws.

    Each uniform(low, high) call consumes the next fraction f and
    returns low + f * (high - low). Call counts are recorded.
    """

    def __init__(self, fractions: Iterable[float] = (0.5,)):
        self._fractions = cycle(list(fractions))
        self.calls = 0
        self.seed = 0

    def reseed(self, seed=None):
        return self.seed

    def uniform(self, low, high):
        self.calls += 1
        return low + next(self._fractions) * (high - low)

    def point(self, margin, width, height):
        return (
            self.uniform(margin, width - 2 * margin),
            self.uniform(margin, height - 2 * margin),
        )


@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def fixed_sampler():
    """Factory for samplers pinned to a sequence of fractions."""
    return FixedSampler


@pytest.fixture
def tmp_output(tmp_path):
    """Output path inside a per-test temp directory."""
    return tmp_path / "random.png"
