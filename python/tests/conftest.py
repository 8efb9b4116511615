"""
Shared fixtures for passgen tests.
"""

import random
from typing import List

import pytest

from passgen.generator import PasswordGenerator
from passgen.random_source import RandomSource


class SeededRandomSource(RandomSource):
    """Deterministic random source for reproducible tests."""

    def __init__(self, seed: int = 0):
        self._random = random.Random(seed)

    def uniform_int(self, bound: int) -> int:
        return self._random.randrange(bound)


class FixedRandomSource(RandomSource):
    """Always returns the lowest (or highest) value and records every bound."""

    def __init__(self, highest: bool = False):
        self.highest = highest
        self.bounds: List[int] = []

    def uniform_int(self, bound: int) -> int:
        self.bounds.append(bound)
        return bound - 1 if self.highest else 0


@pytest.fixture
def generator():
    """Generator backed by the real secure random source."""
    return PasswordGenerator()


@pytest.fixture
def seeded_generator():
    """Generator backed by a seeded, reproducible source."""
    return PasswordGenerator(SeededRandomSource(seed=1234))


@pytest.fixture
def lowest_source():
    """Source that always draws 0."""
    return FixedRandomSource(highest=False)


@pytest.fixture
def highest_source():
    """Source that always draws bound - 1."""
    return FixedRandomSource(highest=True)


@pytest.fixture
def seeded_source_factory():
    """Build seeded sources; equal seeds give equal draw sequences."""
    return SeededRandomSource
