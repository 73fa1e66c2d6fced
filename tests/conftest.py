"""Pytest configuration and fixtures for zoo simulator tests."""

import random

import pytest


class FixedRandom:
    """Random source returning a fixed sequence of values, cycling when exhausted.

    Every call is recorded as an (a, b) pair so tests can check the bounds
    that were requested.
    """

    def __init__(self, *values: float):
        self._values = list(values)
        self._index = 0
        self.calls: list[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def fixed_rng():
    """Factory for fixed-sequence random sources."""
    return FixedRandom


@pytest.fixture
def population(seeded_rng):
    """Provide a fresh default population with a seeded RNG."""
    from zoo_simulator.simulation import Population

    return Population(rng=seeded_rng)
