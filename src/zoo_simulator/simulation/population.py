"""Population - all zoo animals advanced together in simulated hours."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Protocol

import numpy as np

from ..config import ZooConfig
from .animal import Animal, LifecycleState, Species


class RandomSource(Protocol):
    """Anything that can draw a uniform float, e.g. ``random.Random``."""

    def uniform(self, a: float, b: float) -> float: ...


class AnimalReport(NamedTuple):
    """Display row for one animal."""

    index: int
    species: str
    health: float
    state: str


@dataclass
class PopulationStats:
    """Statistics about the current population state."""

    hour: int = 0
    alive: int = 0
    cannot_walk: int = 0
    dead: int = 0
    deaths_this_hour: int = 0
    avg_health: float = 0.0


class StatsHistory:
    """Tracks statistics over time for charting."""

    def __init__(self, max_length: int = 300):
        """
        Initialize stats history.

        Args:
            max_length: Maximum number of snapshots to keep in history
        """
        self.max_length = max_length
        self.alive: deque[int] = deque(maxlen=max_length)
        self.dead: deque[int] = deque(maxlen=max_length)
        self.avg_health: deque[float] = deque(maxlen=max_length)

    def __len__(self) -> int:
        return len(self.alive)

    def record(self, stats: PopulationStats) -> None:
        """Record current stats to history."""
        self.alive.append(stats.alive)
        self.dead.append(stats.dead)
        self.avg_health.append(stats.avg_health)


class Population:
    """
    The zoo: a fixed set of animals plus an hour counter.

    Animals are grouped by species in creation order and are never removed,
    dead ones included. Randomness comes from an injected source so a caller
    can control the damage and feeding draws.
    """

    def __init__(self, config: ZooConfig | None = None, rng: RandomSource | None = None):
        """
        Initialize the population.

        Args:
            config: Population parameters (defaults to ZooConfig())
            rng: Random source; a seeded random.Random is built when omitted
        """
        self.config = config if config is not None else ZooConfig()

        # Seed is only known when the population builds its own generator
        self.seed: int | None = None
        if rng is not None:
            self.rng: RandomSource = rng
        else:
            if self.config.seed is not None:
                self.seed = self.config.seed
            else:
                self.seed = random.randint(0, 2**31 - 1)
            self.rng = random.Random(self.seed)

        self._animals: list[Animal] = [
            Animal(species)
            for species in Species
            for _ in range(self.config.animals_per_species)
        ]
        self._elapsed_hours = 0

        self.stats = PopulationStats()
        self.history = StatsHistory()
        self._update_stats(deaths=0)

    def __len__(self) -> int:
        return len(self._animals)

    def __iter__(self) -> Iterator[Animal]:
        return iter(self._animals)

    @property
    def animals(self) -> tuple[Animal, ...]:
        """Read-only view of the animals in display order."""
        return tuple(self._animals)

    @property
    def elapsed_hours(self) -> int:
        """Number of hours simulated so far."""
        return self._elapsed_hours

    @property
    def all_dead(self) -> bool:
        """Check if every animal has died."""
        return all(animal.is_dead for animal in self._animals)

    def advance_time(self) -> None:
        """
        Simulate one hour.

        Every animal gets its own damage draw; dead animals ignore it. The
        hour counter advances even when nothing is left alive.
        """
        dead_before = self.stats.dead

        for animal in self._animals:
            damage = self.rng.uniform(self.config.damage_min, self.config.damage_max)
            animal.apply_damage(damage)

        self._elapsed_hours += 1
        self._update_stats(deaths=self._count(LifecycleState.DEAD) - dead_before)

    def feed_all(self) -> dict[Species, float]:
        """
        Feed every animal.

        One bonus is drawn per species, in species order, and shared by all
        animals of that species.

        Returns:
            The bonus percentage given to each species
        """
        dead_before = self.stats.dead

        bonuses = {
            species: self.rng.uniform(self.config.feed_min, self.config.feed_max)
            for species in Species
        }
        for animal in self._animals:
            animal.feed(bonuses[animal.species])

        self._update_stats(deaths=self._count(LifecycleState.DEAD) - dead_before)
        return bonuses

    def report(self) -> Iterator[AnimalReport]:
        """Yield a display row per animal, in population order."""
        for index, animal in enumerate(self._animals):
            yield AnimalReport(index, animal.species.label, animal.health, animal.state.label)

    def _count(self, state: LifecycleState) -> int:
        return sum(1 for animal in self._animals if animal.state == state)

    def _update_stats(self, deaths: int) -> None:
        """Refresh the stats snapshot and record it to history."""
        self.stats.hour = self._elapsed_hours
        self.stats.alive = self._count(LifecycleState.ALIVE)
        self.stats.cannot_walk = self._count(LifecycleState.CANNOT_WALK)
        self.stats.dead = self._count(LifecycleState.DEAD)
        self.stats.deaths_this_hour = deaths
        if self._animals:
            self.stats.avg_health = float(np.mean([animal.health for animal in self._animals]))
        else:
            self.stats.avg_health = 0.0

        self.history.record(self.stats)
