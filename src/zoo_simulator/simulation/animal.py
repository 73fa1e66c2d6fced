"""Animal entity - a single zoo animal and its health state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MIN_HEALTH = 0.0
MAX_HEALTH = 100.0


class Species(Enum):
    """Species kept in the zoo."""

    MONKEY = "Monkey"
    GIRAFFE = "Giraffe"
    ELEPHANT = "Elephant"

    @property
    def label(self) -> str:
        """Display name of the species."""
        return self.value


class LifecycleState(Enum):
    """Lifecycle states an animal can be in."""

    ALIVE = "Alive"
    CANNOT_WALK = "CannotWalk"
    DEAD = "Dead"

    @property
    def label(self) -> str:
        """Display name of the state."""
        return self.value


@dataclass(frozen=True)
class SpeciesProfile:
    """
    Health rules for one species.

    Attributes:
        threshold: Health below which the animal degrades
        two_stage: If True, the first drop below the threshold only disables
            the animal (CANNOT_WALK); it dies if still below on the next update
    """

    threshold: float
    two_stage: bool = False


SPECIES_PROFILES: dict[Species, SpeciesProfile] = {
    Species.MONKEY: SpeciesProfile(threshold=30.0),
    Species.GIRAFFE: SpeciesProfile(threshold=50.0),
    Species.ELEPHANT: SpeciesProfile(threshold=70.0, two_stage=True),
}


def clamp_health(health: float) -> float:
    """Clamp a health value to the valid percentage range."""
    return max(MIN_HEALTH, min(MAX_HEALTH, health))


# (two_stage, current state, below threshold) -> next state
TRANSITIONS: dict[tuple[bool, LifecycleState, bool], LifecycleState] = {
    (False, LifecycleState.ALIVE, True): LifecycleState.DEAD,
    (False, LifecycleState.ALIVE, False): LifecycleState.ALIVE,
    (False, LifecycleState.CANNOT_WALK, True): LifecycleState.DEAD,
    (False, LifecycleState.CANNOT_WALK, False): LifecycleState.ALIVE,
    (True, LifecycleState.ALIVE, True): LifecycleState.CANNOT_WALK,
    (True, LifecycleState.ALIVE, False): LifecycleState.ALIVE,
    (True, LifecycleState.CANNOT_WALK, True): LifecycleState.DEAD,
    (True, LifecycleState.CANNOT_WALK, False): LifecycleState.ALIVE,
}


def next_state(
    species: Species, current: LifecycleState, health: float
) -> LifecycleState:
    """
    Resolve the state an animal moves to after a health change.

    Dead is terminal and always maps to itself.
    """
    if current == LifecycleState.DEAD:
        return current
    profile = SPECIES_PROFILES[species]
    return TRANSITIONS[(profile.two_stage, current, health < profile.threshold)]


@dataclass
class Animal:
    """
    A zoo animal.

    Health is a percentage in [0, 100]. Damage and feeding are applied
    relative to the current health, so a healthy animal loses (and gains)
    more in absolute terms than a weak one. Dead animals never change again.
    """

    species: Species
    health: float = MAX_HEALTH
    state: LifecycleState = field(default=LifecycleState.ALIVE)

    @property
    def label(self) -> str:
        """Species display name."""
        return self.species.label

    @property
    def is_alive(self) -> bool:
        """Check if the animal has not died (CANNOT_WALK counts as alive)."""
        return self.state != LifecycleState.DEAD

    @property
    def is_dead(self) -> bool:
        return self.state == LifecycleState.DEAD

    def apply_damage(self, percentage: float) -> None:
        """
        Reduce health by a percentage of its current value.

        Args:
            percentage: Damage as a percentage of current health
        """
        if self.is_dead:
            return

        self.health -= self.health * (percentage / 100.0)
        self.health = clamp_health(self.health)
        self.update_state()

    def feed(self, percentage: float) -> None:
        """
        Increase health by a percentage of its current value, capped at 100.

        Args:
            percentage: Bonus as a percentage of current health
        """
        if self.is_dead:
            return

        self.health += self.health * (percentage / 100.0)
        self.health = clamp_health(self.health)
        self.update_state()

    def update_state(self) -> None:
        """Recompute the lifecycle state from the current health."""
        self.state = next_state(self.species, self.state, self.health)
