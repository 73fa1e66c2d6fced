"""Centralized configuration for the simulation."""

from dataclasses import dataclass


@dataclass
class ZooConfig:
    """Configuration for the zoo population."""

    animals_per_species: int = 5
    # Damage drawn per animal per hour, as a percentage of current health
    damage_min: float = 0.0
    damage_max: float = 20.0
    # Feeding bonus drawn once per species per feeding
    feed_min: float = 10.0
    feed_max: float = 25.0
    # Random seed for replaying a run (None = random seed)
    seed: int | None = None


@dataclass
class RendererConfig:
    """Configuration for the Pygame renderer."""

    window_width: int = 520
    window_height: int = 640
    target_fps: int = 30
    row_height: int = 22


@dataclass
class Config:
    """Main configuration container."""

    zoo: ZooConfig
    renderer: RendererConfig

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls(
            zoo=ZooConfig(),
            renderer=RendererConfig(),
        )
