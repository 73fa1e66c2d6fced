"""Simulation module - pure logic, no rendering."""

from .animal import (
    SPECIES_PROFILES,
    Animal,
    LifecycleState,
    Species,
    SpeciesProfile,
    next_state,
)
from .population import AnimalReport, Population, PopulationStats, StatsHistory

__all__ = [
    "SPECIES_PROFILES",
    "Animal",
    "AnimalReport",
    "LifecycleState",
    "Population",
    "PopulationStats",
    "Species",
    "SpeciesProfile",
    "StatsHistory",
    "next_state",
]
