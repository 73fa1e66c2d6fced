"""Tests for the animal health state machine."""

import pytest

from zoo_simulator.simulation import Animal, LifecycleState, Species, next_state
from zoo_simulator.simulation.animal import SPECIES_PROFILES, TRANSITIONS


def make_animal(species: Species, health: float, state: LifecycleState = LifecycleState.ALIVE) -> Animal:
    animal = Animal(species)
    animal.health = health
    animal.state = state
    return animal


class TestAnimalBasics:
    """Test creation and the health arithmetic."""

    def test_new_animal_is_healthy(self):
        """Test that an animal starts at full health and alive."""
        animal = Animal(Species.GIRAFFE)
        assert animal.health == 100.0
        assert animal.state == LifecycleState.ALIVE
        assert animal.is_alive
        assert animal.label == "Giraffe"

    def test_damage_is_relative_to_current_health(self):
        """Test that damage removes a share of current health, not a flat amount."""
        animal = Animal(Species.MONKEY)
        animal.apply_damage(20.0)
        assert animal.health == pytest.approx(80.0)

        animal.apply_damage(50.0)
        assert animal.health == pytest.approx(40.0)

    def test_feed_is_relative_to_current_health(self):
        """Test that feeding adds a share of current health."""
        animal = make_animal(Species.MONKEY, 40.0)
        animal.feed(25.0)
        assert animal.health == pytest.approx(50.0)

    def test_feed_caps_at_100(self):
        """Test that feeding never raises health above 100."""
        animal = make_animal(Species.MONKEY, 90.0)
        animal.feed(50.0)
        assert animal.health == 100.0

    def test_full_damage_reaches_zero(self):
        """Test that 100% damage drops health to exactly zero."""
        animal = Animal(Species.ELEPHANT)
        animal.apply_damage(100.0)
        assert animal.health == 0.0

    def test_out_of_range_percentages_are_clamped(self):
        """Test that negative percentages are accepted and clamped to bounds."""
        starving = make_animal(Species.MONKEY, 50.0)
        starving.feed(-300.0)
        assert starving.health == 0.0
        assert starving.state == LifecycleState.DEAD

        healed = make_animal(Species.GIRAFFE, 80.0)
        healed.apply_damage(-100.0)
        assert healed.health == 100.0
        assert healed.state == LifecycleState.ALIVE


class TestSingleStageSpecies:
    """Test Monkey and Giraffe thresholds."""

    @pytest.mark.parametrize(
        "species,health,expected",
        [
            (Species.MONKEY, 30.0, LifecycleState.ALIVE),
            (Species.MONKEY, 29.9, LifecycleState.DEAD),
            (Species.GIRAFFE, 50.0, LifecycleState.ALIVE),
            (Species.GIRAFFE, 49.9, LifecycleState.DEAD),
        ],
    )
    def test_threshold(self, species, health, expected):
        """Test the death threshold of each species."""
        animal = make_animal(species, health)
        animal.update_state()
        assert animal.state == expected

    def test_monkey_dies_from_damage(self):
        """Test that damage taking a monkey below 30 kills it."""
        animal = make_animal(Species.MONKEY, 35.0)
        animal.apply_damage(20.0)
        assert animal.health == pytest.approx(28.0)
        assert animal.state == LifecycleState.DEAD

    def test_never_cannot_walk(self, seeded_rng):
        """Test that only elephants can be in CANNOT_WALK."""
        for species in (Species.MONKEY, Species.GIRAFFE):
            animal = Animal(species)
            for _ in range(200):
                if seeded_rng.random() < 0.6:
                    animal.apply_damage(seeded_rng.uniform(0.0, 20.0))
                else:
                    animal.feed(seeded_rng.uniform(10.0, 25.0))
                assert animal.state != LifecycleState.CANNOT_WALK


class TestElephant:
    """Test the elephant's two-stage degradation."""

    def test_exactly_70_is_alive(self):
        """Test that the 70 boundary does not trigger degradation."""
        animal = make_animal(Species.ELEPHANT, 70.0)
        animal.update_state()
        assert animal.state == LifecycleState.ALIVE

    def test_first_drop_disables(self):
        """Test that the first drop below 70 only disables the elephant."""
        animal = make_animal(Species.ELEPHANT, 65.0)
        animal.update_state()
        assert animal.state == LifecycleState.CANNOT_WALK
        assert animal.is_alive

    def test_second_drop_kills(self):
        """Test that staying below 70 while disabled kills the elephant."""
        animal = make_animal(Species.ELEPHANT, 65.0)
        animal.update_state()
        animal.apply_damage(10.0)
        assert animal.health == pytest.approx(58.5)
        assert animal.state == LifecycleState.DEAD

    def test_feeding_still_below_threshold_kills(self):
        """Test that a feed leaving a disabled elephant under 70 still kills it."""
        animal = make_animal(Species.ELEPHANT, 60.0, LifecycleState.CANNOT_WALK)
        animal.feed(10.0)
        assert animal.health == pytest.approx(66.0)
        assert animal.state == LifecycleState.DEAD

    def test_recovery_resets_to_alive(self):
        """Test that recovering to 70 or more returns straight to ALIVE."""
        animal = make_animal(Species.ELEPHANT, 65.0, LifecycleState.CANNOT_WALK)
        animal.feed(20.0)
        assert animal.health == pytest.approx(78.0)
        assert animal.state == LifecycleState.ALIVE

        # Disabling is armed again after recovery, not a kill
        animal.apply_damage(50.0)
        assert animal.state == LifecycleState.CANNOT_WALK


class TestDeadIsTerminal:
    """Test that dead animals never change."""

    def test_dead_giraffe_ignores_feeding(self):
        """Test that a dead giraffe keeps its health when fed."""
        animal = make_animal(Species.GIRAFFE, 45.0)
        animal.update_state()
        assert animal.state == LifecycleState.DEAD

        animal.feed(50.0)
        assert animal.health == 45.0
        assert animal.state == LifecycleState.DEAD

    @pytest.mark.parametrize("species", list(Species))
    def test_dead_animal_ignores_damage(self, species):
        """Test that damage is a no-op once dead."""
        animal = make_animal(species, 12.5, LifecycleState.DEAD)
        animal.apply_damage(20.0)
        animal.feed(25.0)
        assert animal.health == 12.5
        assert animal.state == LifecycleState.DEAD
        assert animal.is_dead

    def test_next_state_keeps_dead(self):
        """Test that the transition function maps DEAD to DEAD at any health."""
        assert next_state(Species.ELEPHANT, LifecycleState.DEAD, 100.0) == LifecycleState.DEAD


class TestTransitionTable:
    """Test the species and transition tables."""

    def test_every_species_has_a_profile(self):
        """Test that each species has threshold rules."""
        assert set(SPECIES_PROFILES) == set(Species)
        assert [p.two_stage for p in SPECIES_PROFILES.values()].count(True) == 1

    def test_every_live_combination_is_covered(self):
        """Test that every (two_stage, live state, below) key has a transition."""
        for two_stage in (False, True):
            for state in (LifecycleState.ALIVE, LifecycleState.CANNOT_WALK):
                for below in (False, True):
                    assert (two_stage, state, below) in TRANSITIONS


class TestInvariants:
    """Test invariants over random operation sequences."""

    @pytest.mark.parametrize("species", list(Species))
    def test_health_stays_in_bounds(self, species, seeded_rng):
        """Test that health remains within [0, 100] and dead stays dead."""
        animal = Animal(species)
        was_dead = False
        for _ in range(500):
            before = (animal.health, animal.state)
            if seeded_rng.random() < 0.5:
                animal.apply_damage(seeded_rng.uniform(0.0, 20.0))
            else:
                animal.feed(seeded_rng.uniform(10.0, 25.0))

            assert 0.0 <= animal.health <= 100.0
            if was_dead:
                assert (animal.health, animal.state) == before
            was_dead = animal.is_dead

    @pytest.mark.parametrize("species,threshold", [(Species.MONKEY, 30.0), (Species.GIRAFFE, 50.0)])
    def test_state_matches_health(self, species, threshold, seeded_rng):
        """Test that a single-stage animal is dead exactly when below threshold."""
        animal = Animal(species)
        while not animal.is_dead:
            animal.apply_damage(seeded_rng.uniform(0.0, 20.0))
            if animal.health < threshold:
                assert animal.state == LifecycleState.DEAD
            else:
                assert animal.state == LifecycleState.ALIVE
