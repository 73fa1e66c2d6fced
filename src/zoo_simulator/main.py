"""Main entry point for the Zoo Simulator."""

import argparse

from .cli import run_cli
from .config import Config
from .renderer import PygameRenderer
from .simulation import Population


def run_window(population: Population, config: Config) -> None:
    """Run the pygame window until it is closed."""
    renderer = PygameRenderer(config.renderer)
    renderer.set_population(population)

    print("Controls:")
    print("  - Click 'Pass an hour' to advance the simulation")
    print("  - Click 'Feed the animals' to feed everyone")
    print("  - ESC to quit")
    print()

    announced_all_dead = False
    try:
        running = True
        while running:
            running = renderer.handle_events()

            if population.all_dead and not announced_all_dead:
                print(f"All animals have died after {population.elapsed_hours} hours.")
                announced_all_dead = True

            renderer.render(population)
            renderer.tick()
    finally:
        renderer.cleanup()


def main() -> None:
    """Run the zoo simulation."""
    config = Config.default()

    parser = argparse.ArgumentParser(description="Zoo Simulator: animal health over simulated hours")
    parser.add_argument("--cli", action="store_true", help="use the terminal menu instead of the window")
    parser.add_argument("--seed", type=int, default=config.zoo.seed)
    args = parser.parse_args()

    config.zoo.seed = args.seed
    population = Population(config.zoo)

    print("Starting Zoo Simulator...")
    print(f"  Seed: {population.seed}")
    print(f"  Animals: {len(population)} ({config.zoo.animals_per_species} per species)")
    print()

    if args.cli:
        run_cli(population)
    else:
        run_window(population, config)

    print(f"Simulation ended after {population.elapsed_hours} hours.")


if __name__ == "__main__":
    main()
