"""Terminal menu for the zoo simulation."""

from __future__ import annotations

from typing import Callable

from .simulation import Population

MENU = (
    "Choose an action:\n"
    "  1. Pass an hour\n"
    "  2. Feed the animals\n"
    "  3. Exit"
)
PROMPT = "> "
INVALID_CHOICE = "Invalid choice, try again."
ALL_DEAD = "All animals have died."


def format_report(population: Population) -> list[str]:
    """Format the population status as printable lines."""
    lines = [f"Hours passed: {population.elapsed_hours}"]
    for row in population.report():
        lines.append(
            f"{row.index + 1:2d}. {row.species:<8} Health: {row.health:5.1f}%  State: {row.state}"
        )
    return lines


def run_cli(
    population: Population,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """
    Run the menu loop until the user exits or input ends.

    Args:
        population: The population to drive
        input_fn: Reads one line of user input
        output_fn: Writes one line of output
    """
    announced_all_dead = False

    while True:
        for line in format_report(population):
            output_fn(line)

        if population.all_dead and not announced_all_dead:
            output_fn(ALL_DEAD)
            announced_all_dead = True

        output_fn(MENU)
        while True:
            try:
                choice = input_fn(PROMPT).strip()
            except EOFError:
                return

            if choice == "1":
                population.advance_time()
                break
            if choice == "2":
                bonuses = population.feed_all()
                output_fn(
                    "Fed: " + ", ".join(f"{s.label} +{b:.1f}%" for s, b in bonuses.items())
                )
                break
            if choice == "3":
                return
            output_fn(INVALID_CHOICE)

        output_fn("")
