"""Pygame-CE renderer for the zoo window."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ..config import RendererConfig
from . import colors
from .ui import UI_COLORS, Button, Sparkline

if TYPE_CHECKING:
    from ..simulation.population import Population


class PygameRenderer:
    """
    Pygame-based window for the zoo simulation.

    Renders:
    - Hours passed and population counts
    - "Pass an hour" and "Feed the animals" buttons
    - One status row per animal (colored by state, with a health bar)
    - Sparklines of alive count and average health
    """

    def __init__(self, config: RendererConfig):
        """
        Initialize the renderer.

        Args:
            config: Renderer configuration
        """
        self.config = config
        self.window_width = config.window_width
        self.window_height = config.window_height

        pygame.init()
        pygame.display.set_caption("Zoo Simulator")

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()

        self.font_large = pygame.font.Font(None, 32)
        self.font_medium = pygame.font.Font(None, 22)
        self.font_small = pygame.font.Font(None, 18)

        # Set by set_population, buttons act on it
        self._population: Population | None = None

        self._init_ui()

    def _init_ui(self) -> None:
        """Initialize UI elements."""
        padding = 15
        btn_width = 150
        btn_height = 28
        btn_y = 70

        self.btn_pass_hour = Button(
            padding, btn_y, btn_width, btn_height, "Pass an hour",
            on_click=self._on_pass_hour,
        )
        self.btn_feed = Button(
            padding + btn_width + 10, btn_y, btn_width, btn_height, "Feed the animals",
            on_click=self._on_feed,
        )
        self.buttons = [self.btn_pass_hour, self.btn_feed]

        chart_width = 110
        chart_height = 24
        chart_x = self.window_width - padding - chart_width
        self.chart_alive = Sparkline(
            chart_x, 12, chart_width, chart_height, color=UI_COLORS.chart_alive
        )
        self.chart_health = Sparkline(
            chart_x, 40, chart_width, chart_height, color=UI_COLORS.chart_health
        )

    def set_population(self, population: Population) -> None:
        """Set the population the buttons act on."""
        self._population = population

    def _on_pass_hour(self) -> None:
        if self._population is not None:
            self._population.advance_time()

    def _on_feed(self) -> None:
        if self._population is not None:
            self._population.feed_all()

    def handle_events(self) -> bool:
        """
        Handle Pygame events.

        Returns:
            False if the window should close, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

            for btn in self.buttons:
                if btn.handle_event(event):
                    break

        return True

    def render(self, population: Population) -> None:
        """
        Render the current state of the population.

        Args:
            population: The population to render
        """
        self.screen.fill(colors.BG_DARK)

        padding = 15
        y = 10

        heading = self.font_large.render("Zoo Simulator", True, colors.TEXT_PRIMARY)
        self.screen.blit(heading, (padding, y))
        y += 30

        hours = self.font_medium.render(
            f"Hours passed: {population.elapsed_hours}", True, colors.TEXT_SECONDARY
        )
        self.screen.blit(hours, (padding, y))

        self._render_charts(population)

        for btn in self.buttons:
            btn.render(self.screen, self.font_small)
        y = self.btn_pass_hour.rect.bottom + 12

        pygame.draw.line(
            self.screen, colors.DIVIDER, (padding, y), (self.window_width - padding, y)
        )
        y += 8

        section = self.font_medium.render("Animals", True, UI_COLORS.accent)
        self.screen.blit(section, (padding, y))
        y += 24

        for row in population.report():
            self._render_animal_row(row.species, row.health, row.state, y, padding)
            y += self.config.row_height

        if population.all_dead:
            notice = self.font_medium.render(
                "All animals have died.", True, colors.TEXT_WARNING
            )
            self.screen.blit(notice, (padding, y + 6))

        pygame.display.flip()

    def _render_charts(self, population: Population) -> None:
        """Render the alive count and average health sparklines with labels."""
        stats = population.stats
        label_x = self.chart_alive.rect.x - 8

        alive_label = self.font_small.render(
            f"Alive: {stats.alive}/{len(population)}", True, colors.TEXT_SECONDARY
        )
        self.screen.blit(
            alive_label, (label_x - alive_label.get_width(), self.chart_alive.rect.y + 5)
        )
        self.chart_alive.render(
            self.screen, list(population.history.alive), max_val=len(population)
        )

        health_label = self.font_small.render(
            f"Avg: {stats.avg_health:.1f}%", True, colors.TEXT_SECONDARY
        )
        self.screen.blit(
            health_label, (label_x - health_label.get_width(), self.chart_health.rect.y + 5)
        )
        self.chart_health.render(
            self.screen, list(population.history.avg_health), max_val=100.0
        )

    def _render_animal_row(
        self, species: str, health: float, state: str, y: int, padding: int
    ) -> None:
        """Render one animal's status line and health bar."""
        text = f"{species} - Health: {health:.1f}%, State: {state}"
        text_surface = self.font_small.render(text, True, colors.get_state_color(state, health))
        self.screen.blit(text_surface, (padding, y))

        bar_width = 100
        bar_height = 8
        bar_x = self.window_width - padding - bar_width
        bar_y = y + 3
        pygame.draw.rect(
            self.screen, colors.HEALTH_BAR_BG, (bar_x, bar_y, bar_width, bar_height), border_radius=2
        )
        fill = int(bar_width * health / 100.0)
        if fill > 0:
            pygame.draw.rect(
                self.screen,
                colors.get_health_color(health),
                (bar_x, bar_y, fill, bar_height),
                border_radius=2,
            )

    def tick(self) -> float:
        """
        Advance the renderer clock and return delta time.

        Returns:
            Time elapsed since last tick in seconds.
        """
        return self.clock.tick(self.config.target_fps) / 1000.0

    def cleanup(self) -> None:
        """Clean up Pygame resources."""
        pygame.quit()
