"""UI widgets for the zoo window."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable

import pygame


@dataclass
class UIColors:
    """Color scheme for UI elements."""

    bg: tuple[int, int, int] = (30, 32, 40)
    bg_hover: tuple[int, int, int] = (45, 48, 58)
    bg_active: tuple[int, int, int] = (55, 58, 70)

    accent: tuple[int, int, int] = (100, 180, 255)
    accent_dim: tuple[int, int, int] = (60, 100, 140)

    text: tuple[int, int, int] = (220, 225, 235)

    chart_alive: tuple[int, int, int] = (80, 200, 220)
    chart_health: tuple[int, int, int] = (255, 200, 80)
    chart_bg: tuple[int, int, int] = (25, 27, 35)


UI_COLORS = UIColors()


class Button:
    """A clickable push button."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        on_click: Callable[[], None] | None = None,
    ):
        """
        Initialize a button.

        Args:
            x: X position
            y: Y position
            width: Button width
            height: Button height
            text: Button text
            on_click: Callback when clicked
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.on_click = on_click
        self.hovered = False
        self.pressed = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle pygame events.

        Returns:
            True if event was consumed
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was_pressed = self.pressed
            self.pressed = False
            if was_pressed and self.rect.collidepoint(event.pos):
                if self.on_click:
                    self.on_click()
                return True

        elif event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)

        return False

    def render(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Render the button."""
        if self.pressed:
            bg_color = UI_COLORS.bg_active
        elif self.hovered:
            bg_color = UI_COLORS.bg_hover
        else:
            bg_color = UI_COLORS.bg

        pygame.draw.rect(surface, bg_color, self.rect, border_radius=4)
        border_color = UI_COLORS.accent if self.hovered else UI_COLORS.accent_dim
        pygame.draw.rect(surface, border_color, self.rect, width=1, border_radius=4)

        text_surface = font.render(self.text, True, UI_COLORS.text)
        text_x = self.rect.x + (self.rect.width - text_surface.get_width()) // 2
        text_y = self.rect.y + (self.rect.height - text_surface.get_height()) // 2
        surface.blit(text_surface, (text_x, text_y))


class Sparkline:
    """A mini line chart for a stats history series."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color: tuple[int, int, int] = UI_COLORS.chart_alive,
    ):
        self.rect = pygame.Rect(x, y, width, height)
        self.color = color

    def render(
        self,
        surface: pygame.Surface,
        data: Sequence[float | int],
        min_val: float = 0.0,
        max_val: float | None = None,
    ) -> None:
        """
        Render the chart.

        Args:
            surface: Surface to render on
            data: Values to plot, oldest first
            min_val: Bottom of the value axis
            max_val: Top of the value axis (max of data if None)
        """
        pygame.draw.rect(surface, UI_COLORS.chart_bg, self.rect, border_radius=3)

        if len(data) < 2:
            return

        top = max(data) if max_val is None else max_val
        value_range = top - min_val if top > min_val else 1.0

        padding = 2
        chart_width = self.rect.width - padding * 2
        chart_height = self.rect.height - padding * 2

        points = [
            (
                self.rect.x + padding + int(i * chart_width / (len(data) - 1)),
                self.rect.y + padding + int((1 - (value - min_val) / value_range) * chart_height),
            )
            for i, value in enumerate(data)
        ]
        pygame.draw.lines(surface, self.color, False, points, 2)
