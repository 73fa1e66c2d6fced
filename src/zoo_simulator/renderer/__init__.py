"""Renderer module - visualization layer."""

from .pygame_renderer import PygameRenderer
from .ui import Button, Sparkline

__all__ = [
    "Button",
    "PygameRenderer",
    "Sparkline",
]
