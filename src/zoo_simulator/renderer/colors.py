"""Color definitions for the renderer."""

# Background
BG_DARK = (28, 28, 32)

# Animals - color based on lifecycle state
ANIMAL_HEALTHY = (64, 224, 208)  # Turquoise
ANIMAL_WEAK = (255, 165, 0)  # Orange
ANIMAL_CANNOT_WALK = (255, 200, 80)  # Amber
ANIMAL_DEAD = (110, 110, 120)  # Gray

# Health bar
HEALTH_BAR_BG = (50, 52, 62)
HEALTH_FULL = (120, 200, 100)
HEALTH_LOW = (220, 20, 60)  # Crimson

# UI
TEXT_PRIMARY = (240, 240, 245)
TEXT_SECONDARY = (160, 160, 170)
TEXT_WARNING = (255, 100, 100)
DIVIDER = (60, 60, 70)


def lerp_color(
    color1: tuple[int, int, int],
    color2: tuple[int, int, int],
    t: float,
) -> tuple[int, int, int]:
    """Linearly interpolate between two colors."""
    t = max(0.0, min(1.0, t))
    return (
        int(color1[0] + (color2[0] - color1[0]) * t),
        int(color1[1] + (color2[1] - color1[1]) * t),
        int(color1[2] + (color2[2] - color1[2]) * t),
    )


def get_state_color(state: str, health: float) -> tuple[int, int, int]:
    """Get the text color for an animal row based on its state label."""
    if state == "Dead":
        return ANIMAL_DEAD
    if state == "CannotWalk":
        return ANIMAL_CANNOT_WALK
    # Alive: fade towards orange as health drops
    return lerp_color(ANIMAL_WEAK, ANIMAL_HEALTHY, health / 100.0)


def get_health_color(health: float) -> tuple[int, int, int]:
    """Get the health bar fill color (0-100)."""
    return lerp_color(HEALTH_LOW, HEALTH_FULL, health / 100.0)
