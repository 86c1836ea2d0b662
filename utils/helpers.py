"""helpers.py - Small numeric and drawing helpers shared by all systems."""

import pygame
from settings import WHITE


def sign(value: float) -> int:
    """Return -1, 0 or 1 matching the sign of *value*."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def move_toward(current: float, target: float, max_step: float) -> float:
    """Move *current* toward *target* by at most *max_step*, never past it."""
    if abs(target - current) <= max_step:
        return target
    return current + max_step * sign(target - current)


def draw_text(surface, text, x, y, color=WHITE, size=18):
    """Render a single line of text at (x, y)."""
    font = pygame.font.SysFont(None, size)
    rendered = font.render(text, True, color)
    surface.blit(rendered, (x, y))
