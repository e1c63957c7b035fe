"""Rendering helpers for the pygame front-end."""

from gorillas_game.pygame.renderer.scene import (
    draw_background,
    draw_background_buildings,
    draw_bomb,
    draw_buildings,
    draw_gorillas,
    to_screen,
)

__all__ = [
    "draw_background",
    "draw_background_buildings",
    "draw_bomb",
    "draw_buildings",
    "draw_gorillas",
    "to_screen",
]
