"""Info panels and the end-of-match overlay for the pygame client."""

from __future__ import annotations

from typing import Optional

import pygame

from gorillas_game.core.session import CELEBRATING, RenderState


def draw_ui(app) -> None:
    """Draw the angle and velocity panels of both players."""

    surface = app.screen
    state: RenderState = app.render_state
    width = surface.get_width()
    padding = 16
    text_color = pygame.Color(74, 60, 104)
    highlight = pygame.Color(255, 255, 255)

    for index, readout in enumerate(state.readouts):
        player = index + 1
        color = highlight if player == state.current_player and state.phase != CELEBRATING else text_color
        lines = [
            app.font_regular.render(f"Player {player}", True, color),
            app.font_small.render(f"Angle: {readout.angle}°", True, text_color),
            app.font_small.render(f"Velocity: {readout.magnitude}", True, text_color),
        ]
        top = padding
        for line in lines:
            if index == 0:
                rect = line.get_rect(left=padding, top=top)
            else:
                rect = line.get_rect(right=width - padding, top=top)
            surface.blit(line, rect)
            top = rect.bottom + 4

    message = app.font_small.render(state.message, True, text_color)
    surface.blit(message, message.get_rect(centerx=width // 2, top=padding))


def draw_congratulations(app) -> Optional[pygame.Rect]:
    """Draw the winner panel and return the clickable "New Game" button."""

    state: RenderState = app.render_state
    if state.phase != CELEBRATING:
        return None
    surface = app.screen
    width, height = surface.get_size()

    panel = pygame.Rect(0, 0, 320, 150)
    panel.center = (width // 2, height // 2)
    overlay = pygame.Surface(panel.size, pygame.SRCALPHA)
    overlay.fill((10, 12, 20, 220))
    surface.blit(overlay, panel.topleft)

    title = app.font_large.render(f"Player {state.winner} won!", True, pygame.Color(255, 255, 255))
    surface.blit(title, title.get_rect(centerx=panel.centerx, top=panel.top + 20))

    button = pygame.Rect(0, 0, 160, 40)
    button.center = (panel.centerx, panel.bottom - 40)
    pygame.draw.rect(surface, pygame.Color(235, 182, 162), button, border_radius=6)
    label = app.font_regular.render("New Game", True, pygame.Color(74, 60, 104))
    surface.blit(label, label.get_rect(center=button.center))
    return button


__all__ = ["draw_congratulations", "draw_ui"]
