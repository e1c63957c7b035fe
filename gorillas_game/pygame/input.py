"""Input handling for the pygame client."""

from __future__ import annotations

import math
from typing import Optional, Tuple

import pygame

from gorillas_game.core.session import AIMING


def _set_cursor(cursor: int) -> None:
    try:
        pygame.mouse.set_cursor(cursor)
    except pygame.error:
        # headless video drivers have no cursor support
        pass


class InputHandler:
    """Translate pygame events into calls on the game session."""

    def __init__(self, app) -> None:
        self.app = app
        self._drag_start: Optional[Tuple[int, int]] = None

    @property
    def dragging(self) -> bool:
        return self._drag_start is not None

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_press(event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self._handle_motion(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._handle_release()

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key(self, key: int) -> None:
        app = self.app
        if key == pygame.K_ESCAPE:
            app.running = False
            return
        if key == pygame.K_n:
            app.new_game()

    def _in_grab_area(self, pos: Tuple[int, int]) -> bool:
        session = self.app.session
        left, bottom, size = session.grab_area
        radius = size / 2
        center_x = left + radius
        center_y = session.viewport[1] - (bottom + radius)
        return math.hypot(pos[0] - center_x, pos[1] - center_y) <= radius

    def _handle_press(self, pos: Tuple[int, int]) -> None:
        app = self.app
        button = app.new_game_button
        if button is not None and button.collidepoint(pos):
            app.new_game()
            return
        if app.session.phase != AIMING or not self._in_grab_area(pos):
            return
        if app.session.begin_aim():
            self._drag_start = pos
            _set_cursor(pygame.SYSTEM_CURSOR_HAND)

    def _handle_motion(self, pos: Tuple[int, int]) -> None:
        if self._drag_start is None:
            return
        dx = pos[0] - self._drag_start[0]
        dy = pos[1] - self._drag_start[1]
        self.app.session.update_aim_vector(dx, dy)

    def _handle_release(self) -> None:
        if self._drag_start is None:
            return
        self._drag_start = None
        _set_cursor(pygame.SYSTEM_CURSOR_ARROW)
        self.app.throw()

    def cancel_drag(self) -> None:
        if self._drag_start is not None:
            self._drag_start = None
            _set_cursor(pygame.SYSTEM_CURSOR_ARROW)


__all__ = ["InputHandler"]
