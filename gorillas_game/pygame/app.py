"""Pygame-powered presentation layer for the Gorillas duel."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Gorillas."
    ) from exc

from gorillas_game.core.city import CitySettings
from gorillas_game.core.session import GameSession, ProjectileStep, RenderState
from gorillas_game.pygame.config import load_user_settings, save_user_settings, stored_window_size
from gorillas_game.pygame.display import DisplayManager
from gorillas_game.pygame.input import InputHandler
from gorillas_game.pygame.menus import draw_congratulations, draw_ui
from gorillas_game.pygame.renderer import (
    draw_background,
    draw_background_buildings,
    draw_bomb,
    draw_buildings,
    draw_gorillas,
)

logger = logging.getLogger(__name__)


class PygameGorillas:
    """Graphical Gorillas client built on top of the core game session."""

    def __init__(
        self,
        settings: Optional[CitySettings] = None,
        seed: Optional[int] = None,
        window_size: Optional[Tuple[int, int]] = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self._user_settings = load_user_settings()
        if window_size is None:
            window_size = stored_window_size(self._user_settings)

        self.display = DisplayManager(size=window_size, caption="Gorillas")
        self.font_small = pygame.font.SysFont("consolas", 16)
        self.font_regular = pygame.font.SysFont("consolas", 20)
        self.font_large = pygame.font.SysFont(None, 40)

        self.clock = pygame.time.Clock()
        self.running = True

        self.session = GameSession(settings, seed=seed, viewport=self.display.size)
        self.input = InputHandler(self)
        self.new_game_button: Optional[pygame.Rect] = None
        self._flight_token: Optional[int] = None
        self.render_state: RenderState = self.session.get_render_state()

    # ------------------------------------------------------------------
    # Properties
    @property
    def screen(self) -> pygame.Surface:
        return self.display.screen

    # ------------------------------------------------------------------
    # Actions
    def throw(self) -> None:
        token = self.session.release_aim()
        if token is not None:
            self._flight_token = token

    def new_game(self) -> None:
        self.input.cancel_drag()
        self._flight_token = None
        self.new_game_button = None
        self.session.request_new_game()

    def resize(self, width: int, height: int) -> None:
        size = self.display.resize(width, height)
        self.session.on_resize(*size)
        self._user_settings["window_size"] = list(size)
        save_user_settings(self._user_settings)

    # ------------------------------------------------------------------
    # Game Loop helpers
    def run(self) -> None:
        """Main pygame loop."""

        while self.running:
            self.clock.tick(60)
            self._handle_events()
            self._update()
            self._draw()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            else:
                self.input.process_event(event)

    def _update(self) -> Optional[ProjectileStep]:
        if not self.session.is_animating_projectile():
            return None
        step = self.session.animate(pygame.time.get_ticks(), self._flight_token)
        if step.stale:
            logger.debug("Dropped frame callback from an abandoned match")
        elif step.finished:
            self._flight_token = None
        return step

    def _draw(self) -> None:
        self.render_state = self.session.get_render_state()
        draw_background(self)
        draw_background_buildings(self)
        draw_buildings(self)
        draw_gorillas(self)
        draw_bomb(self)
        draw_ui(self)
        self.new_game_button = draw_congratulations(self)
        pygame.display.flip()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameGorillas(**kwargs)
    app.run()
