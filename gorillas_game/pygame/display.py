"""Display and window-size management for the pygame client."""

from __future__ import annotations

from typing import Tuple

import pygame

from gorillas_game.pygame.config import MIN_WINDOW_SIZE


class DisplayManager:
    """Encapsulate the pygame window surface and its resizing."""

    def __init__(self, *, size: Tuple[int, int], caption: str) -> None:
        self.caption = caption
        self._flags = pygame.RESIZABLE
        self.display_surface = pygame.display.set_mode(self._clamp(size), self._flags)
        pygame.display.set_caption(self.caption)

    @staticmethod
    def _clamp(size: Tuple[int, int]) -> Tuple[int, int]:
        return max(MIN_WINDOW_SIZE[0], int(size[0])), max(MIN_WINDOW_SIZE[1], int(size[1]))

    @property
    def screen(self) -> pygame.Surface:
        return self.display_surface

    @property
    def size(self) -> Tuple[int, int]:
        return self.display_surface.get_size()

    def resize(self, width: int, height: int) -> Tuple[int, int]:
        """Apply a new window size and return the size actually used."""

        size = self._clamp((width, height))
        if self.display_surface.get_size() != size:
            self.display_surface = pygame.display.set_mode(size, self._flags)
            pygame.display.set_caption(self.caption)
        return size


__all__ = ["DisplayManager"]
