"""Pygame front-end for the Gorillas duel."""

from gorillas_game.pygame.app import PygameGorillas, run_pygame

__all__ = ["PygameGorillas", "run_pygame"]
