"""Match geometry and the per-sub-step collision resolver."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gorillas_game.core.bomb import Bomb, ThrowSettings
from gorillas_game.core.city import BlastHole, City, CitySettings
from gorillas_game.core.gorilla import RESTING, Gorilla, throwing_side

logger = logging.getLogger(__name__)

FLYING = "flying"
MISS = "miss"
HIT = "hit"


@dataclass
class ShotResult:
    """Outcome of one animation tick of a thrown bomb."""

    outcome: str = FLYING
    reason: Optional[str] = None
    impact_x: Optional[float] = None
    impact_y: Optional[float] = None
    blast_hole: Optional[BlastHole] = None
    hit_gorilla: Optional[Gorilla] = None
    body_part: Optional[str] = None
    substeps: int = 0
    path: List[tuple] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return self.outcome != FLYING


class Game:
    """Skyline, gorillas and bomb of a single match."""

    def __init__(
        self,
        settings: Optional[CitySettings] = None,
        seed: Optional[int] = None,
        throw_settings: Optional[ThrowSettings] = None,
        impact_margin: float = 4.0,
    ) -> None:
        self.city = City(settings or CitySettings(seed=seed))
        if len(self.city.buildings) < 4:
            raise ValueError("a match needs at least 4 buildings for two distinct platforms")
        self.throw_settings = throw_settings or ThrowSettings()
        self.impact_margin = impact_margin
        self.gorillas = [
            Gorilla(1, self.city.platform(1)),
            Gorilla(2, self.city.platform(2)),
        ]
        self.bomb = Bomb()

    @property
    def blast_holes(self):
        return self.city.blast_holes

    def gorilla(self, player: int) -> Gorilla:
        return self.gorillas[player - 1]

    @staticmethod
    def opponent(player: int) -> int:
        return 2 if player == 1 else 1

    def place_bomb(self, player: int) -> None:
        """Put the bomb, at rest, into the throwing hand of ``player``."""

        x, y = self.gorilla(player).hand_position()
        self.bomb.reset(x, y)

    # ------------------------------------------------------------------
    # Collision checks, in priority order
    def check_frame_hit(self, visible_width: float) -> bool:
        """Return ``True`` once the bomb has left the screen.

        The top edge is never checked: gravity always brings the bomb back.
        """

        bomb = self.bomb
        return bomb.y < 0 or bomb.x < 0 or bomb.x > visible_width

    def check_building_hit(self) -> Optional[BlastHole]:
        """Carve and return a new crater if the bomb struck solid building."""

        bomb = self.bomb
        building = self.city.building_hit_test(bomb.x, bomb.y, self.impact_margin)
        if building is None:
            return None
        return self.city.blast_holes.record(bomb.x, bomb.y)

    def check_gorilla_hit(self, defender: int) -> Optional[str]:
        bomb = self.bomb
        return self.gorilla(defender).hit_test(bomb.x, bomb.y, RESTING)

    def check_substep(self, player: int, visible_width: float) -> ShotResult:
        bomb = self.bomb
        if self.check_frame_hit(visible_width):
            return ShotResult(MISS, "off_screen", bomb.x, bomb.y)
        hole = self.check_building_hit()
        if hole is not None:
            return ShotResult(MISS, "building", bomb.x, bomb.y, blast_hole=hole)
        defender = self.opponent(player)
        part = self.check_gorilla_hit(defender)
        if part is not None:
            return ShotResult(
                HIT,
                "gorilla",
                bomb.x,
                bomb.y,
                hit_gorilla=self.gorilla(defender),
                body_part=part,
            )
        return ShotResult()

    # ------------------------------------------------------------------
    # Simulation
    def step_bomb(self, elapsed: float, player: int, visible_width: float) -> ShotResult:
        """Advance the bomb through one animation tick of ``elapsed`` ms.

        The tick is split into a fixed number of sub-steps with a collision
        check after each one; the first miss or hit ends the tick early.
        """

        settings = self.throw_settings
        substep = max(0.0, elapsed) / settings.substeps
        spin = throwing_side(player)
        path: List[tuple] = []
        for index in range(settings.substeps):
            self.bomb.move(substep, spin, settings)
            path.append((self.bomb.x, self.bomb.y))
            result = self.check_substep(player, visible_width)
            if result.finished:
                result.substeps = index + 1
                result.path = path
                logger.debug(
                    "Bomb %s (%s) at (%.1f, %.1f) after %d sub-steps",
                    result.outcome,
                    result.reason,
                    self.bomb.x,
                    self.bomb.y,
                    result.substeps,
                )
                return result
        return ShotResult(substeps=settings.substeps, path=path)


__all__ = ["FLYING", "Game", "HIT", "MISS", "ShotResult"]
