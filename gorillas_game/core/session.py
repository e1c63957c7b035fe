"""Turn and phase management for a Gorillas match, decoupled from rendering."""

from __future__ import annotations

import dataclasses
import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from gorillas_game.core.bomb import Bomb, ThrowSettings
from gorillas_game.core.city import BackgroundBuilding, BlastHole, Building, City, CitySettings
from gorillas_game.core.game import HIT, MISS, Game, ShotResult
from gorillas_game.core.gorilla import pose_for

logger = logging.getLogger(__name__)

AIMING = "aiming"
IN_FLIGHT = "in flight"
CELEBRATING = "celebrating"

GRAB_AREA_RADIUS = 15.0


@dataclass(frozen=True)
class AimReadout:
    """Angle and velocity shown in a player's info panel."""

    angle: int = 0
    magnitude: int = 0


@dataclass(frozen=True)
class BombState:
    x: float
    y: float
    rotation: float
    velocity: Tuple[float, float]


@dataclass(frozen=True)
class RenderState:
    """Read-only snapshot holding everything needed to draw a frame."""

    phase: str
    current_player: int
    winner: Optional[int]
    buildings: Tuple[Building, ...]
    background_buildings: Tuple[BackgroundBuilding, ...]
    blast_holes: Tuple[BlastHole, ...]
    blast_hole_radius: float
    bomb: BombState
    scale: float
    viewport: Tuple[int, int]
    readouts: Tuple[AimReadout, AimReadout]
    poses: Tuple[str, str]
    grab_area: Tuple[float, float, float]
    message: str
    generation: int


@dataclass
class ProjectileStep:
    """Result of one animation callback."""

    finished: bool = False
    result: Optional[ShotResult] = None
    stale: bool = False


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def aim_readout(dx: float, dy: float) -> AimReadout:
    """Convert a drag vector into the displayed angle (degrees) and magnitude."""

    hypotenuse = math.hypot(dx, dy)
    if hypotenuse == 0:
        return AimReadout()
    ratio = max(-1.0, min(1.0, dy / hypotenuse))
    angle = math.degrees(math.asin(ratio))
    return AimReadout(_round_half_up(angle), _round_half_up(hypotenuse))


class GameSession:
    """Own the mutable state of the current Gorillas match.

    Input calls are only honoured while aiming; calls in any other phase are
    ignored so a late pointer event can never disturb a throw in flight.
    """

    def __init__(
        self,
        settings: Optional[CitySettings] = None,
        *,
        seed: Optional[int] = None,
        throw_settings: Optional[ThrowSettings] = None,
        impact_margin: float = 4.0,
        viewport: Tuple[int, int] = (1000, 600),
    ) -> None:
        self._settings = settings
        self._throw_settings = throw_settings
        self._impact_margin = impact_margin
        if seed is None and settings is not None:
            seed = settings.seed
        self._seed_rng = random.Random(seed) if seed is not None else None
        self._validate_viewport(viewport)
        self.viewport = (int(viewport[0]), int(viewport[1]))
        self.generation = 0
        self._start_match()

    # ------------------------------------------------------------------
    # Match setup
    def _next_settings(self) -> CitySettings:
        base = self._settings or CitySettings()
        if self._seed_rng is None:
            return dataclasses.replace(base, seed=None)
        return dataclasses.replace(base, seed=self._seed_rng.randrange(2**32))

    def _start_match(self) -> None:
        self.game = Game(
            self._next_settings(),
            throw_settings=self._throw_settings,
            impact_margin=self._impact_margin,
        )
        self.phase = AIMING
        self.current_player = 1
        self.winner: Optional[int] = None
        self.readouts: Dict[int, AimReadout] = {1: AimReadout(), 2: AimReadout()}
        self.dragging = False
        self._previous_timestamp: Optional[float] = None
        self._calculate_scale()
        self._initialize_bomb_position()
        self.message = f"Player {self.current_player}'s turn"

    def request_new_game(self) -> None:
        """Discard the current match and start over with a fresh skyline."""

        self.generation += 1
        self._start_match()
        logger.info(
            "New game %d: %d buildings, city width %.1f",
            self.generation,
            len(self.city.buildings),
            self.city.total_width,
        )

    # ------------------------------------------------------------------
    # Properties
    @property
    def city(self) -> City:
        return self.game.city

    @property
    def bomb(self) -> Bomb:
        return self.game.bomb

    @property
    def visible_width(self) -> float:
        return self.viewport[0] / self.scale

    def is_animating_projectile(self) -> bool:
        return self.phase == IN_FLIGHT

    # ------------------------------------------------------------------
    # Layout
    @staticmethod
    def _validate_viewport(viewport: Tuple[int, int]) -> None:
        width, height = viewport
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")

    def _calculate_scale(self) -> None:
        self.scale = self.viewport[0] / self.city.total_width

    def _update_grab_area(self) -> None:
        size = GRAB_AREA_RADIUS * 2
        self.grab_area = (
            self.bomb.x * self.scale - GRAB_AREA_RADIUS,
            self.bomb.y * self.scale - GRAB_AREA_RADIUS,
            size,
        )

    def _initialize_bomb_position(self) -> None:
        self.game.place_bomb(self.current_player)
        self._update_grab_area()

    def on_resize(self, width: int, height: int) -> None:
        self._validate_viewport((width, height))
        self.viewport = (int(width), int(height))
        self._calculate_scale()
        if self.phase == AIMING:
            self._initialize_bomb_position()
        else:
            self._update_grab_area()

    # ------------------------------------------------------------------
    # Player input
    def begin_aim(self) -> bool:
        if self.phase != AIMING:
            logger.debug("begin_aim ignored during %s", self.phase)
            return False
        self.dragging = True
        return True

    def update_aim_vector(self, dx: float, dy: float) -> bool:
        """Aim by dragging: the bomb flies opposite to the horizontal drag."""

        if self.phase != AIMING:
            logger.debug("update_aim_vector ignored during %s", self.phase)
            return False
        self.bomb.velocity.x = -dx
        self.bomb.velocity.y = dy
        self.readouts[self.current_player] = aim_readout(dx, dy)
        return True

    def release_aim(self) -> Optional[int]:
        """Throw the bomb; returns the generation token for frame callbacks."""

        if self.phase != AIMING or not self.dragging:
            logger.debug("release_aim ignored (phase=%s, dragging=%s)", self.phase, self.dragging)
            return None
        self.dragging = False
        self.phase = IN_FLIGHT
        self._previous_timestamp = None
        velocity = self.bomb.velocity
        logger.debug(
            "Player %d throws with velocity (%.1f, %.1f)",
            self.current_player,
            velocity.x,
            velocity.y,
        )
        self.message = f"Player {self.current_player} throws!"
        return self.generation

    # ------------------------------------------------------------------
    # Animation
    def animate(self, timestamp: float, generation: Optional[int] = None) -> ProjectileStep:
        """Per-frame callback driven by the presentation layer's clock."""

        if generation is not None and generation != self.generation:
            return ProjectileStep(stale=True)
        if self.phase != IN_FLIGHT:
            return ProjectileStep()
        if self._previous_timestamp is None:
            self._previous_timestamp = timestamp
            return ProjectileStep()
        elapsed = timestamp - self._previous_timestamp
        step = self.advance(elapsed)
        if not step.finished:
            self._previous_timestamp = timestamp
        return step

    def advance(self, elapsed: float) -> ProjectileStep:
        """Run one tick of physics and collision, then apply the transition."""

        if self.phase != IN_FLIGHT:
            return ProjectileStep()
        result = self.game.step_bomb(max(0.0, elapsed), self.current_player, self.visible_width)
        if result.outcome == MISS:
            self._resolve_miss(result)
        elif result.outcome == HIT:
            self._resolve_hit(result)
        return ProjectileStep(finished=result.finished, result=result)

    def _resolve_miss(self, result: ShotResult) -> None:
        thrower = self.current_player
        self.current_player = Game.opponent(thrower)
        self.phase = AIMING
        self._previous_timestamp = None
        self._initialize_bomb_position()
        if result.reason == "building":
            self.message = f"Player {thrower} hit a building. Player {self.current_player}'s turn"
        else:
            self.message = f"Player {thrower} missed. Player {self.current_player}'s turn"
        logger.info("Player %d missed (%s)", thrower, result.reason)

    def _resolve_hit(self, result: ShotResult) -> None:
        self.phase = CELEBRATING
        self.winner = self.current_player
        self._previous_timestamp = None
        self.message = f"Player {self.winner} wins!"
        logger.info("Player %d wins with a hit on the %s", self.winner, result.body_part)

    # ------------------------------------------------------------------
    # Snapshot
    def get_render_state(self) -> RenderState:
        bomb = self.bomb
        return RenderState(
            phase=self.phase,
            current_player=self.current_player,
            winner=self.winner,
            buildings=tuple(self.city.buildings),
            background_buildings=tuple(self.city.background_buildings),
            blast_holes=self.city.blast_holes.holes,
            blast_hole_radius=self.city.blast_holes.radius,
            bomb=BombState(bomb.x, bomb.y, bomb.rotation, (bomb.velocity.x, bomb.velocity.y)),
            scale=self.scale,
            viewport=self.viewport,
            readouts=(self.readouts[1], self.readouts[2]),
            poses=(
                pose_for(1, self.phase, self.current_player),
                pose_for(2, self.phase, self.current_player),
            ),
            grab_area=self.grab_area,
            message=self.message,
            generation=self.generation,
        )


__all__ = [
    "AIMING",
    "AimReadout",
    "BombState",
    "CELEBRATING",
    "GameSession",
    "IN_FLIGHT",
    "ProjectileStep",
    "RenderState",
    "aim_readout",
    "GRAB_AREA_RADIUS",
]
