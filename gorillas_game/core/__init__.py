"""Core game logic for Gorillas, independent of rendering."""

from gorillas_game.core.bomb import Bomb, ThrowSettings, Velocity
from gorillas_game.core.city import (
    BackgroundBuilding,
    BlastHole,
    BlastRegistry,
    Building,
    City,
    CitySettings,
)
from gorillas_game.core.game import Game, ShotResult
from gorillas_game.core.gorilla import Gorilla
from gorillas_game.core.session import (
    AIMING,
    CELEBRATING,
    IN_FLIGHT,
    AimReadout,
    GameSession,
    ProjectileStep,
    RenderState,
)

__all__ = [
    "AIMING",
    "CELEBRATING",
    "IN_FLIGHT",
    "AimReadout",
    "BackgroundBuilding",
    "BlastHole",
    "BlastRegistry",
    "Bomb",
    "Building",
    "City",
    "CitySettings",
    "Game",
    "GameSession",
    "Gorilla",
    "ProjectileStep",
    "RenderState",
    "ShotResult",
    "ThrowSettings",
    "Velocity",
]
