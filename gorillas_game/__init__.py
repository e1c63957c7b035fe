"""Top-level package for the Gorillas artillery duel."""

__version__ = "1.0.0"

from gorillas_game.core import (
    CitySettings,
    Game,
    GameSession,
    ProjectileStep,
    RenderState,
    ShotResult,
    ThrowSettings,
)

__all__ = [
    "CitySettings",
    "Game",
    "GameSession",
    "ProjectileStep",
    "RenderState",
    "ShotResult",
    "ThrowSettings",
]

__all__.append("__version__")

try:
    from gorillas_game.pygame import PygameGorillas, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameGorillas = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the optional pygame dependency. "
            "Install pygame to enable graphical gameplay."
        )

__all__.extend(["PygameGorillas", "run_pygame"])
