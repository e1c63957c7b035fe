"""Bomb entity and its sub-stepped ballistic motion."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ThrowSettings:
    """Physics constants for a thrown bomb."""

    gravity: float = 20.0
    # milliseconds of elapsed time that count as one unit of velocity
    reference_interval: float = 200.0
    substeps: int = 10
    spin_rate: float = 5.0

    def __post_init__(self) -> None:
        if self.substeps < 1:
            raise ValueError("substeps must be at least 1")
        if self.reference_interval <= 0:
            raise ValueError("reference_interval must be positive")


@dataclass
class Velocity:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Bomb:
    """The single projectile of a match, in world coordinates (y up)."""

    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    velocity: Velocity = field(default_factory=Velocity)

    def reset(self, x: float, y: float) -> None:
        """Place the bomb in a hand, at rest."""

        self.x = x
        self.y = y
        self.rotation = 0.0
        self.velocity = Velocity()

    def move(self, elapsed: float, spin_direction: int, settings: ThrowSettings) -> None:
        multiplier = elapsed / settings.reference_interval
        self.velocity.y -= settings.gravity * multiplier
        self.x += self.velocity.x * multiplier
        self.y += self.velocity.y * multiplier
        self.rotation += spin_direction * settings.spin_rate * multiplier


__all__ = ["Bomb", "ThrowSettings", "Velocity"]
