"""Procedural skyline generation and blast craters for the Gorillas duel."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass
class CitySettings:
    """Configuration options for skyline generation."""

    building_count: int = 8
    background_count: int = 11
    gap: float = 4.0
    origin: float = 0.0
    background_origin: float = -30.0
    min_width: float = 80.0
    max_width: float = 130.0
    min_height: float = 40.0
    max_height: float = 300.0
    # shorter range for the two buildings the gorillas stand on
    platform_min_height: float = 30.0
    platform_max_height: float = 150.0
    background_min_width: float = 60.0
    background_max_width: float = 110.0
    background_min_height: float = 80.0
    background_max_height: float = 350.0
    light_slots: int = 50
    light_probability: float = 0.33
    blast_hole_radius: float = 18.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.building_count < 1:
            raise ValueError("building_count must be at least 1")
        if self.background_count < 0:
            raise ValueError("background_count cannot be negative")
        if self.gap < 0:
            raise ValueError("gap cannot be negative")
        for name in ("width", "height", "platform_height", "background_width", "background_height"):
            low, high = self.bounds(name)
            if low > high:
                raise ValueError(f"{name} range is empty: min {low} > max {high}")
            if low < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.light_slots < 0:
            raise ValueError("light_slots cannot be negative")
        if not 0.0 <= self.light_probability <= 1.0:
            raise ValueError("light_probability must lie within [0, 1]")
        if self.blast_hole_radius <= 0:
            raise ValueError("blast_hole_radius must be positive")

    def bounds(self, name: str) -> Tuple[float, float]:
        """Return the ``(min, max)`` pair for a named dimension."""

        if name.startswith("background_"):
            dimension = name[len("background_"):]
            return (
                getattr(self, f"background_min_{dimension}"),
                getattr(self, f"background_max_{dimension}"),
            )
        if name.startswith("platform_"):
            dimension = name[len("platform_"):]
            return (
                getattr(self, f"platform_min_{dimension}"),
                getattr(self, f"platform_max_{dimension}"),
            )
        return getattr(self, f"min_{name}"), getattr(self, f"max_{name}")


@dataclass(frozen=True)
class BackgroundBuilding:
    """Decorative skyline block drawn behind the playable buildings."""

    x: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class Building:
    """Solid building footprint, anchored on the ground at ``y = 0``."""

    x: float
    width: float
    height: float
    lights: Tuple[bool, ...] = field(default=(), repr=False)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def roof_center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.height


@dataclass(frozen=True)
class BlastHole:
    """Centre of a crater carved by a previous impact."""

    x: float
    y: float


class BlastRegistry:
    """Append-only record of craters carved into the buildings."""

    def __init__(self, radius: float) -> None:
        self.radius = radius
        self._holes: List[BlastHole] = []

    def __iter__(self) -> Iterator[BlastHole]:
        return iter(self._holes)

    def __len__(self) -> int:
        return len(self._holes)

    @property
    def holes(self) -> Tuple[BlastHole, ...]:
        return tuple(self._holes)

    def covers(self, x: float, y: float) -> bool:
        """Return ``True`` when the point lies inside an existing crater."""

        for hole in self._holes:
            if math.hypot(x - hole.x, y - hole.y) < self.radius:
                return True
        return False

    def record(self, x: float, y: float) -> BlastHole:
        hole = BlastHole(x, y)
        self._holes.append(hole)
        return hole

    def clear(self) -> None:
        self._holes.clear()


class City:
    """Skyline of buildings packed left to right with a fixed gap."""

    def __init__(self, settings: Optional[CitySettings] = None) -> None:
        self.settings = settings or CitySettings()
        self._rng = random.Random(self.settings.seed)
        self.buildings: List[Building] = []
        self.background_buildings: List[BackgroundBuilding] = []
        self.blast_holes = BlastRegistry(self.settings.blast_hole_radius)
        self._generate()

    # ------------------------------------------------------------------
    # Generation
    def _generate(self) -> None:
        for index in range(self.settings.background_count):
            self.generate_background_building(index)
        for index in range(self.settings.building_count):
            self.generate_building(index)

    def regenerate(self) -> None:
        """Throw away the skyline and its craters and build a new one."""

        self.buildings = []
        self.background_buildings = []
        self.blast_holes.clear()
        self._generate()

    @property
    def platform_indices(self) -> Tuple[int, int]:
        return 1, self.settings.building_count - 2

    def _sample(self, low: float, high: float) -> float:
        return low + self._rng.random() * (high - low)

    def generate_building(self, index: int) -> Building:
        settings = self.settings
        previous = self.buildings[index - 1] if index > 0 else None
        x = previous.right + settings.gap if previous else settings.origin
        width = self._sample(*settings.bounds("width"))
        if index in self.platform_indices:
            height = self._sample(*settings.bounds("platform_height"))
        else:
            height = self._sample(*settings.bounds("height"))
        lights = tuple(
            self._rng.random() <= settings.light_probability
            for _ in range(settings.light_slots)
        )
        building = Building(x=x, width=width, height=height, lights=lights)
        self.buildings.append(building)
        return building

    def generate_background_building(self, index: int) -> BackgroundBuilding:
        settings = self.settings
        previous = self.background_buildings[index - 1] if index > 0 else None
        x = previous.right + settings.gap if previous else settings.background_origin
        width = self._sample(*settings.bounds("background_width"))
        height = self._sample(*settings.bounds("background_height"))
        building = BackgroundBuilding(x=x, width=width, height=height)
        self.background_buildings.append(building)
        return building

    # ------------------------------------------------------------------
    # Queries
    @property
    def total_width(self) -> float:
        return self.buildings[-1].right

    def platform(self, player: int) -> Building:
        """Return the building the given player's gorilla stands on."""

        if player == 1:
            return self.buildings[1]
        if player == 2:
            return self.buildings[-2]
        raise ValueError(f"unknown player {player!r}")

    def building_hit_test(self, x: float, y: float, margin: float) -> Optional[Building]:
        """Return the first solid building overlapping the point, if any.

        Buildings whose overlap falls inside an existing crater are skipped so
        the scan can continue with the next building to the right.
        """

        for building in self.buildings:
            if x + margin <= building.x or x - margin >= building.right:
                continue
            if y - margin >= building.height:
                continue
            if self.blast_holes.covers(x, y):
                continue
            return building
        return None


__all__ = [
    "BackgroundBuilding",
    "BlastHole",
    "BlastRegistry",
    "Building",
    "City",
    "CitySettings",
]
