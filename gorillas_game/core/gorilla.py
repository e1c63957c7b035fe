"""Gorilla silhouettes: pose geometry, throwing hand and hit testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from gorillas_game.core.city import Building
from gorillas_game.core.geometry import (
    Circle,
    Point,
    QuadraticCurve,
    bounding_box,
    point_in_polygon,
)

RESTING = "resting"
AIMING = "aiming"
CELEBRATING = "celebrating"

# Local coordinates: origin at the centre of the rooftop, y pointing up.
BODY: Tuple[Point, ...] = (
    (0.0, 15.0),
    (-7.0, 0.0),
    (-20.0, 0.0),
    (-17.0, 18.0),
    (-20.0, 44.0),
    (-11.0, 77.0),
    (0.0, 84.0),
    (11.0, 77.0),
    (20.0, 44.0),
    (17.0, 18.0),
    (20.0, 0.0),
    (7.0, 0.0),
)
FACE: Tuple[Circle, ...] = (
    Circle(0.0, 63.0, 9.0),
    Circle(-3.5, 70.0, 4.0),
    Circle(3.5, 70.0, 4.0),
)
SHOULDER = (14.0, 50.0)
ARM_WIDTH = 18.0
HAND_OFFSET = (28.0, 107.0)
# The aiming hand trails the drag by velocity / AIM_HAND_DIVISOR.
AIM_HAND_DIVISOR = 6.25

BODY_PARTS = ("face", "left_arm", "right_arm", "body")


def throwing_side(player: int) -> int:
    """Player 1 throws with the left arm (-1), player 2 with the right (+1)."""

    return -1 if player == 1 else 1


def pose_for(player: int, phase: str, current_player: int) -> str:
    """Return the pose the given player's gorilla shows during ``phase``."""

    if phase == "aiming" and current_player == player:
        return AIMING
    if phase == "celebrating" and current_player == player:
        return CELEBRATING
    return RESTING


def arm_curve(
    side: int,
    pose: str,
    aim_velocity: Tuple[float, float] = (0.0, 0.0),
    *,
    throwing: bool = False,
) -> QuadraticCurve:
    """Return one arm as a local curve; ``side`` is -1 for left, +1 for right."""

    start = (side * SHOULDER[0], SHOULDER[1])
    if pose == AIMING and throwing:
        vx, vy = aim_velocity
        return QuadraticCurve(
            start,
            (side * 44.0, 63.0),
            (side * HAND_OFFSET[0] - vx / AIM_HAND_DIVISOR, HAND_OFFSET[1] - vy / AIM_HAND_DIVISOR),
        )
    if pose == CELEBRATING:
        return QuadraticCurve(start, (side * 44.0, 63.0), (side * HAND_OFFSET[0], HAND_OFFSET[1]))
    return QuadraticCurve(start, (side * 44.0, 45.0), (side * 28.0, 12.0))


@dataclass
class Gorilla:
    """A player's gorilla standing on the roof of its platform building."""

    player: int
    building: Building

    @property
    def origin(self) -> Point:
        return self.building.roof_center

    @property
    def side(self) -> int:
        return throwing_side(self.player)

    def hand_position(self) -> Point:
        """World position of the throwing hand, where the bomb is held."""

        ox, oy = self.origin
        return ox + self.side * HAND_OFFSET[0], oy + HAND_OFFSET[1]

    def arms(
        self, pose: str = RESTING, aim_velocity: Tuple[float, float] = (0.0, 0.0)
    ) -> Tuple[QuadraticCurve, QuadraticCurve]:
        """Left and right arm curves in world coordinates."""

        ox, oy = self.origin
        left = arm_curve(-1, pose, aim_velocity, throwing=self.side == -1)
        right = arm_curve(1, pose, aim_velocity, throwing=self.side == 1)
        return left.translated(ox, oy), right.translated(ox, oy)

    def body(self) -> List[Point]:
        ox, oy = self.origin
        return [(ox + x, oy + y) for x, y in BODY]

    def face(self) -> List[Circle]:
        ox, oy = self.origin
        return [Circle(ox + c.x, oy + c.y, c.radius) for c in FACE]

    def hit_test(
        self,
        x: float,
        y: float,
        pose: str = RESTING,
        aim_velocity: Tuple[float, float] = (0.0, 0.0),
    ) -> Optional[str]:
        """Return the body part under the point, or ``None`` for a miss."""

        left, right = self.arms(pose, aim_velocity)
        outline = self.body() + left.flatten(4) + [left.control] + right.flatten(4) + [right.control]
        min_x, min_y, max_x, max_y = bounding_box(outline, padding=ARM_WIDTH / 2)
        if not (min_x <= x <= max_x and min_y <= y <= max_y):
            return None

        # the face sits on top of the body, so it is checked first
        if any(circle.contains(x, y) for circle in self.face()):
            return "face"
        half_width = ARM_WIDTH / 2
        if left.distance_to(x, y) <= half_width:
            return "left_arm"
        if right.distance_to(x, y) <= half_width:
            return "right_arm"
        if point_in_polygon(x, y, self.body()):
            return "body"
        return None


__all__ = [
    "AIMING",
    "BODY_PARTS",
    "CELEBRATING",
    "Gorilla",
    "RESTING",
    "arm_curve",
    "pose_for",
    "throwing_side",
]
