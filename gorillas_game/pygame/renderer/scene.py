"""Rendering helpers for the Gorillas pygame client."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

import pygame

from gorillas_game.core.city import Building
from gorillas_game.core.geometry import QuadraticCurve
from gorillas_game.core.gorilla import (
    ARM_WIDTH,
    AIM_HAND_DIVISOR,
    CELEBRATING,
    Gorilla,
)
from gorillas_game.core.session import AIMING, IN_FLIGHT, RenderState

SKY_TOP = pygame.Color(255, 194, 142)
SKY_BOTTOM = pygame.Color(248, 186, 133)
MOON_COLOR = (255, 255, 255, 153)
BACKGROUND_BUILDING_COLOR = pygame.Color(148, 114, 133)
BUILDING_COLOR = pygame.Color(74, 60, 104)
WINDOW_COLOR = pygame.Color(235, 182, 162)
GORILLA_COLOR = pygame.Color(0, 0, 0)
FACE_COLOR = pygame.Color(211, 211, 211)
BOMB_COLOR = pygame.Color(255, 255, 255)
AIM_LINE_COLOR = (255, 255, 255, 178)

WINDOW_WIDTH = 10
WINDOW_HEIGHT = 12
WINDOW_GAP = 15


def to_screen(state: RenderState, x: float, y: float) -> Tuple[float, float]:
    """Map world coordinates (y up, ground at 0) to window pixels."""

    return x * state.scale, state.viewport[1] - y * state.scale


def _screen_points(state: RenderState, points: Iterable[Tuple[float, float]]) -> List[Tuple[float, float]]:
    return [to_screen(state, x, y) for x, y in points]


def _world_rect(state: RenderState, x: float, top: float, width: float, height: float) -> pygame.Rect:
    left, screen_top = to_screen(state, x, top)
    return pygame.Rect(
        int(round(left)),
        int(round(screen_top)),
        max(1, int(round(width * state.scale))),
        max(1, int(round(height * state.scale))),
    )


def draw_background(app) -> None:
    surface = app.screen
    state: RenderState = app.render_state
    width, height = surface.get_size()
    for y in range(height):
        mix = y / max(height - 1, 1)
        color = pygame.Color(
            int(SKY_TOP.r * (1 - mix) + SKY_BOTTOM.r * mix),
            int(SKY_TOP.g * (1 - mix) + SKY_BOTTOM.g * mix),
            int(SKY_TOP.b * (1 - mix) + SKY_BOTTOM.b * mix),
        )
        pygame.draw.line(surface, color, (0, y), (width, y))

    moon = pygame.Surface((width, height), pygame.SRCALPHA)
    center = to_screen(state, 300, 350)
    pygame.draw.circle(moon, MOON_COLOR, center, max(1, int(60 * state.scale)))
    surface.blit(moon, (0, 0))


def draw_background_buildings(app) -> None:
    state: RenderState = app.render_state
    for building in state.background_buildings:
        rect = _world_rect(state, building.x, building.height, building.width, building.height)
        pygame.draw.rect(app.screen, BACKGROUND_BUILDING_COLOR, rect)


def _draw_windows(surface: pygame.Surface, state: RenderState, building: Building) -> None:
    floors = math.ceil((building.height - WINDOW_GAP) / (WINDOW_HEIGHT + WINDOW_GAP))
    rooms = math.floor((building.width - WINDOW_GAP) / (WINDOW_WIDTH + WINDOW_GAP))
    for floor in range(floors):
        for room in range(rooms):
            slot = floor * rooms + room
            if slot >= len(building.lights) or not building.lights[slot]:
                continue
            x = building.x + WINDOW_GAP + room * (WINDOW_WIDTH + WINDOW_GAP)
            top = building.height - WINDOW_GAP - floor * (WINDOW_HEIGHT + WINDOW_GAP)
            rect = _world_rect(state, x, top, WINDOW_WIDTH, WINDOW_WIDTH)
            pygame.draw.rect(surface, WINDOW_COLOR, rect)


def draw_buildings(app) -> None:
    """Draw the playable buildings with every blast hole punched out."""

    state: RenderState = app.render_state
    layer = pygame.Surface(app.screen.get_size(), pygame.SRCALPHA)
    for building in state.buildings:
        rect = _world_rect(state, building.x, building.height, building.width, building.height)
        pygame.draw.rect(layer, BUILDING_COLOR, rect)
        _draw_windows(layer, state, building)

    radius = max(1, int(round(state.blast_hole_radius * state.scale)))
    for hole in state.blast_holes:
        pygame.draw.circle(layer, (0, 0, 0, 0), to_screen(state, hole.x, hole.y), radius)
    app.screen.blit(layer, (0, 0))


def _draw_stroke(surface: pygame.Surface, state: RenderState, curve: QuadraticCurve, width: float) -> None:
    points = _screen_points(state, curve.flatten())
    pixel_width = max(1, int(round(width * state.scale)))
    pygame.draw.lines(surface, GORILLA_COLOR, False, points, pixel_width)
    if pixel_width > 2:
        for point in points:
            pygame.draw.circle(surface, GORILLA_COLOR, point, pixel_width / 2)


def _draw_face(surface: pygame.Surface, state: RenderState, gorilla: Gorilla, pose: str) -> None:
    ox, oy = gorilla.origin
    scale = state.scale
    for circle in gorilla.face():
        pygame.draw.circle(surface, FACE_COLOR, to_screen(state, circle.x, circle.y), max(1, circle.radius * scale))
    for eye_x in (-3.5, 3.5):
        pygame.draw.circle(surface, GORILLA_COLOR, to_screen(state, ox + eye_x, oy + 70), max(1, 1.4 * scale))
    line_width = max(1, int(round(1.4 * scale)))
    for side in (-1, 1):
        pygame.draw.line(
            surface,
            GORILLA_COLOR,
            to_screen(state, ox + side * 3.5, oy + 66.5),
            to_screen(state, ox + side * 1.5, oy + 65),
            line_width,
        )
    if pose == CELEBRATING:
        mouth = QuadraticCurve((-5, 60), (0, 56), (5, 60))
    else:
        mouth = QuadraticCurve((-5, 56), (0, 60), (5, 56))
    points = _screen_points(state, mouth.translated(ox, oy).flatten(8))
    pygame.draw.lines(surface, GORILLA_COLOR, False, points, line_width)


def draw_gorillas(app) -> None:
    state: RenderState = app.render_state
    surface = app.screen
    platforms = (state.buildings[1], state.buildings[-2])
    for player, building in enumerate(platforms, start=1):
        gorilla = Gorilla(player, building)
        pose = state.poses[player - 1]
        pygame.draw.polygon(surface, GORILLA_COLOR, _screen_points(state, gorilla.body()))
        for arm in gorilla.arms(pose, state.bomb.velocity):
            _draw_stroke(surface, state, arm, ARM_WIDTH)
        _draw_face(surface, state, gorilla, pose)


def _draw_dashed_line(
    surface: pygame.Surface,
    color,
    start: Tuple[float, float],
    end: Tuple[float, float],
    width: int,
    dash: float,
    gap: float,
) -> None:
    length = math.hypot(end[0] - start[0], end[1] - start[1])
    if length == 0:
        return
    ux = (end[0] - start[0]) / length
    uy = (end[1] - start[1]) / length
    position = 0.0
    while position < length:
        stop = min(position + dash, length)
        pygame.draw.line(
            surface,
            color,
            (start[0] + ux * position, start[1] + uy * position),
            (start[0] + ux * stop, start[1] + uy * stop),
            width,
        )
        position = stop + gap


def _banana(rotation: float) -> List[Tuple[float, float]]:
    outer = QuadraticCurve((-8, -2), (0, 12), (8, -2)).flatten(10)
    inner = QuadraticCurve((8, -2), (0, 2), (-8, -2)).flatten(10)
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    return [(x * cos_r - y * sin_r, x * sin_r + y * cos_r) for x, y in outer + inner[1:]]


def draw_bomb(app) -> None:
    state: RenderState = app.render_state
    surface = app.screen
    bomb = state.bomb
    scale = state.scale
    if state.phase == AIMING:
        vx, vy = bomb.velocity
        x = bomb.x - vx / AIM_HAND_DIVISOR
        y = bomb.y - vy / AIM_HAND_DIVISOR
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        _draw_dashed_line(
            overlay,
            AIM_LINE_COLOR,
            to_screen(state, x, y),
            to_screen(state, x + vx, y + vy),
            max(1, int(round(3 * scale))),
            3 * scale,
            8 * scale,
        )
        surface.blit(overlay, (0, 0))
        pygame.draw.circle(surface, BOMB_COLOR, to_screen(state, x, y), max(1, 6 * scale))
    elif state.phase == IN_FLIGHT:
        points = [(bomb.x + px, bomb.y + py) for px, py in _banana(bomb.rotation)]
        pygame.draw.polygon(surface, BOMB_COLOR, _screen_points(state, points))
    else:
        pygame.draw.circle(surface, BOMB_COLOR, to_screen(state, bomb.x, bomb.y), max(1, 6 * scale))


__all__ = [
    "draw_background",
    "draw_background_buildings",
    "draw_bomb",
    "draw_buildings",
    "draw_gorillas",
    "to_screen",
]
