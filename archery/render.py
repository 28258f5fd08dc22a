"""Drawing of the game objects onto a pygame surface.

World coordinates put the origin at the bottom-left corner with y growing
upwards; pygame surfaces grow downwards, so every point passes through
:func:`to_screen` before it is drawn.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import pygame

from archery.arrow import Arrow
from archery.barrier import Barrier
from archery.bow import Bow
from archery.target import Target

Point = tuple[float, float]
Colour = tuple[int, int, int]


def _rgb(r: float, g: float, b: float) -> Colour:
    return round(r * 255), round(g * 255), round(b * 255)


ARROW_SHAFT_COLOUR = _rgb(0.55, 0.27, 0.07)
ARROW_HEAD_COLOUR = _rgb(0.7, 0.7, 0.7)
FLETCHING_COLOUR = _rgb(0.2, 0.6, 1.0)
NOCKED_SHAFT_COLOUR = _rgb(0.5, 0.25, 0.1)
NOCKED_HEAD_COLOUR = _rgb(0.8, 0.0, 0.0)
BARRIER_COLOUR = _rgb(0.45, 0.45, 0.45)
BOW_COLOUR = _rgb(0.5, 0.2, 0.0)
STRING_COLOUR = _rgb(0.1, 0.1, 0.1)
TRAJECTORY_COLOUR = _rgb(1.0, 0.0, 0.0)
POWER_BACK_COLOUR = _rgb(0.3, 0.3, 0.3)
POWER_FILL_COLOUR = _rgb(0.0, 1.0, 0.0)

# Rings from the outside in: (fraction of radius, colour).
TARGET_RINGS: tuple[tuple[float, Colour], ...] = (
    (1.0, _rgb(1.0, 1.0, 1.0)),
    (0.8, _rgb(0.0, 0.0, 0.0)),
    (0.6, _rgb(0.0, 0.0, 1.0)),
    (0.4, _rgb(1.0, 0.0, 0.0)),
    (0.2, _rgb(1.0, 1.0, 0.0)),
)

_POWER_BAR_WIDTH = 100.0
_TRAJECTORY_POINT_SIZE = 3
_BOW_SEGMENTS = 20


def to_screen(x: float, y: float, height: float) -> Point:
    """Map a world point to surface coordinates for a surface ``height`` pixels tall."""
    return x, height - y


def _union(rects: Sequence[pygame.Rect]) -> pygame.Rect | None:
    if not rects:
        return None
    return rects[0].unionall(list(rects[1:]))


def _placed(
    points: Iterable[Point], origin: Point, angle_deg: float, height: float
) -> list[Point]:
    """Rotate local points by ``angle_deg``, move them to ``origin`` and map to screen."""
    rad = math.radians(angle_deg)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    ox, oy = origin
    return [
        to_screen(ox + px * cos_a - py * sin_a, oy + px * sin_a + py * cos_a, height)
        for px, py in points
    ]


def draw_arrow(surface: pygame.Surface, arrow: Arrow) -> pygame.Rect | None:
    """Draw an arrow in play; return the area touched, or ``None`` if nothing was drawn."""
    if not arrow.active:
        return None
    height = surface.get_height()

    def place(*points: Point) -> list[Point]:
        return _placed(points, (arrow.x, arrow.y), arrow.hit_angle, height)

    rects = []
    start, end = place((-80, 0), (0, 0))
    rects.append(pygame.draw.line(surface, ARROW_SHAFT_COLOUR, start, end, 4))
    rects.append(pygame.draw.polygon(surface, ARROW_HEAD_COLOUR, place((0, 0), (16, 0), (0, 6))))
    rects.append(pygame.draw.polygon(surface, ARROW_HEAD_COLOUR, place((0, 0), (16, 0), (0, -6))))
    rects.append(pygame.draw.polygon(surface, FLETCHING_COLOUR, place((-80, 0), (-92, 7), (-70, 0))))
    rects.append(pygame.draw.polygon(surface, FLETCHING_COLOUR, place((-80, 0), (-92, -7), (-70, 0))))
    return _union(rects)


def draw_target(surface: pygame.Surface, target: Target) -> pygame.Rect:
    """Draw the target's concentric rings; return the area touched."""
    centre = to_screen(target.x, target.y, surface.get_height())
    rects = [
        pygame.draw.circle(surface, colour, centre, target.radius * fraction)
        for fraction, colour in TARGET_RINGS
    ]
    return _union(rects)


def draw_barrier(surface: pygame.Surface, barrier: Barrier) -> pygame.Rect | None:
    """Draw an active barrier; return the area touched, or ``None`` when inactive."""
    if not barrier.active:
        return None
    left, top = to_screen(
        barrier.x - barrier.width * 0.5,
        barrier.y + barrier.height * 0.5,
        surface.get_height(),
    )
    rect = pygame.Rect(round(left), round(top), round(barrier.width), round(barrier.height))
    return pygame.draw.rect(surface, BARRIER_COLOUR, rect)


def _draw_nocked_arrow(surface: pygame.Surface, bow: Bow) -> list[pygame.Rect]:
    height = surface.get_height()
    origin = bow.nock_position()

    def place(*points: Point) -> list[Point]:
        return _placed(points, origin, bow.angle, height)

    start, end = place((0, 0), (80, 0))
    return [
        pygame.draw.line(surface, NOCKED_SHAFT_COLOUR, start, end, 4),
        pygame.draw.polygon(surface, NOCKED_HEAD_COLOUR, place((85, 0), (70, 5), (70, -5))),
        pygame.draw.polygon(surface, FLETCHING_COLOUR, place((0, 0), (-10, 6), (10, 0))),
        pygame.draw.polygon(surface, FLETCHING_COLOUR, place((0, 0), (-10, -6), (10, 0))),
    ]


def _draw_power_indicator(surface: pygame.Surface, bow: Bow) -> list[pygame.Rect]:
    height = surface.get_height()
    filled = bow.power / Bow.MAX_POWER * _POWER_BAR_WIDTH
    left, top = to_screen(bow.x, bow.y - 10, height)
    back = pygame.Rect(round(left), round(top), round(_POWER_BAR_WIDTH), 10)
    rects = [pygame.draw.rect(surface, POWER_BACK_COLOUR, back)]
    if filled > 0:
        fill = pygame.Rect(round(left), round(top), round(filled), 10)
        rects.append(pygame.draw.rect(surface, POWER_FILL_COLOUR, fill))
    return rects


def draw_bow(surface: pygame.Surface, bow: Bow) -> pygame.Rect:
    """Draw the bow, its string, its arrows and, while charging, the aiming aids."""
    height = surface.get_height()
    rects: list[pygame.Rect] = []

    shape = [
        to_screen(
            bow.x + math.sin(t * math.pi) * Bow.BOW_WIDTH,
            bow.y + t * Bow.BOW_HEIGHT,
            height,
        )
        for t in (i / _BOW_SEGMENTS for i in range(_BOW_SEGMENTS + 1))
    ]
    rects.append(pygame.draw.lines(surface, BOW_COLOUR, False, shape, 5))

    top = to_screen(bow.x + math.sin(math.pi) * Bow.BOW_WIDTH, bow.y + Bow.BOW_HEIGHT, height)
    bottom = to_screen(bow.x, bow.y, height)
    nock = bow.nock_position() if bow.charging else (bow.x, bow.y + Bow.BOW_HEIGHT / 2)
    nock_screen = to_screen(*nock, height)
    rects.append(pygame.draw.line(surface, STRING_COLOUR, top, nock_screen, 2))
    rects.append(pygame.draw.line(surface, STRING_COLOUR, nock_screen, bottom, 2))

    if bow.charging:
        rects.extend(_draw_nocked_arrow(surface, bow))

    for arrow in bow.arrows:
        drawn = draw_arrow(surface, arrow)
        if drawn is not None:
            rects.append(drawn)

    if bow.charging:
        size = _TRAJECTORY_POINT_SIZE
        for point in bow.trajectory():
            sx, sy = to_screen(*point, height)
            dot = pygame.Rect(round(sx - size / 2), round(sy - size / 2), size, size)
            rects.append(pygame.draw.rect(surface, TRAJECTORY_COLOUR, dot))
        rects.extend(_draw_power_indicator(surface, bow))

    return _union(rects)