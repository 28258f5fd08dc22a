"""The player's bow: aiming, charging and the arrows it has fired."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from archery.arrow import Arrow


@dataclass
class Bow:
    """A bow standing at ``(x, y)`` that fires arrows."""

    MAX_POWER: ClassVar[float] = 1100.0
    BOW_HEIGHT: ClassVar[float] = 60.0
    BOW_WIDTH: ClassVar[float] = 18.0

    x: float
    y: float
    angle: float = 45.0
    power: float = 0.0
    charging: bool = False
    gravity: float = -400.0
    arrows: list[Arrow] = field(default_factory=list)

    def _direction(self) -> tuple[float, float]:
        rad = self.angle * math.pi / 180.0
        return math.cos(rad), math.sin(rad)

    def update(self, dt: float) -> None:
        """Advance every arrow and drop those no longer in play."""
        for arrow in self.arrows:
            arrow.update(dt)
        self.arrows = [arrow for arrow in self.arrows if arrow.active]

    def aim_up(self) -> None:
        if self.angle < 80:
            self.angle += 2

    def aim_down(self) -> None:
        if self.angle > 10:
            self.angle -= 2

    def increase_power(self) -> None:
        self.power = min(self.power + 20, self.MAX_POWER)

    def decrease_power(self) -> None:
        self.power = max(self.power - 20, 0.0)

    def start_charge(self) -> None:
        self.charging = True
        self.power = 0.0

    def nock_position(self) -> tuple[float, float]:
        """Where the nocked arrow sits, drawn back along the aim by the current power."""
        cos_a, sin_a = self._direction()
        pull = -self.power / 8.0
        return self.x + cos_a * pull, self.y + self.BOW_HEIGHT / 2 + sin_a * pull

    def release_charge(self) -> Arrow | None:
        """Fire an arrow if charging; return it, or ``None`` when not charging."""
        if not self.charging:
            return None
        self.charging = False
        arrow = Arrow(*self.nock_position())
        arrow.shoot(self.angle, self.power)
        self.arrows.append(arrow)
        print(f"Arrow fired: power={self.power:g}")
        self.power = 0.0
        return arrow

    def trajectory(self) -> list[tuple[float, float]]:
        """Predicted flight points for the current aim and power, stopping at the ground."""
        cos_a, sin_a = self._direction()
        sim_x = self.x + cos_a * self.power / 8
        sim_y = self.y + self.BOW_HEIGHT / 2 + sin_a * self.power / 8
        vel_x = self.power * cos_a
        vel_y = self.power * sin_a
        dt = 0.05
        points: list[tuple[float, float]] = []
        for _ in range(100):
            points.append((sim_x, sim_y))
            vel_y += self.gravity * dt
            sim_x += vel_x * dt
            sim_y += vel_y * dt
            if sim_y < 0:
                break
        return points