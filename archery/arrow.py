"""A single arrow in flight."""

from __future__ import annotations

import math
from dataclasses import dataclass

from archery.geometry import deg_to_rad
from archery.target import Target


@dataclass
class Arrow:
    """An arrow under gravity that can stick into a target."""

    x: float = 0.0
    y: float = 0.0
    vel_x: float = 0.0
    vel_y: float = 0.0
    gravity: float = -400.0
    flying: bool = False
    hit: bool = False
    hit_angle: float = 0.0

    @property
    def active(self) -> bool:
        """Whether the arrow is still in play (flying or stuck in a target)."""
        return self.flying or self.hit

    def shoot(self, angle_deg: float, power: float) -> None:
        """Launch the arrow at ``angle_deg`` with speed ``power``."""
        self.flying = True
        self.hit = False
        rad = deg_to_rad(angle_deg)
        self.vel_x = power * math.cos(rad)
        self.vel_y = power * math.sin(rad)

    def _heading(self) -> float:
        return math.degrees(math.atan2(self.vel_y, self.vel_x))

    def update(self, dt: float) -> None:
        """Advance the flight by ``dt`` seconds; the arrow drops out below the ground."""
        if not self.flying or self.hit:
            return
        self.vel_y += self.gravity * dt
        self.x += self.vel_x * dt
        self.y += self.vel_y * dt
        self.hit_angle = self._heading()
        if self.y < 0:
            self.flying = False
            self.hit = False

    def reset(self, x: float, y: float) -> None:
        """Put the arrow back at rest at ``(x, y)``."""
        self.x = x
        self.y = y
        self.vel_x = self.vel_y = 0.0
        self.flying = False
        self.hit = False
        self.hit_angle = 0.0

    def deactivate(self) -> None:
        """Stop the arrow flying."""
        self.flying = False

    def check_collision(self, target: Target) -> bool:
        """Stick the arrow into ``target`` if it is inside it; return whether it hit."""
        if not self.flying or self.hit:
            return False
        dx = target.x - self.x
        dy = target.y - self.y
        dist = math.hypot(dx, dy)
        if dist > target.radius:
            return False
        self.flying = False
        self.hit = True
        norm = dist if dist > 0 else 1.0
        self.x += dx / norm * 10.0
        self.y += dy / norm * 10.0
        self.hit_angle = self._heading()
        return True