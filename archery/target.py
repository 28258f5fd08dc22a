"""The round target the player shoots at."""

from __future__ import annotations

import math
from dataclasses import dataclass

_LEFT_LIMIT = 550.0
_RIGHT_LIMIT = 750.0


@dataclass
class Target:
    """A circular target that may drift back and forth horizontally."""

    x: float = 650.0
    y: float = 250.0
    radius: float = 50.0
    moving: bool = False
    speed: float = 0.0
    direction: float = 1.0

    def update(self, dt: float) -> None:
        """Advance the target's motion by ``dt`` seconds."""
        if not self.moving:
            return
        self.x += self.speed * self.direction * dt
        if self.x > _RIGHT_LIMIT or self.x < _LEFT_LIMIT:
            self.direction *= -1.0

    def check_hit(self, ax: float, ay: float) -> int:
        """Return the score for a point: 10 bullseye, 7 inner, 5 outer, 0 miss."""
        dist = math.hypot(ax - self.x, ay - self.y)
        if dist <= self.radius * 0.2:
            return 10
        if dist <= self.radius * 0.5:
            return 7
        if dist <= self.radius:
            return 5
        return 0

    def set_position(self, x: float, y: float) -> None:
        """Move the target's centre to ``(x, y)``."""
        self.x = x
        self.y = y