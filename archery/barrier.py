"""Rectangular obstacle that blocks arrows."""

from __future__ import annotations

from dataclasses import dataclass, field

_RANGE = 60.0


@dataclass
class Barrier:
    """An axis-aligned box centred on ``(x, y)`` that may bob up and down."""

    x: float
    y: float
    width: float
    height: float
    moving: bool = False
    speed: float = 60.0
    active: bool = True
    _moving_up: bool = field(default=True, init=False, repr=False)
    _base_y: float | None = field(default=None, init=False, repr=False)

    def update(self, dt: float) -> None:
        """Move the barrier vertically within its range around its first moving height."""
        if not self.active or not self.moving:
            return
        if self._base_y is None:
            self._base_y = self.y
        if self._moving_up:
            self.y += self.speed * dt
            if self.y > self._base_y + _RANGE:
                self._moving_up = False
        else:
            self.y -= self.speed * dt
            if self.y < self._base_y - _RANGE:
                self._moving_up = True

    def check_collision(self, arrow_x: float, arrow_y: float) -> bool:
        """Return whether the point lies inside the barrier, edges included."""
        if not self.active:
            return False
        half_w = self.width * 0.5
        half_h = self.height * 0.5
        return (
            self.x - half_w <= arrow_x <= self.x + half_w
            and self.y - half_h <= arrow_y <= self.y + half_h
        )

    def set_moving(self, move: bool, speed: float = 60.0) -> None:
        """Switch movement on or off and set its speed."""
        self.moving = move
        self.speed = speed

    def deactivate(self) -> None:
        """Remove the barrier from play."""
        self.active = False