"""The archery game: one bow, one target and one barrier in an 800x600 field."""

from __future__ import annotations

import pygame

from archery.arrow import Arrow
from archery.barrier import Barrier
from archery.bow import Bow
from archery.render import draw_barrier, draw_bow, draw_target
from archery.target import Target

WIDTH = 800
HEIGHT = 600
TITLE = "Archery_Game_OpenGL_With_Barrier"
BACKGROUND = (38, 38, 46)


class Game:
    """Holds the game objects and reacts to time passing and keys being pressed."""

    def __init__(self) -> None:
        self.bow = Bow(120, 120, gravity=-400.0)
        self.target = Target(650, 250, 50, False, 0)
        self.barrier = Barrier(400, 200, 40, 120, True)

    def check_collisions(self) -> list[Arrow]:
        """Resolve arrow hits on the target and barrier; return the arrows the barrier stopped."""
        blocked = []
        for arrow in self.bow.arrows:
            arrow.check_collision(self.target)
            if self.barrier.check_collision(arrow.x, arrow.y):
                arrow.deactivate()
                arrow.hit = False
                print("Arrow hit barrier!")
                blocked.append(arrow)
        return blocked

    def update(self, dt: float) -> None:
        """Advance everything by ``dt`` seconds and resolve collisions."""
        self.bow.update(dt)
        self.target.update(dt)
        self.barrier.update(dt)
        self.check_collisions()

    def key_down(self, key: str) -> None:
        """Handle a pressed key, given as its character."""
        actions = {
            " ": self.bow.start_charge,
            "w": self.bow.aim_up,
            "s": self.bow.aim_down,
            "a": self.bow.decrease_power,
            "d": self.bow.increase_power,
            "r": self.bow.arrows.clear,
            "m": lambda: self.barrier.set_moving(True),
            "n": lambda: self.barrier.set_moving(False),
        }
        action = actions.get(key)
        if action is not None:
            action()

    def key_up(self, key: str) -> None:
        """Handle a released key, given as its character."""
        if key == " ":
            self.bow.release_charge()

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the whole scene onto ``surface``."""
        surface.fill(BACKGROUND)
        draw_bow(surface, self.bow)
        draw_target(surface, self.target)
        draw_barrier(surface, self.barrier)


def _key_char(event: pygame.event.Event) -> str | None:
    return chr(event.key) if 0 <= event.key < 128 else None


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = Game()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = _key_char(event)
                    if key is not None:
                        game.key_down(key)
                elif event.type == pygame.KEYUP:
                    key = _key_char(event)
                    if key is not None:
                        game.key_up(key)
            dt = clock.tick(60) / 1000.0
            game.update(dt)
            game.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())