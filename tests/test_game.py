import pygame

from archery import game as game_module
from archery.arrow import Arrow
from archery.game import Game


def test_initial_layout():
    game = Game()
    assert (game.bow.x, game.bow.y) == (120, 120)
    assert game.bow.gravity == -400.0
    assert (game.target.x, game.target.y, game.target.radius) == (650, 250, 50)
    assert (game.barrier.x, game.barrier.y) == (400, 200)
    assert (game.barrier.width, game.barrier.height) == (40, 120)
    assert game.barrier.moving is True


def test_aim_keys_move_angle():
    game = Game()
    before = game.bow.angle
    game.key_down("w")
    assert game.bow.angle == before + 2
    game.key_down("s")
    game.key_down("s")
    assert game.bow.angle == before - 2


def test_power_keys():
    game = Game()
    game.key_down("d")
    game.key_down("d")
    raised = game.bow.power
    assert raised > 0
    game.key_down("a")
    assert game.bow.power < raised
    for _ in range(10):
        game.key_down("a")
    assert game.bow.power == 0.0


def test_space_press_and_release_fires_arrow(capsys):
    game = Game()
    game.key_down(" ")
    assert game.bow.charging is True
    game.key_down("d")
    game.key_up(" ")
    assert game.bow.charging is False
    assert len(game.bow.arrows) == 1
    assert game.bow.arrows[0].flying is True
    assert "Arrow fired" in capsys.readouterr().out


def test_release_of_other_key_does_not_fire():
    game = Game()
    game.key_down(" ")
    game.key_up("w")
    assert game.bow.charging is True
    assert game.bow.arrows == []


def test_r_clears_arrows():
    game = Game()
    game.bow.arrows.append(Arrow(300, 300, flying=True))
    game.key_down("r")
    assert game.bow.arrows == []


def test_barrier_toggle_keys():
    game = Game()
    game.key_down("n")
    assert game.barrier.moving is False
    game.key_down("m")
    assert game.barrier.moving is True


def test_unknown_key_changes_nothing():
    game = Game()
    angle, power = game.bow.angle, game.bow.power
    game.key_down("x")
    assert (game.bow.angle, game.bow.power) == (angle, power)


def test_barrier_stops_arrow(capsys):
    game = Game()
    arrow = Arrow(400, 200, flying=True)
    game.bow.arrows.append(arrow)
    blocked = game.check_collisions()
    assert blocked == [arrow]
    assert arrow.flying is False
    assert arrow.hit is False
    assert "Arrow hit barrier!" in capsys.readouterr().out


def test_blocked_arrow_removed_on_next_update():
    game = Game()
    game.bow.arrows.append(Arrow(400, 200, flying=True))
    game.check_collisions()
    game.update(0.0)
    assert game.bow.arrows == []


def test_arrow_sticks_in_target():
    game = Game()
    arrow = Arrow(650, 250, flying=True)
    game.bow.arrows.append(arrow)
    assert game.check_collisions() == []
    assert arrow.hit is True
    game.update(0.1)
    assert game.bow.arrows == [arrow]


def test_update_moves_barrier():
    game = Game()
    start = game.barrier.y
    game.update(0.5)
    assert game.barrier.y > start


def test_draw_paints_background_and_target():
    game = Game()
    surface = pygame.Surface((game_module.WIDTH, game_module.HEIGHT))
    game.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == game_module.BACKGROUND
    assert tuple(surface.get_at((650, 350)))[:3] == (255, 255, 0)