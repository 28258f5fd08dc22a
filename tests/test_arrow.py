import pytest

from archery.arrow import Arrow
from archery.target import Target


def test_new_arrow_is_inactive():
    arrow = Arrow(5.0, 6.0)
    assert (arrow.x, arrow.y) == (5.0, 6.0)
    assert arrow.active is False


def test_shoot_horizontal():
    arrow = Arrow(0.0, 100.0)
    arrow.shoot(0.0, 100.0)
    assert arrow.flying is True
    assert arrow.vel_x == pytest.approx(100.0)
    assert arrow.vel_y == pytest.approx(0.0)


def test_shoot_preserves_speed():
    arrow = Arrow(0.0, 100.0)
    arrow.shoot(37.0, 500.0)
    assert (arrow.vel_x**2 + arrow.vel_y**2) ** 0.5 == pytest.approx(500.0)
    assert arrow.vel_x > 0 and arrow.vel_y > 0


def test_update_applies_gravity():
    arrow = Arrow(0.0, 100.0)
    arrow.shoot(0.0, 100.0)
    arrow.update(0.1)
    assert arrow.vel_y < 0
    assert arrow.x > 0
    assert arrow.y < 100.0
    assert arrow.hit_angle < 0


def test_update_idle_arrow_does_nothing():
    arrow = Arrow(1.0, 2.0)
    arrow.update(1.0)
    assert (arrow.x, arrow.y, arrow.vel_y) == (1.0, 2.0, 0.0)


def test_arrow_falls_out_below_ground():
    arrow = Arrow(0.0, 1.0)
    arrow.shoot(-45.0, 200.0)
    arrow.update(0.1)
    assert arrow.y < 0
    assert arrow.active is False


def test_collision_with_target_sticks_arrow():
    arrow = Arrow(600.0, 250.0)
    arrow.shoot(0.0, 300.0)
    target = Target(650.0, 250.0, 50.0)
    assert arrow.check_collision(target) is True
    assert arrow.hit is True
    assert arrow.flying is False
    assert arrow.active is True
    assert arrow.x > 600.0
    assert arrow.y == pytest.approx(250.0)


def test_collision_at_exact_centre_nudges_by_zero_direction():
    arrow = Arrow(650.0, 250.0)
    arrow.shoot(0.0, 300.0)
    assert arrow.check_collision(Target(650.0, 250.0, 50.0)) is True
    assert (arrow.x, arrow.y) == (650.0, 250.0)


def test_miss_target():
    arrow = Arrow(0.0, 0.0)
    arrow.shoot(0.0, 300.0)
    assert arrow.check_collision(Target(650.0, 250.0, 50.0)) is False
    assert arrow.flying is True


def test_idle_or_stuck_arrow_does_not_collide():
    target = Target(0.0, 0.0, 50.0)
    idle = Arrow(0.0, 0.0)
    assert idle.check_collision(target) is False
    stuck = Arrow(0.0, 0.0)
    stuck.shoot(0.0, 10.0)
    stuck.check_collision(target)
    assert stuck.check_collision(target) is False


def test_stuck_arrow_does_not_move():
    arrow = Arrow(650.0, 250.0)
    arrow.shoot(30.0, 300.0)
    arrow.check_collision(Target(650.0, 250.0, 50.0))
    before = (arrow.x, arrow.y)
    arrow.update(1.0)
    assert (arrow.x, arrow.y) == before


def test_deactivate_and_reset():
    arrow = Arrow(0.0, 100.0)
    arrow.shoot(45.0, 100.0)
    arrow.deactivate()
    assert arrow.flying is False
    arrow.reset(3.0, 4.0)
    assert (arrow.x, arrow.y, arrow.vel_x, arrow.vel_y) == (3.0, 4.0, 0.0, 0.0)
    assert arrow.active is False
    assert arrow.hit_angle == 0.0