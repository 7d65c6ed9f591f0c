import pytest
from pygame.math import Vector2 as V2

from neon_arena.entities import Enemy, PowerUp, PowerUpType
from neon_arena.geometry import center_of, clamp, intersects, intersects_point


def test_clamp():
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(3.5, 0, 10) == 3.5


def test_overlapping_boxes_intersect():
    a = Enemy(V2(0, 0))
    b = Enemy(V2(39, 39))
    assert intersects(a, b)
    assert intersects(b, a)


def test_touching_edges_do_not_intersect():
    a = Enemy(V2(0, 0))
    assert not intersects(a, Enemy(V2(40, 0)))
    assert not intersects(a, Enemy(V2(0, 40)))


def test_boxes_of_different_sizes():
    enemy = Enemy(V2(100, 100))
    assert intersects(enemy, PowerUp(V2(130, 130), PowerUpType.HEALTH))
    assert not intersects(enemy, PowerUp(V2(60, 100), PowerUpType.HEALTH))


def test_center_of():
    assert center_of(Enemy(V2(10, 20))) == V2(30, 40)


def test_point_on_circle_boundary_is_a_miss():
    enemy = Enemy(V2(0, 0))  # circle centre (20, 20), radius 20, bullet radius 3
    assert not intersects_point(V2(43, 20), enemy)
    assert not intersects_point(V2(20, -3), enemy)


@pytest.mark.parametrize("point", [V2(20, 20), V2(42.9, 20), V2(5, 5), V2(20, -2.5)])
def test_point_inside_is_a_hit(point):
    assert intersects_point(point, Enemy(V2(0, 0)))


def test_point_radius_override():
    enemy = Enemy(V2(0, 0))
    assert not intersects_point(V2(41, 20), enemy, point_radius=0)
    assert intersects_point(V2(39, 20), enemy, point_radius=0)
