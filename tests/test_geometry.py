import math

import pytest

from world.geometry import Vector2D, line_circle_collide, mod_angle, point_circle_collision
from world.physics import approach_speed, mouth_position, smooth, wrap_world


def test_vector_arithmetic():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(3.0, -1.0)
    assert a + b == Vector2D(4.0, 1.0)
    assert b - a == Vector2D(2.0, -3.0)
    assert a * 2 == Vector2D(2.0, 4.0)
    a += b
    assert a == Vector2D(4.0, 1.0)
    assert Vector2D(3.0, 4.0).length() == pytest.approx(5.0)


def test_from_angle():
    v = Vector2D.from_angle(math.pi / 2, 10)
    assert v.x == pytest.approx(0.0, abs=1e-9)
    assert v.y == pytest.approx(10.0)


def test_mod_angle():
    assert mod_angle(-math.pi / 2) == pytest.approx(1.5 * math.pi)
    assert mod_angle(5 * math.pi) == pytest.approx(math.pi)
    assert 0.0 <= mod_angle(2 * math.pi) < 2 * math.pi


def test_point_circle_zero_radius_never_hits():
    assert not point_circle_collision(Vector2D(0, 0), Vector2D(0, 0), 0)
    assert point_circle_collision(Vector2D(0, 0), Vector2D(3, 4), 5)
    assert not point_circle_collision(Vector2D(0, 0), Vector2D(3, 4), 4.9)


def test_segment_through_circle():
    assert line_circle_collide(Vector2D(0, 0), Vector2D(100, 0), Vector2D(50, 10), 16)


def test_segment_misses_circle_to_the_side():
    assert not line_circle_collide(Vector2D(0, 0), Vector2D(100, 0), Vector2D(50, 30), 16)


def test_segment_stops_short_of_circle():
    assert not line_circle_collide(Vector2D(0, 0), Vector2D(100, 0), Vector2D(150, 0), 16)


def test_circle_behind_segment_start():
    assert not line_circle_collide(Vector2D(0, 0), Vector2D(100, 0), Vector2D(-40, 0), 16)


def test_endpoint_inside_circle():
    assert line_circle_collide(Vector2D(0, 0), Vector2D(100, 0), Vector2D(110, 0), 16)
    assert line_circle_collide(Vector2D(0, 0), Vector2D(100, 0), Vector2D(-10, 0), 16)


def test_wrap_world_is_toroidal():
    p = Vector2D(1000.5, -0.5)
    wrap_world(p, 1000)
    assert p.x == pytest.approx(0.5)
    assert p.y == pytest.approx(999.5)


def test_smoothing():
    assert smooth(0.0, 1.0, 0.5) == pytest.approx(0.5)
    # fast up, slow down
    assert approach_speed(0.0, 4.0, 1.0, 0.01) == pytest.approx(4.0)
    assert approach_speed(4.0, 0.0, 1.0, 0.01) == pytest.approx(3.96)


def test_mouth_ahead_of_body():
    m = mouth_position(Vector2D(10, 10), 0.0, 8.0)
    assert m.x == pytest.approx(18.0)
    assert m.y == pytest.approx(10.0)
