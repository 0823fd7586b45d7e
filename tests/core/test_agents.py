import math

import pytest

from flocking.core.agents import Boid
from flocking.core.vector import Vector2, ZERO


def test_apply_force_accumulates(config_dict):
    boid = Boid(10, 10, 0, 0, config_dict)
    boid.apply_force(Vector2(0.01, 0))
    boid.apply_force(Vector2(0.02, -0.01))

    assert float(boid.acceleration.x) == pytest.approx(0.03)
    assert float(boid.acceleration.y) == pytest.approx(-0.01)


def test_update_integrates_and_resets_acceleration(config_dict):
    boid = Boid(100, 100, 1, 0, config_dict)
    boid.apply_force(Vector2(0, 0.5))
    boid.update()

    assert boid.velocity == Vector2(1, 0.5)
    assert boid.position == Vector2(101, 100.5)
    assert boid.acceleration == ZERO


def test_update_limits_speed(config_dict):
    boid = Boid(100, 100, 2.5, 0, config_dict)
    boid.apply_force(Vector2(2, 0))
    boid.update()

    assert float(boid.velocity.magnitude()) == pytest.approx(config_dict["maxSpeed"])
    assert float(boid.position.x) == pytest.approx(103.0)


def test_corner_wraps_both_axes_in_one_update(config_dict):
    height = config_dict["height"]
    boid = Boid(-0.001, height + 0.001, 0, 0, config_dict)
    boid.update()

    # x < 0 sends x to width, which is not > width, so x stays there
    assert float(boid.position.x) == pytest.approx(config_dict["width"])
    assert float(boid.position.y) == 0.0


@pytest.mark.parametrize("start, velocity, expected", [
    ((799.5, 300), (1, 0), (0.0, 300.0)),
    ((0.5, 300), (-1, 0), (800.0, 300.0)),
    ((400, 599.5), (0, 1), (400.0, 0.0)),
    ((400, 0.5), (0, -1), (400.0, 600.0)),
])
def test_wrap_each_edge(config_dict, start, velocity, expected):
    boid = Boid(start[0], start[1], velocity[0], velocity[1], config_dict)
    boid.update()

    assert float(boid.position.x) == pytest.approx(expected[0])
    assert float(boid.position.y) == pytest.approx(expected[1])


def test_position_exactly_on_edge_is_not_wrapped(config_dict):
    boid = Boid(800, 600, 0, 0, config_dict)
    boid.update()
    assert boid.position == Vector2(800, 600)


def test_steering_is_limited_to_max_force(config_dict):
    boid = Boid(0, 0, 0, 0, config_dict)
    steer = boid.steering(Vector2(3, 0))

    assert float(steer.x) == pytest.approx(config_dict["maxForce"])
    assert steer.y == 0


def test_heading_follows_velocity(config_dict):
    boid = Boid(0, 0, 0, -2, config_dict)
    assert boid.heading == pytest.approx(-math.pi / 2)


def test_seek_points_at_target(config_dict):
    boid = Boid(100, 100, 0, 0, config_dict)
    force = boid.seek(Vector2(100, 200))

    assert force.x == 0
    assert float(force.y) == pytest.approx(config_dict["maxForce"])
