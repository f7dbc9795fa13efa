import math

import pytest

from skyradar.geometry import (
    HEIGHT,
    WIDTH,
    direction,
    distance,
    scale,
    wrap,
    wrapped_distance,
)


def test_scale_identity_and_zero():
    assert scale((3.5, -2.0), 1, 1) == (3.5, -2.0)
    assert scale((3.5, -2.0), 0, 0) == (0.0, 0.0)


def test_scale_independent_axes():
    result = scale((4.0, 6.0), 1, 0)
    assert result == (4.0, 0.0)


def test_distance_known_triangle():
    assert distance((0, 0), (3, 4)) == pytest.approx(5)


def test_distance_symmetric():
    a, b = (10.0, 20.0), (-7.0, 3.5)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, a) == 0


@pytest.mark.parametrize("speed", [1.0, 50.0, 120.0])
def test_direction_has_requested_length(speed):
    vec = direction((815, 221), (1234, 567), speed)
    assert math.hypot(*vec) == pytest.approx(speed)


def test_direction_points_towards_target():
    start, end = (100.0, 100.0), (400.0, -50.0)
    vec = direction(start, end, 10)
    delta = (end[0] - start[0], end[1] - start[1])
    assert vec[0] * delta[1] - vec[1] * delta[0] == pytest.approx(0, abs=1e-9)
    assert vec[0] * delta[0] + vec[1] * delta[1] > 0


def test_direction_same_point_is_nan():
    vec = direction((5, 5), (5, 5), 10)
    assert [str(component) for component in vec] == ["nan", "nan"]


def test_wrapped_distance_matches_distance():
    a, b = (12.0, 900.0), (1800.0, 40.0)
    assert wrapped_distance(a, b) == pytest.approx(distance(a, b))


@pytest.mark.parametrize("value", [0.0, 10.0, 1919.5, 1920.0, 5000.25])
def test_wrap_stays_in_range(value):
    result = wrap(value, WIDTH)
    assert 0 <= result < WIDTH


def test_wrap_keeps_values_inside():
    assert wrap(540.0, HEIGHT) == 540.0


def test_wrap_is_periodic():
    assert wrap(300.0 + WIDTH, WIDTH) == pytest.approx(wrap(300.0, WIDTH))


def test_wrap_negative_shifts_once():
    assert wrap(-5.0, WIDTH) == pytest.approx(1915.0)


def test_wrap_zero_limit_is_nan():
    assert str(wrap(5.0, 0)) == "nan"