import math

import numpy as np
import pytest

from precession_sim.core.geometry import (
    apsides,
    orbit_outline,
    position_at,
    rotate_about,
    semi_minor_axis,
    third_body_position,
)

CENTER = (480.0, 340.0)
A = 150.0


@pytest.mark.parametrize("e", [0.0, 0.1, 0.2056, 0.5, 0.6, 0.89])
def test_periapsis_lies_on_positive_x(e):
    x, y = position_at(CENTER, A, e, 0.0, 0.0)
    assert x == pytest.approx(CENTER[0] + A * (1 - e))
    assert y == pytest.approx(CENTER[1])


@pytest.mark.parametrize("e", [0.0, 0.3, 0.6, 0.9])
def test_unrotated_points_lie_on_traced_ellipse(e):
    b = semi_minor_axis(A, e)
    for theta in np.linspace(0.0, 4 * math.pi, 37):
        x, y = position_at(CENTER, A, e, float(theta), 0.0)
        value = ((x - CENTER[0]) / (A * (1 - e))) ** 2 + ((y - CENTER[1]) / b) ** 2
        assert value == pytest.approx(1.0, abs=1e-9)


def test_rotation_preserves_distance_from_center():
    for theta in (0.0, 0.7, 2.1, 5.0):
        base = position_at(CENTER, A, 0.6, theta, 0.0)
        base_r = math.dist(base, CENTER)
        for phi in (0.1, 1.0, math.pi, -2.5, 40.0):
            rotated = position_at(CENTER, A, 0.6, theta, phi)
            assert math.dist(rotated, CENTER) == pytest.approx(base_r)


def test_quarter_turn_moves_periapsis_to_positive_y():
    x, y = position_at(CENTER, A, 0.5, 0.0, math.pi / 2)
    assert x == pytest.approx(CENTER[0])
    assert y == pytest.approx(CENTER[1] + A * 0.5)


def test_circle_when_eccentricity_is_zero():
    for theta in (0.0, 1.0, 2.0, 3.0):
        assert math.dist(position_at(CENTER, A, 0.0, theta, 0.3), CENTER) == pytest.approx(A)


def test_eccentricity_near_one_flattens_orbit():
    assert semi_minor_axis(A, 1.0) == 0.0
    _, y = position_at(CENTER, A, 1.0, math.pi / 2, 0.0)
    assert y == pytest.approx(CENTER[1])


def test_rotate_about_full_turn_is_identity():
    point = (10.0, -4.0)
    x, y = rotate_about(point, (1.0, 2.0), 2 * math.pi)
    assert (x, y) == pytest.approx(point)


def test_orbit_outline_matches_position_at():
    outline = orbit_outline(CENTER, A, 0.4, 0.8, samples=8)
    assert outline.shape == (8, 2)
    for idx, (x, y) in enumerate(outline):
        expected = position_at(CENTER, A, 0.4, idx * 2 * math.pi / 8, 0.8)
        assert (x, y) == pytest.approx(expected)


def test_orbit_outline_needs_three_samples():
    with pytest.raises(ValueError):
        orbit_outline(CENTER, A, 0.4, 0.0, samples=2)


def test_apsides_sit_on_opposite_ends_of_apsidal_line():
    periapsis, apoapsis = apsides(CENTER, A, 0.6, 0.0)
    assert periapsis == pytest.approx((CENTER[0] + A * 0.4, CENTER[1]))
    assert apoapsis == pytest.approx((CENTER[0] - A * 0.4, CENTER[1]))


def test_third_body_circles_at_fixed_distance():
    assert third_body_position(CENTER, 0.0) == pytest.approx((CENTER[0] + 250.0, CENTER[1]))
    x, y = third_body_position(CENTER, math.pi / 0.6)
    assert (x, y) == pytest.approx((CENTER[0], CENTER[1] + 250.0))
