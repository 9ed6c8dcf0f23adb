"""Closed-form orbit geometry.

All functions here are pure: they take the orbit parameters explicitly and
never touch simulation state, so they can be evaluated without a display.

Convention: ``center`` is both the central body and the pivot of the
precession rotation. Before rotation the body sits at
``center + (a·cos θ·(1 − e), b·sin θ)``, so periapsis (θ = 0) lies on the
+x side at distance ``a(1 − e)``. The drawn orbit is the curve traced by
that formula, which keeps the body on its own outline for every θ.
"""
from __future__ import annotations

import math

import numpy as np

Point2D = tuple[float, float]


def semi_minor_axis(semi_major_axis: float, eccentricity: float) -> float:
    """Return ``a * sqrt(1 - e²)``; collapses to 0 as ``e`` approaches 1."""

    return semi_major_axis * math.sqrt(max(0.0, 1.0 - eccentricity * eccentricity))


def rotate_about(point: Point2D, center: Point2D, angle: float) -> Point2D:
    """Rotate ``point`` counter-clockwise by ``angle`` radians about ``center``."""

    dx = point[0] - center[0]
    dy = point[1] - center[1]
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (
        center[0] + dx * cos_a - dy * sin_a,
        center[1] + dx * sin_a + dy * cos_a,
    )


def position_at(
    center: Point2D,
    semi_major_axis: float,
    eccentricity: float,
    orbital_angle: float,
    precession_angle: float,
) -> Point2D:
    """Position of the orbiting body for the given angles."""

    b = semi_minor_axis(semi_major_axis, eccentricity)
    x = center[0] + semi_major_axis * math.cos(orbital_angle) * (1.0 - eccentricity)
    y = center[1] + b * math.sin(orbital_angle)
    return rotate_about((x, y), center, precession_angle)


def orbit_outline(
    center: Point2D,
    semi_major_axis: float,
    eccentricity: float,
    precession_angle: float,
    samples: int = 360,
) -> np.ndarray:
    """Sample the traced orbit as an ``(samples, 2)`` array of points."""

    if samples < 3:
        raise ValueError("orbit outline needs at least 3 samples")
    theta = np.linspace(0.0, 2.0 * np.pi, samples, endpoint=False)
    b = semi_minor_axis(semi_major_axis, eccentricity)
    dx = semi_major_axis * (1.0 - eccentricity) * np.cos(theta)
    dy = b * np.sin(theta)
    cos_p = math.cos(precession_angle)
    sin_p = math.sin(precession_angle)
    points = np.empty((samples, 2), dtype=float)
    points[:, 0] = center[0] + dx * cos_p - dy * sin_p
    points[:, 1] = center[1] + dx * sin_p + dy * cos_p
    return points


def apsides(
    center: Point2D,
    semi_major_axis: float,
    eccentricity: float,
    precession_angle: float,
) -> tuple[Point2D, Point2D]:
    """Return ``(periapsis, apoapsis)`` marker points on the traced orbit."""

    periapsis = position_at(center, semi_major_axis, eccentricity, 0.0, precession_angle)
    apoapsis = position_at(center, semi_major_axis, eccentricity, math.pi, precession_angle)
    return periapsis, apoapsis


def third_body_position(
    center: Point2D,
    orbital_angle: float,
    distance: float = 250.0,
    angular_ratio: float = 0.3,
) -> Point2D:
    """Decorative perturber on a circle, moving slower than the orbiting body."""

    angle = orbital_angle * angular_ratio
    return (
        center[0] + distance * math.cos(angle),
        center[1] + distance * math.sin(angle),
    )


__all__ = [
    "Point2D",
    "apsides",
    "orbit_outline",
    "position_at",
    "rotate_about",
    "semi_minor_axis",
    "third_body_position",
]
