"""Simulation core: geometry, precession, trail and state."""

from .geometry import Point2D, apsides, orbit_outline, position_at, semi_minor_axis, third_body_position
from .model import SceneSnapshot, SimulationState
from .trail import TrailBuffer

__all__ = [
    "Point2D",
    "SceneSnapshot",
    "SimulationState",
    "TrailBuffer",
    "apsides",
    "orbit_outline",
    "position_at",
    "semi_minor_axis",
    "third_body_position",
]
