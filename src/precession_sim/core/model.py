"""Simulation state and the read-only scene snapshot handed to the renderer."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from . import precession
from .config import SIM_CFG, SimulationCfg
from .geometry import Point2D, position_at, semi_minor_axis
from .inputs import (
    Effect,
    InputEvent,
    Parameter,
    Reset,
    SelectPreset,
    SetParameter,
    SetRunning,
    ToggleEffect,
    ToggleRunning,
)
from .trail import TrailBuffer
from ..data.presets import PRESETS


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


@dataclass(frozen=True)
class SceneSnapshot:
    """Everything the renderer needs for one frame."""

    center: Point2D
    semi_major_axis: float
    semi_minor_axis: float
    eccentricity: float
    orbital_angle: float
    precession_angle: float
    current_position: Point2D
    trail_points: tuple[Point2D, ...]
    show_relativity: bool
    show_oblateness: bool
    show_third_body: bool
    base_precession_rate: float
    relativistic_factor: float
    oblateness_factor: float
    third_body_influence: float
    total_precession_rate: float
    is_running: bool
    tick_count: int


@dataclass
class SimulationState:
    """Single source of truth, mutated by ticks and by user input."""

    center: Point2D = (0.0, 0.0)
    semi_major_axis: float = SIM_CFG.semi_major_axis
    eccentricity: float = SIM_CFG.default_eccentricity
    orbital_angle: float = 0.0
    precession_angle: float = 0.0
    base_precession_rate: float = SIM_CFG.default_base_rate
    relativistic_factor: float = SIM_CFG.default_relativistic_factor
    oblateness_factor: float = SIM_CFG.default_oblateness_factor
    third_body_influence: float = SIM_CFG.default_third_body_influence
    show_relativity: bool = SIM_CFG.default_show_relativity
    show_oblateness: bool = SIM_CFG.default_show_oblateness
    show_third_body: bool = SIM_CFG.default_show_third_body
    is_running: bool = False
    tick_count: int = 0
    trail: TrailBuffer = field(default_factory=lambda: TrailBuffer(SIM_CFG.trail_capacity))
    cfg: SimulationCfg = field(default=SIM_CFG, repr=False)

    @classmethod
    def create(cls, center: Point2D, cfg: SimulationCfg = SIM_CFG) -> "SimulationState":
        return cls(
            center=(float(center[0]), float(center[1])),
            semi_major_axis=cfg.semi_major_axis,
            eccentricity=clamp(cfg.default_eccentricity, cfg.min_eccentricity, cfg.max_eccentricity),
            base_precession_rate=cfg.default_base_rate,
            relativistic_factor=cfg.default_relativistic_factor,
            oblateness_factor=cfg.default_oblateness_factor,
            third_body_influence=cfg.default_third_body_influence,
            show_relativity=cfg.default_show_relativity,
            show_oblateness=cfg.default_show_oblateness,
            show_third_body=cfg.default_show_third_body,
            trail=TrailBuffer(cfg.trail_capacity),
            cfg=cfg,
        )

    # --- parameter mutators ---

    def set_eccentricity(self, value: float) -> None:
        self.eccentricity = clamp(float(value), self.cfg.min_eccentricity, self.cfg.max_eccentricity)

    def set_base_rate(self, value: float) -> None:
        self.base_precession_rate = float(value)

    def set_relativistic_factor(self, value: float) -> None:
        self.relativistic_factor = float(value)

    def set_oblateness_factor(self, value: float) -> None:
        self.oblateness_factor = float(value)

    def set_third_body_influence(self, value: float) -> None:
        self.third_body_influence = float(value)

    def set_show_relativity(self, enabled: bool) -> None:
        self.show_relativity = bool(enabled)

    def set_show_oblateness(self, enabled: bool) -> None:
        self.show_oblateness = bool(enabled)

    def set_show_third_body(self, enabled: bool) -> None:
        self.show_third_body = bool(enabled)

    def set_running(self, running: bool) -> None:
        self.is_running = bool(running)

    def toggle_running(self) -> None:
        self.is_running = not self.is_running

    def set_center(self, center: Point2D) -> None:
        self.center = (float(center[0]), float(center[1]))

    def apply_preset(self, name: str) -> bool:
        """Load a named preset; returns ``False`` and changes nothing for unknown names."""

        preset = PRESETS.get(name)
        if preset is None:
            return False
        self.set_eccentricity(preset.eccentricity)
        self.base_precession_rate = preset.base_rate
        self.relativistic_factor = preset.relativistic_factor
        self.oblateness_factor = preset.oblateness_factor
        return True

    def reset(self) -> None:
        self.orbital_angle = 0.0
        self.precession_angle = 0.0
        self.tick_count = 0
        self.trail.clear()

    # --- time evolution ---

    def tick(self) -> None:
        precession.advance(self, 1, self.cfg)
        if self.is_running:
            self.tick_count += 1
            self.trail.push(self.current_position())

    def current_position(self) -> Point2D:
        return position_at(
            self.center,
            self.semi_major_axis,
            self.eccentricity,
            self.orbital_angle,
            self.precession_angle,
        )

    @property
    def completed_orbits(self) -> int:
        return int(self.orbital_angle // (2.0 * math.pi))

    # --- input dispatch ---

    def apply_input(self, event: InputEvent) -> None:
        if isinstance(event, SetParameter):
            self._set_parameter(event.parameter, event.value)
        elif isinstance(event, ToggleEffect):
            self._set_effect(event.effect, event.enabled)
        elif isinstance(event, SetRunning):
            self.set_running(event.running)
        elif isinstance(event, ToggleRunning):
            self.toggle_running()
        elif isinstance(event, SelectPreset):
            self.apply_preset(event.name)
        elif isinstance(event, Reset):
            self.reset()
        else:
            raise TypeError(f"Unsupported input event: {event!r}")

    def _set_parameter(self, parameter: Parameter, value: float) -> None:
        setters = {
            Parameter.ECCENTRICITY: self.set_eccentricity,
            Parameter.BASE_RATE: self.set_base_rate,
            Parameter.RELATIVISTIC_FACTOR: self.set_relativistic_factor,
            Parameter.OBLATENESS_FACTOR: self.set_oblateness_factor,
            Parameter.THIRD_BODY_INFLUENCE: self.set_third_body_influence,
        }
        setters[parameter](value)

    def _set_effect(self, effect: Effect, enabled: bool) -> None:
        if effect is Effect.RELATIVITY:
            self.set_show_relativity(enabled)
        elif effect is Effect.OBLATENESS:
            self.set_show_oblateness(enabled)
        else:
            self.set_show_third_body(enabled)

    # --- render boundary ---

    def snapshot(self) -> SceneSnapshot:
        return SceneSnapshot(
            center=self.center,
            semi_major_axis=self.semi_major_axis,
            semi_minor_axis=semi_minor_axis(self.semi_major_axis, self.eccentricity),
            eccentricity=self.eccentricity,
            orbital_angle=self.orbital_angle,
            precession_angle=self.precession_angle,
            current_position=self.current_position(),
            trail_points=self.trail.snapshot(),
            show_relativity=self.show_relativity,
            show_oblateness=self.show_oblateness,
            show_third_body=self.show_third_body,
            base_precession_rate=self.base_precession_rate,
            relativistic_factor=self.relativistic_factor,
            oblateness_factor=self.oblateness_factor,
            third_body_influence=self.third_body_influence,
            total_precession_rate=precession.total_precession_rate(self),
            is_running=self.is_running,
            tick_count=self.tick_count,
        )


__all__ = ["SceneSnapshot", "SimulationState", "clamp"]
