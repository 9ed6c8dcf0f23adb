"""Configuration dataclasses for the precession simulator."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationCfg:
    semi_major_axis: float = 150.0
    default_eccentricity: float = 0.6
    min_eccentricity: float = 0.0
    max_eccentricity: float = 0.9
    default_base_rate: float = 0.5
    default_relativistic_factor: float = 0.1
    default_oblateness_factor: float = 0.05
    default_third_body_influence: float = 0.0
    default_show_relativity: bool = True
    default_show_oblateness: bool = True
    default_show_third_body: bool = False
    orbital_step: float = 0.02
    base_rate_divisor: float = 100.0
    relativity_divisor: float = 500.0
    oblateness_divisor: float = 400.0
    third_body_divisor: float = 300.0
    trail_capacity: int = 500
    tick_period: float = 0.030
    max_ticks_per_frame: int = 5

    @property
    def ticks_per_orbit(self) -> float:
        return 2.0 * math.pi / self.orbital_step


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1000
    height: int = 900
    control_panel_height: int = 200
    margin: int = 10
    fps_cap: int = 60
    window_background_color: tuple[int, int, int] = (30, 30, 40)
    display_background_color: tuple[int, int, int] = (20, 20, 30)
    display_border_color: tuple[int, int, int] = (60, 60, 80)
    display_inner_border_color: tuple[int, int, int] = (40, 40, 60)
    crosshair_color: tuple[int, int, int] = (50, 50, 70)
    polar_grid_color: tuple[int, int, int, int] = (50, 50, 70, 100)
    polar_grid_spacing: int = 50
    orbit_color: tuple[int, int, int, int] = (0, 180, 255, 100)
    orbit_outline_samples: int = 360
    star_color: tuple[int, int, int] = (255, 255, 0)
    star_radius: int = 10
    oblate_halo_color: tuple[int, int, int, int] = (255, 255, 0, 100)
    oblate_base_size: int = 20
    oblate_width_gain: float = 10.0
    oblate_height_gain: float = 5.0
    body_color: tuple[int, int, int] = (0, 255, 255)
    body_radius: int = 6
    apsidal_line_color: tuple[int, int, int, int] = (255, 100, 100, 150)
    periapsis_color: tuple[int, int, int] = (255, 0, 0)
    apoapsis_color: tuple[int, int, int] = (0, 255, 0)
    apsis_marker_radius: int = 4
    trail_color: tuple[int, int, int, int] = (0, 200, 255, 150)
    third_body_color: tuple[int, int, int] = (255, 150, 0)
    third_body_link_color: tuple[int, int, int, int] = (255, 150, 0, 100)
    third_body_radius: int = 8
    third_body_distance: float = 250.0
    third_body_angular_ratio: float = 0.3
    readout_color: tuple[int, int, int] = (0, 200, 255)
    running_color: tuple[int, int, int] = (0, 255, 0)
    stopped_color: tuple[int, int, int] = (255, 0, 0)
    status_text_color: tuple[int, int, int] = (255, 255, 255)
    recording_color: tuple[int, int, int] = (255, 80, 80)
    panel_background_color: tuple[int, int, int] = (40, 40, 50)
    panel_border_color: tuple[int, int, int] = (80, 80, 100)
    label_color: tuple[int, int, int] = (200, 200, 255)
    widget_color: tuple[int, int, int] = (60, 60, 80)
    widget_hover_color: tuple[int, int, int] = (80, 80, 110)
    widget_border_color: tuple[int, int, int] = (110, 110, 140)
    widget_accent_color: tuple[int, int, int] = (0, 200, 255)
    widget_text_color: tuple[int, int, int] = (255, 255, 255)
    widget_radius: int = 6
    readout_font_names: tuple[str, ...] = ("consolas", "dejavusansmono", "couriernew")
    label_font_names: tuple[str, ...] = ("bahnschrift", "dejavusans", "arial")

    @property
    def display_rect(self) -> tuple[int, int, int, int]:
        return (
            self.margin,
            self.margin,
            self.width - 2 * self.margin,
            self.height - self.control_panel_height - 3 * self.margin,
        )

    @property
    def control_rect(self) -> tuple[int, int, int, int]:
        top = self.height - self.control_panel_height - self.margin
        return (self.margin, top, self.width - 2 * self.margin, self.control_panel_height)


@dataclass(frozen=True)
class SliderSpec:
    label: str
    minimum: float
    maximum: float
    step: float


@dataclass(frozen=True)
class ControlCfg:
    eccentricity: SliderSpec = SliderSpec("ECCENTRICITY", 0.0, 0.9, 0.01)
    base_rate: SliderSpec = SliderSpec("BASE PRECESSION", 0.0, 10.0, 0.1)
    relativistic: SliderSpec = SliderSpec("RELATIVITY", 0.0, 10.0, 0.1)
    oblateness: SliderSpec = SliderSpec("OBLATENESS", 0.0, 10.0, 0.1)
    third_body: SliderSpec = SliderSpec("THIRD BODY", 0.0, 10.0, 0.1)
    slider_track_height: int = 6
    slider_knob_radius: int = 8
    checkbox_size: int = 18


SIM_CFG = SimulationCfg()
RENDER_CFG = RenderCfg()
CONTROL_CFG = ControlCfg()


__all__ = [
    "CONTROL_CFG",
    "ControlCfg",
    "RENDER_CFG",
    "RenderCfg",
    "SIM_CFG",
    "SimulationCfg",
    "SliderSpec",
]
