"""Preset orbital parameter sets offered by the preset selector."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Preset:
    key: str
    name: str
    eccentricity: float
    base_rate: float
    relativistic_factor: float
    oblateness_factor: float
    description: str


PRESET_DEFINITIONS: tuple[Preset, ...] = (
    Preset(
        key="mercury",
        name="Mercury",
        eccentricity=0.2056,
        base_rate=5.74,
        relativistic_factor=4.3,
        oblateness_factor=0.0,
        description="Noticeable eccentricity with a strong relativistic perihelion advance.",
    ),
    Preset(
        key="earth",
        name="Earth",
        eccentricity=0.0167,
        base_rate=1.72,
        relativistic_factor=0.1,
        oblateness_factor=0.5,
        description="Nearly circular orbit with a small relativistic term.",
    ),
    Preset(
        key="binary_star",
        name="Binary Star",
        eccentricity=0.8,
        base_rate=15.0,
        relativistic_factor=8.0,
        oblateness_factor=2.0,
        description="Highly eccentric pair with strong relativistic effects.",
    ),
    Preset(
        key="exoplanet",
        name="Exoplanet",
        eccentricity=0.5,
        base_rate=10.0,
        relativistic_factor=3.0,
        oblateness_factor=1.0,
        description="Demonstration values for a generic eccentric exoplanet.",
    ),
)

PRESETS: dict[str, Preset] = {preset.name: preset for preset in PRESET_DEFINITIONS}
PRESET_DISPLAY_ORDER: list[str] = [preset.name for preset in PRESET_DEFINITIONS]
DEFAULT_PRESET_NAME = PRESET_DISPLAY_ORDER[0]


__all__ = [
    "DEFAULT_PRESET_NAME",
    "PRESETS",
    "PRESET_DEFINITIONS",
    "PRESET_DISPLAY_ORDER",
    "Preset",
]
