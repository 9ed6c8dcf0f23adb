"""Per-tick advance of the orbital and precession angles.

The precession model is a plain sum of scalar contributions, each scaled by
a tuning divisor from :class:`SimulationCfg`. Nothing here is physically
derived.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .config import SIM_CFG, SimulationCfg

if TYPE_CHECKING:  # pragma: no cover
    from .model import SimulationState


def precession_increment(state: SimulationState, cfg: SimulationCfg = SIM_CFG) -> float:
    """Precession added by a single tick for the current rates and toggles."""

    increment = state.base_precession_rate / cfg.base_rate_divisor
    if state.show_relativity:
        increment += state.relativistic_factor / cfg.relativity_divisor
    if state.show_oblateness:
        increment += state.oblateness_factor / cfg.oblateness_divisor
    if state.show_third_body:
        increment += state.third_body_influence / cfg.third_body_divisor
    return increment


def total_precession_rate(state: SimulationState) -> float:
    """Sum of the enabled raw factors, shown as the HUD's degrees-per-orbit readout."""

    total = state.base_precession_rate
    if state.show_relativity:
        total += state.relativistic_factor
    if state.show_oblateness:
        total += state.oblateness_factor
    if state.show_third_body:
        total += state.third_body_influence
    return total


def advance(state: SimulationState, dt_ticks: int = 1, cfg: SimulationCfg = SIM_CFG) -> None:
    """Advance both angles by ``dt_ticks`` ticks; does nothing while stopped."""

    if not state.is_running or dt_ticks <= 0:
        return
    for _ in range(dt_ticks):
        state.orbital_angle += cfg.orbital_step
        state.precession_angle += precession_increment(state, cfg)


__all__ = ["advance", "precession_increment", "total_precession_rate"]
