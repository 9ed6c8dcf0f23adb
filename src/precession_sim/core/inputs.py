"""Typed input events emitted by the control panel and keyboard shortcuts."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Parameter(Enum):
    ECCENTRICITY = "eccentricity"
    BASE_RATE = "base_rate"
    RELATIVISTIC_FACTOR = "relativistic_factor"
    OBLATENESS_FACTOR = "oblateness_factor"
    THIRD_BODY_INFLUENCE = "third_body_influence"


class Effect(Enum):
    RELATIVITY = "relativity"
    OBLATENESS = "oblateness"
    THIRD_BODY = "third_body"


@dataclass(frozen=True)
class SetParameter:
    parameter: Parameter
    value: float


@dataclass(frozen=True)
class ToggleEffect:
    effect: Effect
    enabled: bool


@dataclass(frozen=True)
class SetRunning:
    running: bool


@dataclass(frozen=True)
class ToggleRunning:
    pass


@dataclass(frozen=True)
class SelectPreset:
    name: str


@dataclass(frozen=True)
class Reset:
    pass


InputEvent = Union[SetParameter, ToggleEffect, SetRunning, ToggleRunning, SelectPreset, Reset]


__all__ = [
    "Effect",
    "InputEvent",
    "Parameter",
    "Reset",
    "SelectPreset",
    "SetParameter",
    "SetRunning",
    "ToggleEffect",
    "ToggleRunning",
]
