"""Utilities for driving the simulation at a fixed tick period."""
from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class FrameTimer:
    """High resolution timer based on :func:`time.perf_counter`."""

    last_time: float = field(default_factory=time.perf_counter)

    def tick(self) -> float:
        now = time.perf_counter()
        dt = now - self.last_time
        self.last_time = now
        return dt


@dataclass
class TickScheduler:
    """Accumulates real time and releases whole ticks of ``period`` seconds.

    At most ``max_ticks_per_frame`` ticks are released per frame; any backlog
    beyond that is dropped so a stalled frame does not trigger a burst.
    """

    period: float
    max_ticks_per_frame: int
    value: float = 0.0

    def __post_init__(self) -> None:
        if self.period <= 0.0:
            raise ValueError("Tick period must be positive")
        if self.max_ticks_per_frame <= 0:
            raise ValueError("max_ticks_per_frame must be positive")

    def accrue(self, delta: float) -> None:
        if delta > 0.0:
            self.value += delta

    def clear(self) -> None:
        self.value = 0.0

    def consume(self) -> int:
        ticks_due = int(self.value // self.period)
        if ticks_due <= 0:
            return 0
        if ticks_due > self.max_ticks_per_frame:
            self.value = 0.0
            return self.max_ticks_per_frame
        self.value -= ticks_due * self.period
        return ticks_due


__all__ = ["FrameTimer", "TickScheduler"]
