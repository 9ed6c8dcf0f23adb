"""Buffered CSV recording of simulation runs."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

from ..data.presets import PRESETS
from .inputs import (
    InputEvent,
    Reset,
    SelectPreset,
    SetParameter,
    SetRunning,
    ToggleEffect,
    ToggleRunning,
)
from .model import SimulationState
from .precession import precession_increment


class RunRecorder:
    """Buffered recorder that stores per-tick telemetry and events as CSV.

    Parameters
    ----------
    root_dir:
        Directory in which one folder per recorded run is created.
    run_id:
        Optional custom run identifier. Defaults to ``YYYYmmdd_HHMMSS_run``;
        a numeric suffix is appended when the folder already exists.
    timeseries_flush_threshold:
        Buffered tick rows written to disk in one batch.
    events_flush_threshold:
        Buffered event rows written to disk in one batch.
    """

    TIMESERIES_HEADER = [
        "tick",
        "orbital_angle",
        "precession_angle",
        "x",
        "y",
        "increment",
        "eccentricity",
    ]
    EVENTS_HEADER = ["tick", "type", "details"]

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        timeseries_flush_threshold: int = 200,
        events_flush_threshold: int = 20,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base = run_id or f"{timestamp}_run"
        candidate_id = base
        suffix = 1
        while (self.root_dir / candidate_id).exists():
            candidate_id = f"{base}_{suffix:02d}"
            suffix += 1

        self.run_id = candidate_id
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=False)

        self.timeseries_path = self.run_dir / "timeseries.csv"
        self.events_path = self.run_dir / "events.csv"
        self.meta_path = self.run_dir / "meta.json"

        self._ts_file = self.timeseries_path.open("w", newline="")
        self._ts_file.write(",".join(self.TIMESERIES_HEADER) + "\n")
        self._ev_file = self.events_path.open("w", newline="")
        self._ev_file.write(",".join(self.EVENTS_HEADER) + "\n")

        self._ts_buffer: list[str] = []
        self._ev_buffer: list[str] = []
        self._ts_threshold = max(1, timeseries_flush_threshold)
        self._ev_threshold = max(1, events_flush_threshold)
        self._closed = False

        (self.root_dir / "last_run.txt").write_text(self.run_id, encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._closed

    def write_meta(self, state: SimulationState, extra: Mapping[str, object] | None = None) -> None:
        cfg = state.cfg
        meta: dict[str, object] = {
            "run_id": self.run_id,
            "semi_major_axis": state.semi_major_axis,
            "center": list(state.center),
            "orbital_step": cfg.orbital_step,
            "tick_period": cfg.tick_period,
            "trail_capacity": cfg.trail_capacity,
            "divisors": {
                "base": cfg.base_rate_divisor,
                "relativity": cfg.relativity_divisor,
                "oblateness": cfg.oblateness_divisor,
                "third_body": cfg.third_body_divisor,
            },
        }
        if extra:
            meta.update(extra)
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_tick(self, state: SimulationState) -> None:
        x, y = state.current_position()
        values = (
            state.tick_count,
            state.orbital_angle,
            state.precession_angle,
            x,
            y,
            precession_increment(state, state.cfg),
            state.eccentricity,
        )
        self._ts_buffer.append(",".join(self._format_value(v) for v in values))
        if len(self._ts_buffer) >= self._ts_threshold:
            self._flush_timeseries()

    def log_event(self, tick: int, event_type: str, details: Mapping[str, object] | None = None) -> None:
        details_text = json.dumps(dict(details), sort_keys=True) if details else ""
        # details are JSON and may contain commas
        row = [str(tick), event_type, self._quote(details_text)]
        self._ev_buffer.append(",".join(row))
        if len(self._ev_buffer) >= self._ev_threshold:
            self._flush_events()

    def log_input(self, event: InputEvent, state: SimulationState) -> None:
        """Record an input event after it has been applied to ``state``."""

        tick = state.tick_count
        if isinstance(event, (SetRunning, ToggleRunning)):
            self.log_event(tick, "start" if state.is_running else "stop")
        elif isinstance(event, Reset):
            self.log_event(tick, "reset")
        elif isinstance(event, SelectPreset):
            self.log_event(
                tick,
                "preset",
                {"name": event.name, "applied": event.name in PRESETS},
            )
        elif isinstance(event, SetParameter):
            self.log_event(tick, "parameter", {"name": event.parameter.value, "value": event.value})
        elif isinstance(event, ToggleEffect):
            self.log_event(tick, "effect", {"name": event.effect.value, "enabled": event.enabled})

    def close(self) -> None:
        if self._closed:
            return
        self._flush_timeseries()
        self._flush_events()
        self._ts_file.close()
        self._ev_file.close()
        self._closed = True

    def _flush_timeseries(self) -> None:
        if self._ts_buffer:
            self._ts_file.write("\n".join(self._ts_buffer) + "\n")
            self._ts_file.flush()
            self._ts_buffer.clear()

    def _flush_events(self) -> None:
        if self._ev_buffer:
            self._ev_file.write("\n".join(self._ev_buffer) + "\n")
            self._ev_file.flush()
            self._ev_buffer.clear()

    @staticmethod
    def _format_value(value: float) -> str:
        if isinstance(value, int):
            return str(value)
        return f"{value:.10g}"

    @staticmethod
    def _quote(text: str) -> str:
        if not text:
            return ""
        return '"' + text.replace('"', '""') + '"'

    def __enter__(self) -> "RunRecorder":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["RunRecorder"]
