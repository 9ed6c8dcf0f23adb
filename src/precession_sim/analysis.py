"""Analyze a recorded precession run and generate diagnostic figures."""
from __future__ import annotations

import argparse
import csv
import json
import math
from pathlib import Path
from typing import Dict, List

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


TIMESERIES_FILENAME = "timeseries.csv"
EVENTS_FILENAME = "events.csv"
META_FILENAME = "meta.json"
FIGS_SUBDIR = "figs"
DEFAULT_RUNS_DIR = Path("data") / "runs"


def load_timeseries(path: Path) -> Dict[str, np.ndarray]:
    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        columns: Dict[str, List[float]] = {name: [] for name in reader.fieldnames or []}
        for row in reader:
            for key, value in row.items():
                if key is None:
                    continue
                columns.setdefault(key, []).append(float(value))
    return {key: np.asarray(values) for key, values in columns.items()}


def load_events(path: Path) -> List[dict]:
    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        events: List[dict] = []
        for row in reader:
            if not row:
                continue
            event = {"tick": int(row["tick"]), "type": row["type"]}
            details_raw = row.get("details", "")
            if details_raw:
                try:
                    event["details"] = json.loads(details_raw)
                except json.JSONDecodeError:
                    event["details"] = details_raw
            events.append(event)
    return events


def periapsis_interval(events: List[dict]) -> float | None:
    """Mean number of ticks between consecutive periapsis passages."""

    ticks = [event["tick"] for event in events if event["type"] == "periapsis"]
    if len(ticks) < 2:
        return None
    return float(np.mean(np.diff(ticks)))


def summarize_run(ts: Dict[str, np.ndarray], events: List[dict]) -> dict:
    ticks = ts.get("tick", np.array([]))
    increments = ts.get("increment", np.array([]))
    # summing increments stays correct across resets inside one recording
    return {
        "ticks": int(ticks.size),
        "mean_increment": float(np.mean(increments)) if increments.size else 0.0,
        "rotation_deg": math.degrees(float(np.sum(increments))),
        "periapsis_passages": sum(1 for event in events if event["type"] == "periapsis"),
        "periapsis_interval": periapsis_interval(events),
    }


def ensure_fig_dir(run_dir: Path) -> Path:
    fig_dir = run_dir / FIGS_SUBDIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    return fig_dir


def plot_trajectory(fig_dir: Path, ts: Dict[str, np.ndarray], meta: dict) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.plot(ts["x"], ts["y"], color="#00c8ff", lw=1.0, label="Body")
    center = meta.get("center")
    if center:
        ax.scatter([center[0]], [center[1]], color="#ffff00", edgecolors="#806000", s=80, label="Central body")
    ax.set_aspect("equal", "box")
    # screen coordinates grow downward
    ax.invert_yaxis()
    ax.set_xlabel("x [px]")
    ax.set_ylabel("y [px]")
    ax.set_title("Trajectory")
    ax.legend()
    fig.tight_layout()
    fig.savefig(fig_dir / "trajectory.png", dpi=150)
    plt.close(fig)


def plot_precession_angle(fig_dir: Path, ts: Dict[str, np.ndarray], events: List[dict]) -> None:
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(ts["tick"], np.degrees(ts["precession_angle"]), color="#ff6464")
    for event in events:
        if event["type"] in ("preset", "reset"):
            ax.axvline(event["tick"], color="#888888", linestyle=":", alpha=0.6)
    ax.set_xlabel("tick")
    ax.set_ylabel("φ [deg]")
    ax.set_title("Accumulated precession")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(fig_dir / "precession_angle.png", dpi=150)
    plt.close(fig)


def print_summary(run_dir: Path, summary: dict) -> None:
    print(f"Run: {run_dir.name}")
    print(f" Ticks recorded: {summary['ticks']}")
    print(f" Mean precession per tick: {summary['mean_increment']:.6f} rad")
    print(f" Total apsidal rotation: {summary['rotation_deg']:.2f} deg")
    print(f" Periapsis passages: {summary['periapsis_passages']}")
    interval = summary["periapsis_interval"]
    if interval is not None:
        print(f" Mean ticks between passages: {interval:.1f}")
    else:
        print(" Mean ticks between passages: needs at least two passages")


def resolve_run_dir(parser: argparse.ArgumentParser, run_dir: str | None, base_runs_dir: Path) -> Path:
    if run_dir:
        run_path = Path(run_dir)
        if not run_path.is_dir():
            run_path = base_runs_dir / run_dir
    else:
        last_run_file = base_runs_dir / "last_run.txt"
        if not last_run_file.exists():
            parser.error("No run given and last_run.txt is missing.")
        run_path = base_runs_dir / last_run_file.read_text(encoding="utf-8").strip()
    if not run_path.is_dir():
        parser.error(f"Run directory not found: {run_path}")
    return run_path


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Analyze a recorded precession run and write figures.")
    parser.add_argument("run_dir", nargs="?", help="Path or id of a run folder")
    parser.add_argument("--runs-dir", default=str(DEFAULT_RUNS_DIR), help="Folder holding recorded runs")
    args = parser.parse_args(argv)

    run_path = resolve_run_dir(parser, args.run_dir, Path(args.runs_dir))

    meta_path = run_path / META_FILENAME
    ts_path = run_path / TIMESERIES_FILENAME
    ev_path = run_path / EVENTS_FILENAME
    if not meta_path.exists() or not ts_path.exists() or not ev_path.exists():
        parser.error("Run folder is missing meta.json, timeseries.csv or events.csv.")

    with meta_path.open("r", encoding="utf-8") as fh:
        meta = json.load(fh)
    ts = load_timeseries(ts_path)
    events = load_events(ev_path)
    if not ts or ts.get("tick", np.array([])).size == 0:
        parser.error("timeseries.csv has no ticks to analyze.")

    fig_dir = ensure_fig_dir(run_path)
    plot_trajectory(fig_dir, ts, meta)
    plot_precession_angle(fig_dir, ts, events)
    print_summary(run_path, summarize_run(ts, events))


if __name__ == "__main__":
    main()
