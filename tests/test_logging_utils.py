import csv
import json

import pytest

from precession_sim.core.inputs import Effect, Reset, SelectPreset, SetParameter, Parameter, ToggleEffect, ToggleRunning
from precession_sim.core.logging_utils import RunRecorder
from precession_sim.core.model import SimulationState


def read_rows(path):
    with path.open(newline="") as fh:
        return list(csv.DictReader(fh))


def test_creates_run_folder_and_marker(tmp_path):
    recorder = RunRecorder(tmp_path, run_id="demo")
    recorder.close()
    assert recorder.run_dir == tmp_path / "demo"
    assert (tmp_path / "last_run.txt").read_text(encoding="utf-8") == "demo"
    assert recorder.timeseries_path.read_text().splitlines()[0] == ",".join(RunRecorder.TIMESERIES_HEADER)


def test_existing_run_id_gets_suffix(tmp_path):
    RunRecorder(tmp_path, run_id="demo").close()
    second = RunRecorder(tmp_path, run_id="demo")
    second.close()
    assert second.run_id == "demo_01"


def test_logs_ticks_and_flushes_on_close(tmp_path):
    state = SimulationState.create((100.0, 100.0))
    state.set_running(True)
    with RunRecorder(tmp_path, run_id="ticks", timeseries_flush_threshold=1000) as recorder:
        for _ in range(25):
            state.tick()
            recorder.log_tick(state)
    rows = read_rows(recorder.timeseries_path)
    assert len(rows) == 25
    assert int(rows[-1]["tick"]) == 25
    assert float(rows[-1]["orbital_angle"]) == pytest.approx(state.orbital_angle)
    assert float(rows[-1]["x"]) == pytest.approx(state.current_position()[0])
    assert float(rows[0]["increment"]) == pytest.approx(0.5 / 100 + 0.1 / 500 + 0.05 / 400)
    assert recorder.closed


def test_log_input_records_event_types(tmp_path):
    state = SimulationState.create((0.0, 0.0))
    recorder = RunRecorder(tmp_path, run_id="events")
    for event in (
        ToggleRunning(),
        SetParameter(Parameter.ECCENTRICITY, 0.3),
        ToggleEffect(Effect.THIRD_BODY, True),
        SelectPreset("Mercury"),
        SelectPreset("Vulcan"),
        Reset(),
        ToggleRunning(),
    ):
        state.apply_input(event)
        recorder.log_input(event, state)
    recorder.close()

    rows = read_rows(recorder.events_path)
    assert [row["type"] for row in rows] == [
        "start",
        "parameter",
        "effect",
        "preset",
        "preset",
        "reset",
        "stop",
    ]
    assert json.loads(rows[1]["details"]) == {"name": "eccentricity", "value": 0.3}
    assert json.loads(rows[3]["details"]) == {"applied": True, "name": "Mercury"}
    assert json.loads(rows[4]["details"])["applied"] is False
    assert rows[0]["details"] == ""


def test_write_meta(tmp_path):
    state = SimulationState.create((12.0, 34.0))
    recorder = RunRecorder(tmp_path, run_id="meta")
    recorder.write_meta(state, {"preset": "Earth"})
    recorder.close()
    meta = json.loads(recorder.meta_path.read_text(encoding="utf-8"))
    assert meta["center"] == [12.0, 34.0]
    assert meta["divisors"]["relativity"] == 500.0
    assert meta["preset"] == "Earth"


def test_close_is_idempotent(tmp_path):
    recorder = RunRecorder(tmp_path, run_id="twice")
    recorder.close()
    recorder.close()
    assert recorder.closed
