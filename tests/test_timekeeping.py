import pytest

from precession_sim.core.timekeeping import FrameTimer, TickScheduler


def test_releases_whole_ticks_and_keeps_remainder():
    scheduler = TickScheduler(period=0.03, max_ticks_per_frame=5)
    scheduler.accrue(0.1)
    assert scheduler.consume() == 3
    assert scheduler.value == pytest.approx(0.01)
    scheduler.accrue(0.025)
    assert scheduler.consume() == 1
    assert scheduler.value == pytest.approx(0.005)


def test_short_frames_accumulate():
    scheduler = TickScheduler(period=0.03, max_ticks_per_frame=5)
    scheduler.accrue(0.016)
    assert scheduler.consume() == 0
    scheduler.accrue(0.016)
    assert scheduler.consume() == 1


def test_backlog_is_capped_and_dropped():
    scheduler = TickScheduler(period=0.03, max_ticks_per_frame=5)
    scheduler.accrue(2.0)
    assert scheduler.consume() == 5
    assert scheduler.value == 0.0
    assert scheduler.consume() == 0


def test_negative_delta_and_clear():
    scheduler = TickScheduler(period=0.03, max_ticks_per_frame=5)
    scheduler.accrue(-1.0)
    assert scheduler.value == 0.0
    scheduler.accrue(0.02)
    scheduler.clear()
    assert scheduler.value == 0.0


@pytest.mark.parametrize("period, max_ticks", [(0.0, 5), (-0.1, 5), (0.03, 0)])
def test_invalid_arguments(period, max_ticks):
    with pytest.raises(ValueError):
        TickScheduler(period=period, max_ticks_per_frame=max_ticks)


def test_frame_timer_measures_elapsed_time(monkeypatch):
    monkeypatch.setattr("precession_sim.core.timekeeping.time.perf_counter", lambda: 10.25)
    timer = FrameTimer(last_time=10.0)
    assert timer.tick() == pytest.approx(0.25)
    assert timer.last_time == 10.25
