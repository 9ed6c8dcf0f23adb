import pytest

from precession_sim.core.trail import TrailBuffer


def test_keeps_most_recent_points_in_order():
    trail = TrailBuffer(500)
    for i in range(750):
        trail.push((float(i), float(-i)))
    points = trail.snapshot()
    assert len(trail) == 500
    assert points[0] == (250.0, -250.0)
    assert points[-1] == (749.0, -749.0)
    assert [p[0] for p in points] == [float(i) for i in range(250, 750)]


def test_below_capacity_keeps_everything():
    trail = TrailBuffer(5)
    trail.push((1, 2))
    trail.push((3, 4))
    assert trail.snapshot() == ((1.0, 2.0), (3.0, 4.0))
    assert trail.latest() == (3.0, 4.0)


def test_clear_empties_buffer():
    trail = TrailBuffer(3)
    trail.push((0.0, 0.0))
    trail.clear()
    assert len(trail) == 0
    assert trail.snapshot() == ()
    assert trail.latest() is None


def test_snapshot_is_detached_from_later_pushes():
    trail = TrailBuffer(3)
    trail.push((0.0, 0.0))
    snap = trail.snapshot()
    trail.push((1.0, 1.0))
    assert snap == ((0.0, 0.0),)
    assert list(trail) == [(0.0, 0.0), (1.0, 1.0)]


def test_capacity_must_be_positive():
    assert TrailBuffer(7).capacity == 7
    with pytest.raises(ValueError):
        TrailBuffer(0)
