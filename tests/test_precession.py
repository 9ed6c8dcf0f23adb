import pytest

from precession_sim.core.config import SIM_CFG
from precession_sim.core.model import SimulationState
from precession_sim.core.precession import advance, precession_increment, total_precession_rate


def make_state(**overrides):
    state = SimulationState.create((0.0, 0.0))
    state.base_precession_rate = 2.0
    state.relativistic_factor = 3.0
    state.oblateness_factor = 4.0
    state.third_body_influence = 6.0
    state.show_relativity = False
    state.show_oblateness = False
    state.show_third_body = False
    for key, value in overrides.items():
        setattr(state, key, value)
    return state


def test_only_base_rate_when_all_effects_off():
    assert precession_increment(make_state()) == pytest.approx(2.0 / 100)


@pytest.mark.parametrize(
    "toggle, contribution",
    [
        ("show_relativity", 3.0 / 500),
        ("show_oblateness", 4.0 / 400),
        ("show_third_body", 6.0 / 300),
    ],
)
def test_each_effect_adds_its_scaled_factor(toggle, contribution):
    off = precession_increment(make_state())
    on = precession_increment(make_state(**{toggle: True}))
    assert on - off == pytest.approx(contribution)


def test_all_effects_sum():
    state = make_state(show_relativity=True, show_oblateness=True, show_third_body=True)
    expected = 2.0 / 100 + 3.0 / 500 + 4.0 / 400 + 6.0 / 300
    assert precession_increment(state) == pytest.approx(expected)


def test_advance_is_noop_while_stopped():
    state = make_state(is_running=False)
    advance(state)
    assert state.orbital_angle == 0.0
    assert state.precession_angle == 0.0


def test_advance_moves_both_angles():
    state = make_state(is_running=True, show_relativity=True)
    advance(state, dt_ticks=3)
    assert state.orbital_angle == pytest.approx(3 * SIM_CFG.orbital_step)
    assert state.precession_angle == pytest.approx(3 * (2.0 / 100 + 3.0 / 500))


def test_advance_ignores_non_positive_tick_counts():
    state = make_state(is_running=True)
    advance(state, dt_ticks=0)
    assert state.orbital_angle == 0.0


def test_total_rate_readout_sums_enabled_raw_factors():
    assert total_precession_rate(make_state()) == pytest.approx(2.0)
    state = make_state(show_relativity=True, show_third_body=True)
    assert total_precession_rate(state) == pytest.approx(2.0 + 3.0 + 6.0)
