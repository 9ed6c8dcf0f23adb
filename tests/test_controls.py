import pygame
import pytest

from precession_sim.core.config import CONTROL_CFG, RENDER_CFG
from precession_sim.core.inputs import Effect, Parameter, Reset, SelectPreset, SetParameter, ToggleEffect, ToggleRunning
from precession_sim.core.model import SimulationState
from precession_sim.render.controls import ControlPanel
from precession_sim.render.draw import readout_lines
from precession_sim.render.ui import Slider, WidgetVisualStyle

STYLE = WidgetVisualStyle(
    base_color=(60, 60, 80),
    hover_color=(80, 80, 110),
    text_color=(255, 255, 255),
    accent_color=(0, 200, 255),
    radius=4,
)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def release(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=pos)


def make_slider(changes, value=0.6):
    return Slider((0, 0, 108, 24), CONTROL_CFG.eccentricity, value, changes.append, style=STYLE, knob_radius=8)


def test_slider_maps_track_to_range():
    slider = make_slider([])
    assert slider.value_from_x(8) == 0.0
    assert slider.value_from_x(100) == 0.9
    assert slider.value_from_x(54) == pytest.approx(0.45)
    assert slider.value_from_x(-50) == 0.0
    assert slider.value_from_x(500) == 0.9


def test_slider_quantizes_to_step():
    slider = make_slider([])
    assert slider.quantize(0.456) == pytest.approx(0.46)
    assert slider.quantize(1.5) == 0.9
    assert slider.knob_x() == slider.x_for_value(slider.value)


def test_slider_drag_reports_changes_only():
    changes = []
    slider = make_slider(changes)
    assert slider.handle_event(click((100, 12)))
    assert slider.dragging
    assert changes == [0.9]
    assert slider.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(101, 12), rel=(1, 0), buttons=(1, 0, 0)))
    assert changes == [0.9]
    assert slider.handle_event(release((101, 12)))
    assert not slider.dragging


def test_slider_set_value_is_silent():
    changes = []
    slider = make_slider(changes)
    slider.set_value(0.2)
    assert slider.value == 0.2
    assert changes == []


@pytest.fixture
def panel_and_events():
    state = SimulationState.create((480.0, 340.0))
    events = []
    panel = ControlPanel(RENDER_CFG.control_rect, state.snapshot(), events.append)
    return state, panel, events


def test_buttons_emit_run_and_reset(panel_and_events):
    _, panel, events = panel_and_events
    assert panel.handle_event(click(panel.start_stop_button.rect.center))
    assert panel.handle_event(click(panel.reset_button.rect.center))
    assert events == [ToggleRunning(), Reset()]


def test_checkbox_emits_effect_toggle(panel_and_events):
    _, panel, events = panel_and_events
    panel.handle_event(click(panel.checkboxes[Effect.THIRD_BODY].rect.center))
    panel.handle_event(click(panel.checkboxes[Effect.RELATIVITY].rect.center))
    assert events == [ToggleEffect(Effect.THIRD_BODY, True), ToggleEffect(Effect.RELATIVITY, False)]


def test_slider_emits_parameter(panel_and_events):
    _, panel, events = panel_and_events
    slider = panel.sliders[Parameter.ECCENTRICITY]
    panel.handle_event(click((slider.rect.right - 1, slider.rect.centery)))
    panel.handle_event(release((slider.rect.right - 1, slider.rect.centery)))
    assert events == [SetParameter(Parameter.ECCENTRICITY, 0.9)]


def test_preset_selector_opens_and_selects(panel_and_events):
    _, panel, events = panel_and_events
    selector = panel.preset_selector
    assert panel.handle_event(click(selector.rect.center))
    assert selector.is_open
    assert panel.handle_event(click(selector.option_rects()[2].center))
    assert not selector.is_open
    assert selector.selected == "Binary Star"
    assert events == [SelectPreset("Binary Star")]


def test_sync_moves_widgets_to_state(panel_and_events):
    state, panel, _ = panel_and_events
    state.apply_preset("Binary Star")
    state.set_show_third_body(True)
    panel.sync(state.snapshot())
    assert panel.sliders[Parameter.ECCENTRICITY].value == 0.8
    assert panel.sliders[Parameter.BASE_RATE].value == 10.0
    assert panel.sliders[Parameter.RELATIVISTIC_FACTOR].value == 8.0
    assert panel.checkboxes[Effect.THIRD_BODY].checked


def test_readout_lines_for_defaults():
    snapshot = SimulationState.create((0.0, 0.0)).snapshot()
    assert readout_lines(snapshot) == [
        "Eccentricity: 0.60",
        "Total Precession: 0.65°/orbit",
        "Current Angle: 0.0°",
        "Relativity Effect: 0.10",
        "Oblateness Effect: 0.05",
        "Third Body Effect: 0.00",
    ]
