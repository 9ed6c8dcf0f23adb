"""
Apsidal Precession Simulator
============================

Interactive visualization of an elliptical orbit whose apsidal line slowly
rotates under a handful of configurable precession effects.

Keys: SPACE start/stop, R reset, 1-4 presets, L toggle run recording,
ESC quit.
"""
from __future__ import annotations

import pygame
from pygame.locals import DOUBLEBUF

from .core.config import CONTROL_CFG, RENDER_CFG, SIM_CFG
from .core.inputs import InputEvent, Reset, SelectPreset, ToggleRunning
from .core.logging_utils import RunRecorder
from .core.model import SimulationState
from .core.timekeeping import FrameTimer, TickScheduler
from .data.presets import PRESET_DISPLAY_ORDER
from .render.assets import load_font_set
from .render.controls import ControlPanel
from .render.draw import draw_scene

PRESET_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
}


def _set_display_mode_with_vsync(size: tuple[int, int], flags: int = 0) -> pygame.Surface:
    """Create the display surface with double buffering and vsync when available."""
    flags |= DOUBLEBUF
    try:
        return pygame.display.set_mode(size, flags, vsync=1)
    except pygame.error as err:
        try:
            return pygame.display.set_mode(size, flags)
        except pygame.error:
            raise err


def main() -> None:
    pygame.init()
    pygame.display.set_caption("Apsidal Precession Simulation")

    screen = _set_display_mode_with_vsync((RENDER_CFG.width, RENDER_CFG.height))
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    fonts = load_font_set(RENDER_CFG.readout_font_names, RENDER_CFG.label_font_names)
    clock = pygame.time.Clock()

    display_rect = pygame.Rect(RENDER_CFG.display_rect)
    state = SimulationState.create(display_rect.center, SIM_CFG)
    scheduler = TickScheduler(SIM_CFG.tick_period, SIM_CFG.max_ticks_per_frame)
    timer = FrameTimer()

    recorder: RunRecorder | None = None

    def start_recording() -> None:
        nonlocal recorder
        try:
            recorder = RunRecorder()
        except OSError as err:
            print(f"Could not start run recording: {err}")
            recorder = None
            return
        recorder.write_meta(state, {"preset": panel.preset_selector.selected})
        print(f"Recording run to {recorder.run_dir}")

    def stop_recording() -> None:
        nonlocal recorder
        if recorder is not None:
            recorder.close()
            print(f"Saved run {recorder.run_id}")
            recorder = None

    def toggle_recording() -> None:
        if recorder is None:
            start_recording()
        else:
            stop_recording()

    def dispatch(event: InputEvent) -> None:
        state.apply_input(event)
        if recorder is not None:
            recorder.log_input(event, state)
        if isinstance(event, SelectPreset):
            panel.select_preset(event.name)
        panel.sync(state.snapshot())

    panel = ControlPanel(
        RENDER_CFG.control_rect,
        state.snapshot(),
        dispatch,
        render_cfg=RENDER_CFG,
        control_cfg=CONTROL_CFG,
    )

    def advance_ticks(count: int) -> None:
        for _ in range(count):
            orbits_before = state.completed_orbits
            state.tick()
            if recorder is None:
                continue
            recorder.log_tick(state)
            if state.completed_orbits > orbits_before:
                recorder.log_event(
                    state.tick_count,
                    "periapsis",
                    {"orbit": state.completed_orbits, "precession_angle": state.precession_angle},
                )

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        dispatch(ToggleRunning())
                    elif event.key == pygame.K_r:
                        dispatch(Reset())
                    elif event.key == pygame.K_l:
                        toggle_recording()
                    elif event.key in PRESET_KEYS:
                        dispatch(SelectPreset(PRESET_DISPLAY_ORDER[PRESET_KEYS[event.key]]))
                else:
                    panel.handle_event(event)

            # --- Simulation ticks ---
            frame_dt = timer.tick()
            if state.is_running:
                scheduler.accrue(frame_dt)
                advance_ticks(scheduler.consume())
            else:
                scheduler.clear()

            # --- Render ---
            snapshot = state.snapshot()
            screen.fill(RENDER_CFG.window_background_color)
            draw_scene(
                screen,
                overlay,
                display_rect,
                snapshot,
                fonts,
                render_cfg=RENDER_CFG,
                recording=recorder is not None,
            )
            panel.draw(screen, fonts, pygame.mouse.get_pos())
            pygame.display.flip()
            clock.tick(RENDER_CFG.fps_cap)
    finally:
        stop_recording()
        pygame.quit()


if __name__ == "__main__":
    main()
