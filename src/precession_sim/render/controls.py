"""Control panel translating widget gestures into simulation input events."""
from __future__ import annotations

from typing import Callable

import pygame

from ..core.config import CONTROL_CFG, RENDER_CFG, ControlCfg, RenderCfg, SliderSpec
from ..core.inputs import (
    Effect,
    InputEvent,
    Parameter,
    Reset,
    SelectPreset,
    SetParameter,
    ToggleEffect,
    ToggleRunning,
)
from ..core.model import SceneSnapshot
from ..data.presets import PRESET_DISPLAY_ORDER
from .assets import FontSet, get_text_surface
from .ui import Button, Checkbox, Dropdown, Slider, WidgetVisualStyle


class ControlPanel:
    """Bottom panel: five sliders on top, toggles, presets and buttons below."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        snapshot: SceneSnapshot,
        dispatch: Callable[[InputEvent], None],
        *,
        render_cfg: RenderCfg = RENDER_CFG,
        control_cfg: ControlCfg = CONTROL_CFG,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self._dispatch = dispatch
        self._render_cfg = render_cfg
        self._control_cfg = control_cfg
        self._is_running = snapshot.is_running
        self.style = WidgetVisualStyle(
            base_color=render_cfg.widget_color,
            hover_color=render_cfg.widget_hover_color,
            text_color=render_cfg.widget_text_color,
            accent_color=render_cfg.widget_accent_color,
            radius=render_cfg.widget_radius,
            border_color=render_cfg.widget_border_color,
            border_width=1,
        )

        inner = self.rect.inflate(-20, -40)
        inner.top = self.rect.top + 28
        row_height = inner.height // 2
        self._upper_row = pygame.Rect(inner.left, inner.top, inner.width, row_height)
        self._lower_row = pygame.Rect(inner.left, inner.top + row_height, inner.width, row_height)

        slider_defs: list[tuple[SliderSpec, Parameter, float]] = [
            (control_cfg.eccentricity, Parameter.ECCENTRICITY, snapshot.eccentricity),
            (control_cfg.base_rate, Parameter.BASE_RATE, snapshot.base_precession_rate),
            (control_cfg.relativistic, Parameter.RELATIVISTIC_FACTOR, snapshot.relativistic_factor),
            (control_cfg.oblateness, Parameter.OBLATENESS_FACTOR, snapshot.oblateness_factor),
            (control_cfg.third_body, Parameter.THIRD_BODY_INFLUENCE, snapshot.third_body_influence),
        ]
        self.sliders: dict[Parameter, Slider] = {}
        for cell, (spec, parameter, value) in zip(self._cells(self._upper_row, len(slider_defs)), slider_defs):
            slider_rect = pygame.Rect(cell.left, cell.top + 22, cell.width, 24)
            self.sliders[parameter] = Slider(
                slider_rect,
                spec,
                value,
                self._slider_callback(parameter),
                style=self.style,
                track_height=control_cfg.slider_track_height,
                knob_radius=control_cfg.slider_knob_radius,
            )

        lower_cells = self._cells(self._lower_row, 6)
        checkbox_defs = [
            ("Relativity", Effect.RELATIVITY, snapshot.show_relativity),
            ("Oblateness", Effect.OBLATENESS, snapshot.show_oblateness),
            ("Third Body", Effect.THIRD_BODY, snapshot.show_third_body),
        ]
        self.checkboxes: dict[Effect, Checkbox] = {}
        for cell, (label, effect, checked) in zip(lower_cells[:3], checkbox_defs):
            box_rect = pygame.Rect(cell.left, cell.centery - 15, cell.width, 30)
            self.checkboxes[effect] = Checkbox(
                box_rect,
                label,
                checked,
                self._checkbox_callback(effect),
                style=self.style,
                box_size=control_cfg.checkbox_size,
            )

        preset_cell = lower_cells[3]
        self.preset_selector = Dropdown(
            (preset_cell.left, preset_cell.centery - 6, preset_cell.width, 30),
            PRESET_DISPLAY_ORDER,
            PRESET_DISPLAY_ORDER[0],
            lambda name: self._dispatch(SelectPreset(name)),
            style=self.style,
        )
        self._preset_label_pos = (preset_cell.centerx, preset_cell.centery - 18)

        start_cell = lower_cells[4].inflate(-8, 0)
        reset_cell = lower_cells[5].inflate(-8, 0)
        self.start_stop_button = Button(
            (start_cell.left, start_cell.centery - 20, start_cell.width, 40),
            "START/STOP",
            lambda: self._dispatch(ToggleRunning()),
            lambda: "STOP" if self._is_running else "START",
            style=self.style,
        )
        self.reset_button = Button(
            (reset_cell.left, reset_cell.centery - 20, reset_cell.width, 40),
            "RESET",
            lambda: self._dispatch(Reset()),
            style=self.style,
        )

    @staticmethod
    def _cells(row: pygame.Rect, count: int, gap: int = 10) -> list[pygame.Rect]:
        width = (row.width - gap * (count - 1)) // count
        return [
            pygame.Rect(row.left + idx * (width + gap), row.top, width, row.height)
            for idx in range(count)
        ]

    def _slider_callback(self, parameter: Parameter) -> Callable[[float], None]:
        return lambda value: self._dispatch(SetParameter(parameter, value))

    def _checkbox_callback(self, effect: Effect) -> Callable[[bool], None]:
        return lambda enabled: self._dispatch(ToggleEffect(effect, enabled))

    def sync(self, snapshot: SceneSnapshot) -> None:
        """Align widgets with the state, e.g. after a preset or keyboard shortcut."""

        self.sliders[Parameter.ECCENTRICITY].set_value(snapshot.eccentricity)
        self.sliders[Parameter.BASE_RATE].set_value(snapshot.base_precession_rate)
        self.sliders[Parameter.RELATIVISTIC_FACTOR].set_value(snapshot.relativistic_factor)
        self.sliders[Parameter.OBLATENESS_FACTOR].set_value(snapshot.oblateness_factor)
        self.sliders[Parameter.THIRD_BODY_INFLUENCE].set_value(snapshot.third_body_influence)
        self.checkboxes[Effect.RELATIVITY].set_checked(snapshot.show_relativity)
        self.checkboxes[Effect.OBLATENESS].set_checked(snapshot.show_oblateness)
        self.checkboxes[Effect.THIRD_BODY].set_checked(snapshot.show_third_body)
        self._is_running = snapshot.is_running

    def select_preset(self, name: str) -> None:
        self.preset_selector.select(name)

    def handle_event(self, event: pygame.event.Event) -> bool:
        # an open dropdown overlaps the sliders and gets first refusal
        if self.preset_selector.is_open:
            return self.preset_selector.handle_event(event)
        for slider in self.sliders.values():
            if slider.handle_event(event):
                return True
        for checkbox in self.checkboxes.values():
            if checkbox.handle_event(event):
                return True
        if self.preset_selector.handle_event(event):
            return True
        if self.start_stop_button.handle_event(event):
            return True
        return self.reset_button.handle_event(event)

    def draw(self, surface: pygame.Surface, fonts: FontSet, mouse_pos: tuple[int, int]) -> None:
        cfg = self._render_cfg
        pygame.draw.rect(surface, cfg.panel_background_color, self.rect)
        pygame.draw.rect(surface, cfg.panel_border_color, self.rect, 2)
        title = get_text_surface(fonts.label, "SIMULATION CONTROLS", cfg.label_color)
        surface.blit(title, title.get_rect(midtop=(self.rect.centerx, self.rect.top + 6)))

        for slider in self.sliders.values():
            decimals = 2 if slider.spec.step < 0.1 else 1
            text = f"{slider.spec.label}  {slider.value:.{decimals}f}"
            label = get_text_surface(fonts.label, text, cfg.label_color)
            surface.blit(label, label.get_rect(midbottom=(slider.rect.centerx, slider.rect.top - 2)))
            slider.draw(surface, mouse_pos)
            self._draw_slider_scale(surface, slider, fonts.small)

        for checkbox in self.checkboxes.values():
            checkbox.draw(surface, fonts.label, mouse_pos)

        presets_label = get_text_surface(fonts.label, "PRESETS", cfg.label_color)
        surface.blit(presets_label, presets_label.get_rect(midbottom=self._preset_label_pos))
        self.preset_selector.draw(surface, fonts.label, mouse_pos)
        self.start_stop_button.draw(surface, fonts.button, mouse_pos)
        self.reset_button.draw(surface, fonts.button, mouse_pos)
        self.preset_selector.draw_options(surface, fonts.label, mouse_pos)

    def _draw_slider_scale(self, surface: pygame.Surface, slider: Slider, font: pygame.font.Font) -> None:
        spec = slider.spec
        for idx in range(6):
            value = spec.minimum + idx * (spec.maximum - spec.minimum) / 5
            x = slider.x_for_value(value)
            tick_surf = get_text_surface(font, f"{value:g}", self._render_cfg.label_color)
            surface.blit(tick_surf, tick_surf.get_rect(midtop=(x, slider.rect.bottom + 2)))


__all__ = ["ControlPanel"]
