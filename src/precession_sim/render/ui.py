from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

from ..core.config import SliderSpec
from .assets import Color, get_text_surface


@dataclass(frozen=True)
class WidgetVisualStyle:
    base_color: Color
    hover_color: Color
    text_color: tuple[int, int, int]
    accent_color: tuple[int, int, int]
    radius: int
    border_color: Color | None = None
    border_width: int = 0


def _draw_box(
    surface: pygame.Surface,
    rect: pygame.Rect,
    style: WidgetVisualStyle,
    hovered: bool,
) -> None:
    color = style.hover_color if hovered else style.base_color
    pygame.draw.rect(surface, color, rect, border_radius=style.radius)
    if style.border_color is not None and style.border_width > 0:
        pygame.draw.rect(
            surface,
            style.border_color,
            rect,
            style.border_width,
            border_radius=style.radius,
        )


class Button:
    """Simple rectangular button with hover feedback and callbacks."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        callback: Callable[[], None],
        text_getter: Callable[[], str] | None = None,
        *,
        style: WidgetVisualStyle,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self._text = text
        self._callback = callback
        self._text_getter = text_getter
        self._style = style

    def get_text(self) -> str:
        if self._text_getter is not None:
            return self._text_getter()
        return self._text

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        mouse_pos: tuple[int, int],
    ) -> None:
        _draw_box(surface, self.rect, self._style, self.rect.collidepoint(mouse_pos))
        text_surf = get_text_surface(font, self.get_text(), self._style.text_color)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


class Slider:
    """Horizontal slider quantized to ``spec.step``; reports changes through ``on_change``."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        spec: SliderSpec,
        value: float,
        on_change: Callable[[float], None],
        *,
        style: WidgetVisualStyle,
        track_height: int = 6,
        knob_radius: int = 8,
    ) -> None:
        if spec.maximum <= spec.minimum:
            raise ValueError("Slider range must be non-empty")
        self.rect = pygame.Rect(rect)
        self.spec = spec
        self._on_change = on_change
        self._style = style
        self._track_height = track_height
        self._knob_radius = knob_radius
        self._dragging = False
        self.value = self.quantize(value)

    @property
    def dragging(self) -> bool:
        return self._dragging

    def quantize(self, value: float) -> float:
        spec = self.spec
        clamped = max(spec.minimum, min(spec.maximum, float(value)))
        steps = round((clamped - spec.minimum) / spec.step)
        quantized = spec.minimum + steps * spec.step
        decimals = max(0, -int(math.floor(math.log10(spec.step))))
        return round(min(spec.maximum, quantized), decimals)

    def value_from_x(self, x: float) -> float:
        left = self.rect.left + self._knob_radius
        right = self.rect.right - self._knob_radius
        span = max(1, right - left)
        fraction = max(0.0, min(1.0, (x - left) / span))
        return self.quantize(self.spec.minimum + fraction * (self.spec.maximum - self.spec.minimum))

    def x_for_value(self, value: float) -> int:
        left = self.rect.left + self._knob_radius
        right = self.rect.right - self._knob_radius
        fraction = (value - self.spec.minimum) / (self.spec.maximum - self.spec.minimum)
        return int(round(left + fraction * (right - left)))

    def knob_x(self) -> int:
        return self.x_for_value(self.value)

    def set_value(self, value: float) -> None:
        """Move the knob without notifying listeners."""

        self.value = self.quantize(value)

    def _update_from_x(self, x: float) -> None:
        new_value = self.value_from_x(x)
        if new_value != self.value:
            self.value = new_value
            self._on_change(new_value)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._dragging = True
                self._update_from_x(event.pos[0])
                return True
        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self._update_from_x(event.pos[0])
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._dragging:
            self._dragging = False
            return True
        return False

    def draw(self, surface: pygame.Surface, mouse_pos: tuple[int, int]) -> None:
        track = pygame.Rect(0, 0, self.rect.width - 2 * self._knob_radius, self._track_height)
        track.center = self.rect.center
        pygame.draw.rect(surface, self._style.base_color, track, border_radius=self._track_height // 2)
        filled = track.copy()
        filled.width = max(0, self.knob_x() - track.left)
        pygame.draw.rect(surface, self._style.accent_color, filled, border_radius=self._track_height // 2)
        hovered = self._dragging or self.rect.collidepoint(mouse_pos)
        knob_color = self._style.hover_color if hovered else self._style.text_color
        pygame.draw.circle(surface, knob_color, (self.knob_x(), self.rect.centery), self._knob_radius)


class Checkbox:
    def __init__(
        self,
        rect: tuple[int, int, int, int],
        label: str,
        checked: bool,
        on_toggle: Callable[[bool], None],
        *,
        style: WidgetVisualStyle,
        box_size: int = 18,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.label = label
        self.checked = checked
        self._on_toggle = on_toggle
        self._style = style
        self._box_size = box_size

    def set_checked(self, checked: bool) -> None:
        self.checked = bool(checked)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.checked = not self.checked
                self._on_toggle(self.checked)
                return True
        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, mouse_pos: tuple[int, int]) -> None:
        box = pygame.Rect(0, 0, self._box_size, self._box_size)
        box.midleft = (self.rect.left + 6, self.rect.centery)
        _draw_box(surface, box, self._style, self.rect.collidepoint(mouse_pos))
        if self.checked:
            inset = box.inflate(-8, -8)
            pygame.draw.rect(surface, self._style.accent_color, inset, border_radius=2)
        text_surf = get_text_surface(font, self.label, self._style.text_color)
        text_rect = text_surf.get_rect(midleft=(box.right + 8, self.rect.centery))
        surface.blit(text_surf, text_rect)


class Dropdown:
    """Single-choice selector whose option list opens above the control."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        options: Sequence[str],
        selected: str,
        on_select: Callable[[str], None],
        *,
        style: WidgetVisualStyle,
    ) -> None:
        if not options:
            raise ValueError("options must not be empty")
        self.rect = pygame.Rect(rect)
        self.options = list(options)
        self.selected = selected if selected in self.options else self.options[0]
        self._on_select = on_select
        self._style = style
        self.is_open = False

    def option_rects(self) -> list[pygame.Rect]:
        height = self.rect.height
        rects = []
        for idx in range(len(self.options)):
            top = self.rect.top - (len(self.options) - idx) * height
            rects.append(pygame.Rect(self.rect.left, top, self.rect.width, height))
        return rects

    def select(self, name: str) -> None:
        if name in self.options:
            self.selected = name

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        if self.is_open:
            for name, rect in zip(self.options, self.option_rects()):
                if rect.collidepoint(event.pos):
                    self.selected = name
                    self.is_open = False
                    self._on_select(name)
                    return True
            self.is_open = False
            return self.rect.collidepoint(event.pos)
        if self.rect.collidepoint(event.pos):
            self.is_open = True
            return True
        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, mouse_pos: tuple[int, int]) -> None:
        _draw_box(surface, self.rect, self._style, self.rect.collidepoint(mouse_pos))
        text_surf = get_text_surface(font, self.selected, self._style.text_color)
        surface.blit(text_surf, text_surf.get_rect(midleft=(self.rect.left + 10, self.rect.centery)))
        arrow_x = self.rect.right - 16
        arrow_y = self.rect.centery
        pygame.draw.polygon(
            surface,
            self._style.accent_color,
            [(arrow_x - 5, arrow_y + 3), (arrow_x + 5, arrow_y + 3), (arrow_x, arrow_y - 4)],
        )

    def draw_options(self, surface: pygame.Surface, font: pygame.font.Font, mouse_pos: tuple[int, int]) -> None:
        """Draw the open option list; called last so it overlaps other widgets."""

        if not self.is_open:
            return
        for name, rect in zip(self.options, self.option_rects()):
            hovered = rect.collidepoint(mouse_pos) or name == self.selected
            _draw_box(surface, rect, self._style, hovered)
            text_surf = get_text_surface(font, name, self._style.text_color)
            surface.blit(text_surf, text_surf.get_rect(midleft=(rect.left + 10, rect.centery)))


__all__ = ["Button", "Checkbox", "Dropdown", "Slider", "WidgetVisualStyle"]
