"""Rendering helpers for the precession simulator."""

from .assets import FontSet, get_text_surface, load_font, load_font_set
from .controls import ControlPanel
from .draw import (
    draw_apsides,
    draw_body,
    draw_central_body,
    draw_orbit_line,
    draw_orbit_outline,
    draw_polar_grid,
    draw_scene,
    draw_third_body,
    draw_trail,
    readout_lines,
)
from .ui import Button, Checkbox, Dropdown, Slider, WidgetVisualStyle

__all__ = [
    "Button",
    "Checkbox",
    "ControlPanel",
    "Dropdown",
    "FontSet",
    "Slider",
    "WidgetVisualStyle",
    "draw_apsides",
    "draw_body",
    "draw_central_body",
    "draw_orbit_line",
    "draw_orbit_outline",
    "draw_polar_grid",
    "draw_scene",
    "draw_third_body",
    "draw_trail",
    "get_text_surface",
    "load_font",
    "load_font_set",
    "readout_lines",
]
