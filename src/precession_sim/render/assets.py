from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable

import pygame


Color = tuple[int, int, int] | tuple[int, int, int, int]


@dataclass(frozen=True)
class FontSet:
    readout: pygame.font.Font
    label: pygame.font.Font
    button: pygame.font.Font
    small: pygame.font.Font


_TEXT_SURFACE_CACHE_MAX_SIZE = 256
_TEXT_SURFACE_CACHE: OrderedDict[tuple[int, str, Color], pygame.Surface] = OrderedDict()


def get_text_surface(font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
    """Return a cached rendered surface for the given font, text and color."""

    key = (id(font), text, color)
    cached = _TEXT_SURFACE_CACHE.get(key)
    if cached is not None:
        _TEXT_SURFACE_CACHE.move_to_end(key)
        return cached
    rendered = font.render(text, True, color)
    _TEXT_SURFACE_CACHE[key] = rendered
    if len(_TEXT_SURFACE_CACHE) > _TEXT_SURFACE_CACHE_MAX_SIZE:
        _TEXT_SURFACE_CACHE.popitem(last=False)
    return rendered


def load_font(preferred_names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font:
    names = list(preferred_names)
    for name in names:
        match = pygame.font.match_font(name, bold=bold)
        if match:
            return pygame.font.Font(match, size)
    fallback = names[0] if names else None
    return pygame.font.SysFont(fallback, size, bold=bold)


def load_font_set(readout_names: Iterable[str], label_names: Iterable[str]) -> FontSet:
    readout_names = tuple(readout_names)
    label_names = tuple(label_names)
    return FontSet(
        readout=load_font(readout_names, 14),
        label=load_font(label_names, 12, bold=True),
        button=load_font(label_names, 14, bold=True),
        small=load_font(label_names, 10),
    )
