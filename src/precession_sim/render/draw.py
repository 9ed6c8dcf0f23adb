from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

import pygame

from ..core.geometry import Point2D, apsides, orbit_outline, third_body_position
from ..core.model import SceneSnapshot
from .assets import Color, FontSet, get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from ..core.config import RenderCfg


def _to_pixel(point: Point2D) -> tuple[int, int]:
    return int(round(point[0])), int(round(point[1]))


def draw_display_background(surface: pygame.Surface, rect: pygame.Rect, *, render_cfg: RenderCfg) -> None:
    pygame.draw.rect(surface, render_cfg.display_background_color, rect)


def draw_display_border(surface: pygame.Surface, rect: pygame.Rect, *, render_cfg: RenderCfg) -> None:
    pygame.draw.rect(surface, render_cfg.display_border_color, rect, 1)
    pygame.draw.rect(surface, render_cfg.display_inner_border_color, rect.inflate(-2, -2), 1)


def draw_polar_grid(
    surface: pygame.Surface,
    rect: pygame.Rect,
    center: Point2D,
    *,
    render_cfg: RenderCfg,
) -> None:
    cx, cy = _to_pixel(center)
    pygame.draw.line(surface, render_cfg.crosshair_color, (cx, rect.top), (cx, rect.bottom))
    pygame.draw.line(surface, render_cfg.crosshair_color, (rect.left, cy), (rect.right, cy))
    max_radius = min(rect.width, rect.height) // 2
    spacing = render_cfg.polar_grid_spacing
    if spacing <= 0:
        return
    for radius in range(spacing, max_radius, spacing):
        pygame.draw.circle(surface, render_cfg.polar_grid_color, (cx, cy), radius, 1)


def draw_orbit_line(
    surface: pygame.Surface,
    color: Color,
    points: Sequence[tuple[float, float]],
    width: int,
    *,
    closed: bool = False,
) -> None:
    if len(points) < 2:
        return
    if width <= 1:
        pygame.draw.aalines(surface, color, closed, points)
    else:
        pygame.draw.lines(surface, color, closed, points, width)
        pygame.draw.aalines(surface, color, closed, points)


def draw_orbit_outline(surface: pygame.Surface, snapshot: SceneSnapshot, *, render_cfg: RenderCfg) -> None:
    outline = orbit_outline(
        snapshot.center,
        snapshot.semi_major_axis,
        snapshot.eccentricity,
        snapshot.precession_angle,
        render_cfg.orbit_outline_samples,
    )
    points = [(float(x), float(y)) for x, y in outline]
    draw_orbit_line(surface, render_cfg.orbit_color, points, 1, closed=True)


def draw_central_body(surface: pygame.Surface, snapshot: SceneSnapshot, *, render_cfg: RenderCfg) -> None:
    center = _to_pixel(snapshot.center)
    pygame.draw.circle(surface, render_cfg.star_color, center, render_cfg.star_radius)
    if not snapshot.show_oblateness:
        return
    # the bulge is aligned with the apsidal line, so it turns with the orbit
    width = max(2, render_cfg.oblate_base_size + int(snapshot.oblateness_factor * render_cfg.oblate_width_gain))
    height = max(2, render_cfg.oblate_base_size - int(snapshot.oblateness_factor * render_cfg.oblate_height_gain))
    halo = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.ellipse(halo, render_cfg.oblate_halo_color, halo.get_rect())
    rotated = pygame.transform.rotate(halo, -math.degrees(snapshot.precession_angle))
    surface.blit(rotated, rotated.get_rect(center=center))


def draw_apsides(surface: pygame.Surface, snapshot: SceneSnapshot, *, render_cfg: RenderCfg) -> None:
    periapsis, apoapsis = apsides(
        snapshot.center,
        snapshot.semi_major_axis,
        snapshot.eccentricity,
        snapshot.precession_angle,
    )
    peri_px = _to_pixel(periapsis)
    apo_px = _to_pixel(apoapsis)
    pygame.draw.line(surface, render_cfg.apsidal_line_color, peri_px, apo_px)
    pygame.draw.circle(surface, render_cfg.periapsis_color, peri_px, render_cfg.apsis_marker_radius)
    pygame.draw.circle(surface, render_cfg.apoapsis_color, apo_px, render_cfg.apsis_marker_radius)


def draw_trail(surface: pygame.Surface, points: Sequence[Point2D], *, render_cfg: RenderCfg) -> None:
    draw_orbit_line(surface, render_cfg.trail_color, list(points), 1)


def draw_body(surface: pygame.Surface, position: Point2D, *, render_cfg: RenderCfg) -> None:
    pygame.draw.circle(surface, render_cfg.body_color, _to_pixel(position), render_cfg.body_radius)


def draw_third_body(surface: pygame.Surface, snapshot: SceneSnapshot, *, render_cfg: RenderCfg) -> None:
    position = third_body_position(
        snapshot.center,
        snapshot.orbital_angle,
        render_cfg.third_body_distance,
        render_cfg.third_body_angular_ratio,
    )
    pixel = _to_pixel(position)
    pygame.draw.circle(surface, render_cfg.third_body_color, pixel, render_cfg.third_body_radius)
    pygame.draw.line(surface, render_cfg.third_body_link_color, pixel, _to_pixel(snapshot.current_position))


def readout_lines(snapshot: SceneSnapshot) -> list[str]:
    """HUD text for the parameter readouts; disabled effects read as zero."""

    relativity = snapshot.relativistic_factor if snapshot.show_relativity else 0.0
    oblateness = snapshot.oblateness_factor if snapshot.show_oblateness else 0.0
    third_body = snapshot.third_body_influence if snapshot.show_third_body else 0.0
    return [
        f"Eccentricity: {snapshot.eccentricity:.2f}",
        f"Total Precession: {snapshot.total_precession_rate:.2f}°/orbit",
        f"Current Angle: {math.degrees(snapshot.precession_angle):.1f}°",
        f"Relativity Effect: {relativity:.2f}",
        f"Oblateness Effect: {oblateness:.2f}",
        f"Third Body Effect: {third_body:.2f}",
    ]


def draw_readouts(
    surface: pygame.Surface,
    rect: pygame.Rect,
    snapshot: SceneSnapshot,
    font: pygame.font.Font,
    *,
    render_cfg: RenderCfg,
) -> None:
    line_height = font.get_linesize() + 4
    top = rect.top + 40
    for idx, text in enumerate(readout_lines(snapshot)):
        text_surf = get_text_surface(font, text, render_cfg.readout_color)
        surface.blit(text_surf, (rect.left + 20, top + idx * line_height))


def draw_status(
    surface: pygame.Surface,
    rect: pygame.Rect,
    snapshot: SceneSnapshot,
    font: pygame.font.Font,
    *,
    render_cfg: RenderCfg,
    recording: bool = False,
) -> None:
    color = render_cfg.running_color if snapshot.is_running else render_cfg.stopped_color
    dot_center = (rect.right - 25, rect.top + 25)
    pygame.draw.circle(surface, color, dot_center, 5)
    label = "RUNNING" if snapshot.is_running else "STOPPED"
    text_surf = get_text_surface(font, label, render_cfg.status_text_color)
    surface.blit(text_surf, text_surf.get_rect(midright=(dot_center[0] - 12, dot_center[1])))
    if recording:
        rec_surf = get_text_surface(font, "REC", render_cfg.recording_color)
        surface.blit(rec_surf, rec_surf.get_rect(midright=(dot_center[0] + 5, dot_center[1] + 22)))


def draw_legend(surface: pygame.Surface, rect: pygame.Rect, font: pygame.font.Font, *, render_cfg: RenderCfg) -> None:
    entries = (
        ("Periapsis", render_cfg.periapsis_color),
        ("Apoapsis", render_cfg.apoapsis_color),
        ("Third Body", render_cfg.third_body_color),
    )
    line_height = font.get_linesize() + 4
    bottom = rect.bottom - 15
    for idx, (text, color) in enumerate(reversed(entries)):
        text_surf = get_text_surface(font, text, color)
        surface.blit(text_surf, text_surf.get_rect(bottomleft=(rect.right - 120, bottom - idx * line_height)))


def draw_scene(
    surface: pygame.Surface,
    overlay: pygame.Surface,
    rect: pygame.Rect,
    snapshot: SceneSnapshot,
    fonts: FontSet,
    *,
    render_cfg: RenderCfg,
    recording: bool = False,
) -> None:
    """Draw one frame of the display panel; reads the snapshot only."""

    draw_display_background(surface, rect, render_cfg=render_cfg)
    overlay.fill((0, 0, 0, 0))
    previous_clip = overlay.get_clip()
    overlay.set_clip(rect)

    draw_polar_grid(overlay, rect, snapshot.center, render_cfg=render_cfg)
    draw_orbit_outline(overlay, snapshot, render_cfg=render_cfg)
    draw_central_body(overlay, snapshot, render_cfg=render_cfg)
    draw_apsides(overlay, snapshot, render_cfg=render_cfg)
    draw_trail(overlay, snapshot.trail_points, render_cfg=render_cfg)
    draw_body(overlay, snapshot.current_position, render_cfg=render_cfg)
    if snapshot.show_third_body:
        draw_third_body(overlay, snapshot, render_cfg=render_cfg)

    overlay.set_clip(previous_clip)
    surface.blit(overlay, (0, 0))

    draw_display_border(surface, rect, render_cfg=render_cfg)
    draw_readouts(surface, rect, snapshot, fonts.readout, render_cfg=render_cfg)
    draw_status(surface, rect, snapshot, fonts.readout, render_cfg=render_cfg, recording=recording)
    draw_legend(surface, rect, fonts.readout, render_cfg=render_cfg)
