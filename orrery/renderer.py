#!/usr/bin/env python3
"""
Pygame renderer for the solar system scene.

Draw order (painter's algorithm):
1.  Clear to the scene background.
2.  Starfield points, alpha-blended straight into the frame buffer.
3.  Orbit rings on a translucent overlay.
4.  Spheres sorted far to near; translucent spheres (the sun glow) are
    blended over whatever is already drawn.
5.  Hover label and HUD text on top.
"""
import logging
import textwrap
from typing import List, Optional, Tuple

import numpy as np
import pygame
from pygame import gfxdraw

from .camera import project, projected_radius
from .constants import (
    LABEL_BACKGROUND,
    LABEL_BORDER,
    LABEL_NAME_COLOR,
    LABEL_PADDING,
    LABEL_TEXT_COLOR,
    LABEL_WIDTH,
    SAFE_COORD_LIMIT,
)
from .data_models import AppState
from .scene import Sphere
from .scene_builder import World
from .utils import shade
from .vector_utils import rotate_y, vec_norm

logger = logging.getLogger(__name__)

HELP_TEXT = "Drag: orbit | Wheel/pinch: zoom | Hover: facts | Space: pause | T: theme"


class PygameRenderer:
    """
    Owns the pygame display surface and turns the World into frames.
    Also acts as the resizable render surface for the input controller.
    """

    def __init__(self, state: AppState, world: World, caption: str = "Solar System"):
        self.state = state
        self.world = world
        self.caption = caption
        self.surface: Optional[pygame.Surface] = None

    def open(self) -> None:
        pygame.display.set_caption(self.caption)
        vp = self.state.viewport
        self.surface = pygame.display.set_mode((vp.width, vp.height), pygame.RESIZABLE)
        logger.info("Render surface opened at %dx%d", vp.width, vp.height)

    def resize(self, width: int, height: int) -> None:
        self.surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)

    # ------------------------------------------------------------------

    def draw(self) -> None:
        surf = self.surface
        surf.fill(self.world.scene.background)
        self.draw_stars(surf)
        self.draw_rings(surf)
        self.draw_spheres(surf)
        if self.state.hover.visible:
            self.draw_label(surf)
        self.draw_hud(surf)
        pygame.display.flip()

    def draw_stars(self, surf: pygame.Surface) -> None:
        stars = self.world.stars
        if not stars.visible or len(stars) == 0:
            return
        pts = rotate_y(stars.vertices, stars.rotation_y) + stars.position
        xy, _, in_front = project(self.state.camera, self.state.viewport, pts)
        w, h = surf.get_size()
        xs = xy[:, 0].astype(int)
        ys = xy[:, 1].astype(int)
        keep = in_front & (xs >= 0) & (xs < w) & (ys >= 0) & (ys < h)
        if not keep.any():
            return
        pixels = pygame.surfarray.pixels3d(surf)
        xs, ys = xs[keep], ys[keep]
        a = stars.opacity
        blended = pixels[xs, ys] * (1.0 - a) + np.array(stars.color) * a
        pixels[xs, ys] = blended.astype(np.uint8)
        del pixels  # unlock the surface

    def draw_rings(self, surf: pygame.Surface) -> None:
        overlay = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        for ring in self.world.rings.values():
            if not ring.visible:
                continue
            xy, _, in_front = project(self.state.camera, self.state.viewport, ring.outline())
            rgba = (*ring.color, int(255 * ring.opacity))
            for run in _visible_runs(xy, in_front):
                if len(run) > 1:
                    pygame.draw.lines(overlay, rgba, False, run, 2)
        surf.blit(overlay, (0, 0))

    def draw_spheres(self, surf: pygame.Surface) -> None:
        spheres = [self.world.sun, self.world.glow] + list(self.world.planets.values())
        spheres = [s for s in spheres if s.visible]
        centers = np.array([s.position for s in spheres])
        xy, depth, in_front = project(self.state.camera, self.state.viewport, centers)
        # Stable sort keeps the glow after the sun at equal depth.
        order = sorted(range(len(spheres)), key=lambda i: depth[i], reverse=True)
        max_r = 2 * max(surf.get_size())
        for i in order:
            if not in_front[i]:
                continue
            center = _safe_point(xy[i])
            if center is None:
                continue
            r = max(1, int(projected_radius(self.state.camera, self.state.viewport, spheres[i].radius, depth[i])))
            if r > max_r:
                continue
            sphere = spheres[i]
            if sphere.opacity < 1.0:
                _blend_circle(surf, center, r, sphere.color, sphere.opacity)
            else:
                color = sphere.color if sphere.emissive else self.lit_color(sphere)
                gfxdraw.filled_circle(surf, center[0], center[1], r, color)
                gfxdraw.aacircle(surf, center[0], center[1], r, color)

    def lit_color(self, sphere: Sphere) -> Tuple[int, int, int]:
        """Flat shade from the ambient term plus the visible lit fraction of the disc."""
        scene = self.world.scene
        ambient = scene.ambient.intensity if scene.ambient else 0.0
        diffuse = 0.0
        to_cam = vec_norm(self.state.camera.position - sphere.position)
        for light in scene.point_lights:
            to_light = vec_norm(light.position - sphere.position)
            phase = 0.5 + 0.5 * float(np.dot(to_cam, to_light))
            diffuse += light.intensity_at(sphere.position) * phase
        factor = ambient + (1.0 - ambient) * min(1.0, diffuse)
        return shade(sphere.color, factor)

    def draw_label(self, surf: pygame.Surface) -> None:
        hover = self.state.hover
        name_font = _font(18, bold=True)
        body_font = _font(15)
        lines = textwrap.wrap(hover.fact, width=36)
        line_h = body_font.get_linesize()
        height = LABEL_PADDING * 3 + name_font.get_linesize() + line_h * len(lines)
        w, h = surf.get_size()
        x = min(hover.anchor[0], w - LABEL_WIDTH - 2)
        y = min(max(hover.anchor[1], 2), h - height - 2)
        box = pygame.Surface((LABEL_WIDTH, height), pygame.SRCALPHA)
        box.fill(LABEL_BACKGROUND)
        pygame.draw.rect(box, LABEL_BORDER, box.get_rect(), 1)
        box.blit(name_font.render(hover.name, True, LABEL_NAME_COLOR), (LABEL_PADDING, LABEL_PADDING))
        ty = LABEL_PADDING * 2 + name_font.get_linesize()
        for line in lines:
            box.blit(body_font.render(line, True, LABEL_TEXT_COLOR), (LABEL_PADDING, ty))
            ty += line_h
        surf.blit(box, (x, y))

    def draw_hud(self, surf: pygame.Surface) -> None:
        color = (200, 200, 200) if self.state.view.dark_mode else (20, 30, 60)
        draw_text(surf, HELP_TEXT, 10, 10, color)
        status = "Paused" if self.state.view.paused else "Running"
        draw_text(surf, f"[{status}]  camera distance: {self.state.camera.distance:.1f}", 10, 30, color)


_fonts = {}


def _font(size: int, bold: bool = False) -> pygame.font.Font:
    key = (size, bold)
    if key not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        _fonts[key] = pygame.font.SysFont("consolas", size, bold=bold)
    return _fonts[key]


def draw_text(surface, text, x, y, color):
    img = _font(16).render(text, True, color)
    surface.blit(img, (x, y))


def _safe_point(pt):
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def _visible_runs(xy: np.ndarray, in_front: np.ndarray) -> List[List[Tuple[int, int]]]:
    """Split a projected polyline into runs of consecutive drawable points."""
    runs: List[List[Tuple[int, int]]] = []
    current: List[Tuple[int, int]] = []
    for p, ok in zip(xy, in_front):
        sp = _safe_point(p) if ok else None
        if sp is None:
            if current:
                runs.append(current)
            current = []
        else:
            current.append(sp)
    if current:
        runs.append(current)
    return runs


def _blend_circle(surf, center, r, color, opacity):
    size = 2 * r + 2
    disc = pygame.Surface((size, size), pygame.SRCALPHA)
    rgba = (*color, int(255 * opacity))
    gfxdraw.filled_circle(disc, r + 1, r + 1, r, rgba)
    surf.blit(disc, (center[0] - r - 1, center[1] - r - 1))
