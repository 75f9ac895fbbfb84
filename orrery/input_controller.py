#!/usr/bin/env python3
"""
Input handling: camera orbit and zoom, hover facts, and the UI toggles.

Every handler runs to completion on the loop thread and mutates the shared
AppState (and the World it was built with) directly. The toggles and the
speed setter are plain functions taking the state explicitly so that the
control panel and keyboard shortcuts can subscribe to them without holding a
controller.
"""
import logging
from typing import Optional, Protocol, Sequence, Tuple

import numpy as np

from .bodies import get_body
from .camera import screen_to_ndc
from .constants import (
    LABEL_OFFSET,
    MAX_CAMERA_DISTANCE,
    MIN_CAMERA_DISTANCE,
    ORBIT_RADIUS,
    ORBIT_SENSITIVITY,
    PITCH_LIMIT,
    ZOOM_STEP,
)
from .data_models import AppState, CelestialBody
from .raycast import Raycaster
from .scene import Scene
from .scene_builder import World, apply_theme
from .utils import format_multiplier, try_float
from .vector_utils import clamp, distance_2d, spherical_position

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class RenderSurface(Protocol):
    def resize(self, width: int, height: int) -> None: ...


# ---------------------------------------------------------------------------
# UI actions
# ---------------------------------------------------------------------------

def pause_label(paused: bool) -> str:
    return "Resume" if paused else "Pause"


def theme_label(dark_mode: bool) -> str:
    return "Light Mode" if dark_mode else "Dark Mode"


def toggle_pause(state: AppState) -> str:
    """Flip the paused flag; returns the new pause button label."""
    state.view.paused = not state.view.paused
    logger.debug("Animation %s", "paused" if state.view.paused else "resumed")
    return pause_label(state.view.paused)


def toggle_theme(state: AppState, scene: Scene) -> str:
    """Flip dark mode and restyle the scene background; returns the new theme button label."""
    state.view.dark_mode = not state.view.dark_mode
    apply_theme(scene, state.view.dark_mode)
    logger.debug("Theme switched to %s", "dark" if state.view.dark_mode else "light")
    return theme_label(state.view.dark_mode)


def set_speed_multiplier(state: AppState, body_id: str, value) -> str:
    """
    Store a slider value as the planet's speed multiplier.

    Returns the readout text for the slider. Unparseable values leave the
    multiplier unchanged. Unknown planets raise UnknownBodyError.
    """
    body = get_body(body_id)
    orbit = state.orbits[body.id]
    parsed = try_float(value)
    if parsed is not None:
        orbit.speed_multiplier = parsed
    return format_multiplier(orbit.speed_multiplier)


def zoom_camera(state: AppState, factor: float) -> None:
    """Scale the camera position about the origin, keeping its distance within bounds."""
    position = state.camera.position * factor
    dist = float(np.linalg.norm(position))
    if dist == 0:
        return
    bounded = clamp(dist, MIN_CAMERA_DISTANCE, MAX_CAMERA_DISTANCE)
    state.camera.position = position * (bounded / dist)


# ---------------------------------------------------------------------------
# Pointer, touch and viewport events
# ---------------------------------------------------------------------------

class InputController:
    """
    Pointer/touch/wheel/resize handling for the render surface.

    Channel state:
    - dragging / last_pointer: drag-to-orbit (mouse or single touch)
    - last_pinch_distance: two-finger zoom
    """

    def __init__(self, state: AppState, world: World, surface: Optional[RenderSurface] = None):
        self.state = state
        self.world = world
        self.surface = surface
        self.raycaster = Raycaster()
        self.dragging = False
        self.last_pointer: Point = (0.0, 0.0)
        self.last_pinch_distance = 0.0

    # -- drag-to-orbit -----------------------------------------------------

    def orbit_by(self, dx: float, dy: float) -> None:
        """Apply a pointer delta (pixels) to yaw/pitch and re-place the camera."""
        cam = self.state.camera
        cam.yaw += dx * ORBIT_SENSITIVITY
        cam.pitch = clamp(cam.pitch + dy * ORBIT_SENSITIVITY, -PITCH_LIMIT, PITCH_LIMIT)
        cam.position = spherical_position(ORBIT_RADIUS, cam.yaw, cam.pitch)

    def pointer_down(self, x: float, y: float) -> None:
        self.dragging = True
        self.last_pointer = (x, y)

    def pointer_up(self) -> None:
        self.dragging = False

    def pointer_move(self, x: float, y: float) -> None:
        self.hover(x, y)
        if not self.dragging:
            return
        self.orbit_by(x - self.last_pointer[0], y - self.last_pointer[1])
        self.last_pointer = (x, y)

    def pointer_leave(self) -> None:
        self.state.hover.hide()

    # -- hover ---------------------------------------------------------------

    def hover(self, x: float, y: float) -> Optional[CelestialBody]:
        """Show the fact label for the body under the pointer, or hide it."""
        ndc = screen_to_ndc(self.state.viewport, x, y)
        self.raycaster.set_from_camera(ndc, self.state.camera)
        hits = self.raycaster.intersect_objects(self.world.pickables)
        if not hits:
            self.state.hover.hide()
            return None
        body = self.world.body_for(hits[0].object)
        anchor = (int(x + LABEL_OFFSET[0]), int(y + LABEL_OFFSET[1]))
        self.state.hover.show(body, anchor)
        return body

    # -- zoom ----------------------------------------------------------------

    def wheel(self, delta_y: float) -> None:
        """
        Positive delta moves the camera away (scroll down), negative moves it closer.

        Each wheel tick applies one ZOOM_STEP; fractional deltas count as one tick.
        """
        if delta_y == 0:
            return
        direction = 1 if delta_y > 0 else -1
        ticks = max(1, int(abs(delta_y)))
        zoom_camera(self.state, (1 + direction * ZOOM_STEP) ** ticks)

    # -- touch ---------------------------------------------------------------

    def touch_start(self, touches: Sequence[Point]) -> None:
        if len(touches) == 1:
            self.pointer_down(*touches[0])
        elif len(touches) == 2:
            self.last_pinch_distance = distance_2d(touches[0], touches[1])

    def touch_move(self, touches: Sequence[Point]) -> None:
        if len(touches) == 1 and self.dragging:
            x, y = touches[0]
            self.orbit_by(x - self.last_pointer[0], y - self.last_pointer[1])
            self.last_pointer = (x, y)
        elif len(touches) == 2:
            dist = distance_2d(touches[0], touches[1])
            if self.last_pinch_distance > 0:
                zoom_camera(self.state, self.last_pinch_distance / dist if dist > 0 else 1.0)
            self.last_pinch_distance = dist

    def touch_end(self) -> None:
        self.dragging = False
        self.state.hover.hide()

    # -- viewport ------------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            # minimised windows report a zero-size area
            logger.debug("Ignoring resize to %dx%d", width, height)
            return
        self.state.viewport.width = width
        self.state.viewport.height = height
        self.state.camera.aspect = width / height
        if self.surface is not None:
            self.surface.resize(width, height)
        logger.debug("Viewport resized to %dx%d", width, height)
