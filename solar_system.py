#!/usr/bin/env python3
"""
Solar System viewer application entry point and run loop.

What this module does
- Opens a resizable pygame viewport that shows the sun, the eight planets,
  their orbit guides and a starfield, and a Dear PyGui control window with a
  pause button, a theme button and one speed slider per planet.
- Builds one shared AppState and hands it explicitly to the scene builder,
  the input controller, the animation driver, the renderer and the panel.

Run loop
- Everything runs on the main thread. Each iteration: tick the FPS clock,
  dispatch pygame input, run queued Dear PyGui callbacks, advance the
  animation (skipped while paused), draw the viewport, render the panel.
- The loop ends when either window is closed, Escape is pressed, or
  OrreryApp.stop() is called; both windows are then torn down.

Viewport controls
- Left-drag (or one finger): orbit the camera around the sun.
- Wheel (or pinch): zoom.
- Hover a body: show its name and a fact.
- Space: pause/resume. T: light/dark theme. Arrow keys: orbit.

Running
1) Install: `pip install -e .`
2) Run: `solar-system` (or `python solar_system.py --help` for options)
"""

import argparse
import logging
import sys
from typing import Dict, Optional, Tuple

import numpy as np
import pygame
import dearpygui.dearpygui as dpg

from orrery.animation import AnimationDriver
from orrery.constants import FPS, KEY_ORBIT_STEP, VIEW_HEIGHT, VIEW_WIDTH
from orrery.controls import ControlPanel
from orrery.data_models import AppState, ViewState, Viewport
from orrery.input_controller import InputController, toggle_pause, toggle_theme
from orrery.renderer import PygameRenderer
from orrery.scene_builder import build_scene

logger = logging.getLogger(__name__)


def setup_logging(level):
    """Setup logging with specified level"""
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s',
        stream=sys.stdout,
    )


class OrreryApp:
    """
    Owns the windows and the run loop for one viewer session.
    """

    def __init__(self, width: int = VIEW_WIDTH, height: int = VIEW_HEIGHT, fps: int = FPS,
                 seed: Optional[int] = None, dark_mode: bool = True, scatter: bool = False):
        self.state = AppState(viewport=Viewport(width, height), view=ViewState(dark_mode=dark_mode))
        self.world = build_scene(self.state, rng=np.random.default_rng(seed), scatter=scatter)
        self.fps = fps

        self.renderer = PygameRenderer(self.state, self.world)
        self.controller = InputController(self.state, self.world, surface=self.renderer)
        self.driver = AnimationDriver(self.state, self.world)
        self.panel: Optional[ControlPanel] = None
        self.clock = None
        self.touches: Dict[int, Tuple[float, float]] = {}  # finger id -> pixel position

    def stop(self):
        self.state.running = False

    def run(self):
        pygame.init()
        self.renderer.open()
        self.clock = pygame.time.Clock()

        dpg.create_context()
        dpg.configure_app(manual_callback_management=True)
        self.panel = ControlPanel(self.state, self.world)

        logger.info("Entering run loop at up to %d FPS", self.fps)
        try:
            while self.state.running and dpg.is_dearpygui_running():
                self.clock.tick(self.fps)
                self.handle_events()
                dpg.run_callbacks(dpg.get_callback_queue())
                self.driver.step()
                self.panel.sync()
                self.renderer.draw()
                dpg.render_dearpygui_frame()
        finally:
            logger.info("Shutting down after %d animated frames", self.state.frame)
            dpg.destroy_context()
            pygame.quit()

    def handle_events(self):
        keys = pygame.key.get_pressed()
        dx = (keys[pygame.K_RIGHT] - keys[pygame.K_LEFT]) * KEY_ORBIT_STEP
        dy = (keys[pygame.K_DOWN] - keys[pygame.K_UP]) * KEY_ORBIT_STEP
        if dx or dy:
            self.controller.orbit_by(dx, dy)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()

            elif event.type == pygame.VIDEORESIZE:
                self.controller.resize(event.w, event.h)

            elif event.type == pygame.WINDOWLEAVE:
                self.controller.pointer_leave()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    toggle_pause(self.state)
                elif event.key == pygame.K_t:
                    toggle_theme(self.state, self.world.scene)
                elif event.key == pygame.K_ESCAPE:
                    self.stop()

            # Touch input also arrives as synthesized mouse events; those are
            # skipped here and handled through the finger events below.
            elif getattr(event, "touch", False):
                continue

            elif event.type == pygame.MOUSEWHEEL:
                # pygame reports scroll-up as +y; the controller expects +delta to zoom out.
                self.controller.wheel(-event.y)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.controller.pointer_down(*event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.controller.pointer_up()

            elif event.type == pygame.MOUSEMOTION:
                self.controller.pointer_move(*event.pos)

            elif event.type == pygame.FINGERDOWN:
                self.touches[event.finger_id] = self._finger_pos(event)
                self.controller.touch_start(list(self.touches.values()))

            elif event.type == pygame.FINGERMOTION:
                self.touches[event.finger_id] = self._finger_pos(event)
                self.controller.touch_move(list(self.touches.values()))

            elif event.type == pygame.FINGERUP:
                self.touches.pop(event.finger_id, None)
                self.controller.touch_end()

    def _finger_pos(self, event) -> Tuple[float, float]:
        # Finger coordinates are normalised to 0..1.
        vp = self.state.viewport
        return event.x * vp.width, event.y * vp.height


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Interactive 3D solar system viewer')
    parser.add_argument('--width', type=int, default=VIEW_WIDTH, help='Viewport width in pixels')
    parser.add_argument('--height', type=int, default=VIEW_HEIGHT, help='Viewport height in pixels')
    parser.add_argument('--fps', type=int, default=FPS, help='Frame rate cap')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for the starfield')
    parser.add_argument('--light', action='store_true', help='Start in light mode')
    parser.add_argument('--scatter', action='store_true', help='Start planets at random orbital angles')
    parser.add_argument('--quiet', action='store_true', help='Quiet mode (errors only)')
    parser.add_argument('--verbose', action='store_true', help='Verbose mode (info)')
    parser.add_argument('--debug', action='store_true', help='Debug mode (debug)')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    setup_logging(level)

    if args.width <= 0 or args.height <= 0 or args.fps <= 0:
        logger.error("Width, height and fps must be positive")
        return 2

    app = OrreryApp(width=args.width, height=args.height, fps=args.fps, seed=args.seed,
                    dark_mode=not args.light, scatter=args.scatter)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
