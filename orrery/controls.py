#!/usr/bin/env python3
"""
Dear PyGui control panel: pause/resume, theme switch and per-planet speed sliders.

Widget callbacks receive the shared AppState as user_data and call the plain
action functions from input_controller. The app runs Dear PyGui with manual
callback management, so callbacks execute on the loop thread.
"""
import logging

import dearpygui.dearpygui as dpg

from .bodies import PLANETS
from .constants import SPEED_SLIDER_MAX, SPEED_SLIDER_MIN, SPEED_SLIDER_STEP
from .data_models import AppState
from .input_controller import (
    pause_label,
    set_speed_multiplier,
    theme_label,
    toggle_pause,
    toggle_theme,
)
from .scene_builder import World, backdrop_for
from .utils import format_multiplier, snap

logger = logging.getLogger(__name__)

DARK_PANEL_TEXT = (230, 230, 240)
LIGHT_PANEL_TEXT = (15, 25, 50)


class ControlPanel:
    """
    Control window shown next to the pygame viewport.
    """

    def __init__(self, state: AppState, world: World):
        self.state = state
        self.world = world

        self.pause_button_id = None
        self.theme_button_id = None
        self.slider_ids = {}
        self.value_text_ids = {}
        self._themes = {}
        self._bound_dark_mode = None

        self._build_ui()

    def _build_ui(self):
        dpg.create_viewport(title="Solar System - Controls", width=380, height=420)

        with dpg.window(tag="main_window", label="Controls"):
            dpg.add_text("Animation")
            with dpg.group(horizontal=True):
                self.pause_button_id = dpg.add_button(
                    label=pause_label(self.state.view.paused), width=110,
                    callback=self._on_pause, user_data=self.state)
                self.theme_button_id = dpg.add_button(
                    label=theme_label(self.state.view.dark_mode), width=110,
                    callback=self._on_theme, user_data=(self.state, self.world))

            dpg.add_separator()
            dpg.add_text("Orbital speed")
            for body in PLANETS:
                orbit = self.state.orbits[body.id]
                with dpg.group(horizontal=True):
                    self.slider_ids[body.id] = dpg.add_slider_float(
                        label=body.name, min_value=SPEED_SLIDER_MIN, max_value=SPEED_SLIDER_MAX,
                        default_value=orbit.speed_multiplier, format="%.1f", width=200,
                        callback=self._on_speed, user_data=(self.state, body.id))
                    self.value_text_ids[body.id] = dpg.add_text(format_multiplier(orbit.speed_multiplier))

        self._themes = {True: _make_theme(True), False: _make_theme(False)}
        self._apply_panel_theme()

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # Widget callbacks
    # -----------------------

    def _on_pause(self, sender, app_data, user_data):
        dpg.configure_item(sender, label=toggle_pause(user_data))

    def _on_theme(self, sender, app_data, user_data):
        state, world = user_data
        dpg.configure_item(sender, label=toggle_theme(state, world.scene))
        self._apply_panel_theme()

    def _on_speed(self, sender, app_data, user_data):
        state, body_id = user_data
        value = snap(app_data, SPEED_SLIDER_STEP)
        dpg.set_value(sender, value)
        readout = set_speed_multiplier(state, body_id, value)
        dpg.set_value(self.value_text_ids[body_id], readout)
        logger.debug("%s speed set to %s", body_id, readout)

    # -----------------------
    # State -> widgets
    # -----------------------

    def _apply_panel_theme(self):
        dark = self.state.view.dark_mode
        if dark == self._bound_dark_mode:
            return
        dpg.bind_theme(self._themes[dark])
        dpg.set_viewport_clear_color(list(backdrop_for(dark)[0]) + [255])
        self._bound_dark_mode = dark

    def sync(self):
        """Bring labels and theme in line with state changed outside the panel (keyboard shortcuts)."""
        dpg.configure_item(self.pause_button_id, label=pause_label(self.state.view.paused))
        dpg.configure_item(self.theme_button_id, label=theme_label(self.state.view.dark_mode))
        self._apply_panel_theme()


def _make_theme(dark_mode: bool):
    """Panel colors taken from the three backdrop gradient stops."""
    top, middle, bottom = backdrop_for(dark_mode)
    text = DARK_PANEL_TEXT if dark_mode else LIGHT_PANEL_TEXT
    with dpg.theme() as theme:
        with dpg.theme_component(dpg.mvAll):
            dpg.add_theme_color(dpg.mvThemeCol_WindowBg, top, category=dpg.mvThemeCat_Core)
            dpg.add_theme_color(dpg.mvThemeCol_FrameBg, middle, category=dpg.mvThemeCat_Core)
            dpg.add_theme_color(dpg.mvThemeCol_Button, bottom, category=dpg.mvThemeCat_Core)
            dpg.add_theme_color(dpg.mvThemeCol_SliderGrab, bottom, category=dpg.mvThemeCat_Core)
            dpg.add_theme_color(dpg.mvThemeCol_Text, text, category=dpg.mvThemeCat_Core)
    return theme
