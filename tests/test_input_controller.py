import math

import numpy as np
import pytest

from orrery.bodies import SUN, UnknownBodyError
from orrery.camera import project_point
from orrery.constants import MAX_CAMERA_DISTANCE, MIN_CAMERA_DISTANCE, ORBIT_RADIUS, SPEED_SLIDER_STEP
from orrery.input_controller import (
    InputController,
    set_speed_multiplier,
    toggle_pause,
    toggle_theme,
)
from orrery.utils import snap
from orrery.vector_utils import spherical_position


@pytest.fixture
def controller(state, world, surface):
    return InputController(state, world, surface)


# -- drag-to-orbit -----------------------------------------------------------

def test_drag_accumulates_yaw_and_places_camera_on_sphere(controller, state):
    controller.pointer_down(100, 100)
    controller.pointer_move(150, 100)
    assert state.camera.yaw == pytest.approx(0.5)
    assert state.camera.pitch == pytest.approx(0.0)
    assert np.allclose(state.camera.position, spherical_position(ORBIT_RADIUS, 0.5, 0.0))
    assert state.camera.distance == pytest.approx(ORBIT_RADIUS)


def test_move_without_button_does_not_orbit(controller, state):
    before = state.camera.position.copy()
    controller.pointer_move(300, 300)
    assert np.array_equal(state.camera.position, before)


def test_pointer_up_stops_orbit(controller, state):
    controller.pointer_down(0, 0)
    controller.pointer_move(10, 0)
    controller.pointer_up()
    yaw = state.camera.yaw
    controller.pointer_move(200, 0)
    assert state.camera.yaw == yaw


def test_pitch_never_leaves_limits(controller, state):
    controller.pointer_down(500, 500)
    for i in range(1, 50):
        controller.pointer_move(500, 500 + i * 40)
        assert -math.pi / 2 <= state.camera.pitch <= math.pi / 2
    assert state.camera.pitch == pytest.approx(math.pi / 2)
    for i in range(1, 100):
        controller.pointer_move(500, 2460 - i * 40)
        assert -math.pi / 2 <= state.camera.pitch <= math.pi / 2
    assert state.camera.pitch == pytest.approx(-math.pi / 2)


def test_single_touch_drag_orbits(controller, state):
    controller.touch_start([(10.0, 10.0)])
    controller.touch_move([(10.0, 30.0)])
    assert state.camera.pitch == pytest.approx(0.2)
    controller.touch_end()
    controller.touch_move([(10.0, 90.0)])
    assert state.camera.pitch == pytest.approx(0.2)


# -- hover -------------------------------------------------------------------

def test_hover_over_sun_shows_its_fact(controller, state):
    body = controller.hover(550, 400)
    assert body is SUN
    assert state.hover.visible
    assert state.hover.name == "Sun"
    assert state.hover.fact == SUN.fact
    assert state.hover.anchor == (560, 390)


def test_hover_over_empty_space_hides_label(controller, state):
    controller.hover(550, 400)
    controller.pointer_move(0, 0)
    assert not state.hover.visible
    assert state.hover.body_id is None


def test_hover_over_planet(controller, state, world):
    x, y = project_point(state.camera, state.viewport, world.planets["earth"].position)
    controller.pointer_move(x, y)
    assert state.hover.visible
    assert state.hover.name == "Earth"


def test_hover_runs_while_dragging(controller, state):
    controller.pointer_down(540, 400)
    controller.pointer_move(550, 400)
    assert state.camera.yaw != 0.0
    assert state.hover.visible


def test_camera_inside_planet_does_not_hover_it(controller, state, world):
    earth = world.planets["earth"].position
    state.camera.position = earth + np.array([0.5, 0.0, 0.0])
    body = controller.hover(550, 400)
    assert body is not None
    assert body.id == "venus"
    controller.hover(0, 0)
    assert state.hover.body_id != "earth"


def test_pointer_leave_hides_label(controller, state):
    controller.hover(550, 400)
    controller.pointer_leave()
    assert not state.hover.visible


# -- zoom --------------------------------------------------------------------

def test_wheel_scales_camera_distance(controller, state):
    start = state.camera.distance
    controller.wheel(1)
    assert state.camera.distance == pytest.approx(start * 1.1)
    controller.wheel(-1)
    assert state.camera.distance == pytest.approx(start * 1.1 * 0.9)


def test_wheel_applies_one_step_per_tick(controller, state):
    start = state.camera.distance
    controller.wheel(3)
    assert state.camera.distance == pytest.approx(start * 1.1 ** 3)
    controller.wheel(-2)
    assert state.camera.distance == pytest.approx(start * 1.1 ** 3 * 0.9 ** 2)


def test_fractional_wheel_delta_is_one_tick(controller, state):
    start = state.camera.distance
    controller.wheel(0.25)
    assert state.camera.distance == pytest.approx(start * 1.1)


def test_wheel_keeps_view_direction(controller, state):
    direction = state.camera.position / state.camera.distance
    controller.wheel(-1)
    assert np.allclose(state.camera.position / state.camera.distance, direction)


def test_zoom_is_bounded(controller, state):
    for _ in range(200):
        controller.wheel(-1)
    assert state.camera.distance == pytest.approx(MIN_CAMERA_DISTANCE)
    for _ in range(200):
        controller.wheel(1)
    assert state.camera.distance == pytest.approx(MAX_CAMERA_DISTANCE)


def test_pinch_zooms_by_distance_ratio(controller, state):
    start = state.camera.distance
    controller.touch_start([(0.0, 0.0), (100.0, 0.0)])
    controller.touch_move([(0.0, 0.0), (200.0, 0.0)])
    assert state.camera.distance == pytest.approx(start * 0.5)


def test_pinch_from_zero_distance_does_not_zoom(controller, state):
    start = state.camera.distance
    controller.touch_start([(50.0, 50.0), (50.0, 50.0)])
    controller.touch_move([(0.0, 50.0), (100.0, 50.0)])
    assert state.camera.distance == pytest.approx(start)
    controller.touch_move([(0.0, 50.0), (50.0, 50.0)])
    assert state.camera.distance == pytest.approx(start * 2.0)


# -- toggles and sliders -----------------------------------------------------

def test_pause_toggle_labels(state):
    assert toggle_pause(state) == "Resume"
    assert state.view.paused
    assert toggle_pause(state) == "Pause"
    assert not state.view.paused


def test_theme_toggle_round_trip(state, world):
    original = world.scene.background
    assert toggle_theme(state, world.scene) == "Dark Mode"
    assert not state.view.dark_mode
    assert world.scene.background != original
    assert toggle_theme(state, world.scene) == "Light Mode"
    assert state.view.dark_mode
    assert world.scene.background == original


def test_speed_slider_sets_multiplier(state, world):
    assert set_speed_multiplier(state, "mars", "2.5") == "2.5x"
    assert state.orbits["mars"].speed_multiplier == 2.5
    assert set_speed_multiplier(state, "venus", 0.0) == "0.0x"
    assert state.orbits["venus"].speed_multiplier == 0.0


def test_speed_slider_ignores_garbage(state, world):
    set_speed_multiplier(state, "earth", 3.0)
    assert set_speed_multiplier(state, "earth", "fast") == "3.0x"
    assert state.orbits["earth"].speed_multiplier == 3.0


def test_slider_values_snap_to_tenths():
    assert snap(2.3456, SPEED_SLIDER_STEP) == 2.3
    assert snap(2.36, SPEED_SLIDER_STEP) == 2.4
    assert snap(5.0, SPEED_SLIDER_STEP) == 5.0
    assert snap(0.04, SPEED_SLIDER_STEP) == 0.0


def test_speed_slider_unknown_planet(state, world):
    with pytest.raises(UnknownBodyError):
        set_speed_multiplier(state, "pluto", 1.0)


# -- resize ------------------------------------------------------------------

def test_resize_updates_aspect_and_surface(controller, state, surface):
    controller.resize(800, 600)
    assert state.camera.aspect == pytest.approx(800 / 600)
    controller.resize(1920, 1080)
    assert state.camera.aspect == pytest.approx(1920 / 1080)
    assert surface.size == (1920, 1080)
    assert (state.viewport.width, state.viewport.height) == (1920, 1080)


def test_hover_uses_resized_viewport(controller, state):
    controller.resize(1920, 1080)
    assert controller.hover(960, 540) is SUN


@pytest.mark.parametrize("size", [(800, 0), (0, 600), (-1, -1)])
def test_resize_to_empty_area_is_ignored(controller, state, surface, size):
    aspect = state.camera.aspect
    controller.resize(*size)
    assert state.camera.aspect == aspect
    assert (state.viewport.width, state.viewport.height) == (1100, 800)
    assert surface.size == (1100, 800)
