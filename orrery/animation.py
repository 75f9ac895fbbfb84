#!/usr/bin/env python3
"""
Per-frame animation of the orbits, planet spin, sun spin and starfield drift.

Increments are applied once per step() call; the run loop caps the step rate
with a fixed FPS clock.
"""
from .bodies import get_body
from .constants import PLANET_SPIN_STEP, STARFIELD_SPIN_STEP, SUN_SPIN_STEP
from .data_models import AppState
from .scene_builder import World
from .vector_utils import orbit_position


class AnimationDriver:
    def __init__(self, state: AppState, world: World):
        self.state = state
        self.world = world

    def step(self) -> bool:
        """
        Advance one frame unless paused.

        Returns True if anything moved. Drawing is the caller's job and happens
        whether or not the step ran, so camera input stays live while paused.
        """
        if self.state.view.paused:
            return False

        self.world.sun.rotation_y += SUN_SPIN_STEP

        for body_id, orbit in self.state.orbits.items():
            body = get_body(body_id)
            orbit.angle += body.angular_speed * orbit.speed_multiplier
            orbit.spin += PLANET_SPIN_STEP
            mesh = self.world.planets[body_id]
            mesh.position = orbit_position(body.distance, orbit.angle)
            mesh.rotation_y = orbit.spin

        self.world.stars.rotation_y += STARFIELD_SPIN_STEP
        self.state.frame += 1
        return True
