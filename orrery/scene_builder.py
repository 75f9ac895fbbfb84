#!/usr/bin/env python3
"""
One-time construction of the renderable world from the body registry.

build_scene() returns a World holding the scene graph plus direct references
to the objects the input controller and the animation driver touch every
frame, and fills AppState.orbits with one OrbitState per planet.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .bodies import PLANETS, SUN, find_by_name
from .constants import (
    AMBIENT_LIGHT_COLOR,
    AMBIENT_LIGHT_INTENSITY,
    CAMERA_START,
    DARK_BACKDROP,
    DARK_BACKGROUND,
    GLOW_OPACITY,
    GLOW_RADIUS,
    LIGHT_BACKDROP,
    LIGHT_BACKGROUND,
    ORBIT_RING_COLOR,
    ORBIT_RING_HALF_WIDTH,
    ORBIT_RING_OPACITY,
    ORBIT_RING_SEGMENTS,
    STAR_COLOR,
    STAR_COUNT,
    STAR_OPACITY,
    STARFIELD_HALF_WIDTH,
    SUN_LIGHT_COLOR,
    SUN_LIGHT_INTENSITY,
    SUN_LIGHT_RANGE,
)
from .data_models import AppState, CelestialBody, OrbitState
from .scene import AmbientLight, Points, PointLight, Ring, Scene, Sphere
from .vector_utils import orbit_position

logger = logging.getLogger(__name__)


@dataclass
class World:
    scene: Scene
    sun: Sphere
    glow: Sphere
    stars: Points
    planets: Dict[str, Sphere] = field(default_factory=dict)
    rings: Dict[str, Ring] = field(default_factory=dict)
    pickables: List[Sphere] = field(default_factory=list)

    def body_for(self, mesh: Sphere) -> CelestialBody:
        """Registry record for a hit-testable mesh, looked up by its name tag."""
        return find_by_name(mesh.name)


def background_for(dark_mode: bool):
    return DARK_BACKGROUND if dark_mode else LIGHT_BACKGROUND


def backdrop_for(dark_mode: bool):
    return DARK_BACKDROP if dark_mode else LIGHT_BACKDROP


def apply_theme(scene: Scene, dark_mode: bool) -> None:
    scene.background = background_for(dark_mode)


def make_starfield(rng: np.random.Generator, count: int = STAR_COUNT,
                   half_width: float = STARFIELD_HALF_WIDTH) -> Points:
    """Points scattered uniformly inside a cube centred on the origin."""
    vertices = rng.uniform(-half_width, half_width, size=(count, 3))
    return Points(vertices=vertices, color=STAR_COLOR, size=0.5, opacity=STAR_OPACITY)


def make_sun() -> Sphere:
    return Sphere(radius=SUN.radius, color=SUN.color, emissive=SUN.emissive, name=SUN.name)


def make_glow() -> Sphere:
    return Sphere(radius=GLOW_RADIUS, color=SUN.color, opacity=GLOW_OPACITY, emissive=SUN.color)


def make_planet(body: CelestialBody, angle: float = 0.0) -> Sphere:
    mesh = Sphere(radius=body.radius, color=body.color, name=body.name)
    mesh.position = orbit_position(body.distance, angle)
    return mesh


def make_orbit_ring(body: CelestialBody) -> Ring:
    return Ring(
        inner_radius=body.distance - ORBIT_RING_HALF_WIDTH,
        outer_radius=body.distance + ORBIT_RING_HALF_WIDTH,
        segments=ORBIT_RING_SEGMENTS,
        color=ORBIT_RING_COLOR,
        opacity=ORBIT_RING_OPACITY,
    )


def build_scene(state: AppState, rng: Optional[np.random.Generator] = None, scatter: bool = False) -> World:
    """
    Build the scene graph and the per-planet orbit state.

    Args:
        state: shared state; its camera is reset and its orbits replaced
        rng: random source for the starfield (and starting angles when scattering)
        scatter: start each planet at a random angle instead of angle 0

    Returns:
        World with every body registered for hit-testing, sun first.
    """
    rng = rng if rng is not None else np.random.default_rng()

    scene = Scene(background=background_for(state.view.dark_mode))

    state.camera.position = np.array(CAMERA_START, dtype=float)
    state.camera.aspect = state.viewport.width / state.viewport.height

    scene.add(PointLight(color=SUN_LIGHT_COLOR, intensity=SUN_LIGHT_INTENSITY, range=SUN_LIGHT_RANGE))
    scene.add(AmbientLight(color=AMBIENT_LIGHT_COLOR, intensity=AMBIENT_LIGHT_INTENSITY))

    stars = make_starfield(rng)
    scene.add(stars)

    sun = make_sun()
    glow = make_glow()
    scene.add(sun)
    scene.add(glow)

    world = World(scene=scene, sun=sun, glow=glow, stars=stars)
    world.pickables.append(sun)

    state.orbits = {}
    for body in PLANETS:
        angle = float(rng.uniform(0.0, 2.0 * math.pi)) if scatter else 0.0
        mesh = make_planet(body, angle)
        ring = make_orbit_ring(body)
        scene.add(ring)
        scene.add(mesh)
        world.planets[body.id] = mesh
        world.rings[body.id] = ring
        world.pickables.append(mesh)
        state.orbits[body.id] = OrbitState(body_id=body.id, angle=angle)

    logger.info("Scene built: %d stars, %d planets, %d pickable bodies",
                len(stars), len(world.planets), len(world.pickables))
    return world
