#!/usr/bin/env python3
"""
Data models for the Solar System viewer.

This module defines the shared state passed between the scene builder, the
input controller, the animation driver, the control panel and the renderer.

Units and usage
- Distances and radii are relative scene units; angles are radians.
- CelestialBody is immutable; everything else is mutated in place from the
  single loop thread, so no locking is involved.
- AppState is the one struct every component receives explicitly.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import numpy as np

from .constants import (
    CAMERA_FAR,
    CAMERA_FOV,
    CAMERA_NEAR,
    CAMERA_START,
    SPEED_DEFAULT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class CelestialBody:
    """
    A body from the registry.

    Fields:
    - id: lowercase key, also used to key OrbitState
    - name: display name shown in the hover label
    - radius: sphere radius (scene units)
    - distance: orbital distance from the sun (0 for the sun)
    - angular_speed: base orbital speed in radians per frame (0 for the sun)
    - color: RGB tuple used for rendering
    - fact: one-line description shown on hover
    - emissive: glow color for self-lit bodies, None for planets
    """
    id: str
    name: str
    radius: float
    distance: float
    angular_speed: float
    color: Color
    fact: str
    emissive: Optional[Color] = None

    @property
    def orbits(self) -> bool:
        return self.distance > 0.0


@dataclass
class OrbitState:
    """Mutable per-planet orbit: current angle, user speed multiplier and self spin."""
    body_id: str
    angle: float = 0.0
    speed_multiplier: float = SPEED_DEFAULT
    spin: float = 0.0


@dataclass
class CameraState:
    """Perspective camera that always looks at the origin."""
    position: np.ndarray = field(default_factory=lambda: np.array(CAMERA_START, dtype=float))
    yaw: float = 0.0
    pitch: float = 0.0
    fov: float = CAMERA_FOV
    aspect: float = VIEW_WIDTH / VIEW_HEIGHT
    near: float = CAMERA_NEAR
    far: float = CAMERA_FAR

    @property
    def distance(self) -> float:
        return float(np.linalg.norm(self.position))


@dataclass
class ViewState:
    paused: bool = False
    dark_mode: bool = True


@dataclass
class HoverState:
    """What the fact label shows; rebuilt on every pointer move."""
    visible: bool = False
    body_id: Optional[str] = None
    name: str = ""
    fact: str = ""
    anchor: Tuple[int, int] = (0, 0)

    def show(self, body: CelestialBody, anchor: Tuple[int, int]) -> None:
        self.visible = True
        self.body_id = body.id
        self.name = body.name
        self.fact = body.fact
        self.anchor = anchor

    def hide(self) -> None:
        self.visible = False
        self.body_id = None


@dataclass
class Viewport:
    width: int = VIEW_WIDTH
    height: int = VIEW_HEIGHT


@dataclass
class AppState:
    """
    Shared state for one viewer session.

    Fields:
    - orbits: one OrbitState per planet, keyed by body id
    - camera, view, hover, viewport: see the individual dataclasses
    - running: cleared to leave the run loop
    - frame: number of animation steps taken while unpaused
    """
    orbits: Dict[str, OrbitState] = field(default_factory=dict)
    camera: CameraState = field(default_factory=CameraState)
    view: ViewState = field(default_factory=ViewState)
    hover: HoverState = field(default_factory=HoverState)
    viewport: Viewport = field(default_factory=Viewport)
    running: bool = True
    frame: int = 0
