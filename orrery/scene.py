#!/usr/bin/env python3
"""
Scene-graph primitives consumed by the renderer and the ray caster.

Objects carry a world position, a rotation about the +y axis and a free-form
name tag. Only Sphere meshes are hit-testable; rings and the point cloud are
decorative.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

Color = Tuple[int, int, int]


@dataclass(eq=False)
class Object3D:
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation_y: float = 0.0
    name: Optional[str] = None
    visible: bool = True


@dataclass(eq=False)
class Sphere(Object3D):
    """
    Sphere mesh.

    Fields:
    - radius: world radius
    - color: base RGB color
    - opacity: 1.0 is opaque; translucent spheres are blended over the frame
    - emissive: self-lit color; emissive spheres ignore scene lights
    """
    radius: float = 1.0
    color: Color = (255, 255, 255)
    opacity: float = 1.0
    emissive: Optional[Color] = None


@dataclass(eq=False)
class Ring(Object3D):
    """Flat annulus lying in the x/z plane, centred on its position."""
    inner_radius: float = 1.0
    outer_radius: float = 1.0
    segments: int = 64
    color: Color = (255, 255, 255)
    opacity: float = 1.0

    @property
    def mid_radius(self) -> float:
        return (self.inner_radius + self.outer_radius) / 2.0

    def outline(self) -> np.ndarray:
        """(segments + 1, 3) closed polyline along the middle of the annulus."""
        t = np.linspace(0.0, 2.0 * np.pi, self.segments + 1)
        r = self.mid_radius
        pts = np.stack([np.cos(t) * r, np.zeros_like(t), np.sin(t) * r], axis=1)
        return pts + self.position


@dataclass(eq=False)
class Points(Object3D):
    """Point cloud stored as an (N, 3) array in local coordinates."""
    vertices: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))
    color: Color = (255, 255, 255)
    size: float = 0.5
    opacity: float = 1.0

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(eq=False)
class PointLight(Object3D):
    color: Color = (255, 255, 255)
    intensity: float = 1.0
    range: float = 0.0  # 0 means no falloff

    def intensity_at(self, point: np.ndarray) -> float:
        if self.range <= 0:
            return self.intensity
        d = float(np.linalg.norm(point - self.position))
        return self.intensity * max(0.0, 1.0 - d / self.range)


@dataclass(eq=False)
class AmbientLight:
    color: Color = (255, 255, 255)
    intensity: float = 1.0


class Scene:
    """Flat list of objects plus lights and a solid background color."""

    def __init__(self, background: Color = (0, 0, 0)):
        self.background = background
        self.objects: List[Object3D] = []
        self.point_lights: List[PointLight] = []
        self.ambient: Optional[AmbientLight] = None

    def add(self, obj) -> None:
        if isinstance(obj, PointLight):
            self.point_lights.append(obj)
        elif isinstance(obj, AmbientLight):
            self.ambient = obj
        else:
            self.objects.append(obj)

    def of_type(self, kind) -> list:
        return [o for o in self.objects if isinstance(o, kind)]
