#!/usr/bin/env python3
"""
Ray casting against sphere meshes for pointer hit-testing.
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .camera import ray_from_ndc
from .data_models import CameraState
from .scene import Sphere


@dataclass
class Intersection:
    distance: float
    point: np.ndarray
    object: Sphere


def intersect_sphere(origin: np.ndarray, direction: np.ndarray, sphere: Sphere) -> Optional[float]:
    """
    Distance along a unit-direction ray to the first sphere surface hit, or None.

    Only outward-facing surfaces count, so a ray starting inside the sphere
    never hits it.
    """
    oc = origin - sphere.position
    c = float(np.dot(oc, oc)) - sphere.radius * sphere.radius
    if c < 0:
        return None
    b = float(np.dot(oc, direction))
    disc = b * b - c
    if disc < 0:
        return None
    t = -b - math.sqrt(disc)
    if t < 0:
        return None
    return t


class Raycaster:
    """Holds one ray and tests it against candidate spheres."""

    def __init__(self, near: float = 0.0, far: float = math.inf):
        self.origin = np.zeros(3)
        self.direction = np.array([0.0, 0.0, -1.0])
        self.near = near
        self.far = far

    def set_from_camera(self, ndc: Tuple[float, float], camera: CameraState) -> None:
        self.origin, self.direction = ray_from_ndc(camera, ndc)

    def intersect_objects(self, objects: Sequence[Sphere]) -> List[Intersection]:
        """Hits sorted nearest first; invisible objects are skipped."""
        hits: List[Intersection] = []
        for obj in objects:
            if not obj.visible:
                continue
            t = intersect_sphere(self.origin, self.direction, obj)
            if t is None or t < self.near or t > self.far:
                continue
            hits.append(Intersection(t, self.origin + self.direction * t, obj))
        hits.sort(key=lambda h: h.distance)
        return hits
