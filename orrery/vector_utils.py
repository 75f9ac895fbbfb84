#!/usr/bin/env python3
"""
Vector helper functions for 3D operations.

These are small helpers over numpy arrays used by the camera, ray casting and
animation code.
"""
import math
from typing import Sequence

import numpy as np


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec3(x: float, y: float, z: float) -> np.ndarray:
    return np.array([x, y, z], dtype=float)


def vec_len(a: np.ndarray) -> float:
    return float(np.linalg.norm(a))


def vec_norm(a: np.ndarray) -> np.ndarray:
    l = vec_len(a)
    if l == 0:
        return np.zeros(3)
    return a / l


def orbit_position(distance: float, angle: float) -> np.ndarray:
    """Point on a circular orbit in the horizontal (x/z) plane."""
    return vec3(math.cos(angle) * distance, 0.0, math.sin(angle) * distance)


def spherical_position(radius: float, yaw: float, pitch: float) -> np.ndarray:
    """Camera position on a sphere around the origin; yaw about +y, pitch above the x/z plane."""
    return vec3(
        radius * math.cos(pitch) * math.sin(yaw),
        radius * math.sin(pitch),
        radius * math.cos(pitch) * math.cos(yaw),
    )


def rotate_y(points: np.ndarray, angle: float) -> np.ndarray:
    """Rotate an (N, 3) array of points about the +y axis."""
    c, s = math.cos(angle), math.sin(angle)
    rot = np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    return points @ rot.T


def distance_2d(a: Sequence[float], b: Sequence[float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])
