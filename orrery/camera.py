#!/usr/bin/env python3
"""
Perspective camera math for world-to-screen transforms.

The camera always aims at the origin. Screen coordinates are pixels with the
origin at the top-left; normalised device coordinates (NDC) run from -1 to 1
with +y up.
"""
import math
from typing import Optional, Tuple

import numpy as np

from .data_models import CameraState, Viewport
from .vector_utils import vec_norm

WORLD_UP = np.array([0.0, 1.0, 0.0])
_EPS = 1e-9


def focal_length(camera: CameraState) -> float:
    """1 / tan(fov / 2) for the vertical field of view."""
    return 1.0 / math.tan(math.radians(camera.fov) / 2.0)


def basis(camera: CameraState) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Return (right, up, forward) unit vectors for a camera looking at the origin.

    Straight above or below the origin the world up vector is parallel to the
    view direction; the +x axis is then used as "right".
    """
    forward = vec_norm(-camera.position)
    right = np.cross(forward, WORLD_UP)
    if np.linalg.norm(right) < _EPS:
        right = np.array([1.0, 0.0, 0.0])
    right = vec_norm(right)
    up = np.cross(right, forward)
    return right, up, forward


def to_camera_space(camera: CameraState, points: np.ndarray) -> np.ndarray:
    """(N, 3) world points -> (N, 3) as (x right, y up, z depth along view)."""
    right, up, forward = basis(camera)
    rel = np.atleast_2d(points) - camera.position
    return np.stack([rel @ right, rel @ up, rel @ forward], axis=1)


def project(camera: CameraState, viewport: Viewport, points: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Project world points to pixel coordinates.

    Returns (screen_xy (N, 2), depth (N,), in_front (N,) bool). Points closer
    than the near plane or beyond the far plane are flagged as not in front.
    """
    cam = to_camera_space(camera, points)
    depth = cam[:, 2]
    in_front = (depth > camera.near) & (depth < camera.far)
    safe_depth = np.where(in_front, depth, 1.0)
    f = focal_length(camera)
    ndc_x = cam[:, 0] / safe_depth * f / camera.aspect
    ndc_y = cam[:, 1] / safe_depth * f
    sx = (ndc_x + 1.0) * 0.5 * viewport.width
    sy = (1.0 - ndc_y) * 0.5 * viewport.height
    return np.stack([sx, sy], axis=1), depth, in_front


def project_point(camera: CameraState, viewport: Viewport, point: np.ndarray) -> Optional[Tuple[float, float]]:
    xy, _, in_front = project(camera, viewport, np.asarray(point, dtype=float))
    if not in_front[0]:
        return None
    return float(xy[0, 0]), float(xy[0, 1])


def projected_radius(camera: CameraState, viewport: Viewport, radius: float, depth: float) -> float:
    """Approximate on-screen radius in pixels of a sphere at the given depth."""
    if depth <= camera.near:
        return 0.0
    return radius * focal_length(camera) / depth * viewport.height * 0.5


def screen_to_ndc(viewport: Viewport, x: float, y: float) -> Tuple[float, float]:
    return (x / viewport.width) * 2.0 - 1.0, -(y / viewport.height) * 2.0 + 1.0


def ray_from_ndc(camera: CameraState, ndc: Tuple[float, float]) -> Tuple[np.ndarray, np.ndarray]:
    """Ray (origin, unit direction) from the camera through an NDC point."""
    right, up, forward = basis(camera)
    f = focal_length(camera)
    direction = forward + right * (ndc[0] * camera.aspect / f) + up * (ndc[1] / f)
    return camera.position.copy(), vec_norm(direction)
