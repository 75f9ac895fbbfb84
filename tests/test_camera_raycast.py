import math

import numpy as np
import pytest

from orrery.camera import (
    basis,
    project,
    project_point,
    projected_radius,
    ray_from_ndc,
    screen_to_ndc,
)
from orrery.data_models import CameraState, Viewport
from orrery.raycast import Raycaster, intersect_sphere
from orrery.scene import Sphere
from orrery.vector_utils import spherical_position


def test_origin_projects_to_screen_centre():
    cam = CameraState()
    assert project_point(cam, Viewport(1100, 800), np.zeros(3)) == pytest.approx((550.0, 400.0))


def test_point_behind_camera_is_culled():
    cam = CameraState()
    assert project_point(cam, Viewport(), np.array([0.0, 60.0, 120.0])) is None


def test_basis_is_orthonormal():
    right, up, forward = basis(CameraState())
    for v in (right, up, forward):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.dot(right, up) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(right, forward) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(up, forward) == pytest.approx(0.0, abs=1e-12)


def test_basis_straight_overhead_has_no_nans():
    cam = CameraState(position=spherical_position(60.0, 0.0, math.pi / 2))
    right, up, forward = basis(cam)
    assert np.all(np.isfinite(right)) and np.all(np.isfinite(up))
    assert np.allclose(forward, [0.0, -1.0, 0.0], atol=1e-9)


def test_screen_to_ndc_corners():
    vp = Viewport(800, 600)
    assert screen_to_ndc(vp, 0, 0) == (-1.0, 1.0)
    assert screen_to_ndc(vp, 800, 600) == (1.0, -1.0)
    assert screen_to_ndc(vp, 400, 300) == (0.0, 0.0)


def test_centre_ray_points_at_origin():
    cam = CameraState()
    origin, direction = ray_from_ndc(cam, (0.0, 0.0))
    assert np.allclose(origin, cam.position)
    assert np.allclose(direction, -cam.position / np.linalg.norm(cam.position))


def test_ray_through_projected_point_hits_it():
    cam = CameraState()
    vp = Viewport(1100, 800)
    target = np.array([16.0, 0.0, 0.0])
    x, y = project_point(cam, vp, target)
    origin, direction = ray_from_ndc(cam, screen_to_ndc(vp, x, y))
    t = np.dot(target - origin, direction)
    assert np.allclose(origin + direction * t, target, atol=1e-9)


def test_projected_radius_shrinks_with_depth():
    cam = CameraState()
    vp = Viewport()
    assert projected_radius(cam, vp, 1.0, 10.0) > projected_radius(cam, vp, 1.0, 20.0)
    assert projected_radius(cam, vp, 1.0, 0.0) == 0.0


def test_project_flags_far_points():
    cam = CameraState()
    _, _, in_front = project(cam, Viewport(), np.array([[0.0, 0.0, 0.0], [0.0, -3000.0, -6000.0]]))
    assert list(in_front) == [True, False]


def test_intersect_sphere_front_hit():
    s = Sphere(radius=1.0)
    assert intersect_sphere(np.array([0.0, 0.0, 10.0]), np.array([0.0, 0.0, -1.0]), s) == pytest.approx(9.0)


def test_intersect_sphere_from_inside_is_a_miss():
    s = Sphere(radius=2.0)
    assert intersect_sphere(np.zeros(3), np.array([1.0, 0.0, 0.0]), s) is None
    assert intersect_sphere(np.array([1.5, 0.0, 0.0]), np.array([-1.0, 0.0, 0.0]), s) is None


def test_intersect_sphere_miss_and_behind():
    s = Sphere(radius=1.0)
    assert intersect_sphere(np.array([0.0, 5.0, 10.0]), np.array([0.0, 0.0, -1.0]), s) is None
    assert intersect_sphere(np.array([0.0, 0.0, 10.0]), np.array([0.0, 0.0, 1.0]), s) is None


def test_raycaster_orders_hits_nearest_first():
    near = Sphere(radius=1.0, name="near")
    near.position = np.array([0.0, 0.0, 5.0])
    far = Sphere(radius=1.0, name="far")
    hidden = Sphere(radius=1.0, name="hidden", visible=False)
    hidden.position = np.array([0.0, 0.0, 8.0])

    rc = Raycaster()
    rc.origin = np.array([0.0, 0.0, 10.0])
    rc.direction = np.array([0.0, 0.0, -1.0])
    hits = rc.intersect_objects([far, hidden, near])
    assert [h.object.name for h in hits] == ["near", "far"]
    assert hits[0].distance == pytest.approx(4.0)
    assert np.allclose(hits[0].point, [0.0, 0.0, 6.0])


def test_raycaster_empty_when_nothing_hit():
    rc = Raycaster()
    rc.set_from_camera((0.0, 0.0), CameraState())
    s = Sphere(radius=1.0)
    s.position = np.array([50.0, 50.0, 50.0])
    assert rc.intersect_objects([s]) == []
