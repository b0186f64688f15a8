"""Tests for Camera class."""

import pytest
import math
from raycaster.vec3 import Vec3, Point3, ZeroLengthVectorError
from raycaster.camera import Camera


class TestCameraCreation:
    """Test Camera construction."""

    def test_default_viewport(self):
        cam = Camera()
        assert cam.origin == Point3(0, 0, 0)
        assert cam.lower_left_corner == Point3(-2, -1, -1)
        assert cam.horizontal == Vec3(4, 0, 0)
        assert cam.vertical == Vec3(0, 2, 0)

    def test_custom_viewport(self):
        cam = Camera(
            origin=Point3(1, 1, 1),
            lower_left_corner=Point3(0, 0, 0),
            horizontal=Vec3(2, 0, 0),
            vertical=Vec3(0, 1, 0)
        )
        assert cam.origin == Point3(1, 1, 1)
        assert cam.horizontal == Vec3(2, 0, 0)

    def test_look_at_matches_default_viewport(self):
        # 90 degree vertical fov, 2:1 aspect gives the 4x2 viewport at z=-1
        cam = Camera.look_at(
            look_from=Point3(0, 0, 0),
            look_at=Point3(0, 0, -1),
            vup=Vec3(0, 1, 0),
            vfov=90,
            aspect_ratio=2.0
        )
        default = Camera()
        assert cam.origin == default.origin
        assert cam.lower_left_corner == default.lower_left_corner
        assert cam.horizontal == default.horizontal
        assert cam.vertical == default.vertical

    def test_look_at_same_point_raises(self):
        with pytest.raises(ZeroLengthVectorError):
            Camera.look_at(Point3(1, 1, 1), Point3(1, 1, 1))


class TestCameraRays:
    """Test Camera.get_ray() method."""

    def test_center_ray(self):
        ray = Camera().get_ray(0.5, 0.5)
        assert ray.direction == Vec3(0, 0, -1)

    def test_corner_rays(self):
        cam = Camera()
        assert cam.get_ray(0, 0).direction == Vec3(-2, -1, -1)
        assert cam.get_ray(1, 1).direction == Vec3(2, 1, -1)

    def test_top_ray_points_up(self):
        ray = Camera().get_ray(0.5, 1.0)
        assert ray.direction.y > 0

    def test_ray_starts_at_origin(self):
        cam = Camera(origin=Point3(0, 0, 2), lower_left_corner=Point3(-2, -1, 1))
        ray = cam.get_ray(0.5, 0.5)
        assert ray.origin == Point3(0, 0, 2)
        assert ray.direction == Vec3(0, 0, -1)

    def test_direction_not_normalized(self):
        ray = Camera().get_ray(0, 0)
        assert abs(ray.direction.length() - math.sqrt(6)) < 1e-12
