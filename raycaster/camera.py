"""
Camera module for generating primary rays.

A pinhole camera: every ray starts at the camera origin and passes
through a point on a flat viewport spanned by two edge vectors.
"""

from __future__ import annotations
import math
from typing import Optional
from .vec3 import Vec3, Point3
from .ray import Ray


class Camera:
    """A pinhole camera with a rectangular viewport."""

    def __init__(
        self,
        origin: Optional[Point3] = None,
        lower_left_corner: Optional[Point3] = None,
        horizontal: Optional[Vec3] = None,
        vertical: Optional[Vec3] = None
    ):
        """Create a camera.

        The defaults give a 4x2 viewport one unit in front of the origin,
        looking down -Z.

        Args:
            origin: Camera position in world space
            lower_left_corner: Lower left corner of the viewport
            horizontal: Full viewport width vector
            vertical: Full viewport height vector
        """
        self.origin = origin if origin is not None else Point3(0.0, 0.0, 0.0)
        self.lower_left_corner = (
            lower_left_corner if lower_left_corner is not None else Point3(-2.0, -1.0, -1.0)
        )
        self.horizontal = horizontal if horizontal is not None else Vec3(4.0, 0.0, 0.0)
        self.vertical = vertical if vertical is not None else Vec3(0.0, 2.0, 0.0)

    @classmethod
    def look_at(
        cls,
        look_from: Point3,
        look_at: Point3,
        vup: Vec3 = Vec3(0, 1, 0),
        vfov: float = 90.0,
        aspect_ratio: float = 2.0
    ) -> Camera:
        """Create a camera positioned in the world.

        Args:
            look_from: Camera position in world space
            look_at: Point the camera is looking at
            vup: World up vector (usually (0, 1, 0))
            vfov: Vertical field of view in degrees
            aspect_ratio: Width / Height ratio
        """
        theta = math.radians(vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # Compute orthonormal camera basis
        w = (look_from - look_at).normalize()  # Points backward from camera
        u = vup.cross(w).normalize()           # Points right
        v = w.cross(u)                         # Points up

        horizontal = u * viewport_width
        vertical = v * viewport_height
        lower_left_corner = look_from - horizontal / 2 - vertical / 2 - w
        return cls(look_from, lower_left_corner, horizontal, vertical)

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate a ray for the given UV coordinates on the image plane.

        Args:
            u: Horizontal coordinate [0, 1] (0 = left, 1 = right)
            v: Vertical coordinate [0, 1] (0 = bottom, 1 = top)

        Returns:
            A ray from the camera through the viewport (direction not normalized)
        """
        direction = (
            self.lower_left_corner
            + self.horizontal * u
            + self.vertical * v
            - self.origin
        )
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return (
            f"Camera(origin={self.origin}, lower_left_corner={self.lower_left_corner}, "
            f"horizontal={self.horizontal}, vertical={self.vertical})"
        )
