"""
Geometric shapes for the ray caster.

Each shape must implement the Hittable protocol with a `hit` method.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional
import math

from .vec3 import Vec3, Point3
from .ray import Ray


class DegenerateRayError(ValueError):
    """Raised when an intersection test receives a zero-length ray direction."""
    pass


@dataclass
class HitRecord:
    """Stores information about a ray-object intersection.

    Attributes:
        t: The ray parameter at intersection
        point: The intersection point in world space
        normal: The outward unit surface normal at the intersection
    """
    t: float
    point: Point3
    normal: Vec3


class Hittable(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test
            t_min: Exclusive lower bound of accepted t values
            t_max: Exclusive upper bound of accepted t values

        Returns:
            HitRecord if intersection found, None otherwise
        """
        pass


class Sphere(Hittable):
    """A sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere, must be positive
        """
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t)
        expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0.
        With b the half linear coefficient the discriminant is b² - ac.
        A tangent ray (zero discriminant) counts as a miss.

        Raises:
            DegenerateRayError: if the ray direction has zero length
        """
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a == 0:
            raise DegenerateRayError(f"Ray direction has zero length: {ray!r}")
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius

        discriminant = b * b - a * c
        if discriminant <= 0:
            return None

        sqrtd = math.sqrt(discriminant)

        # Nearest root first, then the far one
        for root in ((-b - sqrtd) / a, (-b + sqrtd) / a):
            if t_min < root < t_max:
                point = ray.at(root)
                normal = (point - self.center) / self.radius
                return HitRecord(t=root, point=point, normal=normal)

        return None

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class Plane(Hittable):
    """An infinite plane defined by a point and normal."""

    def __init__(self, point: Point3, normal: Vec3):
        """Create a plane.

        Args:
            point: Any point on the plane
            normal: Plane normal (normalized on construction)
        """
        self.point = point
        self.normal = normal.normalize()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test ray-plane intersection. Rays parallel to the plane miss."""
        if ray.direction.length_squared() == 0:
            raise DegenerateRayError(f"Ray direction has zero length: {ray!r}")

        denom = self.normal.dot(ray.direction)
        if abs(denom) < 1e-8:
            return None

        t = (self.point - ray.origin).dot(self.normal) / denom
        if not t_min < t < t_max:
            return None

        return HitRecord(t=t, point=ray.at(t), normal=self.normal)

    def __repr__(self) -> str:
        return f"Plane(point={self.point}, normal={self.normal})"


class HittableList(Hittable):
    """A collection of hittable objects.

    The list is copied on construction; the objects themselves are held
    by reference and scanned linearly. The closest hit
    wins; when two objects report the same t, the one added first wins.
    """

    def __init__(self, objects: Optional[list[Hittable]] = None):
        self.objects: list[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable) -> None:
        """Add an object to the list."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all objects."""
        self.objects.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Find the closest intersection among all objects."""
        closest_hit: Optional[HitRecord] = None
        closest_t = t_max

        for obj in self.objects:
            hit_record = obj.hit(ray, t_min, closest_t)
            if hit_record is not None:
                closest_hit = hit_record
                closest_t = hit_record.t

        return closest_hit

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)
