"""
Per-ray color policy.

Surfaces are shaded by their normal, mapped from [-1, 1] to [0, 1] per
channel. Rays that hit nothing get a vertical white to sky-blue gradient.
"""

from __future__ import annotations
import sys

from .vec3 import Color
from .ray import Ray
from .shapes import Hittable

# Largest finite float; the upper end of the primary ray interval.
T_MAX = sys.float_info.max

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def ray_color(ray: Ray, world: Hittable) -> Color:
    """Compute the color for a ray.

    Args:
        ray: The ray to shade
        world: The scene to query (usually a HittableList)

    Returns:
        Color with components in [0, 1]
    """
    hit_record = world.hit(ray, 0.0, T_MAX)

    if hit_record is None:
        return sky_color(ray)

    return (hit_record.normal + Color(1, 1, 1)) * 0.5


def sky_color(ray: Ray) -> Color:
    """Generate a sky gradient background.

    Args:
        ray: The ray direction to use for gradient

    Returns:
        Sky color at this direction
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t
