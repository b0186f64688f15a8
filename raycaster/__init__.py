"""
raycaster - A Python Ray Casting Renderer

Casts one ray per pixel through a pinhole camera and shades:
- Surfaces by their normal
- Background with a vertical sky gradient
- Scenes of spheres and planes, closest hit wins
"""

__version__ = "0.1.0"
__author__ = "raycaster Team"

from .vec3 import Vec3, Point3, Color, ZeroLengthVectorError, dot, cross, unit_vector
from .ray import Ray
from .shapes import Hittable, HitRecord, Sphere, Plane, HittableList, DegenerateRayError
from .shading import ray_color, sky_color, T_MAX
from .camera import Camera
from .renderer import Renderer, RenderSettings, render_pixel_color
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene, default_scene
