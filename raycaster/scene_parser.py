"""
Scene description parser.

Supports YAML and JSON scene files with:
- Camera viewport
- Render settings
- Objects (spheres and planes)

Example scene file:
```yaml
camera:
  origin: [0, 0, 0]
  lower_left_corner: [-2, -1, -1]
  horizontal: [4, 0, 0]
  vertical: [0, 2, 0]

render:
  width: 200
  height: 100
  threads: 1

objects:
  - type: sphere
    center: [0, 0, -1]
    radius: 0.5

  - type: sphere
    center: [0, -100.5, -1]
    radius: 100
```

A camera section may instead use ``look_from``/``look_at``/``vfov``, in
which case the aspect ratio defaults to the render width / height.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Tuple

import yaml

from .vec3 import Vec3, Point3
from .camera import Camera
from .shapes import Sphere, Plane, HittableList
from .renderer import RenderSettings

logger = logging.getLogger(__name__)


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.objects: HittableList = HittableList()
        self.camera: Optional[Camera] = None
        self.settings: Optional[RenderSettings] = None

    def parse_file(self, filepath: str) -> Tuple[HittableList, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (world, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        if path.suffix == '.json':
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                raise SceneParseError(f"Invalid JSON in {filepath}: {e}") from e
        else:
            # YAML also accepts JSON documents
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise SceneParseError(f"Invalid YAML in {filepath}: {e}") from e

        logger.info("Loaded scene file %s", path)
        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[HittableList, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (world, camera, settings)
        """
        if not isinstance(data, dict):
            raise SceneParseError(f"Scene must be a mapping, got {type(data).__name__}")

        # Settings first, the camera may derive its aspect ratio from them
        if 'render' in data:
            self._parse_settings(data['render'])
        else:
            self.settings = RenderSettings()

        if 'objects' in data:
            self._parse_objects(data['objects'])

        if 'camera' in data:
            self._parse_camera(data['camera'])
        else:
            self.camera = Camera()

        logger.debug("Parsed scene with %d object(s)", len(self.objects))
        return self.objects, self.camera, self.settings

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from various formats."""
        try:
            if isinstance(data, (list, tuple)):
                if len(data) != 3:
                    raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
                return Vec3(float(data[0]), float(data[1]), float(data[2]))
            elif isinstance(data, dict):
                return Vec3(
                    float(data.get('x', 0)),
                    float(data.get('y', 0)),
                    float(data.get('z', 0))
                )
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}") from e
        raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_number(self, data: Dict[str, Any], key: str, default: float) -> float:
        value = data.get(key, default)
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"'{key}' must be a number, got {value!r}") from e

    def _parse_objects(self, objects_data: list) -> None:
        """Parse objects section."""
        if not isinstance(objects_data, list):
            raise SceneParseError("'objects' must be a list")

        for obj_data in objects_data:
            if not isinstance(obj_data, dict):
                raise SceneParseError(f"Object must be a mapping, got {obj_data!r}")
            obj_type = str(obj_data.get('type', 'sphere')).lower()

            if obj_type == 'sphere':
                center = self._parse_vec3(obj_data.get('center', [0, 0, 0]))
                radius = self._parse_number(obj_data, 'radius', 1.0)
                try:
                    self.objects.add(Sphere(center, radius))
                except ValueError as e:
                    raise SceneParseError(str(e)) from e

            elif obj_type == 'plane':
                point = self._parse_vec3(obj_data.get('point', [0, 0, 0]))
                normal = self._parse_vec3(obj_data.get('normal', [0, 1, 0]))
                try:
                    self.objects.add(Plane(point, normal))
                except ValueError as e:
                    raise SceneParseError(f"Invalid plane normal: {e}") from e

            else:
                raise SceneParseError(f"Unknown object type: {obj_type}")

    def _parse_camera(self, camera_data: Dict[str, Any]) -> None:
        """Parse camera section."""
        if not isinstance(camera_data, dict):
            raise SceneParseError(f"'camera' must be a mapping, got {camera_data!r}")

        if 'look_from' in camera_data:
            look_from = self._parse_vec3(camera_data['look_from'])
            look_at = self._parse_vec3(camera_data.get('look_at', [0, 0, -1]))
            vup = self._parse_vec3(camera_data.get('vup', [0, 1, 0]))
            vfov = self._parse_number(camera_data, 'vfov', 90.0)
            aspect_ratio = self._parse_number(
                camera_data, 'aspect_ratio', self.settings.width / self.settings.height
            )
            try:
                self.camera = Camera.look_at(look_from, look_at, vup, vfov, aspect_ratio)
            except ValueError as e:
                raise SceneParseError(f"Invalid camera orientation: {e}") from e
            return

        self.camera = Camera(
            origin=self._parse_vec3(camera_data.get('origin', [0, 0, 0])),
            lower_left_corner=self._parse_vec3(camera_data.get('lower_left_corner', [-2, -1, -1])),
            horizontal=self._parse_vec3(camera_data.get('horizontal', [4, 0, 0])),
            vertical=self._parse_vec3(camera_data.get('vertical', [0, 2, 0]))
        )

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        if not isinstance(settings_data, dict):
            raise SceneParseError(f"'render' must be a mapping, got {settings_data!r}")

        try:
            self.settings = RenderSettings(
                width=self._parse_int(settings_data, 'width', 200),
                height=self._parse_int(settings_data, 'height', 100),
                num_threads=self._parse_int(settings_data, 'threads', 1),
                rows_per_task=self._parse_int(settings_data, 'rows_per_task', 8)
            )
        except ValueError as e:
            raise SceneParseError(f"Invalid render settings: {e}") from e

    def _parse_int(self, data: Dict[str, Any], key: str, default: int) -> int:
        value = data.get(key, default)
        # bool is an int subclass; floats are not truncated
        if isinstance(value, bool) or not isinstance(value, int):
            raise SceneParseError(f"'{key}' must be an integer, got {value!r}")
        return value


def default_scene() -> HittableList:
    """Create the built-in scene: a small sphere resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5))
    world.add(Sphere(Point3(0, -100.5, -1), 100))
    return world


def load_scene(filepath: str) -> Tuple[HittableList, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (world, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[HittableList, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (world, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
