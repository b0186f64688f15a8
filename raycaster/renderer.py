"""
Renderer module - drives the per-pixel ray casting.

Implements:
- Pixel to viewport mapping (row 0 is the top of the image)
- Multi-threaded row-band rendering
- 8-bit image output through Pillow
"""

from __future__ import annotations
import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Callable, Tuple
import numpy as np

from .camera import Camera
from .shapes import Hittable
from .shading import ray_color

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 200
    height: int = 100
    num_threads: int = 1  # 0 = auto-detect
    rows_per_task: int = 8

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.rows_per_task <= 0:
            raise ValueError(f"rows_per_task must be positive, got {self.rows_per_task}")
        if self.num_threads < 0:
            raise ValueError(f"num_threads cannot be negative, got {self.num_threads}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


def render_pixel_color(
    camera: Camera,
    world: Hittable,
    x: int,
    y: int,
    width: int,
    height: int
) -> Tuple[int, int, int]:
    """Compute the 8-bit color of one pixel.

    Args:
        camera: Camera generating the primary ray
        world: Scene to cast into
        x, y: Pixel coordinates, y = 0 is the top row
        width, height: Image size in pixels

    Returns:
        (r, g, b) bytes, truncated and wrapped (see Vec3.to_bytes)
    """
    u = x / width
    v = 1.0 - y / height

    ray = camera.get_ray(u, v)
    color = ray_color(ray, world)
    color *= 255.0
    return color.to_bytes()


class Renderer:
    """Ray casting renderer with multi-threading support."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self.last_render_time: Optional[float] = None
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """Render the scene and return the image as a numpy array.

        Args:
            world: The scene to render (any Hittable)
            camera: The camera to render from

        Returns:
            Image as uint8 numpy array of shape (height, width, 3)
        """
        width = self.settings.width
        height = self.settings.height
        image = np.zeros((height, width, 3), dtype=np.uint8)

        bands = self._generate_bands(height)
        total_bands = len(bands)
        completed_bands = [0]  # Use list for mutable in closure
        progress_lock = threading.Lock()

        def render_band(band: Tuple[int, int]) -> None:
            """Render rows [y0, y1) directly into the image."""
            y0, y1 = band
            for y in range(y0, y1):
                for x in range(width):
                    image[y, x] = render_pixel_color(camera, world, x, y, width, height)

            with progress_lock:
                completed_bands[0] += 1
                progress = completed_bands[0] / total_bands
            if self._progress_callback:
                self._progress_callback(progress)

        logger.info(
            "Rendering %dx%d with %d thread(s), %d band(s)",
            width, height, self.settings.num_threads, total_bands
        )
        start_time = time.perf_counter()

        # Bands cover disjoint rows; only the progress counter is shared
        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                list(executor.map(render_band, bands))
        else:
            for band in bands:
                render_band(band)

        self.last_render_time = time.perf_counter() - start_time
        logger.info("Render finished in %.3f seconds", self.last_render_time)

        return image

    def _generate_bands(self, height: int) -> list[Tuple[int, int]]:
        """Split the image rows into bands of at most ``rows_per_task`` rows.

        Returns:
            List of bands as (y0, y1) tuples
        """
        step = self.settings.rows_per_task
        return [(y, min(y + step, height)) for y in range(0, height, step)]

    def save_image(self, image: np.ndarray, filename: str) -> None:
        """Save image to file.

        Args:
            image: uint8 image array of shape (height, width, 3)
            filename: Output filename (extension determines format)
        """
        from PIL import Image as PILImage

        pil_image = PILImage.fromarray(image)
        pil_image.save(filename)
        logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], filename)
