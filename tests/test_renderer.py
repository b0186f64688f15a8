"""Tests for Renderer class."""

import pytest
import os
import numpy as np
from PIL import Image

from raycaster.vec3 import Point3
from raycaster.camera import Camera
from raycaster.shapes import Sphere, HittableList
from raycaster.shading import ray_color
from raycaster.renderer import Renderer, RenderSettings, render_pixel_color
from raycaster.scene_parser import default_scene


class TestRenderSettings:
    """Test RenderSettings configuration."""

    def test_default_values(self):
        settings = RenderSettings()
        assert settings.width == 200
        assert settings.height == 100
        assert settings.num_threads == 1
        assert settings.rows_per_task == 8

    def test_custom_values(self):
        settings = RenderSettings(width=1920, height=1080, num_threads=4)
        assert settings.width == 1920
        assert settings.height == 1080
        assert settings.num_threads == 4

    def test_auto_thread_detection(self):
        settings = RenderSettings(num_threads=0)
        assert settings.num_threads == (os.cpu_count() or 4)

    @pytest.mark.parametrize("kwargs", [
        {'width': 0},
        {'height': -5},
        {'rows_per_task': 0},
        {'num_threads': -1},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            RenderSettings(**kwargs)


class TestRenderPixelColor:
    """Test the pixel to color mapping."""

    def test_top_row_uses_top_of_viewport(self):
        camera = Camera()
        world = HittableList()
        # y = 0 maps to v = 1, the sky-blue end of the gradient
        r, g, b = render_pixel_color(camera, world, 100, 0, 200, 100)
        expected = ray_color(camera.get_ray(0.5, 1.0), world) * 255.0
        assert (r, g, b) == expected.to_bytes()
        assert r < 255

    def test_center_pixel_hits_sphere(self):
        world = HittableList([Sphere(Point3(0, 0, -1), 0.5)])
        # x = 100, y = 50 gives u = 0.5, v = 0.5: straight ahead
        assert render_pixel_color(Camera(), world, 100, 50, 200, 100) == (127, 127, 255)

    def test_returns_bytes(self):
        rgb = render_pixel_color(Camera(), default_scene(), 13, 71, 200, 100)
        assert len(rgb) == 3
        assert all(isinstance(c, int) and 0 <= c <= 255 for c in rgb)


class TestRendererBasic:
    """Test basic renderer functionality."""

    def test_render_produces_image(self):
        renderer = Renderer(RenderSettings(width=10, height=5))
        image = renderer.render(default_scene(), Camera())

        assert image.shape == (5, 10, 3)
        assert image.dtype == np.uint8

    def test_render_matches_pixel_function(self):
        settings = RenderSettings(width=8, height=4, rows_per_task=3)
        world = default_scene()
        camera = Camera()
        image = Renderer(settings).render(world, camera)

        for y in range(4):
            for x in range(8):
                assert tuple(image[y, x]) == render_pixel_color(camera, world, x, y, 8, 4)

    def test_empty_scene_is_gradient(self):
        image = Renderer(RenderSettings(width=4, height=20)).render(HittableList(), Camera())
        # Red channel falls toward the top (bluer sky), bottom stays near white
        assert image[0, 2, 0] < image[-1, 2, 0]
        assert np.all(image[:, :, 2] >= 254)

    def test_multithreaded_matches_single_threaded(self):
        world = default_scene()
        camera = Camera()
        single = Renderer(RenderSettings(width=16, height=8, num_threads=1)).render(world, camera)
        multi = Renderer(
            RenderSettings(width=16, height=8, num_threads=4, rows_per_task=1)
        ).render(world, camera)
        assert np.array_equal(single, multi)

    def test_progress_callback(self):
        progress_values = []
        renderer = Renderer(RenderSettings(width=4, height=10, rows_per_task=4))
        renderer.set_progress_callback(progress_values.append)
        renderer.render(default_scene(), Camera())

        assert len(progress_values) == 3
        assert progress_values[-1] == 1.0

    def test_progress_callback_multithreaded(self):
        progress_values = []
        renderer = Renderer(RenderSettings(width=4, height=32, num_threads=8, rows_per_task=1))
        renderer.set_progress_callback(progress_values.append)
        renderer.render(default_scene(), Camera())

        # Every band reports a distinct count, the last one reaching 1.0
        assert sorted(progress_values) == [(i + 1) / 32 for i in range(32)]

    def test_records_render_time(self):
        renderer = Renderer(RenderSettings(width=2, height=2))
        assert renderer.last_render_time is None
        renderer.render(HittableList(), Camera())
        assert renderer.last_render_time >= 0.0

    def test_bands_cover_all_rows(self):
        renderer = Renderer(RenderSettings(rows_per_task=8))
        bands = renderer._generate_bands(20)
        assert bands == [(0, 8), (8, 16), (16, 20)]


class TestImageOutput:
    """Test image saving."""

    def test_save_png(self, tmp_path):
        renderer = Renderer(RenderSettings(width=6, height=3))
        image = renderer.render(default_scene(), Camera())
        filename = str(tmp_path / "render.png")
        renderer.save_image(image, filename)

        with Image.open(filename) as saved:
            assert saved.size == (6, 3)
            assert saved.mode == 'RGB'
            assert np.array_equal(np.asarray(saved), image)
