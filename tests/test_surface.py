"""
Tests for surface.py – PillowSurface drawing and read-back.

Tests cover:
- Construction and validation
- stroke_arc(): band placement and clockwise angle convention
- fill_disc(), clear_rect()
- get_pixel(): composited RGBA, None outside
- to_rgb() / save()
"""

import math
import os
import tempfile
import unittest

from PIL import Image

from colourwheel.core.models import RGBColor
from colourwheel.surface import PillowSurface, RenderSurface


class TestPillowSurfaceInit(unittest.TestCase):

    def test_size(self):
        s = PillowSurface(100)
        self.assertIsInstance(s, RenderSurface)
        self.assertEqual((s.width, s.height), (100, 100))
        self.assertEqual(s.image.size, (100, 100))
        self.assertEqual(s.image.mode, 'RGBA')

    def test_starts_transparent(self):
        s = PillowSurface(20)
        self.assertEqual(s.get_pixel(10, 10), (0, 0, 0, 0))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            PillowSurface(0)
        with self.assertRaises(ValueError):
            PillowSurface(10, supersample=0)


class TestStrokeArc(unittest.TestCase):
    """Arc band straddles the given radius."""

    def setUp(self):
        self.s = PillowSurface(400)
        # Full ring centered on r=175, 50 px thick -> band [150, 200]
        self.s.stroke_arc(200, 200, 175, 0, 2 * math.pi, 50, RGBColor(255, 0, 0))

    def test_inside_band(self):
        self.assertEqual(self.s.get_pixel(375, 200), (255, 0, 0, 255))
        self.assertEqual(self.s.get_pixel(200, 30), (255, 0, 0, 255))

    def test_outside_band(self):
        self.assertEqual(self.s.get_pixel(200, 200)[3], 0)
        self.assertEqual(self.s.get_pixel(200, 120)[3], 0)
        self.assertEqual(self.s.get_pixel(5, 5)[3], 0)

    def test_clockwise_quarter(self):
        """0..pi/2 covers 3 o'clock down to 6 o'clock."""
        s = PillowSurface(400)
        s.stroke_arc(200, 200, 175, 0, math.pi / 2, 50, (0, 0, 255))
        # 45 deg below the horizontal, right side
        x = int(200 + 175 * math.cos(math.pi / 4))
        y = int(200 + 175 * math.sin(math.pi / 4))
        self.assertEqual(s.get_pixel(x, y), (0, 0, 255, 255))
        # Mirror point above the horizontal stays empty
        self.assertEqual(s.get_pixel(x, 400 - y)[3], 0)

    def test_plain_tuple_colour(self):
        s = PillowSurface(50)
        s.stroke_arc(25, 25, 20, 0, 2 * math.pi, 6, (1, 2, 3))
        self.assertEqual(s.get_pixel(45, 25), (1, 2, 3, 255))


class TestFillAndClear(unittest.TestCase):

    def test_fill_disc(self):
        s = PillowSurface(100)
        s.fill_disc(50, 50, 20, RGBColor(0, 255, 0))
        self.assertEqual(s.get_pixel(50, 50), (0, 255, 0, 255))
        self.assertEqual(s.get_pixel(50, 80)[3], 0)

    def test_clear_rect(self):
        s = PillowSurface(100)
        s.fill_disc(50, 50, 40, (9, 9, 9))
        s.clear_rect(0, 0, 100, 100)
        self.assertEqual(s.get_pixel(50, 50), (0, 0, 0, 0))

    def test_partial_clear(self):
        s = PillowSurface(100)
        s.fill_disc(50, 50, 40, (9, 9, 9))
        s.clear_rect(0, 0, 50, 100)
        self.assertEqual(s.get_pixel(30, 50)[3], 0)
        self.assertEqual(s.get_pixel(70, 50), (9, 9, 9, 255))

    def test_image_refreshes_after_draw(self):
        s = PillowSurface(30)
        first = s.image
        s.fill_disc(15, 15, 10, (200, 0, 0))
        self.assertIsNot(s.image, first)
        self.assertEqual(s.get_pixel(15, 15), (200, 0, 0, 255))


class TestGetPixel(unittest.TestCase):

    def test_outside_is_none(self):
        s = PillowSurface(10)
        self.assertIsNone(s.get_pixel(-1, 0))
        self.assertIsNone(s.get_pixel(0, 10))

    def test_supersample_one(self):
        s = PillowSurface(40, supersample=1)
        s.fill_disc(20, 20, 10, (5, 6, 7))
        self.assertEqual(s.get_pixel(20, 20), (5, 6, 7, 255))


class TestExport(unittest.TestCase):

    def test_to_rgb_background(self):
        s = PillowSurface(20)
        img = s.to_rgb((10, 20, 30))
        self.assertEqual(img.mode, 'RGB')
        self.assertEqual(img.getpixel((0, 0)), (10, 20, 30))

    def test_save(self):
        s = PillowSurface(40)
        s.fill_disc(20, 20, 10, (255, 0, 0))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'wheel.png')
            s.save(path)
            with Image.open(path) as img:
                self.assertEqual(img.size, (40, 40))
                self.assertEqual(img.convert('RGB').getpixel((20, 20)), (255, 0, 0))


if __name__ == '__main__':
    unittest.main()
