"""
Tests for services/renderer.py and services/sampler.py.

Tests cover:
- WheelRenderer draw calls against a mocked surface
- Painted output on a real PillowSurface
- ColorSampler hits, misses and coordinate flooring
"""

import math
import unittest
from unittest.mock import MagicMock

from colourwheel.constants import CENTER_BORDER_WIDTH
from colourwheel.core.models import RGBColor, WheelConfig
from colourwheel.services.renderer import WheelRenderer
from colourwheel.services.sampler import ColorSampler
from colourwheel.surface import PillowSurface

RED, GREEN, BLUE = RGBColor(255, 0, 0), RGBColor(0, 255, 0), RGBColor(0, 0, 255)


def _mock_surface(size=400):
    surface = MagicMock()
    surface.width = size
    surface.height = size
    return surface


# =============================================================================
# WheelRenderer (mocked surface)
# =============================================================================


class TestDrawHueRing(unittest.TestCase):

    def setUp(self):
        self.surface = _mock_surface()
        self.renderer = WheelRenderer(self.surface, WheelConfig(hue_colours=(RED, GREEN, BLUE)))

    def test_clears_first(self):
        self.renderer.draw_hue_ring((RED, GREEN, BLUE), 200, 50)
        self.surface.clear_rect.assert_called_once_with(0, 0, 400, 400)
        self.assertEqual(self.surface.method_calls[0][0], 'clear_rect')

    def test_one_arc_per_colour(self):
        arcs = self.renderer.draw_hue_ring((RED, GREEN, BLUE), 200, 50)
        self.assertEqual(len(arcs), 3)
        calls = self.surface.stroke_arc.call_args_list
        self.assertEqual(len(calls), 3)
        for call, colour, (start, end) in zip(calls, (RED, GREEN, BLUE), arcs):
            cx, cy, radius, s, e, lw, c = call.args
            self.assertEqual((cx, cy), (200, 200))
            self.assertEqual(radius, 175)
            self.assertEqual((s, e), (start, end))
            self.assertEqual(lw, 50)
            self.assertEqual(c, colour)

    def test_starts_at_zero(self):
        arcs = self.renderer.draw_hue_ring((RED, GREEN, BLUE), 200, 50)
        self.assertAlmostEqual(arcs[0][0], 0)
        self.assertAlmostEqual(arcs[1][0], 2 * math.pi / 3)


class TestDrawShadeRing(unittest.TestCase):

    def setUp(self):
        self.surface = _mock_surface()
        self.config = WheelConfig(hue_colours=(RED, GREEN, BLUE))
        self.renderer = WheelRenderer(self.surface, self.config)

    def test_redraws_hue_ring(self):
        shades = (RGBColor(1, 1, 1), RGBColor(2, 2, 2))
        self.renderer.draw_shade_ring(shades, 150, 50)
        self.surface.clear_rect.assert_called_once()
        self.assertEqual(self.surface.stroke_arc.call_count, 3 + 2)

    def test_quarter_turn_offset(self):
        shades = tuple(RGBColor(i, i, i) for i in range(4))
        arcs = self.renderer.draw_shade_ring(shades, 150, 50)
        self.assertAlmostEqual(arcs[0][0], math.pi / 2)
        self.assertAlmostEqual(arcs[0][1], math.pi)
        self.assertAlmostEqual(arcs[-1][1], 2 * math.pi + math.pi / 2)
        last = self.surface.stroke_arc.call_args_list[-1].args
        self.assertEqual(last[2], 125)
        self.assertEqual(last[6], RGBColor(3, 3, 3))


class TestDrawCenterSwatch(unittest.TestCase):

    def test_fill_then_border(self):
        surface = _mock_surface()
        WheelRenderer(surface, WheelConfig()).draw_center_swatch(RED, 100)
        surface.fill_disc.assert_called_once_with(200, 200, 100, RED)
        surface.stroke_arc.assert_called_once_with(
            200, 200, 100, 0.0, 2 * math.pi, CENTER_BORDER_WIDTH, RED)
        self.assertEqual([c[0] for c in surface.method_calls], ['fill_disc', 'stroke_arc'])


class TestCenter(unittest.TestCase):
    """Drawing centers on (radius, radius), the point hit-testing measures from."""

    def test_fractional_radius(self):
        config = WheelConfig(radius=100.3, line_width=20)
        surface = _mock_surface(config.size)
        renderer = WheelRenderer(surface, config)
        self.assertEqual(config.size, 201)
        self.assertEqual(renderer.center, (100.3, 100.3))

        renderer.draw_hue_ring((RED, GREEN, BLUE), config.radius, config.line_width)
        for call in surface.stroke_arc.call_args_list:
            self.assertEqual(call.args[:2], (100.3, 100.3))
        renderer.draw_center_swatch(RED, config.center_radius)
        surface.fill_disc.assert_called_once_with(100.3, 100.3, config.center_radius, RED)


# =============================================================================
# WheelRenderer (real surface)
# =============================================================================


class TestRenderedPixels(unittest.TestCase):
    """What actually lands on a PillowSurface."""

    def setUp(self):
        self.config = WheelConfig(hue_colours=(RED, GREEN, BLUE), shade_count=4)
        self.surface = PillowSurface(self.config.size)
        self.renderer = WheelRenderer(self.surface, self.config)
        self.renderer.draw_hue_ring(self.config.hue_colours, 200, 50)

    def test_hue_arcs(self):
        # Arc midpoints at 60, 180 and 300 degrees on r=175
        self.assertEqual(self.surface.get_pixel(287, 351), (255, 0, 0, 255))
        self.assertEqual(self.surface.get_pixel(25, 200), (0, 255, 0, 255))
        self.assertEqual(self.surface.get_pixel(287, 48), (0, 0, 255, 255))

    def test_inner_empty(self):
        self.assertEqual(self.surface.get_pixel(200, 200)[3], 0)
        self.assertEqual(self.surface.get_pixel(111, 288)[3], 0)

    def test_shade_ring(self):
        shades = (RGBColor(10, 10, 10), RGBColor(20, 20, 20),
                  RGBColor(30, 30, 30), RGBColor(40, 40, 40))
        self.renderer.draw_shade_ring(shades, 150, 50)
        # First shade spans 90..180 degrees; midpoint at 135 on r=125
        self.assertEqual(self.surface.get_pixel(111, 288), (10, 10, 10, 255))
        self.assertEqual(self.surface.get_pixel(287, 351), (255, 0, 0, 255))

    def test_center_swatch(self):
        self.renderer.draw_center_swatch(GREEN, 100)
        self.assertEqual(self.surface.get_pixel(200, 200), (0, 255, 0, 255))
        self.assertEqual(self.surface.get_pixel(200, 250), (0, 255, 0, 255))

    def test_seam_pixel_is_blended(self):
        # Red and blue meet at 0 deg; the sampler returns the mix, not either stroke colour
        sampled = ColorSampler.sample_at(self.surface, 375.0, 200.0)
        self.assertEqual(sampled, RGBColor(*self.surface.get_pixel(375, 200)[:3]))
        self.assertNotIn(sampled, (RED, GREEN, BLUE))
        self.assertGreater(sampled.r, 0)
        self.assertGreater(sampled.b, 0)


# =============================================================================
# ColorSampler
# =============================================================================


class TestColorSampler(unittest.TestCase):

    def setUp(self):
        self.surface = PillowSurface(100)
        self.surface.fill_disc(50, 50, 30, RGBColor(12, 34, 56))

    def test_hit(self):
        self.assertEqual(ColorSampler.sample_at(self.surface, 50, 50), RGBColor(12, 34, 56))

    def test_floors_fractional(self):
        self.assertEqual(ColorSampler.sample_at(self.surface, 50.9, 49.1),
                         RGBColor(12, 34, 56))

    def test_unpainted_is_miss(self):
        self.assertIsNone(ColorSampler.sample_at(self.surface, 2, 2))

    def test_outside_is_miss(self):
        self.assertIsNone(ColorSampler.sample_at(self.surface, -0.5, 10))
        self.assertIsNone(ColorSampler.sample_at(self.surface, 10, 100))

    def test_surface_returns_none(self):
        surface = _mock_surface(10)
        surface.get_pixel.return_value = None
        self.assertIsNone(ColorSampler.sample_at(surface, 3, 3))

    def test_transparent_pixel(self):
        surface = _mock_surface(10)
        surface.get_pixel.return_value = (0, 0, 0, 0)
        self.assertIsNone(ColorSampler.sample_at(surface, 3, 3))
        surface.get_pixel.assert_called_once_with(3, 3)


if __name__ == '__main__':
    unittest.main()
