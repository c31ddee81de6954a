"""Hue ring, shade ring and center swatch drawing.

Talks only to the RenderSurface contract; no Qt dependencies.
"""
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..constants import CENTER_BORDER_WIDTH, FULL_CIRCLE, SHADE_RING_OFFSET
from ..core.models import RGBColor, WheelConfig
from ..surface import RenderSurface
from .geometry import CoordinateMapper

log = logging.getLogger(__name__)


class WheelRenderer:
    """
    Draws the three wheel regions onto one surface.

    Every arc is stroked on its effective radius (nominal radius minus half
    the line width) so the painted band is exactly
    [radius - line_width, radius].
    """

    def __init__(self, surface: RenderSurface, config: WheelConfig):
        self.surface = surface
        self.config = config

    @property
    def center(self) -> Tuple[float, float]:
        """Wheel center, the same (radius, radius) point hit-testing measures from."""
        return (self.config.radius, self.config.radius)

    def draw_hue_ring(self, colours: Sequence[RGBColor], radius: float,
                      line_width: float) -> List[Tuple[float, float]]:
        """Clear the surface and stroke one equal arc per colour from angle 0.

        Returns the (start, end) angle of every arc drawn.
        """
        cx, cy = self.center
        effective = CoordinateMapper.effective_radius(radius, line_width)
        arcs = CoordinateMapper.segment_angles(len(colours))

        self.surface.clear_rect(0, 0, self.surface.width, self.surface.height)
        for colour, (start, end) in zip(colours, arcs):
            self.surface.stroke_arc(cx, cy, effective, start, end, line_width, colour)

        log.debug("Hue ring: %d arcs at r=%.1f", len(arcs), effective)
        return arcs

    def draw_shade_ring(self, shades: Sequence[RGBColor], inner_radius: float,
                        line_width: float) -> List[Tuple[float, float]]:
        """Redraw the hue ring, then stroke the shade ramp a quarter turn in.

        Returns the (start, end) angle of every shade arc drawn.
        """
        self.draw_hue_ring(self.config.hue_colours, self.config.outer_radius,
                           self.config.line_width)

        cx, cy = self.center
        effective = CoordinateMapper.effective_radius(inner_radius, line_width)
        arcs = CoordinateMapper.segment_angles(len(shades), SHADE_RING_OFFSET)
        for colour, (start, end) in zip(shades, arcs):
            self.surface.stroke_arc(cx, cy, effective, start, end, line_width, colour)

        log.debug("Shade ring: %d arcs at r=%.1f", len(arcs), effective)
        return arcs

    def draw_center_swatch(self, colour: RGBColor, center_radius: float) -> None:
        """Fill the center disc and stroke a hairline border in the same colour."""
        cx, cy = self.center
        self.surface.fill_disc(cx, cy, center_radius, colour)
        self.surface.stroke_arc(cx, cy, center_radius, 0.0, FULL_CIRCLE,
                                CENTER_BORDER_WIDTH, colour)
        log.debug("Center swatch: %s", colour.hex)
