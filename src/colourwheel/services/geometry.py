"""Ring bounds, pointer mapping and arc partitioning.

Pure Python, no Qt or Pillow dependencies.
"""
from __future__ import annotations

import math
from typing import List, Tuple

from ..constants import FULL_CIRCLE
from ..core.models import (
    MappedPointer,
    Region,
    RingBounds,
    SurfaceBox,
    WheelBounds,
    WheelConfig,
)


class BoundsCalculator:
    """Annulus/disc membership and region classification."""

    @staticmethod
    def make_bounds(lo: float, hi: float) -> RingBounds:
        """Closed interval [lo, hi] on distance-from-center."""
        return RingBounds(lo, hi)

    @staticmethod
    def for_config(config: WheelConfig) -> WheelBounds:
        """Hue ring, shade ring and center disc for a config.

        The hue ring uses the nominal radius; the shade ring and center
        disc use the padded radii derived by WheelConfig.
        """
        return WheelBounds(
            outer=BoundsCalculator.make_bounds(config.radius - config.line_width, config.radius),
            inner=BoundsCalculator.make_bounds(
                config.inner_radius - config.line_width, config.inner_radius),
            center=BoundsCalculator.make_bounds(0, config.center_radius),
        )

    @staticmethod
    def classify(distance: float, bounds: WheelBounds,
                 inner_ring_visible: bool) -> Region:
        """Map a distance-from-center to a region.

        Outer ring wins over the inner ring on a shared boundary. The inner
        ring only counts once the shade ring has been drawn.
        """
        if bounds.outer.contains(distance):
            return Region.OUTER_RING
        if inner_ring_visible and bounds.inner.contains(distance):
            return Region.INNER_RING
        if bounds.center.contains(distance):
            return Region.CENTER
        return Region.NONE


class CoordinateMapper:
    """Viewport <-> surface geometry."""

    @staticmethod
    def map_pointer(client_x: float, client_y: float, box: SurfaceBox,
                    radius: float) -> MappedPointer:
        """Pointer relative to the surface's top-left corner, plus its
        Euclidean distance from (radius, radius)."""
        x = client_x - box.left
        y = client_y - box.top
        return MappedPointer(x, y, math.hypot(x - radius, y - radius))

    @staticmethod
    def effective_radius(radius: float, line_width: float) -> float:
        """Radius that centers a stroke of ``line_width`` on the ring band
        ending at ``radius``."""
        return radius - line_width / 2

    @staticmethod
    def point_at(cx: float, cy: float, radius: float, angle: float) -> Tuple[float, float]:
        """Surface point at ``angle`` (clockwise, y-down) on a circle."""
        return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))

    @staticmethod
    def segment_angles(count: int, offset: float = 0.0) -> List[Tuple[float, float]]:
        """Split the full turn into ``count`` equal arcs starting at ``offset``.

        Arc i spans (2pi/count)*i .. (2pi/count)*(i+1). Float division can
        leave a sub-pixel gap or overlap at the last arc; that is left as is.
        """
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        step = FULL_CIRCLE / count
        return [(step * i + offset, step * (i + 1) + offset) for i in range(count)]
