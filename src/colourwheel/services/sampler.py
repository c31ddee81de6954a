"""Pixel read-back from a rendering surface."""
from __future__ import annotations

import logging
import math
from typing import Optional

from ..core.models import RGBColor
from ..surface import RenderSurface

log = logging.getLogger(__name__)


class ColorSampler:
    """Reads the colour the renderer actually painted.

    Strokes are anti-aliased and arc boundaries fall on fractional angles,
    so the picked colour is the composited pixel, never the requested
    stroke colour.
    """

    @staticmethod
    def sample_at(surface: RenderSurface, x: float, y: float) -> Optional[RGBColor]:
        """RGB under (x, y), or None outside the surface or on an unpainted pixel."""
        px, py = int(math.floor(x)), int(math.floor(y))
        if not (0 <= px < surface.width and 0 <= py < surface.height):
            log.debug("Sample (%.1f, %.1f) outside %dx%d surface",
                      x, y, surface.width, surface.height)
            return None

        pixel = surface.get_pixel(px, py)
        if pixel is None or pixel[3] == 0:
            log.debug("Sample (%d, %d) hit an unpainted pixel", px, py)
            return None
        return RGBColor(int(pixel[0]), int(pixel[1]), int(pixel[2]))
