"""Shade ramp generation.

Pure Python (numpy), no Qt dependencies.

The ramp keeps the base colour's HSL hue and saturation and steps the
lightness linearly from SHADE_LIGHTEST towards SHADE_DARKEST:

    l_k = 0.9 - 0.8 * k / count,  k = 0 .. count-1

so the list always has exactly ``count`` entries, lightest first.
"""
from __future__ import annotations

import colorsys
from typing import List

import numpy as np

from ..constants import SHADE_DARKEST, SHADE_LIGHTEST
from ..core.models import RGBColor


class ShadeGenerator:
    """Stateless HSL lightness ramp."""

    @staticmethod
    def lightness_levels(count: int) -> np.ndarray:
        """Lightness for each shade, lightest first."""
        if count < 1:
            raise ValueError(f"Shade count must be >= 1, got {count}")
        return np.linspace(SHADE_LIGHTEST, SHADE_DARKEST, count, endpoint=False)

    @staticmethod
    def produce_shades(base: RGBColor, count: int) -> List[RGBColor]:
        """Ordered ramp of ``count`` colours anchored on ``base``'s hue."""
        levels = ShadeGenerator.lightness_levels(count)
        h, _, s = colorsys.rgb_to_hls(base.r / 255.0, base.g / 255.0, base.b / 255.0)
        shades = []
        for lightness in levels:
            rgb = colorsys.hls_to_rgb(h, float(lightness), s)
            shades.append(RGBColor(*(int(round(c * 255.0)) for c in rgb)))
        return shades
