"""
Rendering surfaces the wheel draws onto and samples from.

RenderSurface is the capability contract the core needs; PillowSurface is
the headless implementation used by the Qt widget, the CLI and the tests.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

from PIL import Image, ImageDraw

from .constants import DEFAULT_SUPERSAMPLE

log = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]


class RenderSurface(ABC):
    """Square bitmap with arc/disc primitives and single-pixel read-back.

    Angles are radians, clockwise from 3 o'clock (y grows downwards).
    Colours are anything with ``as_tuple`` or a plain (r, g, b) tuple.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Reset a rectangle to fully transparent."""

    @abstractmethod
    def stroke_arc(self, cx: float, cy: float, radius: float,
                   start: float, end: float, line_width: float, colour: Any) -> None:
        """Stroke an arc whose line is centered on ``radius``."""

    @abstractmethod
    def fill_disc(self, cx: float, cy: float, radius: float, colour: Any) -> None:
        """Fill a full disc."""

    @abstractmethod
    def get_pixel(self, x: int, y: int) -> Optional[RGBA]:
        """Composited RGBA at an integer pixel, None outside the bitmap."""


def _rgba(colour: Any) -> RGBA:
    rgb = colour.as_tuple if hasattr(colour, 'as_tuple') else tuple(colour)
    return (int(rgb[0]), int(rgb[1]), int(rgb[2]), 255)


class PillowSurface(RenderSurface):
    """PIL-backed surface.

    Draws on a transparent RGBA canvas ``supersample`` times larger than the
    surface, then box-filters down, so arc edges come out anti-aliased the
    way a browser canvas paints them. Read-back always comes from the
    composited (downsampled) bitmap.
    """

    def __init__(self, size: int, supersample: int = DEFAULT_SUPERSAMPLE):
        if size <= 0:
            raise ValueError(f"Surface size must be positive, got {size}")
        if supersample < 1:
            raise ValueError(f"supersample must be >= 1, got {supersample}")
        self._size = int(size)
        self._scale = int(supersample)
        self._canvas = Image.new(
            'RGBA', (self._size * self._scale, self._size * self._scale), (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self._canvas)
        self._composite: Optional[Image.Image] = None

    @property
    def width(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return self._size

    @property
    def supersample(self) -> int:
        return self._scale

    @property
    def image(self) -> Image.Image:
        """Composited bitmap at surface resolution (RGBA)."""
        if self._composite is None:
            if self._scale == 1:
                self._composite = self._canvas.copy()
            else:
                self._composite = self._canvas.resize(
                    (self._size, self._size), Image.Resampling.BOX)
        return self._composite

    def to_rgb(self, background: Tuple[int, int, int] = (255, 255, 255)) -> Image.Image:
        """Flatten onto an opaque background (for saving/display)."""
        img = self.image
        bg = Image.new('RGB', img.size, background)
        bg.paste(img, mask=img.split()[3])
        return bg

    def save(self, path: Any, background: Tuple[int, int, int] = (255, 255, 255)) -> None:
        self.to_rgb(background).save(path)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _touch(self) -> None:
        self._composite = None

    def _box(self, cx: float, cy: float, radius: float) -> Tuple[float, float, float, float]:
        s = self._scale
        return (
            (cx - radius) * s,
            (cy - radius) * s,
            (cx + radius) * s,
            (cy + radius) * s,
        )

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        s = self._scale
        x0, y0 = int(x * s), int(y * s)
        x1, y1 = int(math.ceil((x + w) * s)) - 1, int(math.ceil((y + h) * s)) - 1
        if x1 < x0 or y1 < y0:
            return
        self._draw.rectangle((x0, y0, x1, y1), fill=(0, 0, 0, 0))
        self._touch()

    def stroke_arc(self, cx: float, cy: float, radius: float,
                   start: float, end: float, line_width: float, colour: Any) -> None:
        # PIL strokes inwards from the bounding ellipse; push the ellipse out
        # by half the width so the stroke straddles ``radius``.
        outer = radius + line_width / 2
        if outer <= 0:
            return
        width = max(1, int(round(line_width * self._scale)))
        self._draw.arc(
            self._box(cx, cy, outer),
            math.degrees(start),
            math.degrees(end),
            fill=_rgba(colour),
            width=width,
        )
        self._touch()

    def fill_disc(self, cx: float, cy: float, radius: float, colour: Any) -> None:
        if radius <= 0:
            return
        self._draw.ellipse(self._box(cx, cy, radius), fill=_rgba(colour))
        self._touch()

    # ------------------------------------------------------------------
    # Read-back
    # ------------------------------------------------------------------

    def get_pixel(self, x: int, y: int) -> Optional[RGBA]:
        if not (0 <= x < self._size and 0 <= y < self._size):
            return None
        return self.image.getpixel((x, y))
