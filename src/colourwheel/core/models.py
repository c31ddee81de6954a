"""
Colour wheel models - pure data classes with no GUI dependencies.

These models can be used by any host (PySide6 widget, CLI, tests).
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import Any, Dict, Mapping, Optional, Tuple

from PIL import ImageColor

from ..constants import (
    DEFAULT_DYNAMIC_CURSOR,
    DEFAULT_HUE_COLOURS,
    DEFAULT_LINE_WIDTH,
    DEFAULT_PADDING,
    DEFAULT_RADIUS,
    DEFAULT_SHADE_COUNT,
    DEFAULT_USE_STRING_FORMAT,
)


class WheelConfigError(ValueError):
    """Wheel options that produce degenerate ring geometry."""


# =============================================================================
# Colour
# =============================================================================

@dataclass(frozen=True)
class RGBColor:
    """Opaque 8-bit RGB colour."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name}={value} outside 0-255")

    @classmethod
    def parse(cls, value: Any) -> 'RGBColor':
        """Build from an RGBColor, an (r, g, b) sequence or a colour string.

        Strings go through Pillow's ImageColor, so '#f00', '#ff0000',
        'rgb(255, 0, 0)' and CSS names all work.
        """
        if isinstance(value, RGBColor):
            return value
        if isinstance(value, str):
            try:
                rgb = ImageColor.getrgb(value)
            except ValueError as e:
                raise ValueError(f"Unknown colour {value!r}") from e
            return cls(*rgb[:3])
        try:
            r, g, b = value[:3]
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot read a colour from {value!r}") from e
        return cls(int(r), int(g), int(b))

    @property
    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_string(self) -> str:
        """Format as the callback string, e.g. 'rgb(255, 0, 0)'."""
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_dict(self) -> Dict[str, int]:
        return {'r': self.r, 'g': self.g, 'b': self.b}


# =============================================================================
# Wheel configuration
# =============================================================================

@dataclass(frozen=True)
class WheelConfig:
    """
    Validated widget options. Built once; geometry derives from it.

    Ring layout, outside in:
        hue ring     [radius - line_width, radius]
        padding
        shade ring   [inner_radius - line_width, inner_radius]
        padding
        center disc  [0, center_radius]
    """
    radius: float = DEFAULT_RADIUS
    line_width: float = DEFAULT_LINE_WIDTH
    padding: float = DEFAULT_PADDING
    hue_colours: Tuple[RGBColor, ...] = DEFAULT_HUE_COLOURS
    shade_count: int = DEFAULT_SHADE_COUNT
    use_string_format: bool = DEFAULT_USE_STRING_FORMAT
    dynamic_cursor: bool = DEFAULT_DYNAMIC_CURSOR

    def __post_init__(self):
        try:
            colours = tuple(RGBColor.parse(c) for c in self.hue_colours)
        except (TypeError, ValueError) as e:
            raise WheelConfigError(f"Invalid hue colour: {e}") from e
        object.__setattr__(self, 'hue_colours', colours)

        for name in ('radius', 'line_width', 'padding'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise WheelConfigError(f"{name} must be a number, got {value!r}")
        if self.radius <= 0:
            raise WheelConfigError(f"radius must be positive, got {self.radius}")
        if self.line_width <= 0:
            raise WheelConfigError(f"line_width must be positive, got {self.line_width}")
        if self.padding < 0:
            raise WheelConfigError(f"padding must not be negative, got {self.padding}")
        if isinstance(self.shade_count, bool) or not isinstance(self.shade_count, int) \
                or self.shade_count < 1:
            raise WheelConfigError(f"shade_count must be a positive int, got {self.shade_count!r}")
        if not colours:
            raise WheelConfigError("hue_colours must not be empty")
        if self.inner_radius <= 0:
            raise WheelConfigError(
                f"inner_radius {self.inner_radius} <= 0 "
                f"(radius={self.radius}, line_width={self.line_width}, padding={self.padding})")
        if self.center_radius <= 0:
            raise WheelConfigError(
                f"center_radius {self.center_radius} <= 0 "
                f"(radius={self.radius}, line_width={self.line_width}, padding={self.padding})")

    @property
    def outer_radius(self) -> float:
        return self.radius

    @property
    def inner_radius(self) -> float:
        return self.outer_radius - self.line_width - self.padding

    @property
    def center_radius(self) -> float:
        return self.inner_radius - self.line_width - self.padding

    @property
    def size(self) -> int:
        """Side length of the square surface, in whole pixels."""
        return int(round(self.radius * 2))

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> 'WheelConfig':
        """Build from a plain dict, ignoring keys that are not options."""
        names = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in options.items() if k in names and v is not None}
        if 'hue_colours' in kwargs:
            kwargs['hue_colours'] = tuple(kwargs['hue_colours'])
        return cls(**kwargs)

    def to_options(self) -> Dict[str, Any]:
        """Inverse of from_options; colours become hex strings."""
        return {
            'radius': self.radius,
            'line_width': self.line_width,
            'padding': self.padding,
            'hue_colours': [c.hex for c in self.hue_colours],
            'shade_count': self.shade_count,
            'use_string_format': self.use_string_format,
            'dynamic_cursor': self.dynamic_cursor,
        }


# =============================================================================
# Geometry
# =============================================================================

@dataclass(frozen=True)
class RingBounds:
    """Closed annulus (or disc when lo == 0) on distance-from-center."""
    lo: float
    hi: float

    def __post_init__(self):
        if not 0 <= self.lo < self.hi:
            raise ValueError(f"RingBounds needs 0 <= lo < hi, got ({self.lo}, {self.hi})")

    def contains(self, distance: float) -> bool:
        return self.lo <= distance <= self.hi


@dataclass(frozen=True)
class WheelBounds:
    """The three hit-test regions, computed once per WheelConfig."""
    outer: RingBounds
    inner: RingBounds
    center: RingBounds


@dataclass(frozen=True)
class SurfaceBox:
    """Surface bounding box in viewport coordinates (top-left corner)."""
    left: float = 0.0
    top: float = 0.0


@dataclass(frozen=True)
class MappedPointer:
    """Pointer position relative to the surface."""
    x: float
    y: float
    distance_from_center: float

    @property
    def on_surface(self) -> Tuple[float, float]:
        return (self.x, self.y)


class Region(Enum):
    """Where a pointer sits on the wheel."""
    OUTER_RING = auto()
    INNER_RING = auto()
    CENTER = auto()
    NONE = auto()


# =============================================================================
# Selection state
# =============================================================================

class Phase(Enum):
    """Selection phase. Only advances, or re-enters HUE_SELECTED on a re-pick."""
    HUE_UNSELECTED = auto()
    HUE_SELECTED = auto()
    SHADE_SELECTED = auto()


@dataclass(frozen=True)
class SelectionState:
    """
    Immutable selection snapshot.

    ``colour`` is the last picked hue or shade; ``shades`` is the ramp
    derived from the last picked hue (empty until a hue is chosen).
    """
    phase: Phase = Phase.HUE_UNSELECTED
    colour: Optional[RGBColor] = None
    shades: Tuple[RGBColor, ...] = field(default_factory=tuple)

    @property
    def inner_ring_visible(self) -> bool:
        return self.phase is not Phase.HUE_UNSELECTED

    @property
    def center_visible(self) -> bool:
        return self.phase is Phase.SHADE_SELECTED
