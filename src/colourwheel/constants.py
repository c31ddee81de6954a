"""Shared constants for the colour wheel (defaults, palette, angles)."""

import math

# =============================================================================
# Angles (radians, clockwise from 3 o'clock in y-down screen space)
# =============================================================================

FULL_CIRCLE = 2 * math.pi
QUARTER_CIRCLE = FULL_CIRCLE / 4

# Shade ring starts a quarter turn in, so the lightest shade sits at 6 o'clock
SHADE_RING_OFFSET = QUARTER_CIRCLE

# Border stroked around the center swatch (px)
CENTER_BORDER_WIDTH = 0.1

# =============================================================================
# Widget option defaults
# =============================================================================

DEFAULT_RADIUS = 200
DEFAULT_LINE_WIDTH = 50
DEFAULT_PADDING = 0
DEFAULT_SHADE_COUNT = 16
DEFAULT_USE_STRING_FORMAT = True
DEFAULT_DYNAMIC_CURSOR = False

# Hue ring palette, in angular order
DEFAULT_HUE_COLOURS = (
    '#00C3A9',
    '#00B720',
    '#008813',
    '#7ED321',
    '#F8E71C',
    '#F5A623',
    '#FF6400',
    '#E30000',
    '#EC2065',
    '#EF0080',
    '#C200C7',
    '#6A1F9B',
    '#4A00E0',
    '#1A4FC9',
    '#0074C1',
    '#00A9FF',
)

# Shade ramp lightness bounds (HSL)
SHADE_LIGHTEST = 0.9
SHADE_DARKEST = 0.1

# PillowSurface draws at this multiple of the surface size, then boxes down
DEFAULT_SUPERSAMPLE = 4

# =============================================================================
# Cursor names reported by hover handling
# =============================================================================

CURSOR_CROSSHAIR = 'crosshair'
CURSOR_DEFAULT = 'default'
