"""
Colour Wheel - interactive radial colour picker

An outer ring of hues, an inner ring of shades derived from the picked
hue, and a center swatch showing the final selection.

Usage:
    # As a library
    from colourwheel import ColourWheelController, PillowSurface, WheelConfig
    config = WheelConfig(radius=200, line_width=50)
    wheel = ColourWheelController(config, PillowSurface(config.size),
                                  on_colour_selected=print)
    wheel.click(287, 351)

    # Command line
    colourwheel gui                       # Launch the Qt picker
    colourwheel render wheel.png          # Render headless
    colourwheel shades ff0000 --count 8   # Print a shade ramp
"""

from colourwheel.__version__ import __version__
from colourwheel.core.controllers import ColourWheelController, WheelHandle
from colourwheel.core.models import (
    Phase,
    Region,
    RGBColor,
    SelectionState,
    SurfaceBox,
    WheelConfig,
    WheelConfigError,
)
from colourwheel.services.shades import ShadeGenerator
from colourwheel.surface import PillowSurface, RenderSurface

__all__ = [
    "__version__",
    "ColourWheelController",
    "WheelHandle",
    "Phase",
    "Region",
    "RGBColor",
    "SelectionState",
    "SurfaceBox",
    "WheelConfig",
    "WheelConfigError",
    "ShadeGenerator",
    "PillowSurface",
    "RenderSurface",
]
