"""Colour wheel services - pure Python, no Qt.

Business logic shared by all driving adapters:
- core/controllers.py (host lifecycle)
- qt_components (PySide6 widget)
- cli.py (argparse CLI)
"""

from .geometry import BoundsCalculator, CoordinateMapper
from .renderer import WheelRenderer
from .sampler import ColorSampler
from .selection import SelectionStateMachine, advance, cursor_for
from .shades import ShadeGenerator

__all__ = [
    'BoundsCalculator',
    'ColorSampler',
    'CoordinateMapper',
    'SelectionStateMachine',
    'ShadeGenerator',
    'WheelRenderer',
    'advance',
    'cursor_for',
]
