"""PySide6 GUI components for the colour wheel."""

from .base import pil_to_pixmap
from .qt_app import ColourWheelWindow, run_app
from .uc_colour_wheel import UCColourWheel

__all__ = [
    'ColourWheelWindow',
    'UCColourWheel',
    'pil_to_pixmap',
    'run_app',
]
