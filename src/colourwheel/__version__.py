"""Colour wheel version information."""

__version__ = "1.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 1.1.0 - Hue ring, shade ring and center swatch with a PySide6 widget,
#         WheelHandle control interface, config persistence and CLI
