"""
Colour wheel core - models + controllers.

Models: data classes only (RGBColor, WheelConfig, SelectionState, ...)
Controllers: host lifecycle adapters that wrap the services

Note: controllers are NOT re-exported here to avoid circular imports
(services -> core.models -> core.__init__ -> controllers -> services).
Import controllers directly: `from colourwheel.core.controllers import ...`
"""

from .models import (
    MappedPointer,
    Phase,
    Region,
    RGBColor,
    RingBounds,
    SelectionState,
    SurfaceBox,
    WheelBounds,
    WheelConfig,
    WheelConfigError,
)

__all__ = [
    'MappedPointer',
    'Phase',
    'Region',
    'RGBColor',
    'RingBounds',
    'SelectionState',
    'SurfaceBox',
    'WheelBounds',
    'WheelConfig',
    'WheelConfigError',
]
