"""Selection state machine: hue -> shade -> center swatch.

Pure Python, no Qt dependencies.

    HUE_UNSELECTED --outer click--> HUE_SELECTED
    HUE_SELECTED   --outer click--> HUE_SELECTED   (new ramp)
    HUE_SELECTED   --inner click--> SHADE_SELECTED
    SHADE_SELECTED --outer click--> HUE_SELECTED   (swatch cleared)
    SHADE_SELECTED --inner click--> SHADE_SELECTED

Center-disc clicks, clicks outside every ring and sampling misses leave
the state untouched. Hover never changes state.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..constants import CURSOR_CROSSHAIR, CURSOR_DEFAULT
from ..core.models import (
    MappedPointer,
    Phase,
    Region,
    RGBColor,
    SelectionState,
    WheelBounds,
    WheelConfig,
)
from ..surface import RenderSurface
from .geometry import BoundsCalculator
from .renderer import WheelRenderer
from .sampler import ColorSampler
from .shades import ShadeGenerator

log = logging.getLogger(__name__)

ACTIONABLE_REGIONS = (Region.OUTER_RING, Region.INNER_RING)


def advance(state: SelectionState, region: Region, sampled: Optional[RGBColor],
            shade_count: int) -> SelectionState:
    """Next state for a classified click that sampled ``sampled``."""
    if sampled is None:
        return state
    if region is Region.OUTER_RING:
        shades = tuple(ShadeGenerator.produce_shades(sampled, shade_count))
        return SelectionState(Phase.HUE_SELECTED, sampled, shades)
    if region is Region.INNER_RING and state.inner_ring_visible:
        return SelectionState(Phase.SHADE_SELECTED, sampled, state.shades)
    return state


def cursor_for(region: Region) -> str:
    """Cursor shown while hovering ``region``."""
    if region in ACTIONABLE_REGIONS:
        return CURSOR_CROSSHAIR
    return CURSOR_DEFAULT


class SelectionStateMachine:
    """
    Owns the SelectionState of one mounted wheel.

    Classifies pointer positions, samples the painted pixel, derives the
    shade ramp, redraws the affected regions and emits the selection
    callback. One event is fully handled before the next is accepted.
    """

    def __init__(self, config: WheelConfig, surface: RenderSurface,
                 bounds: Optional[WheelBounds] = None,
                 on_colour_selected: Optional[Callable[[Any], None]] = None):
        self.config = config
        self.surface = surface
        self.bounds = bounds or BoundsCalculator.for_config(config)
        self.renderer = WheelRenderer(surface, config)
        self.on_colour_selected = on_colour_selected
        self._state = SelectionState()

    @property
    def state(self) -> SelectionState:
        return self._state

    def start(self) -> None:
        """Draw the hue ring and begin at HUE_UNSELECTED."""
        self._state = SelectionState()
        self.renderer.draw_hue_ring(self.config.hue_colours, self.config.outer_radius,
                                    self.config.line_width)

    def reset(self) -> None:
        """Drop any selection and show only the hue ring again."""
        log.info("Selection reset (was %s)", self._state.phase.name)
        self.start()

    def classify(self, pointer: MappedPointer) -> Region:
        return BoundsCalculator.classify(pointer.distance_from_center, self.bounds,
                                         self._state.inner_ring_visible)

    def hover(self, pointer: MappedPointer) -> str:
        """Cursor name for a hover position. Never mutates state."""
        return cursor_for(self.classify(pointer))

    def click(self, pointer: MappedPointer) -> bool:
        """Handle one click. Returns True when a colour was selected."""
        region = self.classify(pointer)
        if region not in ACTIONABLE_REGIONS:
            log.debug("Click at (%.1f, %.1f) in %s ignored",
                      pointer.x, pointer.y, region.name)
            return False

        sampled = ColorSampler.sample_at(self.surface, pointer.x, pointer.y)
        if sampled is None:
            log.debug("Click at (%.1f, %.1f) sampled nothing", pointer.x, pointer.y)
            return False

        previous = self._state
        self._state = advance(previous, region, sampled, self.config.shade_count)
        log.info("%s -> %s via %s, colour %s", previous.phase.name,
                 self._state.phase.name, region.name, sampled.hex)

        self._emit(sampled)
        if region is Region.OUTER_RING:
            self.renderer.draw_shade_ring(self._state.shades, self.config.inner_radius,
                                          self.config.line_width)
        else:
            self.renderer.draw_center_swatch(sampled, self.config.center_radius)
        return True

    def _emit(self, colour: RGBColor) -> None:
        if not self.on_colour_selected:
            return
        payload = colour.to_string() if self.config.use_string_format else colour
        self.on_colour_selected(payload)
