"""
Colour wheel controllers - host lifecycle adapters around the services.

Controllers are GUI-framework independent. They:
1. Compute geometry once, before any surface exists
2. Own the SelectionStateMachine for the lifetime of a mounted surface
3. Turn viewport pointer events into surface coordinates
4. Emit callbacks that views subscribe to for updates
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..constants import SHADE_RING_OFFSET
from ..services.geometry import BoundsCalculator, CoordinateMapper
from ..services.selection import SelectionStateMachine
from ..surface import RenderSurface
from .models import (
    MappedPointer,
    RGBColor,
    SelectionState,
    SurfaceBox,
    WheelConfig,
)

log = logging.getLogger(__name__)


class ColourWheelController:
    """
    Controller for one colour wheel instance.

    Mount/unmount mirror the host lifecycle: the surface is only drawn on
    and sampled while mounted, and is exclusively owned until unmount.
    """

    def __init__(self, config: Optional[WheelConfig] = None,
                 surface: Optional[RenderSurface] = None,
                 on_colour_selected: Optional[Callable[[Any], None]] = None):
        self.config = config or WheelConfig()
        self.bounds = BoundsCalculator.for_config(self.config)
        self._machine: Optional[SelectionStateMachine] = None

        # View callbacks
        self.on_colour_selected = on_colour_selected
        self.on_cursor_changed: Optional[Callable[[str], None]] = None
        self.on_redraw: Optional[Callable[[], None]] = None

        self.handle = WheelHandle(self)

        if surface is not None:
            self.mount(surface)

    # ----------------------------------------------------------------
    # Lifecycle
    # ----------------------------------------------------------------

    @property
    def is_mounted(self) -> bool:
        return self._machine is not None

    @property
    def surface(self) -> Optional[RenderSurface]:
        return self._machine.surface if self._machine else None

    def mount(self, surface: RenderSurface) -> None:
        """Take ownership of ``surface`` and draw the hue ring."""
        size = self.config.size
        if surface.width != size or surface.height != size:
            raise ValueError(
                f"Surface is {surface.width}x{surface.height}, wheel needs {size}x{size}")
        if self._machine is not None:
            log.debug("Remounting colour wheel; previous surface released")

        self._machine = SelectionStateMachine(
            self.config, surface, self.bounds, on_colour_selected=self._on_selected)
        self._machine.start()
        log.info("Colour wheel mounted (%dx%d, %d hues, %d shades)", size, size,
                 len(self.config.hue_colours), self.config.shade_count)
        self._notify_redraw()

    def unmount(self) -> None:
        """Release the surface. Later events are ignored until remounted."""
        if self._machine is None:
            return
        self._machine = None
        log.info("Colour wheel unmounted")

    # ----------------------------------------------------------------
    # State
    # ----------------------------------------------------------------

    @property
    def state(self) -> SelectionState:
        return self._machine.state if self._machine else SelectionState()

    # ----------------------------------------------------------------
    # Pointer events
    # ----------------------------------------------------------------

    def map_pointer(self, client_x: float, client_y: float,
                    box: Optional[SurfaceBox] = None) -> MappedPointer:
        return CoordinateMapper.map_pointer(client_x, client_y, box or SurfaceBox(),
                                            self.config.radius)

    def click(self, client_x: float, client_y: float,
              box: Optional[SurfaceBox] = None) -> bool:
        """Handle a click in viewport coordinates. True if a colour was picked."""
        if self._machine is None:
            log.debug("Click ignored: wheel not mounted")
            return False
        if self._machine.click(self.map_pointer(client_x, client_y, box)):
            self._notify_redraw()
            return True
        return False

    def hover(self, client_x: float, client_y: float,
              box: Optional[SurfaceBox] = None) -> Optional[str]:
        """Cursor for a hover, or None when dynamic cursors are off."""
        if not self.config.dynamic_cursor or self._machine is None:
            return None
        cursor = self._machine.hover(self.map_pointer(client_x, client_y, box))
        if self.on_cursor_changed:
            self.on_cursor_changed(cursor)
        return cursor

    # ----------------------------------------------------------------
    # Programmatic control (exposed through WheelHandle)
    # ----------------------------------------------------------------

    def select_hue(self, index: int) -> bool:
        """Click the middle of hue arc ``index``."""
        count = len(self.config.hue_colours)
        if not 0 <= index < count:
            raise IndexError(f"Hue index {index} out of range 0-{count - 1}")
        return self._click_arc(index, count, 0.0, self.config.outer_radius)

    def select_shade(self, index: int) -> bool:
        """Click the middle of shade arc ``index``. Needs a hue picked first."""
        count = len(self.state.shades)
        if not self.state.inner_ring_visible:
            log.debug("select_shade(%d) ignored: no hue selected", index)
            return False
        if not 0 <= index < count:
            raise IndexError(f"Shade index {index} out of range 0-{count - 1}")
        return self._click_arc(index, count, SHADE_RING_OFFSET, self.config.inner_radius)

    def reset(self) -> None:
        if self._machine is None:
            return
        self._machine.reset()
        self._notify_redraw()

    def _click_arc(self, index: int, count: int, offset: float, radius: float) -> bool:
        start, end = CoordinateMapper.segment_angles(count, offset)[index]
        effective = CoordinateMapper.effective_radius(radius, self.config.line_width)
        x, y = CoordinateMapper.point_at(self.config.radius, self.config.radius,
                                         effective, (start + end) / 2)
        return self.click(x, y)

    # ----------------------------------------------------------------
    # Callbacks
    # ----------------------------------------------------------------

    def _on_selected(self, payload: Any) -> None:
        if self.on_colour_selected:
            self.on_colour_selected(payload)

    def _notify_redraw(self) -> None:
        if self.on_redraw:
            self.on_redraw()


class WheelHandle:
    """Narrow control interface handed to a wheel's owner."""

    def __init__(self, controller: ColourWheelController):
        self._controller = controller

    @property
    def state(self) -> SelectionState:
        return self._controller.state

    @property
    def colour(self) -> Optional[RGBColor]:
        return self._controller.state.colour

    def select_hue(self, index: int) -> bool:
        return self._controller.select_hue(index)

    def select_shade(self, index: int) -> bool:
        return self._controller.select_shade(index)

    def reset(self) -> None:
        self._controller.reset()
