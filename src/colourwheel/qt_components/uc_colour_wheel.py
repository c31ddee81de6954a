"""
Radial colour picker widget.

Hue ring outside, shade ring revealed after a hue is picked, center swatch
for the final colour. Drawing and hit-testing live in ColourWheelController;
this widget only hosts the surface and forwards pointer events.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QWidget

from ..constants import CURSOR_CROSSHAIR, CURSOR_DEFAULT
from ..core.controllers import ColourWheelController, WheelHandle
from ..core.models import SelectionState, WheelConfig
from ..surface import PillowSurface
from .base import pil_to_pixmap

log = logging.getLogger(__name__)

CURSOR_SHAPES = {
    CURSOR_CROSSHAIR: Qt.CursorShape.CrossCursor,
    CURSOR_DEFAULT: Qt.CursorShape.ArrowCursor,
}


class UCColourWheel(QWidget):
    """Colour wheel with click selection and optional hover cursor.

    Attributes:
        colour_selected: Emitted with an 'rgb(r, g, b)' string or an
            RGBColor (per ``use_string_format``) on every successful pick.
    """

    colour_selected = Signal(object)

    def __init__(self, config: Optional[WheelConfig] = None, parent=None):
        super().__init__(parent)
        self._config = config or WheelConfig()
        self._pixmap = None

        self._controller = ColourWheelController(self._config)
        self._controller.on_colour_selected = self._on_colour_selected
        self._controller.on_cursor_changed = self._on_cursor_changed
        self._controller.on_redraw = self._on_redraw

        size = self._config.size
        self.setFixedSize(size, size)
        self.setMouseTracking(self._config.dynamic_cursor)

        self._surface = PillowSurface(size)
        self._controller.mount(self._surface)

    # ----------------------------------------------------------------
    # Public API
    # ----------------------------------------------------------------

    @property
    def handle(self) -> WheelHandle:
        return self._controller.handle

    @property
    def state(self) -> SelectionState:
        return self._controller.state

    @property
    def surface(self) -> PillowSurface:
        return self._surface

    # ----------------------------------------------------------------
    # Painting
    # ----------------------------------------------------------------

    def _on_redraw(self):
        self._pixmap = None
        self.update()

    def paintEvent(self, event):
        if self._pixmap is None:
            self._pixmap = pil_to_pixmap(self._surface.image)
        painter = QPainter(self)
        painter.drawPixmap(0, 0, self._pixmap)
        painter.end()

    # ----------------------------------------------------------------
    # Mouse interaction
    # ----------------------------------------------------------------

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._controller.click(pos.x(), pos.y())
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        pos = event.position()
        self._controller.hover(pos.x(), pos.y())
        super().mouseMoveEvent(event)

    def closeEvent(self, event):
        self._controller.unmount()
        super().closeEvent(event)

    # ----------------------------------------------------------------
    # Controller callbacks
    # ----------------------------------------------------------------

    def _on_colour_selected(self, payload: Any):
        log.debug("Colour selected: %s", payload)
        self.colour_selected.emit(payload)

    def _on_cursor_changed(self, cursor: str):
        self.setCursor(CURSOR_SHAPES.get(cursor, Qt.CursorShape.ArrowCursor))
