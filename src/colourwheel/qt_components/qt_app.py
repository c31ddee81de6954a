"""
PySide6 demo window: colour wheel, last selection readout and Reset button.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..core.models import RGBColor, WheelConfig
from .uc_colour_wheel import UCColourWheel

log = logging.getLogger(__name__)


class ColourWheelWindow(QMainWindow):
    """Main window hosting one UCColourWheel."""

    SWATCH_SIZE = 32

    def __init__(self, config: Optional[WheelConfig] = None):
        super().__init__()
        self.setWindowTitle("Colour Wheel")

        self.wheel = UCColourWheel(config, self)
        self.wheel.colour_selected.connect(self._on_colour_selected)

        self.readout = QLabel("Pick a hue on the outer ring")
        self.swatch = QLabel()
        self.swatch.setFixedSize(self.SWATCH_SIZE, self.SWATCH_SIZE)
        self.swatch.setStyleSheet("border: 1px solid #888;")

        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self._on_reset)

        footer = QHBoxLayout()
        footer.addWidget(self.swatch)
        footer.addWidget(self.readout, 1)
        footer.addWidget(self.reset_button)

        layout = QVBoxLayout()
        layout.addWidget(self.wheel, 0, Qt.AlignmentFlag.AlignCenter)
        layout.addLayout(footer)

        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

    def _on_colour_selected(self, payload: Any):
        colour = RGBColor.parse(payload)
        self.readout.setText(f"{colour.to_string()}  {colour.hex}")
        self.swatch.setStyleSheet(f"background-color: {colour.hex}; border: 1px solid #888;")

    def _on_reset(self):
        self.wheel.handle.reset()
        self.readout.setText("Pick a hue on the outer ring")
        self.swatch.setStyleSheet("border: 1px solid #888;")


def run_app(config: Optional[WheelConfig] = None) -> int:
    """Run the demo application. Returns the Qt exit code."""
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Colour Wheel")

    window = ColourWheelWindow(config)
    window.show()
    log.info("Colour wheel window shown")
    return app.exec()


if __name__ == '__main__':
    sys.exit(run_app())
