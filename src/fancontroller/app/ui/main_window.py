from __future__ import annotations

from PySide6.QtWidgets import QMainWindow, QStatusBar, QWidget, QVBoxLayout

from fancontroller.app.application import VISIBLE_APP_NAME
from fancontroller.app.ui.dial_view import DialView, resolve_label
from fancontroller.config import DEFAULT_WINDOW_SIZE
from fancontroller.model.fan_speed import FanSpeed
from fancontroller.model.state import DialColors


class MainWindow(QMainWindow):
    """Single-dial window with the current speed shown in the status bar."""
    def __init__(self, colors: DialColors | None = None) -> None:
        super().__init__()
        self.setWindowTitle(self.tr(VISIBLE_APP_NAME))
        self.resize(*DEFAULT_WINDOW_SIZE)

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)

        self.dial = DialView(colors, parent=central)
        v.addWidget(self.dial, 1)

        self.setCentralWidget(central)

        self.setStatusBar(QStatusBar(self))
        self.dial.speed_changed.connect(self._on_speed_changed)
        self._on_speed_changed(int(self.dial.speed))

        self.dial.setFocus()

    def _on_speed_changed(self, speed: int) -> None:
        self.statusBar().showMessage(self.tr("Fan speed: %s") % resolve_label(FanSpeed(speed)))
