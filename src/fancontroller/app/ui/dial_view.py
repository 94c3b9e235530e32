"""
Circular fan speed dial.

Clicking the dial (or pressing Space/Enter while it has focus) advances the
fan speed OFF -> LOW -> MEDIUM -> HIGH -> OFF. The dial is painted as a disc
colored for the current speed, a small indicator dot pointing at the current
speed and the speed labels around the rim.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from PySide6.QtCore import Qt, QPointF, QSize, Signal, QT_TRANSLATE_NOOP, QCoreApplication
from PySide6.QtGui import QPainter, QColor, QBrush, QFont, QFontMetricsF, QPaintEvent, QResizeEvent, QMouseEvent, QKeyEvent
from PySide6.QtWidgets import QWidget

from fancontroller.app.settings import load_dial_colors
from fancontroller.model.fan_speed import FanSpeed
from fancontroller.model.geometry_utils import RADIUS_OFFSET_INDICATOR, RADIUS_OFFSET_LABEL, label_positions
from fancontroller.model.state import BLACK, DialColors, DialState

logger = logging.getLogger(__name__)

# Label identifiers -> translatable source text
FAN_SPEED_LABELS = {
    "fan_off": QT_TRANSLATE_NOOP("DialView", "off"),
    "fan_low": QT_TRANSLATE_NOOP("DialView", "1"),
    "fan_medium": QT_TRANSLATE_NOOP("DialView", "2"),
    "fan_high": QT_TRANSLATE_NOOP("DialView", "3"),
}

LABEL_TEXT_SIZE = 55  # px

ACTIVATION_KEYS = (Qt.Key.Key_Space, Qt.Key.Key_Return, Qt.Key.Key_Enter)


def resolve_label(speed: FanSpeed) -> str:
    """Translated display text for `speed`."""
    return QCoreApplication.translate("DialView", FAN_SPEED_LABELS[speed.label])


def label_font() -> QFont:
    font = QFont()
    font.setPixelSize(LABEL_TEXT_SIZE)
    font.setBold(True)
    return font


def draw_dial(state: DialState, canvas: Any, resolve: Callable[[FanSpeed], str] = resolve_label) -> None:
    """
    Paint the dial for `state` onto `canvas`.

    Args:
        state: Current dial state. Its radius must already match its size.
        canvas: A QPainter, or anything exposing the same drawing calls.
        resolve: Maps a speed to the text drawn for its label.
    """
    cx, cy = state.center

    # Dial background
    canvas.setPen(Qt.PenStyle.NoPen)
    canvas.setBrush(QBrush(QColor.fromRgba(state.fill_color())))
    canvas.drawEllipse(QPointF(cx, cy), state.radius, state.radius)

    # Indicator for the current speed
    point = state.locate(state.speed, state.radius + RADIUS_OFFSET_INDICATOR)
    canvas.setBrush(QBrush(QColor.fromRgba(BLACK)))
    canvas.drawEllipse(QPointF(point.x, point.y), state.indicator_radius, state.indicator_radius)

    # Labels around the rim, centred horizontally with the baseline on the point
    font = label_font()
    metrics = QFontMetricsF(font)
    canvas.setPen(QColor.fromRgba(BLACK))
    canvas.setFont(font)
    positions = label_positions(state.radius + RADIUS_OFFSET_LABEL, state.width, state.height)
    for speed, (x, y) in zip(FanSpeed, positions):
        text = resolve(speed)
        canvas.drawText(QPointF(float(x) - metrics.horizontalAdvance(text) / 2, float(y)), text)


class DialView(QWidget):
    """Clickable dial cycling through the fan speeds."""
    speed_changed = Signal(int)

    def __init__(self, colors: DialColors | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        # Colors are fixed for the lifetime of the widget
        self.state = DialState(colors=colors if colors is not None else load_dial_colors())
        self._click_handler: Callable[[], bool] | None = None

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(200, 200)
        self.setAccessibleName(self.tr("Fan speed dial"))
        self.setAccessibleDescription(resolve_label(self.state.speed))
        self.on_resize(self.width(), self.height())

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def speed(self) -> FanSpeed:
        return self.state.speed

    @property
    def colors(self) -> DialColors:
        return self.state.colors

    def sizeHint(self) -> QSize:
        return QSize(400, 400)

    def set_click_handler(self, handler: Callable[[], bool] | None) -> None:
        """
        Install a handler that runs before the dial reacts to a click.

        If the handler returns True the click is considered consumed and the
        speed does not change.
        """
        self._click_handler = handler

    def perform_click(self) -> bool:
        """Advance to the next speed. Always reports the click as handled."""
        if self._click_handler is not None and self._click_handler():
            return True

        speed = self.state.advance()
        self.setAccessibleDescription(resolve_label(speed))
        logger.debug("Fan speed changed to %s", speed.name)

        self.update()
        self.speed_changed.emit(int(speed))
        return True

    def on_resize(self, width: float, height: float) -> float:
        """Recompute the dial radius for a new widget size."""
        return self.state.on_resize(width, height)

    # ------------------------------------------------------------------------------
    # Qt event handlers
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.on_resize(event.size().width(), event.size().height())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.perform_click()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() in ACTIVATION_KEYS and not event.isAutoRepeat():
            self.perform_click()
            event.accept()
            return
        super().keyPressEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            draw_dial(self.state, painter)
        finally:
            painter.end()
