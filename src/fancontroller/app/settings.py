"""
Dial configuration read from QSettings.

Colors may be stored as integers (ARGB) or as strings understood by QColor
("#AARRGGBB", "#RRGGBB", SVG names) or Python integer literals ("0xFF00FF00").
Anything missing or unreadable falls back to 0, i.e. transparent.
"""
from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QSettings
from PySide6.QtGui import QColor

from fancontroller.config import SETTINGS_LOW_COLOR, SETTINGS_MEDIUM_COLOR, SETTINGS_HIGH_COLOR
from fancontroller.model.state import DialColors

logger = logging.getLogger(__name__)


def parse_color(value: Any, default: int = 0) -> int:
    """Convert a settings value to an ARGB integer."""
    if value is None or value == "":
        return default
    if isinstance(value, QColor):
        return value.rgba() if value.isValid() else default
    if isinstance(value, int) and not isinstance(value, bool):
        return value & 0xFFFFFFFF

    text = str(value).strip()
    if text[:1].isdigit():
        try:
            return int(text, 0) & 0xFFFFFFFF
        except ValueError:
            logger.warning("Invalid color value '%s', using default.", text)
            return default

    color = QColor(text)
    if not color.isValid():
        logger.warning("Invalid color value '%s', using default.", text)
        return default
    return color.rgba()


def load_dial_colors(settings: QSettings | None = None) -> DialColors:
    """Read the LOW/MEDIUM/HIGH fill colors from the application settings."""
    settings = settings if settings is not None else QSettings()
    return DialColors(
        low=parse_color(settings.value(SETTINGS_LOW_COLOR)),
        medium=parse_color(settings.value(SETTINGS_MEDIUM_COLOR)),
        high=parse_color(settings.value(SETTINGS_HIGH_COLOR)),
    )
