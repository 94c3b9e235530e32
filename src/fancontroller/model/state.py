"""
Dial State (Data Model)
=======================
This module defines the per-widget state of the fan dial.

Why is this file needed?
------------------------
1. State Management: It holds the selected speed, the current size and the
   dial radius in one place.
2. Decoupling: The widget reads from this object for painting and writes to
   it only from its resize and activate handlers.

Classes:
    DialColors: Fill colors configured for the non-OFF speeds.
    DialState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from fancontroller.model.fan_speed import FanSpeed
from fancontroller.model.geometry_utils import (
    INDICATOR_RADIUS_DIVISOR, Point, compute_xy_for_speed, dial_radius
)

logger = logging.getLogger(__name__)

# ARGB
GRAY: int = 0xFF888888
BLACK: int = 0xFF000000


@dataclass(frozen=True)
class DialColors:
    """ARGB fill colors of the dial; 0 (transparent) when not configured."""
    low: int = 0
    medium: int = 0
    high: int = 0


@dataclass
class DialState:
    colors: DialColors = field(default_factory=DialColors)
    speed: FanSpeed = FanSpeed.OFF
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0

    # Scratch buffer for drawing, overwritten by every locate() call
    point: Point = field(default_factory=Point, repr=False, compare=False)

    def on_resize(self, width: float, height: float) -> float:
        """Store the new size and recompute the dial radius."""
        self.width = width
        self.height = height
        self.radius = dial_radius(width, height)
        logger.debug("Dial resized to %sx%s, radius %.2f", width, height, self.radius)
        return self.radius

    def advance(self) -> FanSpeed:
        """Switch to the next speed and return it."""
        self.speed = self.speed.next()
        return self.speed

    def fill_color(self) -> int:
        """Dial background color for the current speed."""
        if self.speed == FanSpeed.LOW:
            return self.colors.low
        if self.speed == FanSpeed.MEDIUM:
            return self.colors.medium
        if self.speed == FanSpeed.HIGH:
            return self.colors.high
        return GRAY

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def indicator_radius(self) -> float:
        return self.radius / INDICATOR_RADIUS_DIVISOR

    def locate(self, speed: FanSpeed, radius: float) -> Point:
        """Position of `speed` at `radius`, written into the shared point buffer."""
        return compute_xy_for_speed(self.point, speed, radius, self.width, self.height)
