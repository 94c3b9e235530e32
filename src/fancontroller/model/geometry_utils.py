from __future__ import annotations

from dataclasses import dataclass
from math import cos, sin, pi
from typing import TYPE_CHECKING

import numpy as np

from fancontroller.model.fan_speed import FanSpeed

if TYPE_CHECKING:
    from numpy import typing as npt

# Angles are in radians. OFF sits in the lower-left of the dial.
START_ANGLE: float = pi * (9 / 8.0)
ANGLE_STEP: float = pi / 4

DIAL_RADIUS_FACTOR: float = 0.8

RADIUS_OFFSET_LABEL: float = 30
RADIUS_OFFSET_INDICATOR: float = -35

# Indicator radius is the dial radius divided by this.
INDICATOR_RADIUS_DIVISOR: float = 12


@dataclass
class Point:
    """A mutable point in widget coordinates."""
    x: float = 0.0
    y: float = 0.0


def dial_radius(width: float, height: float) -> float:
    """Radius of the dial for a widget of the given size."""
    return min(width, height) / 2.0 * DIAL_RADIUS_FACTOR


def speed_angle(speed: FanSpeed) -> float:
    return START_ANGLE + int(speed) * ANGLE_STEP


def compute_xy_for_speed(
    point: Point,
    speed: FanSpeed,
    radius: float,
    width: float,
    height: float
) -> Point:
    """
    Write the position of `speed` on a circle of `radius` into `point`.

    The circle is centred in a `width` x `height` area. The previous content of
    `point` is overwritten entirely.

    Returns:
        The same `point` instance, for chaining.
    """
    angle = speed_angle(speed)
    point.x = radius * cos(angle) + width / 2
    point.y = radius * sin(angle) + height / 2
    return point


def position_for(speed: FanSpeed, radius: float, width: float, height: float) -> Point:
    """Position of `speed` on a circle of `radius` centred in the given area."""
    return compute_xy_for_speed(Point(), speed, radius, width, height)


def label_positions(radius: float, width: float, height: float) -> npt.NDArray[np.float64]:
    """
    Positions of every speed on a circle of `radius`, in ordinal order.

    Args:
        radius: Distance of the points from the centre.
        width: Width of the drawing area.
        height: Height of the drawing area.

    Returns:
        An array of shape (4, 2) containing the (x, y) coordinates, row `i`
        belonging to `FanSpeed(i)`.
    """
    ordinals = np.array([int(s) for s in FanSpeed], dtype=np.float64)
    theta = START_ANGLE + ordinals * ANGLE_STEP
    return np.c_[radius * np.cos(theta) + width / 2, radius * np.sin(theta) + height / 2]
