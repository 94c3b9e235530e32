"""
Fan Speed Levels
================
The ordered set of speeds the dial cycles through.

The value of each member is its ordinal, which is used directly when placing
the indicator and labels around the dial. Labels are opaque identifiers; the
UI layer maps them to translatable display strings.
"""
from __future__ import annotations

from enum import IntEnum


class FanSpeed(IntEnum):
    """Discrete fan speeds, in dial order."""
    OFF = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    def next(self) -> FanSpeed:
        """Cyclic successor, HIGH wraps back to OFF."""
        return FanSpeed((self + 1) % len(FanSpeed))


_LABELS: dict[FanSpeed, str] = {
    FanSpeed.OFF: "fan_off",
    FanSpeed.LOW: "fan_low",
    FanSpeed.MEDIUM: "fan_medium",
    FanSpeed.HIGH: "fan_high",
}
