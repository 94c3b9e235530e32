"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with fan speeds, dial geometry and dial state.
"""
from fancontroller.model.fan_speed import FanSpeed
from fancontroller.model.geometry_utils import Point, position_for, label_positions, dial_radius
from fancontroller.model.state import DialColors, DialState, GRAY, BLACK
