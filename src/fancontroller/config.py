"""
Configuration Keys & Constants
==============================
This module serves as the central registry for settings keys and global
constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps QSettings keys out of the widgets, so the INI file
   layout is defined in one place.
2. Defaults: It holds the application-wide defaults used when no settings
   file exists yet.

Exports:
    SETTINGS_LOW_COLOR, SETTINGS_MEDIUM_COLOR, SETTINGS_HIGH_COLOR (str):
        QSettings keys holding the dial fill colors.
    SETTINGS_LANGUAGE (str): QSettings key holding the UI language code.
    DEFAULT_WINDOW_SIZE (tuple[int, int]): Initial main window size.
"""

# Settings keys
SETTINGS_LOW_COLOR: str = "dial/lowColor"
SETTINGS_MEDIUM_COLOR: str = "dial/mediumColor"
SETTINGS_HIGH_COLOR: str = "dial/highColor"
SETTINGS_LANGUAGE: str = "ui/language"

# Window
DEFAULT_WINDOW_SIZE: tuple[int, int] = (600, 600)
