"""Circular fan speed dial widget for PySide6."""
__version__ = "0.1.0"
