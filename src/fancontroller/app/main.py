"""
Run with: python -m fancontroller
"""
from __future__ import annotations

import sys

from fancontroller.app.application import create_app
from fancontroller.app.ui.main_window import MainWindow
from fancontroller.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    setup_logging()
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
