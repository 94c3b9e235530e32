import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from fancontroller.model.state import DialColors  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def colors():
    return DialColors(low=0xFF00FF00, medium=0xFFFFFF00, high=0xFFFF0000)
