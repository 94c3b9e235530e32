import logging

from PySide6.QtCore import QSettings

from fancontroller.app.settings import load_dial_colors, parse_color
from fancontroller.config import SETTINGS_LOW_COLOR, SETTINGS_MEDIUM_COLOR, SETTINGS_HIGH_COLOR
from fancontroller.model.state import DialColors


def test_parse_color_integers():
    assert parse_color(0xFF00FF00) == 0xFF00FF00
    assert parse_color(-16711936) == 0xFF00FF00


def test_parse_color_strings(qapp):
    assert parse_color("0xFFFF0000") == 0xFFFF0000
    assert parse_color("4278255360") == 0xFF00FF00
    assert parse_color("#FF00FF00") == 0xFF00FF00
    assert parse_color("#00ff00") == 0xFF00FF00
    assert parse_color("yellow") == 0xFFFFFF00


def test_parse_color_missing():
    assert parse_color(None) == 0
    assert parse_color("") == 0
    assert parse_color(None, default=7) == 7


def test_parse_color_invalid_logs_warning(qapp, caplog):
    with caplog.at_level(logging.WARNING, logger="fancontroller.app.settings"):
        assert parse_color("not-a-color") == 0
        assert parse_color("12zz") == 0
    assert len(caplog.records) == 2


def test_load_dial_colors(qapp, tmp_path):
    settings = QSettings(str(tmp_path / "dial.ini"), QSettings.Format.IniFormat)
    settings.setValue(SETTINGS_LOW_COLOR, "#FF00FF00")
    settings.setValue(SETTINGS_MEDIUM_COLOR, "yellow")

    colors = load_dial_colors(settings)
    assert colors == DialColors(low=0xFF00FF00, medium=0xFFFFFF00, high=0)


def test_load_dial_colors_from_file(qapp, tmp_path):
    path = tmp_path / "dial.ini"
    path.write_text(
        "[dial]\n"
        "lowColor=0xFF00FF00\n"
        "mediumColor=0xFFFFFF00\n"
        "highColor=0xFFFF0000\n",
        encoding="utf-8",
    )
    settings = QSettings(str(path), QSettings.Format.IniFormat)
    assert settings.contains(SETTINGS_HIGH_COLOR)

    colors = load_dial_colors(settings)
    assert colors == DialColors(low=0xFF00FF00, medium=0xFFFFFF00, high=0xFFFF0000)


def test_parse_color_rejects_booleans():
    assert parse_color(True) == 0
    assert parse_color(False, default=5) == 5
