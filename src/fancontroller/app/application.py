from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings, QTranslator

import logging
import sys
import os

from fancontroller.config import SETTINGS_LANGUAGE

logger = logging.getLogger(__name__)

ORG_ID = "fancontroller"
APP_ID = "fan-dial"
ORG_DOMAIN = "fancontroller.local"

VISIBLE_APP_NAME = "Fan Controller"

_TRANSLATOR: QTranslator | None = None


def install_translator(app: QCoreApplication, lang_code: str | None = None) -> bool:
    """Install the appropriate translator for the given language code."""
    from importlib.resources import files

    global _TRANSLATOR

    # Remove any existing translator
    if _TRANSLATOR is not None:
        app.removeTranslator(_TRANSLATOR)
        _TRANSLATOR = None

    # English is the source language, no translator needed
    if not lang_code or lang_code.lower() in ["en", "en_us", "en_gb"]:
        return True

    base = files("fancontroller.resources.i18n.qm")
    qm = base.joinpath(f"app_{lang_code}.qm")

    if not qm.is_file():
        logger.warning("No translation found for language '%s'.", lang_code)
        return False

    ok = False
    tr = QTranslator(app)
    if tr.load(str(qm)):
        ok = app.installTranslator(tr)
        if ok:
            _TRANSLATOR = tr

    return ok


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv)

    lang = QSettings().value(SETTINGS_LANGUAGE, "", type=str) or None
    install_translator(app, lang)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
