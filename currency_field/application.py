"""Application factory — QApplication creation, theme loading, i18n setup."""

import sys
from pathlib import Path

from PyQt6.QtCore import qInstallMessageHandler, QtMsgType
from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QFont

from currency_field.constants import APP_NAME, APP_ORGANIZATION, DEFAULT_LANGUAGE
from currency_field.core.i18n import TranslationManager


def _qt_message_handler(msg_type, context, message):
    """Filter Qt debug/warning messages.

    Suppresses harmless QPainter warnings emitted while style caches are
    built for widgets that do not have a valid size yet.
    """
    if "QPainter" in message:
        return

    if msg_type in (QtMsgType.QtWarningMsg, QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
        print(message, file=sys.stderr)


def create_application(argv: list[str], lang: str = DEFAULT_LANGUAGE) -> QApplication:
    """Create and configure the QApplication instance."""
    qInstallMessageHandler(_qt_message_handler)

    app = QApplication(argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)

    font = QFont("Segoe UI", 10)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    app.setFont(font)

    qss_path = Path(__file__).parent / "ui" / "styles" / "theme.qss"
    if qss_path.exists():
        app.setStyleSheet(qss_path.read_text(encoding="utf-8"))

    TranslationManager.init(lang)
    return app
