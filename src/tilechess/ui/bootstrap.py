"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys

from tilechess.config import AppSettings
from tilechess.game.session import GameSession

_LOGGER = logging.getLogger(__name__)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application.

    The session is created before Qt starts, so a bad placement string
    fails without opening a window.
    """
    from PyQt6.QtWidgets import QApplication

    from tilechess.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    session = GameSession(settings.placement)
    _LOGGER.info("Starting session from %r", settings.placement)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("tilechess")
    app.setStyle("Fusion")

    window = MainWindow(session, settings)
    window.show()

    return app.exec()
