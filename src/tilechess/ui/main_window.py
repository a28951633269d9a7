"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow

from tilechess.config import AppSettings
from tilechess.game.session import GameSession
from tilechess.ui.board.board_scene import BoardScene
from tilechess.ui.board.board_view import BoardView
from tilechess.ui.styles.theme import BoardTheme


class MainWindow(QMainWindow):
    """Main application window: a single square board view.

    The session may outlive the window; closing the window unsubscribes its
    scene from the session's events.
    """

    def __init__(
        self,
        session: GameSession,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        self._session = session

        scene = BoardScene(session, self._settings.tile_size, self)
        self._board_view = BoardView(scene, self)
        self.setCentralWidget(self._board_view)
        self._apply_settings()
        self._board_view.setFocus()

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def _apply_settings(self) -> None:
        s = self._settings
        self.setWindowTitle(s.window_title)
        self.resize(s.window_size, s.window_size)

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_destinations(s.show_destinations)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._board_view.board_scene.detach()
        super().closeEvent(event)
