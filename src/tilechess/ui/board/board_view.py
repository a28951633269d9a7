"""BoardView — scales a :class:`BoardScene` to whatever size the window has."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from tilechess.ui.board.board_scene import BoardScene

_MIN_SIDE = 320


class BoardView(QGraphicsView):
    """Keeps the whole board visible and square, whatever the widget size."""

    def __init__(self, scene: BoardScene, parent: QWidget | None = None) -> None:
        super().__init__(scene, parent)
        self._scene = scene

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(_MIN_SIDE, _MIN_SIDE)
        # Key presses reach the scene (Escape cancels the selection).
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def _fit(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self._fit()

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit()
