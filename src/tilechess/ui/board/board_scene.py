"""BoardScene — QGraphicsScene that draws the board and forwards input."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QKeyEvent, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from tilechess.core.enums import Color
from tilechess.core.move import Move
from tilechess.core.types import Square, col_of, make_square, row_of
from tilechess.game.session import GameSession
from tilechess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the squares, pieces and selection overlays of a session.

    Row 0 is drawn at the top. Left clicks are mapped to a square index and
    passed to :meth:`GameSession.click`; Escape cancels the selection.
    """

    def __init__(
        self,
        session: GameSession,
        tile: int = 100,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._tile = tile
        self._theme = BoardTheme.meadow()
        self._show_destinations = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        events = session.events
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_move.append(self._on_move)
        events.on_board_reset.append(self.refresh)

        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()
        self._sync_highlights()

    def set_show_destinations(self, visible: bool) -> None:
        """Show or hide generated-destination overlays."""
        self._show_destinations = visible
        self._sync_highlights()

    def refresh(self) -> None:
        """Redraw pieces and overlays from the session state."""
        self._sync_pieces()
        self._sync_highlights()

    def detach(self) -> None:
        """Unsubscribe from the session; the scene stops tracking it.

        Call before the scene is destroyed when the session outlives it.
        """
        events = self._session.events
        for handlers, handler in (
            (events.on_selection_changed, self._on_selection_changed),
            (events.on_move, self._on_move),
            (events.on_board_reset, self.refresh),
        ):
            if handler in handlers:
                handlers.remove(handler)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self._tile
        for sq in range(64):
            c, r = col_of(sq), row_of(sq)
            color = (
                self._theme.light_square
                if (c + r) % 2 == 0
                else self._theme.dark_square
            )
            rect = QGraphicsRectItem(c * t, r * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self._tile
        font = QFont()
        font.setPixelSize(int(t * 0.75))
        for sq, piece in self._session.board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            brush = (
                self._theme.white_piece
                if piece.color == Color.WHITE
                else self._theme.black_piece
            )
            item.setBrush(QBrush(brush))
            bounds = item.boundingRect()
            item.setPos(
                col_of(sq) * t + (t - bounds.width()) / 2,
                row_of(sq) * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

        selected = self._session.selected
        if selected is None:
            return
        self._highlight_items.append(
            self._make_highlight(selected, self._theme.highlight_from)
        )
        if self._show_destinations:
            for sq in self._session.destinations():
                self._highlight_items.append(
                    self._make_highlight(sq, self._theme.highlight_to)
                )

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        rect = QGraphicsRectItem(col_of(sq) * t, row_of(sq) * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_selection_changed(self, _sq: Square | None) -> None:
        self._sync_highlights()

    def _on_move(self, _move: Move) -> None:
        self._sync_pieces()

    # ── Input ────────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        sq = self.pos_to_square(event.scenePos())
        if sq is None:
            self._session.cancel()
        else:
            self._session.click(sq)
        event.accept()

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None and event.key() == Qt.Key.Key_Escape:
            self._session.cancel()
            event.accept()
            return
        super().keyPressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self._tile
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return make_square(col, row)
