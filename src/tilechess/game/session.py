"""GameSession — owns the board for one game and routes input to it."""

from __future__ import annotations

import logging

from tilechess.core.board import Board
from tilechess.core.errors import InvalidPosition
from tilechess.core.move import Move
from tilechess.core.notation import STARTING_PLACEMENT, board_from_placement
from tilechess.core.piece import Piece
from tilechess.core.types import Square
from tilechess.game.selection import SelectionEvents, SelectionMachine

_LOGGER = logging.getLogger(__name__)


class GameSession:
    """A board loaded from a placement string plus its selection state.

    Loading happens before anything else is set up, so an
    :class:`~tilechess.core.errors.InvalidPosition` leaves no half-built
    session behind.
    """

    __slots__ = ("_board", "_selection", "_moves", "_placement")

    def __init__(self, placement: str = STARTING_PLACEMENT) -> None:
        self._board = board_from_placement(placement)
        self._placement = placement
        self._selection = SelectionMachine(self._board)
        self._moves: list[Move] = []
        self._selection.events.on_move.append(self._moves.append)

    # ── Query surface ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def events(self) -> SelectionEvents:
        return self._selection.events

    @property
    def selection(self) -> SelectionMachine:
        return self._selection

    @property
    def selected(self) -> Square | None:
        return self._selection.selected

    @property
    def moves(self) -> list[Move]:
        """Moves applied so far, oldest first."""
        return list(self._moves)

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board[sq]

    def destinations(self) -> list[Square]:
        return self._selection.destinations()

    # ── Input ────────────────────────────────────────────────────────────

    def click(self, sq: Square) -> Move | None:
        try:
            return self._selection.click(sq)
        except ValueError:
            _LOGGER.warning("Rejected click on square %r", sq)
            raise

    def cancel(self) -> None:
        self._selection.cancel()

    def reset(self, placement: str | None = None) -> None:
        """Reload the board in place, keeping event subscribers.

        Subscribers of ``on_board_reset`` are notified once the new position
        is on the board. A placement that fails to load leaves the session
        untouched.
        """
        text = self._placement if placement is None else placement
        try:
            fresh = board_from_placement(text)
        except InvalidPosition:
            _LOGGER.warning("Rejected reset placement %r", text)
            raise
        self._selection.cancel()
        self._board.clear()
        for sq, piece in fresh.occupied():
            self._board[sq] = piece
        self._placement = text
        self._moves.clear()
        _LOGGER.info("Session reset to %r", text)
        for cb in self._selection.events.on_board_reset:
            cb()
