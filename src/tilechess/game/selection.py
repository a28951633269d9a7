"""SelectionMachine — the two-click move protocol.

The first click selects a source square, the second either moves the
selected piece there (when the generator allows it) or drops the
selection. Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from tilechess.core.board import Board
from tilechess.core.executor import apply_move
from tilechess.core.move import Move
from tilechess.core.move_generator import generate_moves
from tilechess.core.types import Square, is_valid_square, square_name

_LOGGER = logging.getLogger(__name__)


class SelectionPhase(IntEnum):
    """Finite-state-machine states for square selection."""

    IDLE = auto()
    SELECTED = auto()


# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Square | None], None]
MoveCallback = Callable[[Move], None]
ResetCallback = Callable[[], None]


@dataclass
class SelectionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_board_reset: list[ResetCallback] = field(default_factory=list)


# ── State machine ────────────────────────────────────────────────────────────


class SelectionMachine:
    """Tracks the selected square and turns a second click into a move.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread), one input event at a time.
    """

    __slots__ = ("_board", "_selected", "events")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._selected: Square | None = None
        self.events = SelectionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def phase(self) -> SelectionPhase:
        if self._selected is None:
            return SelectionPhase.IDLE
        return SelectionPhase.SELECTED

    def destinations(self) -> list[Square]:
        """Generated moves of the selected piece, for highlighting."""
        if self._selected is None:
            return []
        return generate_moves(self._board, self._selected) or []

    # ── Input events ─────────────────────────────────────────────────────

    def click(self, target: Square) -> Move | None:
        """Handle a click on *target*; return the applied move, if any."""
        if not is_valid_square(target):
            raise ValueError(f"Square index out of range: {target}")

        source = self._selected
        if source is None:
            self._set_selected(target)
            return None

        moves = generate_moves(self._board, source)
        if moves is None:
            # Nothing to move from the selected square: re-target.
            self._set_selected(target)
            return None

        move: Move | None = None
        if target in moves:
            move = apply_move(self._board, source, target)
        else:
            _LOGGER.debug(
                "Dropping selection %s: %s is not a destination",
                square_name(source),
                square_name(target),
            )

        self._set_selected(None)
        if move is not None:
            self._emit_move(move)
        return move

    def cancel(self) -> None:
        """Drop the current selection without touching the board."""
        if self._selected is not None:
            self._set_selected(None)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_selected(self, sq: Square | None) -> None:
        self._selected = sq
        for cb in self.events.on_selection_changed:
            cb(sq)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move)
