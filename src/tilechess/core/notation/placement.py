"""Piece-placement parsing and serialization.

The placement string is read as a flat stream over square indexes 0–63:
letters write a piece and advance one square, digits skip that many empty
squares, and ``/`` only marks a row boundary.
"""

from __future__ import annotations

import logging

from tilechess.core.board import Board
from tilechess.core.errors import InvalidPosition
from tilechess.core.piece import PIECE_CHARS, Piece

_LOGGER = logging.getLogger(__name__)

STARTING_PLACEMENT = "RNBQKBNR/PPPPPPPP/8/8/8/8/pppppppp/rbnkqbnr"

_ROW_SEPARATOR = "/"
_DIGITS = frozenset("0123456789")


def board_from_placement(text: str) -> Board:
    """Parse a placement string into a fresh :class:`Board`.

    Only the first whitespace-separated field is read, so a full FEN record
    is accepted too. Unknown characters are skipped.

    Raises:
        InvalidPosition: the string does not account for exactly 64 squares,
            or a row separator falls in the middle of a row.
    """
    fields = text.split()
    if not fields:
        raise InvalidPosition("Empty placement string")
    placement = fields[0]

    board = Board()
    index = 0
    for ch in placement:
        if ch in _DIGITS:
            index += int(ch)
            if index > 64:
                raise InvalidPosition(f"Placement overflows the board: {text!r}")
        elif ch == _ROW_SEPARATOR:
            if index % 8:
                raise InvalidPosition(
                    f"Row separator inside row {index // 8}: {text!r}"
                )
        elif ch in PIECE_CHARS:
            if index >= 64:
                raise InvalidPosition(f"Placement overflows the board: {text!r}")
            board[index] = Piece.from_char(ch)
            index += 1
        else:
            _LOGGER.debug("Ignoring placement character %r", ch)

    if index != 64:
        raise InvalidPosition(
            f"Placement covers {index} squares instead of 64: {text!r}"
        )

    _LOGGER.debug("Loaded board from %r", placement)
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* back into flat placement notation (flags dropped)."""
    rows: list[str] = []
    for row_start in range(0, 64, 8):
        empty = 0
        row = ""
        for sq in range(row_start, row_start + 8):
            piece = board[sq]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return _ROW_SEPARATOR.join(rows)
