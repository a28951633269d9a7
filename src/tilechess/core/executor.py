"""Move executor - applies a generated move to a :class:`Board` in place."""

from __future__ import annotations

import logging

from tilechess.core.board import Board
from tilechess.core.enums import MoveFlag, PieceType
from tilechess.core.errors import IllegalDestination
from tilechess.core.move import Move
from tilechess.core.move_generator import generate_moves, is_diagonal_step, spans_two_rows
from tilechess.core.piece import Piece
from tilechess.core.types import Square, col_of, make_square, row_of, square_name

_LOGGER = logging.getLogger(__name__)


def apply_move(
    board: Board,
    source: Square,
    destination: Square,
    *,
    strict: bool = False,
) -> Move:
    """Move the piece on *source* to *destination*, capturing by overwrite.

    Besides relocating the piece this:

    * clears ``en_passantable`` on every pawn, then sets it on the mover
      when it is a pawn advancing two rows;
    * marks kings, rooks and pawns as moved;
    * slides the corner rook when a king moves two columns (castling);
    * removes the passed pawn when a pawn moves diagonally onto an empty
      square (en passant).

    The destination is trusted unless *strict* is set.

    Raises:
        IllegalDestination: *source* is empty, or *strict* is set and
            *destination* is not one of the generated moves.
    """
    piece = board[source]
    if piece is None:
        raise IllegalDestination(f"No piece on {square_name(source)}")
    if strict:
        legal = generate_moves(board, source) or []
        if destination not in legal:
            raise IllegalDestination(
                f"{square_name(source)}{square_name(destination)} is not a legal move"
            )

    _clear_en_passant(board)

    captured = board[destination]
    flag = MoveFlag.NORMAL

    if piece.piece_type == PieceType.PAWN:
        if spans_two_rows(source, destination):
            flag = MoveFlag.DOUBLE_PAWN
        elif captured is None and is_diagonal_step(source, destination):
            ep_sq = make_square(col_of(destination), row_of(source))
            passed = board[ep_sq]
            if (
                passed is not None
                and passed.piece_type == PieceType.PAWN
                and passed.color != piece.color
            ):
                captured = passed
                board[ep_sq] = None
                flag = MoveFlag.EN_PASSANT
    elif piece.piece_type == PieceType.KING and _is_castle(source, destination):
        _slide_castling_rook(board, source, destination)
        flag = MoveFlag.CASTLE

    board[source] = None
    board[destination] = piece.moved(en_passantable=flag == MoveFlag.DOUBLE_PAWN)

    move = Move(source, destination, flag, captured)
    _LOGGER.debug("Applied %s (%s)", move, flag.name)
    return move


# ── Helpers ──────────────────────────────────────────────────────────────────


def _clear_en_passant(board: Board) -> None:
    for sq, piece in board.occupied():
        if piece.en_passantable:
            board[sq] = piece.without_en_passant()


def _is_castle(source: Square, destination: Square) -> bool:
    return row_of(source) == row_of(destination) and (
        abs(col_of(destination) - col_of(source)) == 2
    )


def _slide_castling_rook(board: Board, source: Square, destination: Square) -> None:
    step = 1 if destination > source else -1
    corner = make_square(7 if step > 0 else 0, row_of(source))
    rook: Piece | None = board[corner]
    if rook is None or rook.piece_type != PieceType.ROOK:
        _LOGGER.warning(
            "King moved two columns from %s without a rook on %s",
            square_name(source),
            square_name(corner),
        )
        return
    board[corner] = None
    board[source + step] = rook.moved()
