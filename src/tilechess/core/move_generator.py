"""Destination-square generation, dispatched per piece kind.

Every step is an index delta on the flat board; how far a piece may travel
in a direction comes from the precomputed edge distances, so a scan never
wraps from one side of the board to the other.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from tilechess.core.board import Board
from tilechess.core.enums import Color, PieceType
from tilechess.core.piece import Piece
from tilechess.core.types import EDGE_DISTANCES, EdgeDistances, Square, col_of, row_of


class Ray(NamedTuple):
    """A direction from one square: index *delta* repeated up to *limit* times."""

    delta: int
    limit: int


# (delta, edges that bound it)
ORTHOGONAL_DIRS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (-8, ("top",)),
    (8, ("bottom",)),
    (-1, ("left",)),
    (1, ("right",)),
)
DIAGONAL_DIRS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (-9, ("top", "left")),
    (-7, ("top", "right")),
    (7, ("bottom", "left")),
    (9, ("bottom", "right")),
)
ALL_DIRS = ORTHOGONAL_DIRS + DIAGONAL_DIRS

# (delta, minimum distances required as (edge, count) pairs)
KNIGHT_JUMPS: tuple[tuple[int, tuple[tuple[str, int], ...]], ...] = (
    (-17, (("top", 2), ("left", 1))),
    (-15, (("top", 2), ("right", 1))),
    (-10, (("top", 1), ("left", 2))),
    (-6, (("top", 1), ("right", 2))),
    (6, (("bottom", 1), ("left", 2))),
    (10, (("bottom", 1), ("right", 2))),
    (15, (("bottom", 2), ("left", 1))),
    (17, (("bottom", 2), ("right", 1))),
)

# Castling needs at least this many columns between king and corner.
_CASTLE_MIN_DISTANCE = 3


# -- Precomputed lookup tables ---------------------------------------------


def _limit(edges: EdgeDistances, bounds: tuple[str, ...]) -> int:
    return min(getattr(edges, name) for name in bounds)


def _build_rays(
    directions: tuple[tuple[int, tuple[str, ...]], ...],
    cap: int = 7,
) -> tuple[tuple[Ray, ...], ...]:
    table: list[tuple[Ray, ...]] = []
    for edges in EDGE_DISTANCES:
        table.append(
            tuple(
                Ray(delta, min(cap, _limit(edges, bounds)))
                for delta, bounds in directions
            )
        )
    return tuple(table)


def _build_knight_targets() -> tuple[tuple[Square, ...], ...]:
    table: list[tuple[Square, ...]] = []
    for sq, edges in enumerate(EDGE_DISTANCES):
        targets = [
            sq + delta
            for delta, guards in KNIGHT_JUMPS
            if all(getattr(edges, name) >= need for name, need in guards)
        ]
        table.append(tuple(targets))
    return tuple(table)


_ROOK_RAYS = _build_rays(ORTHOGONAL_DIRS)
_BISHOP_RAYS = _build_rays(DIAGONAL_DIRS)
_QUEEN_RAYS = _build_rays(ALL_DIRS)
_KING_RAYS = _build_rays(ALL_DIRS, cap=1)
_KNIGHT_TARGETS = _build_knight_targets()


# -- Piece-specific generators ---------------------------------------------


def _scan(board: Board, piece: Piece, sq: Square, rays: tuple[Ray, ...]) -> list[Square]:
    moves: list[Square] = []
    for delta, limit in rays:
        to_sq = sq
        for _ in range(limit):
            to_sq += delta
            target = board[to_sq]
            if target is None:
                moves.append(to_sq)
                continue
            if target.color != piece.color:
                moves.append(to_sq)
            break
    return moves


def _gen_rook(board: Board, piece: Piece, sq: Square) -> list[Square]:
    return _scan(board, piece, sq, _ROOK_RAYS[sq])


def _gen_bishop(board: Board, piece: Piece, sq: Square) -> list[Square]:
    return _scan(board, piece, sq, _BISHOP_RAYS[sq])


def _gen_queen(board: Board, piece: Piece, sq: Square) -> list[Square]:
    return _scan(board, piece, sq, _QUEEN_RAYS[sq])


def _gen_knight(board: Board, piece: Piece, sq: Square) -> list[Square]:
    moves: list[Square] = []
    for to_sq in _KNIGHT_TARGETS[sq]:
        target = board[to_sq]
        if target is None or target.color != piece.color:
            moves.append(to_sq)
    return moves


def _gen_king(board: Board, piece: Piece, sq: Square) -> list[Square]:
    moves = _scan(board, piece, sq, _KING_RAYS[sq])
    moves.extend(castling_destinations(board, piece, sq))
    return moves


def castling_destinations(board: Board, king: Piece, sq: Square) -> list[Square]:
    """Two-column king destinations toward each eligible corner rook."""
    if king.has_moved:
        return []

    moves: list[Square] = []
    edges = EDGE_DISTANCES[sq]
    for step, distance in ((1, edges.right), (-1, edges.left)):
        if distance < _CASTLE_MIN_DISTANCE:
            continue
        corner = sq + step * distance
        rook = board[corner]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != king.color
            or rook.has_moved
        ):
            continue
        if all(board.is_empty(sq + step * i) for i in range(1, distance)):
            moves.append(sq + 2 * step)
    return moves


def _gen_pawn(board: Board, piece: Piece, sq: Square) -> list[Square]:
    moves: list[Square] = []
    edges = EDGE_DISTANCES[sq]
    ahead = edges.bottom if piece.color == Color.WHITE else edges.top
    if ahead == 0:
        return moves

    forward = piece.color.forward * 8
    one_step = sq + forward
    if board.is_empty(one_step):
        moves.append(one_step)
        two_step = one_step + forward
        if not piece.has_moved and ahead >= 2 and board.is_empty(two_step):
            moves.append(two_step)

    for side, room in ((-1, edges.left), (1, edges.right)):
        if room == 0:
            continue
        diagonal = one_step + side
        target = board[diagonal]
        if target is not None:
            if target.color != piece.color:
                moves.append(diagonal)
            continue
        passed = board[sq + side]
        if (
            passed is not None
            and passed.piece_type == PieceType.PAWN
            and passed.color != piece.color
            and passed.en_passantable
        ):
            moves.append(diagonal)
    return moves


_GENERATORS: dict[PieceType, Callable[[Board, Piece, Square], list[Square]]] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}


# -- Public API -------------------------------------------------------------


def generate_moves(board: Board, source: Square) -> list[Square] | None:
    """Destination squares for the piece on *source*.

    Returns ``None`` for an empty square. Own-king safety is not considered.
    """
    piece = board[source]
    if piece is None:
        return None
    return _GENERATORS[piece.piece_type](board, piece, source)


def spans_two_rows(source: Square, destination: Square) -> bool:
    return abs(row_of(destination) - row_of(source)) == 2


def is_diagonal_step(source: Square, destination: Square) -> bool:
    return (
        abs(row_of(destination) - row_of(source)) == 1
        and abs(col_of(destination) - col_of(source)) == 1
    )


class MoveGenerator:
    """Read-only view of a :class:`Board` that answers move queries."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def moves_from(self, sq: Square) -> list[Square]:
        """Destinations from *sq*, empty when the square is empty."""
        return generate_moves(self._board, sq) or []

    def all_moves(self, color: Color) -> dict[Square, list[Square]]:
        """Every piece of *color* mapped to its destinations."""
        return {
            sq: _GENERATORS[piece.piece_type](self._board, piece, sq)
            for sq, piece in self._board.occupied()
            if piece.color == color
        }

    def count(self, color: Color) -> int:
        return sum(len(moves) for moves in self.all_moves(color).values())
