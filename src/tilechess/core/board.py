"""Board - piece placement on a flat 64-square array."""

from __future__ import annotations

from collections.abc import Iterator

from tilechess.core.enums import Color, PieceType
from tilechess.core.piece import Piece
from tilechess.core.types import EDGE_DISTANCES, EdgeDistances, Square, make_square


class Board:
    """Mutable 64-square board plus its precomputed edge distances.

    Created by the position loader, mutated only by
    :func:`tilechess.core.executor.apply_move`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def __len__(self) -> int:
        return 64

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    @staticmethod
    def edges(sq: Square) -> EdgeDistances:
        """Distances from *sq* to the left, right, top and bottom edges."""
        return EDGE_DISTANCES[sq]

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every non-empty square in index order."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Default starting position."""
        from tilechess.core.notation import STARTING_PLACEMENT, board_from_placement

        return board_from_placement(STARTING_PLACEMENT)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            line = []
            for col in range(8):
                p = self[make_square(col, row)]
                line.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(line)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
