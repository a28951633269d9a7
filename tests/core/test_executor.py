"""Tests for apply_move and the movement-history flags it maintains."""

from collections.abc import Callable

import pytest

from tilechess.core.board import Board
from tilechess.core.enums import Color, MoveFlag, PieceType
from tilechess.core.errors import IllegalDestination
from tilechess.core.executor import apply_move
from tilechess.core.move_generator import generate_moves
from tilechess.core.piece import Piece
from tilechess.core.types import (
    A1, A8, B8, C1, C8, D1, D5, D6, D7, D8, E1, E2, E3, E4, E5, F1, G1, H1, H8,
    Square,
)

MakeBoard = Callable[[dict[Square, "str | Piece"]], Board]


class TestRelocation:
    def test_piece_moves_and_source_clears(self) -> None:
        board = Board.initial()
        move = apply_move(board, E2, E4)
        assert board[E2] is None
        assert board[E4] is not None
        assert board[E4].piece_type == PieceType.PAWN
        assert str(move) == "e2e4"

    def test_capture_by_overwrite(self, make_board: MakeBoard) -> None:
        board = make_board({A1: "R", A8: "r"})
        move = apply_move(board, A1, A8)
        assert board[A8] == Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert move.captured == Piece(Color.BLACK, PieceType.ROOK)
        assert move.is_capture

    def test_empty_source_raises(self) -> None:
        with pytest.raises(IllegalDestination, match="No piece"):
            apply_move(Board(), E2, E4)

    def test_trusts_destination_by_default(self) -> None:
        board = Board.initial()
        apply_move(board, E2, E5)
        assert board[E5] is not None and board[E2] is None

    def test_strict_rejects_ungenerated_destination(self) -> None:
        board = Board.initial()
        before = board.copy()
        with pytest.raises(IllegalDestination):
            apply_move(board, E2, E5, strict=True)
        assert board == before

    def test_strict_accepts_generated_destination(self) -> None:
        board = Board.initial()
        move = apply_move(board, E2, E4, strict=True)
        assert move.flag == MoveFlag.DOUBLE_PAWN


class TestFlags:
    def test_king_and_rook_marked_moved(self, make_board: MakeBoard) -> None:
        board = make_board({E1: "K", H1: "R"})
        apply_move(board, E1, D1)
        apply_move(board, H1, H1 + 8)
        assert board[D1] is not None and board[D1].has_moved
        assert board[H1 + 8] is not None and board[H1 + 8].has_moved

    def test_knight_carries_no_history(self) -> None:
        board = Board.initial()
        apply_move(board, 1, 18)
        assert board[18] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_single_push_not_en_passantable(self) -> None:
        board = Board.initial()
        move = apply_move(board, E2, E3)
        piece = board[E3]
        assert piece is not None
        assert piece.has_moved and not piece.en_passantable
        assert move.flag == MoveFlag.NORMAL

    def test_double_push_sets_en_passantable(self) -> None:
        board = Board.initial()
        apply_move(board, E2, E4)
        piece = board[E4]
        assert piece is not None
        assert piece.has_moved and piece.en_passantable

    def test_double_push_gone_after_first_move(self) -> None:
        board = Board.initial()
        apply_move(board, E2, E3)
        assert generate_moves(board, E3) == [E4]

    def test_en_passantable_cleared_by_next_move(self) -> None:
        board = Board.initial()
        apply_move(board, E2, E4)
        apply_move(board, 52, 44)  # unrelated black move
        piece = board[E4]
        assert piece is not None
        assert not piece.en_passantable
        assert piece.has_moved


class TestEnPassant:
    def _board(self, make_board: MakeBoard) -> Board:
        return make_board({E5: Piece.from_char("P").moved(), D7: "p", H8: "k"})

    def test_capture_removes_passed_pawn(self, make_board: MakeBoard) -> None:
        board = self._board(make_board)
        apply_move(board, D7, D5)
        assert D6 in (generate_moves(board, E5) or [])

        move = apply_move(board, E5, D6)
        assert move.flag == MoveFlag.EN_PASSANT
        assert move.captured is not None
        assert move.captured.piece_type == PieceType.PAWN
        assert board[D5] is None
        assert board[D6] is not None and board[D6].color == Color.WHITE

    def test_window_closes_after_other_move(self, make_board: MakeBoard) -> None:
        board = self._board(make_board)
        apply_move(board, D7, D5)
        apply_move(board, H8, H8 - 1)
        assert D6 not in (generate_moves(board, E5) or [])


class TestCastling:
    def test_kingside_moves_rook(self, make_board: MakeBoard) -> None:
        board = make_board({E1: "K", H1: "R"})
        move = apply_move(board, E1, G1)
        assert move.flag == MoveFlag.CASTLE
        assert board[G1] == Piece(Color.WHITE, PieceType.KING, has_moved=True)
        assert board[F1] == Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert board[H1] is None

    def test_queenside_moves_rook(self, make_board: MakeBoard) -> None:
        board = make_board({E1: "K", A1: "R"})
        apply_move(board, E1, C1)
        assert board[C1] == Piece(Color.WHITE, PieceType.KING, has_moved=True)
        assert board[D1] == Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert board[A1] is None

    def test_black_short_side_from_d_file(self, make_board: MakeBoard) -> None:
        board = make_board({D8: "k", A8: "r"})
        apply_move(board, D8, B8)
        assert board[B8] == Piece(Color.BLACK, PieceType.KING, has_moved=True)
        assert board[C8] == Piece(Color.BLACK, PieceType.ROOK, has_moved=True)
        assert board[A8] is None

    def test_castling_not_offered_twice(self, make_board: MakeBoard) -> None:
        board = make_board({E1: "K", H1: "R", A1: "R"})
        apply_move(board, E1, G1)
        apply_move(board, G1, E1 + 8)
        apply_move(board, E1 + 8, E1)
        assert C1 not in (generate_moves(board, E1) or [])
