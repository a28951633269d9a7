"""Core domain layer — pure board logic with zero external dependencies.

Quick start::

    from tilechess.core import Board, apply_move, generate_moves

    board = Board.initial()
    print(generate_moves(board, 12))   # [20, 28]
    apply_move(board, 12, 28)
"""

from tilechess.core.board import Board
from tilechess.core.enums import Color, MoveFlag, PieceType
from tilechess.core.errors import ChessError, IllegalDestination, InvalidPosition
from tilechess.core.executor import apply_move
from tilechess.core.move import Move
from tilechess.core.move_generator import MoveGenerator, generate_moves
from tilechess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from tilechess.core.piece import Piece
from tilechess.core.types import (
    EDGE_DISTANCES,
    EdgeDistances,
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveFlag",
    "PieceType",
    # Errors
    "ChessError",
    "IllegalDestination",
    "InvalidPosition",
    # Types / helpers
    "EDGE_DISTANCES",
    "EdgeDistances",
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    # Operations
    "apply_move",
    "generate_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
