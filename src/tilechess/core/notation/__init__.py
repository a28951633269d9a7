"""Notation package: placement-string parsing and serialization."""

from tilechess.core.notation.placement import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)

__all__ = [
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
