"""Move value object: the record of one applied move."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.enums import MoveFlag
from tilechess.core.piece import Piece
from tilechess.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a move the executor has applied."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    captured: Piece | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def is_capture(self) -> bool:
        return self.captured is not None
