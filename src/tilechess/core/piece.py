"""Piece value object with per-kind movement history."""

from __future__ import annotations

from dataclasses import dataclass, replace

from tilechess.core.enums import Color, PieceType

# Placement character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_PLACEMENT_CHARS: dict[tuple[Color, PieceType], str] = {
    v: k for k, v in _CHAR_MAP.items()
}

# Kinds whose first move matters (castling, double pawn push).
TRACKS_MOVEMENT: frozenset[PieceType] = frozenset(
    {PieceType.KING, PieceType.ROOK, PieceType.PAWN}
)

PIECE_CHARS = frozenset(_CHAR_MAP)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a colored piece on a square.

    ``has_moved`` only exists for kings, rooks and pawns;
    ``en_passantable`` only for pawns. Both start out false.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = False
    en_passantable: bool = False

    def __post_init__(self) -> None:
        if self.has_moved and self.piece_type not in TRACKS_MOVEMENT:
            raise ValueError(f"{self.piece_type.name} does not track has_moved")
        if self.en_passantable and self.piece_type != PieceType.PAWN:
            raise ValueError("Only pawns can be en-passantable")

    # ── Flag updates ─────────────────────────────────────────────────────

    def moved(self, *, en_passantable: bool = False) -> Piece:
        """Copy of this piece after it has made a move."""
        if self.piece_type not in TRACKS_MOVEMENT:
            return self
        return replace(
            self,
            has_moved=True,
            en_passantable=en_passantable and self.piece_type == PieceType.PAWN,
        )

    def without_en_passant(self) -> Piece:
        if not self.en_passantable:
            return self
        return replace(self, en_passantable=False)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Placement character (uppercase = white, lowercase = black)."""
        return _PLACEMENT_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from placement character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
