"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected square
    highlight_to: QColor  # generated destinations
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def meadow(cls) -> BoardTheme:
        return cls(
            light_square=QColor(237, 237, 212),  # cream
            dark_square=QColor(123, 148, 93),  # green
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark dot overlay
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name, falling back to :meth:`meadow`."""
        factories = {"Meadow": cls.meadow, "Classic": cls.classic}
        return factories.get(name, cls.meadow)()
