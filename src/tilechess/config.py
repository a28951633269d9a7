"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.notation import STARTING_PLACEMENT

THEMES = ("Meadow", "Classic")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    placement: str = STARTING_PLACEMENT

    # Window
    window_title: str = "Chess"
    tile_size: int = 100  # px per square

    # Board
    board_theme: str = "Meadow"
    show_destinations: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    @property
    def window_size(self) -> int:
        return self.tile_size * 8
