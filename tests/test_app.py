"""Tests for command-line settings parsing."""

import pytest

from tilechess.app import settings_from_args
from tilechess.config import AppSettings
from tilechess.core.notation import STARTING_PLACEMENT


def test_defaults() -> None:
    settings = settings_from_args([])
    assert settings == AppSettings()
    assert settings.placement == STARTING_PLACEMENT
    assert settings.window_size == 800


def test_options() -> None:
    settings = settings_from_args(
        [
            "--fen", "4K3/8/8/8/8/8/8/7k",
            "--tile-size", "60",
            "--theme", "Classic",
            "--no-hints",
            "--log-level", "DEBUG",
        ]
    )
    assert settings.placement == "4K3/8/8/8/8/8/8/7k"
    assert settings.tile_size == 60
    assert settings.board_theme == "Classic"
    assert not settings.show_destinations
    assert settings.log_level == "DEBUG"


def test_unknown_theme_rejected() -> None:
    with pytest.raises(SystemExit):
        settings_from_args(["--theme", "Neon"])
