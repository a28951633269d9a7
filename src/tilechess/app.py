"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from tilechess.config import THEMES, AppSettings
from tilechess.core.errors import InvalidPosition

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(prog="tilechess", description="Two-player chess board.")
    parser.add_argument(
        "--fen",
        default=defaults.placement,
        help="starting piece placement (row 0 first)",
    )
    parser.add_argument("--tile-size", type=int, default=defaults.tile_size)
    parser.add_argument("--theme", choices=THEMES, default=defaults.board_theme)
    parser.add_argument(
        "--no-hints",
        action="store_true",
        help="do not highlight the selected piece's destinations",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def settings_from_args(argv: list[str] | None = None) -> AppSettings:
    args = build_parser().parse_args(argv)
    return AppSettings(
        placement=args.fen,
        tile_size=args.tile_size,
        board_theme=args.theme,
        show_destinations=not args.no_hints,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the tilechess application."""
    from tilechess.ui.bootstrap import run_application

    settings = settings_from_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        code = run_application([sys.argv[0]], settings)
    except InvalidPosition as exc:
        _LOGGER.error("Cannot start: %s", exc)
        sys.exit(2)
    sys.exit(code)


if __name__ == "__main__":
    main()
