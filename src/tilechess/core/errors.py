"""Exception hierarchy for the rules engine."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by :mod:`tilechess`."""


class InvalidPosition(ChessError, ValueError):
    """A placement string cannot fill exactly 64 squares."""


class IllegalDestination(ChessError, ValueError):
    """A move was requested that the generator would not produce."""
