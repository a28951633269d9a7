"""tilechess — a two-player chess board and its rules engine."""

__version__ = "0.1.0"
