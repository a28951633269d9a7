"""Game layer — session ownership and the two-click selection machine.

Quick start::

    from tilechess.game import GameSession

    session = GameSession()
    session.click(12)   # select e2
    session.click(28)   # e2-e4
"""

from tilechess.game.selection import SelectionEvents, SelectionMachine, SelectionPhase
from tilechess.game.session import GameSession

__all__ = [
    "GameSession",
    "SelectionEvents",
    "SelectionMachine",
    "SelectionPhase",
]
