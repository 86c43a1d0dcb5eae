"""Game management layer — state machine, outcomes, controller.

Quick start::

    from chesscore.game import GameController

    ctrl = GameController()
    ctrl.play_moves([("e2", "e4"), ("e7", "e5")])
"""

from chesscore.game.controller import GameController, GameEvents
from chesscore.game.outcomes import (
    Applied,
    Check,
    Checkmate,
    GamePhase,
    MoveOutcome,
    OutcomeKind,
    Rejected,
)
from chesscore.game.snapshot import BoardSnapshot, CellView, render
from chesscore.game.state import GameState, apply_move, new_game

__all__ = [
    # Outcomes
    "Applied",
    "Check",
    "Checkmate",
    "GamePhase",
    "MoveOutcome",
    "OutcomeKind",
    "Rejected",
    # Snapshots
    "BoardSnapshot",
    "CellView",
    "render",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "apply_move",
    "new_game",
]
