"""chesscore — a small chess rules engine with a console front end."""

from chesscore.core import Color, PieceKind, Position, RejectReason
from chesscore.game import (
    BoardSnapshot,
    GameController,
    GameState,
    MoveOutcome,
    apply_move,
    new_game,
    render,
)

__all__ = [
    "BoardSnapshot",
    "Color",
    "GameController",
    "GameState",
    "MoveOutcome",
    "PieceKind",
    "Position",
    "RejectReason",
    "apply_move",
    "new_game",
    "render",
]
