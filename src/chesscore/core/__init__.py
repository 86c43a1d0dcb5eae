"""Core rules layer — board, piece registry, move generation and check tests.

Quick start::

    from chesscore.core import Board, Color, Rules
    from chesscore.core.types import E2, E4

    board = Board.standard()
    Rules.is_legal_move(board, E2, E4, Color.WHITE)
"""

from chesscore.core.board import Board, Cell
from chesscore.core.enums import Color, PieceKind, RejectReason, Shade
from chesscore.core.move_generator import MoveGenerator, pseudo_legal_destinations
from chesscore.core.piece import Piece, PieceSet
from chesscore.core.rules import Rules
from chesscore.core.types import ALL_POSITIONS, Position, position_of

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    "RejectReason",
    "Shade",
    # Types / helpers
    "ALL_POSITIONS",
    "Position",
    "position_of",
    # Domain objects
    "Board",
    "Cell",
    "MoveGenerator",
    "Piece",
    "PieceSet",
    "Rules",
    "pseudo_legal_destinations",
]
