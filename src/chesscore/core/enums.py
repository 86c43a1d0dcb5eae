"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds in set-creation order."""

    KING = 1
    QUEEN = 2
    BISHOP = 3
    KNIGHT = 4
    ROOK = 5
    PAWN = 6

    def __str__(self) -> str:
        return self.name.lower()


class Shade(IntEnum):
    """Square color, derived from coordinate parity."""

    DARK = 0
    LIGHT = 1


class RejectReason(IntEnum):
    """Why a move attempt was refused."""

    NO_PIECE = 1
    WRONG_TURN = 2
    ILLEGAL_DESTINATION = 3
    SELF_CHECK = 4
