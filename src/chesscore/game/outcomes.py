"""Move outcomes and game phases reported by the state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesscore.core.enums import Color, PieceKind, RejectReason

if TYPE_CHECKING:
    from chesscore.core.types import Position
    from chesscore.game.snapshot import BoardSnapshot


class GamePhase(IntEnum):
    """Ongoing game states; checkmate is transient and resets the game."""

    AWAITING_MOVE = auto()
    CHECK = auto()  # side to move is in check


class OutcomeKind(IntEnum):
    APPLIED = auto()
    CHECK = auto()
    CHECKMATE = auto()
    REJECTED = auto()


@dataclass(frozen=True, slots=True)
class Applied:
    """Move committed; the turn passed to the other side."""

    from_pos: Position
    to_pos: Position
    mover: Color
    captured: PieceKind | None = None

    kind = OutcomeKind.APPLIED
    accepted = True


@dataclass(frozen=True, slots=True)
class Check:
    """Move committed and *color*'s king is now attacked, with an escape."""

    from_pos: Position
    to_pos: Position
    mover: Color
    color: Color
    captured: PieceKind | None = None

    kind = OutcomeKind.CHECK
    accepted = True


@dataclass(frozen=True, slots=True)
class Checkmate:
    """Move committed and *color* has no escape.

    The game was reset straight after; ``final_board`` shows the mating
    position.
    """

    from_pos: Position
    to_pos: Position
    mover: Color
    color: Color
    final_board: BoardSnapshot
    captured: PieceKind | None = None

    kind = OutcomeKind.CHECKMATE
    accepted = True

    @property
    def winner(self) -> Color:
        return self.color.opposite


@dataclass(frozen=True, slots=True)
class Rejected:
    """Move refused; nothing changed."""

    from_pos: Position
    to_pos: Position
    mover: Color
    reason: RejectReason

    kind = OutcomeKind.REJECTED
    accepted = False


MoveOutcome = Applied | Check | Checkmate | Rejected
