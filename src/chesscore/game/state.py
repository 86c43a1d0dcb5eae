"""Game state machine — turn order, move application, check and reset."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chesscore.core.board import Board
from chesscore.core.enums import Color, RejectReason
from chesscore.core.move_generator import MoveGenerator
from chesscore.core.rules import Rules
from chesscore.game.outcomes import (
    Applied,
    Check,
    Checkmate,
    GamePhase,
    MoveOutcome,
    Rejected,
)
from chesscore.game.snapshot import BoardSnapshot

if TYPE_CHECKING:
    from chesscore.core.types import Position

_LOGGER = logging.getLogger(__name__)

_FULL_SET = 32


@dataclass
class GameState:
    """One game: the board, its pieces and whose turn it is.

    Pure data/logic, no I/O. Not reentrant: the legality probe mutates the
    board while it runs, so one caller must drive a game serially.
    """

    board: Board = field(default_factory=Board.standard)
    turn: Color = Color.WHITE
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    ply_count: int = field(default=0, init=False)
    games_played: int = field(default=0, init=False)
    _gen: MoveGenerator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._gen = MoveGenerator(self.board)
        if Rules.is_king_attacked(self.board, self.turn, self._gen):
            self.phase = GamePhase.CHECK

    # ── Initialisation ───────────────────────────────────────────────────

    def reset(self) -> None:
        """Standard layout, white to move.

        A board built from a partial piece set is replaced by a fresh one.
        """
        self.board.setup_standard()
        if len(self.board.pieces.on_board()) != _FULL_SET:
            self.board = Board.standard()
            self._gen = MoveGenerator(self.board)
        self.turn = Color.WHITE
        self.phase = GamePhase.AWAITING_MOVE
        self.ply_count = 0
        _LOGGER.info("Board reset to the starting layout")

    # ── Legality ─────────────────────────────────────────────────────────

    def check_move(self, from_pos: Position, to_pos: Position) -> RejectReason | None:
        """Why moving *from_pos* → *to_pos* would be refused, or ``None``."""
        return Rules.probe_move(self.board, from_pos, to_pos, self.turn, self._gen)

    def try_move(self, from_pos: Position, to_pos: Position) -> bool:
        """Is the move legal for the side to move? Never changes the board."""
        return self.check_move(from_pos, to_pos) is None

    def legal_destinations(self, from_pos: Position) -> frozenset[Position]:
        """Legal targets for the side-to-move's piece on *from_pos*."""
        piece = self.board.piece_at(from_pos)
        if piece is None or piece.color != self.turn:
            return frozenset()
        return Rules.legal_destinations(self.board, piece, self._gen)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_pos: Position, to_pos: Position) -> MoveOutcome:
        """Play a move for the side to move and report what happened.

        A rejected move leaves the game untouched. Checkmate resets the game
        before returning.
        """
        mover = self.turn
        reason = self.check_move(from_pos, to_pos)
        if reason is not None:
            _LOGGER.debug("Rejected %s %s-%s: %s", mover, from_pos, to_pos, reason.name)
            return Rejected(from_pos, to_pos, mover, reason)

        piece = self.board.piece_at(from_pos)
        assert piece is not None
        self.board.clear(from_pos)
        captured = self.board.clear(to_pos)
        self.board.place(piece, to_pos)
        self.ply_count += 1
        captured_kind = captured.kind if captured is not None else None
        _LOGGER.debug("Applied %s %s %s-%s", mover, piece.kind, from_pos, to_pos)

        opponent = mover.opposite
        if Rules.is_king_attacked(self.board, opponent, self._gen):
            if not Rules.has_legal_move(self.board, opponent, self._gen):
                final_board = BoardSnapshot.from_board(self.board, opponent)
                _LOGGER.info("Checkmate for %s", opponent)
                self.games_played += 1
                self.reset()
                return Checkmate(
                    from_pos, to_pos, mover, opponent, final_board, captured_kind
                )
            _LOGGER.info("Check for %s", opponent)
            self.turn = opponent
            self.phase = GamePhase.CHECK
            return Check(from_pos, to_pos, mover, opponent, captured_kind)

        self.turn = opponent
        self.phase = GamePhase.AWAITING_MOVE
        return Applied(from_pos, to_pos, mover, captured_kind)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def in_check(self) -> bool:
        return self.phase == GamePhase.CHECK

    def render(self) -> BoardSnapshot:
        return BoardSnapshot.from_board(self.board, self.turn)


# ── Functional API ───────────────────────────────────────────────────────────


def new_game() -> GameState:
    """A fresh game in the standard starting layout."""
    return GameState()


def apply_move(state: GameState, from_pos: Position, to_pos: Position) -> MoveOutcome:
    return state.apply_move(from_pos, to_pos)
