"""GameController — observable front for a :class:`GameState`.

Emits events via simple callbacks so a console / tests can subscribe, and
runs scripted move lists.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chesscore.game.outcomes import Check, Checkmate, MoveOutcome, Rejected
from chesscore.game.snapshot import BoardSnapshot
from chesscore.game.state import GameState
from chesscore.notation import parse_square

if TYPE_CHECKING:
    from chesscore.core.types import Position

# ── Event definitions ────────────────────────────────────────────────────────

OutcomeCallback = Callable[[MoveOutcome, BoardSnapshot], None]  # outcome, board after
ResetCallback = Callable[[BoardSnapshot], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[OutcomeCallback] = field(default_factory=list)
    on_check: list[OutcomeCallback] = field(default_factory=list)
    on_checkmate: list[OutcomeCallback] = field(default_factory=list)
    on_rejected: list[OutcomeCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Drives one game and notifies listeners.

    ``on_move`` fires for every accepted move (including check and
    checkmate), the specific events after it. A checkmate also fires
    ``on_reset`` because the game starts over.
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    def new_game(self) -> None:
        self._state.reset()
        self._emit_reset()

    def submit_move(self, from_pos: Position, to_pos: Position) -> MoveOutcome:
        outcome = self._state.apply_move(from_pos, to_pos)
        board = self._state.render()

        if isinstance(outcome, Rejected):
            for cb in self.events.on_rejected:
                cb(outcome, board)
            return outcome

        for cb in self.events.on_move:
            cb(outcome, board)
        if isinstance(outcome, Check):
            for cb in self.events.on_check:
                cb(outcome, board)
        elif isinstance(outcome, Checkmate):
            for cb in self.events.on_checkmate:
                cb(outcome, outcome.final_board)
            self._emit_reset()
        return outcome

    def submit(self, from_name: str, to_name: str) -> MoveOutcome:
        """Like :meth:`submit_move` but with square names such as ``"e2"``."""
        return self.submit_move(parse_square(from_name), parse_square(to_name))

    def play_moves(
        self, moves: Iterable[tuple[Position, Position] | tuple[str, str]]
    ) -> list[MoveOutcome]:
        """Apply a scripted list of moves in order, rejected ones included."""
        outcomes: list[MoveOutcome] = []
        for from_sq, to_sq in moves:
            if isinstance(from_sq, str) and isinstance(to_sq, str):
                outcomes.append(self.submit(from_sq, to_sq))
            else:
                outcomes.append(self.submit_move(from_sq, to_sq))  # type: ignore[arg-type]
        return outcomes

    def _emit_reset(self) -> None:
        board = self._state.render()
        for cb in self.events.on_reset:
            cb(board)
