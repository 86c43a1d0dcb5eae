"""Immutable board snapshots handed to presentation code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesscore.core.enums import Color, PieceKind, Shade
from chesscore.core.types import ALL_POSITIONS, BOARD_SIZE, Position

if TYPE_CHECKING:
    from chesscore.core.board import Board
    from chesscore.game.state import GameState


@dataclass(frozen=True, slots=True)
class CellView:
    """One square as seen by a renderer."""

    position: Position
    shade: Shade
    kind: PieceKind | None = None
    color: Color | None = None

    @property
    def is_empty(self) -> bool:
        return self.kind is None


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Occupancy of all 64 squares plus the side to move.

    ``cells`` is ordered row-major from a1.
    """

    cells: tuple[CellView, ...]
    turn: Color

    @classmethod
    def from_board(cls, board: Board, turn: Color) -> BoardSnapshot:
        views: list[CellView] = []
        for position in ALL_POSITIONS:
            piece = board.piece_at(position)
            if piece is None:
                views.append(CellView(position, position.shade))
            else:
                views.append(
                    CellView(position, position.shade, piece.kind, piece.color)
                )
        return cls(tuple(views), turn)

    def cell(self, position: Position) -> CellView:
        return self.cells[position.row * BOARD_SIZE + position.column]

    def piece_at(self, position: Position) -> tuple[Color, PieceKind] | None:
        view = self.cell(position)
        if view.kind is None or view.color is None:
            return None
        return view.color, view.kind

    def rows(self) -> list[tuple[CellView, ...]]:
        """Rows from rank 8 down to rank 1, as a board is usually drawn."""
        return [
            self.cells[row * BOARD_SIZE : (row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE - 1, -1, -1)
        ]

    def count(self, color: Color | None = None) -> int:
        """Number of occupied squares, optionally for one color."""
        return sum(
            1
            for view in self.cells
            if view.kind is not None and (color is None or view.color == color)
        )


def render(state: GameState) -> BoardSnapshot:
    """Snapshot of *state* for display."""
    return BoardSnapshot.from_board(state.board, state.turn)
