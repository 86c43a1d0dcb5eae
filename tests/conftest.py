"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceKind
from chesscore.core.piece import Piece
from chesscore.core.types import Position

PutPiece = Callable[[Color, PieceKind, Position], Piece]


def _assert_board_consistent(board: Board) -> None:
    """Occupancy and piece positions agree in both directions."""
    for position, piece in board.occupied():
        assert piece.position == position
    seen: set[int] = set()
    for piece in board.pieces.on_board():
        assert piece.position is not None
        assert board.piece_at(piece.position) is piece
        assert piece.id not in seen
        seen.add(piece.id)


@pytest.fixture
def board() -> Board:
    """Standard starting layout."""
    return Board.standard()


@pytest.fixture
def empty_board() -> Board:
    """A full standard piece set with every piece off the board."""
    return Board()


@pytest.fixture
def put(empty_board: Board) -> PutPiece:
    """Place the next unused piece of a kind on ``empty_board``."""

    def _put(color: Color, kind: PieceKind, position: Position) -> Piece:
        piece = empty_board.pieces.first_off_board(kind, color)
        assert piece is not None, f"no spare {color} {kind}"
        empty_board.place(piece, position)
        return piece

    return _put


@pytest.fixture
def assert_consistent() -> Callable[[Board], None]:
    return _assert_board_consistent
