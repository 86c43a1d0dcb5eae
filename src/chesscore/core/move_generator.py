"""Pseudo-legal destination generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.core.enums import Color, PieceKind

if TYPE_CHECKING:
    from chesscore.core.board import Board
    from chesscore.core.piece import Piece
    from chesscore.core.types import Position

Direction = tuple[int, int]  # (d_column, d_row)

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS

MAX_SLIDE = 7

# kind -> (directions, max distance); pawns are handled separately.
MOVEMENT: dict[PieceKind, tuple[tuple[Direction, ...], int]] = {
    PieceKind.KING: (QUEEN_DIRS, 1),
    PieceKind.QUEEN: (QUEEN_DIRS, MAX_SLIDE),
    PieceKind.ROOK: (ROOK_DIRS, MAX_SLIDE),
    PieceKind.BISHOP: (BISHOP_DIRS, MAX_SLIDE),
    PieceKind.KNIGHT: (KNIGHT_OFFSETS, 1),
}

PAWN_FORWARD: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


# -- Pure generation --------------------------------------------------------


def pseudo_legal_destinations(board: Board, piece: Piece) -> frozenset[Position]:
    """Squares *piece* could move to, ignoring exposure of its own king.

    Off-board pieces have no destinations.
    """
    origin = piece.position
    if origin is None:
        return frozenset()

    targets: list[Position] = []
    if piece.kind == PieceKind.PAWN:
        _gen_pawn(board, piece.color, origin, targets)
    else:
        directions, max_distance = MOVEMENT[piece.kind]
        for direction in directions:
            _walk(board, piece.color, origin, direction, max_distance, targets)
    return frozenset(targets)


def _walk(
    board: Board,
    color: Color,
    origin: Position,
    direction: Direction,
    max_distance: int,
    targets: list[Position],
) -> None:
    d_column, d_row = direction
    current = origin
    for _ in range(max_distance):
        step = current.offset(d_column, d_row)
        if step is None:
            return
        current = step
        occupant = board.piece_at(current)
        if occupant is None:
            targets.append(current)
            continue
        if occupant.color != color:
            targets.append(current)
        return


def _gen_pawn(
    board: Board, color: Color, origin: Position, targets: list[Position]
) -> None:
    forward = PAWN_FORWARD[color]

    # Diagonals only ever capture.
    for d_column in (-1, 1):
        target = origin.offset(d_column, forward)
        if target is None:
            continue
        occupant = board.piece_at(target)
        if occupant is not None and occupant.color != color:
            targets.append(target)

    # Pushes never capture.
    steps = 2 if origin.row == PAWN_HOME_ROW[color] else 1
    current = origin
    for _ in range(steps):
        step = current.offset(0, forward)
        if step is None or not board.is_empty(step):
            return
        current = step
        targets.append(current)


# -- Cached generator ---------------------------------------------------------


class MoveGenerator:
    """Computes destination sets for every piece on a :class:`Board`.

    Results are cached against ``board.version`` and recomputed as soon as
    the board has been mutated.
    """

    __slots__ = ("_board", "_cache", "_cache_version")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._cache: dict[int, frozenset[Position]] = {}
        self._cache_version = -1

    @property
    def board(self) -> Board:
        return self._board

    def compute_destinations(self) -> dict[int, frozenset[Position]]:
        """Map of piece id -> pseudo-legal destinations.

        Kings come first, then the remaining pieces in registry order.
        Captured pieces get no entry.
        """
        return dict(self._refresh())

    def destinations_for(self, piece: Piece) -> frozenset[Position]:
        if piece.position is None:
            return frozenset()
        return self._refresh().get(piece.id, frozenset())

    def _refresh(self) -> dict[int, frozenset[Position]]:
        board = self._board
        if self._cache_version == board.version:
            return self._cache

        on_board = board.pieces.on_board()
        ordered = [p for p in on_board if p.kind == PieceKind.KING] + [
            p for p in on_board if p.kind != PieceKind.KING
        ]
        self._cache = {p.id: pseudo_legal_destinations(board, p) for p in ordered}
        self._cache_version = board.version
        return self._cache
