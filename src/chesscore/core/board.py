"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chesscore.core.enums import Color, PieceKind, Shade
from chesscore.core.piece import Piece, PieceSet
from chesscore.core.types import ALL_POSITIONS, BOARD_SIZE, Position, position_of

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)

# [color] -> (pawn row, back row)
HOME_ROWS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 0),
    Color.BLACK: (6, 7),
}


@dataclass(frozen=True, slots=True)
class Cell:
    """Read-only view of one square and its occupant."""

    position: Position
    piece: Piece | None

    @property
    def shade(self) -> Shade:
        return self.position.shade

    @property
    def is_empty(self) -> bool:
        return self.piece is None


class Board:
    """Mutable 64-square board.

    Occupancy is a one-way index ``Position -> piece id`` into the owned
    :class:`PieceSet`; each piece keeps its own position as plain data.
    Every mutation bumps :attr:`version`.
    """

    __slots__ = ("_pieces", "_occupants", "_version")

    def __init__(self, pieces: PieceSet | None = None) -> None:
        self._pieces = pieces if pieces is not None else PieceSet.standard()
        self._occupants: dict[Position, int] = {}
        self._version = 0

    @classmethod
    def standard(cls) -> Board:
        """Fresh piece set in the standard starting layout."""
        board = cls()
        board.setup_standard()
        return board

    # -- Properties ---------------------------------------------------------

    @property
    def pieces(self) -> PieceSet:
        return self._pieces

    @property
    def version(self) -> int:
        return self._version

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: Position) -> Piece | None:
        return self.piece_at(position)

    def piece_at(self, position: Position) -> Piece | None:
        piece_id = self._occupants.get(position)
        return None if piece_id is None else self._pieces[piece_id]

    def is_empty(self, position: Position) -> bool:
        return position not in self._occupants

    def cell_at(self, position: Position) -> Cell:
        return Cell(position, self.piece_at(position))

    def cells(self) -> Iterator[Cell]:
        """All 64 cells, row-major from a1."""
        for position in ALL_POSITIONS:
            yield self.cell_at(position)

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        for position in ALL_POSITIONS:
            piece_id = self._occupants.get(position)
            if piece_id is not None:
                yield position, self._pieces[piece_id]

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece, position: Position) -> None:
        """Put *piece* on *position*, overwriting whatever was there.

        No legality checks. A displaced occupant goes off the board.
        """
        previous = piece.position
        if previous is not None and self._occupants.get(previous) == piece.id:
            del self._occupants[previous]

        displaced = self._occupants.get(position)
        if displaced is not None and displaced != piece.id:
            self._pieces[displaced].position = None

        self._occupants[position] = piece.id
        piece.position = position
        self._version += 1

    def clear(self, position: Position) -> Piece | None:
        """Remove and return the occupant of *position*, if any."""
        piece_id = self._occupants.pop(position, None)
        if piece_id is None:
            return None
        piece = self._pieces[piece_id]
        piece.position = None
        self._version += 1
        return piece

    def clear_all(self) -> None:
        for piece_id in self._occupants.values():
            self._pieces[piece_id].position = None
        self._occupants.clear()
        self._version += 1

    def setup_standard(self) -> None:
        """Clear the board and place the standard starting layout."""
        self.clear_all()
        for color in Color:
            pawn_row, back_row = HOME_ROWS[color]
            for column in range(BOARD_SIZE):
                pawn = self._pieces.first_off_board(PieceKind.PAWN, color)
                if pawn is not None:
                    self.place(pawn, position_of(column, pawn_row))
                officer = self._pieces.first_off_board(BACK_RANK[column], color)
                if officer is not None:
                    self.place(officer, position_of(column, back_row))

    # -- Comparison helpers -------------------------------------------------

    def snapshot(self) -> tuple[tuple[Position, int], ...]:
        """Hashable occupancy, ordered row-major."""
        return tuple(
            (position, self._occupants[position])
            for position in ALL_POSITIONS
            if position in self._occupants
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            letters = []
            for column in range(BOARD_SIZE):
                piece = self.piece_at(position_of(column, row))
                letters.append(piece.letter if piece else ".")
            rows.append(f"{row + 1} {' '.join(letters)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
