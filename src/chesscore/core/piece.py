"""Pieces and the registry that owns the full 32-piece set."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chesscore.core.enums import Color, PieceKind
from chesscore.core.types import Position

_LETTERS: dict[PieceKind, str] = {
    PieceKind.KING: "K",
    PieceKind.QUEEN: "Q",
    PieceKind.BISHOP: "B",
    PieceKind.KNIGHT: "N",
    PieceKind.ROOK: "R",
    PieceKind.PAWN: "P",
}

_UNICODE: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.BLACK, PieceKind.KING): "♚",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.PAWN): "♟",
}

# Pieces per color in a standard set.
SET_COUNTS: dict[PieceKind, int] = {
    PieceKind.KING: 1,
    PieceKind.QUEEN: 1,
    PieceKind.BISHOP: 2,
    PieceKind.KNIGHT: 2,
    PieceKind.ROOK: 2,
    PieceKind.PAWN: 8,
}


def symbol_for(color: Color, kind: PieceKind) -> str:
    """Unicode chess symbol, e.g. ♞."""
    return _UNICODE[(color, kind)]


def letter_for(color: Color, kind: PieceKind) -> str:
    """One-letter code, uppercase for white."""
    letter = _LETTERS[kind]
    return letter if color == Color.WHITE else letter.lower()


@dataclass(slots=True, eq=False)
class Piece:
    """A single piece with fixed identity and a mutable square.

    ``position`` is ``None`` while the piece is captured (off the board).
    Equality is identity: two white pawns are still different pieces.
    """

    id: int
    kind: PieceKind
    color: Color
    position: Position | None = None

    @property
    def on_board(self) -> bool:
        return self.position is not None

    @property
    def letter(self) -> str:
        """One-letter code, uppercase for white."""
        return letter_for(self.color, self.kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return symbol_for(self.color, self.kind)

    def __str__(self) -> str:
        return self.letter

    def __repr__(self) -> str:
        where = str(self.position) if self.position is not None else "off"
        return f"Piece({self.id}, {self.color} {self.kind}, {where})"


class PieceSet:
    """Registry owning every piece of one game.

    Pieces are created once, never destroyed; capture only moves a piece
    off the board.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: list[Piece] | None = None) -> None:
        self._pieces: list[Piece] = pieces if pieces is not None else []

    @classmethod
    def standard(cls) -> PieceSet:
        """The 32 pieces of a standard set, all off the board."""
        pieces: list[Piece] = []
        for color in Color:
            for kind in PieceKind:
                for _ in range(SET_COUNTS[kind]):
                    pieces.append(Piece(len(pieces), kind, color))
        return cls(pieces)

    def add(self, kind: PieceKind, color: Color) -> Piece:
        """Create and register a new off-board piece."""
        piece = Piece(len(self._pieces), kind, color)
        self._pieces.append(piece)
        return piece

    # -- Lookup -------------------------------------------------------------

    def __getitem__(self, piece_id: int) -> Piece:
        return self._pieces[piece_id]

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def on_board(self) -> list[Piece]:
        return [p for p in self._pieces if p.position is not None]

    def of_color(self, color: Color) -> list[Piece]:
        return [p for p in self._pieces if p.color == color]

    def kings(self) -> list[Piece]:
        """On-board kings, white first."""
        return [
            p
            for p in self._pieces
            if p.kind == PieceKind.KING and p.position is not None
        ]

    def king(self, color: Color) -> Piece:
        """The on-board king of *color*."""
        for piece in self._pieces:
            if (
                piece.kind == PieceKind.KING
                and piece.color == color
                and piece.position is not None
            ):
                return piece
        raise ValueError(f"No {color.name} king on board")

    def first_off_board(self, kind: PieceKind, color: Color) -> Piece | None:
        for piece in self._pieces:
            if piece.kind == kind and piece.color == color and piece.position is None:
                return piece
        return None
