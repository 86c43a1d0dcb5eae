"""Tests for Piece and PieceSet."""

import pytest

from chesscore.core.enums import Color, PieceKind
from chesscore.core.piece import SET_COUNTS, Piece, PieceSet
from chesscore.core.types import E1


class TestPieceSet:
    def test_standard_has_32_pieces(self) -> None:
        pieces = PieceSet.standard()
        assert len(pieces) == 32
        assert [p.id for p in pieces] == list(range(32))

    def test_standard_composition(self) -> None:
        pieces = PieceSet.standard()
        for color in Color:
            for kind, count in SET_COUNTS.items():
                matching = [
                    p for p in pieces.of_color(color) if p.kind == kind
                ]
                assert len(matching) == count, f"{color} {kind}"

    def test_creation_order(self) -> None:
        pieces = PieceSet.standard()
        assert pieces[0].kind == PieceKind.KING
        assert pieces[0].color == Color.WHITE
        assert pieces[16].kind == PieceKind.KING
        assert pieces[16].color == Color.BLACK

    def test_all_start_off_board(self) -> None:
        pieces = PieceSet.standard()
        assert pieces.on_board() == []
        assert pieces.kings() == []

    def test_king_missing_raises(self) -> None:
        pieces = PieceSet.standard()
        with pytest.raises(ValueError, match="No WHITE king"):
            pieces.king(Color.WHITE)

    def test_first_off_board_skips_placed(self) -> None:
        pieces = PieceSet.standard()
        first = pieces.first_off_board(PieceKind.ROOK, Color.BLACK)
        assert first is not None
        first.position = E1
        second = pieces.first_off_board(PieceKind.ROOK, Color.BLACK)
        assert second is not None and second is not first
        second.position = E1
        assert pieces.first_off_board(PieceKind.ROOK, Color.BLACK) is None

    def test_add(self) -> None:
        pieces = PieceSet()
        queen = pieces.add(PieceKind.QUEEN, Color.WHITE)
        assert queen.id == 0
        assert pieces[0] is queen


class TestPiece:
    def test_identity_equality(self) -> None:
        a = Piece(8, PieceKind.PAWN, Color.WHITE)
        b = Piece(9, PieceKind.PAWN, Color.WHITE)
        assert a != b
        assert a == a

    def test_letters(self) -> None:
        assert Piece(0, PieceKind.KNIGHT, Color.WHITE).letter == "N"
        assert Piece(1, PieceKind.KNIGHT, Color.BLACK).letter == "n"

    def test_symbols(self) -> None:
        assert Piece(0, PieceKind.KING, Color.WHITE).symbol == "♔"
        assert Piece(1, PieceKind.KING, Color.BLACK).symbol == "♚"

    def test_on_board_flag(self) -> None:
        piece = Piece(0, PieceKind.ROOK, Color.WHITE)
        assert not piece.on_board
        piece.position = E1
        assert piece.on_board
