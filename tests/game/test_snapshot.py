"""Tests for BoardSnapshot and render()."""

from chesscore.core.enums import Color, PieceKind, Shade
from chesscore.core.types import A1, A8, E1, E2, E4, H1
from chesscore.game.snapshot import render
from chesscore.game.state import new_game


class TestSnapshot:
    def test_render_initial(self) -> None:
        snap = render(new_game())
        assert len(snap.cells) == 64
        assert snap.turn == Color.WHITE
        assert snap.piece_at(E1) == (Color.WHITE, PieceKind.KING)
        assert snap.piece_at(E4) is None
        assert snap.count(Color.BLACK) == 16

    def test_cell_shades(self) -> None:
        snap = render(new_game())
        assert snap.cell(A1).shade == Shade.DARK
        assert snap.cell(H1).shade == Shade.LIGHT
        assert snap.cell(E4).is_empty

    def test_rows_top_down(self) -> None:
        rows = render(new_game()).rows()
        assert len(rows) == 8
        assert rows[0][0].position == A8
        assert rows[-1][0].position == A1

    def test_snapshot_is_detached(self) -> None:
        gs = new_game()
        snap = gs.render()
        gs.apply_move(E2, E4)
        assert snap.piece_at(E4) is None
        assert gs.render().piece_at(E4) == (Color.WHITE, PieceKind.PAWN)
