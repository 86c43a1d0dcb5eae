"""Tests for the console front end."""

import io
from pathlib import Path

import pytest

from chesscore.console import (
    ConsoleSession,
    ConsoleSettings,
    describe_outcome,
    main,
    read_moves_file,
    render_text,
)
from chesscore.core.types import E2, E4, E5, E7
from chesscore.game.outcomes import Rejected
from chesscore.game.state import new_game


class TestRenderText:
    def test_initial_board(self) -> None:
        lines = render_text(new_game().render()).splitlines()
        assert lines[0] == "  ════════"
        assert lines[1] == "8║♜♞♝♛♚♝♞♜║"
        assert lines[5] == "4║◻◼◻◼◻◼◻◼║"
        assert lines[8] == "1║♖♘♗♕♔♗♘♖║"
        assert lines[-1] == "  abcdefgh"

    def test_letters_without_coordinates(self) -> None:
        settings = ConsoleSettings(unicode_symbols=False, show_coordinates=False)
        lines = render_text(new_game().render(), settings).splitlines()
        assert lines[1] == "║rnbqkbnr║"
        assert lines[8] == "║RNBQKBNR║"
        assert len(lines) == 10

    def test_glyph_convention(self) -> None:
        # Outline figurines for white, filled for black; dark squares filled.
        lines = render_text(new_game().render()).splitlines()
        assert lines[8].startswith("1║♖")
        assert lines[1][6] == "♚"
        assert lines[4][2] == "◼"  # a5, column 0 + row 4 is dark


class TestDescribeOutcome:
    def test_wrong_turn(self) -> None:
        gs = new_game()
        before = gs.render()
        outcome = gs.apply_move(E7, E5)
        assert isinstance(outcome, Rejected)
        assert describe_outcome(outcome, before) == "♟ it's not your turn"

    def test_no_piece(self) -> None:
        gs = new_game()
        before = gs.render()
        outcome = gs.apply_move(E4, E5)
        assert describe_outcome(outcome, before) == "e4 has no piece on it"

    def test_illegal_destination(self) -> None:
        gs = new_game()
        before = gs.render()
        outcome = gs.apply_move(E2, E5)
        assert describe_outcome(outcome, before) == "♙ can't go e2 -> e5"

    def test_applied(self) -> None:
        gs = new_game()
        before = gs.render()
        outcome = gs.apply_move(E2, E4)
        assert describe_outcome(outcome, before) == "Move: e2 -> e4"


class TestSession:
    def test_malformed_input(self) -> None:
        out = io.StringIO()
        session = ConsoleSession(out=out)
        assert session.play("e9e4") is None
        assert "Wrong move" in out.getvalue()
        assert session.controller.state.ply_count == 0

    def test_interactive_loop(self) -> None:
        out = io.StringIO()
        session = ConsoleSession(out=out)
        session.run_interactive(io.StringIO("e2e4\n# comment\n\ne7e5\nquit\nd2d4\n"))
        assert session.controller.state.ply_count == 2
        assert out.getvalue().count("Move:") == 2

    def test_new_command(self) -> None:
        session = ConsoleSession(out=io.StringIO())
        session.run_interactive(io.StringIO("e2e4\nnew\n"))
        assert session.controller.state.ply_count == 0


class TestMain:
    def test_demo_ends_in_checkmate(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--demo"]) == 0
        output = capsys.readouterr().out
        assert "Checkmate for ♚ !" in output
        assert "Move: h5 -> f7" in output

    def test_moves_from_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--letters", "e2e4", "e2e4"]) == 0
        output = capsys.readouterr().out
        assert "e2 has no piece on it" in output

    def test_moves_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script = tmp_path / "moves.txt"
        script.write_text("e2e4 e7e5  # opening\nd1h5\n", encoding="utf-8")
        assert read_moves_file(script) == ["e2e4", "e7e5", "d1h5"]
        assert main(["--file", str(script)]) == 0
        assert capsys.readouterr().out.count("Move:") == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["--file", str(tmp_path / "absent.txt")]) == 2

    def test_undecodable_file(self, tmp_path: Path) -> None:
        script = tmp_path / "moves.txt"
        script.write_bytes(b"e2e4 \xff\xfe e7e5\n")
        assert main(["--file", str(script)]) == 2
