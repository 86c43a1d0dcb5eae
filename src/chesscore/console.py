"""Console front end: text board, scripted move lists and an input loop."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from chesscore.core.enums import Color, PieceKind, RejectReason, Shade
from chesscore.core.piece import letter_for, symbol_for
from chesscore.game.controller import GameController
from chesscore.game.outcomes import Check, Checkmate, MoveOutcome, Rejected
from chesscore.game.snapshot import BoardSnapshot
from chesscore.notation import NotationError, parse_move, square_name

_LOGGER = logging.getLogger(__name__)

# Scholar's mate, the stock demonstration line.
DEMO_MOVES: tuple[str, ...] = (
    "e2e4",
    "e7e5",
    "f1c4",
    "b8c6",
    "d1h5",
    "g8f6",
    "h5f7",
)

_EMPTY_UNICODE: dict[Shade, str] = {Shade.DARK: "◼", Shade.LIGHT: "◻"}
_EMPTY_LETTERS: dict[Shade, str] = {Shade.DARK: ":", Shade.LIGHT: "."}


# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class ConsoleSettings:
    """User-configurable console options."""

    unicode_symbols: bool = True
    show_coordinates: bool = True
    log_level: str = "WARNING"


# ── Rendering ────────────────────────────────────────────────────────────────


def render_text(board: BoardSnapshot, settings: ConsoleSettings | None = None) -> str:
    """Draw *board* with rank 8 on top."""
    settings = settings or ConsoleSettings()
    empty = _EMPTY_UNICODE if settings.unicode_symbols else _EMPTY_LETTERS
    border = "  " + "═" * 8 if settings.show_coordinates else "═" * 10

    lines = [border]
    for row in board.rows():
        glyphs = []
        for view in row:
            if view.kind is None or view.color is None:
                glyphs.append(empty[view.shade])
            else:
                glyphs.append(_glyph(view.color, view.kind, settings))
        body = "".join(glyphs)
        if settings.show_coordinates:
            lines.append(f"{row[0].position.row + 1}║{body}║")
        else:
            lines.append(f"║{body}║")
    lines.append(border)
    if settings.show_coordinates:
        lines.append("  abcdefgh")
    return "\n".join(lines)


def _glyph(color: Color, kind: PieceKind, settings: ConsoleSettings) -> str:
    if settings.unicode_symbols:
        return symbol_for(color, kind)
    return letter_for(color, kind)


def describe_outcome(
    outcome: MoveOutcome,
    before: BoardSnapshot,
    settings: ConsoleSettings | None = None,
) -> str:
    """One-line report of *outcome*; *before* is the board the move was tried on."""
    settings = settings or ConsoleSettings()
    move = f"{square_name(outcome.from_pos)} -> {square_name(outcome.to_pos)}"

    if isinstance(outcome, Rejected):
        occupant = before.piece_at(outcome.from_pos)
        if outcome.reason == RejectReason.NO_PIECE or occupant is None:
            return f"{square_name(outcome.from_pos)} has no piece on it"
        piece = _glyph(*occupant, settings)
        if outcome.reason == RejectReason.WRONG_TURN:
            return f"{piece} it's not your turn"
        if outcome.reason == RejectReason.SELF_CHECK:
            king = _glyph(outcome.mover, PieceKind.KING, settings)
            return f"Your {king} is attacked! You can't go {move}"
        return f"{piece} can't go {move}"
    if isinstance(outcome, Checkmate):
        return f"Checkmate for {_glyph(outcome.color, PieceKind.KING, settings)} !"
    if isinstance(outcome, Check):
        return f"Check for {_glyph(outcome.color, PieceKind.KING, settings)} !"
    return f"Move: {move}"


# ── Session ──────────────────────────────────────────────────────────────────


class ConsoleSession:
    """Feeds text moves into a :class:`GameController` and prints the results."""

    def __init__(
        self,
        settings: ConsoleSettings | None = None,
        out: TextIO | None = None,
        controller: GameController | None = None,
    ) -> None:
        self.settings = settings or ConsoleSettings()
        self.out = out if out is not None else sys.stdout
        self.controller = controller if controller is not None else GameController()

    def show_board(self, board: BoardSnapshot | None = None) -> None:
        board = board or self.controller.state.render()
        print(render_text(board, self.settings), file=self.out)
        print(file=self.out)

    def play(self, text: str) -> MoveOutcome | None:
        """Apply one move typed as text. ``None`` if the text is malformed."""
        try:
            from_pos, to_pos = parse_move(text)
        except NotationError as exc:
            _LOGGER.warning("Ignoring input %r: %s", text, exc)
            print(f"Wrong move: {text!r}", file=self.out)
            return None

        before = self.controller.state.render()
        print(f"Move: {square_name(from_pos)} -> {square_name(to_pos)}", file=self.out)
        outcome = self.controller.submit_move(from_pos, to_pos)

        if isinstance(outcome, Rejected):
            print(describe_outcome(outcome, before, self.settings), file=self.out)
            return outcome
        if isinstance(outcome, Checkmate):
            print(describe_outcome(outcome, before, self.settings), file=self.out)
            self.show_board(outcome.final_board)
            self.show_board()
            return outcome
        if isinstance(outcome, Check):
            print(describe_outcome(outcome, before, self.settings), file=self.out)
        self.show_board()
        return outcome

    def play_script(self, moves: Iterable[str]) -> list[MoveOutcome | None]:
        return [self.play(text) for text in moves]

    def run_interactive(self, source: TextIO) -> None:
        """Read moves line by line until EOF or ``quit``."""
        self.show_board()
        for line in source:
            command = line.strip().lower()
            if not command or command.startswith("#"):
                continue
            if command in ("quit", "exit"):
                break
            if command == "new":
                self.controller.new_game()
                self.show_board()
                continue
            if command == "board":
                self.show_board()
                continue
            self.play(command)


# ── Entry point ──────────────────────────────────────────────────────────────


def read_moves_file(path: Path) -> list[str]:
    """Moves from a text file: whitespace separated, ``#`` starts a comment."""
    moves: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        content = line.split("#", 1)[0]
        moves.extend(content.split())
    return moves


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesscore",
        description="Play chess moves such as e2e4 against the rules engine.",
    )
    parser.add_argument("moves", nargs="*", help="moves to play, e.g. e2e4 e7e5")
    parser.add_argument("--file", type=Path, help="read moves from a text file")
    parser.add_argument(
        "--demo", action="store_true", help="play the scholar's mate line"
    )
    parser.add_argument(
        "--letters", action="store_true", help="draw pieces as letters"
    )
    parser.add_argument(
        "--no-coordinates", action="store_true", help="hide rank and file labels"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the console front end; returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = ConsoleSettings(
        unicode_symbols=not args.letters,
        show_coordinates=not args.no_coordinates,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = ConsoleSession(settings)
    script: list[str] = list(args.moves)
    if args.file is not None:
        try:
            script.extend(read_moves_file(args.file))
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.error("Cannot read moves file %s: %s", args.file, exc)
            return 2
    if args.demo:
        script.extend(DEMO_MOVES)

    if script:
        session.show_board()
        session.play_script(script)
    else:
        session.run_interactive(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
