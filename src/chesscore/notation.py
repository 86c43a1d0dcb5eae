"""Square and move coordinates as typed by people, e.g. ``"e2"`` / ``"e2e4"``."""

from __future__ import annotations

from chesscore.core.types import Position, position_of

_FILES = "abcdefgh"
_RANKS = "12345678"
_SEPARATORS = ("-", " ", "x")


class NotationError(ValueError):
    """Raised for coordinates that do not name a square on the board."""


def parse_square(name: str) -> Position:
    """Parse square name, e.g. 'e4' → Position(4, 3)."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in _FILES or text[1] not in _RANKS:
        raise NotationError(f"Invalid square name: {name!r}")
    return position_of(_FILES.index(text[0]), _RANKS.index(text[1]))


def square_name(position: Position) -> str:
    """Human-readable name, e.g. Position(0, 0) → 'a1'."""
    return _FILES[position.column] + _RANKS[position.row]


def parse_move(text: str) -> tuple[Position, Position]:
    """Parse ``"e2e4"``, ``"e2-e4"``, ``"e2 e4"`` or ``"e2xf3"``."""
    compact = text.strip().lower()
    for separator in _SEPARATORS:
        compact = compact.replace(separator, "")
    if len(compact) != 4:
        raise NotationError(f"Invalid move: {text!r}")
    return parse_square(compact[:2]), parse_square(compact[2:])


def format_move(from_pos: Position, to_pos: Position) -> str:
    return f"{square_name(from_pos)}-{square_name(to_pos)}"
