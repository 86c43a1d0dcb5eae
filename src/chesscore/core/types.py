"""Board coordinates.

Columns 0–7 map to files a–h, rows 0–7 to ranks 1–8:
    a1 = Position(0, 0), h1 = Position(7, 0), a8 = Position(0, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.enums import Shade

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable (column, row) pair on the 8x8 board."""

    column: int
    row: int

    def __post_init__(self) -> None:
        if not (0 <= self.column < BOARD_SIZE and 0 <= self.row < BOARD_SIZE):
            raise ValueError(f"Position off the board: ({self.column}, {self.row})")

    def offset(self, d_column: int, d_row: int) -> Position | None:
        """Neighbouring position, or ``None`` past the board edge."""
        column = self.column + d_column
        row = self.row + d_row
        if 0 <= column < BOARD_SIZE and 0 <= row < BOARD_SIZE:
            return _GRID[row][column]
        return None

    @property
    def shade(self) -> Shade:
        return Shade.DARK if (self.column + self.row) % 2 == 0 else Shade.LIGHT

    def __str__(self) -> str:
        return chr(ord("a") + self.column) + str(self.row + 1)

    def __repr__(self) -> str:
        return f"Position({self})"


_GRID: tuple[tuple[Position, ...], ...] = tuple(
    tuple(Position(column, row) for column in range(BOARD_SIZE))
    for row in range(BOARD_SIZE)
)

# Row-major from a1.
ALL_POSITIONS: tuple[Position, ...] = tuple(p for row in _GRID for p in row)


def position_of(column: int, row: int) -> Position:
    """Interned position for (column, row)."""
    if not (0 <= column < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"Position off the board: ({column}, {row})")
    return _GRID[row][column]


# ── Named position constants ────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = _GRID[0]
A2, B2, C2, D2, E2, F2, G2, H2 = _GRID[1]
A3, B3, C3, D3, E3, F3, G3, H3 = _GRID[2]
A4, B4, C4, D4, E4, F4, G4, H4 = _GRID[3]
A5, B5, C5, D5, E5, F5, G5, H5 = _GRID[4]
A6, B6, C6, D6, E6, F6, G6, H6 = _GRID[5]
A7, B7, C7, D7, E7, F7, G7, H7 = _GRID[6]
A8, B8, C8, D8, E8, F8, G8, H8 = _GRID[7]
