"""Tests for Position and coordinate helpers."""

import pytest

from chesscore.core.enums import Shade
from chesscore.core.types import (
    A1,
    A8,
    ALL_POSITIONS,
    E4,
    H1,
    H8,
    Position,
    position_of,
)


class TestPosition:
    def test_structural_equality(self) -> None:
        assert Position(4, 3) == E4
        assert hash(Position(4, 3)) == hash(E4)

    def test_interned_lookup(self) -> None:
        assert position_of(0, 7) is A8

    @pytest.mark.parametrize("column, row", [(-1, 0), (0, 8), (8, 8), (3, -2)])
    def test_off_board_raises(self, column: int, row: int) -> None:
        with pytest.raises(ValueError, match="off the board"):
            Position(column, row)
        with pytest.raises(ValueError, match="off the board"):
            position_of(column, row)

    def test_offset_inside(self) -> None:
        assert A1.offset(1, 1) == Position(1, 1)
        assert E4.offset(-4, 4) == A8

    def test_offset_past_edge(self) -> None:
        assert H1.offset(1, 0) is None
        assert H8.offset(0, 1) is None
        assert A1.offset(-1, -2) is None

    def test_shade_from_parity(self) -> None:
        assert A1.shade == Shade.DARK
        assert H1.shade == Shade.LIGHT
        assert H8.shade == Shade.DARK

    def test_str(self) -> None:
        assert str(E4) == "e4"
        assert repr(A8) == "Position(a8)"


class TestAllPositions:
    def test_sixty_four_distinct(self) -> None:
        assert len(ALL_POSITIONS) == 64
        assert len(set(ALL_POSITIONS)) == 64

    def test_row_major_from_a1(self) -> None:
        assert ALL_POSITIONS[0] == A1
        assert ALL_POSITIONS[7] == H1
        assert ALL_POSITIONS[-1] == H8
