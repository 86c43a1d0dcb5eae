"""High-level chess rules: check, checkmate and the legality probe."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.core.enums import Color, PieceKind, RejectReason
from chesscore.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesscore.core.board import Board
    from chesscore.core.piece import Piece
    from chesscore.core.types import Position


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every method accepts an optional :class:`MoveGenerator` bound to the same
    board so callers can share its destination cache.
    """

    # -- Check detection ----------------------------------------------------

    @staticmethod
    def attacker_of(
        board: Board, king: Piece, gen: MoveGenerator | None = None
    ) -> Piece | None:
        """First opposing piece whose destinations include *king*'s square."""
        target = king.position
        if target is None:
            return None
        destinations = (gen or MoveGenerator(board)).compute_destinations()

        for piece in board.pieces:
            if piece.color == king.color or piece.position is None:
                continue
            if target not in destinations.get(piece.id, ()):
                continue
            # Pawns only attack diagonally.
            if piece.kind == PieceKind.PAWN and piece.position.column == target.column:
                continue
            return piece
        return None

    @staticmethod
    def attacked_kings(board: Board, gen: MoveGenerator | None = None) -> list[Piece]:
        """Every king currently attacked, white first."""
        gen = gen or MoveGenerator(board)
        return [
            king
            for king in board.pieces.kings()
            if Rules.attacker_of(board, king, gen) is not None
        ]

    @staticmethod
    def is_any_king_attacked(
        board: Board, gen: MoveGenerator | None = None
    ) -> Piece | None:
        """The first attacked king, or ``None``.

        Both kings can only be attacked at once in a hand-built position;
        use :meth:`attacked_kings` to see both.
        """
        attacked = Rules.attacked_kings(board, gen)
        return attacked[0] if attacked else None

    @staticmethod
    def is_king_attacked(
        board: Board, color: Color, gen: MoveGenerator | None = None
    ) -> bool:
        """Is *color*'s king attacked? A side with no king is never in check."""
        gen = gen or MoveGenerator(board)
        for king in board.pieces.kings():
            if king.color == color and Rules.attacker_of(board, king, gen) is not None:
                return True
        return False

    # -- Legality probe -------------------------------------------------------

    @staticmethod
    def probe_move(
        board: Board,
        from_pos: Position,
        to_pos: Position,
        mover: Color,
        gen: MoveGenerator | None = None,
    ) -> RejectReason | None:
        """Test a move for *mover* and return why it fails, or ``None``.

        The move is made tentatively to look for self-check and always
        reverted, so the board is left exactly as found.
        """
        gen = gen or MoveGenerator(board)
        piece = board.piece_at(from_pos)
        if piece is None:
            return RejectReason.NO_PIECE
        if piece.color != mover:
            return RejectReason.WRONG_TURN
        if to_pos not in gen.destinations_for(piece):
            return RejectReason.ILLEGAL_DESTINATION

        board.clear(from_pos)
        captured = board.clear(to_pos)
        board.place(piece, to_pos)
        try:
            exposed = Rules.is_king_attacked(board, mover, gen)
        finally:
            board.clear(to_pos)
            board.place(piece, from_pos)
            if captured is not None:
                board.place(captured, to_pos)

        return RejectReason.SELF_CHECK if exposed else None

    @staticmethod
    def is_legal_move(
        board: Board,
        from_pos: Position,
        to_pos: Position,
        mover: Color,
        gen: MoveGenerator | None = None,
    ) -> bool:
        return Rules.probe_move(board, from_pos, to_pos, mover, gen) is None

    @staticmethod
    def legal_destinations(
        board: Board, piece: Piece, gen: MoveGenerator | None = None
    ) -> frozenset[Position]:
        """Destinations of *piece* that do not expose its own king."""
        origin = piece.position
        if origin is None:
            return frozenset()
        gen = gen or MoveGenerator(board)
        return frozenset(
            to_pos
            for to_pos in gen.destinations_for(piece)
            if Rules.is_legal_move(board, origin, to_pos, piece.color, gen)
        )

    # -- Checkmate ------------------------------------------------------------

    @staticmethod
    def has_legal_move(
        board: Board, color: Color, gen: MoveGenerator | None = None
    ) -> bool:
        gen = gen or MoveGenerator(board)
        for piece in board.pieces.of_color(color):
            origin = piece.position
            if origin is None:
                continue
            for to_pos in gen.destinations_for(piece):
                if Rules.is_legal_move(board, origin, to_pos, color, gen):
                    return True
        return False

    @staticmethod
    def is_checkmate(
        board: Board, king: Piece, gen: MoveGenerator | None = None
    ) -> bool:
        """Is *king* attacked with no move of its side to escape?"""
        gen = gen or MoveGenerator(board)
        if Rules.attacker_of(board, king, gen) is None:
            return False
        return not Rules.has_legal_move(board, king.color, gen)
