"""Position - complete game state (board + metadata) and state transitions."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.errors import InternalInvariantViolation
from chessrules.core.move import Move
from chessrules.core.move_applier import apply_move
from chessrules.core.types import A1, A8, H1, H8, Square, file_of, make_square, rank_of

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}


@dataclass(frozen=True, slots=True)
class Position:
    """Board + side to move + castling rights + en-passant target.

    Positions are values: :meth:`play` returns a successor and never
    modifies ``self``.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, White to move."""
        return cls()

    def play(self, move: Move) -> Position:
        """Successor position after *move* with all metadata advanced."""
        piece = self.board[move.from_sq]
        if piece is None:
            raise InternalInvariantViolation(f"No piece to move for {move}")

        return Position(
            board=apply_move(self.board, move),
            side_to_move=self.side_to_move.opposite,
            castling=self._castling_after(move, piece.color, piece.piece_type),
            en_passant=self._en_passant_after(move, piece.piece_type),
        )

    # ── Metadata bookkeeping ─────────────────────────────────────────────

    def _castling_after(
        self, move: Move, color: Color, piece_type: PieceType
    ) -> CastlingRights:
        rights = self.castling
        if piece_type == PieceType.KING:
            rights &= ~CastlingRights.for_color(color)
        # A rook leaving its corner, or anything landing on one, kills that side.
        for sq in (move.from_sq, move.to_sq):
            if sq in _ROOK_CORNERS:
                rights &= ~_ROOK_CORNERS[sq]
        return rights

    @staticmethod
    def _en_passant_after(move: Move, piece_type: PieceType) -> Square | None:
        if piece_type != PieceType.PAWN:
            return None
        from_rank = rank_of(move.from_sq)
        to_rank = rank_of(move.to_sq)
        if abs(to_rank - from_rank) != 2:
            return None
        return make_square(file_of(move.from_sq), (from_rank + to_rank) // 2)
