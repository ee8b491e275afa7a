"""Pure board transformation: ``(board, move) -> board``."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import MoveFlag
from chessrules.core.errors import InternalInvariantViolation
from chessrules.core.move import Move
from chessrules.core.types import square_name


def apply_move(board: Board, move: Move) -> Board:
    """Return the board after *move*; *board* itself is left untouched.

    Only piece placement changes. Side to move, en-passant target and
    castling rights belong to :meth:`Position.play`.
    """
    if move.is_castle:
        raise InternalInvariantViolation(
            f"Castling is not supported by the move applier: {move.flag.name}"
        )

    piece = board[move.from_sq]
    if piece is None:
        raise InternalInvariantViolation(
            f"No piece on {square_name(move.from_sq)} to apply {move}"
        )

    if move.flag == MoveFlag.PROMOTION:
        assert move.promotion is not None
        piece = piece.promoted(move.promotion)

    return board.replace({move.from_sq: None, move.to_sq: piece})
