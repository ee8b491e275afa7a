"""King attack detection."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move_generator import MoveGenerator


def is_king_attacked(board: Board, color: Color) -> bool:
    """Is *color*'s king a target of any opponent pseudo-legal move?

    Runs the full opponent move generator rather than a dedicated attack
    scan, so the cost equals one side-wide generation.
    """
    king_squares = set(board.king_squares(color))
    if not king_squares:
        return False
    opponent_moves = MoveGenerator(board).generate_pseudo_legal_moves(color.opposite)
    return any(move.to_sq in king_squares for move in opponent_moves)
