"""Legal move filtering on top of pseudo-legal generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.attacks import is_king_attacked
from chessrules.core.errors import InputError
from chessrules.core.move import Move
from chessrules.core.move_applier import apply_move
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def legal_moves(position: Position) -> list[Move]:
        """Pseudo-legal moves of the side to move that keep its king safe.

        Each candidate is played on a scratch board and the king is tested
        afterwards, so the relative generation order is preserved.
        """
        color = position.side_to_move
        board = position.board
        candidates = MoveGenerator(board).generate_pseudo_legal_moves(color)
        legal = [
            move
            for move in candidates
            if not is_king_attacked(apply_move(board, move), color)
        ]
        _LOGGER.debug(
            "%s: %d pseudo-legal, %d legal", color, len(candidates), len(legal)
        )
        return legal

    @staticmethod
    def is_legal(position: Position, move: Move) -> bool:
        return move in Rules.legal_moves(position)

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_king_attacked(position.board, position.side_to_move)

    @staticmethod
    def find_move(position: Position, uci: str) -> Move:
        """Resolve UCI text such as ``e2e4`` or ``e7e8q`` to a legal move."""
        text = uci.strip().lower()
        for move in Rules.legal_moves(position):
            if move.uci == text:
                return move
        raise InputError(f"Illegal move: {uci!r}")
