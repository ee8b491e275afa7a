"""Perft - leaf-node counting over the legal move tree.

Reference values: https://www.chessprogramming.org/Perft_Results
(only comparable where the tree contains no castling or en-passant capture).
"""

from __future__ import annotations

import logging

from chessrules.core.errors import InputError
from chessrules.core.move import Move
from chessrules.core.position import Position
from chessrules.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth*."""
    if depth < 0:
        raise InputError(f"Perft depth must be >= 0, got {depth}")
    if depth == 0:
        return 1
    moves = Rules.legal_moves(position)
    if depth == 1:
        return len(moves)
    return sum(perft(position.play(move), depth - 1) for move in moves)


def divide(position: Position, depth: int) -> list[tuple[Move, int]]:
    """Per-root-move node counts at *depth*, in generation order."""
    if depth < 1:
        raise InputError(f"Divide depth must be >= 1, got {depth}")
    counts = [
        (move, perft(position.play(move), depth - 1))
        for move in Rules.legal_moves(position)
    ]
    _LOGGER.debug(
        "divide depth %d: %d root moves, %d nodes",
        depth,
        len(counts),
        sum(n for _, n in counts),
    )
    return counts
