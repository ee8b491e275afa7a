"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from chessrules.core import Rules, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in Rules.legal_moves(pos):
        print(move)
"""

from chessrules.core.attacks import is_king_attacked
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.errors import ChessRulesError, InputError, InternalInvariantViolation
from chessrules.core.move import Move
from chessrules.core.move_applier import apply_move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.perft import divide, perft
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "PieceType",
    # Errors
    "ChessRulesError",
    "InputError",
    "InternalInvariantViolation",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Operations
    "apply_move",
    "divide",
    "is_king_attacked",
    "perft",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
