"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.errors import InputError
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, make_square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_LOGGER = logging.getLogger(__name__)

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Halfmove and fullmove counters are accepted but ignored.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InputError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    board = _parse_placement(placement)

    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InputError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = CastlingRights.NONE
    if castling_part != "-":
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None:
                raise InputError(f"Invalid FEN castling field: {castling_part!r}")
            castling |= right

    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except InputError:
            raise InputError(f"Invalid FEN en-passant square: {ep_part!r}") from None

    _LOGGER.debug("Imported FEN %r", fen)
    return Position(board, side, castling, ep)


def _parse_placement(placement: str) -> Board:
    rows = placement.split("/")
    if len(rows) != 8:
        raise InputError(
            f"Invalid FEN board (must contain 8 ranks, got {len(rows)}): {placement!r}"
        )
    cells: list[Piece | None] = [None] * 64
    for row_idx, row_text in enumerate(rows):
        rank = 7 - row_idx
        file = 0
        for ch in row_text:
            if ch in "12345678":
                file += int(ch)
            else:
                piece = Piece.from_char(ch)
                if file < 8:
                    cells[make_square(file, rank)] = piece
                file += 1
            if file > 8:
                raise InputError(f"Invalid FEN rank width (rank {rank + 1}): {row_text!r}")
        if file != 8:
            raise InputError(f"Invalid FEN rank width (rank {rank + 1}): {row_text!r}")
    return Board(cells)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN.

    Move counters are not tracked, so ``0 1`` is always written.
    """
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board.piece_at(file, rank)
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 1"
