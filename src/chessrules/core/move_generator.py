"""Pseudo-legal move generation over a :class:`Board`."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import PROMOTION_TYPES, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.types import Square, file_of, make_square, on_board, rank_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# color -> (forward rank step, starting rank, promotion rank)
_PAWN_RANKS: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 1, 7),
    Color.BLACK: (-1, 6, 0),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if on_board(af, ar):
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while on_board(af, ar):
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Generates pseudo-legal moves on a fixed :class:`Board`.

    Pseudo-legal moves obey each piece's movement and occupancy rules but
    may leave the mover's king attacked; see :mod:`chessrules.core.rules`
    for the legality filter. Castling and en-passant captures are never
    produced.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves of *color*, in file-major scan order."""
        moves: list[Move] = []
        for sq, piece in self._board.occupied(color):
            self._gen_piece(sq, color, piece.piece_type, moves)
        return moves

    def generate_piece_moves(
        self, origin: Square, color: Color, piece_type: PieceType
    ) -> list[Move]:
        """Pseudo-legal moves of a *color* *piece_type* standing on *origin*."""
        moves: list[Move] = []
        self._gen_piece(origin, color, piece_type, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(
        self, sq: Square, color: Color, piece_type: PieceType, moves: list[Move]
    ) -> None:
        if piece_type == PieceType.PAWN:
            self._gen_pawn(sq, color, moves)
        elif piece_type == PieceType.KNIGHT:
            self._gen_stepper(sq, color, _KNIGHT_TARGETS[sq], moves)
        elif piece_type == PieceType.KING:
            self._gen_stepper(sq, color, _KING_TARGETS[sq], moves)
        else:
            self._gen_sliding(sq, color, _SLIDER_RAYS[piece_type][sq], moves)

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step, start_rank, promo_rank = _PAWN_RANKS[color]
        file_idx = file_of(sq)
        next_rank = rank_of(sq) + step
        # A pawn already on its last rank has nowhere to go.
        if not on_board(file_idx, next_rank):
            return

        one_step = make_square(file_idx, next_rank)
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, next_rank == promo_rank, moves)
            if rank_of(sq) == start_rank:
                two_step = make_square(file_idx, next_rank + step)
                if board.is_empty(two_step):
                    moves.append(Move.normal(sq, two_step))

        for df in (-1, 1):
            cap_file = file_idx + df
            if not on_board(cap_file, next_rank):
                continue
            cap_sq = make_square(cap_file, next_rank)
            target = board[cap_sq]
            if target is not None and target.color != color:
                self._add_pawn_move(sq, cap_sq, next_rank == promo_rank, moves)

    @staticmethod
    def _add_pawn_move(
        from_sq: Square, to_sq: Square, promotes: bool, moves: list[Move]
    ) -> None:
        if promotes:
            for pt in PROMOTION_TYPES:
                moves.append(Move.promote(from_sq, to_sq, pt))
        else:
            moves.append(Move.normal(from_sq, to_sq))

    def _gen_stepper(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move.normal(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move.normal(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move.normal(sq, to_sq))
                break
