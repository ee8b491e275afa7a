"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InternalInvariantViolation
from chessrules.core.piece import Piece
from chessrules.core.types import SCAN_ORDER, Square, make_square

_SQUARE_COUNT = 64

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Fixed 64-square grid of ``Piece | None`` with value semantics.

    A board never changes after construction; :meth:`replace` returns a new
    board with some squares rewritten.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        cells = (None,) * _SQUARE_COUNT if squares is None else tuple(squares)
        if len(cells) != _SQUARE_COUNT:
            raise InternalInvariantViolation(
                f"Board needs exactly {_SQUARE_COUNT} squares, got {len(cells)}"
            )
        self._squares: tuple[Piece | None, ...] = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def piece_at(self, file: int, rank: int) -> Piece | None:
        return self._squares[make_square(file, rank)]

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` in file-major, rank-minor order."""
        squares = self._squares
        for sq in SCAN_ORDER:
            piece = squares[sq]
            if piece is not None and (color is None or piece.color == color):
                yield sq, piece

    def king_squares(self, color: Color) -> list[Square]:
        """Every square holding *color*'s king (normally exactly one)."""
        king = Piece(color, PieceType.KING)
        return [sq for sq in range(_SQUARE_COUNT) if self._squares[sq] == king]

    # -- Derivation ---------------------------------------------------------

    def replace(self, updates: Mapping[Square, Piece | None]) -> Board:
        """Return a copy with each square in *updates* overwritten."""
        cells = list(self._squares)
        for sq, piece in updates.items():
            cells[sq] = piece
        return Board(cells)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        cells: list[Piece | None] = [None] * _SQUARE_COUNT
        for f, pt in enumerate(_BACK_RANK):
            cells[make_square(f, 0)] = Piece(Color.WHITE, pt)
            cells[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            cells[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            cells[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.piece_at(file, rank)
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
