"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PROMOTION_TYPES, Color, MoveFlag, PieceType
from chessrules.core.errors import InternalInvariantViolation
from chessrules.core.types import (
    C1,
    C8,
    E1,
    E8,
    G1,
    G8,
    Square,
    is_valid_square,
    square_name,
)

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    The ``flag`` tags the variant:

    * ``NORMAL`` - origin → target.
    * ``PROMOTION`` - origin → target, pawn replaced by ``promotion``.
    * ``CASTLE_KINGSIDE`` / ``CASTLE_QUEENSIDE`` - the king's two-square
      hop; present as data only, never generated nor applied.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        for sq in (self.from_sq, self.to_sq):
            if not is_valid_square(sq):
                raise InternalInvariantViolation(f"Move square out of range: {sq!r}")
        if self.flag == MoveFlag.PROMOTION:
            if self.promotion not in PROMOTION_TYPES:
                raise InternalInvariantViolation(
                    f"Promotion move needs a knight/bishop/rook/queen, got {self.promotion!r}"
                )
        elif self.promotion is not None:
            raise InternalInvariantViolation(
                f"{self.flag.name} move cannot carry a promotion kind"
            )

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def normal(cls, from_sq: Square, to_sq: Square) -> Move:
        return cls(from_sq, to_sq)

    @classmethod
    def promote(cls, from_sq: Square, to_sq: Square, piece_type: PieceType) -> Move:
        return cls(from_sq, to_sq, MoveFlag.PROMOTION, piece_type)

    @classmethod
    def castle_kingside(cls, color: Color) -> Move:
        if color == Color.WHITE:
            return cls(E1, G1, MoveFlag.CASTLE_KINGSIDE)
        return cls(E8, G8, MoveFlag.CASTLE_KINGSIDE)

    @classmethod
    def castle_queenside(cls, color: Color) -> Move:
        if color == Color.WHITE:
            return cls(E1, C1, MoveFlag.CASTLE_QUEENSIDE)
        return cls(E8, C8, MoveFlag.CASTLE_QUEENSIDE)

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
