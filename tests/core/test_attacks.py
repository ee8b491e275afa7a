"""Tests for king attack detection."""

from chessrules.core.attacks import is_king_attacked
from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.notation import STARTING_FEN, position_from_fen

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


def _board(fen: str) -> Board:
    return position_from_fen(fen).board


class TestKingAttacked:
    def test_start_is_quiet(self) -> None:
        board = _board(STARTING_FEN)
        assert not is_king_attacked(board, Color.WHITE)
        assert not is_king_attacked(board, Color.BLACK)

    def test_queen_diagonal(self) -> None:
        board = _board(FOOLS_MATE)
        assert is_king_attacked(board, Color.WHITE)
        assert not is_king_attacked(board, Color.BLACK)

    def test_knight_check(self) -> None:
        assert is_king_attacked(_board("4k3/8/3N4/8/8/8/8/4K3 b - - 0 1"), Color.BLACK)

    def test_blocked_rook(self) -> None:
        assert is_king_attacked(_board("4k3/8/8/8/8/8/8/r3K3 w - - 0 1"), Color.WHITE)
        assert not is_king_attacked(_board("4k3/8/8/8/8/8/8/r1N1K3 w - - 0 1"), Color.WHITE)

    def test_pawn_push_square_is_not_attacked(self) -> None:
        assert not is_king_attacked(_board("4k3/4p3/4K3/8/8/8/8/8 w - - 0 1"), Color.WHITE)

    def test_pawn_diagonal_attacks(self) -> None:
        assert is_king_attacked(_board("4k3/4p3/3K4/8/8/8/8/8 w - - 0 1"), Color.WHITE)

    def test_adjacent_kings(self) -> None:
        board = _board("8/8/8/4k3/4K3/8/8/8 w - - 0 1")
        assert is_king_attacked(board, Color.WHITE)
        assert is_king_attacked(board, Color.BLACK)

    def test_missing_king(self) -> None:
        assert not is_king_attacked(Board(), Color.WHITE)
