"""Command-line entry point.

Usage:
    chessrules moves [--fen FEN]
    chessrules perft [--fen FEN] [--depth N] [--divide]
    chessrules play [--fen FEN] MOVE [MOVE ...]
"""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.config import Settings
from chessrules.core import (
    InputError,
    Position,
    Rules,
    divide,
    perft,
    position_from_fen,
    position_to_fen,
)

_LOGGER = logging.getLogger(__name__)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules", description="Chess move generation and legality tools."
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    moves = sub.add_parser("moves", help="list legal moves in UCI notation")
    moves.add_argument("--fen", default=settings.start_fen)

    perft_cmd = sub.add_parser("perft", help="count leaf nodes of the move tree")
    perft_cmd.add_argument("--fen", default=settings.start_fen)
    perft_cmd.add_argument("--depth", type=int, default=settings.perft_depth)
    perft_cmd.add_argument(
        "--divide", action="store_true", help="print per-move node counts"
    )

    play = sub.add_parser("play", help="apply UCI moves and print the result")
    play.add_argument("--fen", default=settings.start_fen)
    play.add_argument("moves", nargs="+", metavar="MOVE")
    return parser


def _cmd_moves(position: Position) -> list[str]:
    return [move.uci for move in Rules.legal_moves(position)]


def _cmd_perft(position: Position, depth: int, show_divide: bool) -> list[str]:
    if not show_divide:
        return [str(perft(position, depth))]
    counts = divide(position, depth)
    lines = [f"{move.uci}: {nodes}" for move, nodes in counts]
    lines.append("")
    lines.append(f"Nodes: {sum(nodes for _, nodes in counts)}")
    return lines


def _cmd_play(position: Position, moves: list[str]) -> list[str]:
    for text in moves:
        move = Rules.find_move(position, text)
        _LOGGER.info("Playing %s", move)
        position = position.play(move)
    return [position_to_fen(position), repr(position.board)]


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, execute the command, return the exit status."""
    try:
        settings = Settings()
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    args = _build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        position = position_from_fen(args.fen)
        if args.command == "moves":
            lines = _cmd_moves(position)
        elif args.command == "perft":
            lines = _cmd_perft(position, args.depth, args.divide)
        else:
            lines = _cmd_play(position, args.moves)
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
