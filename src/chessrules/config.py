"""
Runtime configuration for the command-line front end.

All settings can be set via environment variables with sensible defaults;
command-line flags take precedence.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from chessrules.core.errors import InputError
from chessrules.core.notation import STARTING_FEN

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InputError(f"{name} must be an integer, got {raw!r}") from None


def _env_log_level() -> str:
    level = os.environ.get("CHESSRULES_LOG_LEVEL", "WARNING").upper()
    if level not in _LOG_LEVELS:
        raise InputError(f"CHESSRULES_LOG_LEVEL must be one of {_LOG_LEVELS}, got {level!r}")
    return level


@dataclass
class Settings:
    """CLI defaults."""

    log_level: str = field(default_factory=_env_log_level)
    start_fen: str = field(
        default_factory=lambda: os.environ.get("CHESSRULES_START_FEN", STARTING_FEN)
    )
    perft_depth: int = field(default_factory=lambda: _env_int("CHESSRULES_PERFT_DEPTH", 3))
