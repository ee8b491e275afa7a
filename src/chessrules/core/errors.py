"""Exception hierarchy for the rules engine.

Two kinds never overlap:

* :class:`InputError` - malformed text handed in by a caller (FEN, square
  names, UCI moves). Always recoverable.
* :class:`InternalInvariantViolation` - the engine was driven into a state
  valid input cannot produce. Treat as a bug.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base exception for all chessrules errors."""


class InputError(ChessRulesError, ValueError):
    """Malformed caller-supplied text."""


class InternalInvariantViolation(ChessRulesError, RuntimeError):
    """Operation invoked in a structurally impossible state."""
