"""Chess position model, move generation and legality checking."""

__version__ = "0.1.0"
