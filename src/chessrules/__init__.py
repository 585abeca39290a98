"""Chess rules engine: move legality, castling, check, checkmate, stalemate."""

__version__ = "0.1.0"
