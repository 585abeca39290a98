"""Notation package: FEN parsing/serialization and move-history text."""

from chessrules.core.notation.algebraic import move_to_algebraic, movetext
from chessrules.core.notation.fen import STARTING_FEN, Fen, board_to_fen, load_fen

__all__ = [
    "STARTING_FEN",
    "Fen",
    "board_to_fen",
    "load_fen",
    "move_to_algebraic",
    "movetext",
]
