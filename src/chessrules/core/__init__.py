"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import BoardState, Fen, parse_square

    board = BoardState.from_fen(Fen.default())
    for move in board.get_valid_moves(board.active_color):
        print(move.as_algebraic())
"""

from chessrules.core.board import BoardState
from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, GameEndStatus, PieceType
from chessrules.core.events import MoveOutcome, PieceCreated, PieceMoved
from chessrules.core.move import Move
from chessrules.core.notation import (
    STARTING_FEN,
    Fen,
    board_to_fen,
    load_fen,
    move_to_algebraic,
    movetext,
)
from chessrules.core.piece import Piece
from chessrules.core.types import BoardPosition, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameEndStatus",
    "PieceType",
    # Types / helpers
    "BoardPosition",
    "parse_square",
    "square_name",
    # Domain objects
    "BoardState",
    "Move",
    "Piece",
    # Notifications
    "MoveOutcome",
    "PieceCreated",
    "PieceMoved",
    # Notation
    "STARTING_FEN",
    "Fen",
    "board_to_fen",
    "load_fen",
    "move_to_algebraic",
    "movetext",
]
