"""Move-history text: short algebraic moves with move numbers."""

from __future__ import annotations

from collections.abc import Iterable

from chessrules.core.enums import Color
from chessrules.core.move import Move


def move_to_algebraic(move: Move) -> str:
    return move.as_algebraic()


def movetext(moves: Iterable[Move], first_move_number: int = 1) -> str:
    """Numbered move list, e.g. ``1. e4 e5 2. Nf3``.

    A history that starts with Black to move gets a ``1...`` style prefix.
    """
    parts: list[str] = []
    number = first_move_number
    for index, move in enumerate(moves):
        if move.piece_color == Color.WHITE:
            parts.append(f"{number}.")
        elif index == 0:
            parts.append(f"{number}...")
        parts.append(move.as_algebraic())
        if move.piece_color == Color.BLACK:
            number += 1
    return " ".join(parts)
