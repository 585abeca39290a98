"""Notifications the board hands back to its caller.

These replace an event bus: the board returns them from the call that
caused them, and the caller (UI, CLI, tests) decides what to do.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, GameEndStatus, PieceType
from chessrules.core.move import Move
from chessrules.core.types import BoardPosition


@dataclass(frozen=True, slots=True)
class PieceCreated:
    """A piece was placed while populating the board."""

    position: BoardPosition
    piece_type: PieceType
    color: Color


@dataclass(frozen=True, slots=True)
class PieceMoved:
    """A piece was physically relocated."""

    from_pos: BoardPosition
    to_pos: BoardPosition


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of an accepted move request."""

    move: Move
    relocations: tuple[PieceMoved, ...]
    game_end_status: GameEndStatus | None = None
    winner: Color | None = None

    @property
    def ends_game(self) -> bool:
        return self.game_end_status is not None
