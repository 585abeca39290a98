"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank step of a pawn advance (rank 0 is Black's back rank)."""
        return -1 if self is Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameEndStatus(IntEnum):
    """Why a game stopped.

    Only ``CHECKMATE`` and ``STALEMATE`` are detected by the board itself;
    the others are reported by whoever owns the clock or the resign button.
    """

    CHECKMATE = auto()
    RESIGNATION = auto()
    STALEMATE = auto()
    DEAD_POSITION = auto()
    FLAG_FALL = auto()
