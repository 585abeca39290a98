"""Castling rights bookkeeping."""

from __future__ import annotations

from enum import IntFlag, auto
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import BOARD_SIZE, sign

if TYPE_CHECKING:
    from chessrules.core.move import Move

QUEENSIDE_ROOK_FILE = 0
KINGSIDE_ROOK_FILE = BOARD_SIZE - 1


class CastlingRights(IntFlag):
    """Bitmask for castling availability.

    Rights only ever get cleared: once a king or corner rook has moved,
    nothing in a game turns the bit back on.
    """

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_fen_string(cls, text: str) -> CastlingRights:
        """Rights named in a FEN castling field (``"KQkq"``, ``"Kq"``, ``"-"``)."""
        rights = cls.NONE
        for char, right in _FEN_LETTERS.items():
            if char in text:
                rights |= right
        return rights

    def to_fen_string(self) -> str:
        text = "".join(char for char, right in _FEN_LETTERS.items() if self & right)
        return text or "-"

    # ── Queries ──────────────────────────────────────────────────────────

    def for_color(self, color: Color) -> tuple[bool, bool]:
        """``(kingside, queenside)`` availability for *color*."""
        kingside, queenside = _SIDES[color]
        return bool(self & kingside), bool(self & queenside)

    def valid_castle_direction(self, color: Color, direction: int) -> bool:
        """Whether *color* may castle toward the sign of *direction* (file delta)."""
        kingside, queenside = self.for_color(color)
        step = sign(direction)
        if step > 0:
            return kingside
        if step < 0:
            return queenside
        return False

    # ── Updates ──────────────────────────────────────────────────────────

    def update_after_move(self, move: Move) -> CastlingRights:
        """Rights left once *move* has been played."""
        kingside, queenside = _SIDES[move.piece_color]
        rights = self
        if move.piece_type == PieceType.KING:
            rights &= ~(kingside | queenside)
        elif move.piece_type == PieceType.ROOK:
            if move.from_pos.file == QUEENSIDE_ROOK_FILE:
                rights &= ~queenside
            elif move.from_pos.file == KINGSIDE_ROOK_FILE:
                rights &= ~kingside
        return rights


_FEN_LETTERS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

_SIDES: dict[Color, tuple[CastlingRights, CastlingRights]] = {
    Color.WHITE: (CastlingRights.WHITE_KINGSIDE, CastlingRights.WHITE_QUEENSIDE),
    Color.BLACK: (CastlingRights.BLACK_KINGSIDE, CastlingRights.BLACK_QUEENSIDE),
}
