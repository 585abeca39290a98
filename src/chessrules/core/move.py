"""Move value object — one ply, described against the board it was made on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import CASTLE_DISTANCE
from chessrules.core.types import BoardPosition, square_name

if TYPE_CHECKING:
    from chessrules.core.board import BoardState

_ALGEBRAIC_PREFIX: dict[PieceType, str] = {
    PieceType.KING: "K",
    PieceType.QUEEN: "Q",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.ROOK: "R",
    PieceType.PAWN: "",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a single ply.

    Use :meth:`from_board` to build one; the piece and flags are read off
    the board *before* the move is applied.
    """

    from_pos: BoardPosition
    to_pos: BoardPosition
    piece_type: PieceType
    piece_color: Color
    is_capture: bool = False
    is_castle: bool = False

    @classmethod
    def from_board(
        cls, from_pos: BoardPosition, to_pos: BoardPosition, board: BoardState
    ) -> Move:
        piece = board[from_pos]
        if piece is None:
            raise ValueError(f"No piece at start location: {square_name(from_pos)}")
        return cls(
            from_pos=from_pos,
            to_pos=to_pos,
            piece_type=piece.piece_type,
            piece_color=piece.color,
            is_capture=board[to_pos] is not None,
            is_castle=(
                piece.piece_type == PieceType.KING
                and abs(to_pos.file - from_pos.file) == CASTLE_DISTANCE
            ),
        )

    @property
    def file_delta(self) -> int:
        return self.to_pos.file - self.from_pos.file

    # ── Display ──────────────────────────────────────────────────────────

    def as_algebraic(self) -> str:
        """Short algebraic form without disambiguation, e.g. ``Nxd5``."""
        if self.is_castle:
            return "O-O" if self.file_delta > 0 else "O-O-O"
        text = _ALGEBRAIC_PREFIX[self.piece_type]
        if self.is_capture:
            if self.piece_type == PieceType.PAWN:
                text += square_name(self.from_pos)[0]
            text += "x"
        return text + square_name(self.to_pos)

    def __str__(self) -> str:
        return f"{square_name(self.from_pos)}{square_name(self.to_pos)}"

    @property
    def uci(self) -> str:
        """Coordinate notation, e.g. ``e2e4``."""
        return str(self)
