"""FEN parsing and serialization."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, BoardPosition

if TYPE_CHECKING:
    from chessrules.core.board import BoardState

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FEN_FIELD_COUNT = 6

_ACTIVE_COLORS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


@dataclass(frozen=True, slots=True)
class Fen:
    """The fields of a FEN string this engine cares about.

    Construction through :meth:`from_string` validates the placement and
    active color fields, so a ``Fen`` in hand always seeds a board cleanly.
    """

    piece_placement: str
    active_color: str
    castling_rights: str
    move_number: int

    @classmethod
    def from_string(cls, text: str) -> Fen:
        """Parse a FEN string; raises ``ValueError`` on malformed input."""
        parts = text.split()
        if len(parts) < _FEN_FIELD_COUNT:
            raise ValueError(
                f"Invalid FEN (need {_FEN_FIELD_COUNT} fields): {text!r}"
            )
        try:
            move_number = int(parts[5])
        except ValueError:
            raise ValueError(f"Invalid FEN move number: {parts[5]!r}") from None

        fen = cls(
            piece_placement=parts[0],
            active_color=parts[1],
            castling_rights=parts[2],
            move_number=move_number,
        )
        # Walk everything once so bad symbols fail here, not mid-reset.
        for _ in fen.placements():
            pass
        fen.color()
        return fen

    @classmethod
    def default(cls) -> Fen:
        return cls.from_string(STARTING_FEN)

    # ── Field decoding ───────────────────────────────────────────────────

    def placements(self) -> Iterator[tuple[BoardPosition, Color, PieceType]]:
        """Pieces in placement order (rank 0 first, files left to right)."""
        for rank, rank_text in enumerate(self.piece_placement.split("/")):
            file = 0
            for symbol in rank_text:
                if symbol in "12345678":
                    file += int(symbol)
                    continue
                # Piece.from_char raises on anything that is not a piece letter.
                piece = Piece.from_char(symbol, BoardPosition(rank, file))
                yield piece.position, piece.color, piece.piece_type
                file += 1

    def color(self) -> Color:
        try:
            return _ACTIVE_COLORS[self.active_color]
        except KeyError:
            raise ValueError(
                f"Unrecognised active color in FEN: {self.active_color!r}"
            ) from None

    def castling(self) -> CastlingRights:
        return CastlingRights.from_fen_string(self.castling_rights)

    def __str__(self) -> str:
        return (
            f"{self.piece_placement} {self.active_color} "
            f"{self.castling_rights} - 0 {self.move_number}"
        )


def board_to_fen(board: BoardState) -> str:
    """Serialise a board to FEN.

    En passant is not tracked, so that field is always ``-``, and the
    half-move clock is always ``0``.  A finished game has no side to move;
    it is written as ``w``.
    """
    rows: list[str] = []
    for rank in range(BOARD_SIZE):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = board[BoardPosition(rank, file)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    side = "b" if board.active_color == Color.BLACK else "w"
    castling = board.castling_rights.to_fen_string()
    return f"{'/'.join(rows)} {side} {castling} - 0 {board.move_number}"


def load_fen(path: str | Path) -> Fen:
    """Read the first non-blank line of a text file as a FEN."""
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        if line.strip():
            return Fen.from_string(line)
    raise ValueError(f"No FEN found in {path}")
