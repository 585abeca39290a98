"""Piece — one chess man on the board, tagged by its :class:`PieceType`.

Every piece kind shares the same capability surface; the per-kind move
geometry lives in small functions selected through ``_GEOMETRY``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.geometry import (
    BISHOP_TARGETS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_TARGETS,
    ROOK_TARGETS,
)
from chessrules.core.types import BoardPosition

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# Castling moves the king this many files sideways.
CASTLE_DISTANCE = 2

_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# ── Per-kind geometry ───────────────────────────────────────────────────────


def _pawn_moves(piece: Piece, include_captures: bool) -> list[BoardPosition]:
    """Single step, then captures (toward the h-file first), then double step."""
    forward = piece.color.forward
    pos = piece.position
    moves: list[BoardPosition] = []

    one_step = pos.offset(forward, 0)
    if one_step is None:
        return moves
    moves.append(one_step)

    if include_captures:
        for d_file in (1, -1):
            diagonal = pos.offset(forward, d_file)
            if diagonal is not None:
                moves.append(diagonal)

    if not piece.moved and pos.rank == _PAWN_START_RANK[piece.color]:
        moves.append(BoardPosition(pos.rank + 2 * forward, pos.file))

    return moves


def _knight_moves(piece: Piece, include_captures: bool) -> list[BoardPosition]:
    return list(KNIGHT_TARGETS[piece.position])


def _bishop_moves(piece: Piece, include_captures: bool) -> list[BoardPosition]:
    return list(BISHOP_TARGETS[piece.position])


def _rook_moves(piece: Piece, include_captures: bool) -> list[BoardPosition]:
    return list(ROOK_TARGETS[piece.position])


def _queen_moves(piece: Piece, include_captures: bool) -> list[BoardPosition]:
    return list(QUEEN_TARGETS[piece.position])


def _king_moves(piece: Piece, include_captures: bool) -> list[BoardPosition]:
    moves = list(KING_TARGETS[piece.position])
    # Castle destinations; whether castling is allowed is the board's call.
    if not piece.moved:
        for d_file in (-CASTLE_DISTANCE, CASTLE_DISTANCE):
            castle = piece.position.offset(0, d_file)
            if castle is not None:
                moves.append(castle)
        moves.sort()
    return moves


_GEOMETRY: dict[PieceType, Callable[[Piece, bool], list[BoardPosition]]] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _bishop_moves,
    PieceType.ROOK: _rook_moves,
    PieceType.QUEEN: _queen_moves,
    PieceType.KING: _king_moves,
}


# ── Piece ───────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Piece:
    """A piece standing on a board square.

    ``starting_position`` is fixed when the piece is created; ``moved`` is a
    one-way latch used for pawn double steps and castling eligibility.
    """

    piece_type: PieceType
    color: Color
    position: BoardPosition
    starting_position: BoardPosition = field(init=False)
    moved: bool = False

    def __post_init__(self) -> None:
        self.starting_position = self.position

    # ── Geometry ─────────────────────────────────────────────────────────

    def get_moves(self, include_captures: bool) -> list[BoardPosition]:
        """Pseudo-legal destinations, ignoring occupancy and check."""
        return _GEOMETRY[self.piece_type](self, include_captures)

    def is_sliding(self) -> bool:
        """Whether intervening pieces can block this piece.

        Pawns and kings count as sliding so that double steps and castles
        go through the same between-squares check as bishops and rooks.
        """
        return self.piece_type != PieceType.KNIGHT

    def valid_move(self, to: BoardPosition) -> bool:
        return to in self.get_moves(False)

    def valid_capture(self, to: BoardPosition) -> bool:
        if self.piece_type != PieceType.PAWN:
            return self.valid_move(to)
        return (
            to.rank == self.position.rank + self.color.forward
            and abs(to.file - self.position.file) == 1
        )

    # ── Mutation ─────────────────────────────────────────────────────────

    def set_position(self, to: BoardPosition, moved: bool = True) -> None:
        self.position = to
        if moved:
            self.moved = True

    def copy(self) -> Piece:
        clone = replace(self)
        clone.starting_position = self.starting_position
        return clone

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: BoardPosition) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Unrecognised symbol in FEN: {char!r}") from None
        return cls(ptype, color, position)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
