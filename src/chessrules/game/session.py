"""GameSession — the single owner of a game's :class:`BoardState`.

The presentation layer talks to the rules only through this object:
``reset`` to (re)seed the board, ``request_move`` for user input, and the
resign / flag-fall / dead-position helpers for outcomes the board cannot
detect on its own.  Everything is returned as plain values.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chessrules.core.board import BoardState
from chessrules.core.enums import Color, GameEndStatus
from chessrules.core.events import MoveOutcome, PieceCreated
from chessrules.core.move import Move
from chessrules.core.notation import Fen, load_fen, movetext
from chessrules.core.types import BoardPosition

_LOGGER = logging.getLogger(__name__)


class GameSession:
    """One game of chess, from a FEN start position to its end.

    Not thread-safe: callers serialise every request.
    """

    __slots__ = ("_board", "_start_fen")

    def __init__(self, fen: Fen | str | None = None) -> None:
        self._board = BoardState.empty()
        self._start_fen = Fen.default()
        self.reset(fen)

    @classmethod
    def from_file(cls, path: str | Path) -> GameSession:
        """Session seeded from the FEN stored in *path*."""
        return cls(load_fen(path))

    # ── Inbound requests ─────────────────────────────────────────────────

    def reset(self, fen: Fen | str | None = None) -> list[PieceCreated]:
        """Replace the board wholesale; one notification per placed piece."""
        if fen is None:
            fen = Fen.default()
        elif isinstance(fen, str):
            fen = Fen.from_string(fen)
        board = BoardState.empty()
        created = board.populate(fen)
        self._start_fen = fen
        self._board = board
        _LOGGER.debug("Board reset from FEN %s", fen)
        return created

    def request_move(
        self, from_pos: BoardPosition, to_pos: BoardPosition
    ) -> MoveOutcome | None:
        """Try to play *from_pos* → *to_pos*; None if it is not legal."""
        if self._board.is_empty(from_pos):
            _LOGGER.debug("Ignored move request from empty square %s", from_pos)
            return None
        return self._board.make_move(Move.from_board(from_pos, to_pos, self._board))

    def resign(self, color: Color) -> None:
        self._end(GameEndStatus.RESIGNATION, color.opposite)

    def flag_fall(self, color: Color) -> None:
        """Time ran out for *color*."""
        self._end(GameEndStatus.FLAG_FALL, color.opposite)

    def declare_dead_position(self) -> None:
        self._end(GameEndStatus.DEAD_POSITION, None)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> BoardState:
        return self._board

    @property
    def start_fen(self) -> Fen:
        return self._start_fen

    @property
    def active_color(self) -> Color | None:
        return self._board.active_color

    @property
    def move_number(self) -> int:
        return self._board.move_number

    @property
    def past_moves(self) -> list[Move]:
        return list(self._board.past_moves)

    @property
    def winner(self) -> Color | None:
        return self._board.winner

    @property
    def game_end_status(self) -> GameEndStatus | None:
        return self._board.game_end_status

    @property
    def is_game_over(self) -> bool:
        return self._board.is_game_over

    @property
    def history_text(self) -> str:
        """Numbered move list of the game so far."""
        return movetext(self._board.past_moves, self._start_fen.move_number)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move (empty once the game is over)."""
        return self._board.get_valid_moves(self._board.active_color)

    def legal_destinations(self, from_pos: BoardPosition) -> list[BoardPosition]:
        """Squares the piece on *from_pos* may move to right now."""
        return [m.to_pos for m in self.legal_moves() if m.from_pos == from_pos]

    # ── Internal ─────────────────────────────────────────────────────────

    def _end(self, status: GameEndStatus, winner: Color | None) -> None:
        if self._board.is_game_over:
            return
        self._board.end_game(status, winner)
