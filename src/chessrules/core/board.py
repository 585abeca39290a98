"""BoardState — the 8x8 grid plus turn, castling and game-end bookkeeping.

All legality and check logic lives here.  Pieces only know their own
geometry; this class filters that geometry against occupancy, whose turn
it is, castling rights and king safety.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessrules.core.castling import (
    KINGSIDE_ROOK_FILE,
    QUEENSIDE_ROOK_FILE,
    CastlingRights,
)
from chessrules.core.enums import Color, GameEndStatus, PieceType
from chessrules.core.events import MoveOutcome, PieceCreated, PieceMoved
from chessrules.core.move import Move
from chessrules.core.notation.fen import Fen
from chessrules.core.piece import Piece
from chessrules.core.types import (
    BOARD_SIZE,
    BoardPosition,
    all_positions,
    sign,
    square_name,
)

_LOGGER = logging.getLogger(__name__)


class BoardState:
    """Mutable chess board: pieces, side to move, move history, game end."""

    __slots__ = (
        "_grid",
        "active_color",
        "past_moves",
        "move_number",
        "castling_rights",
        "winner",
        "game_end_status",
    )

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.active_color: Color | None = None
        self.past_moves: list[Move] = []
        self.move_number = 1
        self.castling_rights = CastlingRights.NONE
        self.winner: Color | None = None
        self.game_end_status: GameEndStatus | None = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> BoardState:
        return cls()

    @classmethod
    def from_fen(cls, fen: Fen | str) -> BoardState:
        """Board seeded with exactly the layout and metadata *fen* encodes."""
        board = cls()
        board.populate(fen)
        return board

    def populate(self, fen: Fen | str) -> list[PieceCreated]:
        """Place *fen*'s pieces and copy its metadata onto this board.

        Expects an empty board.  Returns one notification per placed piece,
        in placement order.
        """
        if isinstance(fen, str):
            fen = Fen.from_string(fen)
        created = [
            self.add_piece(color, piece_type, position)
            for position, color, piece_type in fen.placements()
        ]
        self.active_color = fen.color()
        self.move_number = fen.move_number
        self.castling_rights = fen.castling()
        return created

    def add_piece(
        self, color: Color, piece_type: PieceType, position: BoardPosition
    ) -> PieceCreated:
        self._grid[position.rank][position.file] = Piece(piece_type, color, position)
        return PieceCreated(position, piece_type, color)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: BoardPosition) -> Piece | None:
        return self._grid[pos.rank][pos.file]

    def is_empty(self, pos: BoardPosition) -> bool:
        return self._grid[pos.rank][pos.file] is None

    def get_piece_type(self, pos: BoardPosition) -> PieceType | None:
        piece = self[pos]
        return piece.piece_type if piece is not None else None

    def get_piece_color(self, pos: BoardPosition) -> Color | None:
        piece = self[pos]
        return piece.color if piece is not None else None

    def pieces(self) -> Iterator[tuple[BoardPosition, Piece]]:
        """Occupied squares in board-scan order."""
        for pos in all_positions():
            piece = self[pos]
            if piece is not None:
                yield pos, piece

    def piece_created_events(self) -> list[PieceCreated]:
        return [
            PieceCreated(pos, piece.piece_type, piece.color)
            for pos, piece in self.pieces()
        ]

    def king_position(self, color: Color) -> BoardPosition:
        for pos, piece in self.pieces():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return pos
        raise ValueError(f"No {color} king on board")

    @property
    def is_game_over(self) -> bool:
        return self.game_end_status is not None

    # -- Legality -----------------------------------------------------------

    def valid_move(
        self,
        piece_move: Move,
        active_color: Color | None,
        check_for_check: bool = True,
    ) -> bool:
        """Whether *piece_move* is legal for *active_color*.

        With ``check_for_check`` off the king-safety and castling clauses
        are skipped; that is what attack scans use, since asking whether
        the attacker's own king would be exposed recurses forever.
        """
        if piece_move.is_capture and piece_move.is_castle:
            return False

        piece = self[piece_move.from_pos]
        if piece is None or active_color is None or piece.color != active_color:
            return False

        to_pos = piece_move.to_pos
        target = self[to_pos]
        if target is None:
            if not piece.valid_move(to_pos):
                return False
        elif target.color == piece.color:
            return False
        elif not piece.valid_capture(to_pos):
            return False

        if piece.is_sliding() and not self.no_piece_between_squares(
            piece_move.from_pos, to_pos
        ):
            return False

        if not check_for_check:
            return True

        if self._leaves_in_check(piece_move.from_pos, to_pos, active_color):
            return False

        if piece_move.is_castle:
            return self._castle_allowed(piece_move, active_color)
        return True

    def _leaves_in_check(
        self, from_pos: BoardPosition, to_pos: BoardPosition, color: Color
    ) -> bool:
        """Play the move on a throwaway copy and look at *color*'s king."""
        probe = self.copy()
        probe.move_piece(from_pos, to_pos)
        return probe.in_check(color)

    def _castle_allowed(self, piece_move: Move, color: Color) -> bool:
        direction = sign(piece_move.file_delta)
        if not self.castling_rights.valid_castle_direction(color, direction):
            return False

        king_pos = piece_move.from_pos
        rook_pos = self._castle_rook_position(piece_move)
        rook = self[rook_pos]
        if rook is None or rook.piece_type != PieceType.ROOK or rook.color != color:
            return False
        if not self.no_piece_between_squares(king_pos, rook_pos):
            return False

        if self.in_check(color):
            return False
        crossed = BoardPosition(king_pos.rank, king_pos.file + direction)
        return not self._leaves_in_check(king_pos, crossed, color)

    @staticmethod
    def _castle_rook_position(piece_move: Move) -> BoardPosition:
        file = KINGSIDE_ROOK_FILE if piece_move.file_delta > 0 else QUEENSIDE_ROOK_FILE
        return BoardPosition(piece_move.from_pos.rank, file)

    def get_valid_moves(
        self, active_color: Color | None, check_for_check: bool = True
    ) -> list[Move]:
        """Every legal move for *active_color*, in board-scan order."""
        moves: list[Move] = []
        if active_color is None:
            return moves
        for from_pos, piece in self.pieces():
            if piece.color != active_color:
                continue
            for to_pos in piece.get_moves(True):
                piece_move = Move.from_board(from_pos, to_pos, self)
                if self.valid_move(piece_move, active_color, check_for_check):
                    moves.append(piece_move)
        return moves

    def in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by any opposing pseudo-legal move?"""
        king_pos = self.king_position(color)
        return any(
            piece_move.to_pos == king_pos
            for piece_move in self.get_valid_moves(color.opposite, False)
        )

    def no_piece_between_squares(
        self, start: BoardPosition, end: BoardPosition
    ) -> bool:
        """True if every square strictly between *start* and *end* is empty.

        The walk steps one square per axis toward *end*; callers only pass
        squares sharing a rank, file or diagonal.
        """
        d_rank = sign(end.rank - start.rank)
        d_file = sign(end.file - start.file)
        rank = start.rank + d_rank
        file = start.file + d_file
        while (rank, file) != (end.rank, end.file):
            if self._grid[rank][file] is not None:
                return False
            rank += d_rank
            file += d_file
        return True

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, from_pos: BoardPosition, to_pos: BoardPosition) -> None:
        """Relocate a piece, overwriting whatever stood on *to_pos*.

        No legality checking: callers validate first.
        """
        piece = self[from_pos]
        if piece is None:
            raise ValueError(f"No piece at start location: {square_name(from_pos)}")
        piece.set_position(to_pos, True)
        self._grid[to_pos.rank][to_pos.file] = piece
        self._grid[from_pos.rank][from_pos.file] = None

    def make_move(self, piece_move: Move) -> MoveOutcome | None:
        """Play a full turn, or return None and leave the board untouched."""
        color = self.active_color
        if color is None or not self.valid_move(piece_move, color, True):
            _LOGGER.debug("Rejected move %s", piece_move)
            return None
        # A Move built against an earlier board may carry stale flags.
        if piece_move != Move.from_board(piece_move.from_pos, piece_move.to_pos, self):
            _LOGGER.debug("Rejected stale move %s", piece_move)
            return None

        relocations = [PieceMoved(piece_move.from_pos, piece_move.to_pos)]
        self.move_piece(piece_move.from_pos, piece_move.to_pos)

        if piece_move.is_castle:
            rook_from = self._castle_rook_position(piece_move)
            rook_to = BoardPosition(
                piece_move.to_pos.rank,
                piece_move.to_pos.file - sign(piece_move.file_delta),
            )
            self.move_piece(rook_from, rook_to)
            relocations.append(PieceMoved(rook_from, rook_to))

        self.active_color = color.opposite
        self.past_moves.append(piece_move)
        if self.active_color == Color.WHITE:
            self.move_number += 1
        self.castling_rights = self.castling_rights.update_after_move(piece_move)
        _LOGGER.debug("Played %s", piece_move.as_algebraic())

        self.check_game_end()
        return MoveOutcome(
            move=piece_move,
            relocations=tuple(relocations),
            game_end_status=self.game_end_status,
            winner=self.winner,
        )

    # -- Game end -----------------------------------------------------------

    def check_game_end(self) -> GameEndStatus | None:
        """Detect checkmate or stalemate for the side to move."""
        color = self.active_color
        if color is None or self.get_valid_moves(color, True):
            return self.game_end_status

        if self.in_check(color):
            self.game_end_status = GameEndStatus.CHECKMATE
            self.winner = color.opposite
        else:
            self.game_end_status = GameEndStatus.STALEMATE
        self.active_color = None
        _LOGGER.info(
            "Game over: %s (winner: %s)", self.game_end_status.name, self.winner
        )
        return self.game_end_status

    def end_game(self, status: GameEndStatus, winner: Color | None = None) -> None:
        """Record a terminal status decided outside the board (resign, clock...)."""
        if self.is_game_over:
            raise ValueError(f"Game already ended: {self.game_end_status!r}")
        self.game_end_status = status
        self.winner = winner
        self.active_color = None
        _LOGGER.info("Game over: %s (winner: %s)", status.name, winner)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> BoardState:
        """Independent deep copy; mutating it never touches this board."""
        b = BoardState()
        b._grid = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._grid
        ]
        b.active_color = self.active_color
        b.past_moves = self.past_moves.copy()
        b.move_number = self.move_number
        b.castling_rights = self.castling_rights
        b.winner = self.winner
        b.game_end_status = self.game_end_status
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            self.piece_created_events() == other.piece_created_events()
            and self.active_color == other.active_color
            and self.castling_rights == other.castling_rights
            and self.move_number == other.move_number
            and self.past_moves == other.past_moves
            and self.winner == other.winner
            and self.game_end_status == other.game_end_status
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE):
            row = []
            for file in range(BOARD_SIZE):
                p = self._grid[rank][file]
                row.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
