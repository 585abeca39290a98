"""Tests for Move construction and display."""

import pytest

from chessrules.core.board import BoardState
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.types import parse_square


class TestFromBoard:
    def test_quiet_pawn_move(self, start_board: BoardState) -> None:
        move = Move.from_board(parse_square("e2"), parse_square("e4"), start_board)
        assert move.piece_type == PieceType.PAWN
        assert move.piece_color == Color.WHITE
        assert not move.is_capture
        assert not move.is_castle

    def test_capture_flag(self) -> None:
        board = BoardState.from_fen(
            "rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR w KQkq - 0 2"
        )
        move = Move.from_board(parse_square("e4"), parse_square("d5"), board)
        assert move.is_capture

    def test_castle_flag(self, castle_board: BoardState) -> None:
        kingside = Move.from_board(parse_square("e1"), parse_square("g1"), castle_board)
        queenside = Move.from_board(parse_square("e1"), parse_square("c1"), castle_board)
        assert kingside.is_castle
        assert queenside.is_castle
        assert not kingside.is_capture

    def test_rook_two_files_is_not_castle(self, castle_board: BoardState) -> None:
        move = Move.from_board(parse_square("h1"), parse_square("f1"), castle_board)
        assert not move.is_castle

    def test_king_single_step_is_not_castle(self, castle_board: BoardState) -> None:
        move = Move.from_board(parse_square("e1"), parse_square("f1"), castle_board)
        assert not move.is_castle

    def test_empty_source_raises(self, start_board: BoardState) -> None:
        with pytest.raises(ValueError, match="No piece at start location"):
            Move.from_board(parse_square("e4"), parse_square("e5"), start_board)

    def test_value_equality(self, start_board: BoardState) -> None:
        a = Move.from_board(parse_square("g1"), parse_square("f3"), start_board)
        b = Move.from_board(parse_square("g1"), parse_square("f3"), start_board)
        assert a == b
        assert len({a, b}) == 1


class TestDisplay:
    def test_coordinate_form(self, start_board: BoardState) -> None:
        move = Move.from_board(parse_square("e2"), parse_square("e4"), start_board)
        assert str(move) == "e2e4"
        assert move.uci == "e2e4"

    def test_pawn_push(self, start_board: BoardState) -> None:
        move = Move.from_board(parse_square("e2"), parse_square("e4"), start_board)
        assert move.as_algebraic() == "e4"

    def test_knight(self, start_board: BoardState) -> None:
        move = Move.from_board(parse_square("g1"), parse_square("f3"), start_board)
        assert move.as_algebraic() == "Nf3"

    def test_pawn_capture_names_file(self) -> None:
        board = BoardState.from_fen(
            "rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR w KQkq - 0 2"
        )
        move = Move.from_board(parse_square("e4"), parse_square("d5"), board)
        assert move.as_algebraic() == "exd5"

    def test_castles(self, castle_board: BoardState) -> None:
        kingside = Move.from_board(parse_square("e1"), parse_square("g1"), castle_board)
        queenside = Move.from_board(parse_square("e1"), parse_square("c1"), castle_board)
        assert kingside.as_algebraic() == "O-O"
        assert queenside.as_algebraic() == "O-O-O"

    def test_file_delta(self, castle_board: BoardState) -> None:
        move = Move.from_board(parse_square("e1"), parse_square("c1"), castle_board)
        assert move.file_delta == -2
