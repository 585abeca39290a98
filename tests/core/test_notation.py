"""Tests for FEN parsing/serialization and move-history text."""

from pathlib import Path

import pytest

from chessrules.core.board import BoardState
from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import (
    STARTING_FEN,
    Fen,
    board_to_fen,
    load_fen,
    move_to_algebraic,
    movetext,
)
from chessrules.core.types import BoardPosition, parse_square


class TestFenParsing:
    def test_fields(self) -> None:
        fen = Fen.from_string("5R2/2p4n/1Q6/6Pp/1R2P3/2P2b1K/P2krq2/2N5 w - - 0 1")
        assert fen.piece_placement == "5R2/2p4n/1Q6/6Pp/1R2P3/2P2b1K/P2krq2/2N5"
        assert fen.active_color == "w"
        assert fen.castling_rights == "-"
        assert fen.move_number == 1

    def test_black_to_move(self) -> None:
        fen = Fen.from_string("5Q2/4PK2/p1pP4/3p4/N1P1P2p/5bB1/3kp2P/8 b - - 0 1")
        assert fen.color() == Color.BLACK

    def test_move_number(self) -> None:
        fen = Fen.from_string("4k3/8/8/8/8/8/8/4K3 w - - 12 42")
        assert fen.move_number == 42

    def test_castling(self) -> None:
        fen = Fen.from_string("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert fen.castling() == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_default_is_starting_position(self) -> None:
        assert Fen.default() == Fen.from_string(STARTING_FEN)

    def test_placements(self) -> None:
        fen = Fen.from_string("5R2/2p4n/1Q6/6Pp/1R2P3/2P2b1K/P2krq2/2N5 w - - 0 1")
        placed = list(fen.placements())
        assert placed[0] == (BoardPosition(0, 5), Color.WHITE, PieceType.ROOK)
        assert placed[1] == (BoardPosition(1, 2), Color.BLACK, PieceType.PAWN)
        assert placed[2] == (BoardPosition(1, 7), Color.BLACK, PieceType.KNIGHT)
        assert placed[3] == (BoardPosition(2, 1), Color.WHITE, PieceType.QUEEN)
        assert placed[-1] == (BoardPosition(7, 2), Color.WHITE, PieceType.KNIGHT)

    def test_unrecognised_symbol(self) -> None:
        with pytest.raises(ValueError, match="Unrecognised symbol in FEN"):
            Fen.from_string("rnbqkbnr/ppppxppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")

    def test_digit_nine_is_not_a_skip(self) -> None:
        with pytest.raises(ValueError, match="Unrecognised symbol in FEN"):
            Fen.from_string("rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")

    def test_overfull_rank(self) -> None:
        with pytest.raises(ValueError, match="Invalid rank or file"):
            Fen.from_string("rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")

    def test_unrecognised_active_color(self) -> None:
        with pytest.raises(ValueError, match="Unrecognised active color in FEN"):
            Fen.from_string("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1")

    def test_too_few_fields(self) -> None:
        with pytest.raises(ValueError, match="need 6 fields"):
            Fen.from_string("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -")

    def test_bad_move_number(self) -> None:
        with pytest.raises(ValueError, match="Invalid FEN move number"):
            Fen.from_string("4k3/8/8/8/8/8/8/4K3 w - - 0 one")


class TestStartingPosition:
    def test_piece_counts_and_ranks(self, start_board: BoardState) -> None:
        white = [pos for pos, p in start_board.pieces() if p.color == Color.WHITE]
        black = [pos for pos, p in start_board.pieces() if p.color == Color.BLACK]
        assert len(white) == 16
        assert len(black) == 16
        assert all(pos.rank in (6, 7) for pos in white)
        assert all(pos.rank in (0, 1) for pos in black)

    def test_metadata(self, start_board: BoardState) -> None:
        assert start_board.active_color == Color.WHITE
        assert start_board.move_number == 1
        assert start_board.castling_rights == CastlingRights.ALL
        assert start_board.castling_rights.for_color(Color.WHITE) == (True, True)
        assert start_board.castling_rights.for_color(Color.BLACK) == (True, True)

    def test_kings(self, start_board: BoardState) -> None:
        assert start_board.get_piece_type(parse_square("e1")) == PieceType.KING
        assert start_board.get_piece_type(parse_square("e8")) == PieceType.KING
        assert start_board.get_piece_color(parse_square("e8")) == Color.BLACK


class TestFenSerialisation:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "5R2/2p4n/1Q6/6Pp/1R2P3/2P2b1K/P2krq2/2N5 w - - 0 1",
            "5Q2/4PK2/p1pP4/3p4/N1P1P2p/5bB1/3kp2P/8 b - - 0 1",
            "r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 17",
        ],
    )
    def test_grid_round_trip(self, fen: str) -> None:
        board = BoardState.from_fen(fen)
        assert board_to_fen(board) == fen
        assert BoardState.from_fen(board_to_fen(board)) == board

    def test_after_move(self, start_board: BoardState) -> None:
        start_board.make_move(
            Move.from_board(parse_square("e2"), parse_square("e4"), start_board)
        )
        assert board_to_fen(start_board) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
        )

    def test_str_keeps_fields(self) -> None:
        fen = Fen.from_string("r3k2r/8/8/8/8/8/8/R3K2R b kq e3 5 9")
        assert str(fen) == "r3k2r/8/8/8/8/8/8/R3K2R b kq - 0 9"


class TestLoadFen:
    def test_reads_first_non_blank_line(self, tmp_path: Path) -> None:
        path = tmp_path / "position.fen"
        path.write_text("\n\n" + STARTING_FEN + "\n", encoding="utf-8")
        assert load_fen(path) == Fen.default()

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.fen"
        path.write_text("\n", encoding="utf-8")
        with pytest.raises(ValueError, match="No FEN found"):
            load_fen(path)


class TestMovetext:
    def test_numbered_pairs(self, start_board: BoardState) -> None:
        moves = []
        for frm, to in (("e2", "e4"), ("e7", "e5"), ("g1", "f3")):
            move = Move.from_board(parse_square(frm), parse_square(to), start_board)
            assert start_board.make_move(move) is not None
            moves.append(move)
        assert movetext(moves) == "1. e4 e5 2. Nf3"

    def test_black_first(self) -> None:
        black = Move(parse_square("e7"), parse_square("e5"), PieceType.PAWN, Color.BLACK)
        white = Move(parse_square("g1"), parse_square("f3"), PieceType.KNIGHT, Color.WHITE)
        assert movetext([black, white], 5) == "5... e5 6. Nf3"

    def test_empty(self) -> None:
        assert movetext([]) == ""

    def test_move_to_algebraic(self) -> None:
        move = Move(
            parse_square("c3"),
            parse_square("b5"),
            PieceType.KNIGHT,
            Color.WHITE,
            is_capture=True,
        )
        assert move_to_algebraic(move) == "Nxb5"
