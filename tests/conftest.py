"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import BoardState
from chessrules.core.notation import STARTING_FEN

CASTLE_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


@pytest.fixture
def start_board() -> BoardState:
    """Standard starting position, White to move."""
    return BoardState.from_fen(STARTING_FEN)


@pytest.fixture
def castle_board() -> BoardState:
    """Kings and rooks only, every castling right intact."""
    return BoardState.from_fen(CASTLE_FEN)
