"""Board coordinates and square-name helpers.

Board layout (rank 0 at the top, as the board is drawn):
    rank 0 = a8 ... h8   (Black's back rank)
    rank 7 = a1 ... h1   (White's back rank)
    file 0 = a-file, file 7 = h-file
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"


@dataclass(frozen=True, order=True, slots=True)
class BoardPosition:
    """Immutable (rank, file) coordinate, validated on construction.

    Ordering is board-scan order: rank-major, then file.
    """

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < BOARD_SIZE and 0 <= self.file < BOARD_SIZE):
            raise ValueError(
                f"Invalid rank or file value: {self.rank}, {self.file}"
            )

    def offset(self, d_rank: int, d_file: int) -> BoardPosition | None:
        """The square *d_rank*/*d_file* away, or None if off the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if is_on_board(rank, file):
            return BoardPosition(rank, file)
        return None

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(rank: int, file: int) -> bool:
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE


def sign(value: int) -> int:
    """-1, 0 or 1 following the sign of *value*."""
    return (value > 0) - (value < 0)


def square_name(pos: BoardPosition) -> str:
    """Human-readable name, e.g. BoardPosition(7, 4) → 'e1'."""
    return _FILES[pos.file] + str(BOARD_SIZE - pos.rank)


def parse_square(name: str) -> BoardPosition:
    """Parse square name, e.g. 'e4' → BoardPosition(4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return BoardPosition(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))


def all_positions() -> list[BoardPosition]:
    """Every square in board-scan order (rank-major, then file)."""
    return [
        BoardPosition(rank, file)
        for rank in range(BOARD_SIZE)
        for file in range(BOARD_SIZE)
    ]
