"""Precomputed move geometry for every piece kind on every square.

Tables ignore occupancy entirely: they answer "where could this piece go
on an empty board".  Destinations are stored in board-scan order so that
move enumeration is deterministic.
"""

from __future__ import annotations

from chessrules.core.types import BoardPosition, all_positions

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

Targets = dict[BoardPosition, tuple[BoardPosition, ...]]


# -- Table builders ----------------------------------------------------------


def _build_targets(offsets: tuple[tuple[int, int], ...]) -> Targets:
    targets: Targets = {}
    for pos in all_positions():
        moves = [pos.offset(d_rank, d_file) for d_rank, d_file in offsets]
        targets[pos] = tuple(sorted(m for m in moves if m is not None))
    return targets


def _build_rays(directions: tuple[tuple[int, int], ...]) -> Targets:
    targets: Targets = {}
    for pos in all_positions():
        moves: list[BoardPosition] = []
        for d_rank, d_file in directions:
            step = pos.offset(d_rank, d_file)
            while step is not None:
                moves.append(step)
                step = step.offset(d_rank, d_file)
        targets[pos] = tuple(sorted(moves))
    return targets


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_TARGETS = _build_rays(BISHOP_DIRS)
ROOK_TARGETS = _build_rays(ROOK_DIRS)
QUEEN_TARGETS = _build_rays(QUEEN_DIRS)
