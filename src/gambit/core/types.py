"""Coordinate aliases and board-geometry helpers.

Board layout (row-major, row 0 at the top):
    (0, 0) ... (0, 7)   player 1 home row
    ...
    (7, 0) ... (7, 7)   player 0 home row
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (row, col)
PlayerId: TypeAlias = int
PieceId: TypeAlias = int

BOARD_SIZE = 8


def is_on_board(row: int, col: int) -> bool:
    """Check whether *row*, *col* address a square of the 8×8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def check_coord(coord: Coord) -> Coord:
    """Return *coord* as a plain tuple or raise ``ValueError`` if off-board."""
    row, col = coord
    if not is_on_board(row, col):
        raise ValueError(f"Coordinate off board: {coord!r}")
    return (row, col)


def home_row(player_id: PlayerId) -> int:
    """Back-rank row of *player_id* (player 0 sits at the bottom)."""
    return BOARD_SIZE - 1 if player_id == 0 else 0


def forward(player_id: PlayerId) -> int:
    """Row delta of a pawn step for *player_id*."""
    return -1 if player_id == 0 else 1
