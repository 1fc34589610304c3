"""Core domain layer — cells, pieces, board projection, move generation.

Quick start::

    from gambit.core import BoardGrid, standard_layout

    pieces = [*standard_layout(0).values(), *standard_layout(1).values()]
    print(BoardGrid().regenerate(pieces).snapshot())
"""

from gambit.core.board import BoardGrid, BoardSnapshot
from gambit.core.cell import (
    EMPTY,
    EMPTY_TOKEN,
    BoardInvariantError,
    Cell,
    EmptyCell,
    OccupiedCell,
    annotate,
    decode_cell,
    encode_cell,
    require_occupied,
    strip_annotation,
)
from gambit.core.enums import Annotation, PieceKind, PlayerKind
from gambit.core.move_generator import MoveGenerator
from gambit.core.piece import BACK_RANK, Piece, standard_layout
from gambit.core.types import (
    BOARD_SIZE,
    Coord,
    PieceId,
    PlayerId,
    check_coord,
    home_row,
    is_on_board,
)

__all__ = [
    # Enums
    "Annotation",
    "PieceKind",
    "PlayerKind",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "PieceId",
    "PlayerId",
    "check_coord",
    "home_row",
    "is_on_board",
    # Cells
    "EMPTY",
    "EMPTY_TOKEN",
    "BoardInvariantError",
    "Cell",
    "EmptyCell",
    "OccupiedCell",
    "annotate",
    "decode_cell",
    "encode_cell",
    "require_occupied",
    "strip_annotation",
    # Domain objects
    "BACK_RANK",
    "BoardGrid",
    "BoardSnapshot",
    "MoveGenerator",
    "Piece",
    "standard_layout",
]
