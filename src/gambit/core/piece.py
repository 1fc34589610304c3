"""Piece record and the standard starting layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import PieceKind
from gambit.core.types import BOARD_SIZE, Coord, PieceId, PlayerId, check_coord, home_row

if TYPE_CHECKING:
    from gambit.core.board import BoardSnapshot

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)
PAWN_ID_OFFSET = BOARD_SIZE


class Piece:
    """Mutable record of one piece owned by a player.

    Dead pieces keep their record (and last position) for capture
    bookkeeping but vanish from board projections.
    """

    __slots__ = (
        "_owner",
        "_kind",
        "_piece_id",
        "_row",
        "_col",
        "_alive",
        "_move_count",
        "_last_board",
    )

    def __init__(
        self,
        owner: PlayerId,
        kind: PieceKind,
        piece_id: PieceId,
        position: Coord,
    ) -> None:
        self._owner = owner
        self._kind = kind
        self._piece_id = piece_id
        self._row, self._col = check_coord(position)
        self._alive = True
        self._move_count = 0
        self._last_board: BoardSnapshot | None = None

    @property
    def owner(self) -> PlayerId:
        return self._owner

    @property
    def kind(self) -> PieceKind:
        return self._kind

    @property
    def piece_id(self) -> PieceId:
        return self._piece_id

    @property
    def position(self) -> Coord:
        return (self._row, self._col)

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def last_board(self) -> BoardSnapshot | None:
        return self._last_board

    @property
    def has_moved(self) -> bool:
        return self._move_count > 0

    def observe_board(self, snapshot: BoardSnapshot) -> None:
        self._last_board = snapshot

    def is_alive(self) -> bool:
        return self._alive

    def kill(self) -> None:
        self._alive = False

    def relocate(self, row: int, col: int) -> None:
        """Move the piece to (*row*, *col*) without any rule checks."""
        self._row, self._col = check_coord((row, col))
        self._move_count += 1

    def __repr__(self) -> str:
        state = "" if self._alive else ", dead"
        return (
            f"Piece({self._owner}, {self._kind.name}, #{self._piece_id}, "
            f"{self.position}{state})"
        )


def standard_layout(owner: PlayerId) -> dict[PieceId, Piece]:
    """Sixteen pieces of *owner* on their starting squares, keyed by id.

    Back-rank pieces take ids 0–7 by column, pawns ids 8–15.
    """
    back = home_row(owner)
    pawn_row = back - 1 if owner == 0 else back + 1
    pieces: dict[PieceId, Piece] = {}
    for col, kind in enumerate(BACK_RANK):
        pieces[col] = Piece(owner, kind, col, (back, col))
    for col in range(BOARD_SIZE):
        pid = PAWN_ID_OFFSET + col
        pieces[pid] = Piece(owner, PieceKind.PAWN, pid, (pawn_row, col))
    return pieces
