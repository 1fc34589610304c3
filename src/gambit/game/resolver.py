"""Move commitment: capture, castling and relocation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from gambit.core.board import BoardGrid
from gambit.core.cell import BoardInvariantError, OccupiedCell, require_occupied
from gambit.core.enums import PieceKind
from gambit.core.piece import Piece
from gambit.core.types import Coord
from gambit.game.interfaces import IPlayer

_LOGGER = logging.getLogger(__name__)

CASTLE_DISTANCE = 2
# target side -> (rook corner column, rook destination column)
_CASTLE_ROOK_COLS: dict[bool, tuple[int, int]] = {
    True: (0, 3),  # left
    False: (7, 5),  # right
}


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What a committed move did to the piece records."""

    piece: Piece
    origin: Coord
    target: Coord
    captured: Piece | None = None
    castled_rook: Piece | None = None
    rook_origin: Coord | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_castle(self) -> bool:
        return self.castled_rook is not None


class MoveResolver:
    """Applies a confirmed move to the piece records.

    Reads the pre-move *board* to identify pieces and never writes a cell;
    the caller regenerates the board afterwards.
    """

    __slots__ = ()

    def resolve(
        self,
        selection: Coord | None,
        pending_target: Coord | None,
        board: BoardGrid,
        players: Sequence[IPlayer],
        active_index: int,
    ) -> MoveOutcome | None:
        if pending_target is None or selection is None:
            return None

        mover_cell = require_occupied(board[selection], selection)
        piece = players[active_index].pieces[mover_cell.piece_id]
        origin = piece.position

        captured = self._capture(board, pending_target, players)

        rook: Piece | None = None
        rook_origin: Coord | None = None
        if (
            piece.kind == PieceKind.KING
            and abs(pending_target[1] - piece.col) == CASTLE_DISTANCE
        ):
            rook, rook_origin = self._castle(board, piece, pending_target, players[active_index])

        piece.relocate(*pending_target)
        _LOGGER.info(
            "Player %d moved %s %s -> %s",
            piece.owner,
            piece.kind.name,
            origin,
            pending_target,
        )
        return MoveOutcome(piece, origin, pending_target, captured, rook, rook_origin)

    @staticmethod
    def _capture(
        board: BoardGrid,
        target: Coord,
        players: Sequence[IPlayer],
    ) -> Piece | None:
        cell = board[target]
        if not isinstance(cell, OccupiedCell):
            return None
        victim = players[cell.owner].pieces[cell.piece_id]
        victim.kill()
        _LOGGER.info(
            "Player %d lost %s #%d at %s",
            cell.owner,
            cell.kind.name,
            cell.piece_id,
            target,
        )
        return victim

    @staticmethod
    def _castle(
        board: BoardGrid,
        king: Piece,
        target: Coord,
        owner: IPlayer,
    ) -> tuple[Piece, Coord]:
        corner_col, rook_col = _CASTLE_ROOK_COLS[target[1] < king.col]
        corner = (king.row, corner_col)
        cell = require_occupied(board[corner], corner)
        if cell.owner != king.owner or cell.kind != PieceKind.ROOK:
            raise BoardInvariantError(
                f"Castling expected a player {king.owner} rook at {corner}, found {cell}"
            )
        rook = owner.pieces[cell.piece_id]
        rook.relocate(king.row, rook_col)
        _LOGGER.info("Player %d castled, rook %s -> %s", king.owner, corner, rook.position)
        return rook, corner
