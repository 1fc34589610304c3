"""Pseudo-legal destination generation from live piece records.

Check, en-passant and promotion are not modelled.  Castling is offered when
the king stands unmoved on its home square, the corner rook has not moved
and the squares between them are empty; attacked squares are not considered.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from gambit.core.enums import PieceKind
from gambit.core.piece import Piece
from gambit.core.types import Coord, PieceId, PlayerId, forward, home_row, is_on_board

KING_HOME_COL = 4

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

_SLIDER_DIRS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.BISHOP: BISHOP_DIRS,
    PieceKind.ROOK: ROOK_DIRS,
    PieceKind.QUEEN: QUEEN_DIRS,
}


class MoveGenerator:
    """Candidate destinations for one piece at a time.

    Args:
        rosters: Per-player piece mappings indexed by player id.  The
            mappings are read live, so relocations and captures are seen
            without rebuilding the generator.
    """

    __slots__ = ("_rosters",)

    def __init__(self, rosters: Sequence[Mapping[PieceId, Piece]]) -> None:
        self._rosters = rosters

    def moves_for(self, player_id: PlayerId, piece_id: PieceId) -> set[Coord]:
        piece = self._rosters[player_id][piece_id]
        if not piece.is_alive():
            return set()

        occupancy = self._occupancy()
        if piece.kind == PieceKind.PAWN:
            return self._pawn_moves(piece, occupancy)
        if piece.kind == PieceKind.KNIGHT:
            return self._step_moves(piece, KNIGHT_OFFSETS, occupancy)
        if piece.kind == PieceKind.KING:
            moves = self._step_moves(piece, KING_OFFSETS, occupancy)
            moves |= self._castling_moves(piece, occupancy)
            return moves
        return self._slide_moves(piece, _SLIDER_DIRS[piece.kind], occupancy)

    # -- Helpers ------------------------------------------------------------

    def _occupancy(self) -> dict[Coord, Piece]:
        return {
            piece.position: piece
            for roster in self._rosters
            for piece in roster.values()
            if piece.is_alive()
        }

    @staticmethod
    def _step_moves(
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        occupancy: dict[Coord, Piece],
    ) -> set[Coord]:
        moves: set[Coord] = set()
        for dr, dc in offsets:
            r, c = piece.row + dr, piece.col + dc
            if not is_on_board(r, c):
                continue
            other = occupancy.get((r, c))
            if other is None or other.owner != piece.owner:
                moves.add((r, c))
        return moves

    @staticmethod
    def _slide_moves(
        piece: Piece,
        dirs: tuple[tuple[int, int], ...],
        occupancy: dict[Coord, Piece],
    ) -> set[Coord]:
        moves: set[Coord] = set()
        for dr, dc in dirs:
            r, c = piece.row + dr, piece.col + dc
            while is_on_board(r, c):
                other = occupancy.get((r, c))
                if other is not None:
                    if other.owner != piece.owner:
                        moves.add((r, c))
                    break
                moves.add((r, c))
                r += dr
                c += dc
        return moves

    @staticmethod
    def _pawn_moves(piece: Piece, occupancy: dict[Coord, Piece]) -> set[Coord]:
        moves: set[Coord] = set()
        step = forward(piece.owner)
        one = (piece.row + step, piece.col)
        if is_on_board(*one) and one not in occupancy:
            moves.add(one)
            two = (piece.row + 2 * step, piece.col)
            if not piece.has_moved and is_on_board(*two) and two not in occupancy:
                moves.add(two)
        for dc in (-1, 1):
            diag = (piece.row + step, piece.col + dc)
            other = occupancy.get(diag)
            if other is not None and other.owner != piece.owner:
                moves.add(diag)
        return moves

    @staticmethod
    def _castling_moves(king: Piece, occupancy: dict[Coord, Piece]) -> set[Coord]:
        if king.has_moved or king.position != (home_row(king.owner), KING_HOME_COL):
            return set()
        moves: set[Coord] = set()
        for rook_col, target_col in ((0, king.col - 2), (7, king.col + 2)):
            rook = occupancy.get((king.row, rook_col))
            if (
                rook is None
                or rook.owner != king.owner
                or rook.kind != PieceKind.ROOK
                or rook.has_moved
            ):
                continue
            lo, hi = sorted((rook_col, king.col))
            if any((king.row, c) in occupancy for c in range(lo + 1, hi)):
                continue
            target = (king.row, target_col)
            if is_on_board(*target) and target not in occupancy:
                moves.add(target)
        return moves
