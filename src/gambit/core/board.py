"""Board grid - an 8x8 projection of alive pieces."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from gambit.core.cell import EMPTY, Cell, OccupiedCell, annotate, encode_cell
from gambit.core.enums import Annotation
from gambit.core.piece import Piece
from gambit.core.types import BOARD_SIZE, Coord, check_coord


def _blank_rows() -> list[list[Cell]]:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class BoardGrid:
    """Mutable cell matrix, rebuilt from piece records on every render.

    The grid never detects collisions: two alive pieces on one square is an
    upstream bug and the later piece simply wins the cell.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Cell]] = _blank_rows()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Cell:
        row, col = check_coord(coord)
        return self._cells[row][col]

    def __setitem__(self, coord: Coord, cell: Cell) -> None:
        row, col = check_coord(coord)
        self._cells[row][col] = cell

    def is_empty(self, coord: Coord) -> bool:
        return self[coord].is_empty

    # -- Regeneration -------------------------------------------------------

    def clear(self) -> BoardGrid:
        self._cells = _blank_rows()
        return self

    def regenerate(self, pieces: Iterable[Piece]) -> BoardGrid:
        """Clear, then place every alive piece from *pieces*."""
        self.clear()
        for piece in pieces:
            if piece.is_alive():
                self._cells[piece.row][piece.col] = OccupiedCell(
                    piece.owner, piece.kind, piece.piece_id
                )
        return self

    def annotate(self, coord: Coord, annotation: Annotation) -> None:
        self[coord] = annotate(self[coord], annotation)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(tuple(tuple(row) for row in self._cells))

    def __repr__(self) -> str:
        return repr(self.snapshot())


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Immutable view of a rendered board handed to observers."""

    rows: tuple[tuple[Cell, ...], ...]

    def __getitem__(self, coord: Coord) -> Cell:
        row, col = check_coord(coord)
        return self.rows[row][col]

    def tokens(self) -> list[list[str]]:
        """Rows of encoded cell tokens."""
        return [[encode_cell(cell) for cell in row] for row in self.rows]

    def occupied(self) -> Iterator[tuple[Coord, OccupiedCell]]:
        for r, row in enumerate(self.rows):
            for c, cell in enumerate(row):
                if isinstance(cell, OccupiedCell):
                    yield (r, c), cell

    def __str__(self) -> str:
        lines = [" ".join(f"{tok:<5}" for tok in row).rstrip() for row in self.tokens()]
        return "\n".join(f"{r} {line}" for r, line in enumerate(lines))
