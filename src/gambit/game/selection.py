"""Selection tracking: turns cell clicks into move intent."""

from __future__ import annotations

import logging

from gambit.core.board import BoardGrid
from gambit.core.cell import OccupiedCell
from gambit.core.enums import Annotation
from gambit.core.types import Coord, PlayerId, check_coord
from gambit.game.interfaces import IMoveGenerator

_LOGGER = logging.getLogger(__name__)


class SelectionTracker:
    """Holds the selected cell, the pending target and the destinations.

    At most one cell is selected and at most one target is pending.  The
    destinations always belong to the selected piece and are empty whenever
    nothing is selected.
    """

    __slots__ = ("_selection", "_pending_target", "_destinations")

    def __init__(self) -> None:
        self._selection: Coord | None = None
        self._pending_target: Coord | None = None
        self._destinations: frozenset[Coord] = frozenset()

    @property
    def selection(self) -> Coord | None:
        return self._selection

    @property
    def pending_target(self) -> Coord | None:
        return self._pending_target

    @property
    def destinations(self) -> frozenset[Coord]:
        return self._destinations

    def reset(self) -> None:
        self._selection = None
        self._pending_target = None
        self._destinations = frozenset()

    def on_cell_clicked(
        self,
        coord: Coord,
        board: BoardGrid,
        active_player: PlayerId,
        move_generator: IMoveGenerator,
    ) -> None:
        """Resolve a click against the last rendered *board*.

        A click on a highlighted destination makes it the pending target and
        keeps the selection.  Any other click drops the selection and picks
        the clicked piece if it belongs to *active_player*; empty and enemy
        cells are ignored.
        """
        coord = check_coord(coord)
        self._pending_target = None
        cell = board[coord]

        if cell.annotation is not None and cell.annotation.is_destination:
            self._pending_target = coord
            _LOGGER.debug("Pending target set to %s", coord)
            return

        self._selection = None
        self._destinations = frozenset()
        if isinstance(cell, OccupiedCell) and cell.owner == active_player:
            self._selection = coord
            self._destinations = frozenset(
                move_generator.moves_for(active_player, cell.piece_id)
            )
            _LOGGER.debug(
                "Selected %s at %s with %d destinations",
                cell.kind.name,
                coord,
                len(self._destinations),
            )

    def mark_special_cells(self, board: BoardGrid) -> None:
        """Overlay selection state on a freshly regenerated *board*.

        Selected goes first, destinations second, the pending target last so
        its marker wins on the chosen cell.
        """
        if self._selection is None:
            return
        board.annotate(self._selection, Annotation.SELECTED)
        for dest in self._destinations:
            if dest == self._selection:
                continue
            if board.is_empty(dest):
                board.annotate(dest, Annotation.MOVE_TARGET)
            else:
                board.annotate(dest, Annotation.CAPTURE_TARGET)
        if self._pending_target is not None:
            board.annotate(self._pending_target, Annotation.PENDING_TARGET)
