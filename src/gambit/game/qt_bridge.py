"""Qt bridge exposing a game state machine through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from gambit.core.board import BoardSnapshot
from gambit.game.machine import GameStateMachine
from gambit.game.resolver import MoveOutcome


class GameBridge(QObject):
    """Relays engine notifications to a Qt view and view clicks to the engine.

    Slots must be invoked from the thread that owns the state machine; the
    bridge adds no locking.
    """

    board_changed = pyqtSignal(object)
    move_committed = pyqtSignal(object)
    turn_changed = pyqtSignal(int)

    __slots__ = ("_machine",)

    def __init__(self, machine: GameStateMachine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._machine = machine
        machine.subscribe(self._on_board)
        machine.events.on_move.append(self._on_move)
        machine.events.on_turn_changed.append(self.turn_changed.emit)

    @property
    def machine(self) -> GameStateMachine:
        return self._machine

    @pyqtSlot(int, int)
    def select_cell(self, row: int, col: int) -> None:
        """Forward a click on (*row*, *col*)."""
        self._machine.select((row, col))

    @pyqtSlot()
    def confirm(self) -> None:
        self._machine.confirm()

    def _on_board(self, snapshot: BoardSnapshot) -> None:
        self.board_changed.emit(snapshot)

    def _on_move(self, outcome: MoveOutcome) -> None:
        self.move_committed.emit(outcome)
