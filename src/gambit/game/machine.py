"""GameStateMachine — the orchestrator of a game.

Coordinates: Players, SelectionTracker, MoveResolver, TurnController and the
move generator.  Publishes every rendered board through simple callbacks so
the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from gambit.core.board import BoardGrid, BoardSnapshot
from gambit.core.move_generator import MoveGenerator
from gambit.core.piece import Piece
from gambit.core.types import Coord
from gambit.game.interfaces import BoardObserver, IDecisionPolicy, IMoveGenerator, IPlayer
from gambit.game.options import GameOptions
from gambit.game.player import AutomatedPlayer, HumanPlayer
from gambit.game.resolver import MoveOutcome, MoveResolver
from gambit.game.selection import SelectionTracker
from gambit.game.turns import TurnController

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome], None]
TurnCallback = Callable[[int], None]  # new active player index


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board: list[BoardObserver] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


class ReentrantCallError(RuntimeError):
    """An observer tried to drive the engine from inside a notification."""


# ── State machine ────────────────────────────────────────────────────────────


class GameStateMachine:
    """Resolves clicks into move previews, commits moves, rotates turns.

    Player 0 is supplied by the caller; player 1 is human when the
    ``opponent`` option is ``"human"`` and automated otherwise.  After a human
    move every automated player in turn order moves before ``confirm``
    returns.

    Thread-safety: single-threaded and synchronous.  Observers receive an
    immutable :class:`BoardSnapshot` and must not call :meth:`select` or
    :meth:`confirm` while being notified.
    """

    __slots__ = (
        "_options",
        "_players",
        "_board",
        "_tracker",
        "_resolver",
        "_turns",
        "_moves",
        "_history",
        "_notifying",
        "events",
    )

    def __init__(
        self,
        options: GameOptions | Mapping[str, Any],
        player_one: IPlayer,
        *,
        move_generator: IMoveGenerator | None = None,
        policy: IDecisionPolicy | None = None,
    ) -> None:
        if player_one.player_id != 0:
            raise ValueError(f"First player must have id 0, got {player_one.player_id}")
        if not isinstance(options, GameOptions):
            options = GameOptions.from_mapping(options)
        self._options = options

        self._players: tuple[IPlayer, ...] = (
            player_one,
            self._second_player(player_one, policy),
        )
        self._board = BoardGrid()
        self._tracker = SelectionTracker()
        self._resolver = MoveResolver()
        self._turns = TurnController(self._players, options.max_chained_turns)
        if move_generator is None:
            move_generator = MoveGenerator([p.pieces for p in self._players])
        self._moves = move_generator
        self._history: list[MoveOutcome] = []
        self._notifying = False
        self.events = GameEvents()

        for piece in self._all_pieces():
            self.events.on_board.append(piece.observe_board)
        for player in self._players:
            self.events.on_board.append(player.observe_board)
        self._board.regenerate(self._all_pieces())
        _LOGGER.info(
            "New game: opponent=%s difficulty=%s",
            options.opponent,
            options.difficulty,
        )

    def _second_player(
        self,
        player_one: IPlayer,
        policy: IDecisionPolicy | None,
    ) -> IPlayer:
        if self._options.human_opponent:
            return HumanPlayer(1)
        rng = random.Random(self._options.seed)
        return AutomatedPlayer(1, player_one, policy=policy, rng=rng)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def options(self) -> GameOptions:
        return self._options

    @property
    def players(self) -> tuple[IPlayer, ...]:
        return self._players

    @property
    def active_index(self) -> int:
        return self._turns.active_index

    @property
    def active_player(self) -> IPlayer:
        return self._turns.active_player

    @property
    def board(self) -> BoardSnapshot:
        return self._board.snapshot()

    @property
    def selection(self) -> Coord | None:
        return self._tracker.selection

    @property
    def pending_target(self) -> Coord | None:
        return self._tracker.pending_target

    @property
    def destinations(self) -> frozenset[Coord]:
        return self._tracker.destinations

    @property
    def move_generator(self) -> IMoveGenerator:
        return self._moves

    @property
    def history(self) -> tuple[MoveOutcome, ...]:
        return tuple(self._history)

    def subscribe(self, observer: BoardObserver) -> None:
        self.events.on_board.append(observer)

    # ── Public operations ────────────────────────────────────────────────

    def start(self) -> None:
        """Publish the opening board and let an automated player 0 move."""
        self._guard()
        self._render()
        self.resume()

    def resume(self) -> int:
        """Run the automated chain again from the current turn.

        The chain stops when an automated player has no move or after
        ``max_chained_turns`` moves, leaving the turn with that player.
        Returns the number of automated moves played; ``0`` while a human
        holds the turn.
        """
        self._guard()
        return self._turns.drive_automated(self._play_automated)

    def select(self, coord: Coord) -> None:
        """Handle a click on *coord* by the active player, then re-render."""
        self._guard()
        self._click(coord)
        self._render()

    def confirm(self) -> MoveOutcome | None:
        """Commit the pending move of the active human player.

        Returns the outcome of the human move, or ``None`` when nothing was
        pending (or an automated player holds the turn).
        """
        self._guard()
        if not self.active_player.is_human:
            _LOGGER.debug("Ignoring confirm while player %d is automated", self.active_index)
            return None
        outcome = self._commit()
        if outcome is not None:
            self._turns.drive_automated(self._play_automated)
        return outcome

    # ── Internal helpers ─────────────────────────────────────────────────

    def _guard(self) -> None:
        if self._notifying:
            raise ReentrantCallError("Observers must not drive the game during notification")

    def _all_pieces(self) -> list[Piece]:
        return [piece for player in self._players for piece in player.pieces.values()]

    def _click(self, coord: Coord) -> None:
        self._tracker.on_cell_clicked(coord, self._board, self.active_index, self._moves)

    def _commit(self) -> MoveOutcome | None:
        outcome = self._resolver.resolve(
            self._tracker.selection,
            self._tracker.pending_target,
            self._board,
            self._players,
            self.active_index,
        )
        if outcome is None:
            return None

        self._history.append(outcome)
        self._turns.finish_turn(self._tracker, self._render)
        self._emit_move(outcome)
        self._emit_turn_changed(self.active_index)
        return outcome

    def _play_automated(self, player: IPlayer) -> bool:
        decision = player.take_turn(self._options.difficulty, self._moves)
        if decision is None:
            return False
        self._click(decision.selection)
        self._render()
        self._click(decision.target)
        self._render()
        return self._commit() is not None

    def _render(self) -> None:
        self._board.regenerate(self._all_pieces())
        self._tracker.mark_special_cells(self._board)
        snapshot = self._board.snapshot()
        with self._notification():
            for cb in self.events.on_board:
                cb(snapshot)

    def _emit_move(self, outcome: MoveOutcome) -> None:
        with self._notification():
            for cb in self.events.on_move:
                cb(outcome)

    def _emit_turn_changed(self, index: int) -> None:
        with self._notification():
            for cb in self.events.on_turn_changed:
                cb(index)

    @contextmanager
    def _notification(self) -> Iterator[None]:
        self._notifying = True
        try:
            yield
        finally:
            self._notifying = False
