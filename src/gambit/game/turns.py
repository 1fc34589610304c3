"""Turn rotation and the automated-player hand-off loop."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from gambit.game.interfaces import IPlayer
from gambit.game.selection import SelectionTracker

_LOGGER = logging.getLogger(__name__)


class TurnController:
    """Owns the active player index.

    Args:
        players: Seats in turn order.
        max_chained_turns: Most automated moves :meth:`drive_automated` plays
            before handing control back to the caller.
    """

    __slots__ = ("_players", "_active_index", "_max_chained_turns")

    def __init__(self, players: Sequence[IPlayer], max_chained_turns: int) -> None:
        if not players:
            raise ValueError("A game needs at least one player")
        self._players = tuple(players)
        self._active_index = 0
        self._max_chained_turns = max_chained_turns

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_player(self) -> IPlayer:
        return self._players[self._active_index]

    def rotate(self) -> IPlayer:
        self._active_index = (self._active_index + 1) % len(self._players)
        return self.active_player

    def finish_turn(self, tracker: SelectionTracker, render: Callable[[], None]) -> IPlayer:
        """Post-move sequence: rotate, drop transient selection state, render."""
        player = self.rotate()
        tracker.reset()
        render()
        return player

    def drive_automated(self, play_turn: Callable[[IPlayer], bool]) -> int:
        """Let automated players move while one holds the turn.

        *play_turn* performs one decide-and-commit step for the given player
        and reports whether a move was committed.  Returns the number of
        automated moves played.
        """
        played = 0
        while not self.active_player.is_human:
            if played >= self._max_chained_turns:
                _LOGGER.warning(
                    "Stopped after %d consecutive automated moves", played
                )
                break
            if not play_turn(self.active_player):
                _LOGGER.warning(
                    "Player %d produced no move; turn stays with it",
                    self.active_player.player_id,
                )
                break
            played += 1
        return played
