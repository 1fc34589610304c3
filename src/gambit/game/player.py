"""Concrete player implementations."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import TYPE_CHECKING

from gambit.core.enums import PieceKind, PlayerKind
from gambit.core.piece import Piece, standard_layout
from gambit.core.types import PieceId, PlayerId
from gambit.game.interfaces import IDecisionPolicy, IMoveGenerator, IPlayer, TurnDecision
from gambit.game.policy import CapturePolicy

if TYPE_CHECKING:
    from gambit.core.board import BoardSnapshot

_LOGGER = logging.getLogger(__name__)


class _BasePlayer(IPlayer):
    __slots__ = ("_player_id", "_pieces", "_last_board")

    def __init__(
        self,
        player_id: PlayerId,
        pieces: Mapping[PieceId, Piece] | None = None,
    ) -> None:
        self._player_id = player_id
        self._pieces = dict(pieces) if pieces is not None else standard_layout(player_id)
        self._last_board: BoardSnapshot | None = None

    @property
    def player_id(self) -> PlayerId:
        return self._player_id

    @property
    def pieces(self) -> Mapping[PieceId, Piece]:
        return self._pieces

    @property
    def last_board(self) -> BoardSnapshot | None:
        """Most recent board delivered through :meth:`observe_board`."""
        return self._last_board

    def observe_board(self, snapshot: BoardSnapshot) -> None:
        self._last_board = snapshot

    def alive_pieces(self) -> list[Piece]:
        return [p for p in self._pieces.values() if p.is_alive()]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._player_id})"


class HumanPlayer(_BasePlayer):
    """A human participant whose moves come from clicks.

    ``take_turn`` returns ``None`` because humans select moves interactively.
    """

    __slots__ = ()

    @property
    def kind(self) -> PlayerKind:
        return PlayerKind.HUMAN

    def take_turn(
        self,
        difficulty: str,
        move_generator: IMoveGenerator,
    ) -> TurnDecision | None:
        return None


class AutomatedPlayer(_BasePlayer):
    """A computer participant that delegates the choice to a policy.

    Args:
        player_id: Seat of this player.
        opponent: The other player, consulted when valuing captures.
        policy: Decision policy; defaults to :class:`CapturePolicy`.
        pieces: Starting pieces; defaults to the standard layout.
        rng: Random source for the default policy.
    """

    __slots__ = ("_opponent", "_policy")

    def __init__(
        self,
        player_id: PlayerId,
        opponent: IPlayer,
        policy: IDecisionPolicy | None = None,
        pieces: Mapping[PieceId, Piece] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(player_id, pieces)
        self._opponent = opponent
        self._policy = policy or CapturePolicy(self._victim_of, rng)

    @property
    def kind(self) -> PlayerKind:
        return PlayerKind.AUTOMATED

    @property
    def opponent(self) -> IPlayer:
        return self._opponent

    def candidate_moves(self, move_generator: IMoveGenerator) -> list[TurnDecision]:
        """Every (piece, destination) pair available, in stable order."""
        candidates: list[TurnDecision] = []
        for piece in sorted(self.alive_pieces(), key=lambda p: p.piece_id):
            for target in sorted(move_generator.moves_for(self._player_id, piece.piece_id)):
                candidates.append(TurnDecision(piece.position, target))
        return candidates

    def take_turn(
        self,
        difficulty: str,
        move_generator: IMoveGenerator,
    ) -> TurnDecision | None:
        candidates = self.candidate_moves(move_generator)
        decision = self._policy.choose(candidates, difficulty)
        _LOGGER.debug(
            "Player %d (%s) chose %s out of %d candidates",
            self._player_id,
            difficulty,
            decision,
            len(candidates),
        )
        return decision

    def _victim_of(self, decision: TurnDecision) -> PieceKind | None:
        for piece in self._opponent.pieces.values():
            if piece.is_alive() and piece.position == decision.target:
                return piece.kind
        return None
