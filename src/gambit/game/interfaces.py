"""Abstract interfaces for the game layer.

The state machine depends on these, not on concrete players, policies or
move generators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from gambit.core.enums import PlayerKind
from gambit.core.types import Coord, PieceId, PlayerId

if TYPE_CHECKING:
    from gambit.core.board import BoardSnapshot
    from gambit.core.piece import Piece

BoardObserver = Callable[["BoardSnapshot"], None]


@dataclass(frozen=True, slots=True)
class TurnDecision:
    """A move chosen by an automated player: click *selection*, then *target*."""

    selection: Coord
    target: Coord


class IMoveGenerator(Protocol):
    """Source of candidate destinations, already filtered for legality."""

    def moves_for(self, player_id: PlayerId, piece_id: PieceId) -> set[Coord]: ...


class IDecisionPolicy(Protocol):
    """Picks one decision out of the candidates an automated player has."""

    def choose(
        self,
        candidates: Sequence[TurnDecision],
        difficulty: str,
    ) -> TurnDecision | None: ...


class IPlayer(ABC):
    """Interface for a game participant (human or automated)."""

    __slots__ = ()

    @property
    @abstractmethod
    def player_id(self) -> PlayerId: ...

    @property
    @abstractmethod
    def kind(self) -> PlayerKind: ...

    @property
    @abstractmethod
    def pieces(self) -> Mapping[PieceId, Piece]: ...

    @property
    def is_human(self) -> bool:
        return self.kind == PlayerKind.HUMAN

    @abstractmethod
    def observe_board(self, snapshot: BoardSnapshot) -> None:
        """Receive the freshly rendered board.  Must not drive the engine."""

    @abstractmethod
    def take_turn(
        self,
        difficulty: str,
        move_generator: IMoveGenerator,
    ) -> TurnDecision | None:
        """Pick a move.

        Humans return ``None``: their moves arrive as clicks.  Automated
        players return the decision the state machine should play, or
        ``None`` if they have nothing to move.
        """
