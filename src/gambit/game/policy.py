"""Default decision policies for automated players."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

from gambit.core.enums import PieceKind
from gambit.game.interfaces import TurnDecision

EASY = "easy"

_PIECE_VALUES: dict[PieceKind, int] = {
    PieceKind.PAWN: 100,
    PieceKind.KNIGHT: 320,
    PieceKind.BISHOP: 330,
    PieceKind.ROOK: 500,
    PieceKind.QUEEN: 900,
    PieceKind.KING: 20_000,
}

VictimLookup = Callable[[TurnDecision], "PieceKind | None"]


def piece_value(kind: PieceKind) -> int:
    return _PIECE_VALUES[kind]


class CapturePolicy:
    """Greedy capturer: take the most valuable victim, otherwise random.

    On ``"easy"`` every candidate is equally likely.

    Args:
        victim_of: ``(TurnDecision) -> PieceKind | None``, kind of the enemy
            piece standing on the decision's target, if any.
        rng: Random source for tie-breaks and quiet moves.
    """

    __slots__ = ("_victim_of", "_rng")

    def __init__(
        self,
        victim_of: VictimLookup,
        rng: random.Random | None = None,
    ) -> None:
        self._victim_of = victim_of
        self._rng = rng or random.Random()

    def choose(
        self,
        candidates: Sequence[TurnDecision],
        difficulty: str,
    ) -> TurnDecision | None:
        if not candidates:
            return None
        if difficulty == EASY:
            return self._rng.choice(list(candidates))

        best_score = 0
        best: list[TurnDecision] = []
        for decision in candidates:
            victim = self._victim_of(decision)
            score = piece_value(victim) if victim is not None else 0
            if score > best_score:
                best_score, best = score, [decision]
            elif score == best_score and score > 0:
                best.append(decision)
        if best:
            return self._rng.choice(best)
        return self._rng.choice(list(candidates))
