"""Game configuration consumed when the state machine is built."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

HUMAN_OPPONENT = "human"
DEFAULT_MAX_CHAINED_TURNS = 200


@dataclass(slots=True, frozen=True)
class GameOptions:
    """Immutable game options.

    Args:
        opponent: ``"human"`` for a local second player; any other value
            makes player 1 automated.
        difficulty: Opaque setting handed to the automated decision policy.
        seed: Optional RNG seed for the default decision policy.
        max_chained_turns: Upper bound on consecutive automated moves played
            within a single ``confirm``.
    """

    opponent: str = HUMAN_OPPONENT
    difficulty: str = "easy"
    seed: int | None = None
    max_chained_turns: int = DEFAULT_MAX_CHAINED_TURNS

    def __post_init__(self) -> None:
        if self.max_chained_turns < 1:
            raise ValueError(
                f"max_chained_turns must be >= 1, got {self.max_chained_turns}"
            )

    @property
    def human_opponent(self) -> bool:
        return self.opponent == HUMAN_OPPONENT

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> GameOptions:
        """Build options from a plain mapping; unknown keys are ignored."""
        missing = [key for key in ("opponent", "difficulty") if key not in options]
        if missing:
            raise ValueError(f"Missing game options: {', '.join(missing)}")

        seed = options.get("seed")
        chained = options.get("max_chained_turns", DEFAULT_MAX_CHAINED_TURNS)
        try:
            return cls(
                opponent=str(options["opponent"]),
                difficulty=str(options["difficulty"]),
                seed=None if seed is None else int(seed),
                max_chained_turns=int(chained),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid game options: {exc}") from exc
