"""Tests for GameOptions."""

import dataclasses

import pytest

from gambit.game.options import DEFAULT_MAX_CHAINED_TURNS, GameOptions


class TestGameOptions:
    def test_defaults(self) -> None:
        opts = GameOptions()
        assert opts.human_opponent
        assert opts.seed is None
        assert opts.max_chained_turns == DEFAULT_MAX_CHAINED_TURNS

    def test_from_mapping(self) -> None:
        opts = GameOptions.from_mapping({"opponent": "cpu", "difficulty": "hard"})
        assert not opts.human_opponent
        assert opts.difficulty == "hard"

    def test_optional_keys(self) -> None:
        opts = GameOptions.from_mapping(
            {"opponent": "human", "difficulty": "x", "seed": "3", "max_chained_turns": 4}
        )
        assert opts.seed == 3
        assert opts.max_chained_turns == 4

    def test_unknown_keys_ignored(self) -> None:
        opts = GameOptions.from_mapping({"opponent": "human", "difficulty": "easy", "theme": "x"})
        assert opts.opponent == "human"

    def test_missing_keys(self) -> None:
        with pytest.raises(ValueError, match="opponent, difficulty"):
            GameOptions.from_mapping({})

    def test_bad_values(self) -> None:
        with pytest.raises(ValueError, match="Invalid game options"):
            GameOptions.from_mapping({"opponent": "cpu", "difficulty": "easy", "seed": "abc"})
        with pytest.raises(ValueError, match="max_chained_turns"):
            GameOptions(max_chained_turns=0)

    def test_frozen(self) -> None:
        opts = GameOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            opts.difficulty = "hard"  # type: ignore[misc]
