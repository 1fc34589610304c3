"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator

import pytest

from gambit.core.enums import PieceKind
from gambit.core.piece import Piece
from gambit.core.types import Coord, PieceId, PlayerId

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


class StubMoveGenerator:
    """Move generator returning canned destinations per (player, piece)."""

    def __init__(self, moves: dict[tuple[PlayerId, PieceId], Iterable[Coord]] | None = None) -> None:
        self.moves = {key: set(value) for key, value in (moves or {}).items()}
        self.calls: list[tuple[PlayerId, PieceId]] = []

    def moves_for(self, player_id: PlayerId, piece_id: PieceId) -> set[Coord]:
        self.calls.append((player_id, piece_id))
        return set(self.moves.get((player_id, piece_id), set()))


def make_pieces(owner: PlayerId, *specs: tuple[PieceId, PieceKind, Coord]) -> dict[PieceId, Piece]:
    """Build a sparse roster from ``(id, kind, position)`` triples."""
    return {pid: Piece(owner, kind, pid, pos) for pid, kind, pos in specs}


@pytest.fixture
def stub_generator() -> type[StubMoveGenerator]:
    return StubMoveGenerator


@pytest.fixture
def pieces_factory() -> object:
    return make_pieces
