"""Tests for the Piece record and starting layout."""

import pytest

from gambit.core.enums import PieceKind
from gambit.core.piece import BACK_RANK, Piece, standard_layout


class TestPiece:
    def test_properties(self) -> None:
        p = Piece(1, PieceKind.KNIGHT, 6, (0, 6))
        assert p.owner == 1
        assert p.kind == PieceKind.KNIGHT
        assert p.piece_id == 6
        assert p.position == (0, 6)
        assert p.is_alive()
        assert not p.has_moved

    def test_observe_board(self) -> None:
        p = Piece(0, PieceKind.ROOK, 0, (7, 0))
        assert p.last_board is None
        sentinel = object()
        p.observe_board(sentinel)  # type: ignore[arg-type]
        assert p.last_board is sentinel

    def test_kill_keeps_record(self) -> None:
        p = Piece(0, PieceKind.PAWN, 8, (6, 0))
        p.kill()
        assert not p.is_alive()
        assert p.position == (6, 0)
        assert "dead" in repr(p)

    def test_relocate(self) -> None:
        p = Piece(0, PieceKind.ROOK, 7, (7, 7))
        p.relocate(7, 5)
        assert (p.row, p.col) == (7, 5)
        assert p.has_moved

    def test_relocate_off_board(self) -> None:
        p = Piece(0, PieceKind.ROOK, 7, (7, 7))
        with pytest.raises(ValueError):
            p.relocate(8, 7)
        assert p.position == (7, 7)

    def test_construct_off_board(self) -> None:
        with pytest.raises(ValueError):
            Piece(0, PieceKind.KING, 4, (-1, 4))


class TestStandardLayout:
    def test_sixteen_pieces(self) -> None:
        for owner in (0, 1):
            pieces = standard_layout(owner)
            assert sorted(pieces) == list(range(16))
            assert all(p.owner == owner for p in pieces.values())

    def test_player_zero_at_bottom(self) -> None:
        pieces = standard_layout(0)
        assert pieces[4].kind == PieceKind.KING
        assert pieces[4].position == (7, 4)
        assert all(pieces[pid].row == 6 for pid in range(8, 16))

    def test_player_one_at_top(self) -> None:
        pieces = standard_layout(1)
        assert pieces[4].position == (0, 4)
        assert [pieces[c].kind for c in range(8)] == list(BACK_RANK)
        assert all(pieces[pid].row == 1 for pid in range(8, 16))

    def test_pawn_ids_follow_columns(self) -> None:
        pieces = standard_layout(0)
        for col in range(8):
            assert pieces[8 + col].position == (6, col)
            assert pieces[8 + col].kind == PieceKind.PAWN
