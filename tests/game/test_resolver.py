"""Tests for MoveResolver — capture, castling and relocation."""

import pytest

from gambit.core.board import BoardGrid
from gambit.core.cell import BoardInvariantError
from gambit.core.enums import PieceKind
from gambit.game.player import HumanPlayer
from gambit.game.resolver import MoveResolver


def _setup(pieces_factory, white_specs, black_specs):
    players = (
        HumanPlayer(0, pieces_factory(0, *white_specs)),
        HumanPlayer(1, pieces_factory(1, *black_specs)),
    )
    board = BoardGrid().regenerate(
        [p for player in players for p in player.pieces.values()]
    )
    return players, board


class TestNoOp:
    def test_without_pending_target(self, pieces_factory) -> None:
        players, board = _setup(pieces_factory, [(8, PieceKind.PAWN, (6, 0))], [])
        assert MoveResolver().resolve((6, 0), None, board, players, 0) is None
        assert players[0].pieces[8].position == (6, 0)

    def test_without_selection(self, pieces_factory) -> None:
        players, board = _setup(pieces_factory, [(8, PieceKind.PAWN, (6, 0))], [])
        assert MoveResolver().resolve(None, (5, 0), board, players, 0) is None

    def test_empty_selection_cell_fails_loudly(self, pieces_factory) -> None:
        players, board = _setup(pieces_factory, [(8, PieceKind.PAWN, (6, 0))], [])
        with pytest.raises(BoardInvariantError):
            MoveResolver().resolve((6, 1), (5, 1), board, players, 0)


class TestQuietMove:
    def test_relocates(self, pieces_factory) -> None:
        players, board = _setup(pieces_factory, [(8, PieceKind.PAWN, (6, 0))], [])
        outcome = MoveResolver().resolve((6, 0), (4, 0), board, players, 0)
        assert outcome is not None
        assert outcome.piece is players[0].pieces[8]
        assert (outcome.origin, outcome.target) == ((6, 0), (4, 0))
        assert not outcome.is_capture and not outcome.is_castle
        assert players[0].pieces[8].position == (4, 0)

    def test_board_is_not_written(self, pieces_factory) -> None:
        players, board = _setup(pieces_factory, [(8, PieceKind.PAWN, (6, 0))], [])
        before = board.snapshot()
        MoveResolver().resolve((6, 0), (5, 0), board, players, 0)
        assert board.snapshot() == before


class TestCapture:
    def test_kills_enemy_and_moves(self, pieces_factory) -> None:
        players, board = _setup(
            pieces_factory,
            [(8, PieceKind.PAWN, (6, 0))],
            [(9, PieceKind.PAWN, (5, 1))],
        )
        outcome = MoveResolver().resolve((6, 0), (5, 1), board, players, 0)
        victim = players[1].pieces[9]
        assert outcome is not None and outcome.captured is victim
        assert not victim.is_alive()
        assert players[0].pieces[8].position == (5, 1)

        board.regenerate([p for pl in players for p in pl.pieces.values()])
        assert board[(5, 1)].owner == 0

    def test_player_one_captures(self, pieces_factory) -> None:
        players, board = _setup(
            pieces_factory,
            [(3, PieceKind.QUEEN, (4, 4))],
            [(3, PieceKind.QUEEN, (0, 4))],
        )
        outcome = MoveResolver().resolve((0, 4), (4, 4), board, players, 1)
        assert outcome is not None and outcome.captured is players[0].pieces[3]
        assert not players[0].pieces[3].is_alive()
        assert players[1].pieces[3].is_alive()


class TestCastling:
    @pytest.mark.parametrize(
        ("owner", "row", "target_col", "rook_from", "rook_to"),
        [
            (0, 7, 6, 7, 5),
            (0, 7, 2, 0, 3),
            (1, 0, 6, 7, 5),
            (1, 0, 2, 0, 3),
        ],
    )
    def test_moves_king_and_rook(
        self, pieces_factory, owner, row, target_col, rook_from, rook_to
    ) -> None:
        specs = [
            (4, PieceKind.KING, (row, 4)),
            (0, PieceKind.ROOK, (row, 0)),
            (7, PieceKind.ROOK, (row, 7)),
        ]
        white, black = (specs, []) if owner == 0 else ([], specs)
        players, board = _setup(pieces_factory, white, black)
        outcome = MoveResolver().resolve((row, 4), (row, target_col), board, players, owner)

        pieces = players[owner].pieces
        assert pieces[4].position == (row, target_col)
        assert pieces[rook_from].position == (row, rook_to)
        other = 7 if rook_from == 0 else 0
        assert pieces[other].position == (row, other)
        assert outcome is not None and outcome.is_castle
        assert outcome.castled_rook is pieces[rook_from]
        assert outcome.rook_origin == (row, rook_from)

    def test_one_step_king_move_is_not_castle(self, pieces_factory) -> None:
        players, board = _setup(
            pieces_factory,
            [(4, PieceKind.KING, (7, 4)), (7, PieceKind.ROOK, (7, 7))],
            [],
        )
        outcome = MoveResolver().resolve((7, 4), (7, 5), board, players, 0)
        assert outcome is not None and not outcome.is_castle
        assert players[0].pieces[7].position == (7, 7)

    def test_two_column_non_king_is_not_castle(self, pieces_factory) -> None:
        players, board = _setup(
            pieces_factory,
            [(3, PieceKind.QUEEN, (7, 4)), (7, PieceKind.ROOK, (7, 7))],
            [],
        )
        MoveResolver().resolve((7, 4), (7, 6), board, players, 0)
        assert players[0].pieces[7].position == (7, 7)

    def test_missing_rook_fails_loudly(self, pieces_factory) -> None:
        players, board = _setup(pieces_factory, [(4, PieceKind.KING, (7, 4))], [])
        with pytest.raises(BoardInvariantError):
            MoveResolver().resolve((7, 4), (7, 6), board, players, 0)

    def test_wrong_corner_piece_fails_loudly(self, pieces_factory) -> None:
        players, board = _setup(
            pieces_factory,
            [(4, PieceKind.KING, (7, 4)), (6, PieceKind.KNIGHT, (7, 7))],
            [],
        )
        with pytest.raises(BoardInvariantError, match="rook"):
            MoveResolver().resolve((7, 4), (7, 6), board, players, 0)
