"""Tests for Rules: check, checkmate, stalemate, state derivation."""

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.game_state import (
    Check,
    Checkmate,
    Normal,
    PromotionRequired,
    Stalemate,
)
from chessrules.core.position import A8
from chessrules.core.rules import Rules
from chessrules.notation import board_from_placement

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4: white is in check
        board = board_from_placement(FOOLS_MATE)
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_missing_king_is_never_in_check(self) -> None:
        assert not Rules.is_in_check(Board(), Color.WHITE)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = board_from_placement(FOOLS_MATE)
        assert Rules.is_checkmate(board, Color.WHITE, CastlingRights.ALL)
        assert not Rules.is_checkmate(board, Color.BLACK, CastlingRights.ALL)

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        board = board_from_placement("R2k4/8/3K4/8/8/8/8/8")
        assert Rules.is_checkmate(board, Color.BLACK)

    def test_edge_mate_is_one_sided(self) -> None:
        board = board_from_placement("8/8/8/5K1k/8/8/8/7R")
        assert Rules.is_checkmate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.WHITE)

    def test_game_of_the_century_final_position(self) -> None:
        board = board_from_placement("1Q6/5pk1/2p3p1/1p2N2p/1b5P/1bn5/2r3P1/2K5")
        assert Rules.is_checkmate(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.BLACK)

    def test_not_checkmate_when_can_escape(self) -> None:
        # King can move out of check
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.WHITE)

    def test_not_checkmate_when_check_can_be_blocked(self) -> None:
        board = board_from_placement("4k3/4r3/8/8/8/8/3B4/3QKQ2")
        assert not Rules.is_checkmate(board, Color.WHITE)


class TestStalemate:
    def test_king_trapped(self) -> None:
        # Black king on h8, white K on f6, white Q on g6
        board = board_from_placement("7k/8/5KQ1/8/8/8/8/8")
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)

    def test_not_stalemate_when_has_moves(self) -> None:
        board = board_from_placement("7k/8/5K2/8/8/8/8/8")
        assert not Rules.is_stalemate(board, Color.BLACK)

    def test_checkmate_is_not_stalemate(self) -> None:
        board = board_from_placement(FOOLS_MATE)
        assert not Rules.is_stalemate(board, Color.WHITE)


class TestDeriveState:
    def test_normal(self) -> None:
        state = Rules.derive_state(
            Board.initial(), Color.WHITE, CastlingRights.ALL, None
        )
        assert state == Normal()

    def test_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.derive_state(board, Color.WHITE, CastlingRights.NONE, None) == (
            Check(Color.WHITE)
        )

    def test_checkmate(self) -> None:
        board = board_from_placement(FOOLS_MATE)
        state = Rules.derive_state(board, Color.WHITE, CastlingRights.ALL, None)
        assert state == Checkmate(Color.WHITE)
        assert state.is_terminal

    def test_stalemate(self) -> None:
        board = board_from_placement("7k/8/5KQ1/8/8/8/8/8")
        state = Rules.derive_state(board, Color.BLACK, CastlingRights.NONE, None)
        assert state == Stalemate()
        assert state.is_terminal

    def test_pending_promotion_takes_precedence(self) -> None:
        board = board_from_placement("P6k/8/8/8/8/8/8/K7")
        state = Rules.derive_state(board, Color.WHITE, CastlingRights.NONE, None, A8)
        assert state == PromotionRequired(A8)
        assert not state.is_terminal
