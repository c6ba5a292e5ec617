"""Tests for FEN parsing and serialization."""

import pytest

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.errors import ChessError, FenParseError, ParseError
from chessrules.core.game_state import Checkmate, Normal
from chessrules.core.piece import Piece
from chessrules.core.position import D6, E1, E2, E4, E8
from chessrules.notation import (
    STARTING_FEN,
    board_from_placement,
    board_to_placement,
    game_from_fen,
    game_to_fen,
)


class TestFenParsing:
    def test_starting_side(self) -> None:
        game = game_from_fen(STARTING_FEN)
        assert game.turn == Color.WHITE

    def test_starting_castling(self) -> None:
        game = game_from_fen(STARTING_FEN)
        assert game.castling_rights == CastlingRights.ALL

    def test_starting_en_passant(self) -> None:
        game = game_from_fen(STARTING_FEN)
        assert game.en_passant_target is None

    def test_starting_pieces(self) -> None:
        game = game_from_fen(STARTING_FEN)
        assert game.get_tile(E1) == Piece(Color.WHITE, PieceType.KING)
        assert game.get_tile(E8) == Piece(Color.BLACK, PieceType.KING)

    def test_black_to_move_with_partial_castling(self) -> None:
        game = game_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 1")
        assert game.turn == Color.BLACK
        assert game.castling_rights == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 2"
        game = game_from_fen(fen)
        assert game.en_passant_target == D6

    def test_clocks_are_optional(self) -> None:
        game = game_from_fen("7k/8/8/8/8/8/8/K7 w - -")
        assert game.state == Normal()

    def test_state_is_derived(self) -> None:
        fen = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        assert game_from_fen(fen).state == Checkmate(Color.WHITE)


class TestFenSerialization:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1",
            "r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 1",
            "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 1",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        assert game_to_fen(game_from_fen(fen)) == fen

    def test_clocks_come_from_caller(self) -> None:
        fen = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"
        assert game_to_fen(game_from_fen(fen), 1, 8) == fen

    def test_after_double_push(self) -> None:
        game = game_from_fen(STARTING_FEN)
        game.move_piece(E2, E4)
        assert game_to_fen(game) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )

    def test_placement_round_trip(self) -> None:
        placement = "8/8/8/KPp4r/8/8/8/7k"
        assert board_to_placement(board_from_placement(placement)) == placement


class TestFenErrors:
    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8/8",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",
            "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/0/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnx/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnrr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbn/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkx - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KK - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e9 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e3 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - -1 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - x 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 extra",
        ],
    )
    def test_invalid_fen(self, fen: str) -> None:
        with pytest.raises(FenParseError):
            game_from_fen(fen)

    def test_error_hierarchy(self) -> None:
        with pytest.raises(FenParseError) as info:
            game_from_fen("8/8/8 w - -")
        assert isinstance(info.value, ParseError)
        assert isinstance(info.value, ChessError)
        assert "8 ranks" in info.value.reason

    def test_bad_en_passant_reason(self) -> None:
        with pytest.raises(FenParseError, match="en-passant"):
            game_from_fen("8/8/8/8/8/8/8/K6k w - e9")
