"""High-level chess rules: check, checkmate, stalemate, state derivation."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.game_state import (
    Check,
    Checkmate,
    GameState,
    Normal,
    PromotionRequired,
    Stalemate,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a board snapshot."""

    # Product policy: stalemate is the only draw. Repetition, the fifty-move
    # rule and insufficient material are not detected.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(
        board: Board,
        color: Color,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Position | None = None,
    ) -> bool:
        gen = MoveGenerator(board, castling, en_passant)
        if not gen.is_in_check(color):
            return False
        return not gen.has_legal_moves(color)

    @staticmethod
    def is_stalemate(
        board: Board,
        color: Color,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Position | None = None,
    ) -> bool:
        gen = MoveGenerator(board, castling, en_passant)
        if gen.is_in_check(color):
            return False
        return not gen.has_legal_moves(color)

    @staticmethod
    def derive_state(
        board: Board,
        turn: Color,
        castling: CastlingRights,
        en_passant: Position | None,
        pending_promotion: Position | None = None,
    ) -> GameState:
        """Status of the game for *turn* to move.

        A pending promotion takes precedence: the move that produced it is
        not finished, so check and mate are only evaluated afterwards.
        """
        if pending_promotion is not None:
            return PromotionRequired(pending_promotion)

        if Rules.is_checkmate(board, turn, castling, en_passant):
            return Checkmate(turn)
        if Rules.is_stalemate(board, turn, castling, en_passant):
            return Stalemate()
        return Check(turn) if Rules.is_in_check(board, turn) else Normal()
