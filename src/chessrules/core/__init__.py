"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, MoveGenerator, Position

    board = Board.initial()
    gen = MoveGenerator(board)
    print(sorted(gen.legal_moves(Position.parse("b1"))))
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    MoveFlag,
    PieceType,
)
from chessrules.core.errors import (
    ChessError,
    FenParseError,
    InvalidMoveError,
    MoveError,
    NoTileError,
    NotCurrentTurnError,
    ParseError,
    PromotionPendingError,
)
from chessrules.core.game_state import (
    Check,
    Checkmate,
    GameState,
    Normal,
    PromotionRequired,
    Stalemate,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece, Tile
from chessrules.core.position import ALL_POSITIONS, Position
from chessrules.core.rules import Rules

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "PieceType",
    "PROMOTION_TYPES",
    # Errors
    "ChessError",
    "FenParseError",
    "InvalidMoveError",
    "MoveError",
    "NoTileError",
    "NotCurrentTurnError",
    "ParseError",
    "PromotionPendingError",
    # Game state variants
    "Check",
    "Checkmate",
    "GameState",
    "Normal",
    "PromotionRequired",
    "Stalemate",
    # Domain objects
    "ALL_POSITIONS",
    "Board",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "Tile",
]
