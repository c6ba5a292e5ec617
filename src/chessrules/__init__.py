"""chessrules - a chess rules engine.

Legal move enumeration, move application with castling, en passant and
deferred promotion, and an explicit game-state machine.

Quick start::

    from chessrules import Game, PieceType, Position, PromotionRequired

    game = Game()
    print(sorted(game.legal_moves(Position.parse("b1"))))  # a3, c3
    game.move_piece(Position.parse("e2"), Position.parse("e4"))
    if isinstance(game.state, PromotionRequired):
        game.promote(PieceType.QUEEN)
"""

from chessrules.core import (
    PROMOTION_TYPES,
    Board,
    CastlingRights,
    Check,
    Checkmate,
    ChessError,
    Color,
    FenParseError,
    GameState,
    InvalidMoveError,
    MoveError,
    MoveFlag,
    NoTileError,
    Normal,
    NotCurrentTurnError,
    ParseError,
    Piece,
    PieceType,
    Position,
    PromotionPendingError,
    PromotionRequired,
    Stalemate,
    Tile,
)
from chessrules.game import Game, GameEvents, MoveResult
from chessrules.notation import STARTING_FEN, game_from_fen, game_to_fen

__version__ = "0.1.0"

__all__ = [
    "PROMOTION_TYPES",
    "STARTING_FEN",
    "Board",
    "CastlingRights",
    "Check",
    "Checkmate",
    "ChessError",
    "Color",
    "FenParseError",
    "Game",
    "GameEvents",
    "GameState",
    "InvalidMoveError",
    "MoveError",
    "MoveFlag",
    "MoveResult",
    "NoTileError",
    "Normal",
    "NotCurrentTurnError",
    "ParseError",
    "Piece",
    "PieceType",
    "Position",
    "PromotionPendingError",
    "PromotionRequired",
    "Stalemate",
    "Tile",
    "game_from_fen",
    "game_to_fen",
]
