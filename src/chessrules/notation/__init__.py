"""Notation package: FEN parsing and serialization on top of the core."""

from chessrules.notation.fen import (
    STARTING_FEN,
    board_from_placement,
    board_to_placement,
    game_from_fen,
    game_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_from_placement",
    "board_to_placement",
    "game_from_fen",
    "game_to_fen",
]
