"""Game management layer - the move-applying state machine.

Quick start::

    from chessrules.game import Game
    from chessrules.core import Position

    game = Game()
    game.move_piece(Position.parse("e2"), Position.parse("e4"))
    print(game.turn, game.state)
"""

from chessrules.game.game import Game, GameEvents, MoveResult

__all__ = [
    "Game",
    "GameEvents",
    "MoveResult",
]
