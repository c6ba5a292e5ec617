"""GameState - the single derived status of a game.

Exactly one variant is active at a time.  It is recomputed from the board
and side to move after every committed mutation, never stored as a set of
independent flags::

    match game.state:
        case Checkmate(color):
            print(f"{color} is mated")
        case PromotionRequired(position):
            game.promote(PieceType.QUEEN)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from chessrules.core.enums import Color
from chessrules.core.position import Position


@dataclass(frozen=True, slots=True)
class Normal:
    """Side to move is not in check and has legal moves."""

    is_terminal: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Check:
    """*color* (the side to move) is in check but can respond."""

    color: Color
    is_terminal: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Checkmate:
    """*color* is in check with no legal move. Terminal."""

    color: Color
    is_terminal: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Stalemate:
    """Side to move is not in check and has no legal move. Terminal."""

    is_terminal: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class PromotionRequired:
    """The pawn on *position* must be promoted before play continues."""

    position: Position
    is_terminal: ClassVar[bool] = False


GameState: TypeAlias = Normal | Check | Checkmate | Stalemate | PromotionRequired
