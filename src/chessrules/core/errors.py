"""Recoverable error hierarchy.

Everything here derives from :class:`ChessError` and describes an expected
condition the caller is meant to branch on.  Contract violations (an
out-of-range :class:`~chessrules.core.position.Position`, a promotion
requested when none is pending) raise built-in ``ValueError`` /
``RuntimeError`` instead and are not part of this tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.position import Position


class ChessError(Exception):
    """Base class for recoverable rules-engine errors."""


# ── Parsing ──────────────────────────────────────────────────────────────────


class ParseError(ChessError):
    """Text could not be turned into a domain value."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason


class FenParseError(ParseError):
    """Malformed FEN position description."""


# ── Move application ─────────────────────────────────────────────────────────


class MoveError(ChessError):
    """A move or move query was rejected; the game is unchanged."""


class NoTileError(MoveError):
    """There is no piece on the requested square."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"No piece on {position}")
        self.position = position


class NotCurrentTurnError(MoveError):
    """The piece on the requested square belongs to the side not to move."""

    def __init__(self, position: Position, turn: Color) -> None:
        super().__init__(f"Piece on {position} cannot move: it is {turn}'s turn")
        self.position = position
        self.turn = turn


class InvalidMoveError(MoveError):
    """The destination is not among the legal moves of the piece."""

    def __init__(self, from_pos: Position, to_pos: Position) -> None:
        super().__init__(f"Illegal move {from_pos}{to_pos}")
        self.from_pos = from_pos
        self.to_pos = to_pos


class PromotionPendingError(MoveError):
    """A pawn is waiting to be promoted; no other move may be made."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"Promotion pending on {position}")
        self.position = position
