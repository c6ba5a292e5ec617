"""Piece value object and the ``Tile`` square content alias."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessrules.core.enums import Color, PieceType

# Indexed by ``PieceType - 1``: pawn, knight, bishop, rook, queen, king.
_LETTERS = "pnbrqk"
_GLYPHS: dict[Color, str] = {
    Color.WHITE: "♙♘♗♖♕♔",
    Color.BLACK: "♟♞♝♜♛♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A (color, type) pair with no further identity.

    Two white queens compare and hash equal; the board square is what
    tells them apart.
    """

    color: Color
    piece_type: PieceType

    def is_a(self, color: Color, piece_type: PieceType) -> bool:
        return self.color == color and self.piece_type == piece_type

    # ── Text forms ───────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        letter = _LETTERS[self.piece_type - 1]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a FEN letter, e.g. ``'N'`` is a white knight."""
        index = _LETTERS.find(char.lower()) if len(char) == 1 else -1
        if index < 0:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(index + 1))

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        return _GLYPHS[self.color][self.piece_type - 1]


# Content of a single square; ``None`` is an empty square.
Tile: TypeAlias = Piece | None
