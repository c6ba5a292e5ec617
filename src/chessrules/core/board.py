"""Board: the 64 tiles, addressed by Position."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece, Tile
from chessrules.core.position import ALL_POSITIONS, Position

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square storage.

    Pure storage: no move validation happens at this layer and every
    accessor trusts its caller.
    """

    __slots__ = ("_tiles",)

    def __init__(self) -> None:
        self._tiles: list[Tile] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Tile:
        return self._tiles[pos.index]

    def __setitem__(self, pos: Position, tile: Tile) -> None:
        self._tiles[pos.index] = tile

    def get_tile(self, pos: Position) -> Tile:
        """Piece on *pos*, or ``None`` if the square is empty."""
        return self._tiles[pos.index]

    def set_tile(self, pos: Position, piece: Piece) -> None:
        self._tiles[pos.index] = piece

    def remove_tile(self, pos: Position) -> Tile:
        """Empty *pos* and return what stood there."""
        existing = self._tiles[pos.index]
        self._tiles[pos.index] = None
        return existing

    def set_or_remove_tile(self, pos: Position, tile: Tile) -> None:
        self._tiles[pos.index] = tile

    def is_empty(self, pos: Position) -> bool:
        return self._tiles[pos.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """Yield ``(position, piece)`` for every occupied square, a1 first."""
        for pos, piece in zip(ALL_POSITIONS, self._tiles):
            if piece is not None and (color is None or piece.color == color):
                yield pos, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Position]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            pos
            for pos, piece in self.occupied(color)
            if piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Position]:
        """All squares occupied by *color*."""
        return [pos for pos, _ in self.occupied(color)]

    def king_position(self, color: Color) -> Position | None:
        """Square of *color*'s king, or ``None`` if it has none."""
        king = Piece(color, PieceType.KING)
        for pos, piece in zip(ALL_POSITIONS, self._tiles):
            if piece == king:
                return pos
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Independent copy; mutating it never affects this board."""
        b = Board()
        b._tiles = self._tiles.copy()
        return b

    def clear(self) -> None:
        self._tiles = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[Position(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Position(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[Position(f, 0)] = Piece(Color.WHITE, pt)
            b[Position(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Position(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
