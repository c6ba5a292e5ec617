"""Position - a validated board coordinate.

Coordinates are zero-based: file 0 is the a-file, rank 0 is the first rank.
Square indexes follow Little-Endian Rank-File mapping::

    a1=0, b1=1, ..., h1=7
    a2=8, ...
    a8=56, ..., h8=63

Direct construction with out-of-range values is a programming error and
raises ``ValueError``.  :meth:`Position.parse` is the fallible path for
user-supplied text and raises :class:`~chessrules.core.errors.ParseError`.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import ParseError

_FILE_CHARS = "abcdefgh"
_RANK_CHARS = "12345678"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (file, rank) pair, always on the board.

    Ordered by square index, so rank-major: a1 < h1 < a2 < h8.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.file, int) or not 0 <= self.file <= 7:
            raise ValueError(f"file must be in the range [0, 7], got {self.file!r}")
        if not isinstance(self.rank, int) or not 0 <= self.rank <= 7:
            raise ValueError(f"rank must be in the range [0, 7], got {self.rank!r}")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Position:
        """Parse a square name such as ``"e4"``."""
        if len(text) < 2:
            raise ParseError(text, "too short")
        if len(text) > 2:
            raise ParseError(text, "too long")
        file_char, rank_char = text
        if file_char not in _FILE_CHARS:
            raise ParseError(text, "file must be a letter a-h")
        if rank_char not in _RANK_CHARS:
            raise ParseError(text, "rank must be a digit 1-8")
        return cls(_FILE_CHARS.index(file_char), _RANK_CHARS.index(rank_char))

    @classmethod
    def from_index(cls, index: int) -> Position:
        """Inverse of :attr:`index`."""
        if not 0 <= index < 64:
            raise ValueError(f"square index must be in [0, 63], got {index!r}")
        return cls(index & 7, index >> 3)

    # ── Arithmetic ───────────────────────────────────────────────────────

    def offset(self, delta_file: int, delta_rank: int) -> Position | None:
        """Shifted position, or ``None`` when the result is off the board."""
        file = self.file + delta_file
        rank = self.rank + delta_rank
        if not (0 <= file < 8 and 0 <= rank < 8):
            return None
        return Position(file, rank)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Square index 0-63 (a1=0, h8=63)."""
        return self.rank * 8 + self.file

    @property
    def file_char(self) -> str:
        return _FILE_CHARS[self.file]

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``'b4'``."""
        return f"{self.file_char}{self.rank + 1}"

    def __str__(self) -> str:
        return self.name

    # ── Ordering ─────────────────────────────────────────────────────────

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.index < other.index

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.index <= other.index

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.index > other.index

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.index >= other.index


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(f, 7) for f in range(8))

ALL_POSITIONS: tuple[Position, ...] = tuple(Position.from_index(i) for i in range(64))
