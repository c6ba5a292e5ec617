"""FEN parsing and serialization.

This module sits outside the core: it builds games through
:meth:`Game.from_setup` and reads them back through the public accessors.
The core does not track the halfmove clock or fullmove number, so they are
validated on input and written back from the caller's arguments.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.errors import FenParseError, ParseError
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.game.game import Game

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# Rank index an en passant target must sit on, by side to move.
_EP_RANK: dict[Color, int] = {Color.WHITE: 5, Color.BLACK: 2}


# ── Full FEN ─────────────────────────────────────────────────────────────────


def game_from_fen(fen: str) -> Game:
    """Parse a FEN string into a :class:`Game`.

    The clock fields are optional; when present they must be valid
    numbers but are otherwise ignored.

    Raises:
        FenParseError: any field is malformed.
    """
    fields = fen.split()
    if not 4 <= len(fields) <= 6:
        raise FenParseError(fen, f"expected 4-6 fields, got {len(fields)}")

    board = board_from_placement(fields[0])

    turn = _SIDES.get(fields[1])
    if turn is None:
        raise FenParseError(fen, f"invalid side-to-move field {fields[1]!r}")

    castling = _parse_castling(fen, fields[2])
    en_passant = _parse_en_passant(fen, fields[3], turn)

    for text, label, minimum in zip(
        fields[4:], ("halfmove clock", "fullmove number"), (0, 1)
    ):
        _parse_counter(fen, text, label, minimum)

    return Game.from_setup(board, turn, castling, en_passant)


def game_to_fen(game: Game, halfmove_clock: int = 0, fullmove_number: int = 1) -> str:
    """Serialize *game* to FEN, using the given clock values."""
    rights = game.castling_rights
    castling = "".join(ch for ch, right in _CASTLING_CHARS.items() if rights & right)
    ep = game.en_passant_target
    return " ".join(
        (
            board_to_placement(game.board),
            "w" if game.turn == Color.WHITE else "b",
            castling or "-",
            ep.name if ep is not None else "-",
            str(halfmove_clock),
            str(fullmove_number),
        )
    )


# ── Piece placement ──────────────────────────────────────────────────────────


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field (first FEN field), rank 8 first."""
    rows = placement.split("/")
    if len(rows) != 8:
        raise FenParseError(placement, "board must contain 8 ranks")

    board = Board()
    for rank, row in zip(range(7, -1, -1), rows):
        file = 0
        for ch in row:
            if file >= 8:
                raise FenParseError(placement, f"rank {rank + 1} is too wide")
            if ch.isascii() and ch.isdigit():
                if ch in "09":
                    raise FenParseError(placement, f"invalid digit {ch!r}")
                file += int(ch)
                continue
            try:
                board[Position(file, rank)] = Piece.from_char(ch)
            except ValueError:
                raise FenParseError(placement, f"invalid piece {ch!r}") from None
            file += 1
        if file != 8:
            raise FenParseError(placement, f"rank {rank + 1} does not cover 8 files")
    return board


def board_to_placement(board: Board) -> str:
    """Serialize *board* to the piece-placement field."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        row: list[str] = []
        gap = 0
        for file in range(8):
            piece = board[Position(file, rank)]
            if piece is None:
                gap += 1
                continue
            if gap:
                row.append(str(gap))
                gap = 0
            row.append(str(piece))
        if gap:
            row.append(str(gap))
        rows.append("".join(row))
    return "/".join(rows)


# ── Field helpers ────────────────────────────────────────────────────────────


def _parse_castling(fen: str, text: str) -> CastlingRights:
    if text == "-":
        return CastlingRights.NONE
    rights = CastlingRights.NONE
    for ch in text:
        right = _CASTLING_CHARS.get(ch)
        if right is None or rights & right:
            raise FenParseError(fen, f"invalid castling field {text!r}")
        rights |= right
    return rights


def _parse_en_passant(fen: str, text: str, turn: Color) -> Position | None:
    if text == "-":
        return None
    try:
        target = Position.parse(text)
    except ParseError as exc:
        raise FenParseError(fen, f"invalid en-passant square: {exc.reason}") from exc
    if target.rank != _EP_RANK[turn]:
        raise FenParseError(fen, f"en-passant square {text!r} impossible for {turn}")
    return target


def _parse_counter(fen: str, text: str, label: str, minimum: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise FenParseError(fen, f"invalid {label} {text!r}") from None
    if value < minimum:
        raise FenParseError(fen, f"{label} must be at least {minimum}, got {value}")
    return value
