"""Special-move resolution: castling, en passant, promotion bookkeeping.

These helpers run both on the live board when a move is committed and on
scratch copies inside the legality filter, so applying a move always
carries the same side effects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.piece import Piece, Tile
from chessrules.core.position import A1, A8, H1, H8, Position

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CastlingMove:
    """Geometry of one castling option."""

    flag: MoveFlag
    right: CastlingRights
    king_from: Position
    king_to: Position
    rook_from: Position
    rook_to: Position
    # Squares that must be empty, and the one the king crosses.
    between: tuple[Position, ...]
    transit: Position


def _castling_moves_for(
    color: Color, right_ks: CastlingRights, right_qs: CastlingRights
) -> tuple[CastlingMove, CastlingMove]:
    r = color.back_rank
    return (
        CastlingMove(
            flag=MoveFlag.CASTLE_KINGSIDE,
            right=right_ks,
            king_from=Position(4, r),
            king_to=Position(6, r),
            rook_from=Position(7, r),
            rook_to=Position(5, r),
            between=(Position(5, r), Position(6, r)),
            transit=Position(5, r),
        ),
        CastlingMove(
            flag=MoveFlag.CASTLE_QUEENSIDE,
            right=right_qs,
            king_from=Position(4, r),
            king_to=Position(2, r),
            rook_from=Position(0, r),
            rook_to=Position(3, r),
            between=(Position(1, r), Position(2, r), Position(3, r)),
            transit=Position(3, r),
        ),
    )


CASTLING_MOVES: dict[Color, tuple[CastlingMove, CastlingMove]] = {
    Color.WHITE: _castling_moves_for(
        Color.WHITE, CastlingRights.WHITE_KINGSIDE, CastlingRights.WHITE_QUEENSIDE
    ),
    Color.BLACK: _castling_moves_for(
        Color.BLACK, CastlingRights.BLACK_KINGSIDE, CastlingRights.BLACK_QUEENSIDE
    ),
}

_ROOK_CORNERS: dict[Position, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}


def castling_move_for(color: Color, flag: MoveFlag) -> CastlingMove:
    kingside, queenside = CASTLING_MOVES[color]
    if flag == MoveFlag.CASTLE_KINGSIDE:
        return kingside
    if flag == MoveFlag.CASTLE_QUEENSIDE:
        return queenside
    raise ValueError(f"Not a castling flag: {flag!r}")


# ── Classification ───────────────────────────────────────────────────────────


def is_promotion(piece: Piece, to_pos: Position) -> bool:
    """Whether *piece* landing on *to_pos* must be promoted."""
    return (
        piece.piece_type == PieceType.PAWN
        and to_pos.rank == piece.color.promotion_rank
    )


def promotion_square(board: Board, to_pos: Position) -> Position | None:
    """*to_pos* if it now holds a pawn on its last rank, else ``None``."""
    piece = board[to_pos]
    if piece is not None and is_promotion(piece, to_pos):
        return to_pos
    return None


def classify_move(
    board: Board,
    from_pos: Position,
    to_pos: Position,
    en_passant: Position | None,
) -> MoveFlag:
    """Special-move family of a pseudo-legal move on *board*."""
    piece = board[from_pos]
    assert piece is not None, f"No piece on {from_pos}"

    if piece.piece_type == PieceType.KING:
        delta = to_pos.file - from_pos.file
        if delta == 2:
            return MoveFlag.CASTLE_KINGSIDE
        if delta == -2:
            return MoveFlag.CASTLE_QUEENSIDE
        return MoveFlag.NORMAL

    if piece.piece_type == PieceType.PAWN:
        if is_promotion(piece, to_pos):
            return MoveFlag.PROMOTION
        if abs(to_pos.rank - from_pos.rank) == 2:
            return MoveFlag.DOUBLE_PAWN
        if (
            to_pos.file != from_pos.file
            and to_pos == en_passant
            and board.is_empty(to_pos)
        ):
            return MoveFlag.EN_PASSANT

    return MoveFlag.NORMAL


# ── Application ──────────────────────────────────────────────────────────────


def en_passant_capture_square(from_pos: Position, to_pos: Position) -> Position:
    """Square of the pawn removed by an en passant capture."""
    return Position(to_pos.file, from_pos.rank)


def apply_move(
    board: Board,
    from_pos: Position,
    to_pos: Position,
    flag: MoveFlag = MoveFlag.NORMAL,
) -> Tile:
    """Move the piece on *from_pos* to *to_pos* with its side effects.

    Returns the captured piece, if any.  A promoting pawn is left on the
    last rank; replacing it is a separate step.
    """
    piece = board.remove_tile(from_pos)
    assert piece is not None, f"No piece on {from_pos}"

    captured = board[to_pos]
    if flag == MoveFlag.EN_PASSANT:
        captured = board.remove_tile(en_passant_capture_square(from_pos, to_pos))

    board[to_pos] = piece

    if flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE):
        castle = castling_move_for(piece.color, flag)
        rook = board.remove_tile(castle.rook_from)
        assert rook is not None, f"No rook on {castle.rook_from}"
        board[castle.rook_to] = rook

    return captured


def next_en_passant(
    from_pos: Position, to_pos: Position, flag: MoveFlag
) -> Position | None:
    """En passant target after a move; only a double push sets one."""
    if flag != MoveFlag.DOUBLE_PAWN:
        return None
    return Position(from_pos.file, (from_pos.rank + to_pos.rank) // 2)


def update_castling_rights(
    rights: CastlingRights,
    from_pos: Position,
    to_pos: Position,
    piece: Piece,
) -> CastlingRights:
    """Rights left after *piece* moved from *from_pos* to *to_pos*.

    A king move clears both of its color's rights; touching a rook corner
    (moving from it or capturing on it) clears that corner's right.
    """
    next_rights = rights
    if piece.piece_type == PieceType.KING:
        next_rights &= ~CastlingRights.for_color(piece.color)

    for sq in (from_pos, to_pos):
        corner = _ROOK_CORNERS.get(sq)
        if corner is not None:
            next_rights &= ~corner

    if next_rights != rights:
        _LOGGER.debug("Castling rights %s -> %s", rights, next_rights)
    return next_rights
