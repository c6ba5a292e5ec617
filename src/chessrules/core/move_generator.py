"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.special_moves import CASTLING_MOVES, apply_move, classify_move

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}
_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


class MoveGenerator:
    """Generates moves for the pieces on a :class:`Board`.

    The generator never mutates the board it was given: king-safety checks
    run on independent copies.  Castling rights and the en passant target
    are passed in because they are not visible on the board itself.
    """

    __slots__ = ("_board", "_castling", "_en_passant")

    def __init__(
        self,
        board: Board,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Position | None = None,
    ) -> None:
        self._board = board
        self._castling = castling
        self._en_passant = en_passant

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, pos: Position) -> set[Position]:
        """Destinations of the piece on *pos* that keep its king safe."""
        piece = self._board[pos]
        if piece is None:
            return set()
        return {
            dest
            for dest in self.pseudo_legal_moves(pos)
            if self._is_king_safe_after(pos, dest, piece.color)
        }

    def all_legal_moves(self, color: Color) -> dict[Position, set[Position]]:
        """Legal destinations for every piece of *color* that can move."""
        moves: dict[Position, set[Position]] = {}
        for pos in self._board.all_pieces(color):
            dests = self.legal_moves(pos)
            if dests:
                moves[pos] = dests
        return moves

    def has_legal_moves(self, color: Color) -> bool:
        for pos in self._board.all_pieces(color):
            for dest in self.pseudo_legal_moves(pos):
                if self._is_king_safe_after(pos, dest, color):
                    return True
        return False

    def pseudo_legal_moves(self, pos: Position) -> set[Position]:
        """Destinations obeying movement shape and blocking, ignoring check.

        An empty square yields an empty set.
        """
        piece = self._board[pos]
        if piece is None:
            return set()

        moves: set[Position] = set()
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(pos, piece.color, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_steps(pos, piece.color, KNIGHT_OFFSETS, moves)
        elif pt == PieceType.KING:
            self._gen_steps(pos, piece.color, KING_OFFSETS, moves)
            self._gen_castling(pos, piece.color, moves)
        else:
            self._gen_sliding(pos, piece.color, _SLIDER_DIRS[pt], moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A side without a king on the board is never in check.
        """
        king_pos = self._board.king_position(color)
        if king_pos is None:
            return False
        return self.is_square_attacked(king_pos, color.opposite)

    def is_square_attacked(self, pos: Position, by_color: Color) -> bool:
        """Is *pos* attacked by any piece of *by_color*?

        Walks outward from *pos* for each piece shape instead of generating
        every attacker's moves.  Pawns attack their forward diagonals
        whether or not the square is occupied.
        """
        board = self._board

        # A pawn of by_color attacks pos from one rank "behind" it.
        for df in (-1, 1):
            origin = pos.offset(df, -by_color.forward)
            if origin is not None and _is(board[origin], by_color, PieceType.PAWN):
                return True

        for df, dr in KNIGHT_OFFSETS:
            origin = pos.offset(df, dr)
            if origin is not None and _is(board[origin], by_color, PieceType.KNIGHT):
                return True

        for df, dr in KING_OFFSETS:
            origin = pos.offset(df, dr)
            if origin is not None and _is(board[origin], by_color, PieceType.KING):
                return True

        for dirs, attackers in (
            (BISHOP_DIRS, _DIAGONAL_ATTACKERS),
            (ROOK_DIRS, _ORTHOGONAL_ATTACKERS),
        ):
            for df, dr in dirs:
                current = pos.offset(df, dr)
                while current is not None:
                    piece = board[current]
                    if piece is not None:
                        if piece.color == by_color and piece.piece_type in attackers:
                            return True
                        break
                    current = current.offset(df, dr)

        return False

    # -- Legality filter (private) -----------------------------------------

    def _is_king_safe_after(
        self, from_pos: Position, to_pos: Position, color: Color
    ) -> bool:
        scratch = self._board.copy()
        flag = classify_move(self._board, from_pos, to_pos, self._en_passant)
        apply_move(scratch, from_pos, to_pos, flag)
        return not MoveGenerator(scratch).is_in_check(color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, pos: Position, color: Color, moves: set[Position]) -> None:
        board = self._board
        forward = color.forward

        one_step = pos.offset(0, forward)
        if one_step is not None and board.is_empty(one_step):
            moves.add(one_step)
            if pos.rank == color.pawn_rank:
                two_step = one_step.offset(0, forward)
                if two_step is not None and board.is_empty(two_step):
                    moves.add(two_step)

        for df in (-1, 1):
            cap_pos = pos.offset(df, forward)
            if cap_pos is None:
                continue
            target = board[cap_pos]
            if target is not None:
                if target.color != color:
                    moves.add(cap_pos)
            elif cap_pos == self._en_passant:
                moves.add(cap_pos)

    def _gen_steps(
        self,
        pos: Position,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: set[Position],
    ) -> None:
        board = self._board
        for df, dr in offsets:
            to_pos = pos.offset(df, dr)
            if to_pos is None:
                continue
            target = board[to_pos]
            if target is None or target.color != color:
                moves.add(to_pos)

    def _gen_sliding(
        self,
        pos: Position,
        color: Color,
        dirs: tuple[tuple[int, int], ...],
        moves: set[Position],
    ) -> None:
        board = self._board
        for df, dr in dirs:
            to_pos = pos.offset(df, dr)
            while to_pos is not None:
                target = board[to_pos]
                if target is None:
                    moves.add(to_pos)
                    to_pos = to_pos.offset(df, dr)
                    continue
                if target.color != color:
                    moves.add(to_pos)
                break

    def _gen_castling(
        self, king_pos: Position, color: Color, moves: set[Position]
    ) -> None:
        board = self._board
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)
        in_check: bool | None = None

        for castle in CASTLING_MOVES[color]:
            if not self._castling & castle.right:
                continue
            if king_pos != castle.king_from or board[castle.rook_from] != rook:
                continue
            if not all(board.is_empty(sq) for sq in castle.between):
                continue
            if in_check is None:
                in_check = self.is_square_attacked(king_pos, opponent)
            if in_check:
                return
            if self.is_square_attacked(castle.transit, opponent):
                continue
            if self.is_square_attacked(castle.king_to, opponent):
                continue
            moves.add(castle.king_to)


def _is(piece: Piece | None, color: Color, piece_type: PieceType) -> bool:
    return piece is not None and piece.is_a(color, piece_type)
