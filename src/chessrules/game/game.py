"""Game - the orchestrator and state machine of a single chess game.

Owns the board, side to move, castling rights, en passant target and any
pending promotion.  Every public mutation is atomic: it is either fully
applied or rejected with a :class:`~chessrules.core.errors.MoveError` and
no visible change.

Thread-safety: none.  One ``Game`` per active game; callers sharing an
instance across threads must serialise access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    MoveFlag,
    PieceType,
)
from chessrules.core.errors import (
    InvalidMoveError,
    NoTileError,
    NotCurrentTurnError,
    PromotionPendingError,
)
from chessrules.core.game_state import GameState
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece, Tile
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.special_moves import (
    apply_move,
    classify_move,
    next_en_passant,
    promotion_square,
    update_castling_rights,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Position, Position, "MoveResult"], None]  # from, to, result
StateCallback = Callable[[GameState], None]
PromotionCallback = Callable[[Position], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a committed :meth:`Game.move_piece`."""

    flag: MoveFlag
    captured: Tile
    state: GameState


# ── Game ─────────────────────────────────────────────────────────────────────


class Game:
    """A chess game: board + turn + castling + en passant + promotion.

    ``Game()`` starts from the standard setup.  Position-description
    producers (such as the FEN adapter) use :meth:`from_setup`.
    """

    __slots__ = (
        "_board",
        "_turn",
        "_castling",
        "_en_passant",
        "_pending_promotion",
        "_state",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Position | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._turn = turn
        self._castling = castling
        self._en_passant = en_passant
        self._pending_promotion: Position | None = None
        self.events = GameEvents()
        self._state: GameState = self._derive_state()

    @classmethod
    def from_setup(
        cls,
        board: Board,
        turn: Color,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Position | None = None,
    ) -> Game:
        """Build a game from an arbitrary position description.

        The board is copied; the caller keeps ownership of its instance.
        """
        for color in Color:
            if board.king_position(color) is None:
                _LOGGER.warning("Position set up without a %s king", color)
        game = cls(board.copy(), turn, castling, en_passant)
        _LOGGER.debug("Game set up: %s to move, state %s", turn, game.state)
        return game

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """The live board, for inspection or test setup. Unchecked."""
        return self._board

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def castling_rights(self) -> CastlingRights:
        return self._castling

    @property
    def en_passant_target(self) -> Position | None:
        return self._en_passant

    @property
    def pending_promotion(self) -> Position | None:
        return self._pending_promotion

    @property
    def is_over(self) -> bool:
        return self._state.is_terminal

    # ── Direct board access ──────────────────────────────────────────────

    def get_tile(self, pos: Position) -> Tile:
        return self._board.get_tile(pos)

    def set_tile(self, pos: Position, piece: Piece) -> None:
        """Place *piece* without validation; see :meth:`refresh_state`."""
        self._board.set_tile(pos, piece)

    def remove_tile(self, pos: Position) -> Tile:
        """Empty *pos* without validation; see :meth:`refresh_state`."""
        return self._board.remove_tile(pos)

    def refresh_state(self) -> GameState:
        """Re-derive :attr:`state` after direct board edits."""
        self._set_state(self._derive_state())
        return self._state

    # ── Move queries ─────────────────────────────────────────────────────

    def legal_moves(self, pos: Position) -> set[Position]:
        """Legal destinations for the piece on *pos*.

        Raises:
            NoTileError: *pos* is empty.
            NotCurrentTurnError: the piece belongs to the side not to move.
            PromotionPendingError: a promotion must be completed first.
        """
        piece = self._board[pos]
        if piece is None:
            raise NoTileError(pos)
        if piece.color != self._turn:
            raise NotCurrentTurnError(pos, self._turn)
        if self._pending_promotion is not None:
            raise PromotionPendingError(self._pending_promotion)
        return self._generator().legal_moves(pos)

    def all_legal_moves(self) -> dict[Position, set[Position]]:
        """Legal destinations of every movable piece of the side to move."""
        if self._pending_promotion is not None:
            raise PromotionPendingError(self._pending_promotion)
        return self._generator().all_legal_moves(self._turn)

    # ── Mutations ────────────────────────────────────────────────────────

    def move_piece(self, from_pos: Position, to_pos: Position) -> MoveResult:
        """Validate and commit a move.

        Raises:
            NoTileError, NotCurrentTurnError, PromotionPendingError: as
                :meth:`legal_moves`.
            InvalidMoveError: *to_pos* is not a legal destination.
        """
        if to_pos not in self.legal_moves(from_pos):
            raise InvalidMoveError(from_pos, to_pos)

        board = self._board
        piece = board[from_pos]
        assert piece is not None

        flag = classify_move(board, from_pos, to_pos, self._en_passant)
        captured = apply_move(board, from_pos, to_pos, flag)
        self._castling = update_castling_rights(
            self._castling, from_pos, to_pos, piece
        )
        self._en_passant = next_en_passant(from_pos, to_pos, flag)

        self._pending_promotion = promotion_square(board, to_pos)
        if self._pending_promotion is None:
            self._turn = self._turn.opposite

        _LOGGER.debug(
            "%s %s%s (%s)%s",
            piece.color,
            from_pos,
            to_pos,
            flag.name,
            f" captures {captured}" if captured is not None else "",
        )

        self._set_state(self._derive_state())
        result = MoveResult(flag=flag, captured=captured, state=self._state)
        for callback in self.events.on_move:
            callback(from_pos, to_pos, result)
        if self._pending_promotion is not None:
            for promo_callback in self.events.on_promotion_required:
                promo_callback(self._pending_promotion)
        return result

    def promote(self, piece_type: PieceType) -> GameState:
        """Complete a pending promotion with *piece_type*.

        Calling this without a pending promotion, or choosing a king or a
        pawn, is a programming error.
        """
        pos = self._pending_promotion
        if pos is None:
            raise RuntimeError(f"No promotion pending (state is {self._state})")
        if piece_type not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {piece_type.name}")

        pawn = self._board[pos]
        assert pawn is not None and pawn.piece_type == PieceType.PAWN
        self._board[pos] = Piece(pawn.color, piece_type)
        self._pending_promotion = None
        self._turn = self._turn.opposite

        _LOGGER.debug("Pawn on %s promoted to %s", pos, piece_type.name)
        self._set_state(self._derive_state())
        return self._state

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent deep copy without event subscribers."""
        game = Game.__new__(Game)
        game._board = self._board.copy()
        game._turn = self._turn
        game._castling = self._castling
        game._en_passant = self._en_passant
        game._pending_promotion = self._pending_promotion
        game._state = self._state
        game.events = GameEvents()
        return game

    # ── Internal ─────────────────────────────────────────────────────────

    def _generator(self) -> MoveGenerator:
        return MoveGenerator(self._board, self._castling, self._en_passant)

    def _derive_state(self) -> GameState:
        return Rules.derive_state(
            self._board,
            self._turn,
            self._castling,
            self._en_passant,
            self._pending_promotion,
        )

    def _set_state(self, state: GameState) -> None:
        if state == self._state:
            return
        _LOGGER.debug("State %s -> %s", self._state, state)
        self._state = state
        if state.is_terminal:
            _LOGGER.info("Game over: %s", state)
        for callback in self.events.on_state_changed:
            callback(state)

    def __repr__(self) -> str:
        return f"Game(turn={self._turn}, state={self._state})\n{self._board!r}"
