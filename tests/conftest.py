"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.game import Game
from chessrules.notation import game_from_fen


@pytest.fixture
def game() -> Game:
    """A fresh game from the standard starting position."""
    return Game()


@pytest.fixture
def castling_game() -> Game:
    """Kings and rooks on their home squares, everything else cleared."""
    return game_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
