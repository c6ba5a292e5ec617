"""Perft: leaf-node counts against published reference values.

Each promotion counts once per piece it can become.  Deeper counts are
marked ``slow`` and only run with ``pytest -m slow``.
"""

from __future__ import annotations

import pytest

from chessrules.core.enums import PROMOTION_TYPES, MoveFlag
from chessrules.game import Game
from chessrules.notation import STARTING_FEN, game_from_fen

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
ENDGAME = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"
PROMOTIONS = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"
CHECKS = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"


def perft(game: Game, depth: int) -> int:
    if depth == 0:
        return 1
    nodes = 0
    for origin, targets in game.all_legal_moves().items():
        for target in targets:
            child = game.copy()
            result = child.move_piece(origin, target)
            if result.flag == MoveFlag.PROMOTION:
                for piece_type in PROMOTION_TYPES:
                    promoted = child.copy()
                    promoted.promote(piece_type)
                    nodes += perft(promoted, depth - 1)
            else:
                nodes += perft(child, depth - 1)
    return nodes


@pytest.mark.parametrize(
    ("fen", "depth", "expected"),
    [
        (STARTING_FEN, 1, 20),
        (STARTING_FEN, 2, 400),
        (STARTING_FEN, 3, 8902),
        (KIWIPETE, 1, 48),
        (KIWIPETE, 2, 2039),
        (ENDGAME, 1, 14),
        (ENDGAME, 2, 191),
        (ENDGAME, 3, 2812),
        (PROMOTIONS, 1, 6),
        (PROMOTIONS, 2, 264),
        (CHECKS, 1, 44),
        (CHECKS, 2, 1486),
    ],
)
def test_perft(fen: str, depth: int, expected: int) -> None:
    assert perft(game_from_fen(fen), depth) == expected


@pytest.mark.slow
@pytest.mark.parametrize(
    ("fen", "depth", "expected"),
    [
        (STARTING_FEN, 4, 197281),
        (KIWIPETE, 3, 97862),
        (ENDGAME, 4, 43238),
        (PROMOTIONS, 3, 9467),
        (CHECKS, 3, 62379),
    ],
)
def test_perft_deep(fen: str, depth: int, expected: int) -> None:
    assert perft(game_from_fen(fen), depth) == expected
