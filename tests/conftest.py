import random

import numpy as np
import pytest

from falling_blocks.game import (
    ActivePiece,
    FallingBlocksGame,
    GameConfig,
    PieceKind,
    Snapshot,
    get_shape,
)

WIDTH = 10
HEIGHT = 20


def _empty_board():
    return np.zeros((HEIGHT, WIDTH), dtype=np.int8)


def _make_snapshot(board=None, piece=None, queue=None, score=0, lines_cleared=0, is_game_over=False):
    return Snapshot(
        board=_empty_board() if board is None else board,
        current_piece=piece,
        queue=list(PieceKind) if queue is None else list(queue),
        score=score,
        lines_cleared=lines_cleared,
        is_game_over=is_game_over,
    )


def _make_piece(kind, x, y, shape=None):
    if shape is None:
        shape = get_shape(kind)
    return ActivePiece(kind=kind, shape=np.array(shape, dtype=np.int8), x=x, y=y)


@pytest.fixture()
def empty_board():
    return _empty_board()


@pytest.fixture()
def make_snapshot():
    return _make_snapshot


@pytest.fixture()
def make_piece():
    return _make_piece


@pytest.fixture()
def game():
    return FallingBlocksGame(GameConfig(random_seed=1234))


@pytest.fixture()
def started_game(game):
    game.start()
    return game


@pytest.fixture()
def seeded_rng():
    return random.Random(7)
