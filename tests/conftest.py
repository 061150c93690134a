import itertools

import pytest

from tetris_config import make_config
from tetris_game import Game


class ScriptedRandom:
    """Hands out piece kinds from a fixed list, cycling forever."""
    def __init__(self, kinds):
        self._it = itertools.cycle(kinds)

    def next_kind(self):
        return next(self._it)


def fill_row(board, y, value=7, gaps=()):
    for x in range(len(board[y])):
        board[y][x] = 0 if x in gaps else value


def count_blocks(board):
    return sum(1 for row in board for v in row if v)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def make_game(config):
    def _make(*kinds, **overrides):
        cfg = make_config(**overrides) if overrides else config
        return Game(cfg, rng=ScriptedRandom(kinds or (6,)))
    return _make
