import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest
from tetris_board import Board
from tetris_clock import ManualTicker
from tetris_game import Game
from tetris_rng import PieceRandom
from tests.helpers import FixedRandom


@pytest.fixture
def board():
    return Board(10, 20)


@pytest.fixture
def ticker():
    return ManualTicker()


@pytest.fixture
def events():
    return []


@pytest.fixture
def make_game(ticker, events):
    def make(*kinds, width=10, height=20, seed=7):
        rng = FixedRandom(*kinds) if kinds else PieceRandom(seed)
        game = Game(width, height, ticker=ticker, rng=rng)
        game.subscribe(lambda event, piece: events.append(event))
        return game
    return make
