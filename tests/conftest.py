import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from duel_pong.models.pong import GameConfig  # noqa: E402
from duel_pong.pong.pong_game import PongGame  # noqa: E402


class FixedRandom:
    """Stands in for random.Random, always returning the same value"""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def game(config):
    return PongGame(config, headless=True, rng=FixedRandom(0.0))
