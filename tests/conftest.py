import random

import pytest

from snakeswarm.session import Session
from snakeswarm.settings import Settings, SettingsStore
from snakeswarm.utils import Grid
from snakeswarm.world import World


@pytest.fixture
def grid():
    return Grid(20, 20)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def world(grid, settings, rng):
    return World(grid, settings, rng)


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "settings.json")


@pytest.fixture
def session(grid, store, rng):
    return Session(grid, store, rng)
