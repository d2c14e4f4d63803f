"""Shared test fixtures."""

import os
import random

# SDL has to see these before pygame opens anything
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from smiley import Smiley  # noqa: E402
from core.scene import Scene  # noqa: E402


@pytest.fixture(autouse=True)
def pygame_ready():
    """Some tests shut pygame down; make sure every test starts initialised."""
    if not pygame.get_init():
        pygame.init()
    yield


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def window():
    """Stand-in window surface."""
    return pygame.Surface((640, 480), pygame.SRCALPHA, 32)


@pytest.fixture
def scene(rng):
    return Scene(
        smiley1=Smiley.create(200, 200, (255, 220, 0), rng=rng),
        smiley2=Smiley.create(400, 280, (255, 120, 40), rng=rng),
    )


class Presenter:
    """Counts present() calls."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def presenter():
    return Presenter()
