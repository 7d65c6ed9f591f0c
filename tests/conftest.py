import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest
from pygame.math import Vector2 as V2

from neon_arena.entities import Enemy
from neon_arena.session import InputState, Session
from neon_arena.spawner import Spawner


@pytest.fixture
def session():
    return Session(Spawner(seed=1234))


@pytest.fixture
def arena(session):
    """A session with one enemy parked in the top-left corner, far from the player."""
    session.enemies[:] = [Enemy(V2(0, 0))]
    return session


@pytest.fixture
def inputs():
    return InputState()


@pytest.fixture
def pygame_init():
    pygame.init()
    yield
    pygame.quit()
