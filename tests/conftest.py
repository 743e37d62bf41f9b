import os
import random
import sys

import pytest

# Ensure project root is in sys.path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pygame
from asteroid_arena.asteroid import Asteroid, SpawnEdge
from asteroid_arena.config import GameConfig
from asteroid_arena.game import Game


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def quiet_config():
    """Arena whose background timers never fire within a test."""
    return GameConfig(spawn_interval_ms=10**9, asteroid_cleanup_interval_ms=10**9)


@pytest.fixture
def game():
    return Game(seed=42)


@pytest.fixture
def quiet_game(quiet_config):
    return Game(quiet_config, seed=42)


@pytest.fixture
def make_rock(rng):
    """Build a motionless asteroid at a chosen spot."""

    def _make(x, y, radius=30.0):
        asteroid = Asteroid(rng, edge=SpawnEdge.TOP)
        asteroid.position = pygame.Vector2(x, y)
        asteroid.velocity = pygame.Vector2(0, 0)
        asteroid.radius = radius
        return asteroid

    return _make
