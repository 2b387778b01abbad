"""Pytest configuration - headless pygame and shared fixtures."""

import os
import random

# Must be set before pygame opens anything
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from leaderflock.core.config import SimulationConfig
from leaderflock.core.world import World
from leaderflock.simulation.engine import SimulationEngine


@pytest.fixture
def config():
    """Default 800x600 configuration."""
    return SimulationConfig()


@pytest.fixture
def world():
    return World(800, 600)


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def make_engine():
    """Build an engine with no obstacles unless some are given."""
    def _make(obstacles=(), seed=7, **overrides):
        return SimulationEngine(SimulationConfig(**overrides), seed=seed, obstacles=obstacles)
    return _make


class ScriptedRandom:
    """Random stand-in returning a fixed sequence from randrange."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.values.pop(0)


@pytest.fixture
def scripted_random():
    return ScriptedRandom
