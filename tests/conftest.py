from dataclasses import replace

import pytest

from flocking.core.config import FlockConfig
from flocking.core.flock import Flock
from flocking.core.vector import Vector2


@pytest.fixture
def config():
    """Default 800x600 flock parameters with a fixed seed."""
    return FlockConfig(width=800.0, height=600.0, seed=1234)


@pytest.fixture
def config_dict(config):
    return config.to_dict()


@pytest.fixture
def make_flock(config):
    """Builds a flock from (x, y, vx, vy) tuples, with optional config overrides."""

    def _make(placements, **overrides):
        flock_config = replace(config, **overrides)
        states = [(Vector2(x, y), Vector2(vx, vy)) for x, y, vx, vy in placements]
        return Flock.from_states(flock_config, states)

    return _make
