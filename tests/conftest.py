"""Pytest configuration - shared fixtures for the flocking tests."""

import numpy as np
import pytest

from boids import Boid


@pytest.fixture
def rng():
    """Seeded generator so spawn-based tests are repeatable."""
    return np.random.default_rng(1234)


@pytest.fixture
def make_boid():
    """Factory for standalone boids with explicit state."""
    def _make(position=(0.0, 0.0, 0.0), velocity=(0.0, 0.0, 0.0),
              acceleration=(0.0, 0.0, 0.0), **kwargs):
        return Boid(
            position=np.array(position, dtype=np.float64),
            velocity=np.array(velocity, dtype=np.float64),
            acceleration=np.array(acceleration, dtype=np.float64),
            **kwargs,
        )
    return _make
