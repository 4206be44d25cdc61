"""Shared fixtures for the goids test suite."""

import numpy as np
import pytest

from goids import Goid, World
from goids.vector import vec2

BLUE = (0.1, 0.1, 0.8, 0.8)


def make_goid(x, y, vx, vy, color=BLUE):
    return Goid(position=vec2(x, y), velocity=vec2(vx, vy), color=color)


@pytest.fixture
def trio_world():
    """Three goids at (0,0), (2,0), (1,3), all moving along +X at speed 1."""
    return World([
        make_goid(0.0, 0.0, 1.0, 0.0),
        make_goid(2.0, 0.0, 1.0, 0.0),
        make_goid(1.0, 3.0, 1.0, 0.0),
    ])


@pytest.fixture
def scattered_world():
    """Fifty goids with seeded random positions and velocities."""
    rng = np.random.default_rng(7)
    goids = []
    for _ in range(50):
        x, y = rng.uniform(-5.0, 5.0, size=2)
        vx, vy = rng.uniform(-0.05, 0.05, size=2)
        goids.append(make_goid(x, y, vx, vy))
    return World(goids)
