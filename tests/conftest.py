"""Pytest configuration for path tracer tests.

Provides shared fixtures: a seeded random generator so stochastic tests are
reproducible, and small scenes reused across test modules.
"""

import numpy as np
import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal


@pytest.fixture
def rng():
    """A generator with a fixed seed, fresh for every test."""
    return np.random.default_rng(42)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def single_sphere_world(gray):
    """The classic radius 0.5 sphere one unit in front of the origin."""
    return HittableList([Sphere(Vector3(0.0, 0.0, -1.0), 0.5, gray)])


@pytest.fixture
def facing_mirrors():
    """Two perfect white mirrors on the z axis, facing each other across the origin."""
    mirror = Metal(Vector3(1.0, 1.0, 1.0), fuzz=0.0)
    return HittableList([
        Sphere(Vector3(0.0, 0.0, -2.0), 1.0, mirror),
        Sphere(Vector3(0.0, 0.0, 2.0), 1.0, mirror),
    ])


def assert_vec_close(actual, expected, abs_tol=1e-9):
    """Component-wise comparison of two Vector3 values."""
    assert tuple(actual) == pytest.approx(tuple(expected), abs=abs_tol)
