"""Pytest configuration for path tracer tests.

Shared fixtures: a seeded generator for the test thread and a few small
materials and scenes.
"""

import pytest

from pathtracer.core.utils import seed_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_rng():
    """Make every test start from the same random stream."""
    seed_rng(12345)
    yield
    seed_rng(None)


@pytest.fixture
def grey():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def unit_sphere(grey):
    """Unit sphere at the origin with a grey diffuse material."""
    return Sphere(Vector3(0.0, 0.0, 0.0), 1.0, grey)


@pytest.fixture
def make_hit():
    """Build a hit record at a point with a given outward normal."""

    def _make_hit(p, normal, material=None, t=1.0):
        rec = HitRecord(p=p, normal=normal, t=t, material=material)
        return rec

    return _make_hit

