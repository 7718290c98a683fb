"""Unit tests for constant density participating media."""

import math

import pytest

from pathtracer.core.errors import InvalidInputError
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.isotropic import Isotropic

GREY = Vector3(0.5, 0.5, 0.5)


def fog(density):
    return ConstantMedium(Sphere(Vector3(0, 0, 0), 1.0, None), density, GREY)


class TestConstantMedium:
    """Tests for ConstantMedium.hit."""

    def test_dense_medium_scatters_at_the_boundary(self):
        medium = fog(1e8)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))

        rec = medium.hit(ray, 0.001, math.inf)

        assert rec is not None
        assert rec.t == pytest.approx(4.0, abs=1e-4)
        assert isinstance(rec.material, Isotropic)
        assert rec.material is medium.phase_function
        assert rec.normal == Vector3(1, 0, 0)
        assert rec.front_face

    def test_thin_medium_is_transparent(self):
        medium = fog(1e-8)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        hits = sum(1 for _ in range(1000) if medium.hit(ray, 0.001, math.inf) is not None)
        assert hits == 0

    def test_hit_lies_inside_the_boundary(self):
        medium = fog(1.0)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -2))
        for _ in range(500):
            rec = medium.hit(ray, 0.001, math.inf)
            if rec is not None:
                assert 2.0 < rec.t < 3.0
                assert rec.p.length() <= 1.0 + 1e-9

    def test_scatter_fraction_follows_beer_lambert(self):
        """Chance of scattering over a chord of length 2 is 1 - exp(-2 * density)."""
        medium = fog(0.5)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        n = 4000
        hits = sum(1 for _ in range(n) if medium.hit(ray, 0.001, math.inf) is not None)
        assert hits / n == pytest.approx(1 - math.exp(-1.0), abs=0.03)

    def test_ray_starting_inside_enters_at_t_min(self):
        medium = fog(1e8)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        rec = medium.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(0.001, abs=1e-4)

    def test_interval_ending_before_boundary_is_a_miss(self):
        medium = fog(1e8)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert medium.hit(ray, 0.001, 3.5) is None

    def test_ray_missing_the_boundary(self):
        medium = fog(1e8)
        ray = Ray(Vector3(3, 0, 5), Vector3(0, 0, -1))
        assert medium.hit(ray, 0.001, math.inf) is None

    @pytest.mark.parametrize("density", [0.0, -1.0, math.nan])
    def test_density_must_be_positive(self, density):
        with pytest.raises(InvalidInputError):
            fog(density)

    def test_bounding_box_is_the_boundary_box(self):
        boundary = Sphere(Vector3(1, 2, 3), 0.5, None)
        medium = ConstantMedium(boundary, 1.0, GREY)
        assert medium.bounding_box() == boundary.bounding_box()
