"""Unit tests for axis-aligned bounding boxes.

Tests cover:
- Union of two boxes (containment and minimality)
- Surface area and longest axis with ties
- Slab test hits, misses and interval clipping
- Zero, negative zero and NaN direction components
"""

import math
import random

import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


def box(lo, hi):
    return AABB(Vector3(*lo), Vector3(*hi))


def random_box(r):
    lo = [r.uniform(-10, 10) for _ in range(3)]
    hi = [v + r.uniform(0, 5) for v in lo]
    return box(lo, hi)


class TestSurroundingBox:
    """Tests for AABB.surrounding_box."""

    def test_contains_both_and_is_componentwise_min_max(self):
        """The union holds both boxes and equals the componentwise min/max."""
        r = random.Random(3)
        for _ in range(200):
            a = random_box(r)
            b = random_box(r)
            u = AABB.surrounding_box(a, b)

            assert u.contains(a)
            assert u.contains(b)
            for axis in range(3):
                assert u.minimum[axis] == min(a.minimum[axis], b.minimum[axis])
                assert u.maximum[axis] == max(a.maximum[axis], b.maximum[axis])

    def test_is_symmetric(self):
        a = box((0, 0, 0), (1, 1, 1))
        b = box((-2, 0.5, 3), (0.5, 4, 5))
        assert AABB.surrounding_box(a, b) == AABB.surrounding_box(b, a)

    def test_union_with_contained_box_is_identity(self):
        outer = box((-5, -5, -5), (5, 5, 5))
        inner = box((-1, -1, -1), (1, 1, 1))
        assert AABB.surrounding_box(outer, inner) == outer


class TestDerivedQuantities:
    """Tests for surface area and longest axis."""

    def test_surface_area(self):
        assert box((0, 0, 0), (1, 2, 3)).surface_area() == pytest.approx(22.0)

    def test_surface_area_of_flat_box(self):
        assert box((0, 0, 0), (2, 3, 0)).surface_area() == pytest.approx(12.0)

    def test_surface_area_of_point_box_is_zero(self):
        assert box((1, 1, 1), (1, 1, 1)).surface_area() == 0.0

    @pytest.mark.parametrize(
        "hi, expected",
        [
            ((3, 1, 1), 0),
            ((1, 3, 1), 1),
            ((1, 1, 3), 2),
            ((1, 1, 1), 0),
            ((1, 2, 2), 1),
            ((2, 1, 2), 0),
        ],
    )
    def test_longest_axis_ties_go_to_first_axis(self, hi, expected):
        assert box((0, 0, 0), hi).longest_axis() == expected


class TestSlabTest:
    """Tests for AABB.hit."""

    def setup_method(self):
        self.box = box((-1, -1, -1), (1, 1, 1))

    def test_hit_head_on(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert self.box.hit(ray, 0.001, math.inf)

    def test_miss_to_the_side(self):
        ray = Ray(Vector3(3, 0, -5), Vector3(0, 0, 1))
        assert not self.box.hit(ray, 0.001, math.inf)

    def test_box_behind_ray(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, -1))
        assert not self.box.hit(ray, 0.001, math.inf)

    def test_interval_clipped_by_t_max(self):
        """The box spans t in [4, 6]; a t_max of 3 must prune it."""
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not self.box.hit(ray, 0.001, 3.0)
        assert self.box.hit(ray, 0.001, 4.5)

    def test_origin_inside(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(0.3, -0.2, 1))
        assert self.box.hit(ray, 0.001, math.inf)

    def test_unnormalized_direction(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 10))
        assert self.box.hit(ray, 0.001, 0.45)
        assert not self.box.hit(ray, 0.001, 0.35)

    def test_zero_direction_component_inside_slab(self):
        """Direction parallel to the x and y slabs must not raise."""
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert self.box.hit(ray, 0.001, math.inf)

    def test_zero_direction_component_outside_slab(self):
        ray = Ray(Vector3(2, 0, -5), Vector3(0, 0, 1))
        assert not self.box.hit(ray, 0.001, math.inf)

    def test_negative_zero_direction_component(self):
        ray = Ray(Vector3(0.5, 0, -5), Vector3(-0.0, 0, 1))
        assert self.box.hit(ray, 0.001, math.inf)

    def test_origin_on_slab_boundary_with_zero_component(self):
        """0 * inf gives NaN; the test must not crash."""
        ray = Ray(Vector3(1, 0, -5), Vector3(0, 0, 1))
        self.box.hit(ray, 0.001, math.inf)

    def test_nan_interval_is_no_hit(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not self.box.hit(ray, 0.001, math.nan)

    def test_zero_thickness_box_is_missed_along_its_normal(self):
        flat = box((-1, -1, 0), (1, 1, 0))
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not flat.hit(ray, 0.001, math.inf)
