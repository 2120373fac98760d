"""Unit tests for scene-level intersection (HittableList).

Tests cover:
- Empty scenes
- Nearest hit across overlapping spheres
- Independence from insertion order
- Respecting the caller's t_max
- Collection helpers
"""

import itertools
import math

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


def _spheres():
    near = Sphere(Vector3(0.0, 0.0, -2.0), 1.0, Lambertian(Vector3(1.0, 0.0, 0.0)))
    overlapping = Sphere(Vector3(0.0, 0.0, -2.5), 1.0, Lambertian(Vector3(0.0, 1.0, 0.0)))
    far = Sphere(Vector3(0.0, 0.0, -10.0), 2.0, Lambertian(Vector3(0.0, 0.0, 1.0)))
    return [near, overlapping, far]


RAY = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))


class TestHittableList:
    """Tests for HittableList.hit."""

    def test_empty_world_misses(self):
        assert HittableList().hit(RAY, 0.001, math.inf) is None

    def test_nearest_of_two_overlapping_spheres(self):
        """The aggregate reports the smaller t of the individually reported hits."""
        near, overlapping, _ = _spheres()
        t_near = near.hit(RAY, 0.001, math.inf).t
        t_overlap = overlapping.hit(RAY, 0.001, math.inf).t
        world = HittableList([overlapping, near])
        rec = world.hit(RAY, 0.001, math.inf)
        assert rec.t == min(t_near, t_overlap)
        assert rec.material is near.material

    @pytest.mark.parametrize("order", list(itertools.permutations(range(3))))
    def test_result_is_independent_of_order(self, order):
        spheres = _spheres()
        world = HittableList(spheres[i] for i in order)
        rec = world.hit(RAY, 0.001, math.inf)
        assert rec.t == pytest.approx(1.0)
        assert rec.material is spheres[0].material

    def test_respects_t_max(self):
        world = HittableList(_spheres())
        assert world.hit(RAY, 0.001, 0.5) is None

    def test_t_min_skips_to_next_surface(self):
        world = HittableList(_spheres())
        spheres = world.objects
        rec = world.hit(RAY, 1.2, math.inf)
        # Past the near sphere's front (t=1) the overlapping sphere's front (t=1.5) is next
        assert rec.t == pytest.approx(1.5)
        assert rec.material is spheres[1].material

    def test_ray_missing_everything(self):
        world = HittableList(_spheres())
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert world.hit(ray, 0.001, math.inf) is None


class TestCollection:
    """Tests for the list helpers."""

    def test_add_extend_clear(self):
        world = HittableList()
        spheres = _spheres()
        world.add(spheres[0])
        world.extend(spheres[1:])
        assert len(world) == 3
        assert list(world) == spheres
        world.clear()
        assert len(world) == 0
