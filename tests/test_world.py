import itertools
import math
import random

import pytest

from core.interval import Interval
from core.ray import Ray
from core.vector import Color, Point3, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian

FORWARD = Interval(0.001, math.inf)


def overlapping_spheres():
    return [
        Sphere(Point3(0, 0, -5), 1.0, Lambertian(Color(1, 0, 0))),
        Sphere(Point3(0, 0, -4.5), 1.0, Lambertian(Color(0, 1, 0))),
        Sphere(Point3(0.2, 0, -6), 2.0, Lambertian(Color(0, 0, 1))),
    ]


def test_empty_world_misses():
    assert HittableList().hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), FORWARD) is None


def test_closest_hit_wins():
    world = HittableList(overlapping_spheres())
    rec = world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), FORWARD)
    assert rec.t == pytest.approx(3.5)
    assert rec.material.albedo == Color(0, 1, 0)


def test_insertion_order_does_not_change_result():
    ray = Ray(Point3(0.1, 0.05, 0), Vector3(0, 0, -1))
    results = set()
    for order in itertools.permutations(overlapping_spheres()):
        rec = HittableList(order).hit(ray, FORWARD)
        results.add((rec.t, tuple(rec.p)))
    assert len(results) == 1


def test_respects_interval_max():
    world = HittableList(overlapping_spheres())
    assert world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), Interval(0.001, 1.0)) is None


def test_add_clear_len():
    world = HittableList()
    for s in overlapping_spheres():
        world.add(s)
    assert len(world) == 3
    assert list(world)[0].center == Point3(0, 0, -5)
    world.clear()
    assert len(world) == 0


def test_bvh_matches_linear_scan():
    rng = random.Random(99)
    spheres = [Sphere(Point3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-30, -5)),
                      rng.uniform(0.2, 2.0), Lambertian(Color(0.5, 0.5, 0.5)))
               for _ in range(60)]
    linear = HittableList(spheres)
    accelerated = HittableList(spheres)
    accelerated.build_bvh()
    assert accelerated.bvh_root is not None

    hits = 0
    for _ in range(300):
        ray = Ray(Point3(0, 0, 0), Vector3(rng.uniform(-0.6, 0.6), rng.uniform(-0.6, 0.6), -1))
        expected = linear.hit(ray, FORWARD)
        got = accelerated.hit(ray, FORWARD)
        if expected is None:
            assert got is None
        else:
            hits += 1
            assert got.t == expected.t
            assert tuple(got.p) == tuple(expected.p)
    assert hits > 0


def test_add_invalidates_bvh():
    world = HittableList(overlapping_spheres())
    world.build_bvh()
    world.add(Sphere(Point3(0, 0, -2), 0.5, Lambertian(Color(1, 1, 1))))
    assert world.bvh_root is None
    rec = world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), FORWARD)
    assert rec.t == pytest.approx(1.5)
