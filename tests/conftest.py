"""Shared fixtures for the path tracer tests."""

import random

import pytest

from core.vector import Color, Point3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


class FixedRandom:
    """Stands in for random.Random where a test needs a known draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def ground_world():
    world = HittableList()
    world.add(Sphere(Point3(0, -100.5, -1), 100, Lambertian(Color(0.5, 0.5, 0.5))))
    return world
