import math

import pytest

from core.interval import Interval
from core.ray import Ray
from core.vector import Color, Point3, Vector3
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.metal import Metal

FORWARD = Interval(0.001, math.inf)


@pytest.fixture
def sphere():
    return Sphere(Point3(0, 0, -5), 1.0, Metal(Color(0.8, 0.8, 0.8), 0.2))


def test_hit_entry_point(sphere):
    rec = sphere.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), FORWARD)
    assert rec is not None
    assert rec.t == pytest.approx(4.0)
    assert rec.p == Point3(0, 0, -4)
    assert rec.normal == Vector3(0, 0, 1)
    assert rec.front_face


def test_hit_copies_material(sphere):
    rec = sphere.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), FORWARD)
    assert rec.material == sphere.material


def test_hit_from_inside_uses_far_root(sphere):
    rec = sphere.hit(Ray(Point3(0, 0, -5), Vector3(0, 0, -1)), FORWARD)
    assert rec.t == pytest.approx(1.0)
    assert not rec.front_face
    # Normal is flipped to face the ray
    assert rec.normal == Vector3(0, 0, 1)
    assert rec.normal.dot(Vector3(0, 0, -1)) < 0


def test_normal_is_unit_length():
    s = Sphere(Point3(1, 2, -10), 3.0, Lambertian(Color(1, 1, 1)))
    rec = s.hit(Ray(Point3(0, 0, 0), Vector3(0.1, 0.2, -1)), FORWARD)
    assert rec is not None
    assert rec.normal.length() == pytest.approx(1.0)


def test_miss(sphere):
    assert sphere.hit(Ray(Point3(0, 0, 0), Vector3(0, 1, 0)), FORWARD) is None


def test_both_roots_outside_interval(sphere):
    ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
    assert sphere.hit(ray, Interval(0.001, 3.0)) is None
    assert sphere.hit(ray, Interval(6.5, math.inf)) is None


def test_behind_origin_is_ignored(sphere):
    assert sphere.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, 1)), FORWARD) is None


def test_negative_radius_is_clamped():
    s = Sphere(Point3(0, 0, 0), -2.0, Lambertian(Color(1, 1, 1)))
    assert s.radius == 0.0


def test_bounding_box(sphere):
    box = sphere.bounding_box()
    assert (box.x.min, box.x.max) == (-1.0, 1.0)
    assert (box.z.min, box.z.max) == (-6.0, -4.0)


def test_to_dict(sphere):
    data = sphere.to_dict()["Sphere"]
    assert data["center"] == {"x": 0, "y": 0, "z": -5}
    assert data["radius"] == 1.0
    assert data["material"] == {"Metal": {"albedo": [0.8, 0.8, 0.8], "fuzz": 0.2}}


def test_zero_length_direction_misses(sphere):
    assert sphere.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, 0)), FORWARD) is None


def test_point_sphere_box_is_padded():
    box = Sphere(Point3(1, 2, 3), 0.0, Lambertian(Color(1, 1, 1))).bounding_box()
    for axis in (box.x, box.y, box.z):
        assert axis.size() > 0
        assert axis.surrounds(axis.min + axis.size() / 2)
    assert box.x.contains(1.0)
