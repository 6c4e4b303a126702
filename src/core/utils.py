# core/utils.py
import math
from core.vector import Vector3


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3.random(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point inside the unit disk on the z=0 plane.
    """
    while True:
        p = Vector3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = Vector3.random(rng, -1.0, 1.0)
        lensq = p.length_squared()
        # Tiny candidates would blow up when normalized.
        if 1e-160 < lensq <= 1.0:
            return p / math.sqrt(lensq)


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Bends the unit vector uv through a surface with normal n using Snell's law.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel
