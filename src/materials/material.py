# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color
from geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. The concrete kinds are Lambertian, Metal and
    Dielectric; see materials.registry for the closed set.
    """
    tag = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def to_dict(self) -> dict:
        raise NotImplementedError("to_dict() must be implemented by subclasses.")


def color_to_list(color: Color) -> list:
    return [color.x, color.y, color.z]
