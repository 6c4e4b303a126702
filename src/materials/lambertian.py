# materials/lambertian.py
from dataclasses import dataclass
from typing import Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, color_to_list


@dataclass(frozen=True)
class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    albedo: Color
    tag = "Lambertian"

    def __post_init__(self):
        object.__setattr__(self, "albedo", self.albedo.copy())

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation); diffuse surfaces never absorb.
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # Catch degenerate scatter direction
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Ray(rec.p, scatter_direction), self.albedo.copy()

    def to_dict(self) -> dict:
        return {self.tag: {"albedo": color_to_list(self.albedo)}}
