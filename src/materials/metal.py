# materials/metal.py
from dataclasses import dataclass
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, color_to_list


@dataclass(frozen=True)
class Metal(Material):
    """
    Metal material with reflective properties. fuzz is clamped to at most 1.
    """
    albedo: Color
    fuzz: float = 0.0
    tag = "Metal"

    def __post_init__(self):
        object.__setattr__(self, "albedo", self.albedo.copy())
        object.__setattr__(self, "fuzz", min(float(self.fuzz), 1.0))

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction.unit_vector(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo.copy()

        return None  # Absorb the ray if it does not scatter forward

    def to_dict(self) -> dict:
        return {self.tag: {"albedo": color_to_list(self.albedo), "fuzz": self.fuzz}}
