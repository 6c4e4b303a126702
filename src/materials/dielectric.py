# src/materials/dielectric.py
import math
from dataclasses import dataclass
from typing import Tuple
from core.ray import Ray
from core.vector import Color, ieee_div
from core.utils import reflect, refract
from geometry.hittable import HitRecord
from materials.material import Material


@dataclass(frozen=True)
class Dielectric(Material):
    """
    Clear glass-like material that always scatters, either reflecting or
    refracting depending on the angle of incidence.
    """
    refraction_index: float
    tag = "Glass"

    def __post_init__(self):
        object.__setattr__(self, "refraction_index", float(self.refraction_index))

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Color]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ri = ieee_div(1.0, self.refraction_index) if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.unit_vector()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ri) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return Ray(rec.p, direction), attenuation

    def to_dict(self) -> dict:
        return {self.tag: {"refraction_index": self.refraction_index}}


Glass = Dielectric


def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = ieee_div(1.0 - ref_idx, 1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
