# geometry/sphere.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3, Point3, ieee_div
from geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    Negative radii are clamped to zero.
    """
    def __init__(self, center: Point3, radius: float, material):
        self.center = center
        self.radius = max(0.0, float(radius))
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range.
        # A zero-length direction gives NaN or infinite roots instead of raising.
        root = ieee_div(-half_b - sqrt_disc, a)
        if not ray_t.contains(root):
            root = ieee_div(-half_b + sqrt_disc, a)
            if not ray_t.contains(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        # Materials are frozen, so sharing the instance is a value copy.
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB.from_points(self.center - offset, self.center + offset)

    def to_dict(self) -> dict:
        return {"Sphere": {
            "center": {"x": self.center.x, "y": self.center.y, "z": self.center.z},
            "radius": self.radius,
            "material": self.material.to_dict(),
        }}

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
