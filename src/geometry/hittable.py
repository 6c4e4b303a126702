# geometry/hittable.py
from typing import Optional
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3, Point3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, p: Point3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = False, material=None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, always facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray came from outside
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal is assumed to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face}, material={self.material!r})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """
        Returns the record of the nearest intersection with t inside ray_t,
        or None on a miss.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self):
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
