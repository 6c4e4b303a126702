# src/geometry/world.py
from typing import Iterator, List, Optional
from core.interval import Interval
from core.ray import Ray
from geometry.bvh import BVHNode
from geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A list of Hittable objects. hit() returns the globally closest
    intersection, either by a linear scan or through an optional BVH.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def build_bvh(self):
        if len(self.objects) == 0:
            self.bvh_root = None
            return
        self.bvh_root = BVHNode(list(self.objects), 0, len(self.objects))

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, ray_t)

        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            # Shrink the window so later objects can only win by being closer.
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
