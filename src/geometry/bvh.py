# src/geometry/bvh.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord


class BVHNode(Hittable):
    """
    Bounding volume hierarchy over a slice of objects. Splits on the longest
    axis of the node's box at the median centroid.
    """
    def __init__(self, objects: list, start: int, end: int):
        object_span = end - start

        self.box = objects[start].bounding_box()
        for i in range(start + 1, end):
            self.box = AABB.surrounding_box(self.box, objects[i].bounding_box())

        if object_span == 1:
            self.left = self.right = objects[start]
            self.is_leaf = True
            return
        if object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
            self.is_leaf = False
            return

        axis = self.box.longest_axis()
        objects[start:end] = sorted(
            objects[start:end], key=lambda obj: obj.bounding_box().centroid(axis))

        mid = start + object_span // 2
        self.left = BVHNode(objects, start, mid)
        self.right = BVHNode(objects, mid, end)
        self.is_leaf = False

    def bounding_box(self) -> AABB:
        return self.box

    def hit(self, ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        if self.is_leaf:
            return self.left.hit(ray, ray_t)

        hit_left = self.left.hit(ray, ray_t)
        # The right branch only has to beat the left hit
        t_max = hit_left.t if hit_left is not None else ray_t.max
        hit_right = self.right.hit(ray, Interval(ray_t.min, t_max))

        return hit_right if hit_right is not None else hit_left
