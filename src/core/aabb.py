# core/aabb.py
from core.interval import Interval
from core.vector import Point3

# Minimum slab thickness, so flat boxes still have a volume to hit.
MIN_THICKNESS = 0.0001


class AABB:
    """Axis-aligned bounding box, one Interval per axis."""

    def __init__(self, x: Interval = None, y: Interval = None, z: Interval = None):
        self.x = x if x is not None else Interval.EMPTY
        self.y = y if y is not None else Interval.EMPTY
        self.z = z if z is not None else Interval.EMPTY

    @classmethod
    def from_points(cls, a: Point3, b: Point3) -> "AABB":
        return cls(
            _padded(Interval(min(a.x, b.x), max(a.x, b.x))),
            _padded(Interval(min(a.y, b.y), max(a.y, b.y))),
            _padded(Interval(min(a.z, b.z), max(a.z, b.z))),
        )

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: for each axis, narrow [t_min, t_max] to the slab overlap.
        t_min, t_max = ray_t.min, ray_t.max
        for axis in range(3):
            ax = self.axis_interval(axis)
            direction = ray.direction[axis]
            if direction == 0:
                if not ax.contains(ray.origin[axis]):
                    return False
                continue
            inv_d = 1.0 / direction
            t0 = (ax.min - ray.origin[axis]) * inv_d
            t1 = (ax.max - ray.origin[axis]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max < t_min:
                return False
        return True

    def longest_axis(self) -> int:
        sizes = (self.x.size(), self.y.size(), self.z.size())
        return sizes.index(max(sizes))

    def centroid(self, axis: int) -> float:
        ax = self.axis_interval(axis)
        return (ax.min + ax.max) * 0.5

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval(min(box0.x.min, box1.x.min), max(box0.x.max, box1.x.max)),
            Interval(min(box0.y.min, box1.y.min), max(box0.y.max, box1.y.max)),
            Interval(min(box0.z.min, box1.z.min), max(box0.z.max, box1.z.max)),
        )


def _padded(interval: Interval) -> Interval:
    if interval.size() < MIN_THICKNESS:
        return interval.expand(MIN_THICKNESS)
    return interval
