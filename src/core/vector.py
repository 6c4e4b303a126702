# core/vector.py
import math
import sys

EPSILON = sys.float_info.epsilon


def ieee_div(a: float, b: float) -> float:
    # Float division with IEEE results instead of ZeroDivisionError.
    if b == 0:
        if a == 0 or a != a:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    and normalization. Operators return new vectors; the augmented
    assignments (+=, -=, *=, /=) update the receiver in place and are meant
    for accumulators only.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def random(cls, rng, lo: float = 0.0, hi: float = 1.0) -> "Vector3":
        return cls(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(ieee_div(self.x, t), ieee_div(self.y, t), ieee_div(self.z, t))

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, t: float) -> "Vector3":
        self.x *= t
        self.y *= t
        self.z *= t
        return self

    def __itruediv__(self, t: float) -> "Vector3":
        self.x = ieee_div(self.x, t)
        self.y = ieee_div(self.y, t)
        self.z = ieee_div(self.z, t)
        return self

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance(self, other: "Vector3") -> float:
        return (self - other).length()

    def unit_vector(self) -> "Vector3":
        # Not guarded: the zero vector comes back as NaNs.
        return self / self.length()

    def near_zero(self) -> bool:
        """True if every component is below machine epsilon in magnitude."""
        return abs(self.x) < EPSILON and abs(self.y) < EPSILON and abs(self.z) < EPSILON

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


Point3 = Vector3
Color = Vector3
