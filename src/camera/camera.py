# camera/camera.py
import math
from core.interval import Interval
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk
from core.vector import Color, Point3, Vector3

# Lower bound on hit distance; keeps scattered rays off their own surface.
T_MIN = 0.001

SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


class Camera:
    """
    A look-at camera with a thin-lens defocus disk.

    The declared parameters are plain attributes; every derived field
    (viewport basis, pixel deltas, defocus disk) is recomputed by
    initialize() whenever one of them is assigned.
    """
    DECLARED = ("height", "width", "samples_per_pixel", "max_depth", "vfov",
                "lookfrom", "lookat", "vup", "defocus_angle", "focus_dist")

    def __init__(self, height: int = 225, width: int = 400,
                 samples_per_pixel: int = 10, max_depth: int = 10,
                 vfov: float = 90.0, lookfrom: Point3 = None,
                 lookat: Point3 = None, vup: Vector3 = None,
                 defocus_angle: float = 0.0, focus_dist: float = 10.0):
        self._ready = False
        self.height = height
        self.width = width
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.vfov = vfov                      # Vertical field of view, degrees
        self.lookfrom = lookfrom if lookfrom is not None else Point3(0, 0, 0)
        self.lookat = lookat if lookat is not None else Point3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.defocus_angle = defocus_angle    # Aperture cone angle, degrees
        self.focus_dist = focus_dist          # Distance to the plane of perfect focus
        self.initialize()

    def __setattr__(self, name, value):
        super().__setattr__(name, value)
        if name in self.DECLARED and self.__dict__.get("_ready"):
            self.initialize()

    def initialize(self):
        """Updates the camera's basis vectors and viewport."""
        self._ready = False
        if self.height < 1:
            self.height = 1

        self.aspect_ratio = self.width / self.height
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel if self.samples_per_pixel > 0 else 0.0
        self.center = self.lookfrom.copy()

        # Viewport dimensions at the focus plane
        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * self.aspect_ratio

        # Orthonormal camera frame
        self.w = (self.lookfrom - self.lookat).unit_vector()
        self.u = self.vup.cross(self.w).unit_vector()
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.width
        self.pixel_delta_v = viewport_v / self.height

        viewport_upper_left = (self.center - self.w * self.focus_dist
                               - viewport_u / 2 - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius
        self._ready = True

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        Builds a ray toward a jittered point inside pixel (i, j), starting
        from the defocus disk when the aperture is open.
        """
        offset = self.sample_square(rng)
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset.x)
                        + self.pixel_delta_v * (j + offset.y))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    @staticmethod
    def sample_square(rng) -> Vector3:
        return Vector3(rng.random() - 0.5, rng.random() - 0.5, 0.0)

    def defocus_disk_sample(self, rng) -> Point3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    @staticmethod
    def ray_color(ray: Ray, depth: int, world, rng) -> Color:
        """
        Follows a ray through at most depth scattering events.

        The recursion color(r) = attenuation * color(scattered) is unrolled:
        throughput holds the product of the attenuations seen so far.
        """
        throughput = Color(1.0, 1.0, 1.0)
        search = Interval(T_MIN, math.inf)
        while depth > 0:
            rec = world.hit(ray, search)
            if rec is None:
                return throughput * sky_color(ray)

            result = rec.material.scatter(ray, rec, rng)
            if result is None:
                return Color(0.0, 0.0, 0.0)
            ray, attenuation = result
            throughput = throughput * attenuation
            depth -= 1

        # Out of bounces; no more light is gathered
        return Color(0.0, 0.0, 0.0)

    def pixel_color(self, i: int, j: int, world, rng) -> Color:
        """Averages samples_per_pixel jittered samples of pixel (i, j)."""
        color = Color(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            color += self.ray_color(self.get_ray(i, j, rng), self.max_depth, world, rng)
        color *= self.pixel_samples_scale
        return color

    def to_dict(self) -> dict:
        data = {}
        for name in self.DECLARED:
            value = getattr(self, name)
            if isinstance(value, Vector3):
                value = {"x": value.x, "y": value.y, "z": value.z}
            data[name] = value
        return data

    def __repr__(self) -> str:
        return (f"Camera({self.width}x{self.height}, spp={self.samples_per_pixel}, "
                f"max_depth={self.max_depth}, lookfrom={self.lookfrom!r}, lookat={self.lookat!r})")


def sky_color(ray: Ray) -> Color:
    """Vertical white-to-blue gradient seen by rays that escape the scene."""
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - t) + SKY_BLUE * t
