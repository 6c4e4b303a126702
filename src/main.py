# main.py
import argparse
import random
import sys

from camera.camera import Camera
from config import ConfigError, load_config
from core.vector import Color, Point3, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, MetalPresets
from renderer.image_writer import write_image
from renderer.raytracer import Renderer


def create_world(seed: int = 0) -> HittableList:
    """
    Ground, three large feature spheres and a grid of small random ones.
    """
    rng = random.Random(seed)
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))

    feature = Point3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - feature).length() <= 0.9:
                continue
            choose_mat = rng.random()
            if choose_mat < 0.8:
                albedo = Color.random(rng) * Color.random(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.83:
                material = MetalPresets.gold()
            elif choose_mat < 0.95:
                material = Metal(Color.random(rng, 0.5, 1.0), rng.uniform(0, 0.5))
            elif choose_mat < 0.98:
                material = DielectricPresets.glass()
            else:
                material = DielectricPresets.water()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.mirror()))
    return world


def create_camera() -> Camera:
    return Camera(
        height=225, width=400,
        samples_per_pixel=10, max_depth=20,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        defocus_angle=0.6, focus_dist=10.0,
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Monte Carlo path tracer for sphere scenes.")
    parser.add_argument("scene", nargs="?", help="JSON scene file (default: built-in demo scene)")
    parser.add_argument("-o", "--output", default="output.png", help="output image path")
    parser.add_argument("--workers", type=int, default=None, help="worker processes (default: CPU count)")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible renders")
    parser.add_argument("--bvh", action="store_true", help="build a bounding volume hierarchy first")
    parser.add_argument("--preview", action="store_true", help="show rows in a window as they finish")
    parser.add_argument("--quiet", action="store_true", help="suppress progress output")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    verbose = not args.quiet

    try:
        if args.scene:
            camera, world = load_config(args.scene)
            if verbose:
                print(f"Loaded {len(world)} objects from {args.scene}")
        else:
            camera, world = create_camera(), create_world()
            if verbose:
                print(f"Using built-in demo scene with {len(world)} objects")
    except (FileNotFoundError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.bvh:
        world.build_bvh()

    preview = None
    if args.preview:
        from renderer.preview import LivePreview
        preview = LivePreview(camera.width, camera.height)

    renderer = Renderer(camera, workers=args.workers, seed=args.seed, verbose=verbose)
    pixels = renderer.render(world, on_row=preview.update_row if preview else None)

    try:
        path = write_image(args.output, pixels)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if verbose:
        print(f"Wrote {path}")

    if preview is not None:
        preview.wait()
    return 0


if __name__ == "__main__":
    sys.exit(main())
