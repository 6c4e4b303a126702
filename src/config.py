# config.py
import json
import os
from typing import Tuple

from camera.camera import Camera
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.registry import MATERIAL_TYPES, material_from_dict


class ConfigError(ValueError):
    """Raised for scene files that do not describe a valid camera and scene."""


CAMERA_INT_FIELDS = ("height", "width", "samples_per_pixel", "max_depth")
CAMERA_FLOAT_FIELDS = ("vfov", "defocus_angle", "focus_dist")
CAMERA_VECTOR_FIELDS = ("lookfrom", "lookat", "vup")


def parse_vector(value, field: str) -> Vector3:
    """Accepts {"x":..,"y":..,"z":..} or a 3-element list."""
    try:
        if isinstance(value, dict):
            return Vector3(float(value["x"]), float(value["y"]), float(value["z"]))
        x, y, z = value
        return Vector3(float(x), float(y), float(z))
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"{field}: expected a point with x, y, z, got {value!r}") from e


def parse_camera(data: dict) -> Camera:
    if not isinstance(data, dict):
        raise ConfigError("camera: expected an object")
    params = {}
    try:
        for name in CAMERA_INT_FIELDS:
            if name in data:
                params[name] = int(data[name])
        for name in CAMERA_FLOAT_FIELDS:
            if name in data:
                params[name] = float(data[name])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"camera.{name}: {e}") from e
    for name in CAMERA_VECTOR_FIELDS:
        if name in data:
            params[name] = parse_vector(data[name], f"camera.{name}")

    unknown = set(data) - set(Camera.DECLARED)
    if unknown:
        raise ConfigError(f"camera: unknown field(s) {', '.join(sorted(unknown))}")
    if params.get("samples_per_pixel", 1) < 1:
        raise ConfigError("camera.samples_per_pixel must be at least 1")
    if params.get("max_depth", 0) < 0:
        raise ConfigError("camera.max_depth must not be negative")
    if params.get("width", 1) < 1:
        raise ConfigError("camera.width must be at least 1")
    return Camera(**params)


def parse_object(data: dict, index: int):
    field = f"object_list.objects[{index}]"
    if not isinstance(data, dict) or len(data) != 1:
        raise ConfigError(f"{field}: expected a single-key object such as {{\"Sphere\": {{...}}}}")
    (kind, params), = data.items()
    if kind != "Sphere":
        raise ConfigError(f"{field}: unknown object type {kind!r}")
    try:
        center = parse_vector(params["center"], f"{field}.center")
        radius = float(params["radius"])
        material_data = params["material"]
    except KeyError as e:
        raise ConfigError(f"{field}: missing {e.args[0]}") from e
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{field}.radius: {e}") from e

    try:
        material = material_from_dict(material_data)
    except KeyError as e:
        raise ConfigError(f"{field}.material: unknown material {e.args[0]!r} "
                          f"(expected one of {', '.join(MATERIAL_TYPES)})") from e
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{field}.material: {e}") from e
    return Sphere(center, radius, material)


def parse_config(data: dict) -> Tuple[Camera, HittableList]:
    if not isinstance(data, dict):
        raise ConfigError("scene file must contain a JSON object")
    if "camera" not in data:
        raise ConfigError("missing camera")
    camera = parse_camera(data["camera"])

    object_list = data.get("object_list", {})
    if not isinstance(object_list, dict):
        raise ConfigError("object_list: expected an object with an objects list")
    objects = object_list.get("objects", [])
    if not isinstance(objects, list):
        raise ConfigError("object_list.objects: expected a list")
    world = HittableList()
    for index, obj in enumerate(objects):
        world.add(parse_object(obj, index))
    return camera, world


def load_config(path: str) -> Tuple[Camera, HittableList]:
    """
    Load a camera and scene from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the file is not a valid scene description
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Scene file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"{path}: not a UTF-8 text file: {e}") from e
    return parse_config(data)


def config_to_dict(camera: Camera, world: HittableList) -> dict:
    return {
        "camera": camera.to_dict(),
        "object_list": {"objects": [obj.to_dict() for obj in world]},
    }


def save_config(path: str, camera: Camera, world: HittableList):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_dict(camera, world), f, indent=2)
