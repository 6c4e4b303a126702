# materials/registry.py
from core.vector import Color
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal

# The closed set of material kinds, keyed by their serialized tag.
MATERIAL_TYPES = {
    Lambertian.tag: Lambertian,
    Metal.tag: Metal,
    Dielectric.tag: Dielectric,
}


def material_from_dict(data: dict):
    """
    Builds a material from its tagged form, e.g. {"Metal": {"albedo": [..], "fuzz": 0.1}}.
    Raises KeyError for unknown tags and TypeError for bad parameters.
    """
    if not isinstance(data, dict) or len(data) != 1:
        raise TypeError(f"material must be a single-key mapping, got {data!r}")
    (tag, params), = data.items()
    cls = MATERIAL_TYPES[tag]
    params = dict(params)
    if "albedo" in params:
        r, g, b = params["albedo"]
        params["albedo"] = Color(float(r), float(g), float(b))
    return cls(**params)
