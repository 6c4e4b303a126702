# renderer/image_writer.py
import os

import numpy as np
from PIL import Image


def write_image(path: str, pixels: np.ndarray) -> str:
    """
    Encodes a (height, width, 3) uint8 grid with Pillow. The format follows
    the file extension; a path without one gets ".png".

    Raises:
        ValueError: If Pillow has no encoder for the extension
    """
    root, ext = os.path.splitext(path)
    if not ext:
        path = root + ".png"
    if ext.lower() == ".ppm":
        return write_ppm(path, pixels)

    image = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    try:
        image.save(path)
    except (KeyError, ValueError) as e:
        raise ValueError(f"Cannot write image {path}: {e}") from e
    return path


def write_ppm(path: str, pixels: np.ndarray) -> str:
    """Writes a plain-text (P3) PPM file."""
    height, width = pixels.shape[:2]
    with open(path, "w", encoding="ascii") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in pixels:
            f.write("\n".join(f"{r} {g} {b}" for r, g, b in row.tolist()))
            f.write("\n")
    return path
