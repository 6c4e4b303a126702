# renderer/tone_mapping.py
import math
from core.interval import Interval
from core.vector import Color

# Upper bound stays below 1 so that 256 * c truncates to at most 255.
INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Gamma 2 transform; non-positive (and NaN) input maps to 0."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def to_byte(linear_component: float) -> int:
    return int(256 * INTENSITY.clamp(linear_to_gamma(linear_component)))


def write_color(buffer: bytearray, pixel_color: Color):
    """
    Appends the gamma-corrected, clamped and quantized RGB bytes of a
    linear color to buffer.
    """
    buffer.append(to_byte(pixel_color.x))
    buffer.append(to_byte(pixel_color.y))
    buffer.append(to_byte(pixel_color.z))
