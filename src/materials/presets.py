# materials/presets.py
from core.vector import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric


class MetalPresets:
    """Predefined metal materials with realistic properties."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)


class ColorPresets:
    """Common color presets for materials."""

    BROWN = Color(0.4, 0.2, 0.1)
    GRAY = Color(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
