# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture, SolidTexture

class MetalPresets:
    """Metals used by the built-in scenes."""

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brass() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)

class DielectricPresets:
    """Dielectrics by refractive index."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class ColorPresets:
    """Scene palette."""

    GREEN = Vector3(0.2, 0.3, 0.1)
    WHITE = Vector3(0.9, 0.9, 0.9)
    SMOKE = Vector3(0.2, 0.2, 0.2)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)

class TexturePresets:
    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None, scale: float = 10.0) -> CheckerTexture:
        """Green and white 3D checker unless other colors are given."""
        if color1 is None:
            color1 = ColorPresets.GREEN
        if color2 is None:
            color2 = ColorPresets.WHITE
        return CheckerTexture(SolidTexture(color1), SolidTexture(color2), scale)
