# materials/textures.py
import math
import os
import numpy as np
from PIL import Image, UnidentifiedImageError
from pathtracer.core.errors import InvalidInputError
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3

class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, point: Vector3) -> Vector3:
        """Sample the texture at the given surface parameters and hit point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern keyed on the hit point, so it needs no UV mapping.
    """
    def __init__(self, odd: Texture, even: Texture, scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        sines = (math.sin(self.scale * point.x) *
                 math.sin(self.scale * point.y) *
                 math.sin(self.scale * point.z))
        if sines < 0:
            return self.odd.sample(uv, point)
        return self.even.sample(uv, point)

class ImageTexture(Texture):
    """A texture from an image file, looked up by UV."""
    def __init__(self, data: np.ndarray):
        # (height, width, 3) floats in [0, 1]
        self.data = data
        self.height, self.width = data.shape[:2]

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return cls(np.asarray(img, dtype=np.float32) / 255.0)

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        u, v = uv.wrapped()
        v = 1.0 - v  # Image rows run top to bottom

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

def as_texture(albedo) -> Texture:
    """Wrap a plain color in a SolidTexture; pass textures through."""
    if isinstance(albedo, Texture):
        return albedo
    if isinstance(albedo, Vector3):
        return SolidTexture(albedo)
    raise InvalidInputError(f"expected a Vector3 color or a Texture, got {type(albedo).__name__}")

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        InvalidInputError: If the file is not a readable image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")
    try:
        return ImageTexture.from_file(image_path)
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidInputError(f"Error loading texture {image_path}: {e}") from e
