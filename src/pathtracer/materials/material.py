# materials/material.py
from typing import NamedTuple, Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import Texture, as_texture

class ScatterRecord(NamedTuple):
    attenuation: Vector3
    scattered: Ray

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def __init__(self, albedo=None):
        self.texture: Optional[Texture] = as_texture(albedo) if albedo is not None else None

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        """
        Computes the scattered ray and attenuation.
        Returns None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def albedo_at(self, rec: HitRecord) -> Vector3:
        return self.texture.sample(rec.uv, rec.p)
