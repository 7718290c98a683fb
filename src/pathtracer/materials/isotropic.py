# materials/isotropic.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.textures import Texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters in a uniformly
    random direction, independent of the incoming one.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord:
        return ScatterRecord(self.albedo_at(rec), Ray(rec.p, random_in_unit_sphere()))
