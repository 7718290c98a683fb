# materials/lambertian.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.textures import Texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord:
        """
        Scatter towards normal + a random point in the unit sphere.
        Always scatters.
        """
        scatter_direction = rec.normal + random_in_unit_sphere()

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatterRecord(self.albedo_at(rec), Ray(rec.p, scatter_direction))
