# materials/dielectric.py
import math
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_double, reflect
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord

class Dielectric(Material):
    """
    Clear glass-like material. Never absorbs and never tints.
    """
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        unit_direction = ray_in.direction.normalize()
        reflected = reflect(unit_direction, rec.normal)

        # Determine if we're entering or exiting the material
        cos_incident = unit_direction.dot(rec.normal)
        exiting = cos_incident > 0
        if exiting:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx

        refracted = refract(unit_direction, outward_normal, ni_over_nt)
        if refracted is None:
            # Total internal reflection
            return ScatterRecord(attenuation, Ray(rec.p, reflected))

        # Schlick wants the angle on the outside (low index) of the interface.
        if exiting:
            cosine = math.sqrt(max(0.0, 1.0 - self.ref_idx * self.ref_idx * (1.0 - cos_incident * cos_incident)))
        else:
            cosine = -cos_incident
        reflect_prob = schlick(cosine, self.ref_idx)

        if random_double() < reflect_prob:
            return ScatterRecord(attenuation, Ray(rec.p, reflected))
        return ScatterRecord(attenuation, Ray(rec.p, refracted))

def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Snell's law refraction of v through a surface with normal n facing v.
    Returns None when the discriminant is not positive (total internal reflection).
    """
    unit_v = v.normalize()
    dt = unit_v.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if not discriminant > 0:
        return None
    return (unit_v - n * dt) * ni_over_nt - n * math.sqrt(discriminant)

def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
