# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    A negative radius turns the normal inwards (hollow glass shells).
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # Also rejects NaN and the degenerate zero-length direction or radius.
        if not discriminant > 0 or a == 0 or self.radius == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root strictly inside (t_min, t_max)
        root = (-half_b - sqrt_disc) / a
        if not t_min < root < t_max:
            root = (-half_b + sqrt_disc) / a
            if not t_min < root < t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_outward_normal(ray, outward_normal)
        rec.uv = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"

def sphere_uv(p: Vector3) -> UV:
    """
    Spherical coordinates of a point on the unit sphere mapped to [0, 1]^2.
    """
    phi = math.atan2(p.z, p.x)
    theta = math.asin(max(-1.0, min(1.0, p.y)))
    u = 1 - (phi + math.pi) / (2 * math.pi)
    v = (theta + math.pi / 2) / math.pi
    return UV(u, v)
