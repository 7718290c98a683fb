# geometry/hittable.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3

class HitRecord:
    """
    Records details of a ray-object intersection.

    The normal is the outward geometric normal of the surface; it is not
    flipped towards the ray. front_face tells on which side the ray arrived.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "uv")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material=None,
                 uv: UV = None):
        self.p = p              # Intersection point
        self.normal = normal    # Outward surface normal at intersection
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face
        self.material = material
        self.uv = uv if uv is not None else UV(0.0, 0.0)

    def set_outward_normal(self, ray: Ray, outward_normal: Vector3):
        self.normal = outward_normal
        self.front_face = ray.direction.dot(outward_normal) < 0

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
