# geometry/world.py
from functools import reduce
from typing import Iterable, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.errors import InvalidInputError
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    A flat list of Hittable objects searched linearly.

    Scenes are assembled here and then handed to build_bvh(); the linear
    search is kept as the reference answer for the tree.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self) -> BVHNode:
        return BVHNode.build(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise InvalidInputError("an empty list has no bounding box")
        return reduce(AABB.surrounding_box, (obj.bounding_box() for obj in self.objects))
