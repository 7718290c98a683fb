# core/aabb.py
import math
from pathtracer.core.vector import Vector3

def _reciprocal(d: float) -> float:
    # Python raises on 1/0; follow IEEE and return a signed infinity instead.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d

class AABB:
    """
    Axis-aligned bounding box, minimum[i] <= maximum[i] on every axis.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in range(3):
            invD = _reciprocal(ray.direction[a])
            origin = ray.origin[a]
            t0 = (self.minimum[a] - origin) * invD
            t1 = (self.maximum[a] - origin) * invD
            if invD < 0:
                t0, t1 = t1, t0
            # A NaN bound (0 * inf) leaves the interval untouched.
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if not t_max > t_min:
                return False
        return True

    def extent(self) -> Vector3:
        return self.maximum - self.minimum

    def surface_area(self) -> float:
        d = self.extent()
        return 2 * (d.x * d.y + d.y * d.z + d.z * d.x)

    def longest_axis(self) -> int:
        """
        Index of the axis with the largest extent; ties go to the earlier axis.
        """
        d = self.extent()
        axis = 0
        if d.y > d[axis]:
            axis = 1
        if d.z > d[axis]:
            axis = 2
        return axis

    def contains(self, other: "AABB") -> bool:
        return all(
            self.minimum[a] <= other.minimum[a] and self.maximum[a] >= other.maximum[a]
            for a in range(3)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __hash__(self) -> int:
        return hash((self.minimum, self.maximum))

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)
