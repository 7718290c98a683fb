# geometry/mesh.py
import logging
import os
from typing import List, Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.errors import InvalidInputError
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.lambertian import Lambertian

logger = logging.getLogger(__name__)

# Minimum thickness given to a flat bounding box so the slab test can hit it.
BOX_PADDING = 1e-4

class Triangle(Hittable):
    """Single triangle with a precomputed face normal."""
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3,
                 normal: Optional[Vector3] = None, material=None):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.edge1 = v1 - v0
        self.edge2 = v2 - v0
        if normal is None:
            normal = self.edge1.cross(self.edge2).normalize()
        self.normal = normal
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Möller–Trumbore intersection algorithm
        h = ray.direction.cross(self.edge2)
        a = self.edge1.dot(h)

        # Ray parallel to the triangle plane (or NaN input)
        if not abs(a) >= 1e-8:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.edge2.dot(q)
        if not t_min < t < t_max:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.set_outward_normal(ray, self.normal)
        rec.material = self.material
        rec.uv = UV(u, v)
        return rec

    def bounding_box(self) -> AABB:
        """Compute the bounding box for the triangle."""
        lo = [min(self.v0[a], self.v1[a], self.v2[a]) for a in range(3)]
        hi = [max(self.v0[a], self.v1[a], self.v2[a]) for a in range(3)]
        for a in range(3):
            if hi[a] - lo[a] < BOX_PADDING:
                lo[a] -= BOX_PADDING / 2
                hi[a] += BOX_PADDING / 2
        return AABB(Vector3(*lo), Vector3(*hi))

    def __repr__(self) -> str:
        return f"Triangle({self.v0}, {self.v1}, {self.v2})"

def default_mesh_material() -> Lambertian:
    return Lambertian(Vector3(0.5, 0.5, 0.5))

def triangulate(vertices: Sequence[Vector3], material=None) -> List[Triangle]:
    """
    Split a convex polygon into a fan of triangles around its first vertex.

    Raises:
        InvalidInputError: If the polygon has fewer than 3 vertices.
    """
    if len(vertices) < 3:
        raise InvalidInputError(
            f"a face needs at least 3 vertices, got {len(vertices)}")
    if material is None:
        material = default_mesh_material()

    common = vertices[0]
    return [Triangle(common, vertices[i], vertices[i + 1], material=material)
            for i in range(1, len(vertices) - 1)]

def _vertex_index(token: str, vertex_count: int) -> int:
    # OBJ indices are 1-based; negative indices count back from the end.
    index = int(token.split('/')[0])
    if index < 0:
        index += vertex_count
    else:
        index -= 1
    if not 0 <= index < vertex_count:
        raise IndexError(f"vertex index {token} out of range")
    return index

def load_obj(filename: str, material=None) -> List[Triangle]:
    """
    Load the faces of an OBJ file as a flat list of triangles.

    Only vertex positions ('v') and faces ('f') are read; all other records
    are ignored. Every triangle shares the given material, grey Lambertian
    by default.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidInputError: If a record cannot be parsed or a face is degenerate.
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(f"Mesh file not found: {filename}")
    if material is None:
        material = default_mesh_material()

    vertices: List[Vector3] = []
    triangles: List[Triangle] = []
    face_count = 0

    logger.info("Opening file: %s", filename)
    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            values = line.split('#', 1)[0].split()
            if not values:
                continue
            try:
                if values[0] == 'v':
                    vertices.append(Vector3(float(values[1]), float(values[2]), float(values[3])))
                elif values[0] == 'f':
                    face = [vertices[_vertex_index(v, len(vertices))] for v in values[1:]]
                    triangles.extend(triangulate(face, material))
                    face_count += 1
            except InvalidInputError as e:
                raise InvalidInputError(f"{filename}:{line_num}: {e}") from e
            except (ValueError, IndexError) as e:
                raise InvalidInputError(
                    f"{filename}:{line_num}: cannot parse '{line.strip()}': {e}") from e

    logger.info("Loaded %d vertices, %d faces, %d triangles",
                len(vertices), face_count, len(triangles))
    return triangles
