"""CPU Monte-Carlo path tracer.

Subpackages:
    core: Vector algebra, rays, bounding boxes and random sampling
    geometry: Spheres, triangles, participating media and the BVH
    materials: Lambertian, metal, dielectric and isotropic scattering
    camera: Thin-lens camera
    renderer: Radiance integrator, image renderer and output
"""

__version__ = "0.1.0"

from pathtracer.core.errors import InvalidInputError
from pathtracer.geometry.bvh import BVHNode
from pathtracer.renderer.integrator import radiance

__all__ = ["BVHNode", "InvalidInputError", "radiance"]
