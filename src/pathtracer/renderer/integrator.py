# renderer/integrator.py
"""
Radiance estimator.

Follows one path from a primary ray: every bounce multiplies the path
throughput by the material attenuation, a ray that escapes picks up the sky
gradient, and absorption or running out of bounces ends the path in black.
"""
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable

# Hard cap on the number of scattering events along one path
MAX_DEPTH = 50

# Hit interval; T_MIN keeps scattered rays off their own surface
T_MIN = 0.001
T_MAX = 50.0

BLACK = Vector3(0.0, 0.0, 0.0)
HORIZON_COLOR = Vector3(1.0, 1.0, 1.0)
ZENITH_COLOR = Vector3(0.5, 0.7, 1.0)

def sky_color(ray: Ray) -> Vector3:
    """
    Background radiance: white at the horizon blending to sky blue overhead.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return HORIZON_COLOR * (1.0 - t) + ZENITH_COLOR * t

def radiance(ray: Ray, world: Hittable, depth: int = 0,
             max_depth: int = MAX_DEPTH) -> Vector3:
    """
    Estimate the radiance carried back along ray.

    Equivalent to the recursion
    L(ray, d) = attenuation * L(scattered, d + 1) while the hit scatters and
    d < max_depth, black otherwise, and sky_color(ray) on a miss, unrolled
    into a loop so the call stack stays flat.

    Args:
        ray: The ray to trace.
        world: Scene root, normally a BVHNode.
        depth: Number of bounces already taken before this ray.
        max_depth: Bounce cap.

    Returns:
        The estimated RGB radiance.
    """
    throughput = Vector3(1.0, 1.0, 1.0)
    while True:
        rec = world.hit(ray, T_MIN, T_MAX)
        if rec is None:
            return throughput * sky_color(ray)

        scatter = rec.material.scatter(ray, rec)
        if scatter is None or depth >= max_depth:
            return BLACK

        throughput = throughput * scatter.attenuation
        ray = scatter.scattered
        depth += 1
