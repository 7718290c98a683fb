# camera/camera.py
import math
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk
from pathtracer.core.vector import Vector3

class Camera:
    """
    Thin-lens camera looking from one point at another.

    get_ray(u, v) maps normalized image coordinates (u, v in [0, 1], v up)
    to a primary ray. With aperture 0 it is a pinhole camera.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: Optional[float] = None):
        self.position = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist if focus_dist is not None else (look_from - look_at).length()
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self.forward = (self.look_at - self.position).normalize()
        self.right = self.forward.cross(self.vup).normalize()
        self.up = self.right.cross(self.forward)

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(math.radians(self.vfov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position +
                                  self.forward * self.focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float) -> Ray:
        """Generates a ray with depth of field effect."""
        if self.aperture <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         self.position)
            return Ray(self.position, direction)

        # Generate random point on lens
        rd = random_in_unit_disk() * self.lens_radius
        offset = self.right * rd.x + self.up * rd.y

        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         ray_origin)

        return Ray(ray_origin, ray_direction)
