# scenes.py
"""
Built-in scenes. Each factory returns (objects, camera); the caller builds
the BVH over objects.
"""
import logging
from typing import List, Tuple
from pathtracer.camera.camera import Camera
from pathtracer.core.utils import rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.mesh import load_obj
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets, TexturePresets

logger = logging.getLogger(__name__)

Scene = Tuple[List[Hittable], Camera]

UP = Vector3(0.0, 1.0, 0.0)

def single_sphere_scene(aspect_ratio: float = 16 / 9) -> Scene:
    """A grey diffuse unit sphere at the origin seen from +z."""
    objects = [Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Vector3(0.5, 0.5, 0.5)))]
    camera = Camera(Vector3(0, 0, 4), Vector3(0, 0, 0), UP, 40.0, aspect_ratio)
    return objects, camera

def random_spheres_scene(aspect_ratio: float = 16 / 9, grid: int = 11) -> Scene:
    """
    A checkered ground covered with small diffuse, metal and glass spheres
    around three large ones.
    """
    r = rng()
    objects: List[Hittable] = [
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard()))
    ]
    for a in range(-grid, grid):
        for b in range(-grid, grid):
            choose_mat = r.random()
            center = Vector3(a + 0.9 * r.random(), 0.2, b + 0.9 * r.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Vector3(r.random() * r.random(), r.random() * r.random(), r.random() * r.random())
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vector3(r.uniform(0.5, 1), r.uniform(0.5, 1), r.uniform(0.5, 1))
                material = Metal(albedo, r.uniform(0, 0.5))
            else:
                material = DielectricPresets.glass()
            objects.append(Sphere(center, 0.2, material))

    objects.append(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    objects.append(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, aspect_ratio,
                    aperture=0.1, focus_dist=10.0)
    logger.info("Random spheres scene: %d objects", len(objects))
    return objects, camera

def smoke_scene(aspect_ratio: float = 16 / 9) -> Scene:
    """A glass ball, a smoke ball and a metal ball above a diffuse ground."""
    objects: List[Hittable] = [
        Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(Vector3(0.8, 0.8, 0.0))),
        Sphere(Vector3(-1, 0, -1), 0.5, DielectricPresets.glass()),
        # Hollow glass: the inner sphere with negative radius flips the normal.
        Sphere(Vector3(-1, 0, -1), -0.45, DielectricPresets.glass()),
        ConstantMedium(Sphere(Vector3(0, 0, -1), 0.5, None), 2.0, ColorPresets.SMOKE),
        Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.brass()),
    ]
    camera = Camera(Vector3(0, 0.5, 2), Vector3(0, 0, -1), UP, 45.0, aspect_ratio)
    return objects, camera

def mesh_scene(filename: str, aspect_ratio: float = 16 / 9) -> Scene:
    """An OBJ model in grey Lambertian, framed like the reference renders."""
    objects = load_obj(filename)
    look_from = Vector3(-2.26788425, 0.320256859, 1.83503199) * 3.0
    look_at = Vector3(-1.33643341, 0.320256859, 1.47116470)
    camera = Camera(look_from, look_at, UP, 20.0, aspect_ratio)
    return objects, camera

SCENES = {
    "single": single_sphere_scene,
    "spheres": random_spheres_scene,
    "smoke": smoke_scene,
}
