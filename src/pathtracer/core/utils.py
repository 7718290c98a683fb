# core/utils.py
import random
import threading
from typing import Optional, Union
from pathtracer.core.vector import Vector3

_local = threading.local()

def rng() -> random.Random:
    """
    Returns the random generator owned by the calling thread.
    Each worker thread gets its own instance so draws never share state.
    """
    generator = getattr(_local, "generator", None)
    if generator is None:
        generator = random.Random()
        _local.generator = generator
    return generator

def seed_rng(seed: Optional[Union[int, str]]) -> None:
    """
    Reseeds the calling thread's generator (None draws fresh OS entropy).
    """
    rng().seed(seed)

def random_double() -> float:
    """
    Uniform float in [0, 1).
    """
    return rng().random()

def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    r = rng()
    while True:
        p = Vector3(r.uniform(-1, 1),
                    r.uniform(-1, 1),
                    r.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_in_unit_disk() -> Vector3:
    """
    Returns a random point (x, y, 0) inside the unit disk.
    """
    r = rng()
    while True:
        p = Vector3(r.uniform(-1, 1), r.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
