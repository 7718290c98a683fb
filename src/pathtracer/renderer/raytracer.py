# renderer/raytracer.py
import logging
import multiprocessing as mp
import time
from typing import Iterable, Optional, Tuple
import numpy as np
from pathtracer.core.errors import InvalidInputError
from pathtracer.core.utils import random_double, seed_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from .integrator import MAX_DEPTH, radiance

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 480
DEFAULT_HEIGHT = 270
DEFAULT_SAMPLES = 100

# (renderer, camera, world) of the current job, set once per worker process.
_worker_job = {}

def _init_worker(renderer: "Renderer", camera, world: Hittable) -> None:
    # Forked workers inherit the parent's generator state.
    seed_rng(None)
    _worker_job["scene"] = (renderer, camera, world)

def _render_row_in_worker(y: int) -> Tuple[int, np.ndarray]:
    renderer, camera, world = _worker_job["scene"]
    return y, renderer.render_row(camera, world, y)

class Renderer:
    """
    CPU batch renderer.

    Image rows are traced on a pool of worker processes, each holding its
    own copy of the scene and its own random generator. A pixel is written
    once, as the mean of all its samples.
    """
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 samples_per_pixel: int = DEFAULT_SAMPLES, max_depth: int = MAX_DEPTH,
                 workers: Optional[int] = None, seed: Optional[int] = None):
        if width < 1 or height < 1:
            raise InvalidInputError(f"image size must be positive, got {width}x{height}")
        if samples_per_pixel < 1:
            raise InvalidInputError(f"samples per pixel must be positive, got {samples_per_pixel}")
        if max_depth < 0:
            raise InvalidInputError(f"max depth must not be negative, got {max_depth}")
        if workers is not None and workers < 1:
            raise InvalidInputError(f"worker count must be positive, got {workers}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers
        self.seed = seed

    def render_pixel(self, camera, world: Hittable, x: int, y: int) -> Vector3:
        """
        Mean radiance over all samples of pixel (x, y), y counted from the bottom.
        """
        total = Vector3(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            u = (x + random_double()) / self.width
            v = (y + random_double()) / self.height
            total = total + radiance(camera.get_ray(u, v), world, 0, self.max_depth)
        return total / self.samples_per_pixel

    def render_row(self, camera, world: Hittable, y: int) -> np.ndarray:
        if self.seed is not None:
            # Row-keyed seed: the result does not depend on which worker runs the row.
            seed_rng(f"{self.seed}:{y}")
        row = np.empty((self.width, 3), dtype=np.float32)
        for x in range(self.width):
            row[x] = self.render_pixel(camera, world, x, y).to_tuple()
        return row

    def render(self, camera, world: Hittable) -> np.ndarray:
        """
        Render the full image.

        With a single worker the rows are traced in the calling process;
        otherwise camera and world are sent once to each worker process.

        Returns:
            (height, width, 3) float32 array of linear mean radiance,
            row 0 at the top of the image.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.float32)
        workers = min(self.workers or mp.cpu_count(), self.height)
        logger.info("Rendering %dx%d at %d samples per pixel on %d worker(s)",
                    self.width, self.height, self.samples_per_pixel, workers)
        start_time = time.perf_counter()

        if workers == 1:
            rows = ((y, self.render_row(camera, world, y)) for y in range(self.height))
            self._collect(rows, image)
        else:
            with mp.Pool(workers, initializer=_init_worker,
                         initargs=(self, camera, world)) as pool:
                self._collect(pool.imap_unordered(_render_row_in_worker, range(self.height)),
                              image)

        logger.info("Render took %.3f seconds", time.perf_counter() - start_time)
        return image

    def _collect(self, rows: Iterable[Tuple[int, np.ndarray]], image: np.ndarray) -> None:
        for done, (y, row) in enumerate(rows, 1):
            image[self.height - 1 - y] = row
            logger.debug("%d / %d scanlines rendered", done, self.height)
